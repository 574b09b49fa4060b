#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays a square wave tone within PyGame / SDL while the buzzer is on.  The
original hardware only has a buzzer with an 'on' or 'off' status, so a single
looped cycle of a square wave is all that is needed.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100
TONE_FREQUENCY = 440.0
DEFAULT_VOLUME = 0.1


class Audio(AudioBase):
    def __init__(self, frequency=TONE_FREQUENCY):
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, buffer=512, allowedchanges=0)
        pygame.mixer.init()

        # One full cycle of an unsigned 8-bit square wave, looped for as long as the buzzer is on
        half_period = max(1, int(PLAYBACK_FREQUENCY / frequency / 2))
        self.sound = pygame.mixer.Sound(buffer=bytes([0xFF] * half_period + [0x00] * half_period))
        self.sound.set_volume(DEFAULT_VOLUME)
        super().__init__()

    def enable_buzzer(self, enabled):
        # If a sound is already playing, it won't be restarted.
        if enabled:
            if not self.buzzer_enabled:
                self.sound.play(-1)
        elif self.buzzer_enabled:
            self.sound.stop()

        super().enable_buzzer(enabled)

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()
