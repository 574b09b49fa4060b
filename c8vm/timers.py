#!/usr/bin/env python3

"""
Timer Emulator

The delay and sound timers are 8-bit counters.  Instructions may only read or
overwrite them.  The only thing that ever counts them down is tick(), which
the host calls at 60Hz.

The buzzer follows the sound timer: it plays while the sound timer is nonzero
and stops as soon as it reaches zero.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Timers:
    def __init__(self, audio):
        self.audio = audio
        self.delay = 0
        self.sound = 0

    def set_delay(self, value):
        self.delay = value & 0xFF

    def set_sound(self, value):
        self.sound = value & 0xFF
        # Allow the program to start the buzzer, or immediately stop it before the sound timer hits zero
        self.audio.enable_buzzer(self.sound > 0)

    def tick(self):
        if self.delay > 0:
            self.delay -= 1

        if self.sound > 0:
            self.sound -= 1

            if self.sound == 0:
                # Sound timer just reached zero.  Stop the audio.
                self.audio.enable_buzzer(False)

    def is_sounding(self):
        return self.sound > 0
