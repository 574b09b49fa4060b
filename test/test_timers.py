#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from c8vm.timers import Timers
from c8vm.audio.a_null import Audio


class TestTimers(unittest.TestCase):
    def setUp(self):
        self.audio = Audio()
        self.timers = Timers(self.audio)

    def test_timers_init(self):
        self.assertEqual(0, self.timers.delay)
        self.assertEqual(0, self.timers.sound)

    def test_timers_delay_countdown(self):
        self.timers.set_delay(5)

        for _ in range(5):
            self.timers.tick()

        self.assertEqual(0, self.timers.delay)
        self.timers.tick()
        self.assertEqual(0, self.timers.delay)

    def test_timers_independent(self):
        self.timers.set_delay(3)
        self.timers.set_sound(1)
        self.timers.tick()
        self.assertEqual(2, self.timers.delay)
        self.assertEqual(0, self.timers.sound)

    def test_timers_buzzer(self):
        self.timers.set_sound(2)
        self.assertTrue(self.audio.buzzer_enabled)
        self.assertTrue(self.timers.is_sounding())
        self.timers.tick()
        self.assertTrue(self.audio.buzzer_enabled)
        self.timers.tick()
        self.assertFalse(self.audio.buzzer_enabled)
        self.assertFalse(self.timers.is_sounding())

    def test_timers_sound_zero_stops_buzzer(self):
        self.timers.set_sound(10)
        self.timers.set_sound(0)
        self.assertFalse(self.audio.buzzer_enabled)
