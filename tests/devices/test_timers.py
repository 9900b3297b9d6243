# tests/devices/test_timers.py
import unittest

from retro_chip8.devices.timers import Timers

class TestTimers(unittest.TestCase):
    def setUp(self):
        self.timers = Timers()

    def test_initial_values(self):
        self.assertEqual(self.timers.delay, 0)
        self.assertEqual(self.timers.sound, 0)
        self.assertFalse(self.timers.is_sound_active)

    # 値VからT回tickした後は max(0, V - T)
    def test_tick_saturates_at_zero(self):
        for value, ticks in [(10, 15), (10, 10), (10, 3), (0, 5), (255, 1)]:
            timers = Timers()
            timers.delay = value
            timers.sound = value
            for _ in range(ticks):
                timers.tick()
            self.assertEqual(timers.delay, max(0, value - ticks))
            self.assertEqual(timers.sound, max(0, value - ticks))

    def test_timers_are_independent(self):
        self.timers.delay = 2
        self.timers.sound = 5
        self.timers.tick()
        self.timers.tick()
        self.assertEqual(self.timers.delay, 0)
        self.assertEqual(self.timers.sound, 3)

    def test_sound_active_while_nonzero(self):
        self.timers.sound = 1
        self.assertTrue(self.timers.is_sound_active)
        self.timers.tick()
        self.assertFalse(self.timers.is_sound_active)

    def test_values_masked_to_8_bits(self):
        self.timers.delay = 0x1FF
        self.assertEqual(self.timers.delay, 0xFF)

if __name__ == '__main__':
    unittest.main()
