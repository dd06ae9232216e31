import unittest

from chip8.display import Display
from chip8.errors import ConfigurationError


class TestDisplay(unittest.TestCase):
    def setUp(self):
        self.display = Display()

    def test_bad_scale(self):
        with self.assertRaises(ConfigurationError):
            Display(s=0)

    def test_draw_sprite(self):
        self.assertFalse(self.display.needs_redraw())
        self.assertEqual(self.display.draw_sprite(0, 0, [0b11010000]), 0)
        self.assertEqual([self.display.read_pixel(x, 0) for x in range(8)], [1, 1, 0, 1, 0, 0, 0, 0])
        self.assertTrue(self.display.needs_redraw())

    def test_collision(self):
        self.display.draw_sprite(0, 0, [0b10000000])
        self.assertEqual(self.display.draw_sprite(0, 0, [0b11000000]), 1)
        self.assertEqual(self.display.read_pixel(0, 0), 0)
        self.assertEqual(self.display.read_pixel(1, 0), 1)

    def test_no_collision_on_empty_bits(self):
        self.display.draw_sprite(0, 0, [0b10000000])
        self.assertEqual(self.display.draw_sprite(0, 0, [0b01000000]), 0)
        self.assertEqual(self.display.read_pixel(0, 0), 1)

    def test_wraparound(self):
        self.display.draw_sprite(self.display.w - 4, self.display.h - 1, [0xFF, 0x80])
        for x in range(4):
            self.assertEqual(self.display.read_pixel(x, self.display.h - 1), 1)
        self.assertEqual(self.display.read_pixel(self.display.w - 4, 0), 1)
        self.assertEqual(self.display.read_pixel(4, self.display.h - 1), 0)

    def test_clear(self):
        self.display.write_pixel(10, 10, 1)
        self.display.clear()
        self.assertEqual(self.display.read_pixel(10, 10), 0)
        self.assertTrue(self.display.needs_redraw())

    def test_str(self):
        display = Display(w=4, h=2)
        display.write_pixel(1, 1, 1)
        self.assertEqual(str(display), "....\n.#..")


if __name__ == "__main__":
    unittest.main()
