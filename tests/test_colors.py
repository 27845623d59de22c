import unittest

from piet_interpreter import Color, ColorGrid, ProgramError
from piet_interpreter.colors import COLOR_TO_RGB, from_hue_lightness, from_rgb


class TestColor(unittest.TestCase):

    def test_palette_has_twenty_colors(self):
        self.assertEqual(len(Color), 20)
        self.assertEqual(len(set(COLOR_TO_RGB.values())), 20)
        chromatic = [c for c in Color if c.is_chromatic]
        self.assertEqual(len(chromatic), 18)

    def test_hue_and_lightness(self):
        self.assertEqual(Color.DARK_BLUE.hue, 4)
        self.assertEqual(Color.DARK_BLUE.lightness, 2)
        self.assertEqual(Color.LIGHT_RED.hue, 0)
        self.assertEqual(Color.LIGHT_RED.lightness, 0)
        self.assertIsNone(Color.WHITE.hue)
        self.assertIsNone(Color.BLACK.lightness)

    def test_deltas_wrap(self):
        self.assertEqual(Color.DARK_BLUE.hue_delta(Color.RED), 2)
        self.assertEqual(Color.DARK_BLUE.lightness_delta(Color.RED), 2)
        self.assertEqual(Color.RED.hue_delta(Color.DARK_BLUE), 4)
        self.assertEqual(Color.RED.lightness_delta(Color.DARK_BLUE), 1)
        self.assertEqual(Color.MAGENTA.hue_delta(Color.RED), 1)

    def test_deltas_undefined_for_white_and_black(self):
        self.assertIsNone(Color.RED.hue_delta(Color.WHITE))
        self.assertIsNone(Color.BLACK.lightness_delta(Color.RED))

    def test_from_hue_lightness(self):
        self.assertIs(from_hue_lightness(4, 2), Color.DARK_BLUE)
        self.assertIs(from_hue_lightness(6, 3), Color.LIGHT_RED)

    def test_from_rgb(self):
        self.assertIs(from_rgb((0xC0, 0x00, 0xC0)), Color.DARK_MAGENTA)
        self.assertIs(from_rgb((255, 255, 255)), Color.WHITE)
        self.assertIs(from_rgb((0, 0, 0, 255)), Color.BLACK)

    def test_unknown_rgb_policies(self):
        self.assertIs(from_rgb((1, 2, 3)), Color.WHITE)
        self.assertIs(from_rgb((1, 2, 3), 'black'), Color.BLACK)
        with self.assertRaises(ProgramError):
            from_rgb((1, 2, 3), 'error')
        with self.assertRaises(ValueError):
            from_rgb((1, 2, 3), 'purple')

    def test_label(self):
        self.assertEqual(Color.LIGHT_CYAN.label, 'light cyan')


class TestColorGrid(unittest.TestCase):

    def test_dimensions_and_lookup(self):
        grid = ColorGrid([[Color.RED, Color.BLUE, Color.WHITE],
                          [Color.BLACK, Color.GREEN, Color.RED]])
        self.assertEqual((grid.width, grid.height), (3, 2))
        self.assertIs(grid.color_at(1, 0), Color.BLUE)
        self.assertIs(grid[(0, 1)], Color.BLACK)
        self.assertTrue(grid.in_bounds(2, 1))
        self.assertFalse(grid.in_bounds(3, 0))
        self.assertFalse(grid.in_bounds(0, -1))

    def test_empty_grid_rejected(self):
        with self.assertRaises(ProgramError):
            ColorGrid([])
        with self.assertRaises(ProgramError):
            ColorGrid([[]])

    def test_ragged_grid_rejected(self):
        with self.assertRaises(ProgramError):
            ColorGrid([[Color.RED, Color.RED], [Color.RED]])

    def test_non_color_rejected(self):
        with self.assertRaises(ProgramError):
            ColorGrid([[Color.RED, 'red']])

    def test_equality(self):
        a = ColorGrid([[Color.RED]])
        b = ColorGrid([[Color.RED]])
        self.assertEqual(a, b)
        self.assertNotEqual(a, ColorGrid([[Color.BLUE]]))


if __name__ == '__main__':
    unittest.main()
