"""Tests for the drawing-surface contract and the terminal surface."""

import unittest

from painter_cli_renderer.canvas import (
    Canvas, RecordingSurface, TerminalSurface, require_surface,
    render_cell_ascii, render_cell_braille,
)
from painter_cli_renderer.point import Point
from painter_cli_renderer.segment import Segment
from painter_cli_renderer.polygon import Polygon

FRONT_SQUARE = [(-0.5, -0.5, 0), (-0.5, 0.5, 0), (0.5, 0.5, 0), (0.5, -0.5, 0)]


class HalfSurface:
    """Has only some of the drawing methods."""

    def move_to(self, x, y):
        pass

    def line_to(self, x, y):
        pass


class TestRequireSurface(unittest.TestCase):

    def test_accepts_full_surfaces(self):
        surface = RecordingSurface()
        self.assertIs(require_surface(surface), surface)
        require_surface(TerminalSurface(4, 4))

    def test_none_raises(self):
        with self.assertRaises(TypeError):
            require_surface(None)

    def test_missing_methods_are_named(self):
        with self.assertRaises(TypeError) as ctx:
            require_surface(HalfSurface())
        self.assertIn("draw_circle", str(ctx.exception))
        self.assertNotIn("move_to", str(ctx.exception))


class TestRecordingSurface(unittest.TestCase):

    def test_replay_reproduces_calls(self):
        src = RecordingSurface()
        Segment((0, 0, 0), (1, 1, 0), "red").render(src)
        dst = RecordingSurface()
        src.replay(dst)
        self.assertEqual(dst.calls, src.calls)
        src.clear()
        self.assertEqual(src.calls, [])


class TestCanvas(unittest.TestCase):

    def test_pixels_pack_into_braille_cells(self):
        canv = Canvas(4, 8)
        canv.set_pixel(0, 0, (1, 2, 3))
        self.assertEqual(canv.grid[0][0], 0x01)
        self.assertEqual(canv.c_grid[0][0], (1, 2, 3))
        self.assertTrue(canv.get_pixel(0, 0))
        self.assertFalse(canv.get_pixel(1, 0))
        self.assertEqual(render_cell_braille(canv.grid[0][0]), '⠁')

    def test_out_of_bounds_pixels_are_ignored(self):
        canv = Canvas(4, 4)
        canv.set_pixel(-1, 0, None)
        canv.set_pixel(0, 4, None)
        self.assertFalse(any(any(row) for row in canv.grid))
        self.assertFalse(canv.get_pixel(10, 10))

    def test_later_writes_win_cell_colour(self):
        canv = Canvas(2, 4)
        canv.set_pixel(0, 0, "far")
        canv.set_pixel(1, 3, "near")
        self.assertEqual(canv.c_grid[0][0], "near")

    def test_ascii_density(self):
        self.assertEqual(render_cell_ascii(0), ' ')
        self.assertEqual(render_cell_ascii(0b1), '.')
        self.assertEqual(render_cell_ascii(0xFF), '%')
        self.assertEqual(render_cell_braille(0), ' ')

    def test_clear(self):
        canv = Canvas(4, 4)
        canv.set_pixel(1, 1, "x")
        canv.clear()
        self.assertFalse(canv.get_pixel(1, 1))
        self.assertIsNone(canv.c_grid[0][0])


class TestTerminalSurface(unittest.TestCase):

    def setUp(self):
        self.surface = TerminalSurface(20, 20, window=(-1, -1, 1, 1))

    def test_window_mapping_flips_y(self):
        self.assertEqual(self.surface.to_pixel(0, 0), (9.5, 9.5))
        self.assertEqual(self.surface.to_pixel(-1, 1), (0.0, 0.0))
        self.assertEqual(self.surface.to_pixel(1, -1), (19.0, 19.0))

    def test_zero_window_raises(self):
        with self.assertRaises(ValueError):
            self.surface.set_window(0, 0, 0, 1)

    def test_polygon_fill(self):
        poly = Polygon(FRONT_SQUARE, None, 1, [200, 100, 50, 1])
        self.assertTrue(poly.render(self.surface))
        canv = self.surface.canvas
        self.assertTrue(canv.get_pixel(9, 9))
        self.assertTrue(canv.get_pixel(5, 13))
        self.assertFalse(canv.get_pixel(0, 0))
        self.assertFalse(canv.get_pixel(19, 19))
        self.assertEqual(canv.c_grid[9 >> 2][9 >> 1], (200, 100, 50))

    def test_segment_stroke(self):
        Segment((-1, 0, 0), (1, 0, 0), "#00FF00").render(self.surface)
        canv = self.surface.canvas
        for x in (0, 7, 19):
            self.assertTrue(canv.get_pixel(x, 10))
        self.assertFalse(canv.get_pixel(5, 2))
        self.assertEqual(canv.c_grid[10 >> 2][0], (0, 255, 0))

    def test_point_is_a_filled_disc(self):
        Point(0, 0, 0, radius=0.3, fill_color="red").render(self.surface)
        canv = self.surface.canvas
        self.assertTrue(canv.get_pixel(9, 9))
        self.assertTrue(canv.get_pixel(7, 9))
        self.assertFalse(canv.get_pixel(2, 2))

    def test_unknown_colour_paints_nothing(self):
        Segment((-1, 0, 0), (1, 0, 0), "not-a-colour").render(self.surface)
        self.assertEqual(list(self.surface.cells()), [])

    def test_new_path_after_paint(self):
        s = self.surface
        s.set_stroke_color("red")
        s.move_to(0, 0).line_to(1, 1).end_stroke()
        s.move_to(-1, -1).line_to(0, 0)
        self.assertEqual(len(s._subpaths), 1)

    def test_cells_and_text(self):
        Segment((-1, 1, 0), (1, 1, 0), "white").render(self.surface)
        cells = list(self.surface.cells(use_braille=False))
        self.assertEqual(len(cells), 10)
        row, col, char, rgb = cells[0]
        self.assertEqual((row, col, rgb), (0, 0, (255, 255, 255)))
        self.assertNotEqual(char, ' ')
        lines = self.surface.to_text().split('\n')
        self.assertEqual(len(lines), 6)
        self.assertEqual(len(lines[0]), 10)
        self.assertEqual(lines[1], '')

    def test_clear(self):
        Point(0, 0, 0, radius=0.3, fill_color="red").render(self.surface)
        self.surface.clear()
        self.assertEqual(list(self.surface.cells()), [])


if __name__ == "__main__":
    unittest.main()
