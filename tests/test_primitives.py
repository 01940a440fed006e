"""Tests for Point and Segment: projection, transforms, copies, rendering."""

import math
import unittest

from painter_cli_renderer.point import Point
from painter_cli_renderer.segment import Segment
from painter_cli_renderer.canvas import RecordingSurface


class TestPointProjection(unittest.TestCase):

    def test_ortho_divides_x_and_y_only(self):
        """Orthographic projection leaves z untouched."""
        p = Point(20, 30, 5).do_ortho(10)
        self.assertEqual((p.x, p.y, p.z), (2.0, 3.0, 5.0))

    def test_ortho_zero_cube_size_raises(self):
        with self.assertRaises(ValueError):
            Point(1, 1, 1).do_ortho(0)

    def test_perspective_projects_and_recentres(self):
        p = Point(10, -10, 0).do_perspective(10, 10)
        # scale = 10 / (10 + 0) / 10 = 0.1
        self.assertAlmostEqual(p.x, 11.0)
        self.assertAlmostEqual(p.y, 9.0)
        self.assertAlmostEqual(p.z, 10.0)

    def test_perspective_shrinks_with_depth(self):
        near = Point(5, 0, 0).do_perspective(10, 20)
        far = Point(5, 0, 20).do_perspective(10, 20)
        self.assertLess(far.x - 10, near.x - 10)

    def test_perspective_on_focal_plane_raises(self):
        with self.assertRaises(ValueError):
            Point(1, 1, -20).do_perspective(10, 20)

    def test_perspective_zero_cube_size_raises(self):
        with self.assertRaises(ValueError):
            Point(1, 1, 1).do_perspective(0, 20)


class TestPointTransforms(unittest.TestCase):

    def test_chaining_returns_same_point(self):
        p = Point(1, 0, 0)
        self.assertIs(p.rot_z(math.pi / 2).translate(0, 0, 5).scale(2), p)
        self.assertAlmostEqual(p.x, 0.0)
        self.assertAlmostEqual(p.y, 2.0)
        self.assertAlmostEqual(p.z, 10.0)

    def test_rotation_roundtrip(self):
        p = Point(1, 2, 3)
        p.rot_x(0.4).rot_x(-0.4).rot_y(1.3).rot_y(-1.3)
        self.assertAlmostEqual(p.x, 1.0)
        self.assertAlmostEqual(p.y, 2.0)
        self.assertAlmostEqual(p.z, 3.0)

    def test_copy_is_independent(self):
        p = Point(1, 2, 3, radius=4, stroke_color="red", style=2,
                  fill_color="blue", name="p")
        q = p.copy()
        q.translate(1, 1, 1)
        self.assertEqual((p.x, p.y, p.z), (1.0, 2.0, 3.0))
        self.assertEqual((q.radius, q.stroke_color, q.style, q.fill_color, q.name),
                         (4, "red", 2, "blue", "p"))

    def test_centroid_is_position(self):
        p = Point(1, 2, 3)
        self.assertEqual(p.get_centroid_z(), 3.0)
        self.assertEqual(tuple(p.get_centroid()), (1.0, 2.0, 3.0))

    def test_from_coords_accepts_tuples_and_drops_attributes(self):
        self.assertEqual(Point.from_coords((1, 2, 3)).z, 3.0)
        src = Point(1, 2, 3, radius=9, fill_color="red")
        bare = Point.from_coords(src)
        self.assertEqual(bare.radius, 1.0)
        self.assertIsNone(bare.fill_color)

    def test_from_coords_rejects_garbage(self):
        with self.assertRaises(TypeError):
            Point.from_coords(42)


class TestPointRender(unittest.TestCase):

    def test_render_call_sequence(self):
        surface = RecordingSurface()
        Point(3, 4, 5, radius=2, stroke_color="black", style=1,
              fill_color="red").render(surface)
        self.assertEqual(surface.methods(), [
            'set_stroke_color', 'set_fill_color', 'set_line_style',
            'draw_circle', 'end_fill'])
        self.assertIn(('draw_circle', (3.0, 4.0, 2)), surface.calls)

    def test_render_rejects_non_surface(self):
        with self.assertRaises(TypeError):
            Point(0, 0, 0).render(object())
        with self.assertRaises(TypeError):
            Point(0, 0, 0).render(None)


class TestSegment(unittest.TestCase):

    def test_endpoints_are_owned_copies(self):
        a = Point(0, 0, 1, radius=5, fill_color="red")
        seg = Segment(a, (0, 0, 3), "green", 1, "s")
        a.translate(10, 10, 10)
        self.assertEqual(seg.start.z, 1.0)
        self.assertIsNot(seg.start, a)
        self.assertEqual(seg.start.radius, 1.0)
        self.assertIsNone(seg.start.fill_color)

    def test_centroid_z_is_mean_of_endpoints(self):
        seg = Segment((0, 0, 1), (4, 4, 3))
        self.assertEqual(seg.get_centroid_z(), 2.0)
        self.assertEqual(tuple(seg.get_centroid()), (2.0, 2.0, 2.0))

    def test_transforms_move_both_endpoints(self):
        seg = Segment((0, 0, 0), (1, 0, 0))
        self.assertIs(seg.translate(1, 2, 3).scale(2), seg)
        self.assertEqual((seg.start.x, seg.start.y, seg.start.z), (2.0, 4.0, 6.0))
        self.assertEqual((seg.end.x, seg.end.y, seg.end.z), (4.0, 4.0, 6.0))
        seg.do_ortho(2)
        self.assertEqual((seg.end.x, seg.end.y, seg.end.z), (2.0, 2.0, 6.0))

    def test_rotations_delegate(self):
        seg = Segment((1, 0, 0), (2, 0, 0)).rot_z(math.pi / 2)
        self.assertAlmostEqual(seg.start.y, 1.0)
        self.assertAlmostEqual(seg.end.y, 2.0)
        seg.rot_z(-math.pi / 2).rot_x(0.5).rot_x(-0.5).rot_y(0.5).rot_y(-0.5)
        self.assertAlmostEqual(seg.end.x, 2.0)

    def test_perspective_delegates(self):
        seg = Segment((10, 0, 0), (-10, 0, 0)).do_perspective(10, 10)
        self.assertAlmostEqual(seg.start.x, 11.0)
        self.assertAlmostEqual(seg.end.x, 9.0)

    def test_failed_perspective_leaves_both_ends_alone(self):
        seg = Segment((1, 2, 3), (4, 5, -10))
        with self.assertRaises(ValueError):
            seg.do_perspective(10, 10)
        self.assertEqual((seg.start.x, seg.start.y, seg.start.z), (1.0, 2.0, 3.0))
        self.assertEqual((seg.end.x, seg.end.y, seg.end.z), (4.0, 5.0, -10.0))

    def test_reach(self):
        self.assertEqual(Point(3, 4, 0).get_reach(), 5.0)
        self.assertEqual(Segment((1, 0, 0), (0, 0, -6)).get_reach(), 6.0)

    def test_copy_is_independent(self):
        seg = Segment((0, 0, 0), (1, 1, 1), "red", 2, "s")
        dup = seg.copy().translate(5, 5, 5)
        self.assertEqual(seg.end.x, 1.0)
        self.assertEqual((dup.color, dup.style, dup.name), ("red", 2, "s"))

    def test_render_call_sequence(self):
        surface = RecordingSurface()
        Segment((1, 2, 0), (3, 4, 0), "red", 1).render(surface)
        self.assertEqual(surface.calls, [
            ('set_stroke_color', ("red",)),
            ('set_line_style', (1,)),
            ('move_to', (1.0, 2.0)),
            ('line_to', (3.0, 4.0)),
            ('end_stroke', ()),
        ])

    def test_render_rejects_non_surface(self):
        with self.assertRaises(TypeError):
            Segment((0, 0, 0), (1, 1, 1)).render("not a surface")


if __name__ == "__main__":
    unittest.main()
