#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/segment.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec3
from .camera import check_perspective
from .point import Point
from .canvas import require_surface


class Segment:
    """Straight line between two owned points; transforms go to both ends."""
    __slots__ = ('start', 'end', 'color', 'style', 'name')

    def __init__(self, a, b, color=None, style=1, name=None):
        self.start = Point.from_coords(a)
        self.end = Point.from_coords(b)
        self.color = color
        self.style = style
        self.name = name

    def __repr__(self):
        label = f" {self.name!r}" if self.name else ""
        return f"<Segment{label} {self.start.pos!r} -> {self.end.pos!r}>"

    def copy(self) -> 'Segment':
        return Segment(self.start, self.end, self.color, self.style, self.name)

    def do_ortho(self, cube_size: float) -> 'Segment':
        self.start.do_ortho(cube_size)
        self.end.do_ortho(cube_size)
        return self

    def do_perspective(self, cube_size: float, focal_len: float) -> 'Segment':
        """Project both ends, or neither if one lies on the focal plane."""
        check_perspective((self.start.pos, self.end.pos), cube_size, focal_len)
        self.start.do_perspective(cube_size, focal_len)
        self.end.do_perspective(cube_size, focal_len)
        return self

    def scale(self, factor: float) -> 'Segment':
        self.start.scale(factor)
        self.end.scale(factor)
        return self

    def rot_x(self, angle: float) -> 'Segment':
        self.start.rot_x(angle)
        self.end.rot_x(angle)
        return self

    def rot_y(self, angle: float) -> 'Segment':
        self.start.rot_y(angle)
        self.end.rot_y(angle)
        return self

    def rot_z(self, angle: float) -> 'Segment':
        self.start.rot_z(angle)
        self.end.rot_z(angle)
        return self

    def translate(self, dx: float, dy: float, dz: float) -> 'Segment':
        self.start.translate(dx, dy, dz)
        self.end.translate(dx, dy, dz)
        return self

    def render(self, surface):
        require_surface(surface)
        surface.set_stroke_color(self.color)
        surface.set_line_style(self.style)
        surface.move_to(self.start.x, self.start.y)
        surface.line_to(self.end.x, self.end.y)
        surface.end_stroke()
        return True

    def get_centroid(self) -> Vec3:
        return (self.start.pos + self.end.pos) / 2

    def get_centroid_z(self) -> float:
        return (self.start.z + self.end.z) / 2

    def get_reach(self) -> float:
        return max(self.start.get_reach(), self.end.get_reach())
