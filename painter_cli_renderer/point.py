#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/point.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec3
from .camera import project_ortho, project_perspective
from .canvas import require_surface


def coords_of(obj):
    """Read (x, y, z) from anything with x/y/z attributes or a 3-sequence."""
    if hasattr(obj, 'x') and hasattr(obj, 'y') and hasattr(obj, 'z'):
        return obj.x, obj.y, obj.z
    try:
        x, y, z = obj
    except (TypeError, ValueError):
        raise TypeError(f"Expected a point with x, y, z, got {obj!r}") from None
    return x, y, z


class Point:
    """
    A 3D position rendered as a filled circle.

    Transforms mutate the point and return it, so they chain:
    ``Point(1, 0, 0).rot_z(math.pi / 2).translate(0, 0, 5)``.
    """
    __slots__ = ('pos', 'radius', 'stroke_color', 'style', 'fill_color', 'name')

    def __init__(self, x: float, y: float, z: float, radius: float = 1.0,
                 stroke_color=None, style=1, fill_color=None, name=None):
        self.pos = Vec3(x, y, z)
        self.radius = radius
        self.stroke_color = stroke_color
        self.style = style
        self.fill_color = fill_color
        self.name = name

    @classmethod
    def from_coords(cls, obj) -> 'Point':
        """Bare point at the coordinates of ``obj``; render attributes dropped."""
        return cls(*coords_of(obj))

    def __repr__(self):
        label = f" {self.name!r}" if self.name else ""
        return f"<Point{label} ({self.x:.2f}, {self.y:.2f}, {self.z:.2f})>"

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value):
        self.pos.x = float(value)

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value):
        self.pos.y = float(value)

    @property
    def z(self) -> float:
        return self.pos.z

    @z.setter
    def z(self, value):
        self.pos.z = float(value)

    def copy(self) -> 'Point':
        return Point(self.x, self.y, self.z, self.radius, self.stroke_color,
                     self.style, self.fill_color, self.name)

    # ── Transforms ──────────────────────────────────────────────────────

    def do_ortho(self, cube_size: float) -> 'Point':
        project_ortho(self.pos, cube_size)
        return self

    def do_perspective(self, cube_size: float, focal_len: float) -> 'Point':
        project_perspective(self.pos, cube_size, focal_len)
        return self

    def scale(self, factor: float) -> 'Point':
        self.pos.scale(factor)
        return self

    def rot_x(self, angle: float) -> 'Point':
        self.pos.rotate_x(angle)
        return self

    def rot_y(self, angle: float) -> 'Point':
        self.pos.rotate_y(angle)
        return self

    def rot_z(self, angle: float) -> 'Point':
        self.pos.rotate_z(angle)
        return self

    def translate(self, dx: float, dy: float, dz: float) -> 'Point':
        self.pos.translate(dx, dy, dz)
        return self

    # ── Render / sort ───────────────────────────────────────────────────

    def render(self, surface):
        require_surface(surface)
        surface.set_stroke_color(self.stroke_color)
        surface.set_fill_color(self.fill_color)
        surface.set_line_style(self.style)
        surface.draw_circle(self.x, self.y, self.radius)
        surface.end_fill()
        return True

    def get_centroid(self) -> Vec3:
        return self.pos.copy()

    def get_centroid_z(self) -> float:
        return self.z

    def get_reach(self) -> float:
        """Distance from the origin."""
        return self.pos.magnitude()
