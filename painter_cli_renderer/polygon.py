#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/polygon.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from dataclasses import dataclass, field, fields
from typing import List, NamedTuple, Optional

from .math_utils import Vec3, clamp
from .camera import check_perspective
from .point import Point
from .light import LightSource, LightType
from .canvas import require_surface
from .color import clamp_rgba, rgba_to_string

logger = logging.getLogger(__name__)


@dataclass
class PolyAttribs:
    """Material and lighting options of a polygon."""
    diffuse_reflectance: float = 1.0
    ambient_reflectance: float = 1.0
    lights: List[LightSource] = field(default_factory=list)
    wireframe: bool = False

    # camelCase names also accepted by set()
    ALIASES = {
        'reflDiffuse': 'diffuse_reflectance',
        'reflAmbient': 'ambient_reflectance',
        'renderWire': 'wireframe',
    }

    def set(self, key: str, value) -> 'PolyAttribs':
        name = self.ALIASES.get(key, key)
        if name not in {f.name for f in fields(self)}:
            raise KeyError(f"Unknown polygon attribute: {key!r}")
        if name == 'lights':
            value = list(value)
            for light in value:
                _check_light(light)
        setattr(self, name, value)
        return self

    def copy(self) -> 'PolyAttribs':
        """Copy of the options; lights are shared references, the list is new."""
        return PolyAttribs(self.diffuse_reflectance, self.ambient_reflectance,
                           list(self.lights), self.wireframe)


class SurfaceNormal(NamedTuple):
    vector: Vec3
    magnitude: float
    unit: Vec3


def _check_light(light):
    if not isinstance(light, LightSource):
        raise TypeError(f"Expected LightSource, got {type(light).__name__}")


class Polygon:
    """
    Planar polygon with a fill colour, drawn only when it faces the camera.

    Winding matters: with the camera looking down +z, a face is visible when
    its Newell normal has a negative z component.
    """
    __slots__ = ('vertices', 'stroke_color', 'style', 'fill_color', 'attribs', 'name')

    def __init__(self, vertices, stroke_color=None, style=1, fill_rgba=None,
                 attribs: Optional[PolyAttribs] = None, name=None):
        try:
            first = vertices[0]
        except (TypeError, KeyError):
            raise TypeError("Polygon needs an indexable sequence of vertices") from None
        except IndexError:
            raise ValueError("Polygon needs at least one vertex") from None
        if first is None:
            raise ValueError("Polygon needs at least one vertex")

        self.vertices = [Point.from_coords(v) for v in vertices]
        self.stroke_color = stroke_color
        self.style = style
        self.fill_color = clamp_rgba(fill_rgba) if fill_rgba is not None else None
        self.attribs = attribs.copy() if attribs is not None else PolyAttribs()
        self.name = name
        for light in self.attribs.lights:
            _check_light(light)

    def __repr__(self):
        label = f" {self.name!r}" if self.name else ""
        return f"<Polygon{label} n={len(self.vertices)} fill={self.fill_color}>"

    def copy(self) -> 'Polygon':
        return Polygon(self.vertices, self.stroke_color, self.style,
                       self.fill_color, self.attribs, self.name)

    def set_poly_attrib(self, key: str, value) -> 'Polygon':
        self.attribs.set(key, value)
        return self

    # ── Transforms ──────────────────────────────────────────────────────

    def do_ortho(self, cube_size: float) -> 'Polygon':
        for v in self.vertices:
            v.do_ortho(cube_size)
        return self

    def do_perspective(self, cube_size: float, focal_len: float) -> 'Polygon':
        """Project every vertex, or none if any lies on the focal plane."""
        check_perspective([v.pos for v in self.vertices], cube_size, focal_len)
        for v in self.vertices:
            v.do_perspective(cube_size, focal_len)
        return self

    def scale(self, factor: float) -> 'Polygon':
        for v in self.vertices:
            v.scale(factor)
        return self

    def rot_x(self, angle: float) -> 'Polygon':
        for v in self.vertices:
            v.rot_x(angle)
        return self

    def rot_y(self, angle: float) -> 'Polygon':
        for v in self.vertices:
            v.rot_y(angle)
        return self

    def rot_z(self, angle: float) -> 'Polygon':
        for v in self.vertices:
            v.rot_z(angle)
        return self

    def translate(self, dx: float, dy: float, dz: float) -> 'Polygon':
        for v in self.vertices:
            v.translate(dx, dy, dz)
        return self

    # ── Surface geometry ────────────────────────────────────────────────

    def get_centroid(self) -> Vec3:
        acc = Vec3()
        for v in self.vertices:
            acc.x += v.x
            acc.y += v.y
            acc.z += v.z
        return acc / len(self.vertices)

    def get_centroid_z(self) -> float:
        return sum(v.z for v in self.vertices) / len(self.vertices)

    def get_reach(self) -> float:
        """Largest vertex distance from the origin."""
        return max(v.get_reach() for v in self.vertices)

    def get_surface_normal(self) -> SurfaceNormal:
        """Newell normal of the vertex ring, with its magnitude and unit vector."""
        n = Vec3()
        p = self.vertices
        count = len(p)
        for i in range(count):
            a, b = p[i], p[(i + 1) % count]
            n.x += (a.y - b.y) * (a.z + b.z)
            n.y += (a.z - b.z) * (a.x + b.x)
            n.z += (a.x - b.x) * (a.y + b.y)
        mag = n.magnitude()
        if mag == 0:
            logger.debug("Degenerate polygon %r has a zero-length normal", self)
        return SurfaceNormal(n, mag, n.normalize())

    def get_unit_normal(self) -> Vec3:
        return self.get_surface_normal().unit

    def should_render(self) -> bool:
        """True when the face points toward the camera (normal z < 0)."""
        return self.get_surface_normal().vector.z < 0

    # ── Lighting ────────────────────────────────────────────────────────

    def add_light_source(self, light: LightSource) -> 'Polygon':
        _check_light(light)
        self.attribs.lights.append(light)
        return self

    def remove_light_source(self, light: LightSource) -> 'Polygon':
        self.attribs.lights = [lt for lt in self.attribs.lights if lt is not light]
        return self

    def apply_lights(self) -> 'Polygon':
        """Replace the fill colour with the sum of every light's contribution."""
        lights = self.attribs.lights
        if self.fill_color is None or not lights:
            return self

        effects = []
        for light in lights:
            if light.type is LightType.AMBIENT:
                effects.append(self._light_ambient(light))
            elif light.type is LightType.DIFFUSE:
                effects.append(self._light_diffuse(light))
            else:
                raise ValueError(f"Lighting type not defined: {light.type!r}")

        total = [0.0, 0.0, 0.0, 0.0]
        for eff in effects:
            for i in range(4):
                total[i] += eff[i]
        self.fill_color = clamp_rgba(total)
        return self

    def _light_ambient(self, light: LightSource):
        k = self.attribs.ambient_reflectance
        r, g, b, a = self.fill_color
        lr, lg, lb, la = light.intensity
        return clamp_rgba([r * k * lr, g * k * lg, b * k * lb, a * la])

    def _light_diffuse(self, light: LightSource):
        k = self.attribs.diffuse_reflectance
        to_light = (light.pos - self.get_centroid()).normalize()
        cos_theta = clamp(to_light.dot(self.get_unit_normal()), 0.0, 1.0)
        r, g, b, a = self.fill_color
        lr, lg, lb, la = light.intensity
        return clamp_rgba([r * k * lr * cos_theta,
                           g * k * lg * cos_theta,
                           b * k * lb * cos_theta,
                           a * la])

    # ── Render ──────────────────────────────────────────────────────────

    def fill_string(self, surface=None):
        """Fill colour in the surface's own format, or an 'rgba(...)' string."""
        to_color = getattr(surface, 'rgba_to_color', None)
        if callable(to_color):
            return to_color(self.fill_color)
        return rgba_to_string(self.fill_color)

    def render(self, surface, cull: bool = True) -> bool:
        """Draw the face; back faces are skipped unless ``cull`` is False."""
        require_surface(surface)
        if self.fill_color is None:
            return False
        if cull and not self.should_render():
            return False

        fill = self.fill_string(surface)
        stroke = self.stroke_color if self.attribs.wireframe else fill

        surface.set_stroke_color(stroke)
        surface.set_line_style(self.style)
        surface.set_fill_color(fill)
        first = self.vertices[0]
        surface.move_to(first.x, first.y)
        for v in self.vertices[1:]:
            surface.line_to(v.x, v.y)
        surface.close_path()
        surface.end_fill()
        surface.end_stroke()
        return True
