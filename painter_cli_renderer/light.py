#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/light.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from enum import Enum

from .math_utils import Vec3, clamp
from .point import coords_of


class LightType(str, Enum):
    DIFFUSE = "DIFFUSE"   # point emitter, Lambertian falloff with angle
    AMBIENT = "AMBIENT"   # uniform, ignores position and orientation

    @classmethod
    def parse(cls, value) -> 'LightType':
        """None means DIFFUSE; strings are matched case-insensitively."""
        if value is None:
            return cls.DIFFUSE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise ValueError(f"Lighting type not defined: {value!r}")


class LightSource:
    """
    Positioned emitter with a per-channel RGBA intensity in [0, 1].

    Polygons only keep references to lights, so moving or dimming a shared
    light shows up on every polygon at its next ``apply_lights()``.
    """
    __slots__ = ('type', 'intensity', 'pos')

    def __init__(self, type=None, r: float = 1.0, g: float = 1.0, b: float = 1.0,
                 a: float = 1.0, position=(0.0, 0.0, 0.0)):
        self.type = LightType.parse(type)
        self.intensity = [float(clamp(c, 0.0, 1.0)) for c in (r, g, b, a)]
        self.pos = Vec3(*coords_of(position))

    def __repr__(self):
        r, g, b, a = self.intensity
        return (f"LightSource({self.type.value}, rgba=({r:.2f}, {g:.2f}, {b:.2f}, {a:.2f}), "
                f"pos={self.pos!r})")

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def z(self) -> float:
        return self.pos.z

    def move_to(self, x: float, y: float, z: float) -> 'LightSource':
        self.pos = Vec3(x, y, z)
        return self
