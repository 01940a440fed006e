#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import math

logger = logging.getLogger(__name__)


class Vec3:
    """Mutable 3-component vector.

    The rotate/scale/translate methods work in place and return ``self``
    so calls can be chained.  Arithmetic operators return new vectors.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if hasattr(other, 'x') and hasattr(other, 'y') and hasattr(other, 'z'):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if hasattr(other, 'x') and hasattr(other, 'y') and hasattr(other, 'z'):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def copy(self) -> 'Vec3':
        return Vec3(self.x, self.y, self.z)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        m = self.magnitude()
        if m == 0:
            logger.debug("normalize() on a zero-length vector, returning zero vector")
            return Vec3(0, 0, 0)
        return self / m

    # ── In-place transforms ─────────────────────────────────────────────

    def rotate_x(self, rad: float) -> 'Vec3':
        c = math.cos(rad)
        s = math.sin(rad)
        y = c * self.y - s * self.z
        z = c * self.z + s * self.y
        self.y, self.z = y, z
        return self

    def rotate_y(self, rad: float) -> 'Vec3':
        c = math.cos(rad)
        s = math.sin(rad)
        x = c * self.x - s * self.z
        z = c * self.z + s * self.x
        self.x, self.z = x, z
        return self

    def rotate_z(self, rad: float) -> 'Vec3':
        c = math.cos(rad)
        s = math.sin(rad)
        x = c * self.x - s * self.y
        y = c * self.y + s * self.x
        self.x, self.y = x, y
        return self

    def scale(self, factor: float) -> 'Vec3':
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    def translate(self, dx: float, dy: float, dz: float) -> 'Vec3':
        self.x += dx
        self.y += dy
        self.z += dz
        return self


def dot(a, b) -> float:
    """Dot product of two (x, y, z) sequences."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def magnitude(v) -> float:
    return math.sqrt(dot(v, v))


def normalize(v) -> Vec3:
    """Unit vector of an (x, y, z) sequence; the zero vector maps to itself."""
    return Vec3(v[0], v[1], v[2]).normalize()


def clamp(value, lo, hi):
    if value < lo: return lo
    if value > hi: return hi
    return value
