#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec3

PERSPECTIVE = "perspective"
ORTHO = "ortho"
PROJECTIONS = (PERSPECTIVE, ORTHO)


def project_ortho(v: Vec3, cube_size: float) -> Vec3:
    """Orthographic projection of ``v`` in place.

    x and y are divided by the half-extent of the viewing cube; z is left
    untouched so depth sorting keeps working on camera-space depth.
    """
    if cube_size == 0:
        raise ValueError("cube_size must be non-zero")
    v.x /= cube_size
    v.y /= cube_size
    return v


def check_perspective(points, cube_size: float, focal_len: float):
    """Raise ValueError if any point cannot be perspective-projected.

    Lets multi-point primitives validate every vertex before moving any.
    """
    if cube_size == 0:
        raise ValueError("cube_size must be non-zero")
    for v in points:
        if focal_len + v.z == 0:
            raise ValueError(
                f"point at z={v.z} lies on the focal plane (focal_len={focal_len})")


def project_perspective(v: Vec3, cube_size: float, focal_len: float) -> Vec3:
    """Perspective projection of ``v`` in place.

    Scales by ``focal_len / (focal_len + z) / cube_size`` and re-centres all
    three coordinates on ``cube_size`` so the visible volume lands roughly in
    ``[cube_size - 1, cube_size + 1]``.
    """
    check_perspective((v,), cube_size, focal_len)
    s = focal_len / (focal_len + v.z) / cube_size
    v.x = cube_size + v.x * s
    v.y = cube_size + v.y * s
    v.z = cube_size + v.z * s
    return v


class Camera:
    """
    Fixed camera looking down +z.

    Holds the projection mode and its parameters so a whole scene can be
    projected with one call per primitive.  Orbiting is done by rotating the
    geometry, not the camera.

    ``min_focal_length`` is the zoom floor.  Geometry within that distance of
    the origin stays in front of the focal plane at any zoom or rotation.
    """
    __slots__ = ('mode', 'cube_size', 'focal_length', 'min_focal_length')

    def __init__(self, mode: str = PERSPECTIVE, cube_size: float = 10.0,
                 focal_length: float = 20.0, min_focal_length: float = 1.0):
        if mode not in PROJECTIONS:
            raise ValueError(f"Unknown projection '{mode}', expected one of {PROJECTIONS}")
        if min_focal_length <= 0:
            raise ValueError("min_focal_length must be positive")
        self.mode = mode
        self.cube_size = cube_size
        self.min_focal_length = min_focal_length
        self.focal_length = max(min_focal_length, focal_length)

    def __repr__(self):
        return (f"Camera(mode={self.mode!r}, cube_size={self.cube_size}, "
                f"focal_length={self.focal_length})")

    def project(self, primitive):
        """Project any primitive exposing do_ortho/do_perspective in place."""
        if self.mode == ORTHO:
            return primitive.do_ortho(self.cube_size)
        return primitive.do_perspective(self.cube_size, self.focal_length)

    def window(self):
        """
        Logical rectangle that projected geometry lands in.

        Both projections divide by cube_size, so a point at the cube's edge
        ends up one unit from the centre; perspective re-centres on cube_size.
        """
        if self.mode == PERSPECTIVE:
            c = self.cube_size
            return (c - 1.0, c - 1.0, c + 1.0, c + 1.0)
        return (-1.0, -1.0, 1.0, 1.0)

    def toggle(self):
        """Switch between perspective and orthographic projection."""
        self.mode = ORTHO if self.mode == PERSPECTIVE else PERSPECTIVE
        return self.mode

    def zoom(self, delta: float):
        """Adjust focal length. Positive = flatter, negative = more distorted."""
        self.focal_length = max(self.min_focal_length, self.focal_length + delta)
        return self.focal_length
