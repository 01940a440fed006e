#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/shapes.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .polygon import Polygon, PolyAttribs
from .segment import Segment

# (name, outward normal, u, v) with u x v == normal, so the ring
# c-u-v, c+u-v, c+u+v, c-u+v winds counter-clockwise around the normal.
_CUBE_FACES = [
    ("front",  (0, 0, -1), (0, 1, 0), (1, 0, 0)),
    ("back",   (0, 0, 1),  (1, 0, 0), (0, 1, 0)),
    ("left",   (-1, 0, 0), (0, 0, 1), (0, 1, 0)),
    ("right",  (1, 0, 0),  (0, 1, 0), (0, 0, 1)),
    ("top",    (0, 1, 0),  (0, 0, 1), (1, 0, 0)),
    ("bottom", (0, -1, 0), (1, 0, 0), (0, 0, 1)),
]


def _face(center, u, v, half):
    cx, cy, cz = center
    ring = []
    for su, sv in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
        ring.append((cx + half * (su * u[0] + sv * v[0]),
                     cy + half * (su * u[1] + sv * v[1]),
                     cz + half * (su * u[2] + sv * v[2])))
    return ring


def cube(size: float = 2.0, fill=(200, 200, 200, 1), stroke_color=None,
         style=1, attribs: PolyAttribs = None):
    """
    Axis-aligned cube centred on the origin as six outward-wound polygons.

    ``fill`` may be one RGBA colour or a list of six (front, back, left,
    right, top, bottom).
    """
    half = size / 2.0
    fills = fill if fill and isinstance(fill[0], (list, tuple)) else [fill] * 6
    faces = []
    for (name, n, u, v), face_fill in zip(_CUBE_FACES, fills):
        center = (n[0] * half, n[1] * half, n[2] * half)
        faces.append(Polygon(_face(center, u, v, half), stroke_color, style,
                             list(face_fill) if face_fill is not None else None,
                             attribs, name))
    return faces


def axes(length: float = 1.0, colors=("red", "lime", "blue"), style=1):
    """X, Y and Z axis segments from the origin."""
    ends = ((length, 0, 0), (0, length, 0), (0, 0, length))
    return [Segment((0, 0, 0), end, color, style, name)
            for end, color, name in zip(ends, colors, ("x", "y", "z"))]
