#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .polygon import Polygon
from .light import LightSource


class Scene:
    """
    Container for renderable primitives and the lights that shine on them.

    Primitives are Points, Segments or Polygons, kept in insertion order.
    Lights are only bookkept here; a polygon is lit by the lights attached
    to it, which :meth:`add_light` does for every polygon in the scene.
    """

    def __init__(self):
        self.primitives = []
        self.lights = []

    def __len__(self):
        return len(self.primitives)

    def __iter__(self):
        return iter(self.primitives)

    def add(self, *primitives):
        """Add one or more primitives (or iterables of them)."""
        for prim in primitives:
            if isinstance(prim, (list, tuple)):
                self.primitives.extend(prim)
            else:
                self.primitives.append(prim)
        return self

    def polygons(self):
        return [p for p in self.primitives if isinstance(p, Polygon)]

    def add_light(self, light: LightSource, attach: bool = True):
        """Register ``light`` and, by default, attach it to every polygon."""
        if not isinstance(light, LightSource):
            raise TypeError(f"Expected LightSource, got {type(light).__name__}")
        self.lights.append(light)
        if attach:
            for poly in self.polygons():
                poly.add_light_source(light)
        return self

    def reach(self) -> float:
        """Largest distance of any primitive's geometry from the origin."""
        return max((prim.get_reach() for prim in self.primitives), default=0.0)

    def transform(self, method: str, *args):
        """Apply one transform (e.g. ``'rot_y', 0.1``) to every primitive."""
        for prim in self.primitives:
            getattr(prim, method)(*args)
        return self

    def clear(self):
        """Remove all primitives and lights from the scene."""
        self.primitives.clear()
        self.lights.clear()
