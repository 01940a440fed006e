#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging

from .config import RenderConfig
from .camera import Camera
from .canvas import TerminalSurface, require_surface
from .color import CursesPalette
from .depth import sort_by_depth
from .polygon import Polygon
from .scene import Scene

logger = logging.getLogger(__name__)


class Renderer:
    """
    Painter's-algorithm renderer.

    draw(surface, scene, config) renders one frame onto any drawing surface;
    render(stdscr, scene, config) does the same onto a terminal.

    Pipeline:
      1. Copy every primitive so the scene itself is never projected
      2. Light polygons in camera space (before projection)
      3. Project (perspective or orthographic)
      4. Sort farthest-first by centroid depth
      5. Issue draw calls; back faces and unfilled polygons draw nothing
    """

    def __init__(self, palette: CursesPalette = None):
        self.palette = palette

    def init_colors(self, config: RenderConfig, bg_rgb=None):
        """Initialize curses color pairs.  Call once after curses.wrapper init."""
        self.palette = CursesPalette(config.use_color).init(bg_rgb)

    def build_frame(self, scene: Scene, config: RenderConfig, camera: Camera = None):
        """Lit, projected, depth-sorted copies of the scene's primitives.

        ``camera`` overrides the projection settings held in ``config``.
        """
        frame = [prim.copy() for prim in scene]
        if config.use_lighting:
            for prim in frame:
                if isinstance(prim, Polygon):
                    prim.apply_lights()
        camera = camera or config.camera()
        for prim in frame:
            camera.project(prim)
        return sort_by_depth(frame)

    def draw(self, surface, scene: Scene, config: RenderConfig, camera: Camera = None) -> int:
        """Render one frame onto ``surface``; returns how many primitives drew."""
        require_surface(surface)
        drawn = 0
        for prim in self.build_frame(scene, config, camera):
            if isinstance(prim, Polygon):
                ok = prim.render(surface, cull=config.use_culling)
            else:
                ok = prim.render(surface)
            if ok:
                drawn += 1
        logger.debug("Frame: %d of %d primitives drawn", drawn, len(scene))
        return drawn

    def render(self, stdscr, scene: Scene, config: RenderConfig, camera: Camera = None) -> int:
        """
        Render one frame to the curses screen, leaving row 0 for a HUD.

        Does NOT call stdscr.refresh(); the caller should do that after
        optional HUD / overlay drawing.
        """
        th, tw = stdscr.getmaxyx()
        W = (tw - 1) * 2
        H = (th - 2) * 4
        stdscr.erase()
        if W <= 0 or H <= 0:
            return 0

        camera = camera or config.camera()
        surface = TerminalSurface(W, H, window=camera.window())
        drawn = self.draw(surface, scene, config, camera)
        self.present(stdscr, surface, config, top=1)
        return drawn

    def present(self, stdscr, surface: TerminalSurface, config: RenderConfig, top: int = 0):
        """Write a terminal surface's cells to the curses screen."""
        th, tw = stdscr.getmaxyx()
        palette = self.palette or CursesPalette(False)
        for y, x, char, rgb in surface.cells(config.use_braille):
            if y + top >= th - 1 or x >= tw - 1:
                continue
            attr = palette.attr_for(rgb) if config.use_color else 0
            # addstr raises on the last cell of a full row; nothing to draw there
            try:
                stdscr.addstr(y + top, x, char, attr)
            except curses.error:
                pass
