#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import argparse
import curses
import logging
import sys
import time

from .config import RenderConfig
from .renderer import Renderer
from .scene import Scene
from .light import LightSource, LightType
from .polygon import PolyAttribs
from .color import parse_hex_color
from .camera import Camera, ORTHO, PERSPECTIVE
from .shapes import cube, axes
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

# Per-face base colours: front, back, left, right, top, bottom
FACE_COLORS = [
    (230, 80, 60, 1), (60, 200, 90, 1), (70, 110, 230, 1),
    (230, 200, 60, 1), (200, 90, 220, 1), (70, 210, 220, 1),
]


def build_parser():
    """CLI argument parser for the interactive demo."""
    epilog = """\
examples:
  %(prog)s                                  Lit spinning cube, perspective
  %(prog)s --ortho                          Orthographic projection
  %(prog)s --focal-length 12                Stronger perspective distortion
  %(prog)s --wireframe --stroke-color #FFFFFF   Outline faces in white
  %(prog)s --no-light --ascii --mono        Flat colours, ASCII, monochrome
  %(prog)s --log-file demo.log --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="Painter's-algorithm terminal renderer demo",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--ortho", action="store_true",
                        help="Use orthographic instead of perspective projection")
    parser.add_argument("--cube-size", type=float, default=10.0,
                        help="Half-extent of the viewing cube (default: 10.0)")
    parser.add_argument("--focal-length", type=float, default=20.0,
                        help="Perspective focal length (default: 20.0)")
    parser.add_argument("--stroke-color", default="#FFFFFF",
                        help="Wireframe stroke color in hex #RRGGBB (default: #FFFFFF)")
    parser.add_argument("--bg-color", default=None,
                        help="Background color in hex #RRGGBB (default: terminal)")
    parser.add_argument("--ambient", type=float, default=0.25,
                        help="Ambient light intensity 0-1 (default: 0.25)")
    parser.add_argument("--wireframe", action="store_true",
                        help="Stroke faces with the stroke color")
    parser.add_argument("--no-light", action="store_true",
                        help="Disable lighting")
    parser.add_argument("--no-cull", action="store_true",
                        help="Disable backface culling")
    parser.add_argument("--no-color", "--mono", dest="no_color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--log-file", default=None,
                        help="Write log messages to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level for --log-file (default: INFO)")
    return parser


def build_scene(config: RenderConfig, args) -> Scene:
    size = config.cube_size
    attribs = PolyAttribs(wireframe=args.wireframe)
    scene = Scene()
    scene.add(cube(size, FACE_COLORS, args.stroke_color, 1, attribs))
    scene.add(axes(size * 0.9))
    scene.add_light(LightSource(LightType.DIFFUSE, 1, 1, 1, 1,
                                (size, size, -3 * size)))
    scene.add_light(LightSource(LightType.AMBIENT, args.ambient, args.ambient,
                                args.ambient, 1, (0, 0, 0)))
    # Start at an angle so three faces show
    scene.transform('rot_y', 0.6).transform('rot_x', -0.4)
    return scene


# Clearance kept between the scene and the focal plane
FOCAL_MARGIN = 1.0


def build_camera(config: RenderConfig, scene: Scene) -> Camera:
    """Camera whose zoom floor keeps ``scene`` in front of the focal plane."""
    return Camera(config.projection, config.cube_size, config.focal_length,
                  min_focal_length=scene.reach() + FOCAL_MARGIN)


class DemoApp:
    """
    Interactive demo harness: input handling, spinning scene, rendering,
    HUD overlay.
    """

    def __init__(self, stdscr, args):
        self.stdscr = stdscr
        self.running = True
        self.spin = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        # ── RenderConfig from terminal detection + CLI overrides ────────
        config = RenderConfig.detect_terminal(
            projection=ORTHO if args.ortho else PERSPECTIVE,
            cube_size=args.cube_size,
            focal_length=args.focal_length,
            use_lighting=not args.no_light,
            use_culling=not args.no_cull,
        )
        if args.no_color:
            config.use_color = False
        if args.ascii:
            config.use_braille = False
        self.config = config

        renderer = Renderer()
        renderer.init_colors(config, parse_hex_color(args.bg_color))
        self.renderer = renderer

        self.scene = build_scene(config, args)
        self.camera = build_camera(config, self.scene)
        self.drawn = 0

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        scene = self.scene
        config = self.config

        if key == ord('q'):
            self.running = False
        elif key == curses.KEY_UP:
            scene.transform('rot_x', 0.1)
        elif key == curses.KEY_DOWN:
            scene.transform('rot_x', -0.1)
        elif key == curses.KEY_RIGHT:
            scene.transform('rot_y', 0.1)
        elif key == curses.KEY_LEFT:
            scene.transform('rot_y', -0.1)
        elif key in (ord('='), ord('+')):
            self.camera.zoom(-2.0)
        elif key == ord('-'):
            self.camera.zoom(2.0)
        elif key == ord(' '):
            self.spin = not self.spin
        # Runtime toggles
        elif key == ord('p'):
            self.camera.toggle()
        elif key == ord('l'):
            config.use_lighting = not config.use_lighting
        elif key == ord('k'):
            config.use_culling = not config.use_culling
        elif key == ord('w'):
            for poly in scene.polygons():
                poly.attribs.wireframe = not poly.attribs.wireframe
        elif key == ord('c'):
            config.use_color = not config.use_color
        elif key == ord('b'):
            config.use_braille = not config.use_braille

    def run(self):
        while self.running:
            start_time = time.time()

            self.handle_input()
            if self.spin:
                self.scene.transform('rot_y', 0.03)

            self.drawn = self.renderer.render(self.stdscr, self.scene, self.config,
                                              self.camera)

            # ── HUD overlay (line 0) ────────────────────────────────────
            th, tw = self.stdscr.getmaxyx()

            self.frame_count += 1
            now = time.time()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now

            ms = (now - start_time) * 1000
            config = self.config
            modestr = (f"{'PERSP' if self.camera.mode == PERSPECTIVE else 'ORTHO'} "
                       f"{'LIT' if config.use_lighting else 'FLAT'} "
                       f"{'CULL' if config.use_culling else 'ALL'} "
                       f"{'COL' if config.use_color else 'MON'} "
                       f"{'BRA' if config.use_braille else 'ASC'}")
            hdr = (f" PRIM:{len(self.scene)}"
                   f" DRAWN:{self.drawn}"
                   f" | F:{self.camera.focal_length:.0f}"
                   f" | FPS:{self.fps}"
                   f" | {ms:.1f}ms"
                   f" | [{modestr}] ")
            try:
                self.stdscr.addstr(0, 0, hdr.center(max(1, tw - 1), '='),
                                   curses.A_BOLD)
            except curses.error:
                pass

            self.stdscr.refresh()
            time.sleep(max(0.0, 1 / 30 - (time.time() - start_time)))


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()


def run(argv=None):
    args = build_parser().parse_args(argv)
    if args.log_file:
        setup_logging(getattr(logging, args.log_level), args.log_file, stream=None)
    try:
        curses.wrapper(lambda s: main(s, args))
    except KeyboardInterrupt:
        pass
    except (ValueError, TypeError, curses.error) as e:
        logger.exception("Demo failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
