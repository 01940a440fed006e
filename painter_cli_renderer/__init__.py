#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

__version__ = "0.1.0"

from .math_utils import Vec3
from .camera import Camera, PERSPECTIVE, ORTHO
from .config import RenderConfig
from .color import clamp_rgba, rgba_to_string, parse_color, parse_hex_color
from .canvas import RecordingSurface, TerminalSurface, require_surface
from .point import Point
from .segment import Segment
from .light import LightSource, LightType
from .polygon import Polygon, PolyAttribs, SurfaceNormal
from .depth import centroid_compare, centroid_key, sort_by_depth
from .scene import Scene
from .renderer import Renderer
from .logging_config import setup_logging
