#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
import re

logger = logging.getLogger(__name__)


def clamp_rgba(rgba):
    """
    Clamp an [r, g, b, a] colour into range and return a new list.
    r, g, b are limited to 0-255 and a to 0-1; a missing alpha means 1.
    """
    vals = [float(c) for c in rgba]
    if len(vals) == 3:
        vals.append(1.0)
    if len(vals) != 4:
        raise ValueError(f"Expected 3 or 4 colour channels, got {len(vals)}")
    out = [min(255.0, max(0.0, c)) for c in vals[:3]]
    out.append(min(1.0, max(0.0, vals[3])))
    return out


def rgba_to_string(rgba) -> str:
    """Format a fill colour as 'rgba(r,g,b,a)' with integer channels."""
    r, g, b, a = clamp_rgba(rgba)
    return f"rgba({int(round(r))},{int(round(g))},{int(round(b))},{a:g})"


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB', 'RRGGBB' or '#RGB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) == 3:
        val = ''.join(ch * 2 for ch in val)
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


NAMED_COLORS = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'red': (255, 0, 0),
    'green': (0, 128, 0),
    'lime': (0, 255, 0),
    'blue': (0, 0, 255),
    'yellow': (255, 255, 0),
    'cyan': (0, 255, 255),
    'magenta': (255, 0, 255),
    'orange': (255, 165, 0),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
}

_RGB_FUNC = re.compile(r'^rgba?\(\s*([^)]*)\)$', re.IGNORECASE)


def parse_color(color):
    """
    Resolve a colour token to an (r, g, b) tuple of ints.

    Accepts None, (r, g, b[, a]) sequences, '#RRGGBB' / '#RGB',
    'rgb(r,g,b)' / 'rgba(r,g,b,a)' and a few CSS names.  Unknown tokens
    return None, which surfaces treat as "paint nothing".
    """
    if color is None:
        return None
    if isinstance(color, (tuple, list)):
        if len(color) < 3:
            return None
        return tuple(int(round(min(255, max(0, float(c))))) for c in color[:3])
    if not isinstance(color, str):
        return None

    token = color.strip()
    lower = token.lower()
    if lower in NAMED_COLORS:
        return NAMED_COLORS[lower]
    m = _RGB_FUNC.match(token)
    if m:
        parts = [p.strip() for p in m.group(1).split(',')]
        if len(parts) < 3:
            return None
        try:
            return tuple(int(round(min(255, max(0, float(p))))) for p in parts[:3])
        except ValueError:
            return None
    rgb = parse_hex_color(token)
    if rgb is None:
        logger.debug("Unrecognised colour token %r", color)
    return rgb


# --- xterm-256 RGB lookup for nearest-colour matching ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# The first 16 are standard ANSI colors with fixed approximate RGB.
_ANSI_RGB = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
    (128, 128, 128), # 8  bright black
    (255, 0, 0),     # 9  bright red
    (0, 255, 0),     # 10 bright green
    (255, 255, 0),   # 11 bright yellow
    (0, 0, 255),     # 12 bright blue
    (255, 0, 255),   # 13 bright magenta
    (0, 255, 255),   # 14 bright cyan
    (255, 255, 255), # 15 bright white
]


def _rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        best_i = 0
        best_d = abs(v - _CUBE_VALUES[0])
        for i in range(1, 6):
            d = abs(v - _CUBE_VALUES[i])
            if d < best_d:
                best_d = d
                best_i = i
        return best_i

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def _rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color.
    Used on terminals that only support 8 colors."""
    best_idx = 0
    best_dist = None
    for i in range(8):
        ar, ag, ab = _ANSI_RGB[i]
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx


def nearest_terminal_color(rgb, num_colors):
    """Terminal colour index for ``rgb`` given the palette size, or None."""
    r, g, b = rgb
    if num_colors >= 256:
        return _rgb_to_nearest_xterm(r, g, b)
    if num_colors >= 8:
        return _rgb_to_nearest_ansi8(r, g, b)
    return None


class CursesPalette:
    """
    Lazily allocates one curses colour pair per terminal colour index.

    Call :meth:`init` once after ``curses.wrapper`` has set up the screen.
    Color mode cascade: xterm-256 nearest match, 8-colour ANSI, mono.
    """

    def __init__(self, use_color: bool = True):
        self.use_color = use_color
        self.num_colors = 0
        self.max_pairs = 0
        self.bg_index = -1
        self.pairs = {}

    def init(self, bg_rgb=None):
        if not self.use_color:
            return self
        try:
            if not curses.has_colors():
                self.use_color = False
                return self
            curses.start_color()
            try:
                curses.use_default_colors()
                self.bg_index = -1
            except curses.error:
                self.bg_index = curses.COLOR_BLACK
            self.num_colors = getattr(curses, 'COLORS', 8)
            self.max_pairs = getattr(curses, 'COLOR_PAIRS', 64)
        except curses.error as e:
            logger.warning("Colour initialisation failed, using mono: %s", e)
            self.use_color = False
            return self

        if bg_rgb is not None:
            bg = nearest_terminal_color(bg_rgb, self.num_colors)
            if bg is not None:
                self.bg_index = bg
        logger.debug("Palette: %d colours, %d pairs", self.num_colors, self.max_pairs)
        return self

    def attr_for(self, rgb) -> int:
        """curses attribute for ``rgb``; 0 (default pair) when unavailable."""
        if not self.use_color or rgb is None:
            return 0
        idx = nearest_terminal_color(rgb, self.num_colors)
        if idx is None:
            return 0
        pair = self.pairs.get(idx)
        if pair is None:
            pair = len(self.pairs) + 1
            if pair >= self.max_pairs:
                return 0
            try:
                curses.init_pair(pair, idx, self.bg_index)
            except curses.error:
                return 0
            self.pairs[idx] = pair
        return curses.color_pair(pair)
