#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .color import parse_color
from .rasterizer import fill_polygon, fill_circle, draw_polyline, circle_outline

# Methods a drawing surface must offer for primitives to render on it.
SURFACE_METHODS = (
    'set_stroke_color', 'set_fill_color', 'set_line_style', 'draw_circle',
    'move_to', 'line_to', 'close_path', 'end_fill', 'end_stroke',
)


def require_surface(surface):
    """Raise TypeError unless ``surface`` implements the drawing contract."""
    if surface is None:
        raise TypeError("Null drawing surface")
    missing = [m for m in SURFACE_METHODS if not callable(getattr(surface, m, None))]
    if missing:
        raise TypeError(
            f"{type(surface).__name__} is not a drawing surface "
            f"(missing: {', '.join(missing)})")
    return surface


class RecordingSurface:
    """
    Drawing surface that only records calls.

    ``calls`` is a display list of ``(method, args)`` tuples in issue order;
    useful for tests and for replaying a frame onto another surface.
    """

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))
        return self

    def set_stroke_color(self, color):
        return self._record('set_stroke_color', color)

    def set_fill_color(self, color):
        return self._record('set_fill_color', color)

    def set_line_style(self, style, *args):
        return self._record('set_line_style', style, *args)

    def draw_circle(self, x, y, radius):
        return self._record('draw_circle', x, y, radius)

    def move_to(self, x, y):
        return self._record('move_to', x, y)

    def line_to(self, x, y):
        return self._record('line_to', x, y)

    def close_path(self):
        return self._record('close_path')

    def end_fill(self):
        return self._record('end_fill')

    def end_stroke(self):
        return self._record('end_stroke')

    def methods(self):
        """Just the method names, in call order."""
        return [name for name, _ in self.calls]

    def replay(self, surface):
        require_surface(surface)
        for name, args in self.calls:
            getattr(surface, name)(*args)

    def clear(self):
        self.calls.clear()


class Canvas:
    """
    Pixel canvas packed into 2x4 Braille cells.

    Each cell keeps an 8-bit dot mask and the colour of the last pixel
    written to it.  There is no depth buffer: later writes win.
    """
    __slots__ = ['w', 'h', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        self.c_grid = [[None] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_pixel(self, x, y, color):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        cx, cy = x >> 1, y >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color

    def get_pixel(self, x, y) -> bool:
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return False
        return bool(self.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4)))

    def clear(self):
        for row in self.grid:
            row[:] = [0] * len(row)
        for row in self.c_grid:
            row[:] = [None] * len(row)


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)


class TerminalSurface:
    """
    Drawing surface that rasterises onto a Braille :class:`Canvas`.

    Coordinates are mapped from a logical window (see :meth:`set_window`)
    into pixels, keeping the aspect ratio and flipping y so +y points up.
    A path is built with move_to/line_to/draw_circle; ``end_fill`` and
    ``end_stroke`` paint it with the current fill and stroke colours.  The
    next path command after a paint starts a fresh path.
    """

    CIRCLE_STEPS = 24

    def __init__(self, width: int, height: int, window=(-1.0, -1.0, 1.0, 1.0)):
        self.canvas = Canvas(width, height)
        self.stroke_rgb = None
        self.fill_rgb = None
        self.line_style = 1
        self._subpaths = []
        self._circles = []
        self._painted = False
        self.set_window(*window)

    @property
    def width(self) -> int:
        return self.canvas.w

    @property
    def height(self) -> int:
        return self.canvas.h

    def set_window(self, xmin, ymin, xmax, ymax):
        """Map the logical rectangle onto the pixel canvas, centred."""
        if xmax == xmin or ymax == ymin:
            raise ValueError("window must have a non-zero extent")
        sx = (self.canvas.w - 1) / (xmax - xmin)
        sy = (self.canvas.h - 1) / (ymax - ymin)
        self._scale = min(abs(sx), abs(sy))
        self._cx = (xmin + xmax) / 2.0
        self._cy = (ymin + ymax) / 2.0
        return self

    def to_pixel(self, x, y):
        px = (x - self._cx) * self._scale + (self.canvas.w - 1) / 2.0
        py = (self.canvas.h - 1) / 2.0 - (y - self._cy) * self._scale
        return px, py

    def rgba_to_color(self, rgba):
        r, g, b = (int(round(c)) for c in rgba[:3])
        return (r, g, b)

    # ── Drawing contract ────────────────────────────────────────────────

    def set_stroke_color(self, color):
        self.stroke_rgb = parse_color(color)
        return self

    def set_fill_color(self, color):
        self.fill_rgb = parse_color(color)
        return self

    def set_line_style(self, style, *args):
        self.line_style = style
        return self

    def _begin(self):
        if self._painted:
            self._subpaths = []
            self._circles = []
            self._painted = False

    def draw_circle(self, x, y, radius):
        self._begin()
        px, py = self.to_pixel(x, y)
        self._circles.append((px, py, abs(radius) * self._scale))
        return self

    def move_to(self, x, y):
        self._begin()
        self._subpaths.append([self.to_pixel(x, y)])
        return self

    def line_to(self, x, y):
        self._begin()
        if not self._subpaths:
            self._subpaths.append([])
        self._subpaths[-1].append(self.to_pixel(x, y))
        return self

    def close_path(self):
        if self._subpaths and len(self._subpaths[-1]) > 1:
            self._subpaths[-1].append(self._subpaths[-1][0])
        return self

    def end_fill(self):
        if self.fill_rgb is not None:
            for path in self._subpaths:
                if len(path) >= 3:
                    fill_polygon(self.canvas, path, self.fill_rgb)
            for cx, cy, r in self._circles:
                fill_circle(self.canvas, cx, cy, r, self.fill_rgb)
        self._painted = True
        return self

    def end_stroke(self):
        if self.stroke_rgb is not None:
            for path in self._subpaths:
                draw_polyline(self.canvas, path, self.stroke_rgb)
            for cx, cy, r in self._circles:
                draw_polyline(self.canvas, circle_outline(cx, cy, r, self.CIRCLE_STEPS),
                              self.stroke_rgb)
        self._painted = True
        return self

    # ── Output ──────────────────────────────────────────────────────────

    def clear(self):
        self.canvas.clear()
        self._subpaths = []
        self._circles = []
        self._painted = False

    def cells(self, use_braille: bool = True):
        """Yield (row, col, char, rgb) for every non-empty cell."""
        render = render_cell_braille if use_braille else render_cell_ascii
        for y, row in enumerate(self.canvas.grid):
            colors = self.canvas.c_grid[y]
            for x, mask in enumerate(row):
                if mask:
                    yield y, x, render(mask), colors[x]

    def to_text(self, use_braille: bool = True) -> str:
        render = render_cell_braille if use_braille else render_cell_ascii
        rows = []
        for row in self.canvas.grid:
            rows.append(''.join(render(m) for m in row).rstrip())
        return '\n'.join(rows)
