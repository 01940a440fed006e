#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math


def draw_line_dda(canvas, p1, p2, color):
    """
    Draws a line using the DDA algorithm.
    p1, p2 are (x, y) pixel coordinates; no depth test, later pixels win.
    """
    x1, y1 = int(round(p1[0])), int(round(p1[1]))
    x2, y2 = int(round(p2[0])), int(round(p2[1]))

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1, color)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(int(step) + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)), color)
        cx += x_inc; cy += y_inc


def draw_polyline(canvas, pts, color):
    """Stroke consecutive points; a single point is drawn as a dot."""
    if len(pts) == 1:
        draw_line_dda(canvas, pts[0], pts[0], color)
        return
    for i in range(len(pts) - 1):
        draw_line_dda(canvas, pts[i], pts[i + 1], color)


def fill_polygon(canvas, pts, color):
    """
    Scanline fill of a closed polygon (even-odd rule).
    Pixel centres are sampled at (x + 0.5, y + 0.5).
    """
    n = len(pts)
    if n < 3:
        return
    ys = [p[1] for p in pts]
    y_start = max(0, int(math.floor(min(ys))))
    y_end = min(canvas.h - 1, int(math.ceil(max(ys))))

    for y in range(y_start, y_end + 1):
        sy = y + 0.5
        xs = []
        for i in range(n):
            xa, ya = pts[i][0], pts[i][1]
            xb, yb = pts[(i + 1) % n][0], pts[(i + 1) % n][1]
            if ya == yb:
                continue
            # Half-open rule so shared vertices are counted once
            if (ya <= sy < yb) or (yb <= sy < ya):
                xs.append(xa + (sy - ya) * (xb - xa) / (yb - ya))
        xs.sort()
        for i in range(0, len(xs) - 1, 2):
            sx = max(0, int(math.ceil(xs[i] - 0.5)))
            ex = min(canvas.w - 1, int(math.floor(xs[i + 1] - 0.5)))
            for x in range(sx, ex + 1):
                canvas.set_pixel(x, y, color)


def fill_circle(canvas, cx, cy, r, color):
    """Filled disc; a radius under half a pixel still marks the centre."""
    if r < 0.5:
        canvas.set_pixel(int(round(cx)), int(round(cy)), color)
        return
    r2 = r * r
    y_start = max(0, int(math.floor(cy - r)))
    y_end = min(canvas.h - 1, int(math.ceil(cy + r)))
    for y in range(y_start, y_end + 1):
        dy = y - cy
        if dy * dy > r2:
            continue
        half = math.sqrt(r2 - dy * dy)
        sx = max(0, int(math.ceil(cx - half)))
        ex = min(canvas.w - 1, int(math.floor(cx + half)))
        for x in range(sx, ex + 1):
            canvas.set_pixel(x, y, color)


def circle_outline(cx, cy, r, steps):
    """Closed ring of points approximating a circle."""
    return [(cx + r * math.cos(2 * math.pi * i / steps),
             cy + r * math.sin(2 * math.pi * i / steps))
            for i in range(steps + 1)]
