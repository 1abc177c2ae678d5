"""
Braille canvas: real-valued drawing space mapped onto terminal cells.

Each cell holds a 2x4 grid of braille dots, so a w*h cell area gives a
(2w)x(4h) dot resolution. Canvas coordinates have their origin at the
bottom-left and y grows upward; dot coordinates (like cells) start top-left.
"""
import math
from typing import Iterable, Optional, Tuple

from .entity import Circle, Rectangle
from .screen import Rect, ScreenBuffer

BRAILLE_BLANK = 0x2800

# DOTS[row][col] -> bit of that dot inside one braille cell
DOTS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

Bounds = Tuple[float, float]


class BrailleCanvas:
    def __init__(self, w: int, h: int, x_bounds: Bounds, y_bounds: Bounds):
        self.w, self.h = max(0, w), max(0, h)
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self.bits = [[0] * self.w for _ in range(self.h)]
        self.colors = [[None] * self.w for _ in range(self.h)]

    @property
    def dots_w(self) -> int:
        return self.w * 2

    @property
    def dots_h(self) -> int:
        return self.h * 4

    def _raw_dot(self, x: float, y: float) -> Tuple[int, int]:
        x0, x1 = self.x_bounds
        y0, y1 = self.y_bounds
        dx = math.floor((x - x0) * (self.dots_w - 1) / (x1 - x0))
        dy = math.floor((y1 - y) * (self.dots_h - 1) / (y1 - y0))
        return dx, dy

    def _degenerate(self) -> bool:
        return (self.x_bounds[1] <= self.x_bounds[0] or self.y_bounds[1] <= self.y_bounds[0]
                or not self.w or not self.h)

    def to_dot(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Dot under a canvas point, or None when the point is out of bounds."""
        if self._degenerate(): return None
        x0, x1 = self.x_bounds
        y0, y1 = self.y_bounds
        if not (x0 <= x <= x1 and y0 <= y <= y1):
            return None
        return self._raw_dot(x, y)

    def to_cell(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        dot = self.to_dot(x, y)
        if dot is None: return None
        return dot[0] // 2, dot[1] // 4

    def set_dot(self, dx: int, dy: int, color):
        if 0 <= dx < self.dots_w and 0 <= dy < self.dots_h:
            cx, cy = dx // 2, dy // 4
            self.bits[cy][cx] |= DOTS[dy % 4][dx % 2]
            self.colors[cy][cx] = color

    # --- primitives ---

    def points(self, coords: Iterable[Tuple[float, float]], color):
        for x, y in coords:
            dot = self.to_dot(x, y)
            if dot: self.set_dot(*dot, color)

    def line(self, x1: float, y1: float, x2: float, y2: float, color):
        if self._degenerate(): return
        # Bresenham in dot space; set_dot clips whatever falls outside
        cx0, cy0 = self._raw_dot(x1, y1)
        cx1, cy1 = self._raw_dot(x2, y2)
        dx, dy = abs(cx1 - cx0), abs(cy1 - cy0)
        sx = 1 if cx0 < cx1 else -1
        sy = 1 if cy0 < cy1 else -1
        err = dx - dy
        while True:
            self.set_dot(cx0, cy0, color)
            if cx0 == cx1 and cy0 == cy1: break
            e2 = 2 * err
            if e2 > -dy: err -= dy; cx0 += sx
            if e2 < dx: err += dx; cy0 += sy

    def circle(self, c: Circle):
        self.points(
            ((c.x + c.radius * math.cos(math.radians(a)),
              c.y + c.radius * math.sin(math.radians(a))) for a in range(360)),
            c.color,
        )

    def rectangle(self, r: Rectangle):
        left, right = r.x, r.x + r.width
        bottom, top = r.y, r.y + r.height
        self.line(left, bottom, left, top, r.color)
        self.line(left, top, right, top, r.color)
        self.line(right, top, right, bottom, r.color)
        self.line(right, bottom, left, bottom, r.color)

    def render_into(self, buf: ScreenBuffer, r: Rect, bg_color=None):
        x, y, _, _ = r
        for row in range(self.h):
            for col in range(self.w):
                bits = self.bits[row][col]
                char = chr(BRAILLE_BLANK + bits) if bits else ' '
                buf.put(x + col, y + row, char, txt_color=self.colors[row][col], bg_color=bg_color)
