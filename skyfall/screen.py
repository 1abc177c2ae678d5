from typing import List, Optional, Tuple

Rect = Tuple[int, int, int, int]  # (x, y, w, h)


class Region(tuple):
    """
    A class representing a (x,y,w,h) area on the screen.
    Used for laying out ui.
    """
    def __new__(cls, x: int = 0, y: int = 0, w: int = 0, h: int = 0):
        return super().__new__(cls, (int(x), int(y), max(0, int(w)), max(0, int(h))))

    def __repr__(self):
        return f"Region{super().__repr__()}"

    def shrink(self, left: int, top: Optional[int] = None, right: Optional[int] = None, bottom: Optional[int] = None) -> 'Region':
        top = top if top is not None else left
        right = right if right is not None else left
        bottom = bottom if bottom is not None else top
        return Region(
            self[0] + left,
            self[1] + top,
            self[2] - left - right,
            self[3] - top - bottom
        )


class ScreenBuffer:
    """One frame worth of cells. Built fresh, drawn into, flushed, thrown away."""

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.chars = [[' '] * w for _ in range(h)]
        self.txt_colors: List[List[Optional[str]]] = [[None] * w for _ in range(h)]
        self.bg_colors: List[List[Optional[str]]] = [[None] * w for _ in range(h)]

    def put(self, x, y, char, txt_color=None, bg_color=None):
        if 0 <= x < self.w and 0 <= y < self.h:
            self.chars[y][x] = char
            self.txt_colors[y][x] = txt_color
            self.bg_colors[y][x] = bg_color

    def puts(self, x, y, text, txt_color=None, bg_color=None):
        for i, c in enumerate(text):
            self.put(x + i, y, c, txt_color, bg_color)

    def fill(self, r: Rect, char=' ', txt_color=None, bg_color=None):
        x, y, w, h = r
        for row in range(y, y + h):
            self.puts(x, row, char * w, txt_color, bg_color)

    def rect_line(self, r: Rect, txt_color=None, bg_color=None):
        x, y, w, h = r
        if w < 2 or h < 2: return
        right, bottom = x + w - 1, y + h - 1
        self.puts(x, y, '┌' + '─' * (w - 2) + '┐', txt_color, bg_color)
        self.puts(x, bottom, '└' + '─' * (w - 2) + '┘', txt_color, bg_color)
        for row in range(y + 1, bottom):
            self.put(x, row, '│', txt_color, bg_color)
            self.put(right, row, '│', txt_color, bg_color)

    def flush(self, term):
        stylers = {}

        def styler(fg, bg):
            key = (fg, bg)
            if key not in stylers:
                attr = "_".join(p for p in [fg, f"on_{bg}" if bg else None] if p)
                stylers[key] = getattr(term, attr, None) if attr else None
            return stylers[key]

        out = [term.home]
        for y in range(self.h):
            for x in range(self.w):
                c = self.chars[y][x]
                styled = styler(self.txt_colors[y][x], self.bg_colors[y][x])
                out.append(styled(c) if styled else c)
        print("".join(out), end='', flush=True)
