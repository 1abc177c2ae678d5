from typing import Tuple

from .canvas import BrailleCanvas
from .entity import draw_entity
from .model import Model
from .screen import Region, ScreenBuffer

BORDER_COLOR = 'white'
BACKGROUND = 'black'


def title_for(model: Model) -> str:
    return f"Esc to Quit. FPS: {model.fps_counter.fps}"


def compose(model: Model, width: int, height: int) -> ScreenBuffer:
    """Whole frame from scratch: bordered block, braille canvas, every entity."""
    buf = ScreenBuffer(width, height)
    screen_r = Region(0, 0, width, height)
    buf.fill(screen_r, bg_color=BACKGROUND)
    buf.rect_line(screen_r, txt_color=BORDER_COLOR, bg_color=BACKGROUND)
    buf.puts(1, 0, title_for(model)[:max(0, width - 2)], txt_color=BORDER_COLOR, bg_color=BACKGROUND)

    inner = screen_r.shrink(1)
    canvas = BrailleCanvas(inner[2], inner[3], (0.0, float(width)), (0.0, float(height)))
    draw_entity(model.hover_entity, canvas)
    for entity in model.entities:
        draw_entity(entity, canvas)
    canvas.render_into(buf, inner, bg_color=BACKGROUND)
    return buf


class View:
    def __init__(self, term):
        self.term = term

    def size(self) -> Tuple[int, int]:
        # read every time; the terminal may have been resized since last frame
        return self.term.width, self.term.height

    def render(self, model: Model):
        width, height = self.size()
        compose(model, width, height).flush(self.term)
