import copy
import logging
import random
from typing import Tuple

from .entity import move_entity, spawn_entity, tick_entity
from .errors import RenderError
from .messages import Command, Message, MouseHoverPos, MouseLeftClick, Quit, Render, Tick
from .model import Model

log = logging.getLogger(__name__)


def to_canvas(view, row: int, col: int) -> Tuple[float, float]:
    """Terminal (row, col), origin top-left -> canvas (x, y), origin bottom-left."""
    _, height = view.size()
    return float(col), float(height - row)


def update(model: Model, message: Message, view, rng=random) -> Tuple[Model, Command]:
    """
    Apply one message to the model, in place.

    `view` provides the live terminal size and does the drawing on Render.
    Returns the same model plus whether the loop should keep going.
    """
    if isinstance(message, Quit):
        return model, Command.QUIT

    if isinstance(message, Tick):
        for entity in model.entities:
            tick_entity(entity)
        return model, Command.NONE

    if isinstance(message, Render):
        model.fps_counter.tick()
        try:
            view.render(model)
        except Exception as e:
            raise RenderError(f"Failed to render: {e}") from e
        return model, Command.NONE

    if isinstance(message, MouseLeftClick):
        x, y = to_canvas(view, message.row, message.col)
        model.entities.append(copy.deepcopy(model.hover_entity))
        model.hover_entity = spawn_entity(x, y, rng)
        log.debug("placed entity #%d, next is %s at (%s, %s)",
                  len(model.entities), type(model.hover_entity).__name__, x, y)
        return model, Command.NONE

    if isinstance(message, MouseHoverPos):
        model.hover_pos = (message.row, message.col)
        x, y = to_canvas(view, message.row, message.col)
        move_entity(model.hover_entity, x, y)
        return model, Command.NONE

    raise TypeError(f"unknown message: {message!r}")
