"""
Terminal input: a blocking poll kept off the event loop, and the decoder
that turns a blessed Keystroke into messages.
"""
import asyncio
from typing import List

from .errors import InputDecodeError
from .messages import Message, MouseHoverPos, MouseLeftClick, Quit, Render

CTRL_C = '\x03'


def _mouse_pos(key):
    row, col = key.mouse_yx
    if row < 0 or col < 0:
        raise InputDecodeError(f"mouse event without coordinates: {key!r}")
    return row, col


def decode_keystroke(key) -> List[Message]:
    if not key:
        return []
    if getattr(key, 'released', False):
        return []

    name = key.name
    if name == 'KEY_ESCAPE' or str(key) == CTRL_C:
        return [Quit()]
    if name == 'MOUSE_LEFT':
        return [MouseLeftClick(*_mouse_pos(key))]
    if name == 'MOUSE_MOTION':
        return [MouseHoverPos(*_mouse_pos(key))]
    if name == 'RESIZE_EVENT':
        return [Render()]
    return []


class InputPoller:
    def __init__(self, term, timeout: float = 0.1):
        self.term = term
        self.timeout = timeout

    async def poll(self) -> List[Message]:
        """Wait up to `timeout` for one keystroke on a worker thread, then decode it."""
        key = await asyncio.to_thread(self.term.inkey, timeout=self.timeout)
        return decode_keystroke(key)
