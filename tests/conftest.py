"""
Shared fakes for the terminal-bound collaborators.
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Tuple

import pytest

from skyfall.view import compose


class FakeView:
    """Stands in for View: fixed size, records frames instead of printing."""

    def __init__(self, width: int = 80, height: int = 24):
        self.width = width
        self.height = height
        self.frames = []

    def size(self):
        return self.width, self.height

    def render(self, model):
        self.frames.append(compose(model, self.width, self.height))


class BrokenView(FakeView):
    def render(self, model):
        raise OSError("terminal went away")


class FakeSession:
    def __init__(self):
        self.enters = 0
        self.exits = 0

    def __enter__(self):
        self.enters += 1
        return self

    def __exit__(self, *exc):
        self.exits += 1
        return False


class ScriptedPoller:
    """Hands out one scripted batch of messages per poll, then idles."""

    def __init__(self, *batches, delay: float = 0.005):
        self.batches = list(batches)
        self.delay = delay
        self.polls = 0

    async def poll(self):
        self.polls += 1
        await asyncio.sleep(self.delay)
        if not self.batches:
            return []
        batch = self.batches.pop(0)
        if isinstance(batch, Exception):
            raise batch
        return list(batch)


@dataclass
class FakeKey:
    """Just enough of blessed's Keystroke for decode_keystroke."""
    text: str = ''
    name: str = None
    mouse_yx: Tuple[int, int] = (-1, -1)
    released: bool = False

    def __str__(self):
        return self.text

    def __bool__(self):
        return bool(self.text)


@pytest.fixture
def view():
    return FakeView(80, 24)


@pytest.fixture
def rng():
    return random.Random(1234)
