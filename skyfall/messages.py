from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Render:
    pass


@dataclass(frozen=True)
class MouseLeftClick:
    row: int
    col: int


@dataclass(frozen=True)
class MouseHoverPos:
    row: int
    col: int


Message = Union[Quit, Tick, Render, MouseLeftClick, MouseHoverPos]


class Command(Enum):
    NONE = "none"
    QUIT = "quit"
