"""
Shapes that live on the canvas.

Entity is a closed set: Balloon | Brick. Each variant is a plain dataclass
owning its primitive plus a vertical velocity; the *_entity functions below
are the only dispatch points and they reject anything outside the set.
"""
import random
from dataclasses import dataclass
from typing import Union

BALLOON_COLOR = 'blue'
BRICK_COLOR = 'red'

BALLOON_GRAVITY = 0.10
BRICK_GRAVITY = 0.75


@dataclass
class Circle:
    x: float
    y: float
    radius: float = 1.0
    color: str = BALLOON_COLOR


@dataclass
class Rectangle:
    x: float
    y: float
    width: float = 1.0
    height: float = 1.0
    color: str = BRICK_COLOR


@dataclass
class Balloon:
    circle: Circle
    velocity_y: float = 0.0

    def tick(self):
        self.velocity_y += BALLOON_GRAVITY
        self.circle.y += self.velocity_y

        bottom_y = self.circle.radius
        if self.circle.y < bottom_y:
            self.circle.y = bottom_y
            self.velocity_y = 0.0

    def draw(self, painter):
        painter.circle(self.circle)

    @property
    def position(self):
        return (self.circle.x, self.circle.y)


@dataclass
class Brick:
    rectangle: Rectangle
    velocity_y: float = 0.0

    def tick(self):
        self.velocity_y += BRICK_GRAVITY
        self.rectangle.y -= self.velocity_y

        bottom_y = self.rectangle.height
        if self.rectangle.y <= bottom_y:
            self.rectangle.y = bottom_y
            self.velocity_y = 0.0

    def draw(self, painter):
        painter.rectangle(self.rectangle)

    @property
    def position(self):
        return (self.rectangle.x, self.rectangle.y)


Entity = Union[Balloon, Brick]
ENTITY_KINDS = (Balloon, Brick)


def _check(entity):
    if not isinstance(entity, ENTITY_KINDS):
        raise TypeError(f"not an entity: {type(entity).__name__}")


def tick_entity(entity: Entity):
    _check(entity)
    entity.tick()


def draw_entity(entity: Entity, painter):
    _check(entity)
    entity.draw(painter)


def move_entity(entity: Entity, x: float, y: float):
    """Reposition without touching kind or velocity."""
    if isinstance(entity, Balloon):
        entity.circle.x, entity.circle.y = x, y
    elif isinstance(entity, Brick):
        entity.rectangle.x, entity.rectangle.y = x, y
    else:
        raise TypeError(f"not an entity: {type(entity).__name__}")


def make_balloon(x: float, y: float) -> Balloon:
    return Balloon(Circle(x, y, radius=1.0, color=BALLOON_COLOR))


def make_brick(x: float, y: float) -> Brick:
    return Brick(Rectangle(x, y, width=1.0, height=1.0, color=BRICK_COLOR))


def spawn_entity(x: float, y: float, rng=random) -> Entity:
    """Fresh entity at rest; Balloon or Brick with even odds."""
    if rng.random() < 0.5:
        return make_balloon(x, y)
    return make_brick(x, y)
