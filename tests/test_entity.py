"""
Tick physics and variant dispatch for Balloon / Brick.
"""

import copy
import random

import pytest

from skyfall.entity import (
    BALLOON_GRAVITY, BRICK_GRAVITY, Balloon, Brick, Circle, Rectangle,
    draw_entity, make_balloon, make_brick, move_entity, spawn_entity, tick_entity,
)


def _ticks_until_floor(entity, floor, limit=50):
    for i in range(1, limit + 1):
        tick_entity(entity)
        if entity.position[1] == floor and entity.velocity_y == 0.0:
            return i
    return None


def test_brick_falls_monotonically_then_settles() -> None:
    brick = make_brick(10.0, 19.0)
    ys = [brick.position[1]]
    for _ in range(7):
        tick_entity(brick)
        ys.append(brick.position[1])

    assert all(a > b for a, b in zip(ys, ys[1:]))
    assert brick.rectangle.y == brick.rectangle.height
    assert brick.velocity_y == 0.0


def test_brick_stays_put_once_settled() -> None:
    brick = make_brick(3.0, 19.0)
    _ticks_until_floor(brick, brick.rectangle.height)
    before = copy.deepcopy(brick)

    for _ in range(20):
        tick_entity(brick)
        assert brick == before


def test_brick_velocity_accumulates() -> None:
    brick = make_brick(0.0, 100.0)
    tick_entity(brick)
    tick_entity(brick)
    assert brick.velocity_y == pytest.approx(2 * BRICK_GRAVITY)
    assert brick.rectangle.y == pytest.approx(100.0 - BRICK_GRAVITY - 2 * BRICK_GRAVITY)


def test_balloon_rises_monotonically() -> None:
    balloon = make_balloon(10.0, 19.0)
    ys = [balloon.position[1]]
    for _ in range(10):
        tick_entity(balloon)
        ys.append(balloon.position[1])

    assert all(a < b for a, b in zip(ys, ys[1:]))
    assert balloon.velocity_y == pytest.approx(10 * BALLOON_GRAVITY)


def test_balloon_below_its_radius_is_clamped() -> None:
    balloon = Balloon(Circle(5.0, 0.2, radius=1.0), velocity_y=-3.0)
    tick_entity(balloon)
    assert balloon.circle.y == 1.0
    assert balloon.velocity_y == 0.0


def test_brick_reaches_floor_before_balloon() -> None:
    brick = make_brick(10.0, 19.0)
    balloon = make_balloon(10.0, 19.0)

    brick_at = _ticks_until_floor(brick, brick.rectangle.height)
    balloon_at = _ticks_until_floor(balloon, balloon.circle.radius)

    assert brick_at == 7
    assert balloon_at is None or brick_at < balloon_at


def test_move_keeps_kind_and_velocity() -> None:
    brick = Brick(Rectangle(1.0, 2.0), velocity_y=4.5)
    move_entity(brick, 7.0, 8.0)
    assert isinstance(brick, Brick)
    assert brick.position == (7.0, 8.0)
    assert brick.velocity_y == 4.5

    balloon = Balloon(Circle(1.0, 2.0), velocity_y=0.3)
    move_entity(balloon, 9.0, 3.0)
    assert balloon.position == (9.0, 3.0)
    assert balloon.velocity_y == 0.3


def test_spawn_picks_both_kinds_at_rest() -> None:
    rng = random.Random(7)
    spawned = [spawn_entity(4.0, 5.0, rng) for _ in range(200)]

    kinds = {type(e) for e in spawned}
    assert kinds == {Balloon, Brick}
    assert all(e.position == (4.0, 5.0) and e.velocity_y == 0.0 for e in spawned)
    balloons = sum(isinstance(e, Balloon) for e in spawned)
    assert 60 < balloons < 140


def test_draw_hands_primitive_to_painter() -> None:
    calls = []

    class Painter:
        def circle(self, c):
            calls.append(("circle", c))

        def rectangle(self, r):
            calls.append(("rectangle", r))

    balloon, brick = make_balloon(1.0, 1.0), make_brick(2.0, 2.0)
    draw_entity(balloon, Painter())
    draw_entity(brick, Painter())
    assert calls == [("circle", balloon.circle), ("rectangle", brick.rectangle)]


def test_dispatch_rejects_unknown_kinds() -> None:
    with pytest.raises(TypeError):
        tick_entity(object())
    with pytest.raises(TypeError):
        draw_entity("brick", None)
    with pytest.raises(TypeError):
        move_entity(Circle(0, 0), 1, 1)
