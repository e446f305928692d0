"""Level layout, object geometry and the textured quads used for drawing.

Positions are stored as 32-bit floats so that the layout matches the
single-precision arithmetic the level was designed with.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass, field

Vertex = tuple[float, ...]


def _f32(value: float) -> float:
    """Round a Python float to the nearest 32-bit float."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _float_steps(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield start, start+step, ... while <= stop, accumulating in 32-bit floats."""
    value = _f32(start)
    while value <= stop:
        yield value
        value = _f32(value + step)


BLOCK_WIDTH = _f32(0.1)
BLOCK_HEIGHT = _f32(0.1)
SPIKE_WIDTH = _f32(0.1)
SPIKE_HEIGHT = _f32(0.1)
PLAYER_WIDTH = _f32(0.1)
PLAYER_HEIGHT = _f32(0.1)
PORTAL_WIDTH = _f32(0.1)
PORTAL_HEIGHT = _f32(0.4)

PLAYER_X = _f32(-0.7)
GROUND_Y = _f32(-0.8)
PLAYER_LEFT = _f32(PLAYER_X - PLAYER_WIDTH / 2.0)
PLAYER_RIGHT = _f32(PLAYER_X + PLAYER_WIDTH / 2.0)

OBJECT_SPEED = _f32(0.02)
BG_SCROLL_SPEED = _f32(0.0011)

PORTAL_Y = _f32(GROUND_Y + _f32(0.15))
PORTAL_INITIAL_X = _f32(9.0)


@dataclass
class _Scrolling:
    x: float
    y: float
    width: float
    height: float
    initial_x: float = field(init=False)

    def __post_init__(self) -> None:
        self.x = _f32(self.x)
        self.y = _f32(self.y)
        self.initial_x = self.x


@dataclass
class Obstacle(_Scrolling):
    """A spike that kills the player on contact."""

    width: float = SPIKE_WIDTH
    height: float = SPIKE_HEIGHT

    def reset(self) -> None:
        """Move the spike back to where the level placed it."""
        self.x = self.initial_x


@dataclass
class Block(_Scrolling):
    """A solid block the player can land on."""

    width: float = BLOCK_WIDTH
    height: float = BLOCK_HEIGHT

    def reset(self) -> None:
        """Move the block back to where the level placed it."""
        self.x = self.initial_x


@dataclass
class Level:
    """Every scrolling object in the stage, plus the finishing portal."""

    obstacles: list[Obstacle] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)
    portal_x: float = PORTAL_INITIAL_X
    portal_y: float = PORTAL_Y
    portal_initial_x: float = PORTAL_INITIAL_X

    def reset(self) -> None:
        """Return the portal and every obstacle and block to their start."""
        self.portal_x = self.portal_initial_x
        for obstacle in self.obstacles:
            obstacle.reset()
        for block in self.blocks:
            block.reset()


def build_level() -> Level:
    """Lay out the single stage of the game."""
    level = Level()

    def spike(x: float, y: float) -> None:
        level.obstacles.append(Obstacle(x, y))

    def block(x: float, y: float) -> None:
        level.blocks.append(Block(x, y))

    for x in _float_steps(1.0, 3.0, 0.5):
        spike(x, GROUND_Y)
    for x in _float_steps(4.0, 4.7, 0.1):
        block(x, GROUND_Y)

    spike(4.375, _f32(GROUND_Y + BLOCK_HEIGHT))

    for x in _float_steps(5.1, 5.6, 0.1):
        for dy in _float_steps(0.0, 0.2, 0.1):
            block(x, _f32(GROUND_Y + dy))

    for x in _float_steps(6.0, 6.4, 0.1):
        for dy in _float_steps(0.0, 0.3, 0.1):
            block(x, _f32(GROUND_Y + dy))

    block(6.80, -0.5)
    block(6.90, -0.5)
    block(7.15, -0.4)
    block(7.25, -0.4)

    for x in _float_steps(4.80, 7.8, 0.1):
        if 4.80 <= x <= 5.0 or 5.60 <= x <= 5.90 or 6.4 <= x <= 7.8:
            spike(x, GROUND_Y)

    return level


def _quad(left: float, right: float, bottom: float, top: float) -> tuple[Vertex, ...]:
    """Two triangles covering a rectangle, with (u, v) flipped vertically."""
    return (
        (left, bottom, 0.0, 1.0),
        (right, bottom, 1.0, 1.0),
        (left, top, 0.0, 0.0),
        (right, bottom, 1.0, 1.0),
        (right, top, 1.0, 0.0),
        (left, top, 0.0, 0.0),
    )


def background_vertices() -> tuple[Vertex, ...]:
    """Full-screen quad as (x, y, u, v) vertices."""
    return _quad(-1.0, 1.0, -1.0, 1.0)


def title_vertices() -> tuple[Vertex, ...]:
    """Menu title quad as (x, y, u, v) vertices."""
    width, height, centre_y = 0.8, 0.2, 0.3
    return _quad(-width, width, -height + centre_y, height + centre_y)


def play_vertices() -> tuple[Vertex, ...]:
    """Menu play-button quad as (x, y, u, v) vertices."""
    size, centre_y = 0.2, -0.3
    return _quad(-size, size, -size + centre_y, size + centre_y)


def player_vertices() -> tuple[Vertex, ...]:
    """Player square centred on the origin, as (x, y, u, v) vertices."""
    half_w, half_h = PLAYER_WIDTH / 2.0, PLAYER_HEIGHT / 2.0
    return _quad(-half_w, half_w, -half_h, half_h)


def portal_vertices() -> tuple[Vertex, ...]:
    """Portal rectangle centred on the origin, as (x, y, u, v) vertices."""
    half_w, half_h = PORTAL_WIDTH / 2.0, PORTAL_HEIGHT / 2.0
    return _quad(-half_w, half_w, -half_h, half_h)


def block_vertices() -> tuple[Vertex, ...]:
    """Block square centred on the origin, as (x, y, z, u, v) vertices."""
    half_w, half_h = 0.5 * BLOCK_WIDTH, 0.5 * BLOCK_HEIGHT
    return tuple(
        (x, y, 0.0, u, v) for x, y, u, v in _quad(-half_w, half_w, -half_h, half_h)
    )


def spike_vertices() -> tuple[Vertex, ...]:
    """Spike triangle centred on the origin, as (x, y, u, v) vertices."""
    half_w, half_h = SPIKE_WIDTH / 2.0, SPIKE_HEIGHT / 2.0
    return (
        (-half_w, -half_h, 0.0, 1.0),
        (half_w, -half_h, 1.0, 1.0),
        (0.0, half_h, 0.5, 0.0),
    )