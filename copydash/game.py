"""Game state and the per-frame rules of the stage: jumping, scrolling and collisions."""

from __future__ import annotations

import math
import struct
from collections.abc import Callable
from dataclasses import dataclass, field

from copydash.level import (
    BG_SCROLL_SPEED,
    GROUND_Y,
    OBJECT_SPEED,
    PLAYER_LEFT,
    PLAYER_RIGHT,
    Level,
    build_level,
)


def _f32(value: float) -> float:
    """Round a Python float to the nearest 32-bit float."""
    return struct.unpack("f", struct.pack("f", value))[0]


JUMP_VELOCITY = _f32(0.035)
GRAVITY = _f32(0.003)
SPIN_STEP = 8.0
ANIMATION_STEP = 0.05
LANDING_TOLERANCE = _f32(0.01)

# Portal positions that mark the end of the stage.
_FINISH_X = _f32(-0.10)
_LIFT_OFF_X = _f32(-0.59)
_EXIT_X = _f32(-0.7)

# Play button in normalised device coordinates.
_BUTTON_LEFT, _BUTTON_RIGHT = -0.2, 0.2
_BUTTON_BOTTOM, _BUTTON_TOP = -0.5, -0.1

_MENU_KEYS = frozenset({"\x1b", "q", "Q"})
_JUMP_KEY = " "

PAUSE_SECONDS = 1.0


def _no_pause(seconds: float) -> None:
    """Default pause hook: do nothing."""


@dataclass
class Game:
    """Everything that changes while the game runs.

    ``pause`` is called with a number of seconds whenever the game freezes
    (after a death or at the end of the stage); a front end uses it to draw
    the frozen frame and wait.
    """

    level: Level = field(default_factory=build_level)
    pause: Callable[[float], None] = _no_pause
    win_width: int = 800
    win_height: int = 600
    in_menu: bool = True
    final: bool = False
    pressing_jump: bool = False
    show_player: bool = True
    buffer_jump: int = 0
    animation_time: float = 0.0
    player_y: float = GROUND_Y
    velocity_y: float = 0.0
    jumping: bool = False
    angle: float = 0.0
    current_ground_y: float = GROUND_Y
    on_block: bool = False
    bg_offset: float = 0.0
    bg_scroll_speed: float = BG_SCROLL_SPEED
    object_speed: float = OBJECT_SPEED

    def jump(self) -> None:
        """Start a jump if the player is on the ground and the stage is not over."""
        if not self.jumping and not self.final:
            self.velocity_y = JUMP_VELOCITY
            self.jumping = True
            self.angle = 0.0

    def press_key(self, key: str) -> None:
        """Handle a character key: Escape or q opens the menu, space plays or jumps."""
        if key in _MENU_KEYS:
            self.in_menu = True
            return
        if key == _JUMP_KEY:
            if self.in_menu:
                self.in_menu = False
                self.reset(True)
                return
            self.jump()
            self.pressing_jump = True
            self.buffer_jump = 2

    def press_up(self) -> None:
        """Handle the up-arrow key, which jumps."""
        self.jump()
        self.buffer_jump = 2
        self.pressing_jump = True

    def click(self, x: int, y: int) -> bool:
        """Handle a left click at window pixel (x, y); return True if it started play."""
        if not self.in_menu:
            return False
        gl_x = x / self.win_width * 2.0 - 1.0
        gl_y = 1.0 - y / self.win_height * 2.0
        if _BUTTON_LEFT <= gl_x <= _BUTTON_RIGHT and _BUTTON_BOTTOM <= gl_y <= _BUTTON_TOP:
            self.in_menu = False
            return True
        return False

    def resize(self, width: int, height: int) -> None:
        """Record the new window size."""
        self.win_width = width
        self.win_height = height

    def reset(self, from_menu: bool) -> None:
        """Put the stage back to its start; freeze for a moment unless leaving the menu."""
        self.bg_scroll_speed = 0.0
        self.object_speed = 0.0
        self.show_player = False
        self.buffer_jump = 0
        if not from_menu:
            self.pause(PAUSE_SECONDS)

        self.show_player = True
        self.bg_scroll_speed = BG_SCROLL_SPEED
        self.object_speed = OBJECT_SPEED
        self.level.reset()
        self.player_y = GROUND_Y
        self.jumping = False
        self.angle = 0.0

    def play_button_scale(self) -> float:
        """Scale of the pulsing play button in the menu."""
        return 1.0 + 0.05 * math.sin(self.animation_time)

    def _scroll_background(self) -> None:
        self.bg_offset = _f32(self.bg_offset + self.bg_scroll_speed)
        if self.bg_offset > 1.0:
            self.bg_offset = _f32(self.bg_offset - 1.0)

    def _advance_portal(self) -> None:
        level = self.level
        level.portal_x = _f32(level.portal_x - self.object_speed)
        if level.portal_x <= _FINISH_X:
            self.final = True
        if level.portal_x <= _LIFT_OFF_X:
            self.velocity_y = JUMP_VELOCITY
            self.player_y = _f32(self.player_y + self.velocity_y)
            if level.portal_x <= _EXIT_X:
                self.show_player = False
                self.pause(PAUSE_SECONDS)
                self.in_menu = True
                self.reset(False)
                self.final = False

    def _check_spikes(self) -> None:
        for obstacle in self.level.obstacles:
            left = _f32(obstacle.x - obstacle.width / 4.0)
            right = _f32(obstacle.x + obstacle.width / 4.0)
            top = _f32(obstacle.y + obstacle.height)
            bottom = _f32(obstacle.y - obstacle.height)
            if (
                PLAYER_RIGHT > left
                and PLAYER_LEFT < right
                and bottom < self.player_y < top
            ):
                self.reset(False)

    def _check_blocks(self) -> None:
        self.on_block = False
        for block in self.level.blocks:
            left = _f32(block.x - block.width / 2.0)
            right = _f32(block.x + block.width / 2.0)
            top = _f32(block.y + block.height)
            bottom = _f32(block.y - block.height)
            if not (PLAYER_RIGHT > left and PLAYER_LEFT < right):
                continue
            self.on_block = True
            near_top = (
                _f32(top - LANDING_TOLERANCE)
                <= self.player_y
                <= _f32(top + LANDING_TOLERANCE)
            )
            if near_top and self.velocity_y <= 0.0:
                self.current_ground_y = top
                self.velocity_y = 0.0
                self.player_y = top
                self.angle = 0.0
            elif bottom < self.player_y < top:
                self.reset(False)

    def _apply_motion(self) -> None:
        self.player_y = _f32(self.player_y + self.velocity_y)
        self.velocity_y = _f32(self.velocity_y - GRAVITY)
        self.angle -= SPIN_STEP
        if self.angle < -360.0:
            self.angle += 360.0
        if not self.on_block:
            self.current_ground_y = GROUND_Y
        if self.player_y <= self.current_ground_y:
            self.player_y = self.current_ground_y
            self.velocity_y = 0.0
            self.jumping = False
            self.angle = 0.0

    def tick(self) -> None:
        """Advance the game by one frame."""
        if self.in_menu:
            self._scroll_background()
            self.animation_time += ANIMATION_STEP
            return

        self._advance_portal()

        for obstacle in self.level.obstacles:
            obstacle.x = _f32(obstacle.x - self.object_speed)
        for block in self.level.blocks:
            block.x = _f32(block.x - self.object_speed)

        self._check_spikes()

        if self.buffer_jump > 0:
            self.jump()
            self.buffer_jump -= 1

        self._check_blocks()

        if not self.on_block and not self.jumping and self.current_ground_y != GROUND_Y:
            self.jumping = True
            self.velocity_y = 0.0

        self._scroll_background()

        if self.jumping:
            self._apply_motion()