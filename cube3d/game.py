"""Player state, key handling and movement rules of the game."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from cube3d.pathfinding import WALL

WIDTH = 1280
HEIGHT = 720
MOUSE_SPEED = 0.01
MOVE_SPEED = 0.04
ROTATION_SPEED = 0.02
PLANE = 0.66
CROUCH_DEPTH = 50
JUMP_LENGTH = 2 * 18

# Jump height reached at given frames of a jump.
_JUMP_HEIGHTS = {
    2 * 2: 2 * 35,
    2 * 4: 2 * 70,
    2 * 6: 2 * 110,
    2 * 8: 2 * 150,
    2 * 10: 2 * 150,
    2 * 12: 2 * 110,
    2 * 13: 2 * 55,
    2 * 16: 0,
}


class Key(IntEnum):
    """Key symbols the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    RIGHT = 65363
    LEFT = 65361
    SHIFT = 65505
    SPACE = 32
    CTRL = 65507
    TAB = 65289


_KEY_FIELDS = {
    Key.ESC: "escape",
    Key.W: "forward",
    Key.A: "left",
    Key.S: "backward",
    Key.D: "right",
    Key.RIGHT: "turn_right",
    Key.LEFT: "turn_left",
    Key.SPACE: "jump",
    Key.SHIFT: "crouch",
    Key.CTRL: "sprint",
    Key.TAB: "pause",
}


def _field_for(key: int) -> str | None:
    try:
        return _KEY_FIELDS[Key(key)]
    except ValueError:
        return None


@dataclass
class Keys:
    """Which of the game's keys are currently held."""

    escape: bool = False
    forward: bool = False
    left: bool = False
    backward: bool = False
    right: bool = False
    turn_right: bool = False
    turn_left: bool = False
    jump: bool = False
    crouch: bool = False
    sprint: bool = False
    pause: bool = False

    def press(self, key: int) -> None:
        """Record a key press; crouching cannot start during a jump."""
        name = _field_for(key)
        if name is None or (name == "crouch" and self.jump):
            return
        setattr(self, name, True)

    def release(self, key: int) -> None:
        """Record a key release; escape and jump are not cleared this way."""
        name = _field_for(key)
        if name is None or name in ("escape", "jump"):
            return
        setattr(self, name, False)


@dataclass
class Player:
    """Position, viewing direction and camera plane of the player."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    rot_speed: float = 0.0

    def rotate(self, angle: float) -> None:
        """Turn the direction and camera plane by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )


def blocked_x(grid: Sequence[str], player: Player, x: float, y: float) -> bool:
    """Return True if moving along the row axis to ``x`` runs into a wall."""
    if player.pos_x < x:
        return grid[int(x + 0.1)][int(y)] == WALL
    if player.pos_x > x:
        return grid[int(x - 0.1)][int(y)] == WALL
    return False


def blocked_y(grid: Sequence[str], player: Player, x: float, y: float) -> bool:
    """Return True if moving along the column axis to ``y`` runs into a wall."""
    if player.pos_y < y:
        return grid[int(x)][int(y + 0.1)] == WALL
    if player.pos_y > y:
        return grid[int(x)][int(y - 0.1)] == WALL
    return False


_SPAWN_VIEWS = {
    "N": (-1.0, 0.0, 0.0, PLANE),
    "S": (1.0, 0.0, 0.0, -PLANE),
    "E": (0.0, 1.0, PLANE, 0.0),
    "W": (0.0, -1.0, -PLANE, 0.0),
}


def spawn_player(x: int, y: int, direction: str) -> Player:
    """Place a player in the middle of cell (row ``x``, column ``y``)."""
    try:
        dir_x, dir_y, plane_x, plane_y = _SPAWN_VIEWS[direction]
    except KeyError:
        raise ValueError(f"unknown spawn direction {direction!r}") from None
    return Player(
        pos_x=x + 0.5,
        pos_y=y + 0.5,
        dir_x=dir_x,
        dir_y=dir_y,
        plane_x=plane_x,
        plane_y=plane_y,
        rot_speed=ROTATION_SPEED,
    )


@dataclass
class GameState:
    """Everything that changes from one frame to the next."""

    grid: list[str]
    player: Player
    keys: Keys = field(default_factory=Keys)
    speed: float = 1.0
    jump_offset: int = 0
    jump_frame: int = 0
    paused: bool = False
    running: bool = True

    def _move(self, dx: float, dy: float) -> None:
        player = self.player
        distance = MOVE_SPEED * self.speed
        new_x = player.pos_x + dx * distance
        new_y = player.pos_y + dy * distance
        if not blocked_x(self.grid, player, new_x, player.pos_y):
            player.pos_x = new_x
        if not blocked_y(self.grid, player, player.pos_x, new_y):
            player.pos_y = new_y

    def walk(self, backward: bool = False) -> None:
        """Step along the viewing direction, or against it."""
        sign = -1.0 if backward else 1.0
        self._move(sign * self.player.dir_x, sign * self.player.dir_y)

    def strafe(self, left: bool = False) -> None:
        """Step sideways along the camera plane."""
        sign = -1.0 if left else 1.0
        self._move(sign * self.player.plane_x, sign * self.player.plane_y)

    def jump(self) -> None:
        """Start a jump unless one is already under way."""
        if self.jump_frame == 0:
            self.jump_frame = 1

    def crouch(self) -> None:
        """Lower the view, once."""
        if self.jump_offset > -CROUCH_DEPTH:
            self.jump_offset -= CROUCH_DEPTH

    def update_speed(self) -> None:
        """Pick the movement speed from the sprint and crouch keys."""
        if self.keys.sprint:
            self.speed = 2.0
        elif self.keys.crouch:
            self.speed = 0.5
        else:
            self.speed = 1.0

    def advance_jump(self) -> None:
        """Move a running jump on by one frame."""
        if self.jump_frame in _JUMP_HEIGHTS:
            self.jump_offset = _JUMP_HEIGHTS[self.jump_frame]
        if self.jump_frame:
            self.jump_frame += 1
            if self.jump_frame == JUMP_LENGTH:
                self.jump_frame = 0
                self.keys.jump = False

    def apply_keys(self) -> None:
        """Act on the held keys; escape stops the game at once."""
        keys = self.keys
        if keys.escape:
            self.running = False
            return
        if keys.forward:
            self.walk()
        if keys.left:
            self.strafe(left=True)
        if keys.backward:
            self.walk(backward=True)
        if keys.right:
            self.strafe()
        if keys.turn_right:
            self.player.rotate(-self.player.rot_speed)
        if keys.turn_left:
            self.player.rotate(self.player.rot_speed)
        if keys.jump:
            self.jump()
        if keys.crouch and not keys.jump:
            self.crouch()
        if not keys.crouch and not keys.jump:
            self.jump_offset = 0
        self.paused = keys.pause
        self.update_speed()