"""Ray casting of the map and drawing of the wall columns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from cube3d.game import HEIGHT, WIDTH, GameState, Player
from cube3d.image import Image
from cube3d.parsing import Scene
from cube3d.pathfinding import WALL

INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and how far away it was."""

    map_x: int
    map_y: int
    side: int
    ray_dir_x: float
    ray_dir_y: float
    distance: float


class WallSlice(NamedTuple):
    """Projected height of a wall and the rows it covers on screen."""

    height: int
    start: int
    end: int


def cast_ray(grid: Sequence[str], player: Player, camera_x: float) -> RayHit:
    """Follow a ray through the grid until it meets a wall.

    ``camera_x`` runs from -1 (left edge of the view) to 1 (right edge).
    Raises ValueError if the ray leaves the map without hitting a wall.
    """
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x
    delta_x = INT_MAX if ray_dir_x == 0 else abs(1 / ray_dir_x)
    delta_y = INT_MAX if ray_dir_y == 0 else abs(1 / ray_dir_y)
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)

    if ray_dir_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1 - player.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1 - player.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not (0 <= map_x < len(grid) and 0 <= map_y < len(grid[map_x])):
            raise ValueError("ray left the map without meeting a wall")
        if grid[map_x][map_y] == WALL:
            break

    distance = side_x - delta_x if side == 0 else side_y - delta_y
    return RayHit(map_x, map_y, side, ray_dir_x, ray_dir_y, distance)


def wall_slice(hit: RayHit, jump: int) -> WallSlice:
    """Return the wall height and the first and last screen rows it covers."""
    distance = hit.distance
    ratio = HEIGHT / distance if distance > 0 else math.inf
    height = int(ratio) if ratio < INT_MAX + 1 else INT_MAX
    offset = jump / distance if distance else 0.0
    start = int(-(height // 2) + HEIGHT // 2 + offset)
    end = int(height // 2 + HEIGHT // 2 + offset)
    return WallSlice(height, max(start, 0), min(end, HEIGHT - 1))


def _texture_for(hit: RayHit, scene: Scene) -> Image:
    if hit.side == 1:
        return scene.west if hit.ray_dir_y < 0 else scene.east
    return scene.north if hit.ray_dir_x < 0 else scene.south


def render_column(frame: Image, scene: Scene, state: GameState, x: int) -> RayHit:
    """Draw sky, textured wall and floor for screen column ``x``."""
    player = state.player
    hit = cast_ray(scene.grid, player, 2 * x / WIDTH - 1)
    height, start, end = wall_slice(hit, state.jump_offset)
    texture = _texture_for(hit, scene)

    if hit.side == 0:
        wall_x = player.pos_y + hit.distance * hit.ray_dir_y
    else:
        wall_x = player.pos_x + hit.distance * hit.ray_dir_x
    wall_x -= math.floor(wall_x)
    text_x = int(wall_x * texture.width)
    if (hit.side == 0 and hit.ray_dir_x > 0) or (hit.side == 1 and hit.ray_dir_y < 0):
        text_x = texture.width - text_x - 1

    step = texture.height / height if height else 0.0
    offset = state.jump_offset / hit.distance if hit.distance else 0.0
    tex_pos = (start - offset - HEIGHT // 2 + height // 2) * step

    put = frame.put_pixel
    sample = texture.get_pixel
    for y in range(start):
        put(x, y, scene.sky)
    for y in range(start, end - 1):
        tex_pos += step
        put(x, y, sample(text_x, int(tex_pos)))
    for y in range(max(start, end - 1), HEIGHT - 1):
        put(x, y, scene.floor)
    return hit


def render_frame(frame: Image, scene: Scene, state: GameState) -> None:
    """Draw every column of the 3D view into ``frame``."""
    for x in range(WIDTH):
        render_column(frame, scene, state, x)