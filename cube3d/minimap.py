"""The small overhead map drawn in the corner of the frame."""

from __future__ import annotations

from collections.abc import Sequence

from cube3d.game import HEIGHT, WIDTH, Player
from cube3d.image import Image

MINIMAP_SCALE = 0.2
MARGIN = 10
PLAYER_COLOR = 0xFF0000
FLOOR_COLOR = 0xFFFFFF
WALL_COLOR = 0x0FFFA0


def _cell_size(minimap: Image, grid: Sequence[str]) -> tuple[int, int]:
    return minimap.width // len(grid[0]), minimap.height // len(grid)


def create_minimap(grid: Sequence[str]) -> Image:
    """Make an image a fifth of the screen, sized to a whole number of cells.

    Raises ValueError for an empty grid or one too large to show.
    """
    if not grid or not grid[0]:
        raise ValueError("cannot draw a minimap of an empty map")
    columns = len(grid[0])
    rows = len(grid)
    width = int((WIDTH * MINIMAP_SCALE) / columns) * columns
    height = int((HEIGHT * MINIMAP_SCALE) / rows) * rows
    if width <= 0 or height <= 0:
        raise ValueError(f"map of {rows}x{columns} cells is too large for the minimap")
    return Image(width, height)


def draw_minimap(minimap: Image, grid: Sequence[str], player: Player) -> None:
    """Paint every cell: the player red, floor white, everything else green."""
    cell_w, cell_h = _cell_size(minimap, grid)
    player_row = int(player.pos_x)
    player_col = int(player.pos_y)
    for row, line in enumerate(grid):
        top = row * cell_h
        for col, cell in enumerate(line):
            if row == player_row and col == player_col:
                color = PLAYER_COLOR
            elif cell == "0":
                color = FLOOR_COLOR
            else:
                color = WALL_COLOR
            left = col * cell_w
            for y in range(top, top + cell_h):
                for x in range(left, left + cell_w):
                    minimap.put_pixel(x, y, color)


def blit_minimap(frame: Image, minimap: Image) -> None:
    """Copy the minimap onto the frame, just off its top-left corner."""
    frame.paste(minimap, MARGIN, MARGIN)