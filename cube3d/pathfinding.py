"""Checks that the map of a scene is closed around the spawn point."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

WALL = "1"
REACHED = "X"
SPAWNS = "NSEW"
_PLAIN = "01 "

Grid = MutableSequence[MutableSequence[str]]


def mark_spawn(grid: Grid) -> int:
    """Mark every spawn letter as reached and return how many there were.

    Raises ValueError on a character that has no place in a map.
    """
    count = 0
    for row in grid:
        for col, cell in enumerate(row):
            if cell in _PLAIN:
                continue
            if cell not in SPAWNS:
                raise ValueError(f"invalid map character {cell!r}")
            row[col] = REACHED
            count += 1
    return count


def spread(grid: Grid, x: int, y: int) -> int:
    """Mark the open neighbours of column ``x``, row ``y``; return how many."""
    candidates = []
    if x + 1 < len(grid[y]):
        candidates.append((y, x + 1))
    if x - 1 >= 0:
        candidates.append((y, x - 1))
    if y + 1 < len(grid):
        candidates.append((y + 1, x))
    if y - 1 >= 0:
        candidates.append((y - 1, x))
    count = 0
    for row, col in candidates:
        if col < len(grid[row]) and grid[row][col] not in (WALL, REACHED):
            grid[row][col] = REACHED
            count += 1
    return count


def is_enclosed(grid: Sequence[Sequence[str]]) -> bool:
    """Return False if a reached cell lies on the border of the grid."""
    if not grid:
        return True
    if REACHED in grid[0] or REACHED in grid[-1]:
        return False
    return not any(row and REACHED in (row[0], row[-1]) for row in grid)


def check_map(grid: Sequence[str]) -> bool:
    """Return True if nothing reachable from the spawn touches the border.

    The given grid is left untouched. Raises ValueError unless the map holds
    exactly one spawn point and only known characters.
    """
    cells = [list(row) for row in grid]
    count = mark_spawn(cells)
    if count != 1:
        raise ValueError(f"expected exactly one spawn point, found {count}")
    changed = True
    while changed:
        changed = False
        for y, row in enumerate(cells):
            for x, cell in enumerate(row):
                if cell == REACHED and spread(cells, x, y):
                    changed = True
    return is_enclosed(cells)