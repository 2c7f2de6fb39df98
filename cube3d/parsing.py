"""Reading of ``.cub`` scene files: textures, colours and the map."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from cube3d.image import Image
from cube3d.pathfinding import check_map
from cube3d.xpm import read_xpm

EXTENSION = ".cub"
SPAWN_DIRECTIONS = "NSWE"

_WHITESPACE = "\t\n\v\f\r "
_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_KEYS = {"F": "floor", "C": "sky"}
_HEADER_KEYS = tuple(_TEXTURE_KEYS) + tuple(_COLOR_KEYS)
_DIGITS = re.compile(r"[0-9]*")
_SEPARATORS = re.compile(r"[ ,]*")

TextureLoader = Callable[[str], Image]


class ParseError(ValueError):
    """Raised when a scene file cannot be used."""


@dataclass
class Scene:
    """Everything a scene file describes, ready for the game."""

    grid: list[str]
    north: Image
    south: Image
    west: Image
    east: Image
    floor: int
    sky: int
    spawn_x: int
    spawn_y: int
    spawn_dir: str


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the non-empty lines of a file, without their newlines."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise ParseError(f"Wrong path: {path}") from exc
    return [line for line in raw.decode("latin-1").split("\n") if line]


def parse_rgb(text: str) -> int:
    """Turn ``"R,G,B"`` into ``0xRRGGBB``; each part must be 0 to 255.

    Spaces may follow a comma; anything else after a number is an error.
    """
    result = 0
    pos = 0
    while pos < len(text):
        digits = _DIGITS.match(text, pos)
        value = int(digits.group() or "0")
        pos = digits.end()
        if value > 255 or (pos < len(text) and text[pos] != ","):
            raise ParseError(f"invalid colour: {text!r}")
        result = result * 256 + value
        pos = _SEPARATORS.match(text, pos).end()
    return result


def skip_spaces(text: str, start: int) -> int:
    """Return the index of the first non-whitespace character at or after ``start``."""
    if start >= len(text):
        return start
    rest = text[start:]
    return start + len(rest) - len(rest.lstrip(_WHITESPACE))


def pad_map(lines: Sequence[str]) -> list[str]:
    """Pad every line with spaces to the length of the longest one."""
    width = max((len(line) for line in lines), default=0)
    return [line.ljust(width) for line in lines]


def find_spawn(grid: Sequence[str]) -> tuple[int, int, str]:
    """Return ``(row, column, direction)`` of the last spawn letter in the grid."""
    found = None
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell in SPAWN_DIRECTIONS:
                found = (row, col, cell)
    if found is None:
        raise ParseError("the map has no spawn point")
    return found


def _header_key(line: str) -> str | None:
    return next((key for key in _HEADER_KEYS if line.startswith(key)), None)


def parse_scene(
    path: str | PathLike[str],
    texture_loader: TextureLoader = read_xpm,
) -> Scene:
    """Read and check a scene file; raises ParseError if it is unusable."""
    if not os.fspath(path).endswith(EXTENSION):
        raise ParseError('Path doesn\'t have ".cub" extension')
    lines = read_lines(path)

    map_start = next(
        (index for index, line in enumerate(lines) if _header_key(line) is None),
        len(lines),
    )
    textures: dict[str, Image | None] = dict.fromkeys(_TEXTURE_KEYS.values())
    colors: dict[str, int | None] = dict.fromkeys(_COLOR_KEYS.values())
    for line in lines[:map_start]:
        key = _header_key(line)
        value = line[skip_spaces(line, len(key)):]
        if key in _TEXTURE_KEYS:
            try:
                textures[_TEXTURE_KEYS[key]] = texture_loader(value)
            except (OSError, ValueError):
                textures[_TEXTURE_KEYS[key]] = None
        else:
            try:
                colors[_COLOR_KEYS[key]] = parse_rgb(value)
            except ParseError:
                colors[_COLOR_KEYS[key]] = None

    grid = pad_map(lines[map_start:])
    missing = [name for name, value in {**textures, **colors}.items() if value is None]
    if missing:
        raise ParseError(f"Something went wrong: missing or invalid {', '.join(missing)}")
    try:
        enclosed = check_map(grid)
    except ValueError as exc:
        raise ParseError(f"Something went wrong: {exc}") from exc
    if not enclosed:
        raise ParseError("Something went wrong: the map is not closed")

    row, col, direction = find_spawn(grid)
    grid[row] = grid[row][:col] + "0" + grid[row][col + 1:]
    return Scene(
        grid=grid,
        north=textures["north"],
        south=textures["south"],
        west=textures["west"],
        east=textures["east"],
        floor=colors["floor"],
        sky=colors["sky"],
        spawn_x=row,
        spawn_y=col,
        spawn_dir=direction,
    )