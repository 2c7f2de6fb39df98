"""Reading of XPM pixmap files into :class:`~cube3d.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike

from cube3d.colors import lookup_color
from cube3d.image import Image

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9a-fA-F]+")


class XpmError(ValueError):
    """Raised when an XPM image cannot be read."""


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comments(chars: list[str], opener: str, closer: str) -> None:
    size = len(chars)
    in_quote = False
    i = 0
    while i <= size - len(opener):
        char = chars[i]
        if char == '"':
            in_quote = not in_quote
        elif not in_quote and "".join(chars[i:i + len(opener)]) == opener:
            rest = "".join(chars[i + len(opener):])
            found = rest.find(closer)
            stop = size if found == -1 else i + len(opener) + found + len(closer)
            chars[i:stop] = " " * (stop - i)
            i = stop
            continue
        i += 1


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings by spaces, keeping the length."""
    chars = list(text)
    _blank_comments(chars, "/*", "*/")
    _blank_comments(chars, "//", "\n")
    return "".join(chars)


def quoted_lines(text: str) -> list[str]:
    """Return the contents of the double-quoted strings, in order."""
    return _QUOTED.findall(text)


def text_to_rgb(name: str, suffix: str | None = None) -> int:
    """Turn a colour spec into 0xRRGGBB; ``none`` gives -1, unknown names 0.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``suffix``, when given,
    is joined to ``name`` with a space before the name is looked up.
    """
    if name.startswith("#"):
        digits = _LEADING_HEX.match(name, 1)
        return int(digits.group(), 16) if digits else 0
    if suffix is not None:
        name = f"{name} {suffix}"[:63]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    values = [_atoi(word) for word in words[:4]]
    if len(values) < 4 or 0 in values:
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, colors, chars_per_pixel = values
    if width < 0 or height < 0 or colors < 0 or chars_per_pixel < 0:
        raise XpmError(f"bad XPM header: {line!r}")
    return width, height, colors, chars_per_pixel


def _colour_spec(line: str, chars_per_pixel: int) -> int:
    words = split_words(line[chars_per_pixel:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return text_to_rgb(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM file (header, colours, rows)."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before the {what}") from None

    width, height, color_count, cpp = _read_header(next_line("header"))
    palette: dict[str, int] = {}
    for _ in range(color_count):
        line = next_line("colour table ends")
        rgb = _colour_spec(line, cpp)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        row = next_line("last pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def read_xpm(path: str | PathLike[str]) -> Image:
    """Read an XPM file from disk; raises XpmError if it cannot be used."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))