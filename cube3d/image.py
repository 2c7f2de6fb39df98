"""In-memory 32-bit images used for textures, the frame and the minimap."""

from __future__ import annotations

import struct

BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8
_MASK = 0xFFFFFFFF


class Image:
    """A grid of 32-bit ``0xAARRGGBB`` pixels, black when created.

    Writes outside the grid are ignored and reads outside it give 0.
    """

    __slots__ = ("width", "height", "_pixels")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    @property
    def bpp(self) -> int:
        """Bits used by one pixel."""
        return BITS_PER_PIXEL

    @property
    def size_line(self) -> int:
        """Bytes in one row of the raw pixel data."""
        return self.width * _BYTES_PER_PIXEL

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & _MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return one pixel, or 0 for coordinates outside the image."""
        if not self._inside(x, y):
            return 0
        return self._pixels[y * self.width + x]

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self._pixels = [color & _MASK] * (self.width * self.height)

    def paste(self, other: Image, x: int, y: int) -> None:
        """Copy ``other`` with its top-left corner at ``(x, y)``, clipped."""
        first = max(0, -x)
        last = min(other.width, self.width - x)
        if first >= last:
            return
        for row in range(other.height):
            target_row = y + row
            if not 0 <= target_row < self.height:
                continue
            src = row * other.width
            dst = target_row * self.width + x
            self._pixels[dst + first:dst + last] = other._pixels[src + first:src + last]

    def to_bytes(self) -> bytes:
        """Return the pixels row by row, each as 4 little-endian bytes (B, G, R, A)."""
        return struct.pack(f"<{len(self._pixels)}I", *self._pixels)