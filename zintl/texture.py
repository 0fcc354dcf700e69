"""A growing RGBA texture atlas that packs images row by row."""

from __future__ import annotations

from typing import Any

from zintl.units import PhysicalPixels, PhysicalPixelsPoint, PhysicalPixelsRect


def _physical(value: Any) -> PhysicalPixels:
    return value if isinstance(value, PhysicalPixels) else PhysicalPixels(value)


class Atlas:
    """RGBA pixel storage into which images are allocated left to right, top to bottom."""

    def __init__(self, initial_width: Any, initial_height: Any) -> None:
        self.width = _physical(initial_width)
        self.height = _physical(initial_height)
        self._cursor = PhysicalPixelsPoint(0, 0)
        self._row_height = PhysicalPixels.zero()
        self._pixels = bytearray((self.width * self.height * 4).value())

    def resize_pixels(self, new_height: Any) -> None:
        """Grow the atlas to `new_height` rows; never shrinks it."""
        new_height = _physical(new_height)
        if new_height > self.height:
            new_size = (self.width * new_height * 4).value()
            self._pixels.extend(bytes(new_size - len(self._pixels)))
            self.height = new_height

    def create_image(
        self, width: Any, height: Any
    ) -> tuple[PhysicalPixelsRect, PhysicalPixels, bytearray]:
        """Reserve a `width` x `height` region.

        Returns the region's pixel bounds, the atlas width and the writable
        pixel buffer.
        """
        width = _physical(width)
        height = _physical(height)
        cursor_x, cursor_y = self._cursor.x, self._cursor.y

        if cursor_x + width > self.width:
            cursor_x = PhysicalPixels.zero()
            cursor_y = cursor_y + self._row_height
            self._row_height = PhysicalPixels.zero()

        self._row_height = self._row_height.max(height)
        self.resize_pixels(cursor_y + self._row_height)

        pos = PhysicalPixelsPoint(cursor_x, cursor_y)
        self._cursor = PhysicalPixelsPoint(cursor_x + width, cursor_y)

        bounds = PhysicalPixelsRect(pos, PhysicalPixelsPoint(pos.x + width, pos.y + height))
        return bounds, self.width, self._pixels

    @property
    def pixel_buffer(self) -> bytearray:
        """The live, writable pixel data."""
        return self._pixels

    def pixels(self) -> bytes:
        """A copy of the pixel data."""
        return bytes(self._pixels)