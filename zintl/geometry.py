"""Viewports, scale factors, alignment and normalised texture coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from zintl.units import (
    LogicalPixelsPoint,
    LogicalPixelsRect,
    LogicalPixelsSize,
    PhysicalPixels,
    PhysicalPixelsFPoint,
    PhysicalPixelsPoint,
    PhysicalPixelsRect,
    PhysicalPixelsSize,
)


def _physical(value: Any) -> PhysicalPixels:
    return value if isinstance(value, PhysicalPixels) else PhysicalPixels(value)


class ScaleFactor:
    """Dots per inch and device pixel ratio of a display."""

    __slots__ = ("_dpi", "_dpr")

    def __init__(self, dpi: float, dpr: float) -> None:
        if not dpi > 0.0:
            raise ValueError("DPI must be greater than 0")
        if not dpr > 0.0:
            raise ValueError("DPR must be greater than 0")
        self._dpi = float(dpi)
        self._dpr = float(dpr)

    def dpi(self) -> float:
        return self._dpi

    def dpr(self) -> float:
        return self._dpr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScaleFactor):
            return NotImplemented
        return (self._dpi, self._dpr) == (other._dpi, other._dpr)

    def __hash__(self) -> int:
        return hash((self._dpi, self._dpr))

    def __repr__(self) -> str:
        return f"ScaleFactor(dpi={self._dpi!r}, dpr={self._dpr!r})"


@dataclass
class Viewport:
    """The drawable area of a device, in physical pixels."""

    device_width: PhysicalPixels
    device_height: PhysicalPixels
    scale_factor: ScaleFactor
    rect: PhysicalPixelsRect

    @classmethod
    def create(cls, device_width: Any, device_height: Any, scale_factor: ScaleFactor) -> Viewport:
        width = _physical(device_width)
        height = _physical(device_height)
        rect = PhysicalPixelsRect.with_size(
            PhysicalPixelsPoint(0, 0), PhysicalPixelsSize(width, height)
        )
        return cls(width, height, scale_factor, rect)


class Alignment(Enum):
    """Where a box sits inside its bounds."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    CENTER = "center"
    CENTER_LEFT = "center_left"
    CENTER_RIGHT = "center_right"
    CENTER_TOP = "center_top"
    CENTER_BOTTOM = "center_bottom"

    def align_size(self, bounds: LogicalPixelsRect, size: LogicalPixelsSize) -> LogicalPixelsRect:
        """Place a box of `size` inside `bounds` according to this alignment."""
        x = bounds.min.x
        y = bounds.min.y
        free_x = bounds.width() - size.width
        free_y = bounds.height() - size.height
        half_x = free_x.checked_div_value(2.0)
        half_y = free_y.checked_div_value(2.0)

        if self is Alignment.TOP_RIGHT:
            x += free_x
        elif self is Alignment.BOTTOM_LEFT:
            y += free_y
        elif self is Alignment.BOTTOM_RIGHT:
            x += free_x
            y += free_y
        elif self is Alignment.CENTER:
            x += half_x
            y += half_y
        elif self is Alignment.CENTER_LEFT:
            y += half_y
        elif self is Alignment.CENTER_RIGHT:
            x += free_x
            y += half_y
        elif self is Alignment.CENTER_TOP:
            x += half_x
        elif self is Alignment.CENTER_BOTTOM:
            x += half_x
            y += free_y

        return LogicalPixelsRect.with_size(LogicalPixelsPoint(x, y), size)


@dataclass(frozen=True)
class TexturePoint:
    """A texture coordinate, nominally in the range [0.0, 1.0] on both axes."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_physical_point(
        cls, point: PhysicalPixelsPoint, texture_size: PhysicalPixelsSize
    ) -> Optional[TexturePoint]:
        """Normalise a pixel position by the texture size; None for an empty dimension."""
        fpoint = point.cast(PhysicalPixelsFPoint)
        x = fpoint.x.checked_div_value(float(texture_size.width.value()))
        if x is None:
            return None
        y = fpoint.y.checked_div_value(float(texture_size.height.value()))
        if y is None:
            return None
        return cls(x.value(), y.value())


@dataclass(frozen=True)
class TextureBounds:
    """A normalised rectangle in a texture."""

    min: TexturePoint = field(default_factory=TexturePoint)
    max: TexturePoint = field(default_factory=TexturePoint)

    @classmethod
    def from_physical_rect(
        cls, rect: PhysicalPixelsRect, texture_size: PhysicalPixelsSize
    ) -> Optional[TextureBounds]:
        low = TexturePoint.from_physical_point(rect.min, texture_size)
        if low is None:
            return None
        high = TexturePoint.from_physical_point(rect.max, texture_size)
        if high is None:
            return None
        return cls(low, high)