"""A small two-component float vector."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, ClassVar, Optional


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]
    X_AXIS: ClassVar[Vec2]
    Y_AXIS: ClassVar[Vec2]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_tuple(cls, values: Any) -> Vec2:
        x, y = values
        return cls(float(x), float(y))

    def checked_div(self, other: Vec2) -> Optional[Vec2]:
        """Divide component-wise; None when any component of `other` is zero."""
        if other.x == 0.0 or other.y == 0.0:
            return None
        return Vec2(self.x / other.x, self.y / other.y)

    def checked_div_scalar(self, scalar: float) -> Optional[Vec2]:
        if scalar == 0.0:
            return None
        return Vec2(self.x / scalar, self.y / scalar)

    def min(self, other: Vec2) -> Vec2:
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: Vec2) -> Vec2:
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def __add__(self, other: Any) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: Any) -> Vec2:
        if isinstance(scalar, bool) or not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.X_AXIS = Vec2(1.0, 0.0)
Vec2.Y_AXIS = Vec2(0.0, 1.0)