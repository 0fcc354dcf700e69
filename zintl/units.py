"""Typed pixel units and the points, sizes and rectangles built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from numbers import Integral, Real
from typing import Any, ClassVar, Iterator, Optional, Protocol

U32_MAX = 2**32 - 1


class SupportsDpr(Protocol):
    """Anything that reports a device pixel ratio."""

    def dpr(self) -> float: ...


def _round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _saturate_u32(x: float) -> int:
    """Convert a float to an unsigned 32-bit integer, clamping out-of-range values."""
    if math.isnan(x) or x <= 0:
        return 0
    if x >= U32_MAX:
        return U32_MAX
    return int(x)


@total_ordering
class Unit:
    """A scalar measured in one particular kind of pixel."""

    __slots__ = ("_value",)

    _integral: ClassVar[bool] = False
    point_type: ClassVar[type[Point]]
    size_type: ClassVar[type[Size]]
    rect_type: ClassVar[type[Rect]]

    def __init__(self, value: Any = 0) -> None:
        self._value = self._normalise(value)

    @classmethod
    def _normalise(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"{cls.__name__} needs a number, got {value!r}")
        if cls._integral:
            if not isinstance(value, Integral):
                raise TypeError(f"{cls.__name__} needs an integer, got {value!r}")
            value = int(value)
            if not 0 <= value <= U32_MAX:
                raise OverflowError(f"{cls.__name__} value {value} out of range")
            return value
        return float(value)

    @classmethod
    def _coerce(cls, value: Any) -> Unit:
        if isinstance(value, cls):
            return value
        if isinstance(value, Unit):
            raise TypeError(f"cannot use {type(value).__name__} as {cls.__name__}")
        return cls(value)

    def _operand(self, other: Any) -> Any:
        """Return the raw value of a compatible operand, or None."""
        if type(other) is type(self):
            return other._value
        if isinstance(other, Unit) or isinstance(other, bool) or not isinstance(other, Real):
            return None
        if self._integral and not isinstance(other, Integral):
            return None
        return other

    def _require(self, other: Any) -> Any:
        raw = self._operand(other)
        if raw is None:
            raise TypeError(f"incompatible operand for {type(self).__name__}: {other!r}")
        return raw

    def _divide(self, a: Any, b: Any) -> Any:
        return a // b if self._integral else a / b

    def _remainder(self, a: Any, b: Any) -> Any:
        return a % b if self._integral else math.fmod(a, b)

    @classmethod
    def zero(cls) -> Unit:
        return cls(0)

    def is_zero(self) -> bool:
        return self._value == 0

    def value(self) -> Any:
        return self._value

    def checked_div(self, other: Unit) -> Optional[Unit]:
        """Divide by another unit of the same kind; None when dividing by zero."""
        if type(other) is not type(self):
            raise TypeError(f"incompatible operand for {type(self).__name__}: {other!r}")
        return self.checked_div_value(other._value)

    def checked_div_value(self, other: Any) -> Optional[Unit]:
        """Divide by a raw number; None when dividing by zero."""
        raw = self._require(other)
        if raw == 0:
            return None
        return type(self)(self._divide(self._value, raw))

    def checked_rem(self, other: Unit) -> Optional[Unit]:
        if type(other) is not type(self):
            raise TypeError(f"incompatible operand for {type(self).__name__}: {other!r}")
        return self.checked_rem_value(other._value)

    def checked_rem_value(self, other: Any) -> Optional[Unit]:
        raw = self._require(other)
        if raw == 0:
            return None
        return type(self)(self._remainder(self._value, raw))

    def max(self, other: Unit) -> Unit:
        if type(other) is not type(self):
            raise TypeError(f"incompatible operand for {type(self).__name__}: {other!r}")
        return type(self)(max(self._value, other._value))

    def min(self, other: Unit) -> Unit:
        if type(other) is not type(self):
            raise TypeError(f"incompatible operand for {type(self).__name__}: {other!r}")
        return type(self)(min(self._value, other._value))

    def __add__(self, other: Any) -> Unit:
        raw = self._operand(other)
        if raw is None:
            return NotImplemented
        return type(self)(self._value + raw)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Unit:
        raw = self._operand(other)
        if raw is None:
            return NotImplemented
        return type(self)(self._value - raw)

    def __rsub__(self, other: Any) -> Unit:
        raw = self._operand(other)
        if raw is None:
            return NotImplemented
        return type(self)(raw - self._value)

    def __mul__(self, other: Any) -> Unit:
        raw = self._operand(other)
        if raw is None:
            return NotImplemented
        return type(self)(self._value * raw)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class PhysicalPixels(Unit):
    """Whole device pixels (unsigned 32-bit)."""

    __slots__ = ()
    _integral = True

    def to_float(self) -> PhysicalPixelsF:
        return PhysicalPixelsF(float(self._value))

    def in_logical_scale(self, scale_factor: SupportsDpr) -> LogicalPixels:
        return LogicalPixels(_round_half_away(self._value / scale_factor.dpr()))


class PhysicalPixelsF(Unit):
    """Fractional device pixels."""

    __slots__ = ()

    def to_rounded(self) -> PhysicalPixels:
        return PhysicalPixels(_saturate_u32(_round_half_away(self._value)))

    def in_logical_scale(self, scale_factor: SupportsDpr) -> LogicalPixels:
        return LogicalPixels(_round_half_away(self._value / scale_factor.dpr()))


class LogicalPixels(Unit):
    """Device-independent pixels."""

    __slots__ = ()

    def in_physical_scale(self, scale_factor: SupportsDpr) -> PhysicalPixels:
        return PhysicalPixels(_saturate_u32(_round_half_away(self._value * scale_factor.dpr())))

    def in_physical_f_scale(self, scale_factor: SupportsDpr) -> PhysicalPixelsF:
        return PhysicalPixelsF(_round_half_away(self._value * scale_factor.dpr()))


def _cast_unit(value: Unit, unit_type: type[Unit]) -> Unit:
    if isinstance(value, unit_type):
        return value
    if isinstance(value, PhysicalPixels) and unit_type is PhysicalPixelsF:
        return value.to_float()
    if isinstance(value, PhysicalPixelsF) and unit_type is PhysicalPixels:
        return value.to_rounded()
    raise TypeError(f"cannot convert {type(value).__name__} to {unit_type.__name__}")


def _scale_unit(value: Unit, method: str, scale_factor: SupportsDpr) -> Unit:
    convert = getattr(value, method, None)
    if convert is None:
        raise TypeError(f"{type(value).__name__} does not support {method}")
    return convert(scale_factor)


@dataclass(frozen=True)
class Point:
    """A two-dimensional point in one unit."""

    x: Unit
    y: Unit

    unit: ClassVar[type[Unit]] = Unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.unit._coerce(self.x))
        object.__setattr__(self, "y", self.unit._coerce(self.y))

    @classmethod
    def zero(cls) -> Point:
        return cls(cls.unit.zero(), cls.unit.zero())

    @classmethod
    def from_tuple(cls, values: Any) -> Point:
        x, y = values
        return cls(x, y)

    def to_tuple(self) -> tuple[Any, Any]:
        return (self.x.value(), self.y.value())

    def __iter__(self) -> Iterator[Unit]:
        yield self.x
        yield self.y

    def distance(self, other: Point) -> float:
        return math.hypot(
            float(self.x.value()) - float(other.x.value()),
            float(self.y.value()) - float(other.y.value()),
        )

    def checked_div(self, other: Point) -> Optional[Point]:
        """Divide component-wise; None when any component of `other` is zero."""
        if type(other) is not type(self):
            raise TypeError(f"incompatible operand for {type(self).__name__}: {other!r}")
        if other.x.is_zero() or other.y.is_zero():
            return None
        return type(self)(self.x.checked_div(other.x), self.y.checked_div(other.y))

    def cast(self, point_type: type[Point]) -> Point:
        return point_type(_cast_unit(self.x, point_type.unit), _cast_unit(self.y, point_type.unit))

    def _scaled(self, method: str, scale_factor: SupportsDpr) -> Point:
        x = _scale_unit(self.x, method, scale_factor)
        y = _scale_unit(self.y, method, scale_factor)
        return type(x).point_type(x, y)

    def in_physical_scale(self, scale_factor: SupportsDpr) -> Point:
        return self._scaled("in_physical_scale", scale_factor)

    def in_physical_f_scale(self, scale_factor: SupportsDpr) -> Point:
        return self._scaled("in_physical_f_scale", scale_factor)

    def in_logical_scale(self, scale_factor: SupportsDpr) -> Point:
        return self._scaled("in_logical_scale", scale_factor)

    def __add__(self, other: Any) -> Point:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Any) -> Point:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Any) -> Point:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x * other.x, self.y * other.y)


@dataclass(frozen=True)
class Size:
    """A width and height in one unit."""

    width: Unit
    height: Unit

    unit: ClassVar[type[Unit]] = Unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", self.unit._coerce(self.width))
        object.__setattr__(self, "height", self.unit._coerce(self.height))

    @classmethod
    def zero(cls) -> Size:
        return cls(cls.unit.zero(), cls.unit.zero())

    def is_zero(self) -> bool:
        return self.width.is_zero() and self.height.is_zero()

    def area(self) -> Any:
        return (self.width * self.height).value()

    def cast(self, size_type: type[Size]) -> Size:
        return size_type(
            _cast_unit(self.width, size_type.unit), _cast_unit(self.height, size_type.unit)
        )

    def _scaled(self, method: str, scale_factor: SupportsDpr) -> Size:
        width = _scale_unit(self.width, method, scale_factor)
        height = _scale_unit(self.height, method, scale_factor)
        return type(width).size_type(width, height)

    def in_physical_scale(self, scale_factor: SupportsDpr) -> Size:
        return self._scaled("in_physical_scale", scale_factor)

    def in_physical_f_scale(self, scale_factor: SupportsDpr) -> Size:
        return self._scaled("in_physical_f_scale", scale_factor)

    def in_logical_scale(self, scale_factor: SupportsDpr) -> Size:
        return self._scaled("in_logical_scale", scale_factor)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Point
    max: Point

    point_type: ClassVar[type[Point]] = Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", self._coerce_point(self.min))
        object.__setattr__(self, "max", self._coerce_point(self.max))

    @classmethod
    def _coerce_point(cls, value: Any) -> Point:
        if isinstance(value, cls.point_type):
            return value
        if isinstance(value, Point):
            raise TypeError(f"cannot use {type(value).__name__} in {cls.__name__}")
        return cls.point_type.from_tuple(value)

    @classmethod
    def with_size(cls, min: Any, size: Any) -> Rect:
        origin = cls._coerce_point(min)
        if not isinstance(size, Size):
            size = cls.point_type.unit.size_type(*size)
        return cls(origin, cls.point_type(origin.x + size.width, origin.y + size.height))

    @classmethod
    def zero(cls) -> Rect:
        return cls(cls.point_type.zero(), cls.point_type.zero())

    def width(self) -> Unit:
        return self.max.x - self.min.x

    def height(self) -> Unit:
        return self.max.y - self.min.y

    def checked_div(self, other: Rect) -> Optional[Rect]:
        """Divide corner-wise; None when any coordinate of `other` is zero."""
        if type(other) is not type(self):
            raise TypeError(f"incompatible operand for {type(self).__name__}: {other!r}")
        if any(c.is_zero() for c in (*other.min, *other.max)):
            return None
        return type(self)(self.min.checked_div(other.min), self.max.checked_div(other.max))

    def center(self) -> Point:
        return self.point_type(
            (self.min.x + self.max.x).checked_div_value(2),
            (self.min.y + self.max.y).checked_div_value(2),
        )

    def _scaled(self, method: str, scale_factor: SupportsDpr) -> Rect:
        low = self.min._scaled(method, scale_factor)
        high = self.max._scaled(method, scale_factor)
        return low.unit.rect_type(low, high)

    def in_physical_scale(self, scale_factor: SupportsDpr) -> Rect:
        return self._scaled("in_physical_scale", scale_factor)

    def in_physical_f_scale(self, scale_factor: SupportsDpr) -> Rect:
        return self._scaled("in_physical_f_scale", scale_factor)

    def in_logical_scale(self, scale_factor: SupportsDpr) -> Rect:
        return self._scaled("in_logical_scale", scale_factor)


class PhysicalPixelsPoint(Point):
    unit = PhysicalPixels


class PhysicalPixelsFPoint(Point):
    unit = PhysicalPixelsF


class LogicalPixelsPoint(Point):
    unit = LogicalPixels


class PhysicalPixelsSize(Size):
    unit = PhysicalPixels


class PhysicalPixelsFSize(Size):
    unit = PhysicalPixelsF


class LogicalPixelsSize(Size):
    unit = LogicalPixels


class PhysicalPixelsRect(Rect):
    point_type = PhysicalPixelsPoint


class PhysicalPixelsFRect(Rect):
    point_type = PhysicalPixelsFPoint


class LogicalPixelsRect(Rect):
    point_type = LogicalPixelsPoint


for _unit, _point, _size, _rect in (
    (Unit, Point, Size, Rect),
    (PhysicalPixels, PhysicalPixelsPoint, PhysicalPixelsSize, PhysicalPixelsRect),
    (PhysicalPixelsF, PhysicalPixelsFPoint, PhysicalPixelsFSize, PhysicalPixelsFRect),
    (LogicalPixels, LogicalPixelsPoint, LogicalPixelsSize, LogicalPixelsRect),
):
    _unit.point_type = _point
    _unit.size_type = _size
    _unit.rect_type = _rect