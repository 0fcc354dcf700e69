"""Fixed-size float matrices laid out for upload to the GPU."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Sequence


def _zeros(n: int) -> tuple[tuple[float, ...], ...]:
    return tuple((0.0,) * n for _ in range(n))


def _square(values: Any, n: int, name: str) -> tuple[tuple[float, ...], ...]:
    rows = tuple(tuple(float(v) for v in row) for row in values)
    if len(rows) != n or any(len(row) != n for row in rows):
        raise ValueError(f"{name} needs {n}x{n} values")
    return rows


@dataclass(frozen=True)
class Mat3:
    """A 3x3 float matrix; `m[i]` is the i-th column."""

    m: tuple[tuple[float, ...], ...] = field(default_factory=lambda: _zeros(3))

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _square(self.m, 3, "Mat3"))

    def to_bytes(self) -> bytes:
        """Pack as nine little-endian 32-bit floats, column after column."""
        return struct.pack("<9f", *(v for col in self.m for v in col))


@dataclass(frozen=True)
class Mat4:
    """A 4x4 float matrix; `m[i]` is the i-th column."""

    m: tuple[tuple[float, ...], ...] = field(default_factory=lambda: _zeros(4))

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _square(self.m, 4, "Mat4"))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Mat4:
        """Build a matrix from its rows as written on paper."""
        checked = _square(rows, 4, "Mat4")
        return cls(tuple(zip(*checked)))

    def to_bytes(self) -> bytes:
        """Pack as sixteen little-endian 32-bit floats, column after column."""
        return struct.pack("<16f", *(v for col in self.m for v in col))