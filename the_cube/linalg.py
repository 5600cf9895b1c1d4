"""Small fixed-size vector and matrix types used by the cube renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence


def _check_same_length(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} != {len(b)}")


def add(a: Sequence[float], b: Sequence[float]) -> tuple[float, ...]:
    """Element-wise sum of two equally sized sequences."""
    _check_same_length(a, b)
    return tuple(x + y for x, y in zip(a, b))


def subtract(a: Sequence[float], b: Sequence[float]) -> tuple[float, ...]:
    """Element-wise difference ``a - b`` of two equally sized sequences."""
    _check_same_length(a, b)
    return tuple(x - y for x, y in zip(a, b))


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


@dataclass(frozen=True)
class Vector3:
    """A 3-component column vector."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    def normalized(self) -> Vector3:
        """Return the unit vector in this direction; a zero vector is returned unchanged."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if length == 0.0:
            return self
        return Vector3(self.x / length, self.y / length, self.z / length)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True)
class Vector4:
    """A 4-component (homogeneous) column vector."""

    x: float
    y: float
    z: float
    w: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def zero(cls) -> Vector4:
        return cls(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 matrix stored as 16 values in row-major order."""

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    @classmethod
    def zero(cls) -> Matrix4:
        return cls((0.0,) * 16)

    @property
    def _rows(self) -> list[tuple[float, ...]]:
        return [self.values[start:start + 4] for start in range(0, 16, 4)]

    def __matmul__(self, other: object) -> Matrix4 | Vector4:
        if isinstance(other, Vector4):
            return self.transform(other)
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other._rows))
        return Matrix4(tuple(_dot(row, column) for row in self._rows for column in columns))

    def transform(self, vector: Vector4) -> Vector4:
        """Multiply this matrix by a column vector."""
        coords = tuple(vector)
        return Vector4(*(_dot(row, coords) for row in self._rows))