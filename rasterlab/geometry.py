"""Basic 3D geometry: vectors, points, lines and dense matrices."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence

EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - other.y * self.z,
            other.x * self.z - self.x * other.z,
            self.x * other.y - other.x * self.y,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector:
        """Return the unit vector in this direction; a zero vector is rejected."""
        length = self.length()
        if abs(length) <= EPSILON:
            raise ValueError("vector magnitude is zero, which cannot be normalized")
        return Vector(self.x / length, self.y / length, self.z / length)

    def rotate(self, axis: Vector, angle: float) -> Vector:
        """Rotate about ``axis`` by ``angle`` degrees (Rodrigues' formula)."""
        theta = math.radians(angle)
        k = axis.normalize()
        cos_theta = math.cos(theta)
        return (
            self * cos_theta
            + k.cross(self) * math.sin(theta)
            + k * (k.dot(self) * (1 - cos_theta))
        )


@dataclass(frozen=True)
class Point:
    """A position in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Line:
    """An infinite line through two points."""

    p0: Point
    p1: Point
    direction: Vector = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "direction",
            Vector(self.p1.x - self.p0.x, self.p1.y - self.p0.y, self.p1.z - self.p0.z),
        )

    def intersection(self, other: Line) -> Optional[Point]:
        """Point where this line meets ``other``, or None if they are parallel."""
        perpendicular = self.direction.cross(other.direction)
        perpendicular_square = perpendicular.dot(perpendicular)
        if abs(perpendicular_square) <= EPSILON:
            return None
        w = Vector(other.p0.x - self.p0.x, other.p0.y - self.p0.y, other.p0.z - self.p0.z)
        u = w.cross(other.direction)
        t = u.dot(perpendicular) / perpendicular_square
        return Point(
            self.p0.x + t * self.direction.x,
            self.p0.y + t * self.direction.y,
            self.p0.z + t * self.direction.z,
        )


class Matrix:
    """A dense rows x cols matrix of floats."""

    def __init__(
        self,
        rows: int,
        cols: int,
        elements: Optional[Iterable[Iterable[float]]] = None,
    ) -> None:
        self.rows = rows
        self.cols = cols
        if elements is None:
            self.elements = [[0.0] * cols for _ in range(rows)]
        else:
            self.elements = [[float(value) for value in row] for row in elements]
            if len(self.elements) != rows or any(len(row) != cols for row in self.elements):
                raise ValueError(f"elements do not form a {rows}x{cols} matrix")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a non-empty sequence of equally long rows."""
        if not rows:
            raise ValueError("a matrix needs at least one row")
        return cls(len(rows), len(rows[0]), rows)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError("incompatible dimensions for multiplication")
        columns = list(zip(*other.elements))
        return Matrix(
            self.rows,
            other.cols,
            [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in self.elements],
        )

    def __truediv__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if abs(scalar) <= EPSILON:
            raise ZeroDivisionError("division by zero")
        return Matrix(self.rows, self.cols, [[value / scalar for value in row] for row in self.elements])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.elements[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self.elements == other.elements

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self.elements!r})"


def identity_matrix(size: int) -> Matrix:
    """Return the size x size identity matrix."""
    return Matrix(size, size, [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)])