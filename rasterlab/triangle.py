"""Triangles in homogeneous coordinates and their colour source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from rasterlab.geometry import Matrix, Vector

_SEED_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass
class ColorGenerator:
    """Linear congruential generator used to colour triangles."""

    seed: int = 17

    def next_value(self) -> int:
        """Advance the generator and return a value in 0..32767."""
        self.seed = (214013 * self.seed + 2531011) & _SEED_MASK
        return (self.seed >> 16) & 0x7FFF

    def next_color(self) -> tuple[int, int, int]:
        """Return an (red, green, blue) triple of bytes."""
        red = self.next_value() % 256
        green = self.next_value() % 256
        blue = self.next_value() % 256
        return red, green, blue


def _homogeneous(x: float, y: float, z: float) -> Matrix:
    return Matrix(4, 1, [[x], [y], [z], [1.0]])


def _default_vertices() -> list[Matrix]:
    return [_homogeneous(0.0, 0.0, 0.0) for _ in range(3)]


@dataclass
class Triangle:
    """Three vertices stored as 4x1 homogeneous column matrices."""

    vertices: list[Matrix] = field(default_factory=_default_vertices)
    color: tuple[int, int, int] = (0, 0, 0)

    @property
    def points(self) -> list[Vector]:
        """The vertices as 3D vectors."""
        return [Vector(v.elements[0][0], v.elements[1][0], v.elements[2][0]) for v in self.vertices]

    def transform(self, matrix: Matrix) -> None:
        """Apply ``matrix`` to every vertex and divide through by w."""
        transformed = (matrix @ vertex for vertex in self.vertices)
        self.vertices = [vertex / vertex.elements[3][0] for vertex in transformed]

    def assign_color(self, generator: ColorGenerator) -> None:
        self.color = generator.next_color()

    def sorted_by_y(self) -> Triangle:
        """A copy with vertices ordered from highest to lowest y."""
        ordered = sorted(self.vertices, key=lambda vertex: vertex.elements[1][0], reverse=True)
        return Triangle(ordered, self.color)

    def format(self) -> str:
        """Vertices as three lines of 'x y z' with seven decimals."""
        return "\n".join(f"{p.x:.7f} {p.y:.7f} {p.z:.7f}" for p in self.points)


def triangle_from_values(values: Iterable[float]) -> Triangle:
    """Build a triangle from nine coordinates, three per vertex."""
    numbers = [float(value) for value in values]
    if len(numbers) != 9:
        raise ValueError(f"a triangle needs 9 coordinates, got {len(numbers)}")
    vertices = [_homogeneous(*numbers[i : i + 3]) for i in range(0, 9, 3)]
    return Triangle(vertices)