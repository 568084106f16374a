"""Primitive shape generators and a small orbiting-squares scene."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from rasterlab.controls import MouseButton, SpecialKey, parse_special_key
from rasterlab.geometry import Point


def circle_points(radius: float, segments: int) -> list[tuple[float, float]]:
    """Points around a circle, the first repeated at the end to close it."""
    if segments < 1:
        raise ValueError("a circle needs at least one segment")
    return [
        (
            radius * math.cos(i / segments * 2 * math.pi),
            radius * math.sin(i / segments * 2 * math.pi),
        )
        for i in range(segments + 1)
    ]


def cone_shades(segments: int) -> list[float]:
    """Grey level of each side triangle of a cone, brightest half way round."""
    if segments < 1:
        raise ValueError("a cone needs at least one segment")
    half = segments // 2
    return [2 * i / segments if i < half else 2 * (1.0 - i / segments) for i in range(segments)]


def sphere_points(radius: float, slices: int, stacks: int) -> list[list[Point]]:
    """Upper-hemisphere grid: ``stacks + 1`` rings of ``slices + 1`` points."""
    if slices < 1 or stacks < 1:
        raise ValueError("slices and stacks must be positive")
    rings = []
    for i in range(stacks + 1):
        h = radius * math.sin(i / stacks * (math.pi / 2))
        r = radius * math.cos(i / stacks * (math.pi / 2))
        rings.append(
            [
                Point(
                    r * math.cos(j / slices * 2 * math.pi),
                    r * math.sin(j / slices * 2 * math.pi),
                    h,
                )
                for j in range(slices + 1)
            ]
        )
    return rings


def _polar(length: float, degrees: float) -> tuple[float, float]:
    radians = math.radians(degrees)
    return length * math.cos(radians), length * math.sin(radians)


@dataclass
class OrbitScene:
    """Squares orbiting one another, with grid, axes and camera toggles."""

    draw_grid: bool = False
    draw_axes: bool = True
    camera_height: float = 150.0
    camera_angle: float = 1.0
    angle: float = 0.0

    def advance(self) -> None:
        self.angle += 0.05

    def square_centers(self) -> list[tuple[float, float, float]]:
        """(x, y, half size) of the sun, planet, moon and second moon squares."""
        a = self.angle
        gx, gy = _polar(110, a)
        bx, by = _polar(60, 4 * a)
        yx, yy = _polar(40, 6 * a)
        return [
            (0.0, 0.0, 20.0),
            (gx, gy, 15.0),
            (gx + bx, gy + by, 10.0),
            (gx + yx, gy + yy, 5.0),
        ]

    def handle_key(self, key: str) -> None:
        if key == "1":
            self.draw_grid = not self.draw_grid

    def handle_special_key(self, key: Union[str, SpecialKey]) -> None:
        key = parse_special_key(key)
        if key is SpecialKey.DOWN:
            self.camera_height -= 3.0
        elif key is SpecialKey.UP:
            self.camera_height += 3.0
        elif key is SpecialKey.RIGHT:
            self.camera_angle += 0.03
        elif key is SpecialKey.LEFT:
            self.camera_angle -= 0.03

    def handle_mouse(self, button: Union[str, MouseButton], pressed: bool) -> None:
        button = MouseButton(button)
        if button is MouseButton.LEFT and pressed:
            self.draw_axes = not self.draw_axes