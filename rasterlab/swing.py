"""A rotating swing ride whose seats fly outwards as it speeds up."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from rasterlab.controls import MouseButton, SpecialKey, parse_special_key
from rasterlab.geometry import Vector

TOP_RADIUS = 0.5
MIN_BOTTOM_RADIUS = 0.5
MAX_BOTTOM_RADIUS = 0.9
RADIUS_STEP = 0.05
ANGLE_STEP = 10.0
SPIN_FACTOR = 0.2
SEAT_HALF_SIZE = 0.05
SEAT_SPACING = 60
CAMERA_STEP = 0.5
ORBIT_DISTANCE = 4 * math.sqrt(2)

_Y_AXIS = Vector(0, 1, 0)


@dataclass(frozen=True)
class Seat:
    """One seat: its hanging point, two string ends and its quad corners."""

    top: Vector
    inner: Vector
    outer: Vector
    corners: tuple[Vector, Vector, Vector, Vector]


@dataclass
class Swing:
    """State of the ride and the geometry of its seats."""

    string_length: float = 0.5
    bottom_radius: float = MIN_BOTTOM_RADIUS
    seat_offset: float = 0.1
    rotating: bool = False
    show_axes: bool = True
    angle: float = 0.0
    spin: float = 0.0

    def handle_key(self, key: str) -> None:
        if key == "1":
            self.rotating = True
            if self.bottom_radius < MAX_BOTTOM_RADIUS:
                self.spin += ANGLE_STEP
                self.bottom_radius = round(self.bottom_radius + RADIUS_STEP, 10)
        elif key == "2":
            self.bottom_radius = round(self.bottom_radius - RADIUS_STEP, 10)
            self.spin -= ANGLE_STEP
            if self.bottom_radius <= MIN_BOTTOM_RADIUS:
                self.rotating = False
                self.bottom_radius = MIN_BOTTOM_RADIUS
                self.spin = 0.0

    def handle_mouse(self, button: Union[str, MouseButton], pressed: bool) -> None:
        if MouseButton(button) is MouseButton.LEFT and pressed:
            self.show_axes = not self.show_axes

    def tick(self) -> float:
        """Turn the ride if it is running and return its angle."""
        if self.rotating:
            self.angle += self.spin * SPIN_FACTOR
        return self.angle

    def seats(self) -> list[Seat]:
        """The six seats in world coordinates, turned with the ride."""
        inner_radius = self.bottom_radius - self.seat_offset / 2
        outer_radius = self.bottom_radius + self.seat_offset / 2
        result = []
        for degrees in range(0, 360, SEAT_SPACING):
            theta = math.radians(degrees)
            cos_t, sin_t = math.cos(theta), math.sin(theta)
            top = Vector(TOP_RADIUS * cos_t, 0.0, TOP_RADIUS * sin_t)
            x1, z1 = inner_radius * cos_t, inner_radius * sin_t
            x2, z2 = outer_radius * cos_t, outer_radius * sin_t
            y1 = -math.sqrt(self.string_length**2 - (top.x - x1) ** 2 - (top.z - z1) ** 2)
            y2 = -math.sqrt(self.string_length**2 - (top.x - x2) ** 2 - (top.z - z2) ** 2)

            px, pz = -(z2 - z1), x2 - x1
            norm = math.hypot(px, pz)
            px, pz = px / norm * SEAT_HALF_SIZE, pz / norm * SEAT_HALF_SIZE
            corners = (
                Vector(x1 + px, y1, z1 + pz),
                Vector(x2 + px, y2, z2 + pz),
                Vector(x2 - px, y2, z2 - pz),
                Vector(x1 - px, y1, z1 - pz),
            )
            seat = Seat(top, Vector(x1, y1, z1), Vector(x2, y2, z2), corners)
            result.append(self._turned(seat) if self.rotating else seat)
        return result

    def _turned(self, seat: Seat) -> Seat:
        def turn(v: Vector) -> Vector:
            return v.rotate(_Y_AXIS, self.angle)

        a, b, c, d = (turn(v) for v in seat.corners)
        return Seat(turn(seat.top), turn(seat.inner), turn(seat.outer), (a, b, c, d))


@dataclass
class OrbitCamera:
    """Camera circling the ride at a fixed horizontal distance."""

    position: Vector = Vector(4, 4, 4)
    target: Vector = Vector(0, 0, 0)
    up: Vector = Vector(0, 1, 0)

    def handle_special_key(self, key: Union[str, SpecialKey]) -> None:
        key = parse_special_key(key)
        look = (self.target - self.position).normalize()
        right = look.cross(self.up).normalize()
        x, y, z = self.position
        if key is SpecialKey.UP:
            y += CAMERA_STEP
        elif key is SpecialKey.DOWN:
            y -= CAMERA_STEP
        elif key in (SpecialKey.LEFT, SpecialKey.RIGHT):
            sign = -1.0 if key is SpecialKey.LEFT else 1.0
            x += sign * CAMERA_STEP * right.x
            z += sign * CAMERA_STEP * right.z
            scale = math.hypot(x, z) / ORBIT_DISTANCE
            x, z = x / scale, z / scale
        else:
            return
        self.position = Vector(x, y, z)