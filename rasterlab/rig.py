"""A windmill model viewed through a camera steered by nudging its frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from rasterlab.controls import SpecialKey, parse_special_key
from rasterlab.geometry import Vector

MOVE_STEP = 0.01
TURN_WEIGHT = 100.0
SPEED_STEP = 1.0
MIN_ROTATION_SPEED = 1.0
BASE_STEP = 5.0
FULL_TURN = 360.0

BASE_BOUNDARY = 0.05
POLE_BOUNDARY = 0.01
POLE_HEIGHT = 0.2
BLADE_RADIUS = 0.2
BLADE_HALF_WIDTH = 0.05
PERSPECTIVE_ANGLE = 45.0

_S3 = 1 / math.sqrt(3)
_S2 = 1 / math.sqrt(2)
_S6 = 1 / math.sqrt(6)


def _box_corners(hx: float, hy: float, hz: float) -> tuple[Vector, ...]:
    return (
        Vector(hx, hy, hz),
        Vector(-hx, hy, hz),
        Vector(-hx, -hy, hz),
        Vector(hx, -hy, hz),
        Vector(hx, hy, -hz),
        Vector(-hx, hy, -hz),
        Vector(-hx, -hy, -hz),
        Vector(hx, -hy, -hz),
    )


BASE_CORNERS = _box_corners(BASE_BOUNDARY, 5 * BASE_BOUNDARY, BASE_BOUNDARY)
POLE_CORNERS = _box_corners(10 * POLE_BOUNDARY, POLE_BOUNDARY, POLE_BOUNDARY)


def project_onto_plane(v: Vector, normal: Vector) -> Vector:
    """Component of ``v`` lying in the plane with the given normal."""
    n = normal.normalize()
    return v - n * v.dot(n)


@dataclass
class RigCamera:
    """Camera whose frame is turned by blending one axis a little into another."""

    eye: Vector = Vector(_S3, _S3, _S3)
    forward: Vector = Vector(-_S3, -_S3, -_S3)
    right: Vector = Vector(_S2, 0.0, -_S2)
    up: Vector = Vector(-_S6, 2 * _S6, -_S6)

    def handle_key(self, key: str) -> bool:
        """Apply a yaw, pitch or roll key; return whether it was used."""
        if key == "1":
            self.forward = (self.forward * TURN_WEIGHT - self.right).normalize()
            self.right = self.forward.cross(self.up)
        elif key == "2":
            self.forward = (self.forward * TURN_WEIGHT + self.right).normalize()
            self.right = self.forward.cross(self.up)
        elif key == "3":
            self.forward = (self.forward * TURN_WEIGHT + self.up).normalize()
            self.up = self.right.cross(self.forward)
        elif key == "4":
            self.forward = (self.forward * TURN_WEIGHT - self.up).normalize()
            self.up = self.right.cross(self.forward)
        elif key == "5":
            self.right = (self.right * TURN_WEIGHT - self.up).normalize()
            self.up = self.right.cross(self.forward)
        elif key == "6":
            self.right = (self.right * TURN_WEIGHT + self.up).normalize()
            self.up = self.right.cross(self.forward)
        else:
            return False
        return True

    def handle_special_key(self, key: Union[str, SpecialKey]) -> None:
        """Move the eye along the forward, right or up direction."""
        moves = {
            SpecialKey.UP: self.forward,
            SpecialKey.DOWN: self.forward * -1,
            SpecialKey.LEFT: self.right * -1,
            SpecialKey.RIGHT: self.right,
            SpecialKey.PAGE_UP: self.up,
            SpecialKey.PAGE_DOWN: self.up * -1,
        }
        direction = moves.get(parse_special_key(key))
        if direction is not None:
            self.eye = self.eye + direction * MOVE_STEP

    def look_at_center(self) -> Vector:
        """The point one unit ahead of the eye."""
        return self.eye + self.forward


@dataclass
class WindmillRig:
    """Base, pole and spinning blades with a turnable base."""

    camera: RigCamera = field(default_factory=RigCamera)
    base_angle: float = 0.0
    rotation_angle: float = 0.0
    rotation_speed: float = 1.0

    def handle_key(self, key: str) -> None:
        if self.camera.handle_key(key):
            return
        if key == "w":
            self.rotation_speed += SPEED_STEP
        elif key == "s":
            if self.rotation_speed > MIN_ROTATION_SPEED:
                self.rotation_speed -= SPEED_STEP
        elif key == "a":
            self.base_angle += BASE_STEP
            if self.base_angle > FULL_TURN:
                self.base_angle -= FULL_TURN
        elif key == "d":
            self.base_angle -= BASE_STEP
            # The wrap test compares with a full turn, not zero, as the scene always did.
            if self.base_angle < FULL_TURN:
                self.base_angle += FULL_TURN

    def tick(self) -> float:
        """Spin the blades one step and return the blade angle."""
        self.rotation_angle += self.rotation_speed
        return self.rotation_angle

    def blades(self) -> list[tuple[Vector, Vector, Vector]]:
        """The three blade triangles in model coordinates, 120 degrees apart."""
        axis = Vector(1, 0, 0)
        blade = (
            Vector(0, 0, 0),
            Vector(0, BLADE_RADIUS, BLADE_HALF_WIDTH),
            Vector(0, BLADE_RADIUS, -BLADE_HALF_WIDTH),
        )
        result = []
        for k in range(3):
            angle = self.rotation_angle + 120.0 * k
            a, b, c = (vertex.rotate(axis, angle) for vertex in blade)
            result.append((a, b, c))
        return result