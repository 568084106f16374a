"""A windmill on a pillar with spinning blades, in the free-camera world."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Union

from rasterlab.ball import SPEED_STEP, Ball, FlyCamera
from rasterlab.controls import MouseButton, SpecialKey
from rasterlab.geometry import Vector

Color = tuple[float, float, float]

PURPLE: Color = (0.5647, 0.4353, 0.8392)
CYAN: Color = (0.0745, 0.8, 0.8392)
YELLOW: Color = (0.8196, 0.7725, 0.247)
GREEN: Color = (0.247, 0.8196, 0.3216)
RED: Color = (0.7882, 0.3176, 0.2784)
BLADE_COLOR: Color = (0.53, 0.81, 0.92)

BLADE_SPEED_STEP = 2.0
MIN_BLADE_SPEED = 2.0
MAX_BLADE_SPEED = 10.0
BLADE_COUNT = 3
HUB = Vector(40, 0, 30)

_BLADE = (Vector(0, 0, 0), Vector(0, 30, 40), Vector(10, 30, 40))
_X_AXIS = Vector(1, 0, 0)


@dataclass(frozen=True)
class Face:
    """One coloured quad of a box."""

    name: str
    color: Color
    vertices: tuple[Vector, Vector, Vector, Vector]


def box_faces(half_width: float, half_height: float) -> list[Face]:
    """The six faces of a box spanning ±half_width in x, y and ±half_height in z."""
    a, b = half_width, half_height
    return [
        Face("top", PURPLE, (Vector(a, a, b), Vector(a, -a, b), Vector(-a, -a, b), Vector(-a, a, b))),
        Face("bottom", PURPLE, (Vector(a, a, -b), Vector(a, -a, -b), Vector(-a, -a, -b), Vector(-a, a, -b))),
        Face("front", CYAN, (Vector(a, a, b), Vector(a, -a, b), Vector(a, -a, -b), Vector(a, a, -b))),
        Face("back", YELLOW, (Vector(-a, a, b), Vector(-a, -a, b), Vector(-a, -a, -b), Vector(-a, a, -b))),
        Face("right", GREEN, (Vector(a, a, b), Vector(a, a, -b), Vector(-a, a, -b), Vector(-a, a, b))),
        Face("left", RED, (Vector(a, -a, b), Vector(a, -a, -b), Vector(-a, -a, -b), Vector(-a, -a, b))),
    ]


def blade_vertices(angle: float) -> tuple[Vector, Vector, Vector]:
    """The blade triangle turned ``angle`` degrees about the hub's x axis."""
    first, second, third = (vertex.rotate(_X_AXIS, angle) for vertex in _BLADE)
    return first, second, third


def _initial_camera() -> FlyCamera:
    return FlyCamera()


@dataclass
class WindmillWorld:
    """Windmill scene: camera, blade spin, display toggles and a resting ball."""

    camera: FlyCamera = field(default_factory=_initial_camera)
    ball: Ball = field(default_factory=Ball)
    rng: random.Random = field(default_factory=random.Random)
    draw_grid: bool = False
    draw_axes: bool = False
    blade_speed: float = 2.0
    blade_angle: float = 0.0

    def __post_init__(self) -> None:
        self.ball.reset(self.rng)

    def handle_key(self, key: str) -> None:
        if key == "w":
            self.blade_speed = min(MAX_BLADE_SPEED, self.blade_speed + BLADE_SPEED_STEP)
            return
        if key == "s":
            if self.blade_speed > MIN_BLADE_SPEED:
                self.blade_speed -= BLADE_SPEED_STEP
            return
        if self.camera.handle_key(key):
            return
        if key == " ":
            self.ball.running = not self.ball.running
        elif key == "r":
            self.ball.reset(self.rng)
        elif key == "v":
            self.ball.show_arrow = not self.ball.show_arrow
        elif key == "d":
            self.draw_grid = not self.draw_grid
        elif key == "a":
            self.draw_axes = not self.draw_axes
        elif key == "+":
            self.ball.change_speed(SPEED_STEP)
        elif key == "-":
            self.ball.change_speed(-SPEED_STEP)

    def handle_special_key(self, key: Union[str, SpecialKey]) -> None:
        self.camera.handle_special_key(key)

    def handle_mouse(self, button: Union[str, MouseButton], pressed: bool) -> None:
        button = MouseButton(button)
        if not pressed:
            return
        if button is MouseButton.LEFT:
            self.draw_axes = not self.draw_axes
        elif button is MouseButton.RIGHT:
            self.draw_grid = not self.draw_grid

    def tick(self) -> float:
        """Turn the blades by one step and return the new blade angle."""
        self.blade_angle += self.blade_speed
        return self.blade_angle

    def blades(self) -> list[tuple[Vector, Vector, Vector]]:
        """The three blades in world coordinates, spaced evenly about the hub."""
        spacing = 360.0 / BLADE_COUNT
        return [
            tuple(HUB + vertex for vertex in blade_vertices(self.blade_angle + k * spacing))
            for k in range(BLADE_COUNT)
        ]

    def axis_segments(self) -> list[tuple[Vector, Vector]]:
        """The x and z axis lines when axes are shown."""
        if not self.draw_axes:
            return []
        return [
            (Vector(100, 0, 0), Vector(-100, 0, 0)),
            (Vector(0, 0, 100), Vector(0, 0, -100)),
        ]