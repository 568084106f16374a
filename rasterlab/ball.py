"""A bouncing ball inside an open cube, watched by a free-flying camera."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional, Union

from rasterlab.controls import MouseButton, SpecialKey, parse_special_key
from rasterlab.geometry import Vector

CUBE_SIZE = 100
BALL_RADIUS = 4.0
BALL_STRIPES = 30
GRAVITY = 9.8
RESTITUTION = 0.75
MIN_VELOCITY = 2.0
ARROW_SCALE = 2.0
MIN_SPEED = 5.0
MAX_SPEED = 100.0
SPEED_STEP = 5.0
FRAME_INTERVAL = 0.016

_UP = Vector(0, 0, 1)


def rotate_vector(v: Vector, axis: Vector, angle: float) -> Vector:
    """Rotate ``v`` about ``axis`` by ``angle`` radians (Rodrigues' formula)."""
    k = axis.normalize()
    cos_theta = math.cos(angle)
    sin_theta = math.sin(angle)
    return v * cos_theta + k.cross(v) * sin_theta + k * (k.dot(v) * (1 - cos_theta))


def rotate_pair(a: Vector, b: Vector, angle: float) -> tuple[Vector, Vector]:
    """Rotate two vectors together within the plane they span."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return a * cos_a + b * sin_a, b * cos_a - a * sin_a


@dataclass(frozen=True)
class FloorTile:
    """One square of the checkered floor; ``light`` tiles are white."""

    x: float
    y: float
    size: float
    light: bool


def floor_tiles(cube_size: int) -> list[FloorTile]:
    """The checkerboard tiles covering the floor of a cube of this size."""
    half = cube_size // 2
    tile_size = next((option for option in (10, 5) if math.fmod(half, option) == 0), 5)
    count = cube_size // tile_size
    tiles = []
    for i in range(-(count // 2), count // 2):
        for j in range(-(count // 2), count // 2):
            x, y = i * tile_size, j * tile_size
            if x + tile_size > half or x < -half or y + tile_size > half or y < -half:
                continue
            tiles.append(FloorTile(float(x), float(y), float(tile_size), (i + j) % 2 == 0))
    return tiles


def _initial_look() -> Vector:
    return Vector(-1, -1, -1).normalize()


def _initial_right() -> Vector:
    return _UP.cross(_initial_look()).normalize()


def _initial_up() -> Vector:
    return _initial_look().cross(_initial_right()).normalize()


@dataclass
class FlyCamera:
    """Camera with a position and an orthonormal look/right/up frame."""

    position: Vector = Vector(70, 70, 80)
    look: Vector = field(default_factory=_initial_look)
    right: Vector = field(default_factory=_initial_right)
    up: Vector = field(default_factory=_initial_up)

    rotation_speed: float = 0.02
    vertical_step: float = 0.01
    move_step: float = 2.0

    def _turn(self, first: str, second: str, axis: Vector, angle: float) -> None:
        setattr(self, first, rotate_vector(getattr(self, first), axis, angle).normalize())
        setattr(self, second, rotate_vector(getattr(self, second), axis, angle).normalize())

    def _shift_vertically(self, dz: float, sign: float) -> None:
        previous = self.position.length()
        self.position = self.position + Vector(0, 0, dz)
        current = self.position.length()
        cosine = (previous**2 + current**2 - self.vertical_step**2) / (2 * previous * current)
        # The angle is converted to degrees yet applied as radians, as the scene always did.
        angle = math.degrees(math.acos(max(-1.0, min(1.0, cosine))))
        self.look = rotate_vector(self.look, self.right, sign * angle).normalize()
        self.up = rotate_vector(self.up, self.right, sign * angle).normalize()
        self.right = self.look.cross(self.up).normalize()

    def handle_key(self, key: str) -> bool:
        """Apply a rotation or vertical-move key; return whether it was used."""
        speed = self.rotation_speed
        if key == "1":
            self._turn("look", "right", self.up, speed)
        elif key == "2":
            self._turn("look", "right", self.up, -speed)
        elif key == "3":
            self._turn("look", "up", self.right, speed)
        elif key == "4":
            self._turn("look", "up", self.right, -speed)
        elif key == "5":
            self._turn("right", "up", self.look, speed)
        elif key == "6":
            self._turn("right", "up", self.look, -speed)
        elif key == "w":
            self._shift_vertically(self.vertical_step, -1.0)
        elif key == "s":
            self._shift_vertically(-self.vertical_step, 1.0)
        else:
            return False
        return True

    def handle_special_key(self, key: Union[str, SpecialKey]) -> None:
        """Move along the look, right or up direction."""
        moves = {
            SpecialKey.UP: self.look,
            SpecialKey.DOWN: self.look * -1,
            SpecialKey.RIGHT: self.right,
            SpecialKey.LEFT: self.right * -1,
            SpecialKey.PAGE_UP: self.up,
            SpecialKey.PAGE_DOWN: self.up * -1,
        }
        direction = moves.get(parse_special_key(key))
        if direction is not None:
            self.position = self.position + direction * self.move_step


@dataclass(frozen=True)
class VelocityArrow:
    """Line from the ball along its velocity, with a cone head at ``tip``."""

    start: Vector
    tip: Vector
    head_angle: float
    head_axis: Vector


@dataclass
class Ball:
    """The ball's state and its physics."""

    position: Vector = Vector(0, 0, BALL_RADIUS)
    velocity: Vector = Vector(0, 0, 0)
    initial_speed: float = 30.0
    rotation_angle: float = 0.0
    rotation_axis: Vector = Vector(1, 0, 0)
    running: bool = False
    show_arrow: bool = True

    def reset(self, rng: Optional[random.Random] = None) -> None:
        """Place the ball randomly on the floor with a random launch direction."""
        rng = rng if rng is not None else random.Random()
        half = CUBE_SIZE // 2
        quarter = half // 2
        x = float(rng.randrange(half) - quarter)
        y = float(rng.randrange(half) - quarter)
        self.position = Vector(x, y, BALL_RADIUS)
        theta = math.radians(rng.randrange(360))
        phi = math.radians(rng.randrange(180))
        self.velocity = Vector(
            self.initial_speed * math.sin(phi) * math.cos(theta),
            self.initial_speed * math.sin(phi) * math.sin(theta),
            self.initial_speed * math.cos(phi),
        )
        self.rotation_angle = 0.0
        self.rotation_axis = Vector(1, 0, 0)
        self.running = False

    def step(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds if it is running."""
        if not self.running:
            return
        previous = self.position
        vx, vy, vz = self.velocity
        vz -= GRAVITY * dt
        x = previous.x + vx * dt
        y = previous.y + vy * dt
        z = previous.z + vz * dt
        half = CUBE_SIZE // 2

        if x - BALL_RADIUS < -half:
            x, vx = -half + BALL_RADIUS, -vx * RESTITUTION
        if x + BALL_RADIUS > half:
            x, vx = half - BALL_RADIUS, -vx * RESTITUTION
        if y - BALL_RADIUS < -half:
            y, vy = -half + BALL_RADIUS, -vy * RESTITUTION
        if y + BALL_RADIUS > half:
            y, vy = half - BALL_RADIUS, -vy * RESTITUTION

        if z - BALL_RADIUS < 0:
            z = BALL_RADIUS
            vz = -vz * RESTITUTION if abs(vz) > MIN_VELOCITY else 0.0
        if z + BALL_RADIUS > half:
            z, vz = half - BALL_RADIUS, -vz * RESTITUTION

        self.position = Vector(x, y, z)
        self.velocity = Vector(vx, vy, vz)

        if self.velocity.length() > 0.01:
            displacement = self.position - previous
            horizontal = Vector(vx, vy, 0)
            if displacement.length() > 0.001 and horizontal.length() > 0:
                self.rotation_axis = horizontal.normalize().cross(_UP).normalize()
                self.rotation_angle += math.hypot(displacement.x, displacement.y) / BALL_RADIUS

        if z <= BALL_RADIUS + 0.01 and self.velocity.length() < MIN_VELOCITY:
            self.velocity = Vector(0, 0, 0)

    def change_speed(self, delta: float) -> None:
        """Change the launch speed while paused, keeping the direction."""
        if self.running:
            return
        self.initial_speed = min(MAX_SPEED, max(MIN_SPEED, self.initial_speed + delta))
        if self.velocity.length() > 0:
            self.velocity = self.velocity.normalize() * self.initial_speed

    def velocity_arrow(self) -> Optional[VelocityArrow]:
        """The arrow to draw, or None if hidden or the ball is too slow."""
        if not self.show_arrow or self.velocity.length() < MIN_VELOCITY:
            return None
        direction = self.velocity.normalize()
        tip = self.position + direction * (BALL_RADIUS * ARROW_SCALE)
        angle = math.degrees(math.acos(max(-1.0, min(1.0, direction.z))))
        axis = _UP.cross(direction)
        axis = Vector(1, 0, 0) if axis.length() < 0.001 else axis.normalize()
        return VelocityArrow(self.position, tip, angle, axis)


@dataclass
class BallWorld:
    """The whole interactive scene: camera, ball and display toggles."""

    camera: FlyCamera = field(default_factory=FlyCamera)
    ball: Ball = field(default_factory=Ball)
    rng: random.Random = field(default_factory=random.Random)
    draw_grid: bool = False
    draw_axes: bool = False
    animation_angle: float = 0.0
    last_time: float = 0.0

    def __post_init__(self) -> None:
        self.ball.reset(self.rng)

    def handle_key(self, key: str) -> None:
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

    def tick(self, current_time: float) -> bool:
        """Advance physics if more than one frame has passed; return whether it did."""
        self.animation_angle += 0.05
        dt = current_time - self.last_time
        if dt > FRAME_INTERVAL:
            self.ball.step(dt)
            self.last_time = current_time
            return True
        return False