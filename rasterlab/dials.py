"""Animated dial figures: a traced wave, a sliding wave and nested dials."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field

from rasterlab.clock import CLOCK_RADIUS, hand_endpoint

Point2D = tuple[float, float]

MAX_WAVE_POINTS = 500
WAVE_X_STEP = 1.0
TRACE_HAND_SPEED = 10.0

SLIDING_RADIUS = 0.20
SLIDING_START_X = 0.25
SLIDING_MAX_POINTS = 6000
SLIDING_SPACING = 0.0001
SLIDING_STEP = 0.05


@dataclass
class WaveTrace:
    """A single fast hand whose tip height is traced as a wave drifting right."""

    current_angle: float = 0.0
    max_points: int = MAX_WAVE_POINTS
    _trace: deque = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_points < 1:
            raise ValueError("the trace must hold at least one point")
        self._trace = deque(maxlen=self.max_points)

    def advance(self) -> Point2D:
        """Step the hand one degree backwards, record the wave and return the tip."""
        self.current_angle -= 1.0
        if self.current_angle < 0:
            self.current_angle += 360.0
        tip_x, tip_y = hand_endpoint(self.current_angle * TRACE_HAND_SPEED, CLOCK_RADIUS)
        x = self._trace[-1][0] + WAVE_X_STEP if self._trace else tip_x
        self._trace.append((x, tip_y))
        return tip_x, tip_y

    def points(self) -> list[Point2D]:
        """The wave points, oldest first."""
        return list(self._trace)


@dataclass
class SlidingWave:
    """A rotating radius whose height is plotted newest-first to the right."""

    angle: float = 0.0
    radius: float = SLIDING_RADIUS
    start_x: float = SLIDING_START_X
    max_points: int = SLIDING_MAX_POINTS
    spacing: float = SLIDING_SPACING
    step: float = SLIDING_STEP
    _samples: deque = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_points < 1:
            raise ValueError("the wave must hold at least one sample")
        self._samples = deque(maxlen=self.max_points)

    def advance(self) -> Point2D:
        """Sample the radius tip at the current angle, then turn it; return the tip."""
        radians = math.radians(self.angle)
        x = self.radius * math.cos(radians)
        y = self.radius * math.sin(radians)
        self._samples.append(y)
        self.angle += self.step
        return x, y

    def points(self) -> list[Point2D]:
        """The plotted wave, starting at ``start_x`` with the newest sample."""
        return [
            (self.start_x + k * self.spacing, y)
            for k, y in enumerate(reversed(self._samples))
        ]


def nested_dial_centers(second_angle: float) -> list[tuple[float, float, float]]:
    """(x, y, radius) of three dials, each riding on the previous one's hand.

    The outer hand turns ten times faster than ``second_angle`` and in the
    opposite direction; the middle hand turns five times faster again.
    """
    first_radius = CLOCK_RADIUS
    second_radius = CLOCK_RADIUS / 2
    third_radius = CLOCK_RADIUS / 4

    first_hand = -second_angle * 10
    cx2, cy2 = hand_endpoint(first_hand, first_radius)
    dx3, dy3 = hand_endpoint(first_hand * 5, second_radius)
    return [
        (0.0, 0.0, first_radius),
        (cx2, cy2, second_radius),
        (cx2 + dx3, cy2 + dy3, third_radius),
    ]


def _default_angles() -> list[int]:
    return [10, 10, 0]


@dataclass
class GearedDials:
    """Three chained hands, each mounted on the tip of the one before."""

    angles: list[int] = field(default_factory=_default_angles)
    speeds: tuple[int, int, int] = (1, 2, 3)
    radii: tuple[float, float, float] = (0.5, 0.2, 0.05)

    def tick(self) -> list[int]:
        """Advance every hand by its speed, in whole degrees modulo 360."""
        self.angles = [(speed + angle) % 360 for speed, angle in zip(self.speeds, self.angles)]
        return list(self.angles)

    def hand_tips(self) -> list[Point2D]:
        """Tip of each hand; hands point up at zero and turn counter-clockwise."""
        tips = []
        x = y = 0.0
        total = 0.0
        for angle, radius in zip(self.angles, self.radii):
            total += angle
            radians = math.radians(total)
            x -= radius * math.sin(radians)
            y += radius * math.cos(radians)
            tips.append((x, y))
        return tips

    def dials(self) -> list[tuple[float, float, float]]:
        """(x, y, radius) of each dial outline."""
        centers = [(0.0, 0.0)] + self.hand_tips()[:-1]
        return [(cx, cy, radius) for (cx, cy), radius in zip(centers, self.radii)]