"""Geometry of an analog clock face: rim, markers and hands."""

from __future__ import annotations

import math
from dataclasses import dataclass

CLOCK_RADIUS = 55.0
HOUR_HAND_LENGTH = 20.0
MINUTE_HAND_LENGTH = 30.0
SECOND_HAND_LENGTH = 40.0

HOUR_HAND_WIDTH = 4.0
MINUTE_HAND_WIDTH = 3.0
SECOND_HAND_WIDTH = 2.0

HOUR_MARKER_START = 10.0
HOUR_MARKER_END = 3.0
MINUTE_MARKER_START = 6.0
MINUTE_MARKER_END = 3.0

RIM_SEGMENTS = 100
HAND_SQUARE_HALF_SIZE = 2.0

Point2D = tuple[float, float]
Marker = tuple[Point2D, Point2D]


@dataclass(frozen=True)
class HandAngles:
    """Clockwise angles in degrees from twelve o'clock."""

    hour: float
    minute: float
    second: float


def ring_points(cx: float, cy: float, radius: float, segments: int) -> list[Point2D]:
    """Vertices of a closed polygon approximating a circle; the first is not repeated."""
    if segments < 1:
        raise ValueError("a ring needs at least one segment")
    return [
        (
            cx + radius * math.cos(2.0 * math.pi * i / segments),
            cy + radius * math.sin(2.0 * math.pi * i / segments),
        )
        for i in range(segments)
    ]


def hand_angles(hour: int, minute: int, second: int, millisecond: float) -> HandAngles:
    """Hand angles for a wall-clock time; the hour hand creeps with the minutes."""
    hour_angle = (hour % 12) * 30.0 + (minute / 60.0) * 30.0
    minute_angle = minute * 6.0
    second_angle = second * 6.0 + (millisecond / 1000.0) * 6.0
    return HandAngles(hour_angle, minute_angle, second_angle)


def hand_endpoint(angle: float, length: float) -> Point2D:
    """Tip of a hand of ``length`` turned ``angle`` degrees clockwise from twelve."""
    radians = math.radians(90.0 - angle)
    return length * math.cos(radians), length * math.sin(radians)


def _markers(count: int, step_degrees: float, start: float, end: float, skip_every: int) -> list[Marker]:
    inner_radius = CLOCK_RADIUS - start
    outer_radius = CLOCK_RADIUS - end
    markers = []
    for index in range(count):
        if skip_every and index % skip_every == 0:
            continue
        angle = math.radians(index * step_degrees)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        outer = (outer_radius * cos_a, outer_radius * sin_a)
        inner = (inner_radius * cos_a, inner_radius * sin_a)
        markers.append((outer, inner))
    return markers


def hour_markers() -> list[Marker]:
    """Twelve (outer, inner) tick segments, one per hour."""
    return _markers(12, 30.0, HOUR_MARKER_START, HOUR_MARKER_END, 0)


def minute_markers() -> list[Marker]:
    """(outer, inner) tick segments for the minutes not covered by hour ticks."""
    return _markers(60, 6.0, MINUTE_MARKER_START, MINUTE_MARKER_END, 5)