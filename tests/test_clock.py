import math

import pytest

from rasterlab.clock import (
    CLOCK_RADIUS,
    hand_angles,
    hand_endpoint,
    hour_markers,
    minute_markers,
    ring_points,
)


def test_hand_angles_at_three_o_clock():
    angles = hand_angles(3, 0, 0, 0)
    assert angles.hour == pytest.approx(90.0)
    assert angles.minute == pytest.approx(0.0)
    assert angles.second == pytest.approx(0.0)


def test_hand_angles_afternoon_with_fractions():
    angles = hand_angles(15, 30, 15, 500)
    assert angles.hour == pytest.approx(105.0)
    assert angles.minute == pytest.approx(180.0)
    assert angles.second == pytest.approx(93.0)


def test_hour_wraps_at_twelve():
    assert hand_angles(12, 0, 0, 0).hour == pytest.approx(0.0)
    assert hand_angles(0, 0, 0, 0).hour == pytest.approx(0.0)


@pytest.mark.parametrize(
    "angle, length, expected",
    [(0, 40, (0.0, 40.0)), (90, 20, (20.0, 0.0)), (180, 30, (0.0, -30.0)), (270, 55, (-55.0, 0.0))],
)
def test_hand_endpoint(angle, length, expected):
    x, y = hand_endpoint(angle, length)
    assert x == pytest.approx(expected[0], abs=1e-9)
    assert y == pytest.approx(expected[1], abs=1e-9)


def test_ring_points_lie_on_circle():
    points = ring_points(3.0, -2.0, CLOCK_RADIUS, 100)
    assert len(points) == 100
    for x, y in points:
        assert math.hypot(x - 3.0, y + 2.0) == pytest.approx(CLOCK_RADIUS)
    assert points[0] == pytest.approx((3.0 + CLOCK_RADIUS, -2.0))


def test_ring_points_rejects_zero_segments():
    with pytest.raises(ValueError):
        ring_points(0, 0, 1, 0)


def test_hour_markers():
    markers = hour_markers()
    assert len(markers) == 12
    for outer, inner in markers:
        assert math.hypot(*outer) == pytest.approx(52.0)
        assert math.hypot(*inner) == pytest.approx(45.0)
    assert markers[0] == (pytest.approx((52.0, 0.0)), pytest.approx((45.0, 0.0)))


def test_minute_markers_skip_hour_positions():
    markers = minute_markers()
    assert len(markers) == 48
    for outer, inner in markers:
        assert math.hypot(*outer) == pytest.approx(52.0)
        assert math.hypot(*inner) == pytest.approx(49.0)
    hour_directions = {
        (round(x / 52.0, 6), round(y / 52.0, 6)) for (x, y), _ in hour_markers()
    }
    minute_directions = {(round(x / 52.0, 6), round(y / 52.0, 6)) for (x, y), _ in markers}
    assert hour_directions.isdisjoint(minute_directions)