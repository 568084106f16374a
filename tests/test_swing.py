import math

import pytest

from rasterlab.geometry import Vector
from rasterlab.swing import (
    ANGLE_STEP,
    CAMERA_STEP,
    MAX_BOTTOM_RADIUS,
    MIN_BOTTOM_RADIUS,
    ORBIT_DISTANCE,
    RADIUS_STEP,
    SEAT_HALF_SIZE,
    SPIN_FACTOR,
    OrbitCamera,
    Swing,
)


def test_idle_swing_does_not_turn():
    swing = Swing()
    assert swing.tick() == 0.0
    assert swing.rotating is False


def test_speed_up_starts_rotation():
    swing = Swing()
    swing.handle_key("1")
    assert swing.rotating is True
    assert math.isclose(swing.bottom_radius, MIN_BOTTOM_RADIUS + RADIUS_STEP)
    assert swing.spin == ANGLE_STEP
    assert math.isclose(swing.tick(), ANGLE_STEP * SPIN_FACTOR)


def test_radius_is_capped():
    swing = Swing()
    for _ in range(20):
        swing.handle_key("1")
    assert math.isclose(swing.bottom_radius, MAX_BOTTOM_RADIUS)
    steps = round((MAX_BOTTOM_RADIUS - MIN_BOTTOM_RADIUS) / RADIUS_STEP)
    assert swing.spin == steps * ANGLE_STEP


def test_slow_down_to_rest_stops_rotation():
    swing = Swing()
    swing.handle_key("1")
    swing.handle_key("2")
    assert swing.rotating is False
    assert swing.bottom_radius == MIN_BOTTOM_RADIUS
    assert swing.spin == 0.0


def test_slow_down_from_rest_stays_at_rest():
    swing = Swing()
    swing.handle_key("2")
    assert swing.bottom_radius == MIN_BOTTOM_RADIUS
    assert swing.rotating is False


def test_mouse_toggles_axes():
    swing = Swing()
    swing.handle_mouse("left", True)
    assert swing.show_axes is False
    swing.handle_mouse("left", False)
    assert swing.show_axes is False


@pytest.mark.parametrize("presses", [0, 3, 8])
def test_strings_keep_their_length(presses):
    swing = Swing()
    for _ in range(presses):
        swing.handle_key("1")
    swing.tick()
    seats = swing.seats()
    assert len(seats) == 6
    for seat in seats:
        assert math.isclose((seat.inner - seat.top).length(), swing.string_length)
        assert math.isclose((seat.outer - seat.top).length(), swing.string_length)


def test_seat_width_is_fixed():
    for seat in Swing().seats():
        a, _, _, d = seat.corners
        assert math.isclose((a - d).length(), 2 * SEAT_HALF_SIZE)


def test_rotation_moves_seats_about_vertical_axis():
    still = Swing().seats()
    swing = Swing()
    swing.handle_key("1")
    for _ in range(5):
        swing.tick()
    moving = swing.seats()
    assert not math.isclose(moving[0].top.x, still[0].top.x)
    assert math.isclose(moving[0].top.y, 0.0, abs_tol=1e-12)
    assert math.isclose(
        math.hypot(moving[0].top.x, moving[0].top.z), math.hypot(still[0].top.x, still[0].top.z)
    )


def test_camera_up_and_down():
    cam = OrbitCamera()
    start = cam.position
    cam.handle_special_key("up")
    assert math.isclose(cam.position.y, start.y + CAMERA_STEP)
    cam.handle_special_key("down")
    assert math.isclose(cam.position.y, start.y)


@pytest.mark.parametrize("key", ["left", "right"])
def test_camera_side_moves_keep_orbit_distance(key):
    cam = OrbitCamera()
    start = cam.position
    cam.handle_special_key(key)
    assert math.isclose(math.hypot(cam.position.x, cam.position.z), ORBIT_DISTANCE)
    assert cam.position.y == start.y
    assert cam.position != start


def test_camera_ignores_other_keys():
    cam = OrbitCamera()
    cam.handle_special_key("home")
    assert cam.position == Vector(4, 4, 4)


def test_camera_rejects_unknown_key_name():
    with pytest.raises(ValueError):
        OrbitCamera().handle_special_key("sideways")