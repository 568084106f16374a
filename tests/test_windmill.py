import math
import random

import pytest

from rasterlab.ball import SPEED_STEP
from rasterlab.geometry import Vector
from rasterlab.windmill import (
    HUB,
    MAX_BLADE_SPEED,
    WindmillWorld,
    blade_vertices,
    box_faces,
)


def _close(a, b, tol=1e-9):
    return all(math.isclose(p, q, abs_tol=tol) for p, q in zip(a, b))


def _world():
    return WindmillWorld(rng=random.Random(7))


def test_box_has_six_quads_on_its_bounds():
    faces = box_faces(10, 40)
    assert [f.name for f in faces] == ["top", "bottom", "front", "back", "right", "left"]
    for face in faces:
        assert len(face.vertices) == 4
        for v in face.vertices:
            assert abs(v.x) == 10 and abs(v.y) == 10 and abs(v.z) == 40


def test_box_faces_lie_in_planes():
    faces = {f.name: f for f in box_faces(2, 30)}
    assert all(v.z == 30 for v in faces["top"].vertices)
    assert all(v.z == -30 for v in faces["bottom"].vertices)
    assert all(v.x == 2 for v in faces["front"].vertices)
    assert all(v.y == -2 for v in faces["left"].vertices)


def test_blade_at_zero_matches_drawn_triangle():
    a, b, c = blade_vertices(0)
    assert tuple(a) == pytest.approx((0, 0, 0), abs=1e-9)
    assert tuple(b) == pytest.approx((0, 30, 40), abs=1e-9)
    assert tuple(c) == pytest.approx((10, 30, 40), abs=1e-9)


@pytest.mark.parametrize("angle", [17.0, 90.0, 200.0, -45.0])
def test_blade_rotation_keeps_x_and_radius(angle):
    base = blade_vertices(0)
    turned = blade_vertices(angle)
    for original, rotated in zip(base, turned):
        assert math.isclose(original.x, rotated.x, abs_tol=1e-9)
        assert math.isclose(
            math.hypot(original.y, original.z), math.hypot(rotated.y, rotated.z), abs_tol=1e-9
        )


def test_full_turn_returns_blade():
    start = blade_vertices(0)
    turned = blade_vertices(360)
    assert len(turned) == 3
    for a, b in zip(start, turned):
        assert tuple(b) == pytest.approx(tuple(a), abs=1e-9)


def test_blades_evenly_spaced():
    world = _world()
    tips = [blade[1] - HUB for blade in world.blades()]
    assert len(tips) == 3
    for i in range(3):
        u, v = tips[i], tips[(i + 1) % 3]
        cosine = u.dot(v) / (u.length() * v.length())
        assert math.isclose(cosine, -0.5, abs_tol=1e-9)
    assert all(_close(blade[0], HUB) for blade in world.blades())


def test_w_increases_blade_speed_up_to_cap():
    world = _world()
    start = world.blade_speed
    world.handle_key("w")
    assert world.blade_speed == start + 2
    for _ in range(10):
        world.handle_key("w")
    assert world.blade_speed == MAX_BLADE_SPEED


def test_s_never_goes_below_minimum():
    world = _world()
    start = world.blade_speed
    world.handle_key("s")
    assert world.blade_speed == start
    world.handle_key("w")
    world.handle_key("s")
    assert world.blade_speed == start


def test_w_does_not_move_camera():
    world = _world()
    position, look = world.camera.position, world.camera.look
    world.handle_key("w")
    assert world.camera.position == position
    assert world.camera.look == look


def test_rotation_key_turns_camera():
    world = _world()
    look = world.camera.look
    world.handle_key("1")
    assert not _close(world.camera.look, look)
    assert math.isclose(world.camera.look.length(), 1.0)


def test_tick_advances_blade_angle():
    world = _world()
    world.handle_key("w")
    first = world.tick()
    second = world.tick()
    assert first == world.blade_speed
    assert second == 2 * world.blade_speed
    assert world.blade_angle == second


def test_mouse_toggles():
    world = _world()
    world.handle_mouse("left", True)
    assert world.draw_axes is True
    assert len(world.axis_segments()) == 2
    world.handle_mouse("right", True)
    assert world.draw_grid is True
    world.handle_mouse("left", False)
    assert world.draw_axes is True


def test_axes_hidden_by_default():
    assert _world().axis_segments() == []


def test_space_toggles_ball_and_plus_changes_speed():
    world = _world()
    start = world.ball.initial_speed
    world.handle_key("+")
    assert world.ball.initial_speed == start + SPEED_STEP
    world.handle_key(" ")
    assert world.ball.running is True
    world.handle_key("+")
    assert world.ball.initial_speed == start + SPEED_STEP


def test_special_key_moves_camera_along_look():
    world = _world()
    position, look = world.camera.position, world.camera.look
    world.handle_special_key("up")
    expected = tuple(position + look * 2)
    assert tuple(world.camera.position) == pytest.approx(expected, abs=1e-9)


def test_unknown_mouse_button_rejected():
    with pytest.raises(ValueError):
        _world().handle_mouse("wheel", True)


def test_reset_keeps_ball_on_floor():
    world = _world()
    world.handle_key("r")
    assert world.ball.position.z == 4.0
    assert world.ball.running is False
    assert isinstance(world.ball.velocity, Vector)
    assert math.isclose(world.ball.velocity.length(), world.ball.initial_speed)