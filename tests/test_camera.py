import math

import pytest

from fdfview.camera import Camera


def test_initial_values():
    cam = Camera(window_width=800, window_height=600)
    assert cam.scale * 2 == 800
    assert (cam.x, cam.y) == (0, 0)
    assert cam.z_factor == 5
    assert cam.zoom == 0.5
    assert (cam.x_ax, cam.y_ax, cam.z_ax) == (30, 0, 30)


def test_scale_uses_larger_dimension():
    cam = Camera(window_width=600, window_height=900)
    assert cam.scale * 2 == 900


def test_initial_angles_match_degrees():
    cam = Camera()
    assert cam.pitch == pytest.approx(math.radians(cam.x_ax))
    assert cam.yaw == pytest.approx(0.0)
    assert cam.roll == pytest.approx(math.radians(cam.z_ax))


def test_view_top():
    cam = Camera()
    cam.view_top()
    assert (cam.x_ax, cam.y_ax, cam.z_ax) == (0, 0, 0)
    assert (cam.yaw, cam.pitch, cam.roll) == (0.0, 0.0, 0.0)


def test_view_front():
    cam = Camera()
    cam.view_front()
    assert (cam.x_ax, cam.y_ax, cam.z_ax) == (90, 0, 0)
    assert cam.pitch == pytest.approx(math.pi / 2)
    assert cam.yaw == 0.0


def test_view_side():
    cam = Camera()
    cam.view_side()
    assert (cam.x_ax, cam.y_ax, cam.z_ax) == (0, 90, 0)
    assert cam.yaw == pytest.approx(math.pi / 2)
    assert cam.pitch == 0.0


def test_view_iso_restores_default_axes():
    cam = Camera()
    cam.view_top()
    cam.view_iso()
    assert (cam.x_ax, cam.y_ax, cam.z_ax) == (30, 0, 30)
    assert cam.roll == pytest.approx(math.pi / 6)


def test_update_angles_follows_degrees():
    cam = Camera()
    cam.x_ax = 180
    cam.y_ax = -90
    cam.update_angles()
    assert cam.pitch == pytest.approx(math.pi)
    assert cam.yaw == pytest.approx(-math.pi / 2)


def test_reset_restores_defaults():
    cam = Camera(window_width=640, window_height=480)
    cam.x += 100
    cam.y -= 100
    cam.zoom *= 1.5
    cam.z_factor += 1
    cam.scale = 3
    cam.view_side()
    cam.reset()
    assert cam == Camera(window_width=640, window_height=480)


def test_instances_are_independent():
    first = Camera()
    second = Camera()
    first.view_front()
    assert second.x_ax == 30
    assert first.x_ax == 90