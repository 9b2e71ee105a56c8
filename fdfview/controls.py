"""Keyboard and mouse controls acting on the camera."""

from __future__ import annotations

from enum import IntEnum

from .camera import Camera

_MOVE_STEP = 100
_ROTATE_STEP = 5
_ZOOM_FACTOR = 1.5
_ZOOM_MAX = 100
_ZOOM_MIN = 0.1

WHEEL_UP = 4
WHEEL_DOWN = 5


class Key(IntEnum):
    """Key symbols the viewer reacts to."""

    ESCAPE = 0xFF1B
    ARROW_LEFT = 0xFF51
    ARROW_UP = 0xFF52
    ARROW_RIGHT = 0xFF53
    ARROW_DOWN = 0xFF54
    PG_UP = 0xFF55
    PG_DOWN = 0xFF56
    ZOOM_IN = 0xFFAB
    ZOOM_OUT = 0xFFAD
    NUM_2 = 0xFFB2
    NUM_4 = 0xFFB4
    NUM_6 = 0xFFB6
    NUM_7 = 0xFFB7
    NUM_8 = 0xFFB8
    NUM_9 = 0xFFB9
    FRONT = ord("f")
    ISO = ord("i")
    RESET = ord("r")
    SIDE = ord("s")
    TOP = ord("t")


def view_presets(camera: Camera, keycode: int) -> None:
    """Switch to a preset view, or reset the camera, for the matching key."""
    presets = {
        Key.TOP: camera.view_top,
        Key.FRONT: camera.view_front,
        Key.SIDE: camera.view_side,
        Key.ISO: camera.view_iso,
        Key.RESET: camera.reset,
    }
    action = presets.get(keycode)
    if action is not None:
        action()


def movement_controls(camera: Camera, keycode: int) -> None:
    """Pan, rotate or zoom the camera for the matching key."""
    if keycode == Key.ARROW_LEFT:
        camera.x -= _MOVE_STEP
    elif keycode == Key.ARROW_RIGHT:
        camera.x += _MOVE_STEP
    elif keycode == Key.ARROW_UP:
        camera.y -= _MOVE_STEP
    elif keycode == Key.ARROW_DOWN:
        camera.y += _MOVE_STEP
    elif keycode == Key.NUM_4:
        camera.y_ax -= _ROTATE_STEP
    elif keycode == Key.NUM_6:
        camera.y_ax += _ROTATE_STEP
    elif keycode == Key.NUM_7:
        camera.z_ax += _ROTATE_STEP
    elif keycode == Key.NUM_9:
        camera.z_ax -= _ROTATE_STEP
    elif keycode == Key.NUM_8:
        camera.x_ax += _ROTATE_STEP
    elif keycode == Key.NUM_2:
        camera.x_ax -= _ROTATE_STEP
    elif keycode == Key.ZOOM_IN and camera.zoom < _ZOOM_MAX:
        camera.zoom *= _ZOOM_FACTOR
    elif keycode == Key.ZOOM_OUT and camera.zoom > _ZOOM_MIN:
        camera.zoom /= _ZOOM_FACTOR


def apply_key(camera: Camera, keycode: int) -> bool:
    """Apply a released key to the camera.

    Returns False when the key asks the viewer to quit, True otherwise.
    """
    if keycode == Key.PG_UP:
        camera.z_factor -= 1
    if keycode == Key.PG_DOWN:
        camera.z_factor += 1
    view_presets(camera, keycode)
    movement_controls(camera, keycode)
    return keycode != Key.ESCAPE


def apply_mouse(camera: Camera, button: int) -> None:
    """Zoom with the mouse wheel: button 4 zooms in, button 5 zooms out."""
    if button == WHEEL_DOWN and camera.zoom > _ZOOM_MIN:
        camera.zoom /= _ZOOM_FACTOR
    if button == WHEEL_UP:
        camera.zoom *= _ZOOM_FACTOR