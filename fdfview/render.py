"""Projection of height maps and wireframe drawing into an image."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .camera import Camera
from .fdfmap import HeightMap
from .image import Image

FLAT_COLOR = 0xFF0000
RAISED_COLOR = 0xFFFFFF


@dataclass
class Point:
    """An integer point with a 0xRRGGBB colour."""

    x: int = 0
    y: int = 0
    z: int = 0
    color: int = 0xFFFFFF


def project(point: Point, camera: Camera, width: int, height: int) -> Point:
    """Return where ``point`` lands on a ``width`` x ``height`` screen.

    Coordinates are scaled, rotated about the screen centre by the
    camera's yaw, pitch and roll, zoomed and shifted by the camera offset.
    Every intermediate value is truncated to an integer.
    """
    x = point.x * camera.scale - width // 2
    y = point.y * camera.scale - height // 2
    z = int(point.z * camera.z_factor)
    cos_yaw, sin_yaw = math.cos(camera.yaw), math.sin(camera.yaw)
    cos_pitch, sin_pitch = math.cos(camera.pitch), math.sin(camera.pitch)
    cos_roll, sin_roll = math.cos(camera.roll), math.sin(camera.roll)

    tx, tz = x, z
    x = int(cos_yaw * tx + sin_yaw * tz)
    z = int(-sin_yaw * tx + cos_yaw * tz)
    ty = int(cos_pitch * y - sin_pitch * z)
    tz = int(sin_pitch * y + cos_pitch * z)
    tx = int(cos_roll * x - sin_roll * y)
    y = int(sin_roll * x + cos_roll * ty)
    x = tx

    x = int(x * camera.zoom) + width // 2 + camera.x
    y = int(y * camera.zoom) + height // 2 + camera.y
    return Point(x, y, z, point.color)


def set_pixel(image: Image, point: Point) -> None:
    """Write the colour of ``point`` into ``image``.

    Negative coordinates are ignored, as is anything past the last row;
    an x beyond the right edge runs on into the following row.
    """
    if point.x < 0 or point.y < 0:
        return
    offset = point.y * image.size_line + point.x * (image.bpp // 8)
    if offset < image.size_line * image.height:
        color = point.color
        image.data[offset:offset + 3] = bytes(
            (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF)
        )


def _draw_shallow(image: Image, a: Point, b: Point) -> None:
    dx = b.x - a.x
    dy = b.y - a.y
    step = -1 if dy < 0 else 1
    dy *= step
    if dx == 0:
        return
    d = 2 * dy - dx
    y = a.y
    for x in range(a.x, b.x + 1):
        set_pixel(image, Point(x, y, a.z, a.color))
        if d >= 0:
            y += step
            d -= 2 * dx
        d += 2 * dy


def _draw_steep(image: Image, a: Point, b: Point) -> None:
    dx = b.x - a.x
    dy = b.y - a.y
    step = -1 if dx < 0 else 1
    dx *= step
    if dy == 0:
        return
    d = 2 * dx - dy
    x = a.x
    for y in range(a.y, b.y + 1):
        set_pixel(image, Point(x, y, a.z, a.color))
        if d >= 0:
            x += step
            d -= 2 * dy
        d += 2 * dx


def draw_line(image: Image, a: Point, b: Point, camera: Camera) -> None:
    """Project both ends and draw the segment between them.

    The line takes the colour of whichever end it starts drawing from.
    """
    a = project(a, camera, image.width, image.height)
    b = project(b, camera, image.width, image.height)
    if abs(b.x - a.x) > abs(b.y - a.y):
        if a.x > b.x:
            a, b = b, a
        _draw_shallow(image, a, b)
    else:
        if a.y > b.y:
            a, b = b, a
        _draw_steep(image, a, b)


def fit_scale(height_map: HeightMap, camera: Camera, width: int, height: int) -> None:
    """Set the grid spacing so the map fits the screen, and refresh angles."""
    per_col = width // height_map.cols
    per_row = height // height_map.rows
    camera.scale = per_col if per_col < per_row else per_row
    camera.update_angles()


def _grid_point(height_map: HeightMap, x: int, y: int) -> Point:
    z = height_map.matrix[y][x]
    return Point(x, y, z, FLAT_COLOR if z == 0 else RAISED_COLOR)


def render_map(image: Image, height_map: HeightMap, camera: Camera) -> None:
    """Clear ``image`` and draw the map as a wireframe grid into it."""
    image.clear()
    fit_scale(height_map, camera, image.width, image.height)
    last_col = height_map.cols - 1
    last_row = height_map.rows - 1
    for y in range(height_map.rows):
        for x in range(height_map.cols):
            a = _grid_point(height_map, x, y)
            if x < last_col:
                draw_line(image, a, _grid_point(height_map, x + 1, y), camera)
            if y < last_row:
                draw_line(image, a, _grid_point(height_map, x, y + 1), camera)