"""View parameters for projecting a height map onto the screen."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080


@dataclass
class Camera:
    """Position, rotation, zoom and height exaggeration of the view.

    ``x_ax``, ``y_ax`` and ``z_ax`` are rotation angles in degrees about
    each axis; ``pitch``, ``yaw`` and ``roll`` hold them in radians.
    """

    window_width: int = DEFAULT_WIDTH
    window_height: int = DEFAULT_HEIGHT
    scale: int = field(init=False, default=0)
    x: int = field(init=False, default=0)
    y: int = field(init=False, default=0)
    z_factor: float = field(init=False, default=5)
    x_ax: float = field(init=False, default=30)
    y_ax: float = field(init=False, default=0)
    z_ax: float = field(init=False, default=30)
    zoom: float = field(init=False, default=0.5)
    yaw: float = field(init=False, default=0.0)
    pitch: float = field(init=False, default=0.0)
    roll: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.reset()

    def update_angles(self) -> None:
        """Recompute the radian angles from the degree angles."""
        self.yaw = self.y_ax * math.pi / 180
        self.pitch = self.x_ax * math.pi / 180
        self.roll = self.z_ax * math.pi / 180

    def _set_axes(self, x_ax: float, y_ax: float, z_ax: float) -> None:
        self.x_ax, self.y_ax, self.z_ax = x_ax, y_ax, z_ax
        self.update_angles()

    def view_top(self) -> None:
        """Look straight down on the map."""
        self._set_axes(0, 0, 0)

    def view_front(self) -> None:
        """Look at the map from the front."""
        self._set_axes(90, 0, 0)

    def view_side(self) -> None:
        """Look at the map from the side."""
        self._set_axes(0, 90, 0)

    def view_iso(self) -> None:
        """Use the isometric-style default view."""
        self._set_axes(30, 0, 30)

    def reset(self) -> None:
        """Restore every view setting to its initial value."""
        self.scale = max(self.window_width, self.window_height) // 2
        self.x = 0
        self.y = 0
        self.z_factor = 5
        self.zoom = 0.5
        self.view_iso()