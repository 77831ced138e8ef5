"""Analogue two-axis joystick reading, calibration and direction mapping."""

from __future__ import annotations

import math
from typing import Callable

from .utils import Direction, Polar, Vector2D

TOL = 0.1
"""Magnitude below which the stick is treated as centred."""

_SEGMENTS = (
    (22.5, Direction.N),
    (67.5, Direction.NE),
    (112.5, Direction.E),
    (157.5, Direction.SE),
    (202.5, Direction.S),
    (247.5, Direction.SW),
    (292.5, Direction.W),
    (337.5, Direction.NW),
)


def direction_from_angle(angle: float) -> Direction:
    """Map a compass angle (negative meaning centred) to one of eight directions."""
    if angle < 0.0:
        return Direction.CENTRE
    for limit, direction in _SEGMENTS:
        if angle < limit:
            return direction
    return Direction.N


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


class Joystick:
    """Joystick built from two readers that each return a value in 0..1."""

    def __init__(
        self,
        read_vert: Callable[[], float],
        read_horiz: Callable[[], float],
    ) -> None:
        self._read_vert = read_vert
        self._read_horiz = read_horiz
        self._x0 = 0.5
        self._y0 = 0.5

    def init(self) -> None:
        """Record the current readings as the centre; call with the stick at rest."""
        self._x0 = self._read_horiz()
        self._y0 = self._read_vert()

    def get_coord(self) -> Vector2D:
        """Raw coordinate in -1..1, positive up and right."""
        x = 2.0 * (self._read_horiz() - self._x0)
        y = 2.0 * (self._read_vert() - self._y0)
        return Vector2D(-x, y)

    def get_mapped_coord(self) -> Vector2D:
        """Raw coordinate mapped from the unit square onto the unit circle."""
        coord = self.get_coord()
        x = coord.x * _sqrt(1.0 - coord.y**2 / 2.0)
        y = coord.y * _sqrt(1.0 - coord.x**2 / 2.0)
        return Vector2D(x, y)

    def get_polar(self) -> Polar:
        """Magnitude and compass angle (0 north, clockwise, -1 when centred)."""
        coord = self.get_mapped_coord()
        x, y = coord.y, coord.x
        mag = math.sqrt(x * x + y * y)
        angle = math.degrees(math.atan2(y, x))
        if angle < 0.0:
            angle += 360.0
        if mag < TOL:
            return Polar(0.0, -1.0)
        return Polar(mag, angle)

    def get_mag(self) -> float:
        return self.get_polar().mag

    def get_angle(self) -> float:
        return self.get_polar().angle

    def get_direction(self) -> Direction:
        return direction_from_angle(self.get_angle())