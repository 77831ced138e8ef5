"""Small value types shared by the input and game modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Direction(IntEnum):
    """Compass direction of the joystick, CENTRE when it is at rest."""

    CENTRE = 0
    N = 1
    NE = 2
    E = 3
    SE = 4
    S = 5
    SW = 6
    W = 7
    NW = 8


@dataclass(frozen=True)
class Position2D:
    """Integer position on the screen."""

    x: int
    y: int


@dataclass(frozen=True)
class UserInput:
    """One frame of player input: a direction and its magnitude."""

    d: Direction
    mag: float


@dataclass(frozen=True)
class Vector2D:
    """Cartesian coordinate pair."""

    x: float
    y: float


@dataclass(frozen=True)
class Polar:
    """Magnitude and compass angle in degrees (-1 when centred)."""

    mag: float
    angle: float