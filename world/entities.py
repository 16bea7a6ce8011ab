"""
buffet_race module: world/entities.py

Player and food primitives. All entities are frozen; the update step builds
new ones with dataclasses.replace instead of mutating.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import math
from typing import NamedTuple


class Vec3(NamedTuple):
    x: float
    y: float
    z: float

    def horizontal_distance(self, other: "Vec3") -> float:
        # height is ignored everywhere in gameplay
        return math.hypot(other.x - self.x, other.z - self.z)


ZERO = Vec3(0.0, 0.0, 0.0)


class FoodShape(Enum):
    CUBE = "cube"
    SPHERE = "sphere"
    TETRAHEDRON = "tetrahedron"


@dataclass(frozen=True)
class Player:
    id: int
    position: Vec3
    heading: float = 0.0
    velocity: Vec3 = ZERO
    score: int = 0
    color: str = "#FFFFFF"

    # jump arc
    is_jumping: bool = False
    vertical_velocity: float = 0.0


@dataclass(frozen=True)
class FoodItem:
    id: int
    position: Vec3
    shape: FoodShape = FoodShape.CUBE
    color: str = "#FFFFFF"
    consumed: bool = False
