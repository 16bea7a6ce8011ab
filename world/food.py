"""
buffet_race module: world/food.py

Food system:
- Spawns uniformly across the arena floor, kept off the boundary by a margin
- Each item has a cosmetic shape and colour
- Items never move; they are only flipped to consumed
"""

from __future__ import annotations
import random
from typing import Iterable, List, Optional, Sequence

import buffet_config as config
from world.entities import FoodItem, FoodShape, Vec3

FOOD_SHAPES = list(FoodShape)


def spawn_food(
    n: int,
    map_size: float,
    rng: random.Random,
    margin: float = config.FOOD_MARGIN,
) -> List[FoodItem]:
    """
    Uniform scatter over [-map_size + margin, map_size - margin] on x and z.
    """
    lo = -map_size + margin
    hi = map_size - margin
    if hi < lo:
        # arena smaller than the margin: everything lands on the centre line
        lo = hi = 0.0

    items: List[FoodItem] = []
    for i in range(n):
        x = rng.uniform(lo, hi)
        z = rng.uniform(lo, hi)
        shape = rng.choice(FOOD_SHAPES)
        color = rng.choice(config.FOOD_COLORS)
        items.append(
            FoodItem(
                id=i,
                position=Vec3(x, config.GROUND_HEIGHT, z),
                shape=shape,
                color=color,
            )
        )
    return items


def nearest_food(position: Vec3, items: Iterable[FoodItem]) -> Optional[FoodItem]:
    """
    Returns the closest unconsumed item (horizontal distance), or None if none remain.
    Equal distances go to the lowest id.
    """
    best = None
    best_key = None
    for item in items:
        if item.consumed:
            continue
        dx = item.position.x - position.x
        dz = item.position.z - position.z
        key = (dx * dx + dz * dz, item.id)
        if best_key is None or key < best_key:
            best_key = key
            best = item
    return best


def remaining(items: Sequence[FoodItem]) -> int:
    return sum(1 for item in items if not item.consumed)
