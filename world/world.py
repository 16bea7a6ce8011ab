"""
buffet_race module: world/world.py

World state container (players, food, arena bounds).
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import random
from typing import Optional, Sequence, Tuple

import buffet_config as config
from world import errors
from world.entities import FoodItem, Player, Vec3
from world.food import remaining, spawn_food
from world.physics import wrap_angle

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_config(player_count: int, food_count: int, map_size: float) -> None:
    lo, hi = config.PLAYER_COUNT_RANGE
    if not _is_count(player_count) or not lo <= player_count <= hi:
        raise errors.InvalidConfiguration(
            errors.ERROR_PLAYER_COUNT.format(low=lo, high=hi, value=player_count)
        )
    lo, hi = config.FOOD_COUNT_RANGE
    if not _is_count(food_count) or not lo <= food_count <= hi:
        raise errors.InvalidConfiguration(
            errors.ERROR_FOOD_COUNT.format(low=lo, high=hi, value=food_count)
        )
    if (
        not _is_number(map_size)
        or not math.isfinite(map_size)
        or map_size <= 0
    ):
        raise errors.InvalidConfiguration(errors.ERROR_MAP_SIZE.format(value=map_size))


def _check_layout(kind: str, positions, map_size: float) -> None:
    for i, pos in enumerate(positions):
        x, y, z = pos
        inside = (
            all(_is_number(v) and math.isfinite(v) for v in (x, y, z))
            and -map_size <= x <= map_size
            and -map_size <= z <= map_size
        )
        if not inside:
            raise errors.InvalidConfiguration(
                errors.ERROR_LAYOUT_POSITION.format(
                    kind=kind, index=i, value=tuple(pos), map_size=map_size
                )
            )


def spawn_players(n: int, map_size: float) -> list[Player]:
    """
    Even ring at 0.75 * map_size, each player facing the arena centre.
    """
    radius = map_size * config.SPAWN_RADIUS_FACTOR
    players = []
    for i in range(n):
        angle = (i / n) * math.pi * 2
        players.append(
            Player(
                id=i,
                position=Vec3(
                    math.cos(angle) * radius,
                    config.GROUND_HEIGHT,
                    math.sin(angle) * radius,
                ),
                heading=wrap_angle(angle + math.pi),
                color=config.PLAYER_COLORS[i % len(config.PLAYER_COLORS)],
            )
        )
    return players


@dataclass(frozen=True)
class World:
    players: Tuple[Player, ...]
    food_items: Tuple[FoodItem, ...]
    map_size: float
    elapsed: float = 0.0

    @staticmethod
    def create(
        player_count: int,
        food_count: int,
        map_size: float = config.MAP_SIZE,
        rng: Optional[random.Random] = None,
    ) -> "World":
        _check_config(player_count, food_count, map_size)
        rng = rng if rng is not None else random.Random()

        world = World(
            players=tuple(spawn_players(player_count, map_size)),
            food_items=tuple(spawn_food(food_count, map_size, rng)),
            map_size=float(map_size),
        )
        logger.info(
            "World created: %d players, %d food, map_size=%.1f",
            player_count, food_count, map_size,
        )
        return world

    @staticmethod
    def from_layout(
        player_positions: Sequence[Tuple[float, float, float]],
        food_positions: Sequence[Tuple[float, float, float]],
        map_size: float = config.MAP_SIZE,
    ) -> "World":
        """
        Non-random world from explicit coordinates. Ids follow list order and
        players start facing +x; everything else uses spawn defaults. Every
        point must be finite with x/z inside the arena.
        """
        _check_config(len(player_positions), len(food_positions), map_size)
        _check_layout("Player", player_positions, map_size)
        _check_layout("Food item", food_positions, map_size)
        players = tuple(
            Player(
                id=i,
                position=Vec3(*pos),
                color=config.PLAYER_COLORS[i % len(config.PLAYER_COLORS)],
            )
            for i, pos in enumerate(player_positions)
        )
        food = tuple(
            FoodItem(id=i, position=Vec3(*pos)) for i, pos in enumerate(food_positions)
        )
        return World(players=players, food_items=food, map_size=float(map_size))

    @property
    def scores(self) -> list[int]:
        return [p.score for p in self.players]

    @property
    def remaining_food(self) -> int:
        return remaining(self.food_items)

    @property
    def all_food_consumed(self) -> bool:
        return all(item.consumed for item in self.food_items)

    def player(self, player_id: int) -> Player:
        for p in self.players:
            if p.id == player_id:
                return p
        raise errors.InvalidConfiguration(errors.ERROR_UNKNOWN_PLAYER.format(value=player_id))
