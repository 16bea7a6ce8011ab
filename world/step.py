"""
buffet_race module: world/step.py

The per-tick update: targeting, movement, jump arc, consumption, boundary clamp.

advance() is pure. It never mutates the World it is given and reports food
depletion through its return value instead of calling back into the shell.
Claims are resolved in ascending player id, against the food state at the
start of the tick, so a later player that reached an item claimed earlier in
the same tick simply retargets on the next one.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging
import math
from typing import Dict, List, Optional, Tuple

import buffet_config as config
from world import errors
from world.entities import FoodItem, Player, ZERO
from world.food import nearest_food
from world.physics import clamp_to_arena, heading_toward, integrate_jump, move_toward
from world.world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Claim:
    player_id: int
    food_id: int


@dataclass(frozen=True)
class StepResult:
    world: World
    all_food_consumed: bool
    claims: Tuple[Claim, ...] = ()


def is_degenerate(delta: float) -> bool:
    if isinstance(delta, bool) or not isinstance(delta, (int, float)):
        return True
    return not math.isfinite(delta) or delta <= 0


def _check_step_param(name: str, value: float) -> None:
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or not math.isfinite(value)
        or value < 0
    ):
        raise errors.InvalidConfiguration(errors.ERROR_STEP_PARAM.format(name=name, value=value))


def _move_player(
    player: Player,
    target: Optional[FoodItem],
    dt: float,
    speed: float,
) -> Player:
    position = player.position
    velocity = ZERO
    heading = player.heading

    if target is not None:
        moved, velocity, _ = move_toward(position, target.position, speed, dt)
        if moved != position:
            heading = heading_toward(position, moved)
        position = moved

    is_jumping = player.is_jumping
    vertical_velocity = player.vertical_velocity
    if is_jumping:
        y, vertical_velocity, is_jumping = integrate_jump(position.y, vertical_velocity, dt)
        position = position._replace(y=y)

    return replace(
        player,
        position=position,
        velocity=velocity,
        heading=heading,
        is_jumping=is_jumping,
        vertical_velocity=vertical_velocity,
    )


def advance(
    world: World,
    delta: float,
    speed: float = config.PLAYER_SPEED,
    pickup_radius: float = config.PICKUP_RADIUS,
) -> StepResult:
    _check_step_param("Speed", speed)
    _check_step_param("Pickup radius", pickup_radius)

    if is_degenerate(delta):
        logger.debug("Degenerate tick ignored (delta=%r)", delta)
        return StepResult(world=world, all_food_consumed=world.all_food_consumed)

    dt = min(float(delta), config.MAX_TICK_DELTA)

    # targeting reads the tick-start snapshot; claims write into `food`
    snapshot = world.food_items
    food: List[FoodItem] = list(snapshot)
    slot = {item.id: i for i, item in enumerate(food)}
    claimed = set()
    claims: List[Claim] = []
    updated: Dict[int, Player] = {}

    for player in sorted(world.players, key=lambda p: p.id):
        target = nearest_food(player.position, snapshot)
        moved = _move_player(player, target, dt, speed)

        if (
            target is not None
            and target.id not in claimed
            and moved.position.horizontal_distance(target.position) <= pickup_radius
        ):
            claimed.add(target.id)
            food[slot[target.id]] = replace(target, consumed=True)
            moved = replace(moved, score=moved.score + 1)
            claims.append(Claim(player_id=player.id, food_id=target.id))
            logger.debug("Player %d claimed food %d", player.id, target.id)

        updated[player.id] = replace(
            moved, position=clamp_to_arena(moved.position, world.map_size)
        )

    next_world = replace(
        world,
        players=tuple(updated[p.id] for p in world.players),
        food_items=tuple(food),
        elapsed=world.elapsed + dt,
    )
    return StepResult(
        world=next_world,
        all_food_consumed=next_world.all_food_consumed,
        claims=tuple(claims),
    )


def start_jump(
    world: World,
    player_id: int,
    velocity: float = config.JUMP_VELOCITY,
) -> World:
    """
    Kick off a cosmetic jump for one player. Already-airborne players are left alone.
    """
    player = world.player(player_id)
    if player.is_jumping:
        return world
    if velocity <= 0:
        raise errors.InvalidConfiguration(errors.ERROR_JUMP_VELOCITY.format(value=velocity))

    jumped = replace(player, is_jumping=True, vertical_velocity=float(velocity))
    return replace(
        world,
        players=tuple(jumped if p.id == player_id else p for p in world.players),
    )
