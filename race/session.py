"""
buffet_race module: race/session.py

Race lifecycle around the simulation core:
- SETUP: player/food counts can be adjusted
- RUNNING: each frame calls advance() and counts the timer down
- OVER: timer ran out or every food item was claimed; restart builds a fresh world

Nothing here touches pygame, so the shell logic is testable headless.
"""

from __future__ import annotations
from enum import Enum
import logging
import math
import random
from typing import List, Optional

import buffet_config as config
from world.step import StepResult, advance, is_degenerate, start_jump
from world.world import World

logger = logging.getLogger(__name__)


class Phase(Enum):
    SETUP = "setup"
    RUNNING = "running"
    OVER = "over"


class RaceSession:
    def __init__(
        self,
        player_count: int = config.DEFAULT_PLAYERS,
        food_count: int = config.DEFAULT_FOOD,
        duration: float = config.RACE_DURATION,
        map_size: float = config.MAP_SIZE,
        rng: Optional[random.Random] = None,
    ):
        self.player_count = _clamp(player_count, *config.PLAYER_COUNT_RANGE)
        self.food_count = _clamp(food_count, *config.SETUP_FOOD_RANGE)
        self.duration = duration
        self.map_size = map_size
        self.rng = rng if rng is not None else random.Random()

        self.phase = Phase.SETUP
        self.time_left = duration
        self.world: Optional[World] = None
        self.last_step: Optional[StepResult] = None
        self.show_instructions = False

    # setup controls

    def adjust_players(self, step: int) -> int:
        if self.phase is Phase.SETUP:
            self.player_count = _clamp(self.player_count + step, *config.PLAYER_COUNT_RANGE)
        return self.player_count

    def adjust_food(self, step: int) -> int:
        if self.phase is Phase.SETUP:
            self.food_count = _clamp(self.food_count + step, *config.SETUP_FOOD_RANGE)
        return self.food_count

    def toggle_instructions(self) -> bool:
        self.show_instructions = not self.show_instructions
        return self.show_instructions

    # lifecycle

    def start(self) -> World:
        self.world = World.create(
            self.player_count, self.food_count, self.map_size, rng=self.rng
        )
        self.time_left = self.duration
        self.last_step = None
        self._set_phase(Phase.RUNNING)
        return self.world

    def restart(self) -> World:
        return self.start()

    def jump(self, player_id: Optional[int] = None) -> None:
        """Start a jump for one player, or for everyone when player_id is None."""
        if self.phase is not Phase.RUNNING or self.world is None:
            return
        ids = [p.id for p in self.world.players] if player_id is None else [player_id]
        for pid in ids:
            self.world = start_jump(self.world, pid)

    def update(self, frame_dt: float) -> Optional[StepResult]:
        if self.phase is not Phase.RUNNING or self.world is None:
            return None

        result = advance(self.world, frame_dt)
        self.world = result.world
        self.last_step = result

        if result.claims:
            logger.debug("%d claim(s) this frame", len(result.claims))

        if not is_degenerate(frame_dt):
            self.time_left = max(0.0, self.time_left - frame_dt)

        if result.all_food_consumed:
            logger.info("All food consumed after %.2fs", self.world.elapsed)
            self._set_phase(Phase.OVER)
        elif self.time_left <= 0.0:
            logger.info("Time up")
            self._set_phase(Phase.OVER)
        return result

    # read side

    @property
    def scores(self) -> List[int]:
        if self.world is None:
            return []
        return self.world.scores

    def leaders(self) -> List[int]:
        """Ids of the players sharing the top score."""
        scores = self.scores
        if not scores:
            return []
        top = max(scores)
        return [p.id for p in self.world.players if p.score == top]

    def _set_phase(self, phase: Phase) -> None:
        if phase is not self.phase:
            logger.info("Race phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, int(value)))


def format_clock(seconds: float) -> str:
    total = max(0, math.ceil(seconds))
    return f"{total // 60:02d}:{total % 60:02d}"
