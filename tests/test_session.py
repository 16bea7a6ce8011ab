"""Tests for the race session that drives the core from the shell.

Covers:
- Setup parameter clamping
- Start, countdown and food-depletion endings
- Restart, jumps and the leaderboard
"""

import random

import pytest

import buffet_config as config
from race.session import Phase, RaceSession, format_clock

DT = 1 / 60


def run_until_over(session, dt=DT, limit=20000):
    frames = 0
    while session.phase is Phase.RUNNING and frames < limit:
        session.update(dt)
        frames += 1
    return frames


class TestSetup:
    def test_defaults(self):
        session = RaceSession()
        assert session.phase is Phase.SETUP
        assert session.player_count == config.DEFAULT_PLAYERS
        assert session.food_count == config.DEFAULT_FOOD
        assert session.world is None
        assert session.scores == []

    def test_constructor_clamps(self):
        session = RaceSession(player_count=20, food_count=0)
        assert session.player_count == 8
        assert session.food_count == 1

    def test_adjust_clamps(self):
        session = RaceSession(player_count=7, food_count=495)
        assert session.adjust_players(1) == 8
        assert session.adjust_players(1) == 8
        assert session.adjust_food(10) == 500
        assert session.adjust_food(-1000) == 1
        assert session.adjust_players(-50) == 1

    def test_adjust_ignored_while_running(self, seeded_rng):
        session = RaceSession(player_count=2, food_count=10, rng=seeded_rng)
        session.start()
        assert session.adjust_players(1) == 2
        assert session.adjust_food(10) == 10

    def test_update_before_start(self):
        assert RaceSession().update(DT) is None

    def test_toggle_instructions(self):
        session = RaceSession()
        assert session.toggle_instructions()
        assert not session.toggle_instructions()


class TestRace:
    def test_start_builds_world(self, seeded_rng):
        session = RaceSession(player_count=3, food_count=25, rng=seeded_rng)
        world = session.start()
        assert session.phase is Phase.RUNNING
        assert len(world.players) == 3
        assert len(world.food_items) == 25
        assert session.time_left == config.RACE_DURATION

    def test_timer_ends_race(self, seeded_rng):
        session = RaceSession(player_count=1, food_count=500, duration=0.5, rng=seeded_rng)
        session.start()
        frames = run_until_over(session)
        assert session.phase is Phase.OVER
        assert session.time_left == 0.0
        assert frames == pytest.approx(30, abs=1)
        assert not session.world.all_food_consumed

    def test_food_depletion_ends_race_early(self, seeded_rng):
        session = RaceSession(player_count=2, food_count=1, rng=seeded_rng)
        session.start()
        run_until_over(session, dt=1 / 30)
        assert session.phase is Phase.OVER
        assert session.time_left > 0
        assert sum(session.scores) == 1
        assert session.last_step.all_food_consumed

    def test_updates_ignored_when_over(self, seeded_rng):
        session = RaceSession(player_count=2, food_count=1, rng=seeded_rng)
        session.start()
        run_until_over(session, dt=1 / 30)
        frozen = session.world
        assert session.update(DT) is None
        assert session.world is frozen

    def test_degenerate_frame_keeps_clock(self, seeded_rng):
        session = RaceSession(player_count=2, food_count=10, rng=seeded_rng)
        session.start()
        session.update(0.0)
        session.update(float("nan"))
        session.update(True)
        assert session.time_left == config.RACE_DURATION
        assert session.phase is Phase.RUNNING

    def test_restart_resets(self, seeded_rng):
        session = RaceSession(player_count=2, food_count=1, rng=seeded_rng)
        session.start()
        run_until_over(session, dt=1 / 30)
        assert sum(session.scores) == 1

        session.restart()
        assert session.phase is Phase.RUNNING
        assert session.scores == [0, 0]
        assert session.time_left == config.RACE_DURATION
        assert session.last_step is None

    def test_jump_everyone(self, seeded_rng):
        session = RaceSession(player_count=3, food_count=5, rng=seeded_rng)
        session.jump()
        assert session.world is None

        session.start()
        session.jump()
        assert all(p.is_jumping for p in session.world.players)

    def test_jump_one(self, seeded_rng):
        session = RaceSession(player_count=3, food_count=5, rng=seeded_rng)
        session.start()
        session.jump(1)
        assert [p.is_jumping for p in session.world.players] == [False, True, False]

    def test_leaders(self, seeded_rng):
        session = RaceSession(player_count=2, food_count=1, rng=seeded_rng)
        assert session.leaders() == []
        session.start()
        assert session.leaders() == [0, 1]
        run_until_over(session, dt=1 / 30)
        assert len(session.leaders()) == 1

    def test_seeded_sessions_agree(self):
        a = RaceSession(player_count=4, food_count=40, rng=random.Random(9))
        b = RaceSession(player_count=4, food_count=40, rng=random.Random(9))
        a.start()
        b.start()
        for _ in range(200):
            a.update(DT)
            b.update(DT)
        assert a.world == b.world


class TestFormatClock:
    @pytest.mark.parametrize(
        "seconds, text",
        [(60, "01:00"), (59.2, "01:00"), (59.0, "00:59"), (5, "00:05"), (0, "00:00"), (-3, "00:00")],
    )
    def test_format(self, seconds, text):
        assert format_clock(seconds) == text
