"""Pytest configuration and fixtures for buffet race tests."""

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def single_food_world():
    """One player at the origin, one food item one unit along +x."""
    from world.world import World

    return World.from_layout([(0.0, 0.5, 0.0)], [(1.0, 0.5, 0.0)], map_size=8.0)


@pytest.fixture
def random_world(seeded_rng):
    """A full-size race layout with a fixed seed."""
    from world.world import World

    return World.create(4, 100, map_size=8.0, rng=seeded_rng)


@pytest.fixture
def pygame_ready():
    """Initialise pygame headless for renderer tests."""
    import pygame

    pygame.init()
    yield pygame
    pygame.quit()
