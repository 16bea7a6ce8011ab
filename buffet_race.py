"""
Buffet Race: players race to eat the food scattered over a flat arena.
"""

from __future__ import annotations
import logging

import pygame

import buffet_config as config
from logging_config import configure_logging
from race.session import Phase, RaceSession
from render.renderer import draw_frame

logger = logging.getLogger(__name__)


def handle_key(session: RaceSession, key: int) -> bool:
    """Apply one key press to the session. Returns False when the app should quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_i:
        session.toggle_instructions()
    elif key in (pygame.K_RETURN, pygame.K_SPACE):
        if session.phase is not Phase.RUNNING:
            session.start()
    elif key == pygame.K_j:
        session.jump()
    elif key == pygame.K_UP:
        session.adjust_players(1)
    elif key == pygame.K_DOWN:
        session.adjust_players(-1)
    elif key == pygame.K_RIGHT:
        session.adjust_food(config.FOOD_ADJUST_STEP)
    elif key == pygame.K_LEFT:
        session.adjust_food(-config.FOOD_ADJUST_STEP)
    return True


def main():
    configure_logging()
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
        pygame.display.set_caption("Buffet Race")
        clock = pygame.time.Clock()
        session = RaceSession()

        running = True
        while running:
            dt = clock.tick(config.FPS) / 1000.0

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN:
                    running = handle_key(session, e.key) and running

            session.update(dt)

            draw_frame(screen, session)
            pygame.display.flip()
    finally:
        pygame.quit()
    logger.info("Shell closed")


if __name__ == "__main__":
    main()
