"""
buffet_race module: render/renderer.py

Pygame rendering of the arena (top-down projection of the x/z plane).
"""

from __future__ import annotations
import math
from typing import Iterable, Optional, Sequence, Tuple

import pygame

import buffet_config as config
from race.session import Phase, RaceSession, format_clock
from render import colors
from world.entities import FoodItem, FoodShape, Player

ARENA_PAD = 20

INSTRUCTIONS_HINT = "Press I for instructions"

INSTRUCTIONS = [
    "Buffet Race",
    "",
    "A base template for foraging-theory experiments:",
    "every player heads for its nearest food and eats it on contact.",
    "",
    "Up / Down     players (1-8)",
    "Left / Right  food (steps of 10)",
    "Enter / Space start, or play again",
    "J             make everyone jump",
    "I             toggle these instructions",
    "Esc           quit",
]


class ArenaView:
    """Maps arena coordinates to screen pixels for a square arena below the HUD."""

    def __init__(self, screen_size: Tuple[int, int], map_size: float, top: int = config.HUD_H):
        w, h = screen_size
        side = max(1, min(w, h - top) - 2 * ARENA_PAD)
        self.map_size = map_size
        self.scale = side / (2 * map_size)
        self.rect = pygame.Rect((w - side) // 2, top + (h - top - side) // 2, side, side)

    def to_screen(self, x: float, z: float) -> Tuple[int, int]:
        px = self.rect.centerx + x * self.scale
        py = self.rect.centery + z * self.scale
        return int(round(px)), int(round(py))

    def units(self, length: float) -> int:
        return max(1, int(length * self.scale))


def _draw_dir_indicator(screen: pygame.Surface, x: float, y: float, angle: float, r: float) -> None:
    dx = math.cos(angle) * r
    dy = math.sin(angle) * r
    pygame.draw.line(screen, colors.SHADOW, (x, y), (x + dx, y + dy), 2)


def draw_arena(screen: pygame.Surface, view: ArenaView) -> None:
    pygame.draw.rect(screen, colors.FLOOR_EDGE, view.rect.inflate(8, 8))
    pygame.draw.rect(screen, colors.FLOOR, view.rect)


def draw_food(screen: pygame.Surface, view: ArenaView, items: Iterable[FoodItem]) -> None:
    size = view.units(0.25)
    for item in items:
        if item.consumed:
            continue
        cx, cy = view.to_screen(item.position.x, item.position.z)
        col = colors.hex_to_rgb(item.color)
        if item.shape is FoodShape.CUBE:
            pygame.draw.rect(screen, col, pygame.Rect(cx - size, cy - size, size * 2, size * 2))
        elif item.shape is FoodShape.SPHERE:
            pygame.draw.circle(screen, col, (cx, cy), size)
        else:
            pygame.draw.polygon(
                screen, col, [(cx, cy - size), (cx - size, cy + size), (cx + size, cy + size)]
            )


def draw_players(screen: pygame.Surface, view: ArenaView, players: Sequence[Player]) -> None:
    base_r = view.units(0.35)
    for p in players:
        cx, cy = view.to_screen(p.position.x, p.position.z)
        # airborne players cast a shadow and float up the screen
        lift = max(0.0, p.position.y - config.GROUND_HEIGHT)
        if lift > 0:
            pygame.draw.circle(screen, colors.SHADOW, (cx, cy), base_r)
        py = cy - view.units(lift) if lift > 0 else cy
        r = base_r + int(lift * 2)
        pygame.draw.circle(screen, colors.hex_to_rgb(p.color), (cx, py), r)
        _draw_dir_indicator(screen, cx, py, p.heading, r + 4)


def hud_hint(session: RaceSession) -> Optional[str]:
    """Second HUD line, shown once a race has started."""
    if session.phase is Phase.SETUP or session.show_instructions:
        return None
    return INSTRUCTIONS_HINT


def draw_hud(screen: pygame.Surface, session: RaceSession) -> None:
    w = screen.get_width()
    pygame.draw.rect(screen, colors.HUD_BG, pygame.Rect(0, 0, w, config.HUD_H))
    font = pygame.font.Font(None, 24)

    if session.phase is Phase.SETUP:
        line = f"Players: {session.player_count}    Food: {session.food_count}    [Enter] Start"
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (12, 10))
    else:
        x = 12
        for p in session.world.players:
            pygame.draw.circle(screen, colors.hex_to_rgb(p.color), (x + 6, 18), 6)
            txt = font.render(f"P{p.id + 1}: {p.score}", True, colors.HUD_TEXT)
            screen.blit(txt, (x + 16, 10))
            x += 24 + txt.get_width()
        clock_txt = font.render(format_clock(session.time_left), True, colors.HUD_TEXT)
        screen.blit(clock_txt, (x + 8, 10))

    hint = hud_hint(session)
    if hint is not None:
        screen.blit(font.render(hint, True, colors.HUD_TEXT), (12, 36))

    label = font.render("Foraging Algorithms: Buffet Race experiment", True, colors.HUD_ACCENT)
    screen.blit(label, (w - label.get_width() - 12, 36))


def _draw_panel(screen: pygame.Surface, lines: Sequence[str], size: int = 26) -> None:
    shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    shade.fill((*colors.OVERLAY, 220))
    screen.blit(shade, (0, 0))

    font = pygame.font.Font(None, size)
    y = screen.get_height() // 2 - len(lines) * (size // 2)
    for line in lines:
        txt = font.render(line, True, colors.TEXT)
        screen.blit(txt, ((screen.get_width() - txt.get_width()) // 2, y))
        y += size


def draw_instructions(screen: pygame.Surface) -> None:
    _draw_panel(screen, INSTRUCTIONS, size=24)


def draw_game_over(screen: pygame.Surface, session: RaceSession) -> None:
    winners = ", ".join(f"P{pid + 1}" for pid in session.leaders())
    _draw_panel(
        screen,
        ["Race Over!", f"Top score: {winners}", "", "Play Again? [Enter]"],
        size=36,
    )


def draw_frame(screen: pygame.Surface, session: RaceSession) -> None:
    screen.fill(colors.BG)
    view = ArenaView(screen.get_size(), session.map_size)
    draw_arena(screen, view)
    if session.world is not None:
        draw_food(screen, view, session.world.food_items)
        draw_players(screen, view, session.world.players)
    draw_hud(screen, session)

    if session.phase is Phase.OVER:
        draw_game_over(screen, session)
    if session.show_instructions:
        draw_instructions(screen)
