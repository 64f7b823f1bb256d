#!/usr/bin/env python3
"""
LANE RUSH — neon lane dodger
Dodge oncoming traffic. Speed creeps up, and jumps every 500 points.

Requirements:
    pip install pygame
"""
from __future__ import annotations

import sys

import pygame

from lanerush.config.loader import load_settings
from lanerush.config.schema import GameSettings
from lanerush.engine import Intent, SimulationClock
from lanerush.ui.game.controls import intent_for_event
from lanerush.ui.game.render import (
    C_DIM,
    C_TITLE,
    C_WHITE,
    draw_centered,
    draw_frame,
    draw_overlay,
)


def record_score(best: int, score: int) -> tuple[int, bool]:
    """Fold a finished run into the session best. A tie is not a new best."""
    if score > best:
        return score, True
    return best, False


def _fonts():
    try:
        return (
            pygame.font.SysFont("Courier New", 38, bold=True),
            pygame.font.SysFont("Courier New", 52, bold=True),
            pygame.font.SysFont("Courier New", 17),
        )
    except Exception:
        return (
            pygame.font.SysFont(None, 38),
            pygame.font.SysFont(None, 52),
            pygame.font.SysFont(None, 17),
        )


def run(settings: GameSettings | None = None, seed: int | None = None) -> int:
    """Open the game window and play until closed. Returns the session best."""
    settings = settings or load_settings()
    clock = SimulationClock(settings, seed=seed)

    pygame.init()
    screen = pygame.display.set_mode((settings.width, settings.height), pygame.RESIZABLE)
    pygame.display.set_caption("LANE RUSH")
    ticker = pygame.time.Clock()
    font_score, font_title, font_sub = _fonts()

    state = "title"  # title | playing | dead
    best = 0
    new_best = False
    blink = 0
    print(f"[game] {settings.lane_count} lanes, {settings.width}x{settings.height}", flush=True)

    while True:
        ticker.tick(settings.fps)
        blink += 1

        # ── Events ──────────────────────
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                pygame.quit()
                return best
            if event.type == pygame.VIDEORESIZE:
                clock.resize(event.w, event.h)
                continue

            intent = intent_for_event(event, active=clock.is_active(), width=screen.get_width())
            if intent is None:
                continue
            if intent is Intent.START:
                state = "playing"
            clock.dispatch(intent)

        # ── Update ──────────────────────
        if state == "playing" and clock.advance():
            score = clock.current_score()
            print(f"[game] crashed at {score} points", flush=True)
            best, new_best = record_score(best, score)
            state = "dead"

        # ── Draw ────────────────────────
        view = clock.snapshot()
        draw_frame(screen, view)
        w, h = screen.get_size()

        if state == "playing":
            draw_centered(screen, font_score, f"{view.score}", C_WHITE, 16)

        if state in ("title", "dead"):
            draw_overlay(screen)
            label = "LANE RUSH" if state == "title" else "GAME OVER"
            draw_centered(screen, font_title, label, C_TITLE, h // 2 - 90)

            if state == "dead":
                draw_centered(screen, font_score, f"{view.score}", C_WHITE, h // 2 - 20)
                if new_best:
                    draw_centered(screen, font_sub, "new best", C_TITLE, h // 2 + 22)

            if blink % 60 < 42:
                hint = "press any key" if state == "title" else "press any key to retry"
                draw_centered(screen, font_sub, hint, C_DIM, h // 2 + 55)

            if state == "title":
                draw_centered(screen, font_sub, "← →  or  A D  or tap to switch lanes", C_DIM, h // 2 + 90)

        pygame.display.flip()


def main():
    best = run()
    print(f"[game] session best: {best}")
    sys.exit(0)


if __name__ == "__main__":
    main()
