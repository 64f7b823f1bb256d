"""Map pygame events to simulation intents. Needs no display."""
from __future__ import annotations

import pygame

from lanerush.engine import Intent

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


def _half(x: float, width: float) -> Intent:
    return Intent.MOVE_LEFT if x < width / 2 else Intent.MOVE_RIGHT


def intent_for_event(event, *, active: bool, width: float) -> Intent | None:
    """Return the intent an event asks for, or None.

    While a run is active only steering counts: arrow keys / A D, or a
    press on the left or right half of the window. Otherwise any key
    press (except Escape) or click starts a new run.
    """
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return None
        if not active:
            return Intent.START
        if event.key in LEFT_KEYS:
            return Intent.MOVE_LEFT
        if event.key in RIGHT_KEYS:
            return Intent.MOVE_RIGHT
        return None

    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if getattr(event, "touch", False):
            return None  # SDL mirrors touches as clicks; FINGERDOWN handles them
        return _half(event.pos[0], width) if active else Intent.START

    if event.type == pygame.FINGERDOWN:
        # Finger coordinates are normalized to [0, 1]
        return _half(event.x, 1.0) if active else Intent.START

    return None
