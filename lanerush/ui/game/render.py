"""pygame drawing for LANE RUSH: road, vehicles, HUD and overlays."""
from __future__ import annotations

import pygame

from lanerush.engine import FrameView, SpriteView

C_BG = (10, 10, 10)
C_DIVIDER = (255, 255, 255, 26)
C_WHITE = (255, 255, 255)
C_DIM = (160, 160, 180)
C_TITLE = (0, 243, 255)
C_TYRE = (17, 17, 17)
C_HANDLEBAR = (204, 204, 204)
C_HEADLIGHT = (255, 255, 0)
C_TAILLIGHT = (255, 0, 0)

DASH = 20  # dash and gap length of the lane dividers


def _glow(surf, rect, color, spread=14):
    x, y, w, h = rect
    halo = pygame.Surface((int(w) + spread * 2, int(h) + spread * 2), pygame.SRCALPHA)
    pygame.draw.rect(halo, (color.r, color.g, color.b, 40), (spread, spread, w, h), border_radius=10)
    surf.blit(halo, (x - spread, y - spread))


def _draw_cycle(surf, x, y, w, h, color, is_player):
    tyre_w, tyre_h = w * 0.8, h * 0.15
    tyre_x = x + (w - tyre_w) / 2
    pygame.draw.rect(surf, C_TYRE, (tyre_x, y, tyre_w, tyre_h))
    pygame.draw.rect(surf, C_TYRE, (tyre_x, y + h - tyre_h, tyre_w, tyre_h))

    body_w = w * 0.6
    pygame.draw.rect(surf, color, (x + (w - body_w) / 2, y + tyre_h - 2, body_w, h - tyre_h * 2 + 4),
                     border_radius=5)
    pygame.draw.rect(surf, C_HANDLEBAR, (x - 2, y + h * 0.75, w + 4, 3))
    if not is_player:
        pygame.draw.rect(surf, C_HEADLIGHT, (x + w / 2 - 3, y + h - 5, 6, 4))


def _draw_body(surf, x, y, w, h, color, shape, is_player):
    pygame.draw.rect(surf, color, (x, y, w, h), border_radius=2 if shape == "box" else 5)

    if shape == "box":
        pygame.draw.rect(surf, (0, 0, 0), (x + 2, y + h * 0.1, w - 4, h * 0.15))
        bed = pygame.Surface((max(1, int(w - 4)), max(1, int(h * 0.65))), pygame.SRCALPHA)
        bed.fill((0, 0, 0, 77))
        surf.blit(bed, (x + 2, y + h * 0.3))
    else:
        pygame.draw.rect(surf, (0, 0, 0), (x + 5, y + h * 0.2, w - 10, h * 0.2))

    lights = C_TAILLIGHT if is_player else C_HEADLIGHT
    pygame.draw.rect(surf, lights, (x + 5, y + h - 5, 5, 3))
    pygame.draw.rect(surf, lights, (x + w - 10, y + h - 5, 5, 3))


def draw_vehicle(surf, sprite: SpriteView, is_player: bool) -> None:
    """Draw one vehicle in the style its profile's shape asks for."""
    color = pygame.Color(sprite.profile.color)
    x, y, w, h = sprite.rect
    _glow(surf, sprite.rect, color)
    if sprite.profile.shape == "cycle":
        _draw_cycle(surf, x, y, w, h, color, is_player)
    else:
        _draw_body(surf, x, y, w, h, color, sprite.profile.shape, is_player)


def draw_road(surf, view: FrameView) -> None:
    """Background plus dashed lane dividers scrolled by the road offset."""
    surf.fill(C_BG)
    width, height = surf.get_size()
    lanes = round(width / view.lane_width) if view.lane_width else 0
    layer = pygame.Surface((width, height), pygame.SRCALPHA)
    start = int(view.road_offset) - DASH * 2
    for i in range(1, lanes):
        x = int(i * view.lane_width)
        for y in range(start, height, DASH * 2):
            pygame.draw.line(layer, C_DIVIDER, (x, y), (x, y + DASH), 2)
    surf.blit(layer, (0, 0))


def draw_frame(surf, view: FrameView) -> None:
    draw_road(surf, view)
    draw_vehicle(surf, view.player, True)
    for o in view.obstacles:
        draw_vehicle(surf, o, False)


def draw_centered(surf, font, text, color, y) -> None:
    img = font.render(text, True, color)
    surf.blit(img, (surf.get_width() // 2 - img.get_width() // 2, y))


def draw_overlay(surf) -> None:
    dim = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
    dim.fill((0, 0, 0, 155))
    surf.blit(dim, (0, 0))
