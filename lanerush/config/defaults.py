"""Canonical game constants. Everything else reads them through GameSettings."""
from __future__ import annotations

import multiprocessing as _mp

from .schema import GameSettings

WIDTH, HEIGHT = 480, 720
FPS = 60

LANE_COUNT = 4

BASE_SPEED = 5.0
SPEED_INCREMENT = 0.001
SPEED_BOOST = 2.0
BOOST_INTERVAL = 500    # score points between speed boosts
SCORE_DIVISOR = 10      # distance units per score point

EASING = 0.20
ROAD_PERIOD = 40.0      # dash length + gap of the lane dividers

SPAWN_CHANCE = 0.03
SPAWN_ZONE_FACTOR = 1.5

PLAYER_WIDTH_RATIO = 0.35
PLAYER_HEIGHT_RATIO = 1.2
PLAYER_MARGIN = 20.0

# Headless runs
SIMS_PER_RUN = 20
SIM_WORKERS = max(2, _mp.cpu_count() - 2)
BATCH_SIZE = 10
MAX_FRAMES = 12_000     # ~3 minutes at 60fps


def default_settings() -> GameSettings:
    return GameSettings(
        lane_count=LANE_COUNT,
        width=WIDTH,
        height=HEIGHT,
        fps=FPS,
        base_speed=BASE_SPEED,
        speed_increment=SPEED_INCREMENT,
        speed_boost=SPEED_BOOST,
        boost_interval=BOOST_INTERVAL,
        score_divisor=SCORE_DIVISOR,
        easing=EASING,
        road_period=ROAD_PERIOD,
        spawn_chance=SPAWN_CHANCE,
        spawn_zone_factor=SPAWN_ZONE_FACTOR,
        player_width_ratio=PLAYER_WIDTH_RATIO,
        player_height_ratio=PLAYER_HEIGHT_RATIO,
        player_margin=PLAYER_MARGIN,
        sims_per_run=SIMS_PER_RUN,
        sim_workers=SIM_WORKERS,
        batch_size=BATCH_SIZE,
        max_frames=MAX_FRAMES,
    )
