from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GameSettings:
    # Road
    lane_count: int
    width: int
    height: int
    fps: int

    # Speed and scoring
    base_speed: float
    speed_increment: float
    speed_boost: float
    boost_interval: int
    score_divisor: int

    # Motion
    easing: float
    road_period: float

    # Spawning
    spawn_chance: float
    spawn_zone_factor: float

    # Player geometry (relative to lane width)
    player_width_ratio: float
    player_height_ratio: float
    player_margin: float

    # Headless runs
    sims_per_run: int
    sim_workers: int
    batch_size: int
    max_frames: int

    def with_overrides(self, **kwargs) -> "GameSettings":
        return replace(self, **kwargs)

    def validate(self) -> "GameSettings":
        """Raise ValueError for settings the simulation cannot run with."""
        if self.lane_count < 2:
            raise ValueError(f"lane_count must be >= 2, got {self.lane_count}")
        for name in ("width", "height", "fps", "score_divisor", "boost_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        for name in ("base_speed", "road_period", "spawn_zone_factor",
                     "player_width_ratio", "player_height_ratio"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        if self.speed_increment < 0 or self.speed_boost < 0:
            raise ValueError("speed_increment and speed_boost must be >= 0")
        if not 0 < self.easing <= 1:
            raise ValueError(f"easing must be in (0, 1], got {self.easing}")
        if not 0 <= self.spawn_chance <= 1:
            raise ValueError(f"spawn_chance must be in [0, 1], got {self.spawn_chance}")
        for name in ("sims_per_run", "sim_workers", "batch_size", "max_frames"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        return self

    @property
    def lane_width(self) -> float:
        return self.width / self.lane_count
