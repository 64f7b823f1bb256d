from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .vehicles import Obstacle, Rect, VehicleProfile


class Intent(str, Enum):
    """Discrete commands the presentation layer may submit."""
    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    START = "start-run"


@dataclass
class RunState:
    """Mutable state of one run. A fresh instance is created on every start."""
    speed: float
    next_boost: int
    active: bool = True
    distance: float = 0.0
    score: int = 0
    road_offset: float = 0.0
    frame: int = 0
    obstacles: list[Obstacle] = field(default_factory=list)


@dataclass(frozen=True)
class SpriteView:
    rect: Rect
    lane: int
    profile: VehicleProfile


@dataclass(frozen=True)
class FrameView:
    """Read-only picture of one frame for renderers."""
    active: bool
    score: int
    speed: float
    road_offset: float
    lane_width: float
    player: SpriteView
    obstacles: tuple[SpriteView, ...] = ()
