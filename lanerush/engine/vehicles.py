"""
Vehicles on the road: the player's car, oncoming traffic, and the
profiles that size and style them. Pure game logic, no pygame.

Positions are top-left corners in playfield pixels; y grows downward.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

VehicleKind = Literal["car", "truck", "bike", "player"]
Shape = Literal["sedan", "box", "cycle"]

Rect = tuple[float, float, float, float]


@dataclass(frozen=True)
class VehicleProfile:
    """Size ratios plus a rendering hint for one kind of vehicle.

    width = lane_width * width_ratio, height = width * height_ratio.
    """
    kind: VehicleKind
    width_ratio: float
    height_ratio: float
    color: str
    shape: Shape

    def size(self, lane_width: float) -> tuple[float, float]:
        w = lane_width * self.width_ratio
        return w, w * self.height_ratio


CAR = VehicleProfile("car", 0.35, 1.2, "#ff00ff", "sedan")
TRUCK = VehicleProfile("truck", 0.5, 2.2, "#ff4400", "box")
BIKE = VehicleProfile("bike", 0.15, 0.6, "#00ff00", "cycle")

TRAFFIC_PROFILES: tuple[VehicleProfile, ...] = (CAR, TRUCK, BIKE)


def player_profile(width_ratio: float = 0.35, height_ratio: float = 1.2) -> VehicleProfile:
    return VehicleProfile("player", width_ratio, height_ratio, "#00f3ff", "sedan")


def lane_x(lane: int, lane_width: float, width: float) -> float:
    """Left edge that centres a vehicle of `width` in `lane`."""
    return lane * lane_width + (lane_width - width) / 2


def rects_overlap(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class PlayerVehicle:
    def __init__(self, lane_count: int, profile: VehicleProfile | None = None):
        self.lane_count = lane_count
        self.profile = profile or player_profile()
        self.lane = lane_count // 2
        self.lane_width = 0.0
        self.x = 0.0
        self.y = 0.0
        self.target_x = 0.0
        self.width = 0.0
        self.height = 0.0

    def fit(self, lane_width: float, playfield_height: float, margin: float) -> None:
        """Recompute size, row and target after the playfield changes size."""
        self.lane_width = lane_width
        self.width, self.height = self.profile.size(lane_width)
        self.y = playfield_height - self.height - margin
        self.target_x = lane_x(self.lane, lane_width, self.width)

    def place(self, lane: int) -> None:
        """Put the car in `lane` with no easing."""
        self.lane = lane
        self.target_x = lane_x(lane, self.lane_width, self.width)
        self.x = self.target_x

    def move(self, d: int) -> bool:
        """Move lane. d=-1 for left, d=1 for right. Returns False at the road edge."""
        nl = self.lane + d
        if not 0 <= nl < self.lane_count:
            return False
        self.lane = nl
        self.target_x = lane_x(nl, self.lane_width, self.width)
        return True

    def update(self, easing: float) -> None:
        self.x += (self.target_x - self.x) * easing

    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)


class Obstacle:
    def __init__(self, lane: int, lane_width: float, profile: VehicleProfile):
        self.lane = lane
        self.profile = profile
        self.width, self.height = profile.size(lane_width)
        self.x = lane_x(lane, lane_width, self.width)
        self.y = -self.height

    def update(self, speed: float) -> None:
        self.y += speed

    def gone(self, playfield_height: float) -> bool:
        return self.y > playfield_height

    def anchor(self, lane_width: float) -> None:
        """Re-centre in the lane after a resize. Size is kept as spawned."""
        self.x = lane_x(self.lane, lane_width, self.width)

    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)
