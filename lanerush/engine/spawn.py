"""Obstacle placement that never closes the last free lane near the top of the road."""
from __future__ import annotations

import random
from typing import Sequence

from .vehicles import TRAFFIC_PROFILES, Obstacle, VehicleProfile


class SpawnPolicy:
    def __init__(
        self,
        rng: random.Random,
        profiles: Sequence[VehicleProfile] = TRAFFIC_PROFILES,
        zone_factor: float = 1.5,
    ) -> None:
        if not profiles:
            raise ValueError("SpawnPolicy needs at least one vehicle profile")
        self.rng = rng
        self.profiles = tuple(profiles)
        self.zone_factor = zone_factor

    def try_spawn(
        self,
        lane_count: int,
        lane_width: float,
        existing: Sequence[Obstacle],
        spawn_line: float = 0.0,
    ) -> Obstacle | None:
        """Pick a random lane and vehicle; return the new obstacle, or None if it
        would share a lane with traffic in the spawn zone or leave no lane free.

        The zone spans from `spawn_line` down to 1.5x the candidate's own height,
        so it is taller for trucks than for bikes. Traffic still above the
        spawn line counts as inside the zone.
        """
        lane = self.rng.randrange(lane_count)
        profile = self.rng.choice(self.profiles)
        candidate = Obstacle(lane, lane_width, profile)

        zone_bottom = spawn_line + candidate.height * self.zone_factor
        in_zone = [o for o in existing if o.y < zone_bottom]

        occupied = {o.lane for o in in_zone}
        if lane in occupied:
            return None
        if len(occupied) >= lane_count - 1:
            return None
        return candidate
