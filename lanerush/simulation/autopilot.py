"""Headless drivers that turn a running clock into lane intents."""
from __future__ import annotations

from typing import Protocol

from lanerush.engine import LEFT, RIGHT, SimulationClock


class Autopilot(Protocol):
    name: str

    def decide(self, clock: SimulationClock) -> int: ...


class StayAutopilot:
    """Never changes lane. Baseline for survival numbers."""
    name = "stay"

    def decide(self, clock: SimulationClock) -> int:
        return 0


class DodgeAutopilot:
    """Steers one lane at a time toward the lane with the most room ahead.

    Holds the current lane unless another lane is clearer by at least
    `margin` (normalized playfield heights).
    """
    name = "dodge"

    def __init__(self, margin: float = 0.05):
        self.margin = margin

    def decide(self, clock: SimulationClock) -> int:
        lane = clock.player.lane
        room = clock.nearest_obstacles()
        best = max(range(len(room)), key=lambda i: (room[i], -abs(i - lane)))
        if best == lane or room[best] - room[lane] < self.margin:
            return 0
        step = RIGHT if best > lane else LEFT
        # Never cut through a lane that is about to be hit
        if room[lane + step] < room[lane]:
            return 0
        return step


_AUTOPILOTS = {
    "stay": StayAutopilot,
    "dodge": DodgeAutopilot,
}


def load_autopilot(name: str) -> Autopilot:
    try:
        return _AUTOPILOTS[name]()
    except KeyError as exc:
        raise ValueError(f"Unknown autopilot: {name!r}. Expected one of {sorted(_AUTOPILOTS)}") from exc


def available_autopilots() -> list[str]:
    return sorted(_AUTOPILOTS)
