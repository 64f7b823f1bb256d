"""Tests for lanerush.engine.spawn — lane choice and the free-lane guarantee."""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from lanerush.config.loader import load_settings
from lanerush.engine import BIKE, CAR, TRAFFIC_PROFILES, TRUCK, Obstacle, SimulationClock, SpawnPolicy

LANE_W = 120.0


class FixedRng:
    """Stands in for random.Random with a chosen lane and profile."""

    def __init__(self, lane, profile_index=0):
        self.lane = lane
        self.profile_index = profile_index

    def randrange(self, n):
        return self.lane

    def choice(self, seq):
        return seq[self.profile_index]


def traffic(*placements, profile=CAR):
    """Build obstacles from (lane, y) pairs."""
    out = []
    for lane, y in placements:
        o = Obstacle(lane, LANE_W, profile)
        o.y = y
        out.append(o)
    return out


class TestTrySpawn:
    def test_spawn_on_empty_road(self):
        """A clear road always accepts the candidate, just above the top edge."""
        policy = SpawnPolicy(FixedRng(lane=3), profiles=[CAR])
        o = policy.try_spawn(4, LANE_W, [])
        assert o is not None
        assert o.lane == 3
        assert o.profile is CAR
        assert o.y == pytest.approx(-o.height)
        assert o.x == pytest.approx(3 * LANE_W + (LANE_W - o.width) / 2)

    def test_candidate_lane_occupied_in_zone(self):
        policy = SpawnPolicy(FixedRng(lane=1), profiles=[CAR])
        assert policy.try_spawn(4, LANE_W, traffic((1, 10.0))) is None

    def test_same_lane_below_zone_is_fine(self):
        """CAR zone is 1.5 * 50.4 = 75.6 px; traffic further down does not count."""
        policy = SpawnPolicy(FixedRng(lane=1), profiles=[CAR])
        assert policy.try_spawn(4, LANE_W, traffic((1, 200.0))) is not None

    def test_traffic_above_screen_counts(self):
        policy = SpawnPolicy(FixedRng(lane=0), profiles=[CAR])
        assert policy.try_spawn(4, LANE_W, traffic((0, -40.0))) is None

    def test_last_free_lane_is_never_closed(self):
        policy = SpawnPolicy(FixedRng(lane=3), profiles=[CAR])
        existing = traffic((0, 0.0), (1, 5.0), (2, 10.0))
        assert policy.try_spawn(4, LANE_W, existing) is None

    def test_spawn_when_two_lanes_stay_free(self):
        policy = SpawnPolicy(FixedRng(lane=3), profiles=[CAR])
        existing = traffic((0, 0.0), (1, 5.0))
        assert policy.try_spawn(4, LANE_W, existing) is not None

    def test_zone_height_follows_candidate(self):
        """Traffic at y=100 is inside a truck's zone but outside a bike's."""
        existing = traffic((0, 100.0), (1, 100.0), (2, 100.0))
        truck = SpawnPolicy(FixedRng(lane=3, profile_index=1), profiles=TRAFFIC_PROFILES)
        bike = SpawnPolicy(FixedRng(lane=3, profile_index=2), profiles=TRAFFIC_PROFILES)
        assert truck.try_spawn(4, LANE_W, existing) is None
        spawned = bike.try_spawn(4, LANE_W, existing)
        assert spawned is not None and spawned.profile is BIKE

    def test_spawn_line_shifts_zone(self):
        policy = SpawnPolicy(FixedRng(lane=1), profiles=[CAR])
        existing = traffic((1, 100.0))
        assert policy.try_spawn(4, LANE_W, existing) is not None
        assert policy.try_spawn(4, LANE_W, existing, spawn_line=50.0) is None

    def test_two_lane_road(self):
        """With two lanes only one may be busy near the top."""
        policy = SpawnPolicy(FixedRng(lane=1), profiles=[CAR])
        assert policy.try_spawn(2, LANE_W, traffic((0, 0.0))) is None
        assert policy.try_spawn(2, LANE_W, []) is not None

    def test_profiles_required(self):
        with pytest.raises(ValueError):
            SpawnPolicy(random.Random(0), profiles=[])

    def test_random_choices_are_in_range(self):
        policy = SpawnPolicy(random.Random(5))
        seen = set()
        for _ in range(200):
            o = policy.try_spawn(4, LANE_W, [])
            seen.add((o.lane, o.profile.kind))
        assert {lane for lane, _ in seen} == {0, 1, 2, 3}
        assert {kind for _, kind in seen} == {"car", "truck", "bike"}


class TestFreeLaneOverTime:
    @pytest.mark.parametrize("seed", [0, 7, 99])
    def test_one_lane_always_free_near_top(self, seed):
        """With uniform traffic, every tick leaves a lane with nothing in the spawn zone."""
        settings = load_settings(spawn_chance=1.0)
        rng = random.Random(seed)
        clock = SimulationClock(settings, rng=rng, spawner=SpawnPolicy(rng, profiles=[TRUCK]))
        clock.reset()
        clock.player.y = 100_000.0  # out of the way, so the run never ends

        zone = TRUCK.size(clock.lane_width)[1] * 1.5
        for _ in range(2000):
            clock.advance()
            busy = {o.lane for o in clock.run.obstacles if o.y < zone}
            assert len(busy) < settings.lane_count
        assert clock.is_active()
        assert clock.run.obstacles
