"""
Per-frame simulation for LANE RUSH. Owns the run state and the player's car;
renderers read snapshot() and feed intents back through dispatch().

One advance() per displayed frame. Speed growth and easing are per tick,
not scaled by wall-clock time.
"""
from __future__ import annotations

import math
import random

from lanerush.config.defaults import default_settings
from lanerush.config.schema import GameSettings

from .spawn import SpawnPolicy
from .state import FrameView, Intent, RunState, SpriteView
from .vehicles import PlayerVehicle, player_profile, rects_overlap

LEFT, RIGHT = -1, 1


class SimulationClock:
    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        spawner: SpawnPolicy | None = None,
    ) -> None:
        self.settings = (settings or default_settings()).validate()
        self.rng = rng or random.Random(seed)
        self.spawner = spawner or SpawnPolicy(self.rng, zone_factor=self.settings.spawn_zone_factor)

        s = self.settings
        self.player = PlayerVehicle(
            s.lane_count, player_profile(s.player_width_ratio, s.player_height_ratio)
        )
        self.run = RunState(speed=s.base_speed, next_boost=s.boost_interval, active=False)
        self.width = 0.0
        self.height = 0.0
        self.lane_width = 0.0
        self.resize(s.width, s.height)

    # ── Geometry ─────────────────────────

    def resize(self, width: float, height: float) -> None:
        """Adopt a new playfield size. Live obstacles are re-anchored to their
        lanes but keep the size they spawned with."""
        if width <= 0 or height <= 0:
            raise ValueError(f"playfield must have a positive size, got {width}x{height}")
        self.width, self.height = float(width), float(height)
        self.lane_width = self.width / self.settings.lane_count
        self.player.fit(self.lane_width, self.height, self.settings.player_margin)
        if not self.run.active:
            self.player.x = self.player.target_x
        for o in self.run.obstacles:
            o.anchor(self.lane_width)

    # ── Intents ──────────────────────────

    def reset(self) -> None:
        s = self.settings
        self.run = RunState(speed=s.base_speed, next_boost=s.boost_interval)
        self.player.place(s.lane_count // 2)

    def apply_lane_intent(self, direction: int) -> None:
        """direction: LEFT (-1) or RIGHT (1). Moves off the road are ignored."""
        if direction not in (LEFT, RIGHT):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")
        self.player.move(direction)

    def dispatch(self, intent: Intent) -> None:
        if intent is Intent.START:
            self.reset()
        elif intent is Intent.MOVE_LEFT:
            self.apply_lane_intent(LEFT)
        elif intent is Intent.MOVE_RIGHT:
            self.apply_lane_intent(RIGHT)

    # ── Frame step ───────────────────────

    def advance(self) -> bool:
        """Advance one frame. Returns True if this frame ended the run."""
        run, s = self.run, self.settings
        if not run.active:
            return False
        run.frame += 1

        run.speed += s.speed_increment
        run.distance += run.speed
        run.score = math.floor(run.distance / s.score_divisor)

        # At most one boost per tick, even if score skipped past several thresholds
        if run.score >= run.next_boost:
            run.speed += s.speed_boost
            run.next_boost += s.boost_interval

        self.player.update(s.easing)

        run.road_offset += run.speed
        if run.road_offset >= s.road_period:
            run.road_offset = 0.0

        if self.rng.random() < s.spawn_chance:
            obs = self.spawner.try_spawn(s.lane_count, self.lane_width, run.obstacles)
            if obs is not None:
                run.obstacles.append(obs)

        return self._update_obstacles()

    def _update_obstacles(self) -> bool:
        run = self.run
        player_rect = self.player.rect()
        kept = []
        for i, o in enumerate(run.obstacles):
            o.update(run.speed)
            if rects_overlap(player_rect, o.rect()):
                # Terminal frame: later obstacles are not moved, only pruned
                run.active = False
                later = [p for p in run.obstacles[i + 1:] if not p.gone(self.height)]
                run.obstacles = kept + [o] + later
                return True
            if not o.gone(self.height):
                kept.append(o)
        run.obstacles = kept
        return False

    # ── Queries ──────────────────────────

    def is_active(self) -> bool:
        return self.run.active

    def current_score(self) -> int:
        return self.run.score

    def snapshot(self) -> FrameView:
        p = self.player
        return FrameView(
            active=self.run.active,
            score=self.run.score,
            speed=self.run.speed,
            road_offset=self.run.road_offset,
            lane_width=self.lane_width,
            player=SpriteView(p.rect(), p.lane, p.profile),
            obstacles=tuple(SpriteView(o.rect(), o.lane, o.profile) for o in self.run.obstacles),
        )

    def encode(self) -> dict:
        """Encode current state as a plain dict for headless runs."""
        obs_list = [[o.lane, o.y / self.height, o.profile.kind] for o in self.run.obstacles]
        return {
            "lane": self.player.lane,
            "obs": obs_list,
            "alive": self.run.active,
            "score": self.run.score,
            "speed": self.run.speed,
            "frame": self.run.frame,
        }

    def nearest_obstacles(self) -> list[float]:
        """Return normalized distance to nearest obstacle ahead in each lane. 1.0 = clear."""
        distances = [1.0] * self.settings.lane_count
        player_y = self.player.y
        for o in self.run.obstacles:
            bottom = o.y + o.height
            if bottom <= player_y + self.player.height:
                norm_dist = max(0.0, (player_y - bottom) / self.height)
                if norm_dist < distances[o.lane]:
                    distances[o.lane] = norm_dist
        return distances
