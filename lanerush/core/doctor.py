from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from lanerush.config.schema import GameSettings


@dataclass(frozen=True)
class Check:
    name: str
    ok: bool
    detail: str


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def _settings_check(settings: GameSettings) -> Check:
    try:
        settings.validate()
    except ValueError as exc:
        return Check("settings", False, str(exc))
    return Check("settings", True, f"{settings.lane_count} lanes, {settings.width}x{settings.height} @ {settings.fps}fps")


def run_doctor(settings: GameSettings) -> list[Check]:
    checks: list[Check] = []
    checks.append(_settings_check(settings))
    checks.append(Check("pygame", _has_module("pygame"), "required for the game window"))
    checks.append(Check("numpy", _has_module("numpy"), "required for simulation summaries"))
    checks.append(Check("sim_workers", settings.sim_workers >= 1, f"workers={settings.sim_workers}"))
    return checks
