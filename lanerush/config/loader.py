from __future__ import annotations

from .defaults import default_settings
from .schema import GameSettings


def load_settings(**overrides) -> GameSettings:
    """Load runtime settings: defaults plus any override that is not None."""
    settings = default_settings()
    changes = {k: v for k, v in overrides.items() if v is not None}
    if changes:
        settings = settings.with_overrides(**changes)
    return settings.validate()
