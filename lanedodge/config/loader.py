from __future__ import annotations

from .defaults import from_legacy_config
from .schema import GameSettings


def load_settings(**overrides) -> GameSettings:
    """Load runtime settings, defaulting to values from the legacy config module.

    Overrides set to None are ignored so argparse defaults pass straight through.
    """
    settings = from_legacy_config()
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        settings = settings.with_overrides(**overrides)
    return settings
