"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

__all__ = ["DeckConfig", "load_config"]


def _env_seed() -> int | None:
    raw = os.getenv("DECKCARDS_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"DECKCARDS_SEED must be an integer, got '{raw}'") from None


@dataclass(slots=True)
class DeckConfig:
    """Configuration values for the console application."""

    log_level: str = field(default_factory=lambda: os.getenv("DECKCARDS_LOG_LEVEL", "WARNING").upper())
    seed: int | None = field(default_factory=_env_seed)

    def with_overrides(self, *, log_level: str | None = None, seed: int | None = None) -> "DeckConfig":
        """Return a copy with command-line values taking precedence."""

        return DeckConfig(
            log_level=log_level.upper() if log_level else self.log_level,
            seed=seed if seed is not None else self.seed,
        )


def load_config() -> DeckConfig:
    return DeckConfig()
