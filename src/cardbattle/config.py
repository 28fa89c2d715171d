"""Game configuration."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Optional

# Afeka College reference latitude; at or above it is East.
REFERENCE_LATITUDE = 34.817549168324334

DEFAULT_MAX_ROUNDS = 10
DEFAULT_CADENCE = 5.0
DECK_SIZE = 52


@dataclass
class GameConfig:
    """Configuration for a card battle match."""

    max_rounds: int = DEFAULT_MAX_ROUNDS
    cadence: float = DEFAULT_CADENCE  # time units between automatic rounds
    tick_interval: float = 1.0  # countdown display step
    seed: Optional[int] = None
    opponent_name: str = "AI Opponent"
    reference_latitude: float = REFERENCE_LATITUDE

    def __post_init__(self):
        """Validate limits and generate seed if not provided."""
        # Both sides draw from one deck, so a match is capped at half of it
        if not 1 <= self.max_rounds <= DECK_SIZE // 2:
            raise ValueError(
                f"max_rounds must be between 1 and {DECK_SIZE // 2}, got {self.max_rounds}"
            )
        if self.cadence <= 0:
            raise ValueError(f"cadence must be positive, got {self.cadence}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """Build config from CARDBATTLE_* environment variables.

        Explicit keyword overrides win over the environment; None values
        are ignored so CLI options can be passed straight through.
        """
        values: dict = {}
        if "CARDBATTLE_MAX_ROUNDS" in os.environ:
            values["max_rounds"] = int(os.environ["CARDBATTLE_MAX_ROUNDS"])
        if "CARDBATTLE_CADENCE" in os.environ:
            values["cadence"] = float(os.environ["CARDBATTLE_CADENCE"])
        if "CARDBATTLE_SEED" in os.environ:
            values["seed"] = int(os.environ["CARDBATTLE_SEED"])
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
