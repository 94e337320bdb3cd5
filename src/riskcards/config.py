"""
Configuration for a card-exchange engine.

Plain dataclass plus dict conversion so a game setup can carry it in JSON.
Card hands are not part of it and are never saved.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .progression import (
    CANONICAL_SEED_A,
    CANONICAL_SEED_B,
    DEFAULT_SEED_A,
    DEFAULT_SEED_B,
)


@dataclass
class ExchangeConfig:
    """Seeds and draw settings for one running game."""

    # Progression seeds of a freshly built engine
    seed_a: int = DEFAULT_SEED_A
    seed_b: int = DEFAULT_SEED_B
    # Seeds restored by reset_trades()
    reset_seed_a: int = CANONICAL_SEED_A
    reset_seed_b: int = CANONICAL_SEED_B
    # Default Wild probability for random awards (0 disables Wild)
    wild_chance: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.wild_chance <= 1.0:
            raise ValueError(f"wild_chance must be in [0, 1], got {self.wild_chance}")


def config_to_dict(cfg: ExchangeConfig) -> Dict[str, Any]:
    return asdict(cfg)


def config_from_dict(d: Dict[str, Any]) -> ExchangeConfig:
    return ExchangeConfig(
        seed_a=int(d.get("seed_a", DEFAULT_SEED_A)),
        seed_b=int(d.get("seed_b", DEFAULT_SEED_B)),
        reset_seed_a=int(d.get("reset_seed_a", CANONICAL_SEED_A)),
        reset_seed_b=int(d.get("reset_seed_b", CANONICAL_SEED_B)),
        wild_chance=float(d.get("wild_chance", 0.0)),
    )


__all__ = ["ExchangeConfig", "config_to_dict", "config_from_dict"]
