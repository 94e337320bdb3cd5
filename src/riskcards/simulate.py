"""
Small simulations on top of the engine: random-draw statistics and a greedy
single-player draw-and-trade session. Used by the CLI and for sanity checks of
the draw probabilities.
"""
from __future__ import annotations

import random
from typing import List, NamedTuple, Sequence

import numpy as np

from .cards import Card, CardKind
from .config import ExchangeConfig
from .engine import CardExchangeEngine

NUM_KINDS: int = len(CardKind)


def simulate_draws(n: int, wild_chance: float = 0.0, seed: int | None = None) -> np.ndarray:
    """
    Draw ``n`` random cards for one player and count them per kind.
    Returns an int array of length 4 indexed by ``CardKind`` value.
    """
    rng = random.Random(seed)
    engine = CardExchangeEngine()
    kinds = [int(engine.award_random_card(0, rng, wild_chance).kind) for _ in range(n)]
    return np.bincount(np.array(kinds, dtype=np.int64), minlength=NUM_KINDS)


def kind_frequencies(counts: np.ndarray) -> np.ndarray:
    """Per-kind share of the total (all zeros if nothing was drawn)."""
    total = counts.sum()
    if total == 0:
        return np.zeros(NUM_KINDS, dtype=float)
    return counts.astype(float) / float(total)


class SessionTrade(NamedTuple):
    """One trade made during a simulated session."""
    draw_index: int
    cards: tuple[Card, Card, Card]
    bonus: int


def _wilds_used(triplet: Sequence[Card]) -> int:
    return sum(1 for c in triplet if c.is_wild())


def simulate_session(
    draws: int,
    wild_chance: float = 0.0,
    seed: int | None = None,
    player_id: int = 0,
    config: ExchangeConfig | None = None,
) -> List[SessionTrade]:
    """
    Draw ``draws`` cards for one player, trading as soon as a legal triplet exists.
    Among legal triplets the one using the fewest Wilds is traded first.
    """
    rng = random.Random(seed)
    engine = CardExchangeEngine(config)
    trades: List[SessionTrade] = []
    for i in range(draws):
        engine.award_random_card(player_id, rng, wild_chance)
        options = engine.valid_triplets(player_id)
        if not options:
            continue
        best = min(options, key=_wilds_used)
        result = engine.trade_triplet(player_id, [c.id for c in best])
        if result.ok:
            trades.append(SessionTrade(draw_index=i, cards=best, bonus=result.bonus))
    return trades


__all__ = [
    "NUM_KINDS",
    "SessionTrade",
    "kind_frequencies",
    "simulate_draws",
    "simulate_session",
]
