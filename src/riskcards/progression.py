"""
Trade bonus progression: each bonus is the sum of the two before it.
Canonical seeds 4 and 6 give 4, 6, 10, 16, 26, 42, ...
The first two trades pay the seeds themselves.
"""
from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)

# Seeds of a freshly constructed tracker.
DEFAULT_SEED_A = 4
DEFAULT_SEED_B = 6

# Seeds restored by an explicit reset (start of a new game).
CANONICAL_SEED_A = 4
CANONICAL_SEED_B = 6


def bonus_for_trade(
    trade_number: int,
    seed_a: int = CANONICAL_SEED_A,
    seed_b: int = CANONICAL_SEED_B,
) -> int:
    """
    Bonus paid by the trade with 0-based index ``trade_number``.
    Replays the recurrence from the seeds; does not touch any tracker.
    """
    if trade_number < 0:
        raise ValueError(f"trade_number must be >= 0, got {trade_number}")
    if trade_number == 0:
        return seed_a
    a, b = seed_a, seed_b
    for _ in range(trade_number - 1):
        a, b = b, a + b
    return b


def bonus_schedule(
    count: int,
    start: int = 0,
    seed_a: int = CANONICAL_SEED_A,
    seed_b: int = CANONICAL_SEED_B,
) -> List[int]:
    """Bonuses for trades ``start .. start + count - 1``."""
    return [bonus_for_trade(n, seed_a, seed_b) for n in range(start, start + count)]


class BonusProgression:
    """
    State ``(trade_count, term_a, term_b)``.

    While fewer than two trades are done the terms are the literal seeds. From
    then on each trade shifts the window one step, so the next bonus is always
    ``term_a + term_b``.
    """

    def __init__(self, seed_a: int = DEFAULT_SEED_A, seed_b: int = DEFAULT_SEED_B) -> None:
        self._seed_a = seed_a
        self._seed_b = seed_b
        self._trade_count = 0
        self._term_a = seed_a
        self._term_b = seed_b

    @property
    def trade_count(self) -> int:
        return self._trade_count

    @property
    def terms(self) -> tuple[int, int]:
        return (self._term_a, self._term_b)

    @property
    def seeds(self) -> tuple[int, int]:
        """Seed pair the current escalation started from."""
        return (self._seed_a, self._seed_b)

    def preview(self) -> int:
        """Bonus the next successful trade would pay. No side effects."""
        if self._trade_count == 0:
            return self._term_a
        if self._trade_count == 1:
            return self._term_b
        return self._term_a + self._term_b

    def upcoming(self, count: int) -> List[int]:
        """The next ``count`` bonuses, starting with ``preview()``."""
        return bonus_schedule(count, self._trade_count, self._seed_a, self._seed_b)

    def advance(self) -> None:
        """Move forward by exactly one trade."""
        if self._trade_count < 2:
            self._trade_count += 1
            return
        nxt = self._term_a + self._term_b
        self._term_a = self._term_b
        self._term_b = nxt
        self._trade_count += 1

    def reset(self, seed_a: int = CANONICAL_SEED_A, seed_b: int = CANONICAL_SEED_B) -> None:
        """Start a fresh escalation from the given seeds."""
        self._seed_a = seed_a
        self._seed_b = seed_b
        self._trade_count = 0
        self._term_a = seed_a
        self._term_b = seed_b
        logger.debug("Trade progression reset to seeds (%d, %d)", seed_a, seed_b)

    def __repr__(self) -> str:
        return (
            f"BonusProgression(trade_count={self._trade_count}, "
            f"terms=({self._term_a}, {self._term_b}))"
        )


__all__ = [
    "DEFAULT_SEED_A",
    "DEFAULT_SEED_B",
    "CANONICAL_SEED_A",
    "CANONICAL_SEED_B",
    "bonus_for_trade",
    "bonus_schedule",
    "BonusProgression",
]
