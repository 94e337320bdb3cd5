"""
Triplet legality: three of a kind, or one of each basic kind. Wilds stand in for any basic kind.
"""
from __future__ import annotations

from itertools import combinations
from typing import NamedTuple, Sequence

from .cards import BASIC_KINDS, Card, CardKind

TRIPLET_SIZE = 3

REASON_NOT_THREE = "You must select exactly 3 cards."
REASON_NOT_OWNED = "The selected cards do not belong to the player."
REASON_INVALID_COMBINATION = "The combination is not a valid triplet."


class TradeCheck(NamedTuple):
    """Outcome of a legality check. ``reason`` is empty when ``ok``."""
    ok: bool
    reason: str = ""


def split_wilds(cards: Sequence[Card]) -> tuple[int, list[CardKind]]:
    """(number of Wilds, kinds of the remaining basic cards)."""
    wilds = sum(1 for c in cards if c.is_wild())
    basics = [c.kind for c in cards if c.is_basic()]
    return wilds, basics


def is_three_of_a_kind(basics: Sequence[CardKind], wilds: int) -> bool:
    """
    True if some basic kind reaches 3 once the Wilds are added to it.
    With no basic card there is no kind to complete, so this is False.
    """
    if not basics:
        return False
    for kind in BASIC_KINDS:
        if basics.count(kind) + wilds >= TRIPLET_SIZE:
            return True
    return False


def is_three_distinct(basics: Sequence[CardKind], wilds: int) -> bool:
    """True if the Wilds can cover every basic kind missing from ``basics``."""
    distinct = len({k for k in basics if k != CardKind.WILD})
    if distinct > len(BASIC_KINDS):
        return False
    deficit = len(BASIC_KINDS) - distinct
    return wilds >= deficit


def check_triplet(cards: Sequence[Card]) -> TradeCheck:
    """
    Decide whether three cards form a tradeable set.

    Ownership is not checked here; the caller passes cards already resolved
    from the player's hand.
    """
    if len(cards) != TRIPLET_SIZE:
        return TradeCheck(False, REASON_NOT_THREE)
    wilds, basics = split_wilds(cards)
    if is_three_of_a_kind(basics, wilds):
        return TradeCheck(True)
    if is_three_distinct(basics, wilds):
        return TradeCheck(True)
    return TradeCheck(False, REASON_INVALID_COMBINATION)


def find_valid_triplets(hand: Sequence[Card]) -> list[tuple[Card, Card, Card]]:
    """All legal triplets in a hand, as card tuples in hand order."""
    return [t for t in combinations(hand, TRIPLET_SIZE) if check_triplet(t).ok]


def has_valid_triplet(hand: Sequence[Card]) -> bool:
    return any(check_triplet(t).ok for t in combinations(hand, TRIPLET_SIZE))


__all__ = [
    "TRIPLET_SIZE",
    "REASON_NOT_THREE",
    "REASON_NOT_OWNED",
    "REASON_INVALID_COMBINATION",
    "TradeCheck",
    "split_wilds",
    "is_three_of_a_kind",
    "is_three_distinct",
    "check_triplet",
    "find_valid_triplets",
    "has_valid_triplet",
]
