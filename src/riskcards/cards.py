"""
Territory cards: three basic kinds (Infantry, Cavalry, Artillery) and the Wild.
Every card carries a unique id; two cards of the same kind are still different cards.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class CardKind(IntEnum):
    """Card kinds. Values 0..2 are the basic kinds, drawn uniformly at random."""
    INFANTRY = 0
    CAVALRY = 1
    ARTILLERY = 2
    WILD = 3


BASIC_KINDS: tuple[CardKind, ...] = (CardKind.INFANTRY, CardKind.CAVALRY, CardKind.ARTILLERY)

KIND_NAMES = {
    CardKind.INFANTRY: "Infantry",
    CardKind.CAVALRY: "Cavalry",
    CardKind.ARTILLERY: "Artillery",
    CardKind.WILD: "Wild",
}


@dataclass(frozen=True)
class Card:
    """A single card. Identity is ``id``; ``kind`` only matters for trading."""

    id: int
    kind: CardKind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, CardKind):
            raise ValueError(f"Unknown card kind: {self.kind!r}")
        if self.id < 0:
            raise ValueError(f"Card id must be non-negative, got {self.id}")

    def is_wild(self) -> bool:
        return self.kind == CardKind.WILD

    def is_basic(self) -> bool:
        return self.kind != CardKind.WILD

    def __str__(self) -> str:
        return f"#{self.id}:{KIND_NAMES[self.kind]}"

    def __repr__(self) -> str:
        return str(self)
