"""
Per-player card hands.

Hands keep insertion order. Card ids come from a per-inventory counter starting
at 1 and are never handed out twice until ``clear_all`` resets the whole table.
"""
from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List

from .cards import BASIC_KINDS, Card, CardKind

logger = logging.getLogger(__name__)

FIRST_CARD_ID = 1


class CardInventory:
    """Mapping from player id to the ordered list of cards that player holds."""

    def __init__(self) -> None:
        self._hands: Dict[int, List[Card]] = {}
        self._next_id: int = FIRST_CARD_ID

    def get_hand(self, player_id: int) -> List[Card]:
        """Copy of the player's hand; empty if the player never received a card."""
        return list(self._hands.get(player_id, ()))

    def players(self) -> List[int]:
        return list(self._hands.keys())

    def hand_size(self, player_id: int) -> int:
        return len(self._hands.get(player_id, ()))

    def add_card(self, player_id: int, kind: CardKind) -> Card:
        """Create a card with a fresh id and append it to the player's hand."""
        card = Card(id=self._next_id, kind=CardKind(kind))
        self._next_id += 1
        self._hands.setdefault(player_id, []).append(card)
        logger.debug("Player %s received card %s", player_id, card)
        return card

    def award_random_card(
        self,
        player_id: int,
        rng: random.Random,
        wild_chance: float = 0.0,
    ) -> Card:
        """
        Give the player a random card.

        The Wild check is only made when ``wild_chance > 0``; otherwise (and when
        the check fails) the kind is drawn uniformly from the three basic kinds.
        """
        if wild_chance > 0 and rng.random() < wild_chance:
            kind = CardKind.WILD
        else:
            kind = BASIC_KINDS[rng.randrange(len(BASIC_KINDS))]
        return self.add_card(player_id, kind)

    def _remove_by_ids(self, player_id: int, ids: Iterable[int]) -> int:
        """
        Remove the player's cards whose ids are in ``ids``. Returns how many were removed.

        Only the trade coordinator calls this, after the selection has been validated.
        """
        hand = self._hands.get(player_id)
        if not hand:
            return 0
        wanted = set(ids)
        kept = [c for c in hand if c.id not in wanted]
        removed = len(hand) - len(kept)
        hand[:] = kept
        if removed:
            logger.debug("Removed %d card(s) from player %s", removed, player_id)
        return removed

    def clear_all(self) -> None:
        """Empty every hand and restart id allocation."""
        self._hands.clear()
        self._next_id = FIRST_CARD_ID
        logger.debug("Cleared all hands")


__all__ = ["CardInventory", "FIRST_CARD_ID"]
