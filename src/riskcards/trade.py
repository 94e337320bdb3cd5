"""
Trade coordination: resolve a player's selection, check it, then consume the
cards and advance the bonus progression together.
"""
from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Sequence

from .cards import Card
from .inventory import CardInventory
from .progression import BonusProgression
from .triplets import (
    REASON_NOT_OWNED,
    REASON_NOT_THREE,
    TRIPLET_SIZE,
    TradeCheck,
    check_triplet,
)

logger = logging.getLogger(__name__)


class TradeResult(NamedTuple):
    """Outcome of a trade attempt. ``bonus`` is 0 when the trade failed."""
    ok: bool
    bonus: int = 0
    reason: str = ""


class TradeCoordinator:
    """
    Stateless orchestrator over an inventory and a progression it does not own.

    Callers must serialize ``execute`` with every other mutation of the same
    inventory/progression pair; there is no locking here.
    """

    def __init__(self, inventory: CardInventory, progression: BonusProgression) -> None:
        self._inventory = inventory
        self._progression = progression

    def resolve(self, player_id: int, card_ids: Sequence[int]) -> List[Card]:
        """Cards of the player's hand whose ids are selected (each card at most once)."""
        wanted = set(card_ids)
        return [c for c in self._inventory.get_hand(player_id) if c.id in wanted]

    def validate(self, player_id: int, card_ids: Optional[Sequence[int]]) -> TradeCheck:
        if card_ids is None or len(card_ids) != TRIPLET_SIZE:
            return TradeCheck(False, REASON_NOT_THREE)
        picked = self.resolve(player_id, card_ids)
        if len(picked) != TRIPLET_SIZE:
            return TradeCheck(False, REASON_NOT_OWNED)
        return check_triplet(picked)

    def execute(self, player_id: int, card_ids: Optional[Sequence[int]]) -> TradeResult:
        """Trade the selection if it is legal; otherwise change nothing."""
        check = self.validate(player_id, card_ids)
        if not check.ok:
            logger.debug("Player %s trade %s rejected: %s", player_id, card_ids, check.reason)
            return TradeResult(False, 0, check.reason)

        self._inventory._remove_by_ids(player_id, card_ids)
        bonus = self._progression.preview()
        self._progression.advance()
        logger.info(
            "Player %s traded cards %s for %d troops (trade #%d)",
            player_id,
            list(card_ids),
            bonus,
            self._progression.trade_count,
        )
        return TradeResult(True, bonus, "")


__all__ = ["TradeCoordinator", "TradeResult"]
