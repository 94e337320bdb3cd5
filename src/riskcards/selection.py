"""
Card selection for one player: pick up to three cards, then check or trade them.
"""
from __future__ import annotations

import random
from typing import Callable, List, Optional

from .cards import Card, CardKind
from .engine import CardExchangeEngine
from .trade import TradeResult
from .triplets import REASON_NOT_THREE, TRIPLET_SIZE, TradeCheck


class CardSelection:
    """
    Selected card ids for ``player_id``, in selection order.

    ``on_change`` (if given) is called after anything that changes the hand or
    the selection.
    """

    def __init__(
        self,
        engine: CardExchangeEngine,
        player_id: int,
        rng: random.Random | None = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.engine = engine
        self.player_id = player_id
        self.rng = rng if rng is not None else random.Random()
        self.on_change = on_change
        self._selected: List[int] = []

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _drop_stale(self) -> None:
        """Forget selected ids that are no longer in the hand (e.g. after a table reset)."""
        held = {c.id for c in self.hand}
        kept = [i for i in self._selected if i in held]
        if len(kept) != len(self._selected):
            self._selected = kept

    @property
    def hand(self) -> List[Card]:
        return self.engine.get_player_cards(self.player_id)

    def cards_with_selection(self) -> List[tuple[Card, bool]]:
        """(card, selected) pairs in hand order."""
        return [(c, c.id in self._selected) for c in self.hand]

    def toggle(self, card_id: int) -> None:
        """Select or deselect a card. A fourth selection is ignored."""
        if card_id in self._selected:
            self._selected.remove(card_id)
        else:
            if len(self._selected) >= TRIPLET_SIZE:
                return
            self._selected.append(card_id)
        self._changed()

    def clear(self) -> None:
        if not self._selected:
            return
        self._selected.clear()
        self._changed()

    def selected_ids(self) -> List[int]:
        self._drop_stale()
        return list(self._selected)

    def can_trade(self) -> TradeCheck:
        self._drop_stale()
        if len(self._selected) != TRIPLET_SIZE:
            return TradeCheck(False, REASON_NOT_THREE)
        return self.engine.can_trade_triplet(self.player_id, self._selected)

    def trade_selected(self) -> TradeResult:
        """Trade the current selection; clears it on success."""
        self._drop_stale()
        if len(self._selected) != TRIPLET_SIZE:
            return TradeResult(False, 0, REASON_NOT_THREE)
        result = self.engine.trade_triplet(self.player_id, list(self._selected))
        if result.ok:
            self._selected.clear()
            self._changed()
        return result

    def preview_next_bonus(self) -> int:
        return self.engine.preview_next_trade_bonus()

    def award_after_capture(self, wild_chance: Optional[float] = None) -> Card:
        """Random card for capturing a territory."""
        self._drop_stale()
        card = self.engine.award_random_card(self.player_id, self.rng, wild_chance)
        self._changed()
        return card

    def add_specific(self, kind: CardKind) -> Card:
        self._drop_stale()
        card = self.engine.add_card_to_player(self.player_id, kind)
        self._changed()
        return card


__all__ = ["CardSelection"]
