"""
Card-exchange engine: one per running game.

Owns the card inventory and the bonus progression and exposes the operations a
turn controller calls. Deciding when a player may trade, and applying the
awarded troops, stay with the controller.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .cards import Card, CardKind
from .config import ExchangeConfig
from .inventory import CardInventory
from .progression import BonusProgression
from .trade import TradeCoordinator, TradeResult
from .triplets import TradeCheck, find_valid_triplets

logger = logging.getLogger(__name__)


class CardExchangeEngine:
    """Player hands, triplet trades and the escalating trade bonus."""

    def __init__(self, config: ExchangeConfig | None = None) -> None:
        self.config = config if config is not None else ExchangeConfig()
        self._inventory = CardInventory()
        self._progression = BonusProgression(self.config.seed_a, self.config.seed_b)
        self._coordinator = TradeCoordinator(self._inventory, self._progression)

    # ---- Hands ----

    def add_card_to_player(self, player_id: int, kind: CardKind) -> Card:
        return self._inventory.add_card(player_id, kind)

    def award_random_card(
        self,
        player_id: int,
        rng: random.Random,
        wild_chance: Optional[float] = None,
    ) -> Card:
        """Random card for the player; ``wild_chance`` defaults to the config value."""
        if wild_chance is None:
            wild_chance = self.config.wild_chance
        return self._inventory.award_random_card(player_id, rng, wild_chance)

    def get_player_cards(self, player_id: int) -> List[Card]:
        """Snapshot of the player's hand. Mutating it does not affect the engine."""
        return self._inventory.get_hand(player_id)

    def valid_triplets(self, player_id: int) -> List[tuple[Card, Card, Card]]:
        return find_valid_triplets(self._inventory.get_hand(player_id))

    # ---- Trades ----

    def can_trade_triplet(self, player_id: int, card_ids: Optional[Sequence[int]]) -> TradeCheck:
        return self._coordinator.validate(player_id, card_ids)

    def trade_triplet(self, player_id: int, card_ids: Optional[Sequence[int]]) -> TradeResult:
        return self._coordinator.execute(player_id, card_ids)

    def preview_next_trade_bonus(self) -> int:
        return self._progression.preview()

    @property
    def trades_completed(self) -> int:
        """Successful trades since the last reset."""
        return self._progression.trade_count

    # ---- Resets ----

    def reset_trades(self) -> None:
        """Restart the bonus progression from the canonical seeds."""
        self._progression.reset(self.config.reset_seed_a, self.config.reset_seed_b)
        logger.info("Trade bonuses reset; next trade pays %d", self._progression.preview())

    def clear_all_hands(self) -> None:
        self._inventory.clear_all()
        logger.info("All hands cleared")

    def reset_game(self) -> None:
        """Empty every hand and restart the progression."""
        self.clear_all_hands()
        self.reset_trades()


__all__ = ["CardExchangeEngine"]
