"""Territory card exchange engine (hands, triplet trades, escalating bonus)."""

__version__ = "0.1.0"

from .cards import Card, CardKind, BASIC_KINDS
from .inventory import CardInventory
from .triplets import (
    REASON_INVALID_COMBINATION,
    REASON_NOT_OWNED,
    REASON_NOT_THREE,
    TradeCheck,
    check_triplet,
    find_valid_triplets,
    has_valid_triplet,
)
from .progression import BonusProgression, bonus_for_trade, bonus_schedule
from .trade import TradeCoordinator, TradeResult
from .config import ExchangeConfig, config_from_dict, config_to_dict
from .engine import CardExchangeEngine
from .selection import CardSelection
