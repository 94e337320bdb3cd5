"""Tests for trade validation and execution."""
from riskcards.cards import CardKind
from riskcards.inventory import CardInventory
from riskcards.progression import BonusProgression
from riskcards.trade import TradeCoordinator
from riskcards.triplets import REASON_INVALID_COMBINATION, REASON_NOT_OWNED, REASON_NOT_THREE


def _setup(*kinds, player=0):
    inv = CardInventory()
    prog = BonusProgression()
    cards = [inv.add_card(player, k) for k in kinds]
    return inv, prog, TradeCoordinator(inv, prog), cards


def test_validate_requires_exactly_three_ids():
    _, _, coord, cards = _setup(CardKind.INFANTRY, CardKind.INFANTRY, CardKind.INFANTRY, CardKind.WILD)
    assert coord.validate(0, [cards[0].id, cards[1].id]) == (False, REASON_NOT_THREE)
    assert coord.validate(0, [c.id for c in cards]) == (False, REASON_NOT_THREE)
    assert coord.validate(0, None) == (False, REASON_NOT_THREE)


def test_validate_rejects_cards_of_other_player():
    inv, _, coord, cards = _setup(CardKind.INFANTRY, CardKind.INFANTRY)
    other = inv.add_card(1, CardKind.INFANTRY)
    ok, reason = coord.validate(0, [cards[0].id, cards[1].id, other.id])
    assert not ok
    assert reason == REASON_NOT_OWNED


def test_duplicate_ids_do_not_double_count():
    _, _, coord, cards = _setup(CardKind.INFANTRY, CardKind.INFANTRY, CardKind.INFANTRY)
    ok, reason = coord.validate(0, [cards[0].id, cards[0].id, cards[1].id])
    assert not ok
    assert reason == REASON_NOT_OWNED


def test_validate_surfaces_combination_reason():
    _, _, coord, cards = _setup(CardKind.INFANTRY, CardKind.INFANTRY, CardKind.CAVALRY)
    assert coord.validate(0, [c.id for c in cards]) == (False, REASON_INVALID_COMBINATION)


def test_failed_execute_changes_nothing():
    inv, prog, coord, cards = _setup(CardKind.INFANTRY, CardKind.INFANTRY, CardKind.CAVALRY)
    before = inv.get_hand(0)
    result = coord.execute(0, [c.id for c in cards])
    assert result == (False, 0, REASON_INVALID_COMBINATION)
    assert inv.get_hand(0) == before
    assert prog.trade_count == 0
    assert prog.preview() == 4


def test_execute_removes_cards_and_advances_once():
    inv, prog, coord, cards = _setup(
        CardKind.CAVALRY, CardKind.INFANTRY, CardKind.ARTILLERY, CardKind.WILD, CardKind.CAVALRY
    )
    chosen = [cards[0].id, cards[1].id, cards[2].id]
    ok, bonus, reason = coord.execute(0, chosen)
    assert ok and reason == ""
    assert bonus == 4
    assert prog.trade_count == 1
    assert inv.get_hand(0) == [cards[3], cards[4]]


def test_execute_selection_order_does_not_matter():
    inv, _, coord, cards = _setup(CardKind.WILD, CardKind.ARTILLERY, CardKind.ARTILLERY)
    result = coord.execute(0, [cards[2].id, cards[0].id, cards[1].id])
    assert result.ok
    assert inv.get_hand(0) == []
