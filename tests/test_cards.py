"""Tests for card values."""
import pytest

from riskcards.cards import BASIC_KINDS, Card, CardKind


def test_basic_kinds_exclude_wild():
    assert CardKind.WILD not in BASIC_KINDS
    assert len(BASIC_KINDS) == 3


def test_cards_with_same_kind_are_distinct():
    a = Card(1, CardKind.INFANTRY)
    b = Card(2, CardKind.INFANTRY)
    assert a != b
    assert a == Card(1, CardKind.INFANTRY)


def test_card_is_immutable():
    card = Card(1, CardKind.CAVALRY)
    with pytest.raises(AttributeError):
        card.kind = CardKind.WILD  # type: ignore[misc]


def test_card_rejects_unknown_kind():
    with pytest.raises(ValueError):
        Card(1, "infantry")  # type: ignore[arg-type]


def test_card_str():
    assert str(Card(3, CardKind.WILD)) == "#3:Wild"
