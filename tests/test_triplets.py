"""Tests for triplet legality rules."""
from itertools import product

import pytest

from riskcards.cards import BASIC_KINDS, Card, CardKind
from riskcards.triplets import (
    REASON_INVALID_COMBINATION,
    REASON_NOT_THREE,
    check_triplet,
    find_valid_triplets,
    has_valid_triplet,
    is_three_distinct,
    is_three_of_a_kind,
    split_wilds,
)

I, C, A, W = CardKind.INFANTRY, CardKind.CAVALRY, CardKind.ARTILLERY, CardKind.WILD


def _cards(*kinds):
    return [Card(i + 1, k) for i, k in enumerate(kinds)]


@pytest.mark.parametrize(
    "kinds",
    [
        (I, I, W),
        (I, C, W),
        (I, I, I),
        (I, C, A),
        (W, W, W),
        (C, W, W),
        (A, A, A),
        (A, C, I),
    ],
)
def test_legal_triplets(kinds):
    assert check_triplet(_cards(*kinds)).ok


@pytest.mark.parametrize("kinds", [(I, I, C), (A, A, I), (C, C, A)])
def test_illegal_triplets(kinds):
    check = check_triplet(_cards(*kinds))
    assert not check.ok
    assert check.reason == REASON_INVALID_COMBINATION


def test_wrong_count_is_rejected():
    assert check_triplet(_cards(I, I)).reason == REASON_NOT_THREE
    assert check_triplet(_cards(I, I, I, I)).reason == REASON_NOT_THREE


def test_three_of_a_kind_needs_a_basic_card():
    assert not is_three_of_a_kind([], 3)
    assert is_three_of_a_kind([I], 2)


def test_all_wilds_are_legal_through_distinct_rule():
    wilds, basics = split_wilds(_cards(W, W, W))
    assert (wilds, basics) == (3, [])
    assert is_three_distinct(basics, wilds)


def test_all_same_basic_kind_is_always_legal():
    for kind in BASIC_KINDS:
        assert check_triplet(_cards(kind, kind, kind)).ok


def test_distinct_rule_matches_deficit_for_every_selection():
    for kinds in product(list(CardKind), repeat=3):
        wilds, basics = split_wilds(_cards(*kinds))
        deficit = 3 - len(set(basics))
        assert is_three_distinct(basics, wilds) == (wilds >= deficit)


def test_every_selection_with_a_wild_is_legal():
    for kinds in product(list(CardKind), repeat=3):
        if W in kinds:
            assert check_triplet(_cards(*kinds)).ok, kinds


def test_find_valid_triplets_in_hand_order():
    hand = _cards(I, I, C, I)
    found = find_valid_triplets(hand)
    assert [tuple(c.id for c in t) for t in found] == [(1, 2, 4)]
    assert has_valid_triplet(hand)


def test_find_valid_triplets_none():
    hand = _cards(I, I, C, C)
    assert find_valid_triplets(hand) == []
    assert not has_valid_triplet(hand)
    assert not has_valid_triplet(_cards(I, C))
