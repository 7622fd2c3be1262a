import itertools

import pytest

from stud.cards import Card, SUITS, new_shuffled_deck
from stud.errors import InvalidHand
from stud.evaluator import (
    CATEGORY_STRENGTH,
    HandRank,
    best_with_ties,
    classify,
    compare,
    rank_key,
)

from .helpers import hand, rank_of


def test_classify_identifies_all_hand_categories():
    cases = [
        ("Royal Flush", 10, [14], "AH KH QH JH 10H"),
        ("Straight Flush", 9, [9], "9S 8S 7S 6S 5S"),
        ("Four of a Kind", 8, [14, 13], "AS AH AD AC KD"),
        ("Full House", 7, [12, 9], "QC QD QS 9H 9S"),
        ("Flush", 6, [14, 11, 9, 6, 2], "AH JH 9H 6H 2H"),
        ("Straight", 5, [9], "9H 8D 7C 6S 5H"),
        ("Three of a Kind", 4, [8, 12, 11], "8H 8D 8S QD JS"),
        ("Two Pair", 3, [7, 4, 14], "7H 7D 4S 4C AS"),
        ("One Pair", 2, [6, 12, 8, 4], "6H 6S QH 8D 4C"),
        ("High Card", 1, [14, 13, 11, 9, 4], "AS KD JH 9C 4D"),
    ]

    for name, strength, tie_breaker, codes in cases:
        rank = rank_of(codes)
        assert rank.name == name, f"codes={codes}"
        assert rank.strength == strength
        assert list(rank.tie_breaker) == tie_breaker, f"codes={codes}"


def test_flush_lists_every_rank_descending():
    rank = rank_of("2C 9C KC 5C 7C")
    assert rank.name == "Flush"
    assert rank.tie_breaker == (13, 9, 7, 5, 2)


def test_broadway_straight_and_royal_flush():
    straight = rank_of("10H JD QS KC AH")
    royal = rank_of("10S JS QS KS AS")
    assert straight.name == "Straight"
    assert straight.tie_breaker == (14,)
    assert royal.name == "Royal Flush"
    assert royal.tie_breaker == (14,)


def test_wheel_is_not_a_straight():
    rank = rank_of("AH 2D 3C 4S 5H")
    assert rank.name == "High Card"
    assert rank.tie_breaker == (14, 5, 4, 3, 2)


def test_suited_wheel_is_a_plain_flush():
    rank = rank_of("AD 2D 3D 4D 5D")
    assert rank.name == "Flush"
    assert rank.tie_breaker == (14, 5, 4, 3, 2)


def test_king_high_straight_flush_is_not_royal():
    rank = rank_of("9D 10D JD QD KD")
    assert rank.name == "Straight Flush"
    assert rank.tie_breaker == (13,)


def test_two_pair_lists_higher_pair_first_regardless_of_input_order():
    rank = rank_of("3S 8D 3H KC KD")
    assert rank.name == "Two Pair"
    assert rank.tie_breaker == (13, 3, 8)


def test_full_house_prefers_triple_over_higher_pair():
    rank = rank_of("AS AD 2C 2H 2S")
    assert rank.name == "Full House"
    assert rank.tie_breaker == (2, 14)


def test_four_of_a_kind_with_lower_kicker():
    rank = rank_of("2S 9C 9D 9H 9S")
    assert rank.name == "Four of a Kind"
    assert rank.tie_breaker == (9, 2)


def test_classify_keeps_input_order_of_cards():
    cards = hand("2C 9C KC 5C 7C")
    assert list(classify(cards).cards) == cards


@pytest.mark.parametrize("codes", ["AS KS QS JS", "AS KS QS JS 10S 9S", ""])
def test_classify_rejects_wrong_hand_size(codes):
    with pytest.raises(InvalidHand, match="exactly 5 cards"):
        classify(hand(codes))


def test_two_pair_kicker_breaks_tie():
    stronger = rank_of("KH KD 3S 3C 8H")
    weaker = rank_of("KS KC 3H 3D 5H")
    assert compare(stronger, weaker) == 1
    assert compare(weaker, stronger) == -1


def test_category_strength_beats_tie_breakers():
    pair_of_twos = rank_of("2H 2D 5S 7C 9H")
    ace_high = rank_of("AH KD QS JC 9H")
    assert compare(pair_of_twos, ace_high) == 1


def test_identical_ranks_in_different_suits_compare_equal():
    a = rank_of("AH KH 9D 7C 3S")
    b = rank_of("AS KD 9C 7H 3D")
    assert compare(a, b) == 0


def test_compare_ignores_category_name_and_stops_at_shorter_tie_breaker():
    a = HandRank(name="One", strength=2, tie_breaker=(9, 5), cards=())
    b = HandRank(name="Other", strength=2, tie_breaker=(9, 5, 3), cards=())
    assert compare(a, b) == 0
    assert compare(b, a) == 0


def test_rank_key_sorts_weakest_first():
    ranks = [rank_of(codes) for codes in ["AH AD AS AC 2D", "2H 4D 6S 8C 10H", "QH QD 5S 5C 5H"]]
    ordered = sorted(ranks, key=rank_key)
    assert [rank.name for rank in ordered] == ["High Card", "Full House", "Four of a Kind"]


def test_best_with_ties_collects_every_equal_item_in_order():
    items = [
        ("Alice", rank_of("AH KH 9D 7C 3S")),
        ("Bob", rank_of("2H 2D 5S 7C 9H")),
        ("Carol", rank_of("AS KD 9C 7H 3D")),
    ]
    items.append(("Dave", rank_of("2S 2C 5H 7D 9C")))
    best, winners = best_with_ties(items, key=lambda item: item[1])
    assert best.name == "One Pair"
    assert [name for name, _ in winners] == ["Bob", "Dave"]


def test_best_with_ties_rejects_empty_input():
    with pytest.raises(ValueError, match="No hands"):
        best_with_ties([])


def _conditions(cards):
    ranks = sorted((card.rank for card in cards), reverse=True)
    counts = sorted((ranks.count(rank) for rank in set(ranks)), reverse=True)
    flush = len({card.suit for card in cards}) == 1
    straight = len(set(ranks)) == 5 and ranks[0] - ranks[-1] == 4
    return {
        "Royal Flush": flush and straight and ranks[-1] == 10,
        "Straight Flush": flush and straight,
        "Four of a Kind": counts[0] == 4,
        "Full House": counts[:2] == [3, 2],
        "Flush": flush,
        "Straight": straight,
        "Three of a Kind": counts[0] == 3,
        "Two Pair": counts[:2] == [2, 2],
        "One Pair": counts[0] == 2,
        "High Card": True,
    }


def test_category_condition_holds_and_no_stronger_condition_does():
    deck, _ = new_shuffled_deck(seed=2024).deal(50)
    for cards in itertools.islice(itertools.combinations(deck, 5), 0, 200_000, 37):
        rank = classify(cards)
        conditions = _conditions(cards)
        assert conditions[rank.name], f"{rank.name} {cards}"
        for name, strength in CATEGORY_STRENGTH.items():
            if strength > rank.strength:
                assert not conditions[name], f"{name} should outrank {rank.name} for {cards}"


def test_every_straight_flush_rank_is_recognised():
    for suit in SUITS:
        for low in range(2, 10):
            cards = [Card(suit, rank) for rank in range(low, low + 5)]
            rank = classify(cards)
            assert rank.name == "Straight Flush"
            assert rank.tie_breaker == (low + 4,)
