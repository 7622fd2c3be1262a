from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .cards import ACE, Card
from .errors import InvalidHand

HAND_SIZE = 5

ROYAL_FLUSH = "Royal Flush"
STRAIGHT_FLUSH = "Straight Flush"
FOUR_OF_A_KIND = "Four of a Kind"
FULL_HOUSE = "Full House"
FLUSH = "Flush"
STRAIGHT = "Straight"
THREE_OF_A_KIND = "Three of a Kind"
TWO_PAIR = "Two Pair"
ONE_PAIR = "One Pair"
HIGH_CARD = "High Card"

CATEGORY_STRENGTH = {
    HIGH_CARD: 1,
    ONE_PAIR: 2,
    TWO_PAIR: 3,
    THREE_OF_A_KIND: 4,
    STRAIGHT: 5,
    FLUSH: 6,
    FULL_HOUSE: 7,
    FOUR_OF_A_KIND: 8,
    STRAIGHT_FLUSH: 9,
    ROYAL_FLUSH: 10,
}

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class HandRank:
    """Evaluated strength of one five-card hand.

    ``strength`` and ``tie_breaker`` are the whole ordering key; ``name`` and
    ``cards`` are carried for display. Use :func:`compare` to order ranks.
    """

    name: str
    strength: int
    tie_breaker: Tuple[int, ...]
    cards: Tuple[Card, ...]


def classify(hand: Sequence[Card]) -> HandRank:
    """Classify exactly five cards into a category with its tie-breakers."""
    cards = tuple(hand)
    if len(cards) != HAND_SIZE:
        raise InvalidHand(f"Hand must contain exactly {HAND_SIZE} cards, got {len(cards)}")

    ranks = sorted((card.rank for card in cards), reverse=True)
    is_flush = len({card.suit for card in cards}) == 1
    is_straight = _is_straight(ranks)

    counts: Dict[int, int] = {}
    for rank in ranks:
        counts.setdefault(rank, 0)
        counts[rank] += 1

    # Higher count first, then higher rank; puts the top pair first in two pair.
    ordered_groups = sorted(counts.items(), key=lambda x: (x[1], x[0]), reverse=True)
    count_values = [count for _, count in ordered_groups]

    if is_flush and is_straight:
        if ACE in ranks and min(ranks) == 10:
            return _rank(ROYAL_FLUSH, [ACE], cards)
        return _rank(STRAIGHT_FLUSH, [ranks[0]], cards)
    if count_values[0] == 4:
        quad_rank = ordered_groups[0][0]
        kicker = ordered_groups[1][0]
        return _rank(FOUR_OF_A_KIND, [quad_rank, kicker], cards)
    if count_values[0] == 3 and count_values[1] == 2:
        return _rank(FULL_HOUSE, [ordered_groups[0][0], ordered_groups[1][0]], cards)
    if is_flush:
        return _rank(FLUSH, ranks, cards)
    if is_straight:
        return _rank(STRAIGHT, [ranks[0]], cards)
    if count_values[0] == 3:
        trips_rank = ordered_groups[0][0]
        kickers = [rank for rank, _ in ordered_groups[1:]]
        return _rank(THREE_OF_A_KIND, [trips_rank] + kickers, cards)
    if count_values[0] == 2 and count_values[1] == 2:
        pair_high = ordered_groups[0][0]
        pair_low = ordered_groups[1][0]
        kicker = ordered_groups[2][0]
        return _rank(TWO_PAIR, [pair_high, pair_low, kicker], cards)
    if count_values[0] == 2:
        pair_rank = ordered_groups[0][0]
        kickers = [rank for rank, _ in ordered_groups[1:]]
        return _rank(ONE_PAIR, [pair_rank] + kickers, cards)
    return _rank(HIGH_CARD, ranks, cards)


def _rank(name: str, tie_breaker: Iterable[int], cards: Tuple[Card, ...]) -> HandRank:
    return HandRank(name=name, strength=CATEGORY_STRENGTH[name], tie_breaker=tuple(tie_breaker), cards=cards)


def _is_straight(ranks_desc: List[int]) -> bool:
    # Ace plays high only: A-2-3-4-5 is not a straight here.
    if len(set(ranks_desc)) != len(ranks_desc):
        return False
    return ranks_desc[0] - ranks_desc[-1] == len(ranks_desc) - 1


def compare(a: HandRank, b: HandRank) -> int:
    """Return 1 if ``a`` ranks higher, -1 if lower, 0 if they tie."""
    if a.strength != b.strength:
        return 1 if a.strength > b.strength else -1
    for left, right in zip(a.tie_breaker, b.tie_breaker):
        if left != right:
            return 1 if left > right else -1
    return 0


rank_key = functools.cmp_to_key(compare)


def best_with_ties(
    items: Iterable[T],
    key: Optional[Callable[[T], HandRank]] = None,
) -> Tuple[HandRank, List[T]]:
    """Return the highest rank among ``items`` and every item that ties it.

    Tied items keep their input order.
    """
    get_rank = key or (lambda item: item)
    best: Optional[HandRank] = None
    winners: List[T] = []
    for item in items:
        rank = get_rank(item)
        order = 1 if best is None else compare(rank, best)
        if order > 0:
            best = rank
            winners = [item]
        elif order == 0:
            winners.append(item)
    if best is None:
        raise ValueError("No hands to rank")
    return best, winners
