from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .cards import cards_to_codes
from .evaluator import (
    FLUSH,
    FOUR_OF_A_KIND,
    FULL_HOUSE,
    HIGH_CARD,
    ONE_PAIR,
    ROYAL_FLUSH,
    STRAIGHT,
    STRAIGHT_FLUSH,
    THREE_OF_A_KIND,
    TWO_PAIR,
    HandRank,
)
from .models import RoundResult

RANK_WORDS = {
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
    10: "Ten",
    11: "Jack",
    12: "Queen",
    13: "King",
    14: "Ace",
}


def rank_word(rank: int) -> str:
    return RANK_WORDS.get(rank, str(rank))


def rank_plural(rank: int) -> str:
    word = rank_word(rank)
    if word.endswith("x"):
        return f"{word}es"
    return f"{word}s"


def hand_summary(rank: Optional[HandRank]) -> str:
    """Describe an evaluated hand, e.g. "Full House: Kings over Tens"."""
    if rank is None:
        return ""
    tb = rank.tie_breaker
    if rank.name == ROYAL_FLUSH:
        return "Royal Flush (Ace high)"
    if rank.name == STRAIGHT_FLUSH:
        return f"Straight Flush to {rank_word(tb[0])}"
    if rank.name == FOUR_OF_A_KIND:
        return f"Four of a Kind: {rank_plural(tb[0])}"
    if rank.name == FULL_HOUSE:
        return f"Full House: {rank_plural(tb[0])} over {rank_plural(tb[1])}"
    if rank.name == FLUSH:
        return f"Flush, {rank_word(tb[0])} High"
    if rank.name == STRAIGHT:
        return f"Straight to {rank_word(tb[0])}"
    if rank.name == THREE_OF_A_KIND:
        return f"Three of a Kind: {rank_plural(tb[0])}"
    if rank.name == TWO_PAIR:
        return f"Two Pair: {rank_plural(tb[0])} and {rank_plural(tb[1])}"
    if rank.name == ONE_PAIR:
        return f"One Pair: {rank_plural(tb[0])}"
    if rank.name == HIGH_CARD:
        return f"High Card: {rank_word(tb[0])}"
    return rank.name


def winner_summary(winners: Sequence[str], rank: Optional[HandRank]) -> str:
    if not winners or rank is None:
        return "No winner"
    suffix = "s" if len(winners) > 1 else ""
    return f"Winner{suffix}: {', '.join(winners)} with {hand_summary(rank)}"


def result_payload(result: RoundResult) -> Dict[str, Any]:
    player_results: List[Dict[str, Any]] = []
    for ph in result.hands:
        player_results.append(
            {
                "player": ph.player,
                "cards": cards_to_codes(ph.cards),
                "rank": ph.rank.name,
                "hand_summary": hand_summary(ph.rank),
                "tie_breaker": list(ph.rank.tie_breaker),
            }
        )
    return {
        "player_results": player_results,
        "winners": list(result.winners),
        "reason": winner_summary(result.winners, result.winning_rank),
    }
