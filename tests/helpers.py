from __future__ import annotations

from typing import Iterable, List

from stud.cards import Card, parse_cards
from stud.evaluator import HandRank, classify


def hand(codes: str) -> List[Card]:
    """Build cards from space separated codes: hand("AS KS QS JS 10S")."""
    return parse_cards(codes.split())


def rank_of(codes: str) -> HandRank:
    return classify(hand(codes))


def all_cards(hands: Iterable[Iterable[Card]]) -> List[Card]:
    return [card for cards in hands for card in cards]
