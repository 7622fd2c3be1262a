"""Five-card stud engine: cards, hand evaluation and round orchestration."""

from .cards import Card, Deck, SUITS, RANKS, new_shuffled_deck, deal, parse_card, parse_cards
from .errors import EvaluationFailure, InsufficientCards, InvalidHand, InvalidInput, StudError
from .evaluator import HandRank, best_with_ties, classify, compare, rank_key
from .game import play_round
from .models import PlayerHand, RoundConfig, RoundResult
from .summary import hand_summary, result_payload, winner_summary

__all__ = [
    "Card",
    "Deck",
    "SUITS",
    "RANKS",
    "new_shuffled_deck",
    "deal",
    "parse_card",
    "parse_cards",
    "StudError",
    "InvalidInput",
    "InsufficientCards",
    "InvalidHand",
    "EvaluationFailure",
    "HandRank",
    "classify",
    "compare",
    "rank_key",
    "best_with_ties",
    "play_round",
    "PlayerHand",
    "RoundConfig",
    "RoundResult",
    "hand_summary",
    "winner_summary",
    "result_payload",
]
