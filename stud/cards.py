from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .errors import InsufficientCards

SUITS = "CDHS"
SUIT_NAMES = {"C": "Clubs", "D": "Diamonds", "H": "Hearts", "S": "Spades"}

RANKS = tuple(range(2, 15))
RANK_SYMBOLS = {rank: str(rank) for rank in range(2, 11)}
RANK_SYMBOLS.update({11: "J", 12: "Q", 13: "K", 14: "A"})
SYMBOL_RANKS = {symbol: rank for rank, symbol in RANK_SYMBOLS.items()}
SYMBOL_RANKS["T"] = 10

DECK_SIZE = len(SUITS) * len(RANKS)

ACE = 14


@dataclass(frozen=True)
class Card:
    suit: str
    rank: int

    def __post_init__(self) -> None:
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")

    @property
    def code(self) -> str:
        """Compact display code, e.g. "AC" or "10D"."""
        return f"{RANK_SYMBOLS[self.rank]}{self.suit}"

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class Deck:
    # Shuffled once at construction; dealing only moves the cursor.
    cards: Tuple[Card, ...]
    position: int = 0

    @property
    def remaining(self) -> int:
        return len(self.cards) - self.position

    def deal(self, count: int) -> Tuple[List[Card], Deck]:
        if count < 0:
            raise ValueError("Deal count must not be negative")
        if count > self.remaining:
            raise InsufficientCards(f"Cannot deal {count} cards. Only {self.remaining} remaining.")
        end = self.position + count
        return list(self.cards[self.position:end]), Deck(self.cards, end)

    def __len__(self) -> int:
        return self.remaining


def build_deck() -> List[Card]:
    return [Card(suit, rank) for suit in SUITS for rank in RANKS]


def new_shuffled_deck(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Deck:
    # random.shuffle is Fisher-Yates, so every permutation is equally likely.
    rng = rng or random.Random(seed)
    cards = build_deck()
    rng.shuffle(cards)
    return Deck(tuple(cards))


def deal(deck: Deck, count: int) -> Tuple[List[Card], Deck]:
    return deck.deal(count)


def cards_to_codes(cards: Sequence[Card]) -> List[str]:
    return [card.code for card in cards]


def parse_card(code: str) -> Card:
    text = code.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Invalid card code: {code}")
    rank_text, suit = text[:-1], text[-1]
    if rank_text not in SYMBOL_RANKS:
        raise ValueError(f"Invalid card code: {code}")
    return Card(suit, SYMBOL_RANKS[rank_text])


def parse_cards(codes: Sequence[str]) -> List[Card]:
    return [parse_card(code) for code in codes]
