from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .cards import Card
from .evaluator import HandRank


@dataclass(frozen=True)
class RoundConfig:
    hand_size: int = 5
    house_player: str = "CPU"


@dataclass
class PlayerHand:
    player: str
    cards: List[Card]
    rank: HandRank


@dataclass
class RoundResult:
    hands: List[PlayerHand] = field(default_factory=list)
    winners: List[str] = field(default_factory=list)
    reason: str = ""
    winning_rank: Optional[HandRank] = None
