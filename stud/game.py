from __future__ import annotations

import logging
import random
from collections.abc import Sequence as SequenceABC
from typing import List, Optional, Sequence

from .cards import DECK_SIZE, Card, new_shuffled_deck
from .errors import EvaluationFailure, InsufficientCards, InvalidHand, InvalidInput
from .evaluator import best_with_ties, classify
from .models import PlayerHand, RoundConfig, RoundResult

LOGGER = logging.getLogger("stud.game")

# One round of five-card stud: deal, classify, pick winners. Nothing here
# outlives the call, so concurrent rounds never share a deck or an RNG.


def seat_players(player_names: Optional[Sequence[str]], config: RoundConfig) -> List[str]:
    if player_names is None:
        raise InvalidInput("At least one player name must be provided.")
    if not isinstance(player_names, SequenceABC) or isinstance(player_names, str):
        raise InvalidInput("Player names must be a list of strings.")

    players: List[str] = []
    for name in player_names:
        if not isinstance(name, str):
            raise InvalidInput("Player names must be strings.")
        display = name.strip()
        if not display:
            raise InvalidInput("Player names must not be blank.")
        players.append(display)

    if not players:
        raise InvalidInput("At least one player name must be provided.")
    # A lone player always faces the house.
    if len(players) == 1:
        players.append(config.house_player)
    return players


def play_round(
    player_names: Optional[Sequence[str]],
    config: Optional[RoundConfig] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> RoundResult:
    config = config or RoundConfig()
    players = seat_players(player_names, config)

    needed = len(players) * config.hand_size
    if needed > DECK_SIZE:
        raise InsufficientCards(
            f"Not enough cards in the deck to deal {config.hand_size} cards to {len(players)} players."
        )

    deck = new_shuffled_deck(seed=seed, rng=rng)
    dealt: List[List[Card]] = []
    for _ in players:
        hand, deck = deck.deal(config.hand_size)
        dealt.append(hand)

    evaluated: List[PlayerHand] = []
    for player, cards in zip(players, dealt):
        try:
            rank = classify(cards)
        except InvalidHand as exc:
            raise EvaluationFailure(f"Error evaluating hand for player {player}: {exc.msg}") from exc
        evaluated.append(PlayerHand(player=player, cards=cards, rank=rank))

    best, winning_hands = best_with_ties(evaluated, key=lambda ph: ph.rank)
    winners = [ph.player for ph in winning_hands]

    LOGGER.info(
        "Round dealt to %d players; winners=%s reason=%s",
        len(players),
        ", ".join(winners),
        best.name,
    )
    return RoundResult(hands=evaluated, winners=winners, reason=best.name, winning_rank=best)
