#!/usr/bin/env python3
"""Deal many rounds offline and report how often each category shows up.

Handy as a sanity check on the shuffle and the classifier: over enough rounds
the frequencies should approach the textbook five-card odds.

Example:
    python scripts/round_sim.py --players 4 --rounds 20000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter

from stud.evaluator import CATEGORY_STRENGTH
from stud.game import play_round


def simulate(players: int, rounds: int, seed: int | None = None) -> tuple[Counter, Counter]:
    rng = random.Random(seed)
    names = [f"Player{idx}" for idx in range(players)]
    categories: Counter = Counter()
    wins: Counter = Counter()
    for _ in range(rounds):
        result = play_round(names, rng=rng)
        for ph in result.hands:
            categories[ph.rank.name] += 1
        for winner in result.winners:
            wins[winner] += 1
    return categories, wins


def main() -> None:
    parser = argparse.ArgumentParser(description="Five-card stud frequency simulation")
    parser.add_argument("--players", type=int, default=4)
    parser.add_argument("--rounds", type=int, default=10_000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    categories, wins = simulate(args.players, args.rounds, args.seed)
    total = sum(categories.values())
    print(f"{total} hands over {args.rounds} rounds")
    for name in sorted(CATEGORY_STRENGTH, key=CATEGORY_STRENGTH.get, reverse=True):
        count = categories.get(name, 0)
        print(f"  {name:<16} {count:>8}  {count / total:8.4%}")
    print("Wins (ties count for every winner):")
    for player, count in sorted(wins.items()):
        print(f"  {player:<16} {count:>8}")


if __name__ == "__main__":
    main()
