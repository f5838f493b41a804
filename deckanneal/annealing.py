"""Simulated annealing of a card deck against a fixed set of opponent decks."""

from __future__ import annotations

import argparse
import math
import os
import random
import sys
import time
from collections import Counter
from dataclasses import dataclass
from typing import Sequence, TextIO

from deckanneal.csvfile import CSVFile

SIZE = 50
START_TEMP = 7340.0
END_TEMP = 1e-06


@dataclass(frozen=True)
class AnnealResult:
    """The best deck one annealing run found, with its score and schedule."""

    score: float
    deck: tuple[int, ...]
    start_temp: float
    end_temp: float


def evaluate(deck: Sequence[int], opponents: Sequence[Sequence[int]]) -> float:
    """Score a deck: one point per position won, half a point per tie."""
    total = 0.0
    for opponent in opponents:
        for mine, theirs in zip(deck, opponent):
            if mine > theirs:
                total += 1.0
            elif mine == theirs:
                total += 0.5
    return total


def anneal(
    opponents: Sequence[Sequence[int]],
    time_limit: float = 2.0,
    start_temp: float = START_TEMP,
    end_temp: float = END_TEMP,
    rng: random.Random | None = None,
    log: TextIO | None = None,
) -> AnnealResult:
    """Search permutations of 1..n for a high score within a time limit."""
    if not opponents or not opponents[0]:
        raise ValueError("at least one non-empty opponent deck is required")
    if start_temp <= 0 or end_temp <= 0:
        raise ValueError("temperatures must be positive")
    rng = rng if rng is not None else random.Random()
    log = log if log is not None else sys.stderr

    size = len(opponents[0])
    current = list(range(1, size + 1))
    rng.shuffle(current)
    current_score = evaluate(current, opponents)
    best, best_score = list(current), current_score

    start = time.monotonic()
    while True:
        elapsed = time.monotonic() - start
        if elapsed > time_limit:
            break
        progress = elapsed / time_limit if time_limit > 0 else 1.0
        temperature = start_temp * (end_temp / start_temp) ** progress

        candidate = list(current)
        i, j = rng.randrange(size), rng.randrange(size)
        candidate[i], candidate[j] = candidate[j], candidate[i]

        score = evaluate(candidate, opponents)
        diff = score - current_score
        if diff >= 0 or math.exp(diff / temperature) > rng.random():
            current, current_score = candidate, score
            if score > best_score:
                best, best_score = list(candidate), score

    print("-------------------------", file=log)
    print(f"startTemp: {start_temp:g}, endTemp: {end_temp:g}", file=log)
    print(f"Best score: {best_score:g}", file=log)
    print("".join(f"{card} " for card in best), file=log)
    return AnnealResult(best_score, tuple(best), start_temp, end_temp)


def load_opponents(path: str | os.PathLike[str]) -> list[list[int]]:
    """Load the SIZE x SIZE table of opponent decks from a CSV file."""
    table = CSVFile(int)
    table.read(path, False, False, ",")
    rows = table.cell[:SIZE]
    if len(rows) < SIZE or any(len(row) < SIZE for row in rows):
        raise ValueError(f"{os.fspath(path)} must hold {SIZE} rows of {SIZE} values")
    return [row[:SIZE] for row in rows]


def main(argv: Sequence[str] | None = None) -> int:
    """Run annealing repeatedly and report how often each score was reached."""
    parser = argparse.ArgumentParser(
        prog="deckanneal", description="Anneal a deck against opponent decks."
    )
    parser.add_argument("--deck", default="deck.csv", help="CSV of opponent decks")
    parser.add_argument("--runs", type=int, default=100)
    parser.add_argument("--time-limit", type=float, default=2.0)
    parser.add_argument("--start-temp", type=float, default=START_TEMP)
    parser.add_argument("--end-temp", type=float, default=END_TEMP)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        opponents = load_opponents(args.deck)
    except (OSError, ValueError) as error:
        print(f"cannot load {args.deck}: {error}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    counts: Counter[int] = Counter()
    for _ in range(args.runs):
        result = anneal(
            opponents, args.time_limit, args.start_temp, args.end_temp, rng, sys.stderr
        )
        counts[int(result.score)] += 1
    for score in sorted(counts):
        print(f"{score}: {counts[score]}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())