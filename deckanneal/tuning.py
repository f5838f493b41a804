"""Genetic search for good annealing temperatures."""

from __future__ import annotations

import argparse
import itertools
import math
import os
import random
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from deckanneal.annealing import SIZE, anneal


@dataclass
class Individual:
    """A candidate temperature schedule and the score it reached."""

    start_temp: float
    end_temp: float
    score: float = -1.0

    @classmethod
    def random(cls, rng: random.Random) -> Individual:
        """A start temperature in 100..10000 and an end one in 1e-6..1e-2."""
        start_temp = float(rng.randrange(100, 10001))
        end_temp = 10.0 ** -(rng.randrange(5) + 2)
        return cls(start_temp, end_temp)

    def mutate(self, rng: random.Random) -> None:
        """Scale each temperature by 0.8..1.2, each with probability 0.3."""
        if rng.random() < 0.3:
            self.start_temp *= rng.uniform(0.8, 1.2)
        if rng.random() < 0.3:
            self.end_temp *= rng.uniform(0.8, 1.2)

    @classmethod
    def crossover(
        cls, first: Individual, second: Individual, rng: random.Random
    ) -> Individual:
        """Blend two parents (mean start, geometric mean end) and mutate."""
        child = cls(
            (first.start_temp + second.start_temp) / 2,
            math.sqrt(first.end_temp * second.end_temp),
        )
        child.mutate(rng)
        return child


def read_opponents(path: str | os.PathLike[str]) -> list[list[int]]:
    """Read the first SIZE lines of SIZE comma separated integers."""
    with open(path, encoding="utf-8") as stream:
        lines = [line.rstrip("\n") for line in itertools.islice(stream, SIZE)]
    if len(lines) < SIZE:
        raise ValueError(f"{os.fspath(path)} has fewer than {SIZE} lines")
    rows = []
    for line in lines:
        fields = line.split(",")
        if len(fields) < SIZE:
            raise ValueError(f"line {line!r} has fewer than {SIZE} values")
        rows.append([int(value) for value in fields[:SIZE]])
    return rows


def evolve(
    opponents: Sequence[Sequence[int]],
    population_size: int = 20,
    generations: int = 30,
    elite: int = 4,
    time_limit: float = 2.0,
    rng: random.Random | None = None,
    log: TextIO | None = None,
) -> Individual:
    """Evolve temperature schedules and return the best-scoring one."""
    if population_size < 1:
        raise ValueError("population_size must be at least 1")
    if not 1 <= elite <= population_size:
        raise ValueError("elite must be between 1 and population_size")
    rng = rng if rng is not None else random.Random()
    log = log if log is not None else sys.stderr

    def scored(individual: Individual) -> Individual:
        result = anneal(
            opponents, time_limit, individual.start_temp, individual.end_temp, rng, log
        )
        individual.score = result.score
        return individual

    population = [scored(Individual.random(rng)) for _ in range(population_size)]

    for generation in range(generations):
        population.sort(key=lambda individual: individual.score, reverse=True)
        leader = population[0]
        print("------------------------", file=log)
        print(f"Gen {generation} best: {leader.score:g}", file=log)
        print(f"startTemp: {leader.start_temp:g}", file=log)
        print(f"endTemp: {leader.end_temp:g}", file=log)
        print("------------------------", file=log)

        parents = population[:elite]
        children = [
            scored(Individual.crossover(rng.choice(parents), rng.choice(parents), rng))
            for _ in range(population_size - elite)
        ]
        population = parents + children

    return max(population, key=lambda individual: individual.score)


def main(argv: Sequence[str] | None = None) -> int:
    """Tune annealing temperatures and print the best parameters found."""
    parser = argparse.ArgumentParser(
        prog="deckanneal-tune", description="Tune annealing temperatures."
    )
    parser.add_argument("--deck", default="deck.csv", help="CSV of opponent decks")
    parser.add_argument("--population", type=int, default=20)
    parser.add_argument("--generations", type=int, default=30)
    parser.add_argument("--elite", type=int, default=4)
    parser.add_argument("--time-limit", type=float, default=2.0)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        opponents = read_opponents(args.deck)
    except OSError:
        print(f"could not open {args.deck}", file=sys.stderr)
        return 1

    best = evolve(
        opponents,
        args.population,
        args.generations,
        args.elite,
        args.time_limit,
        random.Random(args.seed),
        sys.stderr,
    )
    print("Best parameters:")
    print(f"startTemp = {best.start_temp:g}")
    print(f"endTemp = {best.end_temp:g}")
    print(f"score = {best.score:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())