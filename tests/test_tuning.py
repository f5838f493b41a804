import io
import random

import pytest

from deckanneal.annealing import SIZE
from deckanneal.tuning import Individual, evolve, main, read_opponents


class _NoMutation:
    def random(self):
        return 0.9

    def uniform(self, low, high):
        raise AssertionError("uniform should not be drawn")


def _write_deck(path, rows):
    path.write_text("".join(",".join(map(str, row)) + "\n" for row in rows), encoding="utf-8")
    return path


def _table(size=SIZE, seed=5):
    rng = random.Random(seed)
    rows = []
    for _ in range(size):
        row = list(range(1, size + 1))
        rng.shuffle(row)
        rows.append(row)
    return rows


@pytest.mark.parametrize("seed", range(20))
def test_random_individual_ranges(seed):
    individual = Individual.random(random.Random(seed))
    assert 100 <= individual.start_temp <= 10000
    assert individual.end_temp in (1e-2, 1e-3, 1e-4, 1e-5, 1e-6)
    assert individual.score == -1


@pytest.mark.parametrize("seed", range(20))
def test_mutate_stays_within_bounds(seed):
    individual = Individual(1000.0, 1e-3)
    individual.mutate(random.Random(seed))
    assert 800.0 <= individual.start_temp <= 1200.0
    assert 0.8e-3 <= individual.end_temp <= 1.2e-3


def test_crossover_blends_parents():
    child = Individual.crossover(Individual(100.0, 1e-2), Individual(200.0, 1e-4), _NoMutation())
    assert child.start_temp == 150.0
    assert child.end_temp == pytest.approx(1e-3)
    assert child.score == -1


def test_read_opponents_round_trip(tmp_path):
    rows = _table()
    path = _write_deck(tmp_path / "deck.csv", rows)
    assert read_opponents(path) == rows


def test_read_opponents_short_file(tmp_path):
    path = _write_deck(tmp_path / "deck.csv", _table()[:10])
    with pytest.raises(ValueError):
        read_opponents(path)


def test_read_opponents_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_opponents(tmp_path / "absent.csv")


def test_evolve_returns_best():
    opponents = _table(4)
    log = io.StringIO()
    best = evolve(opponents, 3, 1, 1, 0.01, random.Random(9), log)
    assert 0 <= best.score <= 4 * 4
    assert "Gen 0 best:" in log.getvalue()
    assert best.start_temp > 0 and best.end_temp > 0


def test_evolve_rejects_bad_elite():
    with pytest.raises(ValueError):
        evolve(_table(3), 2, 1, 0, 0.01, random.Random(0), io.StringIO())
    with pytest.raises(ValueError):
        evolve(_table(3), 2, 1, 3, 0.01, random.Random(0), io.StringIO())


def test_main_prints_parameters(tmp_path, capsys):
    path = _write_deck(tmp_path / "deck.csv", _table())
    code = main([
        "--deck", str(path), "--population", "2", "--generations", "1",
        "--elite", "1", "--time-limit", "0.01", "--seed", "1",
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Best parameters:\n")
    assert "startTemp = " in out
    assert "score = " in out


def test_main_missing_file(tmp_path, capsys):
    assert main(["--deck", str(tmp_path / "absent.csv")]) == 1
    assert "could not open" in capsys.readouterr().err