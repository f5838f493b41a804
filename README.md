# deckanneal

deckanneal searches for a good order of the cards 1 to *n*. The deck is scored
against a table of opponent decks. In each game, every position is compared
with the same position in the opponent's deck. A higher card wins 1 point and
an equal card scores ½ point. The score is the total over all games.

The search uses simulated annealing. The temperature falls geometrically from
a start temperature to an end temperature over a fixed time limit. A second
tool tunes those two temperatures with a small genetic algorithm.

## Install

```
pip install .
```

To run the tests with pytest as well, install with `pip install .[test]`.

## Input

Both commands read a CSV file of opponent decks. By default this is `deck.csv`
in the current directory. The file must have at least 50 lines of at least 50
comma-separated integers, one opponent deck per line. Only the first 50 rows
and 50 columns are used, so the best possible score is 2500.

## Commands

### `deckanneal`

```
deckanneal [--deck PATH] [--runs N] [--time-limit SECONDS]
           [--start-temp T] [--end-temp T] [--seed SEED]
```

This runs `--runs` annealing passes. The defaults are 100 passes of 2.0
seconds each, with a start temperature of 7340 and an end temperature of 1e-6.
After each pass it writes the temperatures, the best score and the best deck
to standard error.

When all passes are done, it writes to standard error how many passes reached
each score. Scores are truncated to whole numbers for this count.

If the deck file cannot be read or has the wrong shape, the command prints a
message and exits with status 1.

### `deckanneal-tune`

```
deckanneal-tune [--deck PATH] [--population N] [--generations N]
                [--elite N] [--time-limit SECONDS] [--seed SEED]
```

This evolves a population of `(start_temp, end_temp)` pairs. The defaults are
20 individuals, 30 generations and 4 elites, and each individual is scored by
one 2.0-second annealing pass.

- **Starting values.** Each individual starts with a start temperature in
  100..10000 and an end temperature of 1e-2, 1e-3, 1e-4, 1e-5 or 1e-6.
- **Each generation.** The elites are kept. The other individuals are
  replaced by children of two elites picked at random. A child's start
  temperature is the mean of its parents' start temperatures. Its end
  temperature is their geometric mean. Each temperature is then scaled by a
  factor in 0.8..1.2, with probability 0.3.
- **Output.** Progress goes to standard error. The best parameters go to
  standard output.

If the deck file cannot be opened, the command exits with status 1.

## Library use

```python
import random

from deckanneal.annealing import anneal, evaluate, load_opponents
from deckanneal.csvfile import CSVFile
from deckanneal.tuning import Individual, evolve, read_opponents

opponents = load_opponents("deck.csv")
result = anneal(opponents, 1.0, 7340.0, 1e-6, random.Random(0), None)
print(result.score, evaluate(result.deck, opponents))

best = evolve(opponents, population_size=6, generations=2, elite=2,
              time_limit=0.5, rng=random.Random(1))
print(best.start_temp, best.end_temp, best.score)
```

### `deckanneal.annealing`

- `evaluate(deck, opponents)` returns the score of a deck.
- `anneal(...)` returns an `AnnealResult` with the fields `score`, `deck`,
  `start_temp` and `end_temp`.
  - The deck size is the length of the first opponent deck.
  - A run writes its summary to `log`, or to standard error if `log` is
    `None`.
  - It raises `ValueError` if there is no opponent deck, if the first
    opponent deck is empty, or if a temperature is not positive.
- `load_opponents(path)` reads the 50 × 50 table of opponent decks. It raises
  `ValueError` if the file is too small.

### `deckanneal.tuning`

- `Individual` holds `start_temp`, `end_temp` and `score`. It provides
  `Individual.random(rng)`, `mutate(rng)` and
  `Individual.crossover(first, second, rng)`.
- `read_opponents(path)` reads the same table as `load_opponents`, line by
  line.
- `evolve(...)` runs the genetic search and returns the best `Individual`. It
  raises `ValueError` if `population_size` is below 1, or if `elite` is not
  between 1 and `population_size`.

### `deckanneal.csvfile`

```python
table = CSVFile(float)
table.read("data.csv", has_header=True, has_index=True, delim=",")
table.show()
table.write("copy.csv", ";")
```

`CSVFile` reads a delimited file into `header`, `index` and `cell`. The first
row can be treated as a header and the first column as an index. Each cell is
converted with the callable given to the constructor, such as `int`, `float`
or `str`.

- **Reading.** Blank lines are skipped. A trailing delimiter does not add an
  empty field. `read` appends to any data already in the table.
- **Writing.** `write` puts the delimiter after every field and ends the file
  with an empty line.
- **Showing.** `show(file)` prints a summary and a tab-separated table to
  `file`, or to standard output if `file` is `None`.

## Limitations

The commands do not save the decks they find. Results are only written to the
terminal streams described above.