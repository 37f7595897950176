# bajtocja

Answers to a series of puzzle tasks set in the land of Bajtocja, gathered
into one Python library. Every task is a plain function or a small class
that takes ordinary Python values and returns the answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The package has no dependencies beyond the standard library.

## Modules

| Module             | Contents |
|--------------------|----------|
| `bajtocja.round0`  | `empathy`, `bridge_score` (raises `CheatingError`), `game_answers` |
| `bajtocja.round1`  | `minutes_to_seconds`, `first_letters`, `is_fufsopalindrome`, `max_subtree_sum`, `cartographer` |
| `bajtocja.round2`  | `interview_verdict`, `jubilee_gap`, `longest_stone_stack`, `kumquat_juice`, `ProductionLine`, `park_survey` |
| `bajtocja.round3`  | `siuu`, `lock_combinations`, `split_equal_sums`, `decrypt_min_xor`, `home_computer` |
| `bajtocja.round4`  | `bun_quarrel`, `hofstadter_q`, `dilatation`, `rook_gambit`, `BajtexConnections` |
| `bajtocja.round5`  | `knight_moves`, `patrol`, `wagon_weights`, `cuboid_moves` |

## Return conventions

Tasks whose answer may be "impossible" say so in one of these ways:

- `None`: `cartographer`, `split_equal_sums`, `wagon_weights` and
  `rook_gambit`.
- `-1`: `max_subtree_sum` and `cuboid_moves`.
- An exception: `bridge_score` raises `CheatingError`, which is a
  `ValueError`, for a hand that cannot be legitimate.

Malformed input, such as an empty sequence, a worker or employee index out of
range, or rows of different lengths, raises `ValueError` or `IndexError`.

Some tasks use particular input shapes:

- `kumquat_juice(productivity, operations)` replays operation tuples
  `("V", worker, productivity, day)`, `("F", worker, day)`,
  `("H", worker, productivity, day)` and `("Q", first, last, day)`. Workers
  are numbered from 1. It returns the answers to the `Q` operations.
- `ProductionLine` numbers its workers from 0.
- `BajtexConnections(n)` numbers its employees 0 to `n`.
- `park_survey(n, ask)` calls `ask(attraction)` once for each attraction from
  1 to `n` and returns the answers as a list.
- `home_computer(n, edges)` returns its output as lists of integers: the
  register count, the state rows, the instruction count and the instructions.
- `dilatation(rows)` takes the panel lengths of each row of a wall and returns
  a `(fewest, most)` pair.
- `cuboid_moves(board)` takes equally long strings of `.`, `-`, `S` and `M`.

## Examples

```python
from bajtocja.round0 import bridge_score, CheatingError
from bajtocja.round1 import is_fufsopalindrome
from bajtocja.round2 import ProductionLine
from bajtocja.round3 import split_equal_sums
from bajtocja.round4 import BajtexConnections, hofstadter_q
from bajtocja.round5 import knight_moves, patrol

is_fufsopalindrome("69")          # True
hofstadter_q(10)                  # 6
knight_moves("a1")                # 2
patrol("1234")                    # "2222"
split_equal_sums([1, 2, 3])       # [2, 3]

bridge_score(["A", "K", "Q", "J", "2", "3", "4",
              "5", "6", "7", "8", "9", "10"])   # 10

try:
    bridge_score(["A", "K"])      # a hand must have 13 cards
except CheatingError:
    print("OSZUST!")

line = ProductionLine([3, 5])
line.change_productivity(0, 4, 2)
line.query_range(0, 1, 10)        # 88

company = BajtexConnections(5)
company.connect(1, 2)
company.connect(2, 3)
company.undo_count(1, 3)          # 1
```

## What the package does not do

It is a library only. It has no command-line program, reads nothing from
standard input and prints nothing. To use a task on contest-style input, parse
the input yourself and pass the values to the function.