# bojsolve

Solutions to a set of classic programming exercises, usable as a library.
Four of them can also be run from the command line on their usual text
input.

The package is organised by topic:

- `bojsolve.basics`: arithmetic and small puzzles: `min_max`, `binomial`,
  `digit_sum`, `is_palindrome`, `gcd`, `lcm`, `blackjack`,
  `is_right_triangle`, `tournament_round`, `good_section_count`, `zero_sum`,
  `atm_total_wait`, `fibonacci_call_counts`, `min_operations_to_one`,
  `primes_between`, `largest_square_area`, `min_repaint`.
- `bojsolve.containers`: stacks, queues, heaps and sets: `SmallSet` (a set
  of the integers 1 to 20 with `add`, `remove`, `check`, `toggle`, `fill`
  and `clear`), `run_set_commands`, `run_stack_commands`,
  `run_queue_commands`, `max_heap`, `min_heap`, `absolute_heap`,
  `apply_ac`, `josephus`, `last_card`, `stack_sequence`, `is_balanced`,
  with the errors `ACError` and `ImpossibleSequenceError`.
- `bojsolve.graphs`: grid and graph traversal: `z_order`, `tomato_days`,
  `count_cabbage_worms`, `dfs_order`, `bfs_order`, `distances_to_target`,
  `hide_and_seek`, `infected_count`, `count_papers`.
- `bojsolve.sorting`: sorting and searching: `max_meetings`,
  `sort_by_age`, `count_cards`, `sort_words`, `unheard_and_unseen`,
  `contains_each`, `sorted_numbers`.
- `bojsolve.cli`: `solve(problem, text)` runs one of the supported problems
  on its input text and returns the output text; `main` is the entry point
  of the `bojsolve` command.

## Installation

```
pip install .
```

## Library use

```python
from bojsolve.basics import binomial, gcd, lcm, is_palindrome
from bojsolve.graphs import z_order, hide_and_seek
from bojsolve.containers import last_card

gcd(24, 18)              # 6
lcm(24, 18)              # 72
binomial(5, 2)           # 10
is_palindrome("12321")   # True
z_order(2, 3, 1)         # 11
hide_and_seek(5, 17)     # 4
last_card(6)             # 4
```

Invalid input raises `ValueError` (for example `binomial(2, 3)` or
`lcm(0, 0)`). Where an exercise reports a failure, the function raises
instead: `apply_ac` raises `ACError` when a delete meets an empty list, and
`stack_sequence` raises `ImpossibleSequenceError` (a `ValueError`) when the
requested sequence cannot be produced with a stack.

## Command line

```
bojsolve PROBLEM [INPUT]
```

`PROBLEM` is one of the numbers below. The input is read from the file
`INPUT`, or from standard input when it is left out, as whitespace-separated
tokens.

- `5430`: a count of test cases, then for each a command string of `R` and
  `D`, the array length and the array as `[1,2,3]`. Prints the resulting
  array or `error` for each case.
- `7576`: width and height, then the grid of `1` (ripe), `0` (unripe) and
  `-1` (empty). Prints the days until all tomatoes ripen, `0` if all are
  ripe already, or `-1` if some never do.
- `11723`: a count of commands, then commands `add x`, `remove x`,
  `check x`, `toggle x`, `all` and `empty`. Prints `1` or `0` for each
  `check`.
- `14940`: height and width, then the grid with `2` for the target, `1`
  for land and `0` for blocked cells. Prints each cell's distance to the
  target, `-1` for land that cannot reach it.

Malformed or truncated input is reported on standard error and the command
exits with status 1.

```
echo "1 RDD 4 [1,2,3,4]" | bojsolve 5430
```

## What it does not do

The command line covers only the four problems listed above. All other
exercises are available as library functions only; there is no command that
reads their input text.

## Tests

```
pip install .[test]
pytest
```