# ladderkit

A small library of solutions to short, classic programming puzzles: lucky
numbers, string encodings, queues, swaps, small grids and the like. Each
puzzle is one function that takes ordinary Python values and returns the
answer. The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ladderkit.numbers`: puzzles about integers. `is_nearly_lucky`,
  `insomnia_cure`, `can_pay_with_coins`, `game_with_integers`,
  `next_beautiful_year`, `is_prime`, `is_next_prime`, `missing_efficiency`
  and `walking_master`.
- `ladderkit.text`: puzzles about strings. `hq9_has_output`,
  `is_amusing_joke`, `stones_to_remove`, `queue_after`, `capitalize_word`,
  `run_bitpp`, `is_magic_number`, `decode_borze`, `rearrange_sum`,
  `normalize_case`, `digit_xor`, `abbreviate`, `gender_by_name`,
  `doublings_to_contain` and `water_actions`.
- `ladderkit.sequences`: puzzles about lists of numbers. `tram_capacity`,
  `general_swaps`, `balanced_split`, `ambitious_kid`, `has_subsegment_mode`,
  `can_be_good`, `can_sort_jagged`, `min_tank_volume`, `can_sort_boxes`,
  `orange_fraction`, `max_ratio_count`, `search_comparisons`,
  `defeats_all_dragons`, `solvable_problems`, `cupboard_seconds`,
  `min_puzzle_difference`, `max_sale_earnings`, `is_in_equilibrium` and
  `max_submission_score`.
- `ladderkit.grids`: puzzles on small square boards. `target_points` (a 10x10
  board given as strings, "." for an empty cell), `beautiful_matrix_moves` (a
  5x5 matrix of 0 and 1) and `lights_after` (a 3x3 grid of press counts,
  returning one string of "0"/"1" per row).
- `ladderkit.cli`: the `ladderkit` command, described below.

## Examples

```python
from ladderkit.numbers import next_beautiful_year, walking_master
from ladderkit.text import abbreviate, decode_borze, rearrange_sum
from ladderkit.sequences import balanced_split

next_beautiful_year(1987)         # 2013
abbreviate("localization")        # "l10n"
decode_borze(".-.--")             # "012"
rearrange_sum("3+2+1")            # "1+2+3"
balanced_split([2, 2, 1, 2, 1, 2])  # 2
```

Where a puzzle has no answer, the function returns `None` (for example
`walking_master`, `balanced_split`, `doublings_to_contain`). Input the puzzle
does not allow raises an exception, usually `ValueError`; `search_comparisons`
raises `KeyError` for a query that is not in the array.

## Command line

The `ladderkit` command reads a puzzle's input in the judge's whitespace
separated format, from standard input or from a file given with
`-i PATH` / `--input PATH`, and prints the answer:

```
ladderkit --help
printf '3\n50 50 100\n' | ladderkit drinks              # 66.6667
printf '1\n6\n2 2 1 2 1 2\n' | ladderkit one-and-two    # 2
printf '2\n1 2\n1\n1\n' | ladderkit effective-approach  # 1 2
```

The puzzles it accepts are:

- `one-and-two`: a count of test cases, then for each a length and that many
  ones and twos; prints the split point or `-1`.
- `drinks`: a count, then that many percentages; prints the mean with six
  significant digits.
- `effective-approach`: an array, then a list of queries, each preceded by its
  length; prints the forward and backward comparison totals.

It exits with 0 on success and with 1, after a message on standard error,
when the input is truncated, not made of integers, or cannot be read.

## What it does not do

The command covers only the three puzzles above. Every other puzzle is
available only as a library function; there is no command-line reader for
its input.