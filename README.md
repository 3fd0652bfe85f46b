# problemset

Small, self-contained solutions to a set of classic short programming
problems: counting tasks, string puzzles and sequence problems. Each
problem is a plain Python function that takes ordinary values and
returns the answer. Invalid input that the problem does not allow
(a `k` outside the list, strings of different length, a shot at a
wire that does not exist, and so on) raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The functions are grouped into three modules.

`problemset.counting` holds the arithmetic and counting problems:
`array_coloring`, `bear_years`, `beautiful_matrix_moves`,
`elephant_steps`, `gaming_forces_spells`, `next_round_count`,
`team_problem_count`, `soldier_borrow`, `wrong_subtraction`,
`split_multiset_operations` and `phone_desktop_screens`.

```python
from problemset.counting import bear_years, elephant_steps, wrong_subtraction

bear_years(4, 7)           # 2
elephant_steps(12)         # 3
wrong_subtraction(512, 4)  # 50
```

`problemset.text` holds the string problems: `boy_or_girl`,
`cover_in_water`, `petya_compare`, `simple_palindrome`,
`stones_to_remove`, `is_translation`, `make_majority` and
`wonderful_sticks`.

```python
from problemset.text import petya_compare, stones_to_remove

petya_compare("aaaa", "aaaA")  # 0
stones_to_remove("RRG")        # 1
```

`problemset.sequences` holds the array and grid problems:
`two_permutations`, `longest_good_array`, `puzzles_min_difference`,
`twins_min_coins`, `shaass_and_oskols` and `drawing_task`.

```python
from problemset.sequences import puzzles_min_difference, twins_min_coins

puzzles_min_difference(4, [10, 12, 10, 7, 5, 22])  # 5
twins_min_coins([3, 3])                             # 2
```

## Command line

The `problemset` command takes the name of a problem, reads that
problem's input as whitespace-separated tokens on standard input and
prints the answer, one item per line.

```
problemset --help
```

The accepted problem names are:

- `array-coloring`: a number of test cases, then for each case its
  length and values; prints `YES` or `NO` per case.
- `drawing-task`: `n m k`, then `k` strokes `r1 c1 r2 c2 ch`; prints
  the painted grid.
- `shaass-and-oskols`: the number of wires, the birds on each, the
  number of shots, then each shot as `wire bird`; prints the birds
  left on each wire.

```
$ printf '5\n10 10 10 10 10\n1\n2 5\n' | problemset shaass-and-oskols
14
0
15
10
10
```

If the input ends early or a value is invalid, the command prints an
error and exits with status 2.

## What it does not do

Only the three problems above can be run from the command line. All
other problems are available as library functions only, and take
Python values rather than judge-format text.