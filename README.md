# judgebook

A library of small, self-contained solutions to classic programming-contest
problems: number theory, text puzzles, recurrences and games, dynamic
programming on sequences and grids, and set or mapping lookups. Every
solution is an ordinary function or class that takes Python values and
returns Python values. It has no runtime dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `judgebook.numbers`: divisibility, primes and arithmetic puzzles.
  `lcm`, `add_fractions`, `extra_trees`, `primes_between`, `count_primes`
  (counts primes not greater than 1000), `next_prime`, `kth_factor`,
  `relation` (returns a `Relation` member: `FACTOR`, `MULTIPLE` or
  `NEITHER`), `describe_perfect`, `nth_doom_number`, `smallest_generator`,
  `honeycomb_rooms`, `snail_days`, `central_movement_points`,
  `solve_linear_system` (searches integers from -999 to 999),
  `sugar_bags`, `make_change`, `satisfies_big_o`.
- `judgebook.text`: string puzzles and a grade average.
  `read_vertically`, `count_distinct_substrings`, `most_frequent_letter`,
  `is_group_word`, `count_group_words`, `count_croatian_letters`,
  `grade_average` (uses the `GRADE_POINTS` table; courses graded `"P"`
  are left out).
- `judgebook.sequences`: recurrences, take-away games and coin problems.
  `fibonacci`, `pinary_count`, `extended_fibonacci`, `tile_count`,
  `count_123_sums`, `reduce_to_one`, `theater_arrangements`,
  `color_circle`, `stone_game` and `stone_game_3` (both return a `Player`
  member), `count_coin_combinations`, `min_coins`, `max_consulting_pay`.
  The moduli used are exposed as `EXTENDED_FIBONACCI_MOD`, `TILE_MOD`,
  `SUM_123_MOD` and `COLOR_CIRCLE_MOD`.
- `judgebook.lookups`: set and mapping queries.
  `card_membership`, `card_counts`, `symmetric_difference_size`,
  `count_in_set`, `never_seen_never_heard`, `present_employees`, and the
  `Pokedex` class, which finds a name from its 1-based number and a number
  from its name.
- `judgebook.arrays`: dynamic programming over lists.
  `max_increasing_sum`, `longest_increasing_subsequence`, `lis_length`,
  `wine_tasting`, `stickers`, `lcs_length`, `plum_catch`,
  `triangle_graph_cost`, `blackjack`, and the `PalindromeTable` and
  `PrefixSums` classes for repeated queries over 1-based inclusive ranges.
- `judgebook.grids`: two-dimensional problems.
  `min_repaint`, `downhill_paths`, `largest_square`,
  `rectangle_union_area`, `matrix_max`, and the `PrefixSums2D` class for
  repeated rectangle sums.

## Examples

```python
from judgebook.numbers import lcm
from judgebook.sequences import fibonacci
from judgebook.arrays import lis_length, lcs_length

lcm(4, 6)                                # 12
fibonacci(10)                            # 55
lis_length([10, 20, 10, 30, 20, 50])     # 4
lcs_length("ACAYKP", "CAPCAK")           # 4
```

Classes that answer many queries build their tables once:

```python
from judgebook.lookups import Pokedex

dex = Pokedex(["Bulbasaur", "Ivysaur", "Venusaur"])
dex.lookup("2")          # "Ivysaur"
dex.lookup("Venusaur")   # 3
```

## Errors and "no answer" results

Input a function cannot work with, such as a non-positive argument where a
positive one is required or a query position outside the stored range,
raises `ValueError`, `IndexError` or `KeyError`. Where the problem itself
has a defined "no answer" result, that value is returned instead:
`sugar_bags` and `min_coins` return `-1`, `kth_factor`,
`smallest_generator` and `blackjack` return `0`, and
`most_frequent_letter` returns `"?"` on a tie.

## What it does not do

There is no command-line program: nothing reads standard input or prints
results. Every problem is solved by calling the functions and classes above
from Python code.