# judgebox

Solutions to classic online-judge problems, written as plain Python
functions that take ordinary Python data and return ordinary results.
The package has no third-party dependencies.

## Installation

    pip install judgebox

To run the tests:

    pip install "judgebox[test]"
    pytest

## Modules

- `judgebox.graphs`: problems on small dense graphs.
  - `best_broker(contacts)`: the broker that spreads a rumour to everyone
    fastest, as `(broker, minutes)`, or `None` when nobody reaches everyone.
  - `arbitrage_possible(currencies, rates)`: whether some cycle of exchanges
    turns one unit into more than one.
  - `frog_distance(stones)`: the smallest possible longest jump from the
    first stone to the second.
  - `subway_minutes(home, school, lines)`: minutes from home to school,
    walking at 10 km/h or riding subway lines at 40 km/h.
- `judgebox.basics`: short exercises.
  - `cards_needed`, `monthly_average`, `erosion_year`, `rc_voltages`,
    `balanced_game`, `tex_quotes`, `flower_arrangement`, `wooden_sticks`,
    `worst_excuses`.
- `judgebox.puzzles`: search and dynamic programming.
  - `balloon_winner`, `tetravex_possible`, `game_scores`, `max_submatrix`,
    `palindrome_bases`, `knapsack`, `max_times_power`.
- `judgebox.contests`: contest problems.
  - `SumTree(size)`: point updates with `add(index, delta)` and inclusive
    range sums with `query(left, right)`.
  - `run_commands(values, commands)`: applies `("S", i, v)` set commands and
    collects the results of `("M", a, b)` sum commands, positions from 1.
  - `wildcard_count`, `maze_turns`, `minesweeper_ok`, `common_divisor`,
    `walkovers`.
- `judgebox.warmup`: `max_problems`, `stock_matches`, `convex_hull`,
  `bst_orderings`, `lis_length`, `polygon_area`.
- `judgebox.matrix`: an immutable `Matrix` of at most 8 by 8 with `+`, `-`,
  `*`, `minor(row, col)`, `determinant()`, `shape` and `is_square()`.
  Mismatched shapes raise `ValueError`.
- `judgebox.config`: `read_configuration(path)` reads the known limits
  (such as `Max_data_number` or `Max_cache_size`) from an XML file whose
  root element is `Configuration`. It returns `(name, value)` pairs in
  document order. The value is the first run of digits in each setting's
  `Value` child. Errors are raised as `InvalidFileError`, `InvalidRootError`
  or `MissingValueError`, all subclasses of `ConfigurationError`.

Invalid input raises `ValueError`, `IndexError` or `KeyError`. The functions
do not return status codes.

## Example

    from judgebox.graphs import frog_distance
    from judgebox.matrix import Matrix

    frog_distance([(17, 4), (19, 4), (18, 5)])
    Matrix([[1, 2], [3, 4]]).determinant()   # -2

## Command line

This command prints the limits stored in an XML configuration file, one
`name: value` line per setting:

    judgebox-config settings.xml

It exits with status 1 in these cases:

- the argument count is wrong;
- the file cannot be parsed (it prints `error: Invalid Configuration File ...`);
- the root element is not `Configuration` (it prints `Invalid Configuration!`).

If a setting has no numeric value, it prints the settings read before it,
then `Fail to retrieve the configuration!`.

## What it does not do

The problem solvers are library functions only. There are no commands that
read judge-style input from standard input or print judge-style output. The
caller parses the input and formats the results.