# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
operations, printing the operations used. A checker reads a list of
operations and says whether they sort the numbers.

## Operations

| name                | effect                                      |
|---------------------|---------------------------------------------|
| `sa`, `sb`, `ss`    | swap the top two elements of a, b, or both  |
| `pa`, `pb`          | push the top of b onto a, or of a onto b    |
| `ra`, `rb`, `rr`    | rotate a, b, or both (top goes to bottom)   |
| `rra`, `rrb`, `rrr` | reverse-rotate a, b, or both                |

## Installation

```
pip install .
```

## Command line

Print a list of operations that sorts the numbers, one per line:

```
push-swap 3 1 2 5 4
```

Each argument must be made only of digits and minus signs, must not exceed
the largest 32-bit signed integer, and must not repeat another; otherwise
`Error` is printed. Input that is already sorted prints nothing and exits
with status 1. With no arguments nothing happens.

Check a list of operations, read from standard input one per line:

```
push-swap 3 1 2 5 4 | push-swap-checker 3 1 2 5 4
```

The checker prints `OK` if stack `a` ends up sorted, `KO` if it does not,
and `Error` (exit status 1) for an unknown instruction. Empty lines are
ignored.

## Library

```python
from pushswap.solver import solve
from pushswap.checker import run_instructions

moves = solve([3, 1, 2, 5, 4])
piles = run_instructions([3, 1, 2, 5, 4], [op.value for op in moves])
assert piles.a.is_sorted()
```

The modules:

- `pushswap.solver` — `solve(values)` returns a list of `Operation`s that
  sorts the values with the smallest on top; `main(argv=None)` is the
  `push-swap` command. The steps (`unsorted_values`, `clear_pile_a`,
  `estimate_rotate`, `execute_move`, `value_searched_in_a`, `path_to`) and
  the `Move` record are public too.
- `pushswap.checker` — `run_instructions(values, lines)` applies named
  instructions and returns the `Piles`; `check_authorized(line)` tells
  whether a line names an operation; an unknown one raises `CheckerError`.
  `main(argv=None)` is the `push-swap-checker` command.
- `pushswap.operations` — the `Operation` enum, `Piles` (stacks `a` and
  `b`, with `apply(op)`), `parse_operation(line)`, and `best_rotation` /
  `fast_rotate` for bringing a value to the top of a stack the short way.
- `pushswap.stack` — `Stack`, the pile of integers with swap, rotate,
  reverse-rotate, push/pop at either end, `is_sorted`, `has_duplicate`,
  `min_value`, `max_value`, `remove_value`, `copy` and `show`.
- `pushswap.parse` — `parse_args(args)` turns arguments into integers or
  raises `ParseError`; `parse_long` and `is_number` are its helpers.
- `pushswap.printf` — `format_string(fmt, *args)` and `printf(fmt, *args)`
  for the conversions `d i u x X c s p %` with `-`, `0`, width, `*` and
  precision; `FormatOptions` and the `format_*` functions render a single
  directive.
- `pushswap.lines` — `LineReader`, which reads a text stream line by line
  through a fixed-size buffer.
- `pushswap.chars`, `pushswap.strings`, `pushswap.output`,
  `pushswap.linkedlist` — small character, string, output and singly
  linked list helpers with C-library semantics (`atoi`, `itoa`,
  `strncmp`, `strlcpy`, `split`, `putnbr`, `LinkedList`, and so on).

## Tests

```
pip install .[test]
pytest
```