# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of moves. The moves are printed one per line.

## Moves

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the first two elements of `a`              |
| `sb`  | swap the first two elements of `b`              |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the first element becomes last   |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the last element becomes first |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

A move on a stack with too few elements changes nothing.

## Command line

Install the package, then pass the numbers as separate arguments or as one
space-separated string:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

Each move is printed on its own line to standard output. Input that is already
sorted prints nothing. Invalid input (a token that is not an optional sign
followed by digits, a value outside the 32-bit signed range, a duplicate, or a
single argument holding only spaces) prints `Error` to standard error. Running
with no arguments, or with a single empty argument, prints nothing. The exit
status is 0 in every case.

Stacks of two or three values are sorted directly; larger stacks are sorted
by moving values to `b` one at a time, each time choosing the one that costs
the fewest rotations, and then moving them back in order.

## Library

```python
from pushswap.sorter import plan_moves
from pushswap.stacks import PushSwap, is_sorted

moves = plan_moves([5, 1, 4, 2, 3])
state = PushSwap([5, 1, 4, 2, 3])
state.run(moves)
assert is_sorted(state.a) and not state.b
```

- `pushswap.stacks`: the `Move` enum (valued by the move's printed name),
  `PushSwap` with `apply(move)` and `run(moves)`, which record every move in
  `moves`, and `is_sorted(values)`.
- `pushswap.sorter`: `plan_moves(values)`, and `sort_small(state)` /
  `sort_large(state)`, which act on a `PushSwap` and return the moves applied.
- `pushswap.parsing`: `parse_arguments(args)` turns command-line style input
  into a list of integers and raises `InputError` on bad values;
  `has_valid_syntax`, `parse_number` and `split_words` are the pieces it uses.
- `pushswap.cli`: `main(argv=None)`, the `push-swap` command.

The package also carries a few general helpers:

- `pushswap.printf`: `render(fmt, *args)` formats `%c %s %p %d %i %u %x %X`
  (any other character after `%` is written as itself, so `%%` gives `%`);
  `printf(fmt, *args, stream=None)` writes the result to a stream, standard
  output by default, and returns the number of characters written.
- `pushswap.chars`: ASCII character tests (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_lower` / `to_upper`, and lenient
  integer reading with `atoi` (wrapped to 32 bits) and `atoll` (64 bits), plus
  `itoa`.
- `pushswap.strings`: `strchr`, `strrchr`, `strnstr` (returning indices or
  `None`), `strjoin`, `strlcpy`, `strlcat`, `strncmp`, `strtrim`, `substr`,
  `strmapi` and `striteri`.
- `pushswap.linkedlist`: `LinkedList` with `push_front`, `append`, `last`,
  `clear`, `iterate`, `map`, `len()` and iteration; its links are `Node`s.
- `pushswap.reader`: `LineReader(stream, buffer_size=1)` reads a text or
  binary stream in chunks and returns one line per `readline()` call, keeping
  the newline, and `None` at the end; it can also be iterated.

## Not included

There are no helpers for raw memory buffers or for writing characters and
numbers straight to file descriptors; use `printf` or the stream's own
`write` instead. There is no command that reads moves back and checks that
they sort a stack, though `PushSwap.run` with `is_sorted` does that in code.

## Tests

```
pip install -e ".[test]"
pytest
```