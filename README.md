# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and this
fixed set of operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

The goal is to end with every number in `a` in ascending order, with the
smallest on top, and `b` empty, using few operations. The first number
given is the top of `a`.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Finding a solution

```
push-swap 3 1 2
```

This prints one operation per line on standard output. With no arguments,
or when the numbers are already sorted, nothing is printed.

`Error` is written to standard error and the exit status is 1 when:

- an argument does not fit in a 32-bit signed integer;
- an argument contains a character other than a digit (arguments starting
  with `-` are not checked character by character);
- two arguments have the same value;
- the only argument is empty, or is a single non-digit character;
- the first argument contains `--`.

Two numbers are sorted with at most one swap, three with at most two
operations, five by parking the two smallest on `b`, and four or six or
more by cheapest insertion from `b` back into `a`.

## Checking a solution

`push-swap-checker` takes the same numbers as arguments and reads
operations from standard input, one per line.

```
push-swap 5 4 3 2 1 | push-swap-checker 5 4 3 2 1
```

It stops reading at a blank line, at the end of the input, or as soon as
`a` is sorted and `b` is empty. It then prints `OK` if `a` is sorted and
`KO` otherwise, without a trailing newline. With no arguments, or with
arguments that are already sorted, it prints nothing.

Operations are recognised by their first characters, tried in the order
`sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`, `rrr`; the
first match wins. Because of this, every line that begins with `rr` is
taken as `rr`. A line that matches none of them, and invalid or duplicate
numbers, print `Error` to standard error with exit status 1.

## Using it from Python

```python
from pushswap.algorithm import solve
from pushswap.checker_cli import check

operations = solve([3, 1, 2])
print([str(op) for op in operations])
print(check([3, 1, 2], [f"{op}\n" for op in operations]))
```

- `pushswap.stack.Board` holds `stack_a`, `stack_b` and the list of
  `operations` made; `Board.execute` applies a `pushswap.stack.Operation`
  (or its name) and records it. `Board.move_to_top` and `Board.is_solved`
  help build your own strategies.
- `pushswap.stack.Stack` offers `swap`, `push_from`, `rotate`,
  `reverse_rotate`, plus the bookkeeping the solver uses: `reposition`,
  `assign_indices`, `find_index`, `smallest_index`, `cheapest_index` and
  others.
- `pushswap.algorithm` exposes `sort_two`, `sort_three`, `sort_five`,
  `sort_large`, `set_targets` and `calculate_costs`.
- `pushswap.validate` has the argument checks used by both commands; they
  raise `InputError` (a `ValueError`).
- `pushswap.cli.run(args)` returns the operation names as strings, and
  `pushswap.checker_cli.parse_instruction` / `apply_instructions` do the
  checker's work on any iterable of lines.

## Supporting modules

The package also carries small helpers with C-like semantics:

- `pushswap.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower`, `toupper`, and `atoi` / `atol`, which wrap out-of-range values
  to 32 or 64 bits; `itoa` raises `OverflowError` outside 32 bits.
- `pushswap.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`,
  `strlcpy`, `strlcat`, returning indices or new strings instead of
  pointers.
- `pushswap.memory`: `bzero`, `calloc`, `memset`, `memcpy`, `memmove`,
  `memchr`, `memcmp` on `bytearray` and `memoryview` buffers.
- `pushswap.linkedlist`: `LinkedList` and `Node`, with `add_front`,
  `add_back`, `last`, `clear`, `iterate` and `map`.
- `pushswap.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  writing to a text stream.
- `pushswap.linereader`: `LineReader`, which reads a text or binary stream
  line by line through a fixed-size buffer.