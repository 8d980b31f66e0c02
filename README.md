# pushswap

Sort a list of distinct integers on two stacks, `a` and `b`, using only a
small set of stack operations, and record the sequence of operations that
does it.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Operations

`pushswap.operations.Machine` holds the two stacks and has one method per
operation:

| Method | Effect                                         |
|--------|------------------------------------------------|
| `sa`   | swap the two top elements of `a`               |
| `sb`   | swap the two top elements of `b`               |
| `ss`   | `sa` and `sb` together                         |
| `pa`   | move the top of `b` onto `a`                   |
| `pb`   | move the top of `a` onto `b`                   |
| `ra`   | rotate `a` up (top goes to the bottom)         |
| `rb`   | rotate `b` up                                  |
| `rr`   | `ra` and `rb` together                         |
| `rra`  | rotate `a` down (bottom goes to the top)       |
| `rrb`  | rotate `b` down                                |
| `rrr`  | `rra` and `rrb` together                       |

Each operation performed is appended to `machine.operations` and written,
one per line, to the machine's `output` stream (standard output when none is
given). `pa` and `pb` do nothing, and record nothing, when the stack they take
from is empty.

## Example

```python
import io

from pushswap.operations import Machine
from pushswap.parser import parse_arguments
from pushswap.simple import simple
from pushswap.stack import Stack

a = parse_arguments(["3 1 2"])

out = io.StringIO()
machine = Machine(a, Stack(), out)
simple(machine)

print(out.getvalue(), end="")   # the operations, one per line
print(machine.operations)       # the same, as a list
print(a.values())               # [1, 2, 3]
```

## Stacks

`pushswap.stack.Stack` is built from an iterable of integers, top first.
Iterating over it yields `Node` objects, each with a `value` and an `index`
(its rank, `-1` until `create_indexes()` is called). Useful members:
`values()`, `indexes()`, `is_sorted()`, `create_indexes()`, `top`, `last()`,
`push_back(value)`, `has_duplicate(value)` and `clear()`. A stack also carries
a `mode`, one of the `Mode` values `NONE`, `SIMPLE`, `MEDIUM`, `COMPLEX` and
`ADAPTIVE`.

## Parsing

`pushswap.parser.parse_arguments(args, stack=None)` reads the arguments as
given on a command line and returns the filled stack (a new one if none is
passed). Each argument may hold several space-separated tokens. A number is
an optional `+` or `-` followed by digits and must fit in a 32-bit signed
integer. Duplicates, empty arguments, out-of-range numbers and unknown tokens
raise `ParseError` (a `ValueError`); in most of these cases the stack is also
cleared.

One flag may appear among the numbers: `--simple`, `--medium`, `--complex`
or `--adaptive`. It sets the stack's `mode`. Once a flag has been seen, a
second flag or any other non-number token is an error.

## Strategies

- `pushswap.simple.simple(machine)` sorts 2 to 5 elements with the fixed
  routines in `pushswap.small` (`sort_2`, `sort_3`, `sort_4_5`), and larger
  inputs by ranking them and repeatedly moving the lowest-ranked element to
  `b` before bringing everything back (`simple_alg`). An already sorted stack
  of up to 5 elements is left alone.
- `pushswap.medium.medium_alg(machine)` splits the ranks into chunks
  (5 chunks up to 100 elements, 11 above), pushes them to `b` chunk by chunk,
  then pulls the highest rank back to `a` each time (`push_back_to_a`).
  Stacks of 5 or fewer elements are left untouched.
- `pushswap.complex.complex_alg(machine)` is an LSD radix sort on the ranks,
  one pass per bit (`get_max_bits`).

`medium_alg` and `complex_alg` work on ranks: call `a.create_indexes()`
before them.

## Measuring disorder

`pushswap.disorder.compute_disorder(stack)` returns the share of element pairs
that are out of order, from `0.0` (sorted) to `1.0` (fully reversed).
`count_disorder_pairs(values)` does the same for a plain sequence.

## What it does not do

- There is no command-line program; the package is a library only.
- The `mode` set by a flag is only stored on the stack. Nothing chooses a
  strategy from it, and there is no separate adaptive strategy: `Mode.ADAPTIVE`
  is accepted but has no behaviour of its own.
- There is no checker that reads a list of operations and verifies it.