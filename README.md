# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations. The `push-swap` command prints the sequence of
operations that leaves stack `a` sorted in ascending order, with the
smallest number on top, and stack `b` empty.

## Installation

```
pip install .
```

## Command line

Pass the numbers either as separate arguments or as one quoted,
space-separated argument:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

Each operation is printed on its own line. Input that is already sorted
produces no output, and the exit status is 0.

The command prints `Error` to standard error and exits with status 1 when:

- no arguments are given, or the single argument is empty;
- an argument is anything other than an optional leading `+` or `-`
  followed by decimal digits (a sign on its own is read as 0);
- a number does not fit in a signed 32-bit integer;
- a number appears more than once.

Only a single argument is split on spaces; when several arguments are
given, each must be one number.

## Operations

| Name  | Effect                                                   |
|-------|----------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                         |
| `sb`  | swap the top two elements of `b`                         |
| `ss`  | `sa` and `sb` together                                   |
| `pa`  | move the top of `b` onto `a`                             |
| `pb`  | move the top of `a` onto `b`                             |
| `ra`  | rotate `a` up: the top element becomes the bottom one    |
| `rb`  | rotate `b` up                                            |
| `rr`  | `ra` and `rb` together                                   |
| `rra` | rotate `a` down: the bottom element becomes the top one  |
| `rrb` | rotate `b` down                                          |
| `rrr` | `rra` and `rrb` together                                 |

An operation on a stack with too few elements does nothing to that stack.

## Library use

```python
from pushswap.sorter import sort_operations
from pushswap.stacks import Stacks, is_sorted

ops = sort_operations([3, 1, 2])      # list of Operation members

stacks = Stacks([3, 1, 2])
for op in ops:
    stacks.apply(op)                  # an Operation or its name, e.g. "ra"
assert is_sorted(stacks.a) and not stacks.b
```

- `pushswap.stacks`: `Operation` (a string enum of the eleven names),
  `Stacks` with one method per operation and a record of the operations
  applied in `stacks.operations`, and `is_sorted`. `Stacks.apply` raises
  `ValueError` for an unknown name.
- `pushswap.sorter`: `sort_operations`, `push_swap` and `sort_three`, the
  latter two working on a `Stacks` in place.
- `pushswap.parsing`: `split_string`, `has_syntax_error` and
  `parse_numbers`, which raises `InputError` (a `ValueError`) on bad input.
- `pushswap.cli`: `main(argv=None)`, the command above; it returns the
  exit status.

## Helper modules

The package also carries small general-purpose helpers:

- `pushswap.chars`: ASCII tests and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`)
  on characters or character codes.
- `pushswap.strings`: `split_words`, `find_char`, `rfind_char`, `join`,
  `bounded_copy`, `bounded_concat`, `map_indexed`, `each_indexed`,
  `compare_prefix`, `find_within`, `trim` and `substring`.
- `pushswap.memory`: byte-buffer helpers `fill`, `zero`,
  `allocate_zeroed`, `find_byte`, `compare_bytes`, `copy_bytes` and
  `move_bytes`.
- `pushswap.linked`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()`
  and iteration.
- `pushswap.conversions`: `parse_int` (atoi-style, wrapping to 32 bits),
  `int_to_str` and `to_hex`.
- `pushswap.output`: `format_string` and `printf` for `%c %s %p %d %i %u
  %x %X %%`, and the writers `put_char`, `put_str`, `put_line` and
  `put_number`, each taking an optional `stream` (standard output by
  default).

## Running the tests

```
pip install ".[test]"
pytest
```