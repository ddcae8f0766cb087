# pushswap

The package sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed set of operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

An operation on a stack that holds too few elements does nothing.

There are two commands. `push-swap` finds a sequence of operations that sorts its input. `push-swap-checker` checks whether a given sequence sorts the input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Finding a sequence

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The first number is the top of stack `a`. You can give the numbers as separate arguments or as one string separated by spaces. The command prints the operations one per line.

It prints nothing and exits with status 0 in these cases:

- no arguments are given
- the single argument is empty
- the input is already sorted

If an argument is not an optionally signed decimal integer, is outside the 32-bit signed range, or repeats an earlier value, the command prints `Error` to standard output and exits with status 1.

## Checking a sequence

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker takes its numbers the same way as `push-swap`. It reads operations from standard input. Each line must be an operation name followed by a newline. It applies the operations in order, starting from the given numbers with `b` empty.

At the end it prints a coloured `OK` if stack `a` is sorted in ascending order and still holds every number. Otherwise it prints a coloured `KO`.

Errors are reported as follows:

- If no arguments are given, or the single argument is empty, or a word is not a sign followed by digits, the checker prints `Error` to standard output and exits with status 0. It does not read standard input in this case.
- If a number is out of the 32-bit range or is repeated, the checker prints `Error`. It then goes on with an empty stack, so a valid sequence ends in `KO`.
- If a line is not a known operation, the checker writes `Error` to standard error and exits with status 1. This includes a last line that has no newline.

## Library use

```python
from pushswap.sorter import sort_values
from pushswap.checker import run_commands

ops = sort_values([3, 2, 5, 1, 4])
print([op.value for op in ops])
print(run_commands([3, 2, 5, 1, 4], (f"{op.value}\n" for op in ops)))
```

`pushswap.sorter` provides:

- `sort_values(values)` returns the list of `Operation` members that sorts `values`.
- `Sorter(values)` holds the stacks `a` and `b` and a record of the operations. `Sorter.sort()` performs the sort and returns the operations it used.

`pushswap.checker` provides:

- `run_commands(values, lines)` applies command lines to fresh stacks. It returns `True` when `a` ends sorted and complete, and raises `InputError` at the first line that is not a command.
- `all_digits(args)` tells whether every word is an optional sign followed only by digits.

`pushswap.stack` provides:

- `Stack`, a stack of integers whose first element is the top. It supports `swap`, `rotate`, `reverse_rotate`, `push_onto`, `is_sorted`, `top` and `index_of`. An empty stack does not count as sorted.
- `Operation`, an enum of the eleven operations. Its value is the operation's name. `Operation.from_command(line)` parses a line such as `"ra\n"`. `Operation.apply(a, b)` performs the operation on two stacks.
- `parse_number(text)` and `parse_arguments(args)` convert command-line words to integers. A single argument is split on spaces. Both raise `InputError`, a subclass of `ValueError`, on bad input.