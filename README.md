# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of instructions. The sorter prints each instruction it applies on its
own line.

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the two top elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top element of `b` onto `a`, or of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up: the top element becomes the last |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down: the last element becomes the top |

An instruction whose stack holds too few elements does nothing. The package
installs three commands.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Sorting: `push-swap`

Pass the numbers either as separate arguments or as a single argument with
the numbers separated by spaces:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The first number given is the top of stack `a`. The instructions that sort
the stack in ascending order go to standard output. A list that is already
sorted produces no output.

Stacks of two or three numbers are sorted directly. Larger stacks are pushed
to `b` in chunks by rank (four chunks, or ten above 199 numbers), keeping
three numbers in `a`, and then brought back one at a time, always taking the
number of `b` that needs the fewest rotations.

If an argument is not an integer (an optional sign followed by digits) or
does not fit in a 32-bit signed integer, `Error` goes to standard error and
the command exits with status 1. If a number appears more than once, `Error`
goes to standard error, nothing is sorted, and the exit status is 0. With no
arguments at all the command exits with status 1 and prints nothing.

## Checking: `push-swap-checker`

The checker takes the same arguments and reads instructions from standard
input, one per line. After it has applied them all, it prints `OK` if stack
`a` is sorted and stack `b` is empty, and `KO` otherwise:

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

Each line is applied as the first instruction it is a prefix of, tried in
the order `sa`, `sb`, `ss`, `rr`, `pa`, `pb`, `ra`, `rb`, `rra`, `rrb`,
`rrr`. In the checker, `sb` swaps the top of stack `a`. A line that matches
no instruction prints `Error` to standard error and the checker exits with
status 1; so do invalid or repeated numbers.

## Benchmarking: `push-swap-complexity`

The benchmark runs a sorter executable many times on shuffled inputs and
reports the worst, mean and best instruction counts, the standard deviation,
and, if given, how many runs met a goal and how many were accepted by a
checker. The help text and the progress report are in French.

```
push-swap-complexity [-vh] [-s seed] [-o file] [-f push_swap] [--sorted] numbers iterations [goal] [checker]
```

- `numbers`: how many values each run sorts (the values 0 to numbers - 1, shuffled)
- `iterations`: how many runs to make, at least 1
- `goal`: the largest instruction count that a run may use and still count as meeting the goal
- `checker`: an executable that receives the same numbers as arguments, reads the instructions on standard input and answers `OK` or `KO`
- `-s`, `--seed`: the seed for shuffling, so that a run can be repeated; a random seed is used and shown otherwise
- `-f`, `--file`: the sorter executable to benchmark; by default `../push_swap`, then `./push_swap`
- `-o`, `--output`: a file that receives the inputs that missed the goal or were rejected by the checker; this needs a goal or a checker
- `--sorted`: pass only sorted input, for a single run
- `-v`, `--version` and `-h`, `--help`: print the version or the help

The sorter and the checker must both be executable files. The command exits
with status 1 if any run missed the goal or was rejected by the checker, and
with status 0 otherwise.

For example, to benchmark the installed sorter on 100 numbers over 50 runs
with a goal of 700 instructions and the installed checker:

```
push-swap-complexity -f "$(command -v push-swap)" 100 50 700 "$(command -v push-swap-checker)"
```

## Using the library

```python
from pushswap.sorter import push_swap
from pushswap.checker import run_checker
from pushswap.stacks import Stacks

moves = push_swap([3, 2, 1])                 # ["ra", "sa"]
verdict = run_checker([3, 2, 1], moves)      # "OK"

stacks = Stacks([5, 1, 4])
stacks.pb()
stacks.ra()
print(stacks.a, stacks.b, stacks.moves)      # deque([4, 1]) deque([5]) ['pb', 'ra']
```

`push_swap` raises `pushswap.parsing.InputError` for repeated values, and
`pushswap.parsing.parse_arguments` turns command-line strings into numbers
the same way the commands do.