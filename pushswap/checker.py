"""Replaying instructions read from input and judging the result."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .parsing import InputError, has_duplicates, parse_arguments
from .stacks import Stacks, is_sorted


class InstructionError(ValueError):
    """A line is not one of the known instructions."""


# Matching order and actions of the checker; "sb" acts on stack a.
_COMMANDS = (
    ("sa", Stacks.sa),
    ("sb", Stacks.sa),
    ("ss", Stacks.ss),
    ("rr", Stacks.rr),
    ("pa", Stacks.pa),
    ("pb", Stacks.pb),
    ("ra", Stacks.ra),
    ("rb", Stacks.rb),
    ("rra", Stacks.rra),
    ("rrb", Stacks.rrb),
    ("rrr", Stacks.rrr),
)


def apply_instruction(stacks: Stacks, line: str) -> str:
    """Apply the first instruction that ``line`` is a prefix of.

    ``line`` may carry its trailing newline. Returns the name of the
    instruction applied; raises InstructionError when none matches.
    """
    text = line.split("\0", 1)[0]
    for name, operation in _COMMANDS:
        if f"{name}\n".startswith(text):
            operation(stacks)
            return name
    raise InstructionError(f"unknown instruction: {line!r}")


def check_result(stacks: Stacks) -> str:
    """Return "OK" when ``a`` is sorted and ``b`` empty, "KO" otherwise."""
    if is_sorted(stacks.a) and not stacks.b:
        return "OK"
    return "KO"


def run_checker(values: Iterable[int], lines: Iterable[str]) -> str:
    """Apply ``lines`` to a stack holding ``values`` and judge the result."""
    stacks = Stacks(values, record=False)
    for line in lines:
        apply_instruction(stacks, line)
    return check_result(stacks)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if has_duplicates(values):
        sys.stderr.write("Error\n")
        return 1
    try:
        verdict = run_checker(values, sys.stdin)
    except InstructionError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(f"{verdict}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())