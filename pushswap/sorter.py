"""Sorting stack ``a`` with the push-swap instructions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import islice
from typing import Callable, Iterable, List, Optional, Sequence

from .chunks import (
    chunk_of,
    chunk_of_big,
    chunk_sizes,
    chunk_sizes_big,
    sorted_values,
)
from .parsing import InputError, has_duplicates, parse_arguments
from .stacks import (
    Stacks,
    check_distance,
    check_side,
    count_higher,
    find_lowest_pos,
    find_max_pos,
    find_upper_pos,
    is_sorted,
)

SMALL_LIMIT = 4
BIG_LIMIT = 199
KEEP_IN_A = 3


@dataclass(frozen=True)
class Cost:
    """Positions in ``a`` and ``b`` of the cheapest element to move back."""

    pos_in_a: int
    pos_in_b: int


def find_lowest_cost(stacks: Stacks) -> Cost:
    """Pick the element of ``b`` that needs the fewest rotations to insert.

    The insertion point in ``a`` is the smallest element greater than the
    candidate. Ties keep the element nearest the top of ``b``.
    """
    a, b = stacks.a, stacks.b
    if not b:
        raise ValueError("stack b is empty")
    best_a = find_upper_pos(a, b[0])
    best_b = 0
    for pos_b, value in enumerate(islice(b, 1, None), start=1):
        pos_a = find_upper_pos(a, value)
        candidate = check_distance(a, pos_a) + check_distance(b, pos_b)
        current = check_distance(a, best_a) + check_distance(b, best_b)
        if candidate < current:
            best_a, best_b = pos_a, pos_b
    return Cost(best_a, best_b)


def rotate_both(stacks: Stacks, cost: Cost) -> Cost:
    """Rotate both stacks together while both targets lie on the same side.

    Returns the positions left to cover afterwards.
    """
    pos_a, pos_b = cost.pos_in_a, cost.pos_in_b
    side_a = check_side(stacks.a, pos_a)
    side_b = check_side(stacks.b, pos_b)
    if side_a != side_b:
        return cost
    while 0 < pos_a < len(stacks.a) and 0 < pos_b < len(stacks.b):
        if side_a:
            stacks.rrr()
            pos_a += 1
            pos_b += 1
        else:
            stacks.rr()
            pos_a -= 1
            pos_b -= 1
    return Cost(pos_a, pos_b)


def sort_two(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two elements."""
    if not is_sorted(stacks.a):
        stacks.ra()


def sort_three(stacks: Stacks) -> None:
    """Sort the three top elements of ``a`` in at most two moves."""
    a = stacks.a
    top = find_max_pos(a)
    if is_sorted(a):
        return
    if len(a) < 3:
        raise ValueError("sort_three needs at least three elements")
    first, second, third = a[0], a[1], a[2]
    if top == 0 and second < third:
        stacks.ra()
    elif top == 0 and second > third:
        stacks.ra()
        stacks.sa()
    elif top == 2 and first < third:
        stacks.rra()
        stacks.sa()
    elif top == 2 and first > third:
        stacks.rra()
    elif top == 3 and first > second:
        stacks.sa()


def sort_five(stacks: Stacks) -> None:
    """Sort a small stack by pushing all but three to ``b`` and back."""
    while len(stacks.a) != KEEP_IN_A:
        stacks.pb()
    sort_three(stacks)
    while stacks.b:
        stacks.move_to_top_a(find_upper_pos(stacks.a, stacks.b[0]))
        stacks.pa()
    stacks.move_to_top_a(find_lowest_pos(stacks.a))


def _push_chunks(
    stacks: Stacks,
    chunk: Callable[[Sequence[int], int, int], int],
    sizes: Callable[[int], List[int]],
) -> None:
    """Push ``a`` to ``b`` chunk by chunk, keeping three elements in ``a``."""
    a = stacks.a
    ordered = sorted_values(a)
    total = len(ordered)
    for group, pending in enumerate(sizes(total), start=1):
        while pending and len(a) != KEEP_IN_A:
            if count_higher(a, a[0]) == 0:
                stacks.ra()
            if chunk(ordered, a[0], total) == group:
                stacks.pb()
                pending -= 1
            else:
                stacks.ra()


def _insert_back(stacks: Stacks) -> None:
    """Sort the three left in ``a``, then bring ``b`` back at the cheapest cost."""
    sort_three(stacks)
    while stacks.b:
        cost = rotate_both(stacks, find_lowest_cost(stacks))
        stacks.move_to_top_a(cost.pos_in_a)
        stacks.move_to_top_b(cost.pos_in_b)
        stacks.pa()
    if not is_sorted(stacks.a):
        stacks.move_to_top_a(find_lowest_pos(stacks.a))


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a``, choosing the strategy by its size."""
    size = len(stacks.a)
    if size > BIG_LIMIT:
        _push_chunks(stacks, chunk_of_big, chunk_sizes_big)
        _insert_back(stacks)
    elif size < SMALL_LIMIT:
        if size == 2:
            sort_two(stacks)
        elif size == 3:
            sort_three(stacks)
    else:
        _push_chunks(stacks, chunk_of, chunk_sizes)
        _insert_back(stacks)


def push_swap(values: Iterable[int]) -> List[str]:
    """Return the instructions that sort ``values``; nothing when already sorted."""
    items = list(values)
    if has_duplicates(items):
        raise InputError("duplicate values")
    stacks = Stacks(items)
    if not is_sorted(stacks.a):
        sort_stacks(stacks)
    return stacks.moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the instructions that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if has_duplicates(values):
        # Duplicates are reported, but the exit status stays successful.
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{move}\n" for move in push_swap(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())