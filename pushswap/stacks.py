"""The two stacks of the puzzle, their eleven operations and position helpers."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence


class Stacks:
    """Stacks ``a`` and ``b``, tops at index 0.

    When ``record`` is true, every operation that takes effect is appended
    to ``moves`` under its instruction name.
    """

    def __init__(self, values: Iterable[int] = (), record: bool = True) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.record = record
        self.moves: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        if self.record:
            self.moves.append(name)

    @staticmethod
    def _swap(stack: deque) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks.

        Nothing happens when ``b`` holds fewer than two elements; when only
        ``a`` is too short, ``b`` is swapped but no move is recorded.
        """
        if len(self.b) < 2:
            return
        self._swap(self.b)
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a``: the first element becomes the last."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b``: the first element becomes the last."""
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks.

        Nothing happens when ``a`` is too short; when only ``b`` is too
        short, ``a`` is rotated but no move is recorded.
        """
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self._emit("rr")

    def rra(self) -> None:
        """Reverse-rotate ``a``: the last element becomes the first."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self._emit("rra")

    def rrb(self) -> None:
        """Reverse-rotate ``b``: the last element becomes the first."""
        if len(self.b) < 2:
            return
        self.b.rotate(1)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks.

        Nothing happens when ``b`` is too short; when only ``a`` is too
        short, ``b`` is reverse-rotated but no move is recorded.
        """
        if len(self.b) < 2:
            return
        self.b.rotate(1)
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self._emit("rrr")

    def move_to_top_a(self, pos: int) -> None:
        """Bring the element at ``pos`` of ``a`` to the top the short way."""
        self._move_to_top(self.a, pos, self.ra, self.rra)

    def move_to_top_b(self, pos: int) -> None:
        """Bring the element at ``pos`` of ``b`` to the top the short way."""
        self._move_to_top(self.b, pos, self.rb, self.rrb)

    @staticmethod
    def _move_to_top(stack: deque, pos: int, rotate, reverse_rotate) -> None:
        if pos == 0:
            return
        size = len(stack)
        if pos <= size // 2:
            for _ in range(pos):
                rotate()
        else:
            for _ in range(size - pos):
                reverse_rotate()


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when no element is smaller than one before it."""
    items = list(values)
    return all(earlier <= later for earlier, later in zip(items, items[1:]))


def find_max_pos(values: Iterable[int]) -> int:
    """Locate the first maximum.

    Returns -1 for an empty stack, 0 when the top is the maximum, and the
    maximum's index plus one otherwise.
    """
    items = iter(values)
    try:
        best = next(items)
    except StopIteration:
        return -1
    found = 0
    for index, value in enumerate(items, start=1):
        if best < value:
            best = value
            found = index + 1
    return found


def find_lowest_pos(values: Iterable[int]) -> int:
    """Return the index of the first minimum; raise ValueError when empty."""
    items = list(values)
    if not items:
        raise ValueError("empty stack has no lowest element")
    return min(range(len(items)), key=items.__getitem__)


def find_upper_pos(values: Iterable[int], value: int) -> int:
    """Index of the smallest element greater than ``value``, 0 if none.

    A candidate equal to -1 counts as "nothing found yet", so a later
    greater element replaces it.
    """
    best = -1
    found = 0
    for index, item in enumerate(values):
        if item > value and (best == -1 or item - value < best - value):
            best = item
            found = index
    return found


def check_side(values: Sequence[int], pos: int) -> bool:
    """Return True when ``pos`` lies past the middle of the stack."""
    return pos > len(values) // 2


def check_distance(values: Sequence[int], pos: int) -> int:
    """Number of rotations needed to bring ``pos`` to the top."""
    if not check_side(values, pos):
        return max(pos, 0)
    return max(len(values) - pos, 0)


def count_higher(values: Iterable[int], value: int) -> int:
    """Count the elements strictly greater than ``value``."""
    return sum(1 for item in values if item > value)