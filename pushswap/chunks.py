"""Splitting the values into rank-based chunks pushed to ``b`` in turn."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

SMALL_CHUNKS = 4
BIG_CHUNKS = 10


def sorted_values(values: Iterable[int]) -> List[int]:
    """Return the values in ascending order."""
    return sorted(values)


def _bucket(index: int, size: int, groups: int) -> int:
    """Chunk number (1-based) of the element of rank ``index``."""
    step = size // groups
    for chunk in range(1, groups):
        if index <= step * chunk:
            return chunk
    return groups


def _chunk_sizes(size: int, groups: int) -> List[int]:
    counts = Counter(_bucket(index, size, groups) for index in range(size))
    return [counts[chunk] for chunk in range(1, groups + 1)]


def chunk_of(ordered: Sequence[int], value: int, size: int) -> int:
    """Chunk (1 to 4) that ``value`` belongs to, by its rank in ``ordered``.

    Raises ValueError when ``value`` is not in ``ordered``.
    """
    return _bucket(list(ordered).index(value), size, SMALL_CHUNKS)


def chunk_sizes(size: int) -> List[int]:
    """Number of elements in each of the four chunks of a stack of ``size``."""
    return _chunk_sizes(size, SMALL_CHUNKS)


def chunk_of_big(ordered: Sequence[int], value: int, size: int) -> int:
    """Chunk (1 to 10) that ``value`` belongs to, by its rank in ``ordered``.

    Raises ValueError when ``value`` is not in ``ordered``.
    """
    return _bucket(list(ordered).index(value), size, BIG_CHUNKS)


def chunk_sizes_big(size: int) -> List[int]:
    """Number of elements in each of the ten chunks of a stack of ``size``."""
    return _chunk_sizes(size, BIG_CHUNKS)