"""Combinatorial counting of unique transposition sequences.

Concepts
--------
Level
    Number of swaps ``L`` composing one sequence. A sequence over ``N``
    elements is canonical when the lower index of its swaps strictly
    increases along the sequence; every net permutation reachable with ``L``
    swaps has exactly one canonical sequence, so counting canonical sequences
    counts unique permutations without generating them.

Worked example for N = 4 (``Pij`` swaps positions i and j)::

    L0 : {0,1,2,3}
    L1 : P01 P02 P03 P12 P13 P23
    L2 : P12(P01 P02 P03) P13(P01 P02 P03) P23(P01 P02 P03 P12 P13)
    L3 : P23(P12(P01 P02 P03) P13(P01 P02 P03))

which gives 1 + 6 + 11 + 6 = 24 = 4! permutations in total.

All functions are pure and memoised; results are usable directly as
output sizes for the enumerator.
"""

from functools import lru_cache
from typing import Sequence

from uperm.models import LevelSummary


def _check_level(level: int) -> None:
    if level < 0:
        raise ValueError(f"level must be non-negative, got {level}")


@lru_cache(maxsize=None)
def num_unique_pairs(n: int) -> int:
    """Return the number of index pairs (i, j), i < j, drawable from n indices."""
    return n * (n - 1) // 2 if n > 0 else 0


@lru_cache(maxsize=None)
def num_unique_pairs_with_min(n: int, minimum: int) -> int:
    """Return the number of pairs (i, j), i < j, whose lower index i >= minimum.

    Raises:
        ValueError: If ``minimum`` is negative.
    """
    if minimum < 0:
        raise ValueError(f"minimum must be non-negative, got {minimum}")
    if minimum <= n - 2:
        return (n - minimum) * (n - minimum - 1) // 2
    return 0


@lru_cache(maxsize=None)
def num_unique_pairs_lt_max(n: int, maximum: int) -> int:
    """Return the number of pairs (i, j), i < j, whose lower index i < maximum.

    ``maximum`` beyond ``n - 1`` already covers every pair and is clamped.

    Raises:
        ValueError: If ``maximum`` is negative.
    """
    if maximum < 0:
        raise ValueError(f"maximum must be non-negative, got {maximum}")
    if n <= 0:
        return 0
    maximum = min(maximum, n - 1)
    return (2 * n * maximum - maximum * maximum - maximum) // 2


def _next_row(n: int, previous: Sequence[int]) -> list[int]:
    """Advance the ``from_min`` table by one level.

    ``row[m]`` sums ``(n - I - 1) * previous[I]`` over ``I = m+1 .. n-2``,
    built as a suffix sum from ``m = n - 3`` down to 0.
    """
    row = [0] * n
    for m in range(n - 3, -1, -1):
        row[m] = row[m + 1] + (n - m - 2) * previous[m + 1]
    return row


@lru_cache(maxsize=16)
def _from_min_row(n: int, level: int) -> tuple[int, ...]:
    """Return ``num_unique_permutations_from_min(n, level, m)`` for m = 0..n-1.

    Rows are filled bottom-up from level 0, so the cost is O(n * level)
    without any recursion.
    """
    if level > 0 and level >= n - 1:
        # level lower indices above minimum >= 0 need level <= n - 2
        return (0,) * max(n, 0)
    row: Sequence[int] = [1] * n
    for _ in range(level):
        row = _next_row(n, row)
    return tuple(row)


def _total_from_row(n: int, previous: Sequence[int]) -> int:
    return sum((n - i - 1) * previous[i] for i in range(0, n - 1))


@lru_cache(maxsize=None)
def num_unique_permutations_from_min(n: int, level: int, minimum: int) -> int:
    """Count canonical sequences of ``level`` swaps that may follow a swap
    whose lower index is ``minimum``.

    Every swap of the counted sequences has a lower index strictly greater
    than ``minimum``. For each candidate lower index ``I`` there are
    ``n - I - 1`` valid upper indices, giving the recurrence
    ``sum((n - I - 1) * from_min(n, level - 1, I) for I in minimum+1 .. n-2)``.

    Args:
        n: Number of elements.
        level: Remaining number of swaps.
        minimum: Lower index of the preceding swap.

    Returns:
        1 for ``level == 0`` (only the empty completion), 0 when no lower
        index above ``minimum`` is left, otherwise the recursive sum.

    Raises:
        ValueError: If ``level`` or ``minimum`` is negative.
    """
    _check_level(level)
    if minimum < 0:
        raise ValueError(f"minimum must be non-negative, got {minimum}")
    if level == 0:
        return 1
    if minimum > n - 2:
        return 0
    return _from_min_row(n, level)[minimum]


@lru_cache(maxsize=None)
def num_unique_permutations(n: int, level: int) -> int:
    """Count unique permutations of n elements produced by exactly ``level`` swaps.

    Args:
        n: Number of elements.
        level: Number of swaps per sequence.

    Returns:
        1 for ``level == 0`` (the identity), 0 when ``level > n - 1`` (not
        enough distinct lower indices), otherwise
        ``sum((n - I - 1) * from_min(n, level - 1, I) for I in 0 .. n-2)``.

    Raises:
        ValueError: If ``level`` is negative.
    """
    _check_level(level)
    if level == 0:
        return 1
    if level > n - 1:
        return 0
    return _total_from_row(n, _from_min_row(n, level - 1))


def level_counts(n: int) -> list[LevelSummary]:
    """Return the unique permutation count for every level 0..n-1.

    The counts sum to ``n!`` because every permutation of n elements has
    exactly one canonical sequence.
    """
    summaries = [LevelSummary(n=n, level=0, count=1)]
    row: Sequence[int] = [1] * max(n, 0)
    for level in range(1, n):
        summaries.append(LevelSummary(n=n, level=level, count=_total_from_row(n, row)))
        row = _next_row(n, row)
    return summaries
