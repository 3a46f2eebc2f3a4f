"""Depth-first enumeration of canonical swap sequences.

Each sequence of ``level`` swaps is built position by position. Once a swap
with lower index ``I`` is placed at some depth, every deeper swap must have a
lower index of at least ``I + 1``. Two swaps that share no index commute, so
forcing the lower indices to increase visits each set of swaps through a
single ordering and no two produced sequences realise the same permutation.

Traversal order (lower index outer, upper index inner, depth 0 outermost)
fixes the order of the results and is relied upon by ``branch_slices``.
"""

from __future__ import annotations

import logging
from typing import Iterator

from uperm.counting import num_unique_permutations, num_unique_permutations_from_min
from uperm.models import IDENTITY, IndexPermutation, IndexPermutationList

logger = logging.getLogger("uperm.enumeration")


def _check_request(n: int, level: int) -> None:
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    if level < 0:
        raise ValueError(f"level must be non-negative, got {level}")


def _inner_permutation_loop(
    n: int,
    level: int,
    depth: int,
    minimum: int,
    partial: list[IndexPermutation],
) -> Iterator[IndexPermutationList]:
    """Yield every completion of ``partial`` from position ``depth`` onwards.

    Args:
        n: Number of elements.
        level: Total number of swaps per sequence.
        depth: Position of ``partial`` being assigned.
        minimum: Smallest lower index allowed at this depth.
        partial: Shared buffer of length ``level``, overwritten in place.
    """
    if depth > level - 1:
        yield tuple(partial)
        return

    # leave enough lower indices for the remaining level - depth - 1 swaps
    upper = min(n - (level - depth), n - 1)
    for i in range(minimum, upper):
        for j in range(i + 1, n):
            partial[depth] = (i, j)
            yield from _inner_permutation_loop(n, level, depth + 1, i + 1, partial)


def iter_unique_permutations(n: int, level: int) -> Iterator[IndexPermutationList]:
    """Lazily generate all canonical sequences of ``level`` swaps over n elements.

    Yields:
        Tuples of ``(first, second)`` pairs in traversal order. For
        ``level == 0`` a single empty tuple (the identity) is produced; for
        ``level > n - 1`` nothing is produced.

    Raises:
        ValueError: If ``n`` is not positive or ``level`` is negative.
    """
    _check_request(n, level)
    if level == 0:
        yield IDENTITY
        return
    if level > n - 1:
        return
    partial: list[IndexPermutation] = [(0, 0)] * level
    yield from _inner_permutation_loop(n, level, 0, 0, partial)


def enumerate_unique_permutations(n: int, level: int) -> list[IndexPermutationList]:
    """Return all canonical sequences of ``level`` swaps over n elements.

    The output list is allocated once with the size predicted by
    ``num_unique_permutations`` and filled by a single cursor.

    Raises:
        ValueError: If ``n`` is not positive or ``level`` is negative.
        RuntimeError: If the traversal disagrees with the predicted count.
    """
    _check_request(n, level)
    total = num_unique_permutations(n, level)
    out: list[IndexPermutationList] = [IDENTITY] * total
    cursor = 0
    for sequence in iter_unique_permutations(n, level):
        if cursor >= total:
            raise RuntimeError(f"Enumeration overflow for n={n} level={level}: expected {total}")
        out[cursor] = sequence
        cursor += 1
    if cursor != total:
        raise RuntimeError(
            f"Enumeration produced {cursor} sequences for n={n} level={level}, expected {total}"
        )
    logger.debug("Enumerated %d sequences for n=%d level=%d", total, n, level)
    return out


def branch_slices(n: int, level: int) -> dict[int, slice]:
    """Map each first lower index to its sub-range of the enumeration output.

    The ranges are disjoint, contiguous and cover the whole output, so each
    branch can be produced independently with ``enumerate_branch`` and
    written into its own slice.

    Returns:
        ``{first: slice(start, stop)}``; empty for ``level == 0`` and for
        ``level > n - 1``.
    """
    _check_request(n, level)
    slices: dict[int, slice] = {}
    if level == 0 or level > n - 1:
        return slices
    offset = 0
    for i in range(0, n - level):
        size = (n - i - 1) * num_unique_permutations_from_min(n, level - 1, i)
        slices[i] = slice(offset, offset + size)
        offset += size
    return slices


def enumerate_branch(n: int, level: int, first: int) -> list[IndexPermutationList]:
    """Return the canonical sequences whose first swap has lower index ``first``.

    Raises:
        ValueError: If the request is invalid, ``level`` is 0 (the identity
            has no first swap) or ``first`` is negative.
    """
    _check_request(n, level)
    if level == 0:
        raise ValueError("The identity sequence has no first swap")
    if first < 0:
        raise ValueError(f"first must be non-negative, got {first}")
    if first >= n - level:
        return []

    partial: list[IndexPermutation] = [(0, 0)] * level
    out: list[IndexPermutationList] = []
    for j in range(first + 1, n):
        partial[0] = (first, j)
        out.extend(_inner_permutation_loop(n, level, 1, first + 1, partial))
    return out
