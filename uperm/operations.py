"""Sequence utilities: validation and text rendering of swap sequences.

Concepts
--------
Canonical sequence
    A tuple of ``(first, second)`` index pairs with ``first < second`` for
    each pair and strictly increasing ``first`` along the sequence. The
    enumerator only produces canonical sequences; functions here verify the
    invariant for sequences coming from elsewhere.
"""

from typing import Iterable, Optional

from uperm.models import IndexPermutation


def validate_index_pair(pair: IndexPermutation, n: int) -> bool:
    """Validate a single swap against a collection of n elements.

    Raises:
        ValueError: If the pair is not two integers with
            ``0 <= first < second < n``.
    """
    if len(pair) != 2:
        raise ValueError(f"Index pair must have two elements: {pair!r}")
    first, second = pair
    if not (0 <= first < second < n):
        raise ValueError(f"Invalid index pair for n={n}: ({first}, {second})")
    return True


def validate_permutation_list(
    sequence: Iterable[IndexPermutation],
    n: int,
    level: Optional[int] = None,
) -> bool:
    """Validate that a sequence is canonical for n elements.

    Args:
        sequence: Swaps in application order.
        n: Number of elements of the permuted collection.
        level: Expected number of swaps, or None to accept any length.

    Returns:
        True if the sequence is valid, so the call can sit inside assertions.

    Raises:
        ValueError: If a pair is invalid, lower indices do not strictly
            increase, or the length differs from ``level``.
    """
    previous_first = -1
    count = 0
    for pair in sequence:
        validate_index_pair(pair, n)
        if pair[0] <= previous_first:
            raise ValueError(
                "Lower indices must strictly increase: " f"{pair[0]} after {previous_first}"
            )
        previous_first = pair[0]
        count += 1
    if level is not None and count != level:
        raise ValueError(f"Expected {level} swaps, got {count}")
    return True


def format_permutation_list(sequence: Iterable[IndexPermutation]) -> str:
    """Render a sequence as ``"P(0,1) P(2,3)"``; the identity renders as ``"I"``."""
    text = " ".join(f"P({first},{second})" for first, second in sequence)
    return text or "I"
