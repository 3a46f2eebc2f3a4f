"""Apply swap sequences to concrete collections.

The input collection is never mutated: swaps are performed on a copy that is
returned with the same type as the input.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

from uperm.models import IndexPermutation, IndexPermutationList

T = TypeVar("T", bound=Sequence)


def _check_bounds(sequence: Sequence[IndexPermutation], size: int) -> None:
    for first, second in sequence:
        # negative indices would silently wrap around
        if not (0 <= first < size and 0 <= second < size):
            raise IndexError(f"Index pair ({first}, {second}) out of range for length {size}")


def _working_copy(collection: Sequence) -> list:
    if isinstance(collection, (tuple, str)):
        return list(collection)
    return collection.copy()


def _restore_type(collection: T, working) -> T:
    if isinstance(collection, str):
        return "".join(working)
    if isinstance(collection, tuple):
        # namedtuples rebuild through _make, other subclasses as plain tuples
        if hasattr(collection, "_make"):
            return collection._make(working)
        return tuple(working)
    return working


def _swap(working, first: int, second: int) -> None:
    working[first], working[second] = working[second], working[first]


def execute_permutation(sequence: Sequence[IndexPermutation], collection: T) -> T:
    """Return a copy of ``collection`` with the swaps of ``sequence`` applied.

    Swaps are applied in sequence order (position 0 first). A self-pair
    ``(i, i)`` leaves the collection unchanged.

    Args:
        sequence: Swaps as ``(first, second)`` index pairs.
        collection: List, tuple, string or any mutable sequence with ``copy()``.

    Returns:
        New collection of the same type as the input.

    Raises:
        IndexError: If any index lies outside the collection. All pairs are
            checked before the first swap.
    """
    sequence = tuple(sequence)
    _check_bounds(sequence, len(collection))
    working = _working_copy(collection)
    for first, second in sequence:
        _swap(working, first, second)
    return _restore_type(collection, working)


def execute_all_permutations(
    sequences: Iterable[IndexPermutationList],
    collection: T,
) -> List[T]:
    """Apply many sequences to the same collection, reusing shared prefixes.

    Consecutive sequences from the enumerator often share their leading
    swaps, e.g. ``P(0,1) P(1,2)`` and ``P(0,1) P(1,3)``. The intermediate
    state after each prefix swap is kept on a stack, so only the swaps past
    the common prefix with the previous sequence are executed.

    Returns:
        One result per sequence, identical to calling ``execute_permutation``
        for each of them.

    Raises:
        IndexError: If any index of any sequence lies outside the collection.
    """
    size = len(collection)
    base = _working_copy(collection)
    # states[k] is the collection after the first k swaps of `previous`
    states: list[list] = [base]
    previous: IndexPermutationList = ()
    results: List[T] = []

    for sequence in sequences:
        sequence = tuple(sequence)
        _check_bounds(sequence, size)

        common = 0
        limit = min(len(previous), len(sequence))
        while common < limit and previous[common] == sequence[common]:
            common += 1
        del states[common + 1 :]

        for first, second in sequence[common:]:
            nxt = states[-1].copy()
            _swap(nxt, first, second)
            states.append(nxt)

        results.append(_restore_type(collection, states[-1].copy()))
        previous = sequence
    return results
