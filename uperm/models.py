"""Core data structures for unique transposition sequences.

This module defines:
    IndexPermutation     -- alias for a single swap (first, second).
    IndexPermutationList -- alias for an ordered sequence of swaps.
    LevelSummary         -- immutable row of the per-level count report.
"""

from dataclasses import dataclass

IndexPermutation = tuple[int, int]  # (first, second), first < second
IndexPermutationList = tuple[IndexPermutation, ...]  # applied left to right

# L = 0 is represented by the explicit empty sequence.
IDENTITY: IndexPermutationList = ()


@dataclass(frozen=True)
class LevelSummary:
    """Number of unique permutations reachable with exactly ``level`` swaps.

    Attributes:
        n: Number of elements being permuted (N).
        level: Number of transpositions per sequence (L).
        count: Number of unique net permutations for (N, L).
    """

    n: int
    level: int
    count: int
