"""Unique transposition sequences: counting, enumeration and execution.

Exports the counting functions, the enumerator and the executor.
"""

from uperm.counting import (  # noqa: F401
    level_counts,
    num_unique_pairs,
    num_unique_pairs_lt_max,
    num_unique_pairs_with_min,
    num_unique_permutations,
    num_unique_permutations_from_min,
)
from uperm.enumeration import (  # noqa: F401
    branch_slices,
    enumerate_branch,
    enumerate_unique_permutations,
    iter_unique_permutations,
)
from uperm.execution import execute_all_permutations, execute_permutation  # noqa: F401
from uperm.models import (  # noqa: F401
    IDENTITY,
    IndexPermutation,
    IndexPermutationList,
    LevelSummary,
)

__all__ = [
    # Models
    "IDENTITY",
    "IndexPermutation",
    "IndexPermutationList",
    "LevelSummary",
    # Counting
    "num_unique_pairs",
    "num_unique_pairs_with_min",
    "num_unique_pairs_lt_max",
    "num_unique_permutations_from_min",
    "num_unique_permutations",
    "level_counts",
    # Enumeration
    "iter_unique_permutations",
    "enumerate_unique_permutations",
    "branch_slices",
    "enumerate_branch",
    # Execution
    "execute_permutation",
    "execute_all_permutations",
]
