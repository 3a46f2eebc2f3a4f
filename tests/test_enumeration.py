from itertools import permutations

import pytest

from uperm.counting import num_unique_permutations
from uperm.enumeration import (
    branch_slices,
    enumerate_branch,
    enumerate_unique_permutations,
    iter_unique_permutations,
)
from uperm.execution import execute_permutation
from uperm.operations import validate_permutation_list


@pytest.mark.parametrize("n", range(1, 8))
def test_length_matches_count(n: int) -> None:
    for level in range(n + 2):
        assert len(enumerate_unique_permutations(n, level)) == num_unique_permutations(n, level)


def test_four_elements_single_swaps(reference4: list[int]) -> None:
    sequences = enumerate_unique_permutations(4, 1)
    assert sequences == [((0, 1),), ((0, 2),), ((0, 3),), ((1, 2),), ((1, 3),), ((2, 3),)]
    results = [execute_permutation(s, reference4) for s in sequences]
    assert len({tuple(r) for r in results}) == 6 == num_unique_permutations(4, 1)


def test_traversal_order_lower_index_outer_upper_inner() -> None:
    sequences = enumerate_unique_permutations(4, 2)
    assert sequences[:4] == [
        ((0, 1), (1, 2)),
        ((0, 1), (1, 3)),
        ((0, 1), (2, 3)),
        ((0, 2), (1, 2)),
    ]
    assert sequences[-1] == ((1, 3), (2, 3))


def test_four_elements_three_swaps() -> None:
    assert enumerate_unique_permutations(4, 3) == [
        ((0, 1), (1, 2), (2, 3)),
        ((0, 1), (1, 3), (2, 3)),
        ((0, 2), (1, 2), (2, 3)),
        ((0, 2), (1, 3), (2, 3)),
        ((0, 3), (1, 2), (2, 3)),
        ((0, 3), (1, 3), (2, 3)),
    ]


@pytest.mark.parametrize("n", range(1, 7))
def test_sequences_are_canonical(n: int) -> None:
    for level in range(n):
        for sequence in enumerate_unique_permutations(n, level):
            assert validate_permutation_list(sequence, n, level=level)


@pytest.mark.parametrize("n, level", [(4, 2), (5, 2), (5, 3), (6, 3), (6, 5)])
def test_executed_results_are_pairwise_distinct(n: int, level: int) -> None:
    reference = list(range(n))
    results = [
        tuple(execute_permutation(s, reference)) for s in enumerate_unique_permutations(n, level)
    ]
    assert len(set(results)) == len(results)


@pytest.mark.parametrize("n", range(1, 7))
def test_all_levels_cover_every_permutation_once(n: int) -> None:
    reference = tuple(range(n))
    seen: list[tuple] = []
    for level in range(n):
        seen.extend(
            execute_permutation(s, reference) for s in enumerate_unique_permutations(n, level)
        )
    assert len(seen) == len(set(seen))
    assert set(seen) == set(permutations(reference))


def test_level_zero_is_identity(reference4: list[int]) -> None:
    sequences = enumerate_unique_permutations(4, 0)
    assert sequences == [()]
    assert execute_permutation(sequences[0], reference4) == reference4
    assert enumerate_unique_permutations(1, 0) == [()]


def test_level_above_n_minus_one_is_empty() -> None:
    assert enumerate_unique_permutations(4, 4) == []
    assert enumerate_unique_permutations(1, 1) == []
    assert list(iter_unique_permutations(3, 5)) == []


def test_iterator_matches_list() -> None:
    for level in range(5):
        assert list(iter_unique_permutations(5, level)) == enumerate_unique_permutations(5, level)


def test_enumeration_is_deterministic() -> None:
    assert enumerate_unique_permutations(6, 3) == enumerate_unique_permutations(6, 3)


@pytest.mark.parametrize("n, level", [(4, 1), (4, 2), (5, 3), (6, 2), (6, 5)])
def test_branch_slices_partition_output(n: int, level: int) -> None:
    full = enumerate_unique_permutations(n, level)
    slices = branch_slices(n, level)
    assert list(slices) == list(range(n - level))
    offset = 0
    for first, sl in slices.items():
        assert sl.start == offset
        branch = enumerate_branch(n, level, first)
        assert full[sl] == branch
        assert all(sequence[0][0] == first for sequence in branch)
        offset = sl.stop
    assert offset == len(full)


def test_branch_edge_cases() -> None:
    assert branch_slices(4, 0) == {}
    assert branch_slices(4, 5) == {}
    assert enumerate_branch(4, 3, 1) == []
    with pytest.raises(ValueError):
        enumerate_branch(4, 0, 0)
    with pytest.raises(ValueError):
        enumerate_branch(4, 1, -1)


@pytest.mark.parametrize("n, level", [(0, 0), (-1, 1), (4, -1)])
def test_invalid_requests_are_rejected(n: int, level: int) -> None:
    with pytest.raises(ValueError):
        enumerate_unique_permutations(n, level)
    with pytest.raises(ValueError):
        list(iter_unique_permutations(n, level))
