import pytest

from uperm.operations import (
    format_permutation_list,
    validate_index_pair,
    validate_permutation_list,
)


def test_valid_pair_and_sequence() -> None:
    assert validate_index_pair((0, 3), 4)
    assert validate_permutation_list([(0, 3), (1, 2), (2, 3)], 4, level=3)
    assert validate_permutation_list([], 4, level=0)


@pytest.mark.parametrize("pair", [(1, 1), (2, 1), (-1, 2), (0, 4), (0, 1, 2)])
def test_invalid_pair_raises(pair) -> None:
    with pytest.raises(ValueError):
        validate_index_pair(pair, 4)


def test_lower_indices_must_strictly_increase() -> None:
    with pytest.raises(ValueError):
        validate_permutation_list([(0, 1), (0, 2)], 4)
    with pytest.raises(ValueError):
        validate_permutation_list([(1, 2), (0, 3)], 4)


def test_level_mismatch_raises() -> None:
    with pytest.raises(ValueError):
        validate_permutation_list([(0, 1)], 4, level=2)


def test_format_permutation_list() -> None:
    assert format_permutation_list([(0, 1), (2, 3)]) == "P(0,1) P(2,3)"
    assert format_permutation_list(()) == "I"
