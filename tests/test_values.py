import numpy as np
import pytest

from latexprint import Matrix, RowVector, transpose
from latexprint.core.values import is_matrix_like


def test_row_vector_freezes_items() -> None:
    row = RowVector([1, 2, 3])
    assert row.items == (1, 2, 3)
    assert len(row) == 3
    assert list(row) == [1, 2, 3]
    assert row == RowVector((1, 2, 3))


def test_matrix_shape() -> None:
    assert Matrix([[1, 2, 3], [4, 5, 6]]).shape == (2, 3)
    assert Matrix([]).shape == (0, 0)


def test_transpose_round_trip() -> None:
    row = transpose((1, 2))
    assert row == RowVector([1, 2])
    assert transpose(row) == [1, 2]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([[1, 2], [3, 4]], True),
        (((1,), (2,)), True),
        ([[1, 2], [3]], False),
        ([[], []], False),
        ([1, 2], False),
        ([], False),
        ([[1], 2], False),
    ],
)
def test_is_matrix_like(value, expected: bool) -> None:
    assert is_matrix_like(value) is expected


def test_transpose_swaps_matrix_rows_and_columns() -> None:
    swapped = transpose(Matrix([[1, 2, 3], [4, 5, 6]]))
    assert swapped == Matrix([[1, 4], [2, 5], [3, 6]])
    assert transpose(swapped) == Matrix([[1, 2, 3], [4, 5, 6]])


def test_transpose_nested_lists_and_arrays() -> None:
    assert transpose([[1, 2], [3, 4]]) == Matrix([[1, 3], [2, 4]])
    assert transpose(np.array([[1, 2], [3, 4]])) == Matrix([[1, 3], [2, 4]])
    assert transpose(np.array([1, 2])) == RowVector([1, 2])


def test_transpose_rejects_higher_rank_arrays() -> None:
    with pytest.raises(TypeError, match="3-dimensional"):
        transpose(np.zeros((2, 2, 2)))
