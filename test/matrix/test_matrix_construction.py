################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for matrix construction and element access."""

from __future__ import annotations

from fractions import Fraction

import numpy as np
import pytest

from oasis_math.matrix.matrix import Dimension
from oasis_math.matrix.matrix import Matrix
from oasis_math.matrix.matrix_errors import DimensionError
from oasis_math.matrix.matrix_errors import ElementTypeError
from oasis_math.matrix.matrix_errors import MatrixError
from oasis_math.matrix.matrix_errors import NotSquareError
from oasis_math.matrix.matrix_errors import RaggedRowsError


def test_from_rows_shape_and_values() -> None:
    """Checks row-major layout and shape of explicit values."""
    a: Matrix = Matrix.from_rows([[0, 1], [2, 3], [4, 5]])

    assert a.width == 2
    assert a.height == 3
    assert a.dimensions == Dimension(width=2, height=3)

    expected: int = 0
    for row in range(3):
        for col in range(2):
            assert a[row, col] == expected
            expected += 1


def test_from_rows_no_rows() -> None:
    """Checks an empty row list is rejected."""
    with pytest.raises(DimensionError):
        Matrix.from_rows([])


def test_from_rows_empty_first_row() -> None:
    """Checks an empty first row is rejected."""
    with pytest.raises(DimensionError, match="less than 1"):
        Matrix.from_rows([[]])


def test_from_rows_ragged() -> None:
    """Checks rows of different lengths are rejected."""
    with pytest.raises(RaggedRowsError) as exc_info:
        Matrix.from_rows([[1], [2, 3]])

    assert exc_info.value.row == 1
    assert exc_info.value.expected == 1
    assert exc_info.value.actual == 2


def test_errors_share_base_and_builtin() -> None:
    """Checks construction errors are matrix errors and value errors."""
    with pytest.raises(MatrixError):
        Matrix.from_rows([[1, 2], [3]])
    with pytest.raises(ValueError):
        Matrix.from_rows([])


def test_from_rows_copies_input() -> None:
    """Checks the matrix does not alias the supplied rows."""
    rows: list[list[int]] = [[1, 2], [3, 4]]
    a: Matrix = Matrix.from_rows(rows)

    rows[0][0] = 99

    assert a[0, 0] == 1


def test_from_rows_rejects_non_numbers() -> None:
    """Checks non-numeric, bool and complex elements are rejected."""
    with pytest.raises(ElementTypeError):
        Matrix.from_rows([["a", "b"]])
    with pytest.raises(ElementTypeError):
        Matrix.from_rows([[True, False]])
    with pytest.raises(ElementTypeError):
        Matrix.from_rows([[1 + 2j]])
    with pytest.raises(TypeError):
        Matrix.from_rows([[None]])


def test_from_rows_accepts_real_types() -> None:
    """Checks ints, floats, fractions and numpy scalars are accepted."""
    a: Matrix = Matrix.from_rows(
        [[1, 2.5, Fraction(1, 3), np.uint8(4), np.float32(0.5)]]
    )

    assert a.width == 5
    assert a[0, 2] == Fraction(1, 3)
    assert isinstance(a[0, 3], np.uint8)


def test_zero() -> None:
    """Checks every element of a zero matrix is zero."""
    a: Matrix = Matrix.zero(2, 3, int)

    assert a.dimensions == Dimension(width=2, height=3)
    assert a.values == [[0, 0], [0, 0], [0, 0]]
    assert all(isinstance(value, int) for row in a.values for value in row)


def test_zero_defaults_to_float() -> None:
    """Checks the default element type is float."""
    a: Matrix = Matrix.zero(1, 1)

    assert isinstance(a[0, 0], float)


def test_zero_rows_are_independent() -> None:
    """Checks writing one row does not affect another."""
    a: Matrix = Matrix.zero(2, 2, int)

    a[0, 0] = 5

    assert a.values == [[5, 0], [0, 0]]


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-1, 2), (0, 0)])
def test_zero_bad_dimensions(width: int, height: int) -> None:
    """Checks dimensions below 1 are rejected."""
    with pytest.raises(DimensionError):
        Matrix.zero(width, height)


def test_identity() -> None:
    """Checks ones on the diagonal and zeros elsewhere."""
    a: Matrix = Matrix.identity(3, 3, int)

    assert a.values == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_identity_numpy_element_type() -> None:
    """Checks the element type callable is used for every element."""
    a: Matrix = Matrix.identity(2, 2, np.float32)

    assert all(isinstance(value, np.float32) for row in a.values for value in row)


def test_identity_not_square() -> None:
    """Checks identity requires a square shape."""
    with pytest.raises(NotSquareError) as exc_info:
        Matrix.identity(2, 3)

    assert exc_info.value.dimensions == Dimension(width=2, height=3)


def test_identity_bad_dimensions_checked_first() -> None:
    """Checks a dimension below 1 is reported before squareness."""
    with pytest.raises(DimensionError):
        Matrix.identity(0, 2)


def test_element_access_bounds() -> None:
    """Checks out-of-range indices raise IndexError."""
    a: Matrix = Matrix.from_rows([[1, 2], [3, 4]])

    with pytest.raises(IndexError):
        a[2, 0]
    with pytest.raises(IndexError):
        a[0, -1]
    with pytest.raises(IndexError):
        a[0, 2] = 1


def test_set_item_validates_element() -> None:
    """Checks assignments are validated like construction."""
    a: Matrix = Matrix.from_rows([[1, 2], [3, 4]])

    with pytest.raises(ElementTypeError):
        a[0, 0] = "x"  # type: ignore[assignment]

    a[1, 1] = 7.5
    assert a[1, 1] == 7.5


def test_values_returns_copy() -> None:
    """Checks mutating the returned rows leaves the matrix unchanged."""
    a: Matrix = Matrix.from_rows([[1, 2], [3, 4]])

    values: list[list[int]] = a.values
    values[0][0] = 99

    assert a[0, 0] == 1


def test_dimension_str() -> None:
    """Checks shapes render as rows x columns."""
    assert str(Dimension(width=1, height=3)) == "3x1"
    assert Dimension(width=2, height=2).is_square
    assert not Dimension(width=1, height=2).is_square


def test_matrix_is_unhashable() -> None:
    """Checks mutable matrices cannot be hashed."""
    a: Matrix = Matrix.from_rows([[1]])

    with pytest.raises(TypeError):
        hash(a)
