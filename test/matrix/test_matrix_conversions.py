################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for numpy conversions."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_math.matrix.matrix import Dimension
from oasis_math.matrix.matrix import Matrix
from oasis_math.matrix.matrix_conversions import matrix_from_array
from oasis_math.matrix.matrix_conversions import matrix_to_array
from oasis_math.matrix.matrix_errors import DimensionError
from oasis_math.matrix.matrix_errors import ElementTypeError


def test_from_array_keeps_dtype() -> None:
    """Checks elements keep the numpy scalar type of the array."""
    array: NDArray[np.int32] = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.int32)

    a: Matrix = matrix_from_array(array)

    assert a.dimensions == Dimension(width=3, height=2)
    assert isinstance(a[1, 2], np.int32)
    assert a[1, 2] == 6


def test_from_array_copies() -> None:
    """Checks later array writes do not reach the matrix."""
    array: NDArray[np.float64] = np.eye(2, dtype=float)

    a: Matrix = matrix_from_array(array)
    array[0, 0] = 5.0

    assert a[0, 0] == 1.0


@pytest.mark.parametrize(
    "shape",
    [(3,), (2, 2, 2), (0, 3), (3, 0)],
)
def test_from_array_bad_shapes(shape: tuple[int, ...]) -> None:
    """Checks arrays that are not non-empty 2D arrays are rejected."""
    with pytest.raises(DimensionError):
        matrix_from_array(np.zeros(shape, dtype=float))


def test_from_array_rejects_complex() -> None:
    """Checks complex arrays are rejected."""
    with pytest.raises(ElementTypeError):
        matrix_from_array(np.ones((2, 2), dtype=np.complex128))


def test_to_array_matches_numpy_product() -> None:
    """Checks the pure-Python product agrees with numpy."""
    rng: np.random.Generator = np.random.default_rng(7)
    left: NDArray[np.float64] = rng.standard_normal((3, 4))
    right: NDArray[np.float64] = rng.standard_normal((4, 2))

    product: Matrix = matrix_from_array(left).multiply(matrix_from_array(right))

    assert np.allclose(matrix_to_array(product, dtype=np.float64), left @ right)


def test_to_array_shape_and_dtype() -> None:
    """Checks the array has shape (height, width) and the requested dtype."""
    a: Matrix = Matrix.from_rows([[1, 2, 3]])

    array: np.ndarray = matrix_to_array(a, dtype=np.float32)

    assert array.shape == (1, 3)
    assert array.dtype == np.float32


@pytest.mark.parametrize("shape", [(3,), (2, 2, 2)])
def test_from_array_reports_rank(shape: tuple[int, ...]) -> None:
    """Checks non-2D arrays are reported by their number of dimensions."""
    with pytest.raises(DimensionError, match=f"{len(shape)} dimensions") as exc_info:
        matrix_from_array(np.zeros(shape, dtype=float))

    assert exc_info.value.rank == len(shape)
