################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Conversions between matrices and numpy arrays."""

from __future__ import annotations

from typing import Any
from typing import Optional

import numpy as np
from numpy.typing import DTypeLike

from oasis_math.matrix.matrix import Matrix
from oasis_math.matrix.matrix_errors import DimensionError


def matrix_from_array(array: Any) -> Matrix:
    """Create a matrix from a 2D array, keeping numpy element types.

    Args:
        array: 2D array-like of real numbers

    Returns:
        Matrix holding numpy scalars of the array's dtype

    Raises:
        DimensionError: If the array is not 2D or has an empty axis; ``rank``
            is set in the first case
        ElementTypeError: If the dtype is not a real number type
    """
    values: np.ndarray = np.asarray(array)
    if values.ndim != 2:
        raise DimensionError(0, 0, rank=values.ndim)

    # Indexing a row yields numpy scalars rather than Python numbers
    return Matrix.from_rows([list(row) for row in values])


def matrix_to_array(matrix: Matrix, dtype: Optional[DTypeLike] = None) -> np.ndarray:
    """Return a new 2D array with shape (height, width).

    Args:
        matrix: Matrix to convert
        dtype: Array dtype, or None to let numpy infer it from the elements

    Returns:
        Array holding a copy of the matrix elements
    """
    return np.array(matrix.values, dtype=dtype)
