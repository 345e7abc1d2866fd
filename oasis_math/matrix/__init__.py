################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense matrix type and chained matrix computations."""

from __future__ import annotations

from oasis_math.matrix.matrix import Dimension
from oasis_math.matrix.matrix import Matrix
from oasis_math.matrix.matrix_conversions import matrix_from_array
from oasis_math.matrix.matrix_conversions import matrix_to_array
from oasis_math.matrix.matrix_errors import DimensionError
from oasis_math.matrix.matrix_errors import ElementTypeError
from oasis_math.matrix.matrix_errors import IncompatibleDimensionsError
from oasis_math.matrix.matrix_errors import MatrixError
from oasis_math.matrix.matrix_errors import NotSquareError
from oasis_math.matrix.matrix_errors import RaggedRowsError
from oasis_math.matrix.matrix_errors import SingularMatrixError
from oasis_math.matrix.matrix_errors import UnsupportedSizeError
from oasis_math.matrix.matrix_result import MatrixResult


__all__ = [
    "Dimension",
    "DimensionError",
    "ElementTypeError",
    "IncompatibleDimensionsError",
    "Matrix",
    "MatrixError",
    "MatrixResult",
    "NotSquareError",
    "RaggedRowsError",
    "SingularMatrixError",
    "UnsupportedSizeError",
    "matrix_from_array",
    "matrix_to_array",
]
