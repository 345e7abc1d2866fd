################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Errors raised by matrix construction and arithmetic

Every error derives from ``MatrixError`` so chained computations can capture
matrix failures without catching unrelated exceptions. Each error also derives
from the matching builtin exception such as ``ValueError`` or ``TypeError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Optional


if TYPE_CHECKING:
    from oasis_math.matrix.matrix import Dimension


class MatrixError(Exception):
    """Base class for all matrix errors."""


class DimensionError(MatrixError, ValueError):
    """Raised when a requested width or height is less than 1.

    Also raised with ``rank`` set when array input is not two-dimensional.
    """

    def __init__(self, width: int, height: int, rank: Optional[int] = None) -> None:
        if rank is None:
            message: str = (
                "cannot create a Matrix with a dimension that is less than 1 "
                f"(width={width}, height={height})"
            )
        else:
            message = f"cannot create a Matrix from an array with {rank} dimensions"
        super().__init__(message)
        self.width: int = width
        self.height: int = height
        self.rank: Optional[int] = rank


class RaggedRowsError(MatrixError, ValueError):
    """Raised when the supplied rows do not all share the same length."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        super().__init__(
            "cannot create a Matrix with different row lengths "
            f"(row {row} has {actual} elements, expected {expected})"
        )
        self.row: int = row
        self.expected: int = expected
        self.actual: int = actual


class NotSquareError(MatrixError, ValueError):
    """Raised when an operation requiring a square matrix gets another shape."""

    def __init__(self, operation: str, dimensions: Dimension) -> None:
        super().__init__(f"{operation} requires a square matrix, got {dimensions}")
        self.operation: str = operation
        self.dimensions: Dimension = dimensions


class IncompatibleDimensionsError(MatrixError, ValueError):
    """Raised when operand shapes cannot be combined by an operation."""

    def __init__(self, operation: str, left: Dimension, right: Dimension) -> None:
        super().__init__(
            f"cannot {operation} matrices due to incompatible dimensions "
            f"({left} and {right})"
        )
        self.operation: str = operation
        self.left: Dimension = left
        self.right: Dimension = right


class SingularMatrixError(MatrixError, ValueError):
    """Raised when inverting a matrix whose determinant is zero."""

    def __init__(self) -> None:
        super().__init__("cannot invert, matrix is singular")


class UnsupportedSizeError(MatrixError, NotImplementedError):
    """Raised when inverting a square matrix that is not 2x2."""

    def __init__(self, operation: str, dimensions: Dimension) -> None:
        super().__init__(f"{operation} is not implemented for {dimensions} matrices")
        self.operation: str = operation
        self.dimensions: Dimension = dimensions


class ElementTypeError(MatrixError, TypeError):
    """Raised when an element or scalar is not a real number."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"matrix elements must be real numbers, got {type(value).__name__}"
        )
        self.value: object = value
