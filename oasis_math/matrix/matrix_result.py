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
Short-circuiting results for chained matrix computations

A ``MatrixResult`` holds either a matrix or the first ``MatrixError`` raised
while producing it. Chain methods mirror the ``Matrix`` operations; once a
result has failed, every later step returns the same failed result without
doing any work, so an expression such as

    MatrixResult.of(a).multiply_scalar(2).multiply(b).transpose()

is checked for errors exactly once at the end. The first error always wins:
an error carried by the receiver is never replaced by an operand's error or
by a later failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Sequence
from typing import Optional
from typing import Union

from oasis_math.matrix.matrix import Matrix
from oasis_math.matrix.matrix import Scalar
from oasis_math.matrix.matrix_errors import MatrixError


_LOG: logging.Logger = logging.getLogger(__name__)


Operand = Union[Matrix, "MatrixResult"]


class MatrixResult:
    """Either a matrix or the first error of a chained computation."""

    __slots__ = ("_matrix", "_error")

    def __init__(
        self,
        matrix: Optional[Matrix] = None,
        error: Optional[MatrixError] = None,
    ) -> None:
        if (matrix is None) == (error is None):
            raise ValueError("exactly one of matrix or error must be set")
        self._matrix: Optional[Matrix] = matrix
        self._error: Optional[MatrixError] = error

    @classmethod
    def of(cls, matrix: Matrix) -> MatrixResult:
        """Return a successful result holding ``matrix``."""
        return cls(matrix=matrix)

    @classmethod
    def failure(cls, error: MatrixError) -> MatrixResult:
        """Return a failed result holding ``error``."""
        return cls(error=error)

    @classmethod
    def capture(cls, fn: Callable[[], Matrix]) -> MatrixResult:
        """Run ``fn`` and capture a raised ``MatrixError`` as a failed result."""
        try:
            matrix: Matrix = fn()
        except MatrixError as exc:
            _LOG.debug("Matrix chain failed, %s", exc)
            return cls(error=exc)
        return cls(matrix=matrix)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Scalar]]) -> MatrixResult:
        """Construct a matrix from rows, capturing construction errors."""
        return cls.capture(lambda: Matrix.from_rows(rows))

    @classmethod
    def zero(
        cls,
        width: int,
        height: int,
        element_type: Callable[[int], Scalar] = float,
    ) -> MatrixResult:
        """Construct a zero matrix, capturing construction errors."""
        return cls.capture(lambda: Matrix.zero(width, height, element_type))

    @classmethod
    def identity(
        cls,
        width: int,
        height: int,
        element_type: Callable[[int], Scalar] = float,
    ) -> MatrixResult:
        """Construct an identity matrix, capturing construction errors."""
        return cls.capture(lambda: Matrix.identity(width, height, element_type))

    ############################################################################
    # Accessors
    ############################################################################

    @property
    def ok(self) -> bool:
        """Return True if the result holds a matrix."""
        return self._error is None

    @property
    def matrix(self) -> Optional[Matrix]:
        """Return the matrix, or None if the computation failed."""
        return self._matrix

    @property
    def error(self) -> Optional[MatrixError]:
        """Return the first error, or None if the computation succeeded."""
        return self._error

    def unwrap(self) -> Matrix:
        """Return the matrix or raise the held error."""
        if self._error is not None:
            raise self._error
        assert self._matrix is not None
        return self._matrix

    ############################################################################
    # Chaining
    ############################################################################

    def then(self, fn: Callable[[Matrix], Matrix]) -> MatrixResult:
        """Apply ``fn`` to the held matrix unless the result has failed.

        Args:
            fn: Operation producing a new matrix; a ``MatrixError`` it raises
                becomes the error of the returned result

        Returns:
            This result if it has failed, otherwise the outcome of ``fn``
        """
        if self._matrix is None:
            _LOG.debug("Skipping matrix operation, chain already failed")
            return self
        matrix: Matrix = self._matrix
        return MatrixResult.capture(lambda: fn(matrix))

    def _combine(
        self,
        other: Operand,
        fn: Callable[[Matrix, Matrix], Matrix],
    ) -> MatrixResult:
        if self._matrix is None:
            _LOG.debug("Skipping matrix operation, chain already failed")
            return self

        if isinstance(other, MatrixResult):
            if other._matrix is None:
                _LOG.debug("Matrix operand failed, %s", other._error)
                return other
            operand: Matrix = other._matrix
        else:
            operand = other

        matrix: Matrix = self._matrix
        return MatrixResult.capture(lambda: fn(matrix, operand))

    def multiply_scalar(self, x: Scalar) -> MatrixResult:
        """Chain :meth:`Matrix.multiply_scalar`."""
        return self.then(lambda matrix: matrix.multiply_scalar(x))

    def multiply(self, other: Operand) -> MatrixResult:
        """Chain :meth:`Matrix.multiply`."""
        return self._combine(other, Matrix.multiply)

    def add(self, other: Operand) -> MatrixResult:
        """Chain :meth:`Matrix.add`."""
        return self._combine(other, Matrix.add)

    def subtract(self, other: Operand) -> MatrixResult:
        """Chain :meth:`Matrix.subtract`."""
        return self._combine(other, Matrix.subtract)

    def inverse(self) -> MatrixResult:
        """Chain :meth:`Matrix.inverse`."""
        return self.then(Matrix.inverse)

    def transpose(self) -> MatrixResult:
        """Chain :meth:`Matrix.transpose`."""
        return self.then(Matrix.transpose)

    def clone(self) -> MatrixResult:
        """Chain :meth:`Matrix.clone`."""
        return self.then(Matrix.clone)

    def __repr__(self) -> str:
        if self._error is not None:
            return f"MatrixResult(error={self._error!r})"
        return f"MatrixResult(matrix={self._matrix!r})"
