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
Dense two-dimensional matrix type

Matrices are represented as row-major lists of rows. Element (r, c) of a
matrix is stored at ``values[r][c]``; every row holds exactly ``width``
elements and a matrix always has at least one row and one column.

Elements may be any real number type: Python ints and floats,
``fractions.Fraction`` and numpy integer, unsigned and floating scalars.
Operations never modify their operands. Each returns a new matrix that owns
its storage, so results can be mutated freely through ``m[r, c] = v``.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable
from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction
from typing import Any
from typing import Optional
from typing import Union

import numpy as np

from oasis_math.config.matrix_params import DEFAULT_PARAMS
from oasis_math.config.matrix_params import MatrixParams
from oasis_math.matrix.matrix_errors import DimensionError
from oasis_math.matrix.matrix_errors import ElementTypeError
from oasis_math.matrix.matrix_errors import IncompatibleDimensionsError
from oasis_math.matrix.matrix_errors import NotSquareError
from oasis_math.matrix.matrix_errors import RaggedRowsError
from oasis_math.matrix.matrix_errors import SingularMatrixError
from oasis_math.matrix.matrix_errors import UnsupportedSizeError


Scalar = Union[int, float, numbers.Real]
Rows = list[list[Any]]


def _validate_element(value: object) -> None:
    # bool is an Integral, but it is not a numeric element type
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ElementTypeError(value)


def _zero_like(value: Any) -> Any:
    return type(value)(0)


def _widen_integer(value: Any) -> Any:
    # Fixed-width numpy integers wrap on overflow
    if isinstance(value, np.integer):
        return value.item()
    return value


def _within_margin(a: Any, b: Any, margin: Any) -> bool:
    if a == b:
        return True

    # numpy scalars become unbounded Python numbers
    if isinstance(a, np.generic):
        a = a.item()
    if isinstance(b, np.generic):
        b = b.item()

    try:
        return bool(abs(a - b) <= margin)
    except OverflowError:
        # An int too large for float against a float
        for value in (a, b):
            if isinstance(value, float) and not math.isfinite(value):
                return False
        return bool(abs(Fraction(a) - Fraction(b)) <= margin)


@dataclass(frozen=True)
class Dimension:
    """Shape of a matrix as a column count and a row count."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.height}x{self.width}"

    @property
    def is_square(self) -> bool:
        """Return True when the shape has as many rows as columns."""
        return self.width == self.height


class Matrix:
    """Dense, rectangular, row-major matrix of real numbers."""

    __slots__ = ("_width", "_height", "_values")

    # Matrices are mutable through __setitem__
    __hash__ = None  # type: ignore[assignment]

    # Make numpy scalars defer to Matrix for operators like ``np.float64(2) * m``
    __array_ufunc__ = None

    def __init__(self, rows: Sequence[Sequence[Scalar]]) -> None:
        """Create a matrix from a sequence of rows.

        The rows are copied, so later changes to ``rows`` do not affect the
        matrix.

        Args:
            rows: Row-major element values

        Raises:
            DimensionError: If there are no rows or the first row is empty
            RaggedRowsError: If the rows differ in length
            ElementTypeError: If an element is not a real number
        """
        height: int = len(rows)
        if height < 1:
            raise DimensionError(0, height)

        width: int = len(rows[0])
        if width < 1:
            raise DimensionError(width, height)

        values: Rows = []
        for index, row in enumerate(rows):
            if len(row) != width:
                raise RaggedRowsError(index, width, len(row))
            copied: list[Any] = list(row)
            for value in copied:
                _validate_element(value)
            values.append(copied)

        self._width: int = width
        self._height: int = height
        self._values: Rows = values

    @classmethod
    def _wrap(cls, values: Rows, width: int, height: int) -> Matrix:
        # Takes ownership of already validated storage
        matrix: Matrix = cls.__new__(cls)
        matrix._width = width
        matrix._height = height
        matrix._values = values
        return matrix

    ############################################################################
    # Construction
    ############################################################################

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Scalar]]) -> Matrix:
        """Create a matrix from explicit row values.

        Args:
            rows: Row-major element values

        Returns:
            Matrix owning a copy of ``rows``

        Raises:
            DimensionError: If there are no rows or the first row is empty
            RaggedRowsError: If the rows differ in length
            ElementTypeError: If an element is not a real number
        """
        return cls(rows)

    @classmethod
    def zero(
        cls,
        width: int,
        height: int,
        element_type: Callable[[int], Scalar] = float,
    ) -> Matrix:
        """Create a matrix with every element equal to zero.

        Args:
            width: Number of columns
            height: Number of rows
            element_type: Callable producing elements, e.g. ``int`` or
                ``np.float32``

        Returns:
            Zero matrix with the given shape

        Raises:
            DimensionError: If either dimension is less than 1
        """
        if width < 1 or height < 1:
            raise DimensionError(width, height)

        zero: Scalar = element_type(0)
        _validate_element(zero)

        return cls._wrap([[zero] * width for _ in range(height)], width, height)

    @classmethod
    def identity(
        cls,
        width: int,
        height: int,
        element_type: Callable[[int], Scalar] = float,
    ) -> Matrix:
        """Create a square matrix with ones on the diagonal.

        Args:
            width: Number of columns
            height: Number of rows
            element_type: Callable producing elements, e.g. ``int`` or
                ``np.float32``

        Returns:
            Identity matrix with the given shape

        Raises:
            DimensionError: If either dimension is less than 1
            NotSquareError: If ``width`` and ``height`` differ
        """
        if width < 1 or height < 1:
            raise DimensionError(width, height)
        if width != height:
            raise NotSquareError("identity", Dimension(width, height))

        zero: Scalar = element_type(0)
        one: Scalar = element_type(1)
        _validate_element(zero)
        _validate_element(one)

        values: Rows = [[zero] * width for _ in range(height)]
        for index in range(height):
            values[index][index] = one

        return cls._wrap(values, width, height)

    ############################################################################
    # Shape and element access
    ############################################################################

    @property
    def width(self) -> int:
        """Return the number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Return the number of rows."""
        return self._height

    @property
    def dimensions(self) -> Dimension:
        """Return the shape of the matrix."""
        return Dimension(self._width, self._height)

    @property
    def values(self) -> Rows:
        """Return a copy of the elements as a list of rows."""
        return [list(row) for row in self._values]

    def _check_index(self, key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if row < 0 or row >= self._height or col < 0 or col >= self._width:
            raise IndexError("row or column index out of range")
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = self._check_index(key)
        return self._values[row][col]

    def __setitem__(self, key: tuple[int, int], value: Scalar) -> None:
        row, col = self._check_index(key)
        _validate_element(value)
        self._values[row][col] = value

    ############################################################################
    # Arithmetic
    ############################################################################

    def multiply_scalar(self, x: Scalar) -> Matrix:
        """Multiply every element by a scalar.

        Args:
            x: Scalar multiplier

        Returns:
            Scaled matrix with the same shape

        Raises:
            ElementTypeError: If ``x`` is not a real number
        """
        _validate_element(x)
        values: Rows = [[value * x for value in row] for row in self._values]
        return Matrix._wrap(values, self._width, self._height)

    def multiply(self, other: Matrix) -> Matrix:
        """Multiply this matrix by another matrix.

        Each output cell is a running sum seeded at zero and accumulated in
        ascending index order, so floating-point results are reproducible.

        Args:
            other: Right matrix, whose height must match this width

        Returns:
            Matrix product with shape (other.width, self.height)

        Raises:
            IncompatibleDimensionsError: If the inner dimensions mismatch
        """
        if self._width != other._height:
            raise IncompatibleDimensionsError(
                "multiply", self.dimensions, other.dimensions
            )

        width: int = other._width
        height: int = self._height
        right: Rows = other._values

        values: Rows = []
        for j in range(height):
            left_row: list[Any] = self._values[j]
            out_row: list[Any] = []
            for x in range(width):
                total: Any = _zero_like(left_row[0])
                for i in range(self._width):
                    total += left_row[i] * right[i][x]
                out_row.append(total)
            values.append(out_row)

        return Matrix._wrap(values, width, height)

    def add(self, other: Matrix) -> Matrix:
        """Add another matrix of the same shape.

        Args:
            other: Matrix to add

        Returns:
            Element-wise sum

        Raises:
            IncompatibleDimensionsError: If the shapes differ
        """
        self._require_same_shape("add", other)
        values: Rows = [
            [a + b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._values, other._values)
        ]
        return Matrix._wrap(values, self._width, self._height)

    def subtract(self, other: Matrix) -> Matrix:
        """Subtract another matrix of the same shape.

        Args:
            other: Matrix to subtract

        Returns:
            Element-wise difference ``self - other``

        Raises:
            IncompatibleDimensionsError: If the shapes differ
        """
        self._require_same_shape("subtract", other)
        values: Rows = [
            [a - b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._values, other._values)
        ]
        return Matrix._wrap(values, self._width, self._height)

    def inverse(self) -> Matrix:
        """Return the inverse of a 2x2 matrix.

        The adjugate is formed first and then scaled by ``1 / det``. The
        determinant is compared exactly against zero.

        Division follows Python semantics: integer matrices invert to float
        matrices rather than truncated integers, and ``Fraction`` matrices
        invert exactly. numpy integer elements are converted to Python ints
        first, so fixed-width overflow cannot corrupt the determinant or the
        negated off-diagonal.

        Returns:
            Inverse matrix

        Raises:
            NotSquareError: If the matrix is not square
            UnsupportedSizeError: If the matrix is square but not 2x2
            SingularMatrixError: If the determinant is zero
        """
        if self._width != self._height:
            raise NotSquareError("inverse", self.dimensions)
        if self._width != 2:
            # General n x n inversion is not supported
            raise UnsupportedSizeError("inverse", self.dimensions)

        a00, a01 = (_widen_integer(value) for value in self._values[0])
        a10, a11 = (_widen_integer(value) for value in self._values[1])

        det: Any = a00 * a11 - a01 * a10
        if det == 0:
            raise SingularMatrixError()

        adjugate: Matrix = Matrix._wrap([[a11, -a01], [-a10, a00]], 2, 2)

        return adjugate.multiply_scalar(1 / det)

    def transpose(self) -> Matrix:
        """Return the transpose with shape (self.height, self.width)."""
        values: Rows = [list(column) for column in zip(*self._values)]
        return Matrix._wrap(values, self._height, self._width)

    def clone(self) -> Matrix:
        """Return a deep copy with independent storage."""
        return Matrix._wrap(self.values, self._width, self._height)

    def _require_same_shape(self, operation: str, other: Matrix) -> None:
        if self._width != other._width or self._height != other._height:
            raise IncompatibleDimensionsError(
                operation, self.dimensions, other.dimensions
            )

    ############################################################################
    # Comparison and rendering
    ############################################################################

    def equal(self, other: Matrix) -> bool:
        """Return True if the shapes match and every element is exactly equal."""
        if self._width != other._width or self._height != other._height:
            return False
        return all(
            a == b
            for row_a, row_b in zip(self._values, other._values)
            for a, b in zip(row_a, row_b)
        )

    def approx_equal(
        self,
        other: Matrix,
        margin: Optional[float] = None,
        params: Optional[MatrixParams] = None,
    ) -> bool:
        """Return True if the shapes match and every element is within a margin.

        Differences are computed in float64, which avoids underflow when
        comparing unsigned integer elements.

        Args:
            other: Matrix to compare against
            margin: Largest allowed absolute difference, or None for the
                configured default
            params: Parameters supplying the default margin

        Returns:
            True if ``|a - b| <= margin`` for every element pair

        Raises:
            ValueError: If ``margin`` is negative
        """
        if margin is None:
            margin = (params or DEFAULT_PARAMS).compare.default_margin
        if margin < 0:
            raise ValueError("margin must be non-negative")

        if self._width != other._width or self._height != other._height:
            return False

        try:
            left: np.ndarray = np.asarray(self._values, dtype=np.float64)
            right: np.ndarray = np.asarray(other._values, dtype=np.float64)
        except OverflowError:
            # Python ints beyond the float64 range
            return all(
                _within_margin(a, b, margin)
                for row_a, row_b in zip(self._values, other._values)
                for a, b in zip(row_a, row_b)
            )

        # Exactly equal infinities have an undefined difference
        with np.errstate(invalid="ignore"):
            close: np.ndarray = (left == right) | (
                np.abs(left - right) <= np.float64(margin)
            )

        return bool(np.all(close))

    def render(self, params: Optional[MatrixParams] = None) -> str:
        """Return a row-major text rendering for logs and debugging.

        With default parameters a 2x2 matrix renders as ``[[1 2] [3 4]]``.
        The text is not meant to be parsed back.

        Args:
            params: Parameters controlling delimiters and element format

        Returns:
            Rendered matrix
        """
        render = (params or DEFAULT_PARAMS).render
        rows: list[str] = [
            render.row_open
            + render.element_separator.join(
                format(value, render.element_format) for value in row
            )
            + render.row_close
            for row in self._values
        ]
        return render.row_open + render.row_separator.join(rows) + render.row_close

    ############################################################################
    # Python operators
    ############################################################################

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equal(other)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix) or not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply_scalar(other)

    def __rmul__(self, other: object) -> Matrix:
        return self.__mul__(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Matrix({self._values!r})"
