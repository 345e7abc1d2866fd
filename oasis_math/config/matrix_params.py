################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for matrix rendering and comparison."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Text opening a row, and the whole matrix
RENDER_ROW_OPEN: str = "["
# Text closing a row, and the whole matrix
RENDER_ROW_CLOSE: str = "]"
# Text between elements of a row
RENDER_ELEMENT_SEPARATOR: str = " "
# Text between rows
RENDER_ROW_SEPARATOR: str = " "
# Format spec applied to each element with format()
RENDER_ELEMENT_FORMAT: str = ""

# Default absolute tolerance for approximate equality
COMPARE_DEFAULT_MARGIN: float = 1e-4


class MatrixParamsError(Exception):
    """Raised when matrix parameter validation fails."""


@dataclass(frozen=True)
class RenderParams:
    """Text rendering parameters."""

    # Text opening a row, and the whole matrix
    row_open: str = RENDER_ROW_OPEN
    # Text closing a row, and the whole matrix
    row_close: str = RENDER_ROW_CLOSE
    # Text between elements of a row
    element_separator: str = RENDER_ELEMENT_SEPARATOR
    # Text between rows
    row_separator: str = RENDER_ROW_SEPARATOR
    # Format spec applied to each element with format()
    element_format: str = RENDER_ELEMENT_FORMAT


@dataclass(frozen=True)
class CompareParams:
    """Approximate comparison parameters."""

    # Default absolute tolerance for approximate equality
    default_margin: float = COMPARE_DEFAULT_MARGIN


@dataclass(frozen=True)
class MatrixParams:
    """Complete configuration tree for matrix operations."""

    render: RenderParams
    compare: CompareParams

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default matrix parameter tree."""
        return cls(
            render=RenderParams(),
            compare=CompareParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        if not self.render.element_separator:
            raise MatrixParamsError("render.element_separator must be set")
        if not self.render.row_separator:
            raise MatrixParamsError("render.row_separator must be set")
        try:
            format(0, self.render.element_format)
        except ValueError as exc:
            raise MatrixParamsError(
                f"render.element_format is not a valid numeric format: {exc}"
            ) from exc

        if self.compare.default_margin < 0.0:
            raise MatrixParamsError("compare.default_margin must be non-negative")

    def replace(self, **namespace_overrides: Any) -> MatrixParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value


# Parameters used when a caller does not supply any
DEFAULT_PARAMS: MatrixParams = MatrixParams.defaults()
