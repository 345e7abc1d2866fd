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
Entry point printing a couple of chained matrix expressions
"""

import argparse
import logging
from typing import Optional

from oasis_math.matrix.matrix_result import MatrixResult


_LOG: logging.Logger = logging.getLogger(__name__)


################################################################################
# Console entry point
################################################################################


def _parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print chained matrix expressions")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(args=args)


def main(args: Optional[list[str]] = None) -> int:
    options = _parse_args(args=args)

    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.INFO)

    A: MatrixResult = MatrixResult.from_rows([[1, 2], [3, 4], [5, 6]])
    B: MatrixResult = MatrixResult.from_rows([[1], [2]])

    # C = (2AB)'
    C: MatrixResult = A.multiply_scalar(2).multiply(B).transpose()
    if not C.ok:
        _LOG.error("Failed to compute (2AB)': %s", C.error)
        return 1

    print("(2AB)' =", C.unwrap())

    D: MatrixResult = MatrixResult.from_rows([[1.1, 2.0], [3.0, 4.1], [5.1, 6.0]])
    E: MatrixResult = MatrixResult.from_rows([[1.1], [2.0]])

    # F = -2(DE)
    F: MatrixResult = D.multiply(E).multiply_scalar(-2)
    if not F.ok:
        _LOG.error("Failed to compute -2DE: %s", F.error)
        return 1

    print("-2DE =", F.unwrap())

    return 0
