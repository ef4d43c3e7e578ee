# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by densematrix.

Every class also derives from the builtin a caller would naturally catch,
so ``except ValueError`` keeps working for shape problems and
``except IndexError`` for bad indices.
"""


class MatrixError(Exception):
    """Base class for all densematrix errors."""


class OutOfRange(MatrixError, IndexError):
    """Row or column index outside ``[0, count)``."""


class DimensionMismatch(MatrixError, ValueError):
    """Operands have incompatible shapes."""


class NotSquare(DimensionMismatch):
    """Operation is only defined for square matrices."""


class DivideByZero(MatrixError, ZeroDivisionError):
    """Scalar division by the additive identity."""
