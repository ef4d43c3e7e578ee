# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densematrix
===========

A dense, row-major matrix container with a full-pivoting determinant
and a generator of random matrices with a prescribed determinant.

Public API
~~~~~~~~~~
- Container
    - `Matrix`, `RowView`
- Determinant
    - `det`, `PermutationView`
- Fixtures
    - `random_matrix`
- Text format
    - `read_matrix`, `read_square`, `dump_matrix`, `format_matrix`
- Errors
    - `MatrixError`, `OutOfRange`, `DimensionMismatch`, `NotSquare`,
      `DivideByZero`

Example
-------
>>> import densematrix as dm
>>> A = dm.Matrix.from_rows([[2, 0], [0, 3]])
>>> int(A.det())
6
>>> B = dm.random_matrix(4, 10)
>>> int(dm.det(B))
10
"""

from importlib.metadata import version as _pkg_version

from .determinant import PermutationView, det
from .errors import (
    DimensionMismatch,
    DivideByZero,
    MatrixError,
    NotSquare,
    OutOfRange,
)
from .matrix import Matrix, RowView
from .random_matrix import random_matrix
from .textio import dump_matrix, format_matrix, read_matrix, read_square
from .utils import EPSILON, MAX_COEF, permutation_sign

__all__ = [
    "Matrix",
    "RowView",
    "det",
    "PermutationView",
    "random_matrix",
    "read_matrix",
    "read_square",
    "dump_matrix",
    "format_matrix",
    "MatrixError",
    "OutOfRange",
    "DimensionMismatch",
    "NotSquare",
    "DivideByZero",
    "EPSILON",
    "MAX_COEF",
    "permutation_sign",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show densematrix", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library code only logs; applications decide where the records go.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
