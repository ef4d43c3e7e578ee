# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Determinant by Gaussian elimination with full pivoting.

Rows and columns are never moved. A `PermutationView` keeps one index
array per axis and every pivot swap only exchanges two entries of those
arrays, so the elimination can reorder rows and columns independently
without touching the buffer layout.
"""

import logging

import numpy as np

from .errors import DimensionMismatch, NotSquare
from .utils import EPSILON, check_dtype, permutation_sign

logger = logging.getLogger(__name__)

# float64 represents every integer up to this magnitude exactly
_EXACT_INT_LIMIT = 2**53


class PermutationView:
    """
    Logical row/column ordering over a physical 2-D buffer.

    Logical element (i, j) lives at ``data[rows[i], cols[j]]``.
    """

    def __init__(self, data: np.ndarray):
        self.data = data
        n_rows, n_cols = data.shape
        self.rows = np.arange(n_rows)  # Identity Permutation
        self.cols = np.arange(n_cols)

    def __getitem__(self, key):
        i, j = key
        return self.data[self.rows[i], self.cols[j]]

    def swap_rows(self, i: int, j: int) -> None:
        self.rows[[i, j]] = self.rows[[j, i]]

    def swap_cols(self, i: int, j: int) -> None:
        self.cols[[i, j]] = self.cols[[j, i]]

    def pivot(self, i: int):
        return self.data[self.rows[i], self.cols[i]]

    def diagonal(self) -> np.ndarray:
        k = min(len(self.rows), len(self.cols))
        return self.data[self.rows[:k], self.cols[:k]]

    def sign(self) -> int:
        """+1 or -1: every row or column swap so far flips it once."""
        return permutation_sign(self.rows) * permutation_sign(self.cols)


def _eliminate(work: np.ndarray, eps: float):
    """
    Full-pivot elimination over `work` (modified in place).

    Returns the determinant as a scalar of ``work.dtype``.
    """
    n = work.shape[0]
    view = PermutationView(work)
    rows, cols = view.rows, view.cols

    for i in range(n):
        # Largest magnitude in logical column i, rows i and below.
        # argmax keeps the first candidate on ties.
        best = i + int(np.abs(work[rows[i:], cols[i]]).argmax())
        if best != i:
            view.swap_rows(i, best)

        # Then the largest magnitude in logical row i, columns i and right.
        best = i + int(np.abs(work[rows[i], cols[i:]]).argmax())
        if best != i:
            view.swap_cols(i, best)

        pivot = view.pivot(i)
        if abs(pivot) <= eps:
            logger.debug("pivot %d is %r (<= %g), matrix is singular", i, pivot, eps)
            return work.dtype.type(0)

        below = rows[i + 1 :]
        right = cols[i + 1 :]
        factors = work[below, cols[i]] / pivot
        # Only columns right of the pivot are updated; the entries in
        # logical column i below the pivot are never read again.
        work[np.ix_(below, right)] -= factors[:, None] * work[rows[i], right]

    return work.dtype.type(view.sign() * np.prod(view.diagonal()))


def _det_floating(A: np.ndarray, eps: float):
    return _eliminate(A.copy(), eps)


def _det_integer(A: np.ndarray, eps: float):
    # Integer division would truncate every elimination factor, so run
    # the elimination on a float64 shadow copy and round the result.
    value = _eliminate(A.astype(np.float64), eps)
    rounded = round(float(value))
    if abs(rounded) > _EXACT_INT_LIMIT:
        logger.warning(
            "determinant %d exceeds 2**53; the rounded result may be inexact",
            rounded,
        )
    return A.dtype.type(_wrap_integer(rounded, A.dtype))


def _wrap_integer(value: int, dtype: np.dtype) -> int:
    """Reduce `value` into the range of `dtype` the way a C cast wraps."""
    bits = dtype.itemsize * 8
    value %= 1 << bits
    if dtype.kind == "i" and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


_DISPATCH = {
    "f": _det_floating,
    "i": _det_integer,
    "u": _det_integer,
}


def det(matrix, eps: float = EPSILON):
    """
    Determinant of a square matrix by full-pivot Gaussian elimination.

    Parameters
    ----------
    matrix : Matrix or (n, n) array_like
        Integer or floating element type. It is never modified.
    eps : float
        Absolute pivot tolerance. A pivot with ``|pivot| <= eps`` makes
        the result exactly zero. The tolerance is not scaled by the
        matrix magnitude.

    Returns
    -------
    Scalar of the matrix element type. For integer types the
    elimination runs in float64 and the result is rounded to the
    nearest integer, which is exact only while ``|det| <= 2**53``.
    A determinant outside the range of the integer type wraps around
    (e.g. -1 is 255 for uint8).

    Raises
    ------
    NotSquare : if the matrix is not square.
    """
    A = np.asarray(matrix)
    if A.ndim != 2:
        raise DimensionMismatch(f"expected a 2-D matrix, got {A.ndim}-D")
    m, n = A.shape
    if m != n:
        raise NotSquare(f"the determinant is undefined for a {m}x{n} matrix")
    dt = check_dtype(A.dtype)
    return _DISPATCH[dt.kind](A, eps)
