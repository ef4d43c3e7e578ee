# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .matrix import Matrix
from .utils import MAX_COEF, check_dtype, random_upper_triangular

logger = logging.getLogger(__name__)

# The matrix is built in a wide type and range-checked before the final
# cast, so narrow element types never wrap around during mixing.
_WORK_DTYPES = {"i": np.int64, "u": np.uint64, "f": np.float64}
_TRIES_PER_COEF = 4


def _limits(dt: np.dtype):
    info = np.iinfo(dt) if dt.kind in "iu" else np.finfo(dt)
    return info.min, info.max


def _fits(A: np.ndarray, dt: np.dtype) -> bool:
    lo, hi = _limits(dt)
    return bool(np.all((A >= lo) & (A <= hi)))


def _mix(A: np.ndarray, rng: np.random.Generator, max_coef: int, rounds: int) -> None:
    """Row 0 into every other row, last column into every other column."""
    low = 0 if A.dtype.kind == "u" else -max_coef
    last = A.shape[0] - 1
    for _ in range(rounds):
        for i in range(1, last + 1):
            A[i] += int(rng.integers(low, max_coef, endpoint=True)) * A[0]
        for j in range(last):
            A[:, j] += int(rng.integers(low, max_coef, endpoint=True)) * A[:, last]


def random_matrix(
    size: int,
    det,
    dtype=np.int64,
    seed=None,
    max_coef: int = MAX_COEF,
    rounds: int = 1,
) -> Matrix:
    """
    Build a random dense `size` x `size` matrix with determinant `det`.

    Start from an upper-triangular matrix with diagonal (1, ..., 1, det),
    then hide the triangle: add a random integer multiple of row 0 to
    every other row, and a random integer multiple of the last column to
    every other column. Both are elementary operations that leave the
    determinant unchanged.

    The work happens in int64 / uint64 / float64. If an entry does not fit
    the requested dtype the matrix is redrawn, halving the multiplier
    bound after a few attempts; with multipliers of 0 only the triangle
    is left.

    Parameters
    ----------
    size : int
        Matrix order, must be >= 1.
    det : int
        Target determinant. 0 yields a singular matrix; the upper triangle
        is then drawn from the zero-width range [0, 0] and is all zeros.
    dtype : numpy dtype
        Element type. For integer types the determinant is exact; for
        floating types the off-diagonal entries are real and the
        determinant holds up to rounding.
    seed : int | None
        Seed for `numpy.random.default_rng`. None draws fresh entropy.
    max_coef : int
        Largest row/column multiplier to start from.
    rounds : int
        How many times the row and column mixing is applied.

    Returns
    -------
    Matrix with the requested dtype

    Raises
    ------
    OverflowError : if `det` (or, after every retry, the triangle itself)
        does not fit the requested dtype.
    """
    if size < 1:
        raise ValueError(f"matrix size must be >= 1, got {size}")
    dt = check_dtype(dtype)
    if dt.kind == "u" and det < 0:
        raise ValueError(f"an unsigned {dt} matrix cannot have determinant {det}")
    lo, hi = _limits(dt)
    if not lo <= det <= hi:
        raise OverflowError(f"determinant {det} does not fit in {dt}")

    rng = np.random.default_rng(seed)
    work = _WORK_DTYPES[dt.kind]
    coef = max_coef
    while True:
        for _ in range(_TRIES_PER_COEF):
            A = random_upper_triangular(size, det, rng, work)
            _mix(A, rng, coef, rounds)
            if _fits(A, dt):
                logger.debug(
                    "random %dx%d %s matrix with det %s:\n%s", size, size, dt, det, A
                )
                return Matrix.from_array(A, dtype=dt)
        if coef == 0:
            raise OverflowError(
                f"could not fit a {size}x{size} matrix with determinant {det} in {dt}"
            )
        coef //= 2
        logger.debug("entries overflow %s, retrying with multipliers up to %d", dt, coef)
