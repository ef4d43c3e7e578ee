# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

# Absolute pivot tolerance. It does NOT scale with the matrix magnitude,
# so very small well-conditioned matrices can be reported as singular.
EPSILON: float = 1e-14

# Largest multiplier used when mixing rows/columns of a generated matrix
MAX_COEF: int = 5

_SUPPORTED_KINDS = "iuf"


def check_dtype(dtype) -> np.dtype:
    """Normalise `dtype` and reject anything that is not an int or float type."""
    dt = np.dtype(dtype)
    if dt.kind not in _SUPPORTED_KINDS:
        raise TypeError(f"unsupported element type {dt}; need an integer or float")
    return dt


def permutation_sign(perm) -> int:
    """
    Sign of a permutation given as an index array.

    Walks each cycle once; a cycle of length k is k - 1 transpositions,
    so the sign is odd exactly when ``n - #cycles`` is odd.
    """
    n = len(perm)
    seen = np.zeros(n, dtype=bool)
    parity = 0
    for start in range(n):
        length = 0
        j = start
        while not seen[j]:
            seen[j] = True
            j = perm[j]
            length += 1
        if length:
            parity ^= (length - 1) & 1
    return -1 if parity else 1


def random_upper_triangular(
    size: int, det, rng: np.random.Generator, dtype=np.int64
) -> np.ndarray:
    """
    Build an upper-triangular matrix whose determinant is exactly `det`.

    The diagonal is all ones except the bottom-right entry, which holds
    `det`. Entries above the diagonal are drawn uniformly from
    [-|det|, |det|] (integers for integer dtypes, reals otherwise;
    unsigned dtypes use [0, |det|]).

    Returns
    -------
    (size, size) ndarray with the requested dtype
    """
    dt = check_dtype(dtype)
    bound = abs(det)
    # unsigned types cannot hold negative entries
    low = 0 if dt.kind == "u" else -bound
    if dt.kind in "iu":
        upper = rng.integers(low, bound, size=(size, size), endpoint=True)
    else:
        upper = rng.uniform(low, bound, size=(size, size))

    U = np.triu(upper, k=1).astype(dt)
    U[np.diag_indices(size)] = 1
    U[size - 1, size - 1] = det
    return U
