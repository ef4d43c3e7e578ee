#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Benchmark: full-pivot `det` against `numpy.linalg.det`.

Generates fixtures with `random_matrix` for a few sizes and element
types, times both implementations (best of `REPEATS`) and prints a
pandas table with the runtime ratio and relative error.
"""

import time

import numpy as np
import pandas as pd

from densematrix import det, random_matrix

REPEATS = 5  # best of 5 runs leads to stable numbers
SIZES = [10, 50, 200]
TARGET_DET = 7


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def main():
    records = []
    for n in SIZES:
        for dtype in (np.int64, np.float64):
            A = random_matrix(n, TARGET_DET, dtype=dtype, seed=n)
            arr = A.to_numpy()

            t_np = min(wall(np.linalg.det, arr) for _ in range(REPEATS))
            t_ours = min(wall(det, A) for _ in range(REPEATS))

            ours = float(det(A))
            ref = float(np.linalg.det(arr))
            records.append(
                (
                    np.dtype(dtype).name,
                    f"{n}x{n}",
                    t_ours,
                    t_ours / t_np,
                    ours,
                    abs(ours - ref) / max(1.0, abs(ref)),
                )
            )

    df = pd.DataFrame(
        records,
        columns=["dtype", "size", "sec", "sec/NumPy", "det", "rel_err/NumPy"],
    )
    print(df.to_string(index=False))
    df.to_csv("bench_det_results.csv", index=False)


if __name__ == "__main__":
    main()
