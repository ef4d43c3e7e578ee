#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Command line entry point.

    $ printf '2\n0 1\n1 0\n' | python -m densematrix
    -1
"""

import argparse
import logging
import sys

from .random_matrix import random_matrix
from .textio import read_square


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="densematrix",
        description="Read n and an n x n matrix, print its determinant.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default="-",
        help="File holding the matrix (default: stdin)",
    )
    parser.add_argument(
        "--dtype", default="int64", help="Element type, e.g. int64 or float64"
    )
    parser.add_argument(
        "--random",
        type=int,
        metavar="N",
        help="Print a random N x N matrix instead of reading one",
    )
    parser.add_argument(
        "--det", type=int, default=1, help="Determinant of the --random matrix"
    )
    parser.add_argument("--seed", type=int, help="Seed for --random")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.random is not None:
        matrix = random_matrix(args.random, args.det, dtype=args.dtype, seed=args.seed)
        print(args.random)
        matrix.dump(sys.stdout)
        return 0

    matrix = read_square(args.input, dtype=args.dtype)
    print(matrix.det())
    return 0


if __name__ == "__main__":
    sys.exit(main())
