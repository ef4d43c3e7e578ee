# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Plain text matrix format.

A matrix is written as one line per row with whitespace separated
values. The stream does not carry the dimensions: a reader is told how
many rows and columns to consume, usually from a preceding integer.
"""

import io
import itertools
from typing import Iterator

import numpy as np

from .matrix import Matrix
from .utils import check_dtype


def tokenize(stream) -> Iterator[str]:
    """Lazily yield whitespace separated tokens from a text stream."""
    for line in stream:
        yield from line.split()


def _tokens(source) -> Iterator[str]:
    if isinstance(source, str):
        return iter(source.split())
    if hasattr(source, "readline"):
        return tokenize(source)
    # already an iterator of tokens; share it so the caller can keep reading
    return iter(source)


def read_size(source) -> int:
    """Read the leading matrix order."""
    token = next(_tokens(source), None)
    if token is None:
        raise ValueError("no matrix size in input")
    n = int(token)
    if n < 0:
        raise ValueError(f"matrix size must be >= 0, got {n}")
    return n


def read_matrix(source, rows: int, cols: int, dtype=np.int64) -> Matrix:
    """
    Consume exactly rows * cols tokens into a new matrix.

    Parameters
    ----------
    source : str | text stream | iterator of str
        Where to read from. Tokens after the matrix are left unread
        when an iterator is passed.
    rows, cols : int
        Dimensions of the matrix to fill.
    dtype : numpy dtype
        Element type; integer types parse with `int`, floats with `float`.
    """
    dt = check_dtype(dtype)
    parse = int if dt.kind in "iu" else float
    count = rows * cols
    tokens = list(itertools.islice(_tokens(source), count))
    if len(tokens) < count:
        raise ValueError(f"expected {count} matrix values, got {len(tokens)}")

    data = np.array([parse(tok) for tok in tokens], dtype=dt)
    return Matrix.from_array(data.reshape(rows, cols))


def read_square(source, dtype=np.int64) -> Matrix:
    """Read ``n`` followed by an n x n matrix."""
    tokens = _tokens(source)
    n = read_size(tokens)
    return read_matrix(tokens, n, n, dtype=dtype)


def dump_matrix(matrix: Matrix, stream) -> None:
    """Write `matrix` to `stream`, one line per row."""
    matrix.dump(stream)


def format_matrix(matrix: Matrix) -> str:
    """Text form of `matrix`; every row line ends with a newline."""
    out = io.StringIO()
    dump_matrix(matrix, out)
    return out.getvalue()
