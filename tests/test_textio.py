# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import io

import numpy as np
import pytest

from densematrix.matrix import Matrix
from densematrix.textio import (
    dump_matrix,
    format_matrix,
    read_matrix,
    read_size,
    read_square,
    tokenize,
)


def test_tokenize_ignores_layout():
    stream = io.StringIO("1  2\n\n 3\t4\n")
    assert list(tokenize(stream)) == ["1", "2", "3", "4"]


def test_read_matrix_from_text():
    A = read_matrix("1 2 3\n4 5 6\n", 2, 3)
    assert A.dtype == np.int64
    assert A.tolist() == [[1, 2, 3], [4, 5, 6]]


def test_layout_does_not_matter():
    A = read_matrix("1 2\n3\n4 5 6", 3, 2)
    assert A.tolist() == [[1, 2], [3, 4], [5, 6]]


def test_read_float():
    A = read_matrix(io.StringIO("0.5 -1e2\n"), 1, 2, dtype=np.float64)
    assert A.tolist() == [[0.5, -100.0]]


def test_reads_exactly_rows_times_cols():
    tokens = tokenize(io.StringIO("1 2 3 4 99\n"))
    A = read_matrix(tokens, 2, 2)
    assert A.tolist() == [[1, 2], [3, 4]]
    assert next(tokens) == "99"


def test_too_few_values():
    with pytest.raises(ValueError, match="expected 4"):
        read_matrix("1 2 3", 2, 2)


def test_bad_token():
    with pytest.raises(ValueError):
        read_matrix("1 x", 1, 2)


def test_read_size():
    assert read_size("3 1 2") == 3
    with pytest.raises(ValueError):
        read_size("")
    with pytest.raises(ValueError):
        read_size("-2")


def test_read_square():
    A = read_square(io.StringIO("2\n0 1\n1 0\n"))
    assert A.shape == (2, 2)
    assert A.det() == -1


def test_dump_matrix():
    out = io.StringIO()
    dump_matrix(Matrix.from_rows([[1, 2], [3, 4]]), out)
    assert out.getvalue() == "1 2\n3 4\n"


def test_write_then_read():
    A = Matrix.from_rows([[5, -1, 0], [2, 2, 9]])
    out = io.StringIO()
    dump_matrix(A, out)
    assert read_matrix(out.getvalue(), 2, 3) == A


def test_format_matrix():
    A = Matrix.from_rows([[1.5, -2.0]])
    assert format_matrix(A) == "1.5 -2.0\n"
    assert format_matrix(Matrix(0, 0)) == ""
    assert read_matrix(format_matrix(A), 1, 2, dtype=np.float64) == A
