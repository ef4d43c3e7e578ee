# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from densematrix.determinant import det
from densematrix.matrix import Matrix
from densematrix.random_matrix import random_matrix

TEST_ITERATIONS = 25
logger = logging.getLogger(__name__)


def test_three_by_three_has_det_ten():
    for _ in range(TEST_ITERATIONS):
        A = random_matrix(3, 10)
        logger.debug(f"\nRandom matrix:\n{A}\n")
        assert A.shape == (3, 3)
        assert A.dtype == np.int64
        assert det(A) == 10


@pytest.mark.parametrize("size", [1, 2, 3, 4])
@pytest.mark.parametrize("target", [1, -1, 0, 7, -12, 25])
def test_exact_determinant(size, target):
    A = random_matrix(size, target, seed=size * 1000 + target)
    assert det(A) == target


def test_agrees_with_numpy():
    A = random_matrix(4, 12, seed=3)
    assert round(np.linalg.det(A.to_numpy().astype(float))) == 12


def test_zero_determinant_is_singular():
    A = random_matrix(5, 0, seed=11)
    assert det(A) == 0
    assert np.linalg.matrix_rank(A.to_numpy()) < 5


def test_seed_is_reproducible():
    assert random_matrix(5, 9, seed=1) == random_matrix(5, 9, seed=1)


def test_triangle_is_hidden():
    A = random_matrix(6, 30, seed=7, rounds=2).to_numpy()
    # at least one entry below the diagonal has been filled in
    assert np.any(np.tril(A, k=-1) != 0)


def test_multiple_rounds_keep_determinant():
    A = random_matrix(3, -8, seed=5, max_coef=2, rounds=3)
    assert det(A) == -8


def test_float_dtype_close_to_target():
    A = random_matrix(4, 10, dtype=np.float64, seed=2)
    assert A.dtype == np.float64
    assert det(A) == pytest.approx(10.0, rel=1e-6)


def test_small_integer_dtype():
    A = random_matrix(3, 2, dtype=np.int32, seed=4, max_coef=2)
    assert A.dtype == np.int32
    assert det(A) == 2


def test_unsigned_dtype():
    A = random_matrix(3, 6, dtype=np.uint32, seed=8)
    assert A.dtype == np.uint32
    assert det(A) == 6
    with pytest.raises(ValueError):
        random_matrix(3, -6, dtype=np.uint32)


def test_invalid_size():
    with pytest.raises(ValueError):
        random_matrix(0, 1)


def test_classmethod():
    A = Matrix.random(4, 3, seed=0)
    assert isinstance(A, Matrix)
    assert A.det() == 3


@pytest.mark.parametrize("dtype", [np.int8, np.int16, np.uint8])
def test_narrow_integer_types_stay_exact(dtype):
    for seed in range(20):
        A = random_matrix(3, 100, dtype=dtype, seed=seed)
        assert A.dtype == dtype
        # evaluate in a wide type so nothing can wrap on the way back
        assert det(A.astype(np.int64)) == 100
        assert det(A) == 100


def test_entries_fit_requested_type():
    info = np.iinfo(np.int8)
    for seed in range(10):
        A = random_matrix(5, -50, dtype=np.int8, seed=seed).to_numpy()
        assert A.min() >= info.min and A.max() <= info.max


def test_target_outside_dtype_range():
    with pytest.raises(OverflowError):
        random_matrix(3, 300, dtype=np.int8)
