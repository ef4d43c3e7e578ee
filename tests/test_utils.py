# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from densematrix.utils import check_dtype, permutation_sign, random_upper_triangular


@pytest.mark.parametrize(
    "perm,sign",
    [
        ([0, 1, 2], 1),
        ([1, 0, 2], -1),
        ([1, 2, 0], 1),
        ([3, 2, 1, 0], 1),
        ([], 1),
    ],
)
def test_permutation_sign(perm, sign):
    assert permutation_sign(perm) == sign


def test_check_dtype():
    assert check_dtype("int16") == np.int16
    assert check_dtype(float) == np.float64
    with pytest.raises(TypeError):
        check_dtype(np.complex128)
    with pytest.raises(TypeError):
        check_dtype(bool)


def test_random_upper_triangular_structure():
    rng = np.random.default_rng(0)
    U = random_upper_triangular(5, -9, rng)
    assert U.dtype == np.int64
    np.testing.assert_array_equal(np.tril(U, k=-1), 0)
    np.testing.assert_array_equal(np.diag(U), [1, 1, 1, 1, -9])
    assert np.all(np.abs(U) <= 9)


def test_random_upper_triangular_zero_det():
    rng = np.random.default_rng(1)
    U = random_upper_triangular(4, 0, rng, dtype=np.float64)
    assert np.all(np.triu(U, k=1) == 0)
    assert U[3, 3] == 0
