# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense row-major matrix container.

A `Matrix` owns one C-contiguous ndarray of shape (rows, cols); its
dtype is the element type. Element access goes through `RowView`, a
thin non-owning window over a single row that checks column bounds.
"""

import logging

import numpy as np

from .determinant import det as _det
from .errors import DimensionMismatch, DivideByZero, OutOfRange
from .utils import check_dtype

logger = logging.getLogger(__name__)


def _check_index(index, count: int, what: str) -> int:
    # bool is an int subclass but never a sensible index
    if isinstance(index, (bool, np.bool_)) or not isinstance(
        index, (int, np.integer)
    ):
        raise TypeError(f"{what} index must be an integer, got {type(index).__name__}")
    if not 0 <= index < count:
        raise OutOfRange(f"{what} {index} is out of range [0, {count})")
    return int(index)


def _empty(dtype) -> np.ndarray:
    return np.empty((0, 0), dtype=dtype)


class RowView:
    """
    Bounds-checked reference to one row of a `Matrix`.

    The view shares memory with the matrix. It must not be used once the
    matrix has been transposed in place, released, swapped or assigned
    to: it keeps pointing at the buffer the matrix owned at creation.
    """

    __slots__ = ("_row",)

    def __init__(self, row: np.ndarray):
        self._row = row

    def __len__(self) -> int:
        return self._row.shape[0]

    def __getitem__(self, col):
        return self._row[_check_index(col, len(self), "column")]

    def __setitem__(self, col, value) -> None:
        self._row[_check_index(col, len(self), "column")] = value

    def __iter__(self):
        return iter(self._row)

    def tolist(self) -> list:
        return self._row.tolist()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._row.tolist()})"


class Matrix:
    """
    R x C dense matrix of a numeric element type.

    Parameters
    ----------
    rows, cols : int
        Dimensions, either may be 0 (a valid, empty matrix).
    fill : scalar
        Initial value of every element.
    dtype : numpy dtype
        Element type; any signed/unsigned integer or floating type.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int = 0, cols: int = 0, fill=0, dtype=np.float64):
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be >= 0, got {rows}x{cols}")
        self._data = np.full((rows, cols), fill, dtype=check_dtype(dtype))

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------
    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        """Adopt `data` as the buffer of a new matrix, no copy."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def from_array(cls, array, dtype=None) -> "Matrix":
        """Copy a 2-D array-like into a new matrix."""
        data = np.array(array, dtype=dtype, order="C", copy=True)
        if data.ndim != 2:
            raise DimensionMismatch(f"expected a 2-D array, got {data.ndim}-D")
        check_dtype(data.dtype)
        return cls._wrap(data)

    @classmethod
    def from_rows(cls, rows, dtype=None) -> "Matrix":
        rows = [list(r) for r in rows]
        if not rows:
            return cls(0, 0, dtype=np.float64 if dtype is None else dtype)
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise DimensionMismatch("all rows must have the same length")
        if width == 0:
            return cls(len(rows), 0, dtype=np.float64 if dtype is None else dtype)
        return cls.from_array(rows, dtype=dtype)

    @classmethod
    def identity(cls, n: int, dtype=np.float64) -> "Matrix":
        return cls._wrap(np.eye(n, dtype=check_dtype(dtype)))

    @classmethod
    def random(cls, size: int, det, dtype=np.int64, seed=None) -> "Matrix":
        """Random dense matrix with determinant exactly `det`."""
        from .random_matrix import random_matrix

        return random_matrix(size, det, dtype=dtype, seed=seed)

    # -----------------------------------------------------------------
    # Shape
    # -----------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def empty(self) -> bool:
        return self._data.size == 0

    # -----------------------------------------------------------------
    # Copy / move
    # -----------------------------------------------------------------
    def copy(self) -> "Matrix":
        return self._wrap(self._data.copy())

    def astype(self, dtype) -> "Matrix":
        """
        Element-wise converted copy. Float to integer conversion
        truncates toward zero (numpy casting rules).
        """
        return self._wrap(self._data.astype(check_dtype(dtype), copy=True))

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other: "Matrix") -> "Matrix":
        """
        Copy-assign the values of `other` into self, converting them to
        self's element type. If the new buffer cannot be allocated the
        matrix is left empty and the error propagates.
        """
        if other is self:
            return self
        try:
            data = other._data.astype(self.dtype, copy=True)
        except MemoryError:
            logger.error(
                "could not allocate a %dx%d buffer, matrix left empty",
                other.rows,
                other.cols,
            )
            self._data = _empty(self.dtype)
            raise
        self._data = data
        return self

    def release(self) -> "Matrix":
        """Move the buffer into a new matrix; self becomes 0 x 0."""
        moved = self._wrap(self._data)
        self._data = _empty(self.dtype)
        return moved

    def swap(self, other: "Matrix") -> None:
        self._data, other._data = other._data, self._data

    # -----------------------------------------------------------------
    # Element access
    # -----------------------------------------------------------------
    def row(self, i) -> RowView:
        return RowView(self._data[_check_index(i, self.rows, "row")])

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._data[
                _check_index(i, self.rows, "row"), _check_index(j, self.cols, "column")
            ]
        return self.row(key)

    def __setitem__(self, key, value) -> None:
        if not isinstance(key, tuple):
            raise TypeError("assign single elements with m[i, j] or m[i][j]")
        i, j = key
        self._data[
            _check_index(i, self.rows, "row"), _check_index(j, self.cols, "column")
        ] = value

    def __iter__(self):
        for i in range(self.rows):
            yield RowView(self._data[i])

    def __array__(self, dtype=None, copy=None):
        if dtype is None and not copy:
            return self._data
        return np.array(self._data, dtype=dtype, copy=True)

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def tolist(self) -> list:
        return self._data.tolist()

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------
    def transpose(self) -> "Matrix":
        """Transpose in place by swapping in a freshly laid out buffer."""
        self._data = np.ascontiguousarray(self._data.T)
        return self

    def transposed(self) -> "Matrix":
        return self.copy().transpose()

    __invert__ = transposed

    def add(self, other: "Matrix") -> "Matrix":
        if self.shape != other.shape:
            raise DimensionMismatch(
                f"cannot add a {other.rows}x{other.cols} matrix "
                f"to a {self.rows}x{self.cols} matrix"
            )
        np.add(self._data, np.asarray(other), out=self._data, casting="unsafe")
        return self

    def scale_divide(self, scalar) -> "Matrix":
        """
        Divide every element by `scalar` in place. Integer matrices keep
        their element type and round the quotient toward zero, as C
        integer division does (-7 / 2 == -3).
        """
        if scalar == 0:
            raise DivideByZero("cannot divide a matrix by zero")
        if self.dtype.kind in "iu":
            quotient, remainder = np.divmod(self._data, scalar)
            # divmod floors; step back toward zero where the signs differ
            inexact = (remainder != 0) & ((self._data < 0) != (scalar < 0))
            quotient[inexact] += 1
            np.copyto(self._data, quotient, casting="unsafe")
        else:
            np.true_divide(self._data, scalar, out=self._data, casting="unsafe")
        return self

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Replace self with the product self @ other.

        The right operand is transposed first so that every dot product
        runs along two contiguous rows.
        """
        if self.cols != other.rows:
            raise DimensionMismatch(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}: "
                "inner dimensions differ"
            )
        right_t = np.ascontiguousarray(np.asarray(other).T)
        product = np.zeros((self.rows, other.cols), dtype=self.dtype)
        for i, row in enumerate(self._data):
            product[i] = right_t @ row
        self._data = product
        return self

    def __iadd__(self, other):
        return self.add(other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.copy().add(other)

    def __itruediv__(self, scalar):
        return self.scale_divide(scalar)

    def __truediv__(self, scalar):
        return self.copy().scale_divide(scalar)

    def __imatmul__(self, other):
        return self.multiply(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.copy().multiply(other)

    def det(self):
        """Determinant, see `densematrix.determinant.det`."""
        return _det(self)

    # -----------------------------------------------------------------
    # Comparison / text
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None

    def dump(self, out) -> None:
        """Write one line per row, values separated by single spaces."""
        for row in self._data.tolist():
            out.write(" ".join(str(v) for v in row) + "\n")

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self._data.tolist())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data.tolist()!r}, dtype={self.dtype})"
