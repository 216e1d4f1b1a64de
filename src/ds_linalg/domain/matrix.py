# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Dense row-major matrix.

Elements live in one flat list; coordinate (r, c) is stored at position
r * column_count + c for the whole lifetime of the matrix.

Element types must satisfy Summable: ``+`` producing the same type and
in-place ``+=``. Python has no per-type default value, so every matrix
carries its own ``zero`` used for fresh cells and as the trace start.

No external dependencies: only stdlib copy, operator and typing.
"""
import copy
import operator
from typing import Any, Generic, List, Protocol, Tuple, TypeVar

from ds_linalg.domain.errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    NonSquareMatrixError,
)
from ds_linalg.domain.formatting import format_matrix

DEFAULT_ZERO = 0


class Summable(Protocol):
    """Element capability required by trace and addition."""

    def __add__(self, other: Any) -> Any:
        ...

    def __iadd__(self, other: Any) -> Any:
        ...


T = TypeVar("T", bound=Summable)


class CoordinateIterator:
    """Row-major cursor over every (row, column) of a given shape.

    Holds a snapshot of the shape only, never the matrix storage.
    Single pass: create a new one to traverse again.
    """

    __slots__ = ("num_rows", "num_columns", "current_row", "current_column")

    def __init__(self, num_rows: int, num_columns: int):
        self.num_rows = num_rows
        self.num_columns = num_columns
        self.current_row = 0
        self.current_column = 0
        if num_columns == 0:
            # No valid coordinate exists in any row.
            self.current_row = num_rows

    def __iter__(self) -> "CoordinateIterator":
        return self

    def __next__(self) -> Tuple[int, int]:
        if self.current_row >= self.num_rows:
            raise StopIteration
        coord = (self.current_row, self.current_column)
        self.current_column += 1
        if self.current_column >= self.num_columns:
            self.current_column = 0
            self.current_row += 1
        return coord

    def __len__(self) -> int:
        """Number of coordinates still to be yielded."""
        if self.current_row >= self.num_rows:
            return 0
        remaining_rows = self.num_rows - self.current_row
        return remaining_rows * self.num_columns - self.current_column


class Matrix(Generic[T]):
    """Fixed-shape 2-D grid of homogeneous elements in row-major order."""

    __slots__ = ("_num_rows", "_num_columns", "_zero", "_values")
    __hash__ = None  # mutable

    def __init__(self, row_count: int, column_count: int, zero: T = DEFAULT_ZERO):
        if not isinstance(row_count, int) or not isinstance(column_count, int):
            raise TypeError(
                f"Dimensions must be integers, got ({row_count!r}, {column_count!r})"
            )
        if row_count < 0 or column_count < 0:
            raise ValueError(
                f"Dimensions must be non-negative, got ({row_count}, {column_count})"
            )
        self._num_rows = row_count
        self._num_columns = column_count
        self._zero = zero
        self._values: List[T] = [zero] * (row_count * column_count)

    @property
    def row_count(self) -> int:
        return self._num_rows

    @property
    def column_count(self) -> int:
        return self._num_columns

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._num_rows, self._num_columns)

    @property
    def zero(self) -> T:
        """Additive identity used for fresh cells and trace."""
        return self._zero

    def is_square(self) -> bool:
        return self._num_rows == self._num_columns

    def get_coordinate_iterator(self) -> CoordinateIterator:
        """Fresh row-major traversal over all (row, column) pairs."""
        return CoordinateIterator(self._num_rows, self._num_columns)

    def get(self, row: int, column: int) -> T:
        return self._values[self._get_index(row, column)]

    def set(self, row: int, column: int, value: T) -> None:
        self._values[self._get_index(row, column)] = value

    def __getitem__(self, coord: Tuple[int, int]) -> T:
        row, column = _unpack_coord(coord)
        return self.get(row, column)

    def __setitem__(self, coord: Tuple[int, int], value: T) -> None:
        row, column = _unpack_coord(coord)
        self.set(row, column, value)

    def calculate_trace(self) -> T:
        """Sum of diagonal elements, accumulated in ascending index order.

        Raises:
            NonSquareMatrixError: If row_count != column_count.
        """
        if not self.is_square():
            raise NonSquareMatrixError(self.shape)

        # Private start value: in-place += must never reach the shared zero.
        trace = copy.copy(self._zero)
        for i in range(self._num_rows):
            trace += self.get(i, i)
        return trace

    def to_flat_list(self) -> List[T]:
        """Copy of the elements in row-major order."""
        return list(self._values)

    def to_nested_list(self) -> List[List[T]]:
        """Copy of the elements as a list of rows."""
        n = self._num_columns
        return [self._values[r * n:(r + 1) * n] for r in range(self._num_rows)]

    def __add__(self, other: "Matrix[T]") -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionMismatchError(self.shape, other.shape)

        output = Matrix(self._num_rows, self._num_columns, self._zero)
        for i, j in self.get_coordinate_iterator():
            output.set(i, j, self.get(i, j) + other.get(i, j))
        return output

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        for i, j in self.get_coordinate_iterator():
            if self.get(i, j) != other.get(i, j):
                return False
        return True

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._num_rows}, columns={self._num_columns})"

    def _get_index(self, row: int, column: int) -> int:
        row = _as_index(row, "row")
        column = _as_index(column, "column")
        if not (0 <= row < self._num_rows and 0 <= column < self._num_columns):
            raise IndexOutOfBoundsError(row, column, self.shape)
        return row * self._num_columns + column


def _as_index(value, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} index must be an integer, got {value!r}"
        ) from None


def _unpack_coord(coord) -> Tuple[int, int]:
    if not isinstance(coord, tuple) or len(coord) != 2:
        raise TypeError(f"Matrix index must be a (row, column) pair, got {coord!r}")
    return coord[0], coord[1]
