# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Build matrices from plain Python sequences.

Two layouts are accepted:

- a sequence of rows (outer index is the row, inner index the column);
- a flat sequence plus a stride, the number of columns, read row-major.

Both validate the whole input before any matrix is returned.
"""
import logging
from typing import Iterable, List

from ds_linalg.domain.errors import (
    EmptyInputError,
    RaggedInputError,
    StrideMismatchError,
)
from ds_linalg.domain.matrix import DEFAULT_ZERO, Matrix

logger = logging.getLogger(__name__)


def to_matrix(rows: Iterable[Iterable], zero=DEFAULT_ZERO) -> Matrix:
    """Convert a sequence of rows into a matrix.

    Args:
        rows: Outer iterable of rows; every row must have the same length.
        zero: Additive identity for the resulting matrix.

    Returns:
        Matrix with len(rows) rows and len(rows[0]) columns.

    Raises:
        EmptyInputError: If there are no rows or the first row is empty.
        RaggedInputError: If any row length differs from the first.
    """
    materialised: List[list] = [list(row) for row in rows]
    if len(materialised) == 0 or len(materialised[0]) == 0:
        logger.debug("Rejected nested input: no rows or empty first row")
        raise EmptyInputError("Cannot convert empty sequence to matrix")

    num_rows = len(materialised)
    num_columns = len(materialised[0])
    for row_index, row in enumerate(materialised):
        if len(row) != num_columns:
            logger.debug(
                "Rejected nested input: row %d has %d elements, expected %d",
                row_index, len(row), num_columns,
            )
            raise RaggedInputError(row_index, num_columns, len(row))

    out_matrix = Matrix(num_rows, num_columns, zero)
    for row_index, row in enumerate(materialised):
        for column_index, value in enumerate(row):
            out_matrix.set(row_index, column_index, value)

    logger.debug("Built %dx%d matrix from nested input", num_rows, num_columns)
    return out_matrix


def to_matrix_with_stride(values: Iterable, stride: int, zero=DEFAULT_ZERO) -> Matrix:
    """Reshape a flat sequence into a matrix with ``stride`` columns.

    Element i lands at (i // stride, i % stride).

    Raises:
        EmptyInputError: If ``values`` is empty.
        StrideMismatchError: If stride <= 0 or len(values) is not a
            whole multiple of stride.
    """
    materialised = list(values)
    num_elements = len(materialised)
    if num_elements == 0:
        logger.debug("Rejected flat input: no elements")
        raise EmptyInputError("Cannot convert empty sequence to matrix")

    if stride <= 0 or num_elements % stride != 0:
        logger.debug(
            "Rejected flat input: length %d incompatible with stride %d",
            num_elements, stride,
        )
        raise StrideMismatchError(num_elements, stride)

    num_rows = num_elements // stride
    out_matrix = Matrix(num_rows, stride, zero)
    for i, value in enumerate(materialised):
        out_matrix.set(i // stride, i % stride, value)

    logger.debug("Built %dx%d matrix from flat input", num_rows, stride)
    return out_matrix
