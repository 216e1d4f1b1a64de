# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
NumPy interop for Matrix.

External dependency (numpy) is confined to this adapter; the domain layer
stays pure Python.
"""
import logging

import numpy as np

from ds_linalg.domain.conversions import to_matrix_with_stride
from ds_linalg.domain.matrix import Matrix

logger = logging.getLogger(__name__)


def to_ndarray(matrix: Matrix, dtype=None) -> np.ndarray:
    """Copy a matrix into a 2-D array of shape (row_count, column_count)."""
    flat = np.array(matrix.to_flat_list(), dtype=dtype)
    return flat.reshape(matrix.row_count, matrix.column_count)


def from_ndarray(array) -> Matrix:
    """Build a matrix from a 2-D array, reading it in row-major order.

    Elements become Python scalars; the matrix zero is the dtype's zero.

    Raises:
        ValueError: If the array is not two-dimensional.
        EmptyInputError: If the array has no elements.
    """
    array = np.asarray(array)
    if array.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got ndim={array.ndim}")

    if not array.flags["C_CONTIGUOUS"]:
        logger.warning(
            "Copying non C-contiguous array of shape %s to read it row-major",
            array.shape,
        )
        array = np.ascontiguousarray(array)

    zero = np.zeros((), dtype=array.dtype).item()
    return to_matrix_with_stride(array.ravel().tolist(), int(array.shape[1]), zero)
