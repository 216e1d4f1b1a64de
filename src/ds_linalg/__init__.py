# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
ds_linalg

Minimal dense matrix library: row-major storage, element access,
coordinate traversal, addition, trace, and conversion from nested or
flat sequences.
"""

from ds_linalg.domain.errors import (
    MatrixError,
    EmptyInputError,
    RaggedInputError,
    StrideMismatchError,
    DimensionMismatchError,
    NonSquareMatrixError,
    IndexOutOfBoundsError,
)
from ds_linalg.domain.matrix import (
    DEFAULT_ZERO,
    Summable,
    CoordinateIterator,
    Matrix,
)
from ds_linalg.domain.formatting import (
    CELL_WIDTH,
    format_matrix,
)
from ds_linalg.domain.conversions import (
    to_matrix,
    to_matrix_with_stride,
)

__version__ = "0.1.0"

__all__ = [
    "MatrixError",
    "EmptyInputError",
    "RaggedInputError",
    "StrideMismatchError",
    "DimensionMismatchError",
    "NonSquareMatrixError",
    "IndexOutOfBoundsError",
    "DEFAULT_ZERO",
    "Summable",
    "CoordinateIterator",
    "Matrix",
    "CELL_WIDTH",
    "format_matrix",
    "to_matrix",
    "to_matrix_with_stride",
]
