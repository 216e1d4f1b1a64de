# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Error taxonomy for matrix construction and operations.

Every failure is a subclass of MatrixError, itself a ValueError, so callers
can catch one kind precisely or all of them at once.
"""


class MatrixError(ValueError):
    """Base class for all ds_linalg failures."""


class EmptyInputError(MatrixError):
    """Conversion source (or its first row) has no elements."""


class RaggedInputError(MatrixError):
    """Nested conversion input whose rows differ in length."""

    def __init__(self, row_index: int, expected: int, actual: int):
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_index} has {actual} elements, expected {expected}"
        )


class StrideMismatchError(MatrixError):
    """Flat conversion input whose length is not a multiple of the stride."""

    def __init__(self, length: int, stride: int):
        self.length = length
        self.stride = stride
        if stride <= 0:
            message = f"stride must be positive, got {stride}"
        else:
            message = (
                f"Sequence length {length} is not a whole multiple of stride {stride}"
            )
        super().__init__(message)


class DimensionMismatchError(MatrixError):
    """Operands of an element-wise operation have different shapes."""

    def __init__(self, left_shape: tuple, right_shape: tuple):
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(
            f"Incorrect dimensions for addition: {left_shape} vs {right_shape}"
        )


class NonSquareMatrixError(MatrixError):
    """Operation defined only for square matrices."""

    def __init__(self, shape: tuple):
        self.shape = shape
        super().__init__(f"Cannot calculate trace of non-square matrix {shape}")


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Coordinate outside the matrix shape."""

    def __init__(self, row: int, column: int, shape: tuple):
        self.row = row
        self.column = column
        self.shape = shape
        super().__init__(f"Coordinate ({row}, {column}) out of bounds for shape {shape}")
