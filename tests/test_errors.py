# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/errors.py: matrix error taxonomy."""
import ast

import pytest

from ds_linalg.domain.errors import (
    DimensionMismatchError,
    EmptyInputError,
    IndexOutOfBoundsError,
    MatrixError,
    NonSquareMatrixError,
    RaggedInputError,
    StrideMismatchError,
)


class TestHierarchy:
    @pytest.mark.parametrize("error", [
        EmptyInputError("empty"),
        RaggedInputError(1, 2, 3),
        StrideMismatchError(5, 2),
        DimensionMismatchError((2, 2), (3, 3)),
        NonSquareMatrixError((3, 2)),
        IndexOutOfBoundsError(4, 0, (2, 2)),
    ])
    def test_all_are_matrix_errors(self, error):
        assert isinstance(error, MatrixError)
        assert isinstance(error, ValueError)

    def test_out_of_bounds_is_index_error(self):
        assert isinstance(IndexOutOfBoundsError(0, 9, (1, 1)), IndexError)


class TestMessages:
    def test_ragged_message(self):
        assert str(RaggedInputError(1, 2, 3)) == "Row 1 has 3 elements, expected 2"

    def test_stride_message(self):
        assert "not a whole multiple of stride 2" in str(StrideMismatchError(5, 2))

    def test_non_positive_stride_message(self):
        assert str(StrideMismatchError(4, 0)) == "stride must be positive, got 0"

    def test_dimension_message_names_shapes(self):
        message = str(DimensionMismatchError((2, 2), (3, 3)))
        assert "(2, 2)" in message and "(3, 3)" in message

    def test_out_of_bounds_message(self):
        assert str(IndexOutOfBoundsError(4, 0, (2, 2))) == (
            "Coordinate (4, 0) out of bounds for shape (2, 2)"
        )


class TestErrorsPurity:
    def test_module_pure(self):
        import ds_linalg.domain.errors as mod
        source = ast.parse(open(mod.__file__).read())
        imports = [
            node for node in ast.walk(source)
            if isinstance(node, (ast.Import, ast.ImportFrom))
        ]
        assert imports == [], "errors module must not import anything"
