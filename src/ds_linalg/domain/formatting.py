# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Diagnostic text rendering for matrices.

Output is for humans only; nothing parses it back. Numbers are
right-aligned within a cell, everything else left-aligned.
"""
import numbers

CELL_WIDTH = 4

_HEADER = "Matrix: "


def format_matrix(matrix, cell_width: int = CELL_WIDTH) -> str:
    """Render a matrix row by row, each row bracketed and comma-separated.

    Example for [[1, 2], [3, 4]]:

        Matrix: 
        [    1,    2 ]
        [    3,    4 ]

    An empty matrix renders only the header line.
    """
    lines = [_HEADER]
    num_columns = matrix.column_count
    cells = []
    for i, j in matrix.get_coordinate_iterator():
        cells.append(_format_cell(matrix.get(i, j), cell_width))
        if j == num_columns - 1:
            lines.append("[ " + ", ".join(cells) + " ]")
            cells = []

    return "\n".join(lines) + "\n"


def _format_cell(value, cell_width: int) -> str:
    numeric = isinstance(value, numbers.Number) and not isinstance(value, bool)
    align = ">" if numeric else "<"
    return f"{value!s:{align}{cell_width}}"
