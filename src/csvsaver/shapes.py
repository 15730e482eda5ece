# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Copy alternate input shapes into the canonical list / list-of-lists form.

The canonical writers only ever see a plain list (1-D) or a list of lists
(2-D). Buffers, numpy arrays and other indexables are copied element by
element here, after their extents have been checked, so a bad extent is
reported before any file is touched.
"""

import numbers

import numpy as np


def check_extent(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return int(value)


def check_matrix(matrix, row, col):
    """Validate that ``matrix`` has at least ``row`` rows of exactly ``col`` values."""
    row = check_extent("row", row)
    col = check_extent("col", col)
    if len(matrix) < row:
        raise ValueError(f"matrix has {len(matrix)} rows, expected {row}")
    for i in range(row):
        if len(matrix[i]) != col:
            raise ValueError(f"row {i} has {len(matrix[i])} values, expected {col}")
    return row, col


def check_vector(vector, size):
    size = check_extent("size", size)
    if len(vector) != size:
        raise ValueError(f"vector has {len(vector)} values, expected {size}")
    return size


def matrix_from_rows(rows, row, col):
    """Deep-copy the leading ``row`` x ``col`` block of an indexable of row buffers.

    Rows may be longer than ``col`` (only the leading values are copied), but
    never shorter.
    """
    row = check_extent("row", row)
    col = check_extent("col", col)
    if len(rows) < row:
        raise ValueError(f"got {len(rows)} row buffers, expected {row}")
    temp = []
    for i in range(row):
        buf = rows[i]
        if len(buf) < col:
            raise ValueError(f"row buffer {i} holds {len(buf)} values, expected {col}")
        temp.append([buf[j] for j in range(col)])
    return temp


def vector_from_buffer(buf, size):
    """Deep-copy the leading ``size`` values of a buffer."""
    size = check_extent("size", size)
    if len(buf) < size:
        raise ValueError(f"buffer holds {len(buf)} values, expected {size}")
    return [buf[i] for i in range(size)]


def from_array(arr):
    """Copy a 1-D or 2-D array-like, taking its extents from its shape.

    Elements keep their numpy scalar type, so a float32 array is formatted at
    float32 precision.

    Returns:
        (values, extents): ``values`` is a list (1-D) or list of lists (2-D),
        ``extents`` is ``(size,)`` or ``(row, col)``.
    """
    a = np.asarray(arr)
    if a.ndim == 1:
        return [a[i] for i in range(a.shape[0])], a.shape
    if a.ndim == 2:
        n_row, n_col = a.shape
        return [[a[i, j] for j in range(n_col)] for i in range(n_row)], a.shape
    raise ValueError(f"only 1-D and 2-D arrays can be saved, got {a.ndim}-D")
