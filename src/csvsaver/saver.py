# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Write numeric arrays as delimiter-separated text.

``save_matrix`` and ``save_vector`` are the only functions that format and
write. Every other entry point copies its input into their canonical shape
first (see ``csvsaver.shapes``) and hands it over.
"""

import logging

from csvsaver.errors import FileOpenError
from csvsaver.numeric import (
    DEFAULT_DECIMAL_COMMA,
    DEFAULT_DELIMITER,
    check_delimiter,
    format_number,
)
from csvsaver.shapes import (
    check_matrix,
    check_vector,
    from_array,
    matrix_from_rows,
    vector_from_buffer,
)

logger = logging.getLogger(__name__)


def _check_format(delimiter, decimal_comma):
    check_delimiter(delimiter)
    if decimal_comma and delimiter == ",":
        logger.warning(
            "Delimiter ',' with decimal comma enabled: floats will not load back correctly"
        )


def _write_lines(path, lines):
    try:
        f = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise FileOpenError(path) from exc
    with f:
        for line in lines:
            f.write(line)
            f.write("\n")
    logger.info("The file %s has been saved", path)


def save_matrix(path, matrix, row, col, delimiter=DEFAULT_DELIMITER,
                decimal_comma=DEFAULT_DECIMAL_COMMA):
    """Save a 2-D list (of lists) to a text file, one row per line.

    Args:
        path: output file, truncated if it exists.
        matrix: indexable of rows, each holding exactly ``col`` numbers.
        row: number of rows to write.
        col: number of values per row.
        delimiter: single separator character between values.
        decimal_comma: write ``,`` instead of ``.`` in floats.

    Raises:
        ValueError: extents do not match ``matrix`` or bad delimiter.
        TypeError: a value is not a real number.
        FileOpenError: the file cannot be opened for writing.
    """
    _check_format(delimiter, decimal_comma)
    row, col = check_matrix(matrix, row, col)
    # all values are encoded before the file is opened
    lines = [
        delimiter.join(format_number(v, decimal_comma) for v in matrix[i])
        for i in range(row)
    ]
    _write_lines(path, lines)


def save_vector(path, vector, size, delimiter=DEFAULT_DELIMITER,
                decimal_comma=DEFAULT_DECIMAL_COMMA):
    """Save a 1-D list of ``size`` numbers as a single line."""
    _check_format(delimiter, decimal_comma)
    size = check_vector(vector, size)
    line = delimiter.join(format_number(vector[i], decimal_comma) for i in range(size))
    _write_lines(path, [line])


def save_row_buffers(path, rows, row, col, delimiter=DEFAULT_DELIMITER,
                     decimal_comma=DEFAULT_DECIMAL_COMMA):
    """Save the leading ``row`` x ``col`` block of a sequence of row buffers.

    ``rows`` can hold ``array.array`` objects, memoryviews, numpy rows or
    lists; buffers longer than ``col`` are cut.
    """
    temp = matrix_from_rows(rows, row, col)
    save_matrix(path, temp, row, col, delimiter, decimal_comma)


def save_buffer(path, buf, size, delimiter=DEFAULT_DELIMITER,
                decimal_comma=DEFAULT_DECIMAL_COMMA):
    """Save the leading ``size`` values of a flat buffer."""
    temp = vector_from_buffer(buf, size)
    save_vector(path, temp, size, delimiter, decimal_comma)


def save_array(path, arr, delimiter=DEFAULT_DELIMITER,
               decimal_comma=DEFAULT_DECIMAL_COMMA):
    """Save a 1-D or 2-D array, taking the extents from its shape."""
    temp, shape = from_array(arr)
    if len(shape) == 2:
        save_matrix(path, temp, shape[0], shape[1], delimiter, decimal_comma)
    else:
        save_vector(path, temp, shape[0], delimiter, decimal_comma)


def save(path, data, *extents, delimiter=DEFAULT_DELIMITER,
         decimal_comma=DEFAULT_DECIMAL_COMMA):
    """Save ``data``, picking the overload from the number of extents given.

        save(path, rows, row, col)  -> save_row_buffers
        save(path, buf, size)       -> save_buffer
        save(path, arr)             -> save_array
    """
    if len(extents) == 2:
        save_row_buffers(path, data, extents[0], extents[1], delimiter, decimal_comma)
    elif len(extents) == 1:
        save_buffer(path, data, extents[0], delimiter, decimal_comma)
    elif not extents:
        save_array(path, data, delimiter, decimal_comma)
    else:
        raise TypeError(f"save() takes at most 2 extents, got {len(extents)}")
