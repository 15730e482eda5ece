# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/csvsaver/loader.py
import logging

import numpy as np

from csvsaver.errors import FileOpenError, RaggedRowsError, TokenParseError
from csvsaver.numeric import (
    DEFAULT_DECIMAL_COMMA,
    DEFAULT_DELIMITER,
    check_delimiter,
    parse_token,
    resolve_dtype,
)

logger = logging.getLogger(__name__)

COMMA_RULES = ("always", "flag")
RAGGED_POLICIES = ("last", "max", "error")


def _row_width(widths, ragged):
    if not widths:
        return 0
    if ragged == "error":
        for lineno, width in enumerate(widths, start=1):
            if width != widths[0]:
                raise RaggedRowsError(lineno, widths[0], width)
        return widths[0]
    if min(widths) != max(widths):
        logger.warning(
            "Rows have differing lengths (%d to %d values), reporting the %s width",
            min(widths), max(widths), ragged,
        )
    return widths[-1] if ragged == "last" else max(widths)


def load(path, dtype=float, delimiter=DEFAULT_DELIMITER,
         decimal_comma=DEFAULT_DECIMAL_COMMA, *, strict=False,
         comma_rule="always", ragged="last"):
    """Read a delimited text file into a list of rows.

    Each line becomes one row; tokens are split on ``delimiter`` (a trailing
    delimiter gives a trailing empty token, an empty line gives an empty row).
    Every ``,`` in a token is turned into ``.`` before parsing. With the
    default ``comma_rule="always"`` this happens whatever ``decimal_comma``
    says; ``comma_rule="flag"`` only does it when ``decimal_comma`` is true.

    Tokens that are not numbers become 0 unless ``strict`` is set.

    Args:
        path: file to read.
        dtype: numpy element type (int, float, np.float32, ...).
        delimiter: single separator character.
        decimal_comma: file uses ``,`` as the decimal separator.
        strict: raise TokenParseError on unparsable tokens.
        comma_rule: "always" or "flag", see above.
        ragged: how ``col`` is reported when rows differ in length:
            "last" (width of the last row), "max", or "error"
            (raise RaggedRowsError).

    Returns:
        (matrix, row, col): list of lists of ``dtype`` scalars, number of
        lines read, and the row width per ``ragged``.
    """
    dt = resolve_dtype(dtype)
    check_delimiter(delimiter)
    if comma_rule not in COMMA_RULES:
        raise ValueError(f"comma_rule must be one of {COMMA_RULES}, got {comma_rule!r}")
    if ragged not in RAGGED_POLICIES:
        raise ValueError(f"ragged must be one of {RAGGED_POLICIES}, got {ragged!r}")
    rewrite_commas = comma_rule == "always" or decimal_comma

    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FileOpenError(path) from exc

    matrix = []
    widths = []
    with f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip("\n")
            tokens = line.split(delimiter) if line else []
            values = []
            for column, token in enumerate(tokens, start=1):
                if rewrite_commas:
                    token = token.replace(",", ".")
                try:
                    values.append(parse_token(token, dt, strict=strict))
                except TokenParseError as exc:
                    exc.line = lineno
                    exc.column = column
                    raise
            matrix.append(values)
            widths.append(len(tokens))

    row = len(matrix)
    col = _row_width(widths, ragged)
    logger.info("The file %s has been loaded (%d rows, %d columns)", path, row, col)
    return matrix, row, col


def load_array(path, dtype=float, delimiter=DEFAULT_DELIMITER,
               decimal_comma=DEFAULT_DECIMAL_COMMA, *, strict=False,
               comma_rule="always"):
    """Load a rectangular file as a 2-D numpy array of ``dtype``.

    Same parsing as :func:`load`; rows of different lengths raise
    RaggedRowsError. An empty file gives a (0, 0) array.
    """
    dt = resolve_dtype(dtype)
    matrix, row, col = load(
        path, dt, delimiter, decimal_comma,
        strict=strict, comma_rule=comma_rule, ragged="error",
    )
    if row == 0:
        return np.empty((0, 0), dtype=dt)
    return np.array(matrix, dtype=dt).reshape(row, col)
