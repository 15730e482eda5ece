# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/csvsaver/numeric.py
import logging
import numbers
import re
import sys

import numpy as np

from csvsaver.errors import TokenParseError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"
DEFAULT_DECIMAL_COMMA = True

# numpy dtype kinds: bool, signed int, unsigned int, floating
ARITHMETIC_KINDS = "biuf"

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)


def resolve_dtype(dtype):
    """Return ``numpy.dtype(dtype)``, rejecting non-arithmetic element types."""
    dt = np.dtype(dtype)
    if dt.kind not in ARITHMETIC_KINDS:
        raise TypeError(f"element type must be an integer, bool or real float, got {dt}")
    return dt


def check_delimiter(delimiter):
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    if delimiter in "\r\n":
        raise ValueError("delimiter cannot be a line terminator")


def format_number(value, decimal_comma=DEFAULT_DECIMAL_COMMA):
    """Encode one element as text.

    Integers (and bools) are written in plain decimal. Floats use the shortest
    positional text that reads back to the same value at the value's own
    precision, so ``numpy.float32(0.1)`` gives ``0.1`` and ``1e20`` is not
    switched to exponent notation. With ``decimal_comma`` every ``.`` becomes
    ``,``.

    Args:
        value: int, float, bool or numpy scalar of those kinds.
        decimal_comma: write ``,`` as the decimal separator.

    Returns:
        str
    """
    if isinstance(value, (bool, np.bool_)):
        return "1" if value else "0"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        text = np.format_float_positional(value, trim="0")
    elif isinstance(value, numbers.Real):
        text = np.format_float_positional(float(value), trim="0")
    else:
        raise TypeError(f"cannot save non-numeric value {value!r} ({type(value).__name__})")
    if decimal_comma:
        text = text.replace(".", ",")
    return text


def _fits(value, dt, literal):
    if dt.kind in "iu":
        info = np.iinfo(dt)
        return info.min <= value <= info.max
    if dt.kind == "f":
        if literal.lstrip("+-")[:1] in ("i", "I", "n", "N"):
            return True
        # a finite literal that overflows the dtype, including to inf in float()
        limit = float(np.finfo(dt).max) if dt.itemsize <= 8 else sys.float_info.max
        return abs(value) <= limit
    return True


def parse_token(token, dtype=float, strict=False):
    """Parse one text token as an element of ``dtype``.

    Works like stream extraction: leading whitespace is skipped and the longest
    numeric prefix is taken, so ``"3.7"`` read as an integer is 3 and
    ``"12abc"`` is 12. A token with no numeric prefix, or whose value does not
    fit the dtype, yields zero.

    With ``strict=True`` the whole token (surrounding whitespace aside) must be
    a number that fits, otherwise TokenParseError is raised.
    """
    dt = resolve_dtype(dtype)
    text = token.strip() if strict else token.lstrip()
    pattern = _FLOAT_RE if dt.kind == "f" else _INT_RE
    m = pattern.fullmatch(text) if strict else pattern.match(text)

    value = None
    if m is not None:
        literal = m.group(0)
        value = float(literal) if dt.kind == "f" else int(literal)
        if dt.kind == "b":
            value = value != 0
        elif not _fits(value, dt, literal):
            value = None

    if value is None:
        if strict:
            raise TokenParseError(token, dt)
        logger.debug("Token %r is not a valid %s, using 0", token, dt)
        return dt.type(0)
    return dt.type(value)
