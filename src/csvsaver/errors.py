# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Exception types raised by the csvsaver codec."""

import os


class FileOpenError(OSError):
    """The target file could not be opened for reading or writing."""

    def __init__(self, path):
        self.path = os.fspath(path)
        super().__init__(f"File hasn't been opened: {self.path}")


class TokenParseError(ValueError):
    """A token is not a number of the requested element type (strict mode only).

    Attributes:
        token: the offending text, after the comma rewrite.
        dtype: numpy dtype the token was parsed as.
        line: 1-based line number, or None when parsed outside a file.
        column: 1-based token index within the line, or None.
    """

    def __init__(self, token, dtype, line=None, column=None):
        self.token = token
        self.dtype = dtype
        self.line = line
        self.column = column
        super().__init__(token)

    def __str__(self):
        where = ""
        if self.line is not None:
            where = f" at line {self.line}, column {self.column}"
        return f"Cannot parse {self.token!r} as {self.dtype}{where}"


class RaggedRowsError(ValueError):
    """Rows of a loaded file do not share one width."""

    def __init__(self, line, expected, found):
        self.line = line
        self.expected = expected
        self.found = found
        super().__init__(
            f"Line {line} has {found} values, expected {expected}"
        )
