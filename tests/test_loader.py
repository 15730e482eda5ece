# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_loader.py
import logging

import numpy as np
import pytest

from csvsaver.errors import FileOpenError, RaggedRowsError, TokenParseError
from csvsaver.loader import load, load_array


def _write(tmp_path, text, name="data.csv"):
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return path


def test_load_integers(tmp_path):
    path = _write(tmp_path, "1;2;3\n4;5;6\n")
    matrix, row, col = load(path, int)
    assert matrix == [[1, 2, 3], [4, 5, 6]]
    assert (row, col) == (2, 3)


def test_load_decimal_comma(tmp_path):
    path = _write(tmp_path, "3,5;1,25\n-0,5;2\n")
    matrix, row, col = load(str(path))
    assert matrix == [[3.5, 1.25], [-0.5, 2.0]]
    assert isinstance(matrix[0][0], np.float64)


def test_load_garbage_becomes_zero(tmp_path):
    """Unparsable tokens are absorbed, not raised."""
    path = _write(tmp_path, "1;abc;3\n")
    matrix, row, col = load(path, int)
    assert matrix == [[1, 0, 3]]


def test_trailing_delimiter_gives_empty_token(tmp_path):
    path = _write(tmp_path, "1;2;\n")
    matrix, row, col = load(path, int)
    assert matrix == [[1, 2, 0]]
    assert col == 3


def test_empty_line_is_empty_row(tmp_path):
    path = _write(tmp_path, "1;2\n\n3;4\n")
    matrix, row, col = load(path, int)
    assert matrix == [[1, 2], [], [3, 4]]
    assert (row, col) == (3, 2)


def test_invalid_utf8_becomes_zero(tmp_path):
    """Bytes that are not UTF-8 end up in a garbage token, not a decode error."""
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"1;2;caf\xe9\n")
    matrix, row, col = load(path, int)
    assert matrix == [[1, 2, 0]]
    assert (row, col) == (1, 3)
    with pytest.raises(TokenParseError) as excinfo:
        load(path, int, strict=True)
    assert excinfo.value.column == 3


def test_crlf_line_endings(tmp_path):
    path = _write(tmp_path, "1;2\r\n3;4\r\n")
    matrix, row, col = load(path, int)
    assert matrix == [[1, 2], [3, 4]]


def test_empty_file(tmp_path):
    path = _write(tmp_path, "")
    assert load(path) == ([], 0, 0)


def test_ragged_reports_last_row_width(tmp_path):
    """Rows of lengths [3, 3, 2] report col == 2 by default."""
    path = _write(tmp_path, "1;2;3\n4;5;6\n7;8\n")
    matrix, row, col = load(path, int)
    assert row == 3
    assert col == 2
    assert matrix[2] == [7, 8]


def test_ragged_max(tmp_path):
    path = _write(tmp_path, "1;2;3\n4;5;6\n7;8\n")
    _, _, col = load(path, int, ragged="max")
    assert col == 3


def test_ragged_error(tmp_path):
    path = _write(tmp_path, "1;2;3\n4;5;6\n7;8\n")
    with pytest.raises(RaggedRowsError) as excinfo:
        load(path, int, ragged="error")
    assert excinfo.value.line == 3
    assert excinfo.value.expected == 3
    assert excinfo.value.found == 2


def test_ragged_logs_warning(tmp_path, caplog):
    path = _write(tmp_path, "1;2;3\n7;8\n")
    with caplog.at_level(logging.WARNING, logger="csvsaver.loader"):
        load(path, int)
    assert "differing lengths" in caplog.text


def test_comma_rewrite_ignores_flag_by_default(tmp_path):
    path = _write(tmp_path, "1,5;2\n")
    matrix, _, _ = load(path, float, decimal_comma=False)
    assert matrix == [[1.5, 2.0]]


def test_comma_rewrite_follows_flag(tmp_path):
    path = _write(tmp_path, "1,5;2\n")
    matrix, _, _ = load(path, float, decimal_comma=False, comma_rule="flag")
    assert matrix == [[1.0, 2.0]]
    matrix, _, _ = load(path, float, decimal_comma=True, comma_rule="flag")
    assert matrix == [[1.5, 2.0]]


def test_strict_reports_position(tmp_path):
    path = _write(tmp_path, "1;2\n3;x\n")
    with pytest.raises(TokenParseError) as excinfo:
        load(path, int, strict=True)
    assert excinfo.value.line == 2
    assert excinfo.value.column == 2
    assert "line 2, column 2" in str(excinfo.value)


def test_missing_file(tmp_path):
    with pytest.raises(FileOpenError) as excinfo:
        load(tmp_path / "nope.csv")
    assert isinstance(excinfo.value, IOError)


@pytest.mark.parametrize("kwargs", [
    {"comma_rule": "never"},
    {"ragged": "min"},
    {"delimiter": ""},
])
def test_bad_options(tmp_path, kwargs):
    path = _write(tmp_path, "1\n")
    with pytest.raises(ValueError):
        load(path, **kwargs)


def test_non_arithmetic_dtype(tmp_path):
    path = _write(tmp_path, "1\n")
    with pytest.raises(TypeError):
        load(path, complex)


def test_load_logs_confirmation(tmp_path, caplog):
    path = _write(tmp_path, "1;2\n")
    with caplog.at_level(logging.INFO, logger="csvsaver.loader"):
        load(path)
    assert "has been loaded" in caplog.text


def test_load_array(tmp_path):
    path = _write(tmp_path, "1;2;3\n4;5;6\n")
    arr = load_array(path, np.int32)
    assert arr.dtype == np.int32
    assert arr.shape == (2, 3)
    assert np.array_equal(arr, [[1, 2, 3], [4, 5, 6]])


def test_load_array_empty_and_ragged(tmp_path):
    empty = _write(tmp_path, "", name="empty.csv")
    assert load_array(empty).shape == (0, 0)
    ragged = _write(tmp_path, "1;2\n3\n", name="ragged.csv")
    with pytest.raises(RaggedRowsError):
        load_array(ragged)
