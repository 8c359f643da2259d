"""
Tests for building Documents from files, streams and text.

This module tests:
  - Header handling (present, absent, empty first line, empty source).
  - Blank-line skipping and ragged-row tolerance.
  - Open failures (None result) and read errors (partial document).
  - Line-length cap applied through ReaderConfig.
"""

import logging

import pytest

from csview.core.config import ReaderConfig
from csview.core.document import Row
from csview.io.csv_reader import CsvReader, build_document, parse_text, read_csv
from csview.io.tokenizer import Tokenizer


def rows_of(doc):
    return [list(row.fields) for row in doc.rows]


def test_header_and_rows(csv_file):
    doc = read_csv(csv_file("a,b,c\n1,2,3\n4,5,6\n"), has_header=True)

    assert doc.header == ["a", "b", "c"]
    assert doc.num_cols == 3
    assert rows_of(doc) == [["1", "2", "3"], ["4", "5", "6"]]


def test_quoted_field_without_header():
    doc = parse_text('"hello, world",42\n', has_header=False)

    assert doc.header is None
    assert doc.num_cols == 2
    assert rows_of(doc) == [["hello, world", "42"]]


def test_column_count_from_first_row():
    doc = parse_text("1\n2,3,4\n", has_header=False)

    assert doc.num_cols == 1
    assert rows_of(doc) == [["1"], ["2", "3", "4"]]


def test_ragged_rows_under_header():
    doc = parse_text("a,b\n1\n2,3,4\n", has_header=True)

    assert doc.num_cols == 2
    assert [row.num_fields for row in doc.rows] == [1, 3]


def test_first_line_is_a_row_without_header_flag():
    doc = parse_text("a,b\n1\n2,3,4\n", has_header=False)

    assert doc.header is None
    assert doc.num_cols == 2
    assert doc.num_rows == 3


def test_blank_lines_are_skipped():
    doc = parse_text("x,y\n\n\nz,w\n", has_header=False)

    assert doc.num_rows == 2
    assert rows_of(doc) == [["x", "y"], ["z", "w"]]


def test_crlf_source(csv_file):
    doc = read_csv(csv_file("a,b\r\n1,2\r\n\r\n3,4\r\n"), has_header=True)

    assert doc.header == ["a", "b"]
    assert rows_of(doc) == [["1", "2"], ["3", "4"]]


def test_empty_header_line_is_consumed():
    doc = parse_text("\n1,2\n", has_header=True)

    assert doc.header == []
    assert doc.num_cols == 0
    assert rows_of(doc) == [["1", "2"]]


def test_header_flag_on_empty_source():
    doc = parse_text("", has_header=True)

    assert doc.header is None
    assert doc.num_cols == 0
    assert doc.num_rows == 0


def test_empty_source_without_header():
    doc = parse_text("", has_header=False)

    assert doc.rows == []
    assert doc.header is None
    assert doc.num_cols == 0


def test_missing_file_returns_none(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="csview"):
        doc = read_csv(tmp_path / "missing.csv", has_header=True)

    assert doc is None
    assert "Error opening file" in caplog.text


def test_read_error_keeps_parsed_rows(flaky_stream, caplog):
    with caplog.at_level(logging.WARNING, logger="csview"):
        doc = build_document(flaky_stream(b"a,b\n1,2\n3,4\n"), has_header=True)

    assert doc.header == ["a", "b"]
    assert rows_of(doc) == [["1", "2"], ["3", "4"]]
    assert "partial document" in caplog.text


def test_read_error_on_header_line(flaky_stream):
    doc = build_document(flaky_stream(), has_header=True)

    assert doc.header is None
    assert doc.num_rows == 0


def test_long_lines_truncated_by_config():
    doc = parse_text("abcdef,g\nxy\n", has_header=False, config=ReaderConfig(max_line_length=4))

    assert rows_of(doc) == [["abc"], ["xy"]]


def test_small_buffer_gives_same_document(byte_stream):
    text = b"id,name\n1,\"Smith, J\"\n\n2,Lee\n"
    small = CsvReader(ReaderConfig(buffer_size=1)).read_stream(byte_stream(text), True)
    default = CsvReader().read_stream(byte_stream(text), True)

    assert small == default
    assert small.rows[0] == Row(("1", "Smith, J"))


def test_memory_error_propagates(monkeypatch):
    def exhausted(self, line):
        raise MemoryError

    monkeypatch.setattr(Tokenizer, "tokenize", exhausted)
    with pytest.raises(MemoryError):
        parse_text("a,b\n", has_header=False)


def test_read_csv_returns_none_when_memory_runs_out(monkeypatch, csv_file, caplog):
    def exhausted(self, line):
        raise MemoryError

    monkeypatch.setattr(Tokenizer, "tokenize", exhausted)
    path = csv_file("a,b\n1,2\n")

    with caplog.at_level(logging.ERROR, logger="csview"):
        assert read_csv(path, has_header=False) is None
    assert "Out of memory" in caplog.text
