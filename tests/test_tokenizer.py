"""
Tests for the field tokenizer.
"""

import dataclasses

import pytest

from csview.core.config import CsvDialect
from csview.core.document import Row
from csview.io.tokenizer import Tokenizer, tokenize_line


@pytest.mark.parametrize("line, expected", [
    ("a,b,c", ("a", "b", "c")),
    ("", ()),
    ("single", ("single",)),
    ("a,,b", ("a", "", "b")),
    (",a", ("", "a")),
    # The cursor reaches end of line after a trailing delimiter
    ("a,b,", ("a", "b")),
    # Whitespace after a delimiter is skipped, leading whitespace is kept
    ("a, \tb", ("a", "b")),
    (" a,b ", (" a", "b ")),
])
def test_unquoted_fields(line, expected):
    assert tokenize_line(line).fields == expected


def test_quoted_field_keeps_delimiters():
    row = tokenize_line('"hello, world",42')
    assert row.fields == ("hello, world", "42")
    assert row.num_fields == 2


def test_unterminated_quote_runs_to_end_of_line():
    assert tokenize_line('x,"abc,def').fields == ("x", "abc,def")


def test_doubled_quote_is_not_an_escape():
    assert tokenize_line('"a""b",c').fields == ("a", "b", "c")


def test_text_after_closing_quote_starts_new_field():
    assert tokenize_line('"ab"cd,e').fields == ("ab", "cd", "e")


def test_empty_quoted_field():
    assert tokenize_line('"",x').fields == ("", "x")


def test_many_fields():
    line = ",".join(str(i) for i in range(25))
    row = tokenize_line(line)
    assert row.num_fields == 25
    assert row.fields[-1] == "24"


def test_custom_dialect():
    tokenizer = Tokenizer(CsvDialect(delimiter=";", quote_char="'"))
    assert tokenizer.split_fields("'a;b';c, d") == ["a;b", "c, d"]
    assert tokenize_line("1;2", CsvDialect(delimiter=";")).fields == ("1", "2")


@pytest.mark.parametrize("delimiter, line", [
    ("\t", "a\t\tb"),
    (" ", "a  b"),
])
def test_whitespace_delimiter_keeps_empty_fields(delimiter, line):
    row = tokenize_line(line, CsvDialect(delimiter=delimiter))
    assert row.fields == ("a", "", "b")


def test_tab_delimiter_still_skips_spaces():
    assert tokenize_line("a\t  b", CsvDialect(delimiter="\t")).fields == ("a", "b")


def test_rows_are_immutable():
    row = tokenize_line("a,b")
    assert isinstance(row, Row)
    assert list(row) == ["a", "b"]
    assert row[1] == "b"
    with pytest.raises(dataclasses.FrozenInstanceError):
        row.fields = ("c",)
