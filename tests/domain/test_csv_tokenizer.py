"""Tests for the CSV line tokenizer."""

from ledger_dashboard.domain.services.csv_tokenizer import (
    iter_body_lines,
    tokenize_line,
)


def test_quoted_field_keeps_delimiter():
    assert tokenize_line('a,"b,c",d') == ["a", "b,c", "d"]


def test_empty_line_yields_single_empty_field():
    assert tokenize_line("") == [""]


def test_fields_are_trimmed_and_trailing_empty_kept():
    assert tokenize_line(" a , b ,") == ["a", "b", ""]


def test_doubled_quotes_are_not_escapes():
    assert tokenize_line('"say ""hi""",x') == ["say hi", "x"]


def test_unbalanced_quote_swallows_remaining_delimiters():
    assert tokenize_line('a,"b,c,d') == ["a", "b,c,d"]


def test_iter_body_lines_skips_header_and_blank_lines_but_counts_them():
    text = "Date,Amount\r\n2024-01-01,5\r\n\r\n  \n2024-01-03,7\n\n"

    assert list(iter_body_lines(text)) == [
        (0, "2024-01-01,5"),
        (3, "2024-01-03,7"),
    ]


def test_iter_body_lines_header_only_yields_nothing():
    assert list(iter_body_lines("Date,Client\n")) == []
    assert list(iter_body_lines("")) == []
