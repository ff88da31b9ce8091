# tests/utilities/test_core_util.py
from __future__ import annotations

import pytest

from journal_helper.utilities.core_util import (
    is_null_or_whitespace,
    open_for_read,
    split_off_comment,
)


@pytest.mark.parametrize(
    "line,expected",
    [
        ("  ;comment", ("  ", "comment")),
        (";comment", ("", "comment")),
        ("test;", ("test", "")),
        ("test; ", ("test", " ")),
        (";", ("", "")),
        ("no comment", ("no comment", None)),
        (" ", (" ", None)),
        ("", ("", None)),
    ],
)
def test_split_off_comment(line, expected):
    assert split_off_comment(line) == expected


def test_split_off_comment_only_splits_at_first():
    assert split_off_comment("a ; b ; c") == ("a ", " b ; c")


def test_split_off_comment_escaped_character_is_literal():
    # Act
    text, comment = split_off_comment("2023/03/17 Fish\\; chips ; note")

    # Assert
    assert text == "2023/03/17 Fish; chips "
    assert comment == " note"


@pytest.mark.parametrize(
    "value,expected",
    [(None, True), ("", True), ("  \t", True), ("x", False), (" x ", False)],
)
def test_is_null_or_whitespace(value, expected):
    assert is_null_or_whitespace(value) is expected


def test_open_for_read_is_text_mode(tmp_path):
    # Arrange
    p = tmp_path / "sample.journal"
    p.write_text("2023/03/17 Ham Sub\n", encoding="utf-8")

    # Act
    with open_for_read(p, encoding="utf-8") as f:
        text = f.read()

    # Assert
    assert text == "2023/03/17 Ham Sub\n"
