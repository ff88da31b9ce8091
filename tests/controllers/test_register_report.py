# tests/controllers/test_register_report.py
from __future__ import annotations

from copy import deepcopy
from datetime import date

import pytest

from journal_helper.controllers import (
    FilteredTransaction,
    RegisterLine,
    filter_by_account,
    format_register_line,
    parse_journal_text,
    register,
    register_frame,
)
from journal_helper.data_model.j_wrapper.amount import Amount, Discrete, Float

JOURNAL = """
2023/03/18 Groceries
    assets:savings  $-41.06
    expenses:food:groceries

2023/03/01 Opening
    assets:savings  $440.70
    equity:opening

2023/03/18 Crunchy Chicken Bowl
    assets:savings  $-16.10
    expenses:food:takeout

2023/03/20 Transfer in two parts
    assets:savings  $-10
    assets:savings  $-5
    assets:chequing

2023/03/21 Solar
    assets:savings  2 kWh
    usage:solar
"""


def _dollars(cents: int) -> Amount:
    return Amount("$", Discrete(cents, 2))


def test_filter_by_account_keeps_journal_order_and_entry_indexes():
    journal = parse_journal_text(JOURNAL)
    assert filter_by_account(journal, "assets:savings") == [
        FilteredTransaction(0, (0,)),
        FilteredTransaction(1, (0,)),
        FilteredTransaction(2, (0,)),
        FilteredTransaction(3, (0, 1)),
        FilteredTransaction(4, (0,)),
    ]
    assert filter_by_account(journal, "nobody") == []


def test_register_running_totals_in_date_order():
    # Arrange
    journal = parse_journal_text(JOURNAL)

    # Act
    lines = register(journal, "assets:savings")

    # Assert
    assert [line.description for line in lines] == [
        "Opening",
        "Groceries",
        "Crunchy Chicken Bowl",
        "Transfer in two parts",
        None,
        "Solar",
    ]
    assert [line.running_total for line in lines[:5]] == [
        _dollars(44070),
        _dollars(39964),
        _dollars(38354),
        _dollars(37354),
        _dollars(36854),
    ]


def test_register_date_only_on_first_entry_of_transaction():
    lines = register(parse_journal_text(JOURNAL), "assets:savings")
    transfer, second_part = lines[3], lines[4]
    assert transfer.date == date(2023, 3, 20)
    assert second_part.date is None
    assert second_part.description is None
    assert second_part.amount == _dollars(-500)


def test_register_keeps_separate_totals_per_unit():
    lines = register(parse_journal_text(JOURNAL), "assets:savings")
    solar = lines[-1]
    assert solar.amount == Amount("kWh", Float(2.0))
    assert solar.running_total == Amount("kWh", Float(2.0))


def test_register_does_not_mutate_journal():
    journal = parse_journal_text(JOURNAL)
    before = deepcopy([t.entries for t in journal])
    register(journal, "assets:savings")
    assert [t.entries for t in journal] == before


def test_register_unknown_account_is_empty():
    assert register(parse_journal_text(JOURNAL), "nobody") == []


def test_format_register_line():
    # Arrange
    line = RegisterLine(
        date(2023, 3, 18), "Groceries", "assets:savings", _dollars(-4106), _dollars(39964)
    )
    continuation = RegisterLine(
        None, None, "assets:savings", _dollars(-500), _dollars(36854)
    )

    # Act
    first = format_register_line(line)
    second = format_register_line(continuation)

    # Assert
    assert first == (
        "2023/03/18 "
        + "Groceries".ljust(30)
        + " "
        + "assets:savings".ljust(30)
        + " "
        + "$-41.06".rjust(10)
        + " "
        + "$399.64".rjust(10)
    )
    assert second.startswith(" " * 11 + " " * 30 + " assets:savings")
    assert second.endswith("$-5.00" + " " + "$368.54".rjust(10))


def test_register_frame():
    # Act
    frame = register_frame(register(parse_journal_text(JOURNAL), "assets:savings"))

    # Assert
    assert list(frame.columns) == ["date", "description", "account", "amount", "running_total"]
    assert len(frame) == 6
    assert frame.iloc[0]["date"] == "2023/03/01"
    assert frame.iloc[0]["running_total"] == "$440.70"
    assert frame.iloc[4]["date"] == ""


def test_register_frame_empty():
    frame = register_frame([])
    assert frame.empty
    assert list(frame.columns) == ["date", "description", "account", "amount", "running_total"]


def test_register_lines_are_not_hashable():
    # Register lines hold mutable amounts, so they must not advertise a hash.
    line = RegisterLine(None, None, "assets:savings", _dollars(-500), _dollars(36854))
    with pytest.raises(TypeError):
        hash(line)
