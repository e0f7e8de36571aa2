from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from expense_bot.schemas.expense import CompletedRecord
from expense_bot.validators.fields import parse_date, parse_positive_int


@pytest.mark.parametrize("raw", ["0", "-5", "12.5", "abc", "", " ", "1_000", "1e3"])
def test_amount_rejected(raw: str) -> None:
    assert parse_positive_int(raw) is None


@pytest.mark.parametrize("raw, expected", [("1", 1), ("300", 300), (" 450 ", 450), ("+7", 7)])
def test_amount_accepted(raw: str, expected: int) -> None:
    assert parse_positive_int(raw) == expected


@pytest.mark.parametrize("raw", ["31.02.2026", "00.01.2026", "9.1.2026", "2026-01-09", "09.13.2026", "abc"])
def test_date_rejected(raw: str) -> None:
    assert parse_date(raw) is None


def test_date_accepted() -> None:
    assert parse_date("09.01.2026") == date(2026, 1, 9)
    assert parse_date("29.02.2024") == date(2024, 2, 29)


def test_completed_record_row_has_month() -> None:
    record = CompletedRecord(
        date="09.01.2026",
        spender="Alice",
        category="Groceries",
        amount=450,
        comment="",
        card="CardA",
    )
    assert record.month == 1
    assert record.to_row() == ["09.01.2026", "Alice", "Groceries", 450, "", "CardA", 1]


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "31.02.2026", "spender": "Alice", "category": "Food", "amount": 1, "card": "CardA"},
        {"date": "09.01.2026", "spender": "Alice", "category": "Food", "amount": 0, "card": "CardA"},
        {"date": "09.01.2026", "spender": "", "category": "Food", "amount": 1, "card": "CardA"},
    ],
)
def test_completed_record_invalid(payload: dict) -> None:
    with pytest.raises(ValidationError):
        CompletedRecord(**payload)


def test_completed_record_is_frozen() -> None:
    record = CompletedRecord(date="15.12.2025", spender="Bob", category="Food", amount=5, card="CardB")
    assert record.month == 12
    with pytest.raises(ValidationError):
        record.amount = 10
