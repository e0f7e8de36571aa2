"""Parsers for user-entered expense fields."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

DATE_FORMAT = "%d.%m.%Y"

_DATE_RE = re.compile(r"^\d{2}\.\d{2}\.\d{4}$")
_INT_RE = re.compile(r"^[+-]?\d+$")


def parse_date(raw: str) -> Optional[date]:
    """Return the calendar date for a strict DD.MM.YYYY string, else None."""

    value = raw.strip()
    if not _DATE_RE.match(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        # 31.02.2026, 00.01.2026
        return None


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_positive_int(raw: str) -> Optional[int]:
    """Return a strictly positive integer amount, else None."""

    value = raw.strip()
    if not _INT_RE.match(value):
        return None
    amount = int(value)
    if amount <= 0:
        return None
    return amount
