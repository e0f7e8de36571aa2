"""Inline month calendar used to pick the expense date."""

from __future__ import annotations

import calendar

from aiogram.filters.callback_data import CallbackData
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from expense_bot.bot import texts


class CalendarCallback(CallbackData, prefix="cal"):
    """Callback payload of a calendar button."""

    action: str  # day, nav, cancel, noop
    year: int = 0
    month: int = 0
    day: int = 0


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _noop(text: str) -> InlineKeyboardButton:
    return InlineKeyboardButton(text=text, callback_data=CalendarCallback(action="noop").pack())


def calendar_keyboard(year: int, month: int) -> InlineKeyboardMarkup:
    """Month grid with weekday header, previous/next navigation and cancel."""

    rows: list[list[InlineKeyboardButton]] = [
        [_noop(f"{texts.MONTHS[month - 1]} {year}")],
        [_noop(name) for name in texts.WEEKDAYS],
    ]
    for week in calendar.monthcalendar(year, month):
        rows.append(
            [
                InlineKeyboardButton(
                    text=str(day),
                    callback_data=CalendarCallback(action="day", year=year, month=month, day=day).pack(),
                )
                if day
                else _noop(" ")
                for day in week
            ]
        )

    prev_year, prev_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)
    rows.append(
        [
            InlineKeyboardButton(
                text="«",
                callback_data=CalendarCallback(action="nav", year=prev_year, month=prev_month).pack(),
            ),
            InlineKeyboardButton(
                text="»",
                callback_data=CalendarCallback(action="nav", year=next_year, month=next_month).pack(),
            ),
        ]
    )
    rows.append(
        [InlineKeyboardButton(text=texts.CALENDAR_CANCEL, callback_data=CalendarCallback(action="cancel").pack())]
    )
    return InlineKeyboardMarkup(inline_keyboard=rows)
