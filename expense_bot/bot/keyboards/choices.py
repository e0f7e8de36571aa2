"""Reply keyboard builders."""

from __future__ import annotations

from typing import Sequence

from aiogram.types import KeyboardButton, ReplyKeyboardMarkup


def choices_keyboard(items: Sequence[str], columns: int = 2) -> ReplyKeyboardMarkup:
    """Lay the options out in a grid, ``columns`` buttons per row."""

    keyboard = [
        [KeyboardButton(text=item) for item in items[start : start + columns]]
        for start in range(0, len(items), columns)
    ]
    return ReplyKeyboardMarkup(
        keyboard=keyboard,
        resize_keyboard=True,
        one_time_keyboard=True,
    )
