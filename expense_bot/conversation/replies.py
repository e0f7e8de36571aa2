"""Outbound prompt produced by the conversation driver."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Reply:
    """Text to send plus what to do with the keyboard under it."""

    text: str
    choices: tuple[str, ...] = ()
    remove_keyboard: bool = False
    show_calendar: bool = False
