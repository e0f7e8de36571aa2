"""Inbound events consumed by the conversation driver."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

CMD_START = "/start"
CMD_ADD = "/add"
CMD_CANCEL = "/cancel"
CMD_SKIP = "/skip"


@dataclass(frozen=True)
class TextEvent:
    """Free text or a command token typed by the user."""

    text: str


@dataclass(frozen=True)
class DateSelected:
    """A day picked on the calendar widget."""

    value: date


@dataclass(frozen=True)
class DateCanceled:
    """The calendar widget's cancel button."""


InboundEvent = Union[TextEvent, DateSelected, DateCanceled]
