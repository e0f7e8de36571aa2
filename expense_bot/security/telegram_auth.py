"""Telegram user allow-list utilities."""

from __future__ import annotations

from typing import Optional

from expense_bot.config import Settings
from expense_bot.errors import ConfigurationError


def parse_allowed_ids(raw: str) -> frozenset[int]:
    """Parse comma-separated allowed Telegram IDs from config."""

    ids: set[int] = set()
    for chunk in raw.split(","):
        value = chunk.strip()
        if not value:
            continue
        try:
            ids.add(int(value))
        except ValueError as exc:
            raise ConfigurationError(f"ALLOWED_USER_IDS contains non-integer: {value!r}") from exc
    return frozenset(ids)


def is_bot_user_allowed(user_id: Optional[int], settings: Settings) -> bool:
    """Return whether bot user is on the configured allow-list.

    An empty allow-list admits nobody.
    """

    if user_id is None:
        return False
    return user_id in parse_allowed_ids(settings.allowed_user_ids)
