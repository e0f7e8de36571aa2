from __future__ import annotations

from typing import Any, Optional

import pytest

from expense_bot.config import get_settings
from expense_bot.conversation.driver import ConversationDriver
from expense_bot.conversation.store import UserStateStore
from expense_bot.errors import AppendError, ReferenceFetchError
from expense_bot.sheets.appender import RecordAppender
from expense_bot.sheets.cache import ReferenceCache
from expense_bot.sheets.client import ReferenceColumns


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set deterministic test env and reset cached Settings."""

    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "test-bot-token")
    monkeypatch.setenv("GOOGLE_SHEETS_ID", "sheet-123")
    monkeypatch.setenv("GOOGLE_CREDENTIALS_FILE", "/tmp/creds.json")
    monkeypatch.setenv("ALLOWED_USER_IDS", "1001,1002")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeSheets:
    """In-memory stand-in for both the reference source and the ledger."""

    def __init__(self) -> None:
        self.categories: list[Any] = ["Groceries", "Transport", "  ", "Groceries"]
        self.spenders: list[Any] = ["Alice", " Bob "]
        self.cards: list[Any] = ["CardA", "CardB", ""]
        self.rows: list[list[Any]] = []
        self.fetch_calls = 0
        self.fetch_error: Optional[Exception] = None
        self.append_error: Optional[Exception] = None

    async def fetch_reference_columns(self) -> ReferenceColumns:
        self.fetch_calls += 1
        if self.fetch_error is not None:
            raise self.fetch_error
        return ReferenceColumns(
            categories=list(self.categories),
            spenders=list(self.spenders),
            cards=list(self.cards),
        )

    async def append_row(self, row: list[Any]) -> None:
        if self.append_error is not None:
            raise self.append_error
        self.rows.append(row)

    def fail_fetch(self) -> None:
        self.fetch_error = ReferenceFetchError("sheets down")

    def fail_append(self) -> None:
        self.append_error = AppendError("sheets down")


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def sheets() -> FakeSheets:
    return FakeSheets()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> UserStateStore:
    return UserStateStore(buckets=4)


@pytest.fixture
def cache(sheets: FakeSheets, clock: FakeClock) -> ReferenceCache:
    return ReferenceCache(sheets, ttl_seconds=300, clock=clock)


@pytest.fixture
def driver(store: UserStateStore, cache: ReferenceCache, sheets: FakeSheets) -> ConversationDriver:
    return ConversationDriver(store, cache, RecordAppender(sheets), sheet_url="https://example.test/sheet")
