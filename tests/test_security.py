from __future__ import annotations

import pytest

from expense_bot.config import Settings, get_settings
from expense_bot.errors import ConfigurationError
from expense_bot.security.telegram_auth import is_bot_user_allowed, parse_allowed_ids


def test_parse_allowed_ids() -> None:
    assert parse_allowed_ids("1001, 1002,,1003") == {1001, 1002, 1003}


def test_parse_allowed_ids_rejects_garbage() -> None:
    with pytest.raises(ConfigurationError):
        parse_allowed_ids("1001,invalid")


def test_bot_user_allow_list() -> None:
    settings = Settings(allowed_user_ids="10,20")
    assert is_bot_user_allowed(10, settings) is True
    assert is_bot_user_allowed(99, settings) is False
    assert is_bot_user_allowed(None, settings) is False


def test_empty_allow_list_admits_nobody() -> None:
    assert is_bot_user_allowed(10, Settings(allowed_user_ids="")) is False


def test_settings_from_env() -> None:
    settings = get_settings()
    assert settings.google_sheets_id == "sheet-123"
    assert settings.sheet_url == "https://docs.google.com/spreadsheets/d/sheet-123/edit"
    assert settings.reference_cache_ttl_seconds == 300
    assert settings.keyboard_columns == 2
    settings.require_runtime()


def test_missing_configuration_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "")
    monkeypatch.delenv("GOOGLE_SHEETS_ID")
    get_settings.cache_clear()

    with pytest.raises(ConfigurationError) as excinfo:
        get_settings().require_runtime()
    assert "TELEGRAM_BOT_TOKEN" in excinfo.value.message
    assert "GOOGLE_SHEETS_ID" in excinfo.value.message


def test_allow_list_without_ids_is_fatal() -> None:
    settings = Settings(
        telegram_bot_token="token",
        google_sheets_id="sheet",
        google_credentials_file="/tmp/creds.json",
        allowed_user_ids=" , ",
    )

    with pytest.raises(ConfigurationError) as excinfo:
        settings.require_runtime()
    assert "ALLOWED_USER_IDS" in excinfo.value.message
