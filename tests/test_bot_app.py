from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from expense_bot.bot import app as bot_app


@pytest.mark.asyncio
async def test_sheets_client_not_opened_when_bot_construction_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_bot(*args, **kwargs):
        raise ValueError("bad token")

    from_settings = MagicMock()
    monkeypatch.setattr(bot_app, "Bot", broken_bot)
    monkeypatch.setattr(bot_app.SheetsClient, "from_settings", from_settings)

    with pytest.raises(ValueError):
        await bot_app.run_bot()
    from_settings.assert_not_called()
