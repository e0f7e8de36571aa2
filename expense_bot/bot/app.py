"""Telegram bot application entrypoint."""

from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher

from expense_bot.bot.handlers.expense import router as expense_router
from expense_bot.config import Settings, get_settings
from expense_bot.conversation.driver import ConversationDriver
from expense_bot.conversation.store import UserStateStore
from expense_bot.logging_config import setup_logging
from expense_bot.security.telegram_auth import parse_allowed_ids
from expense_bot.sheets.appender import RecordAppender
from expense_bot.sheets.cache import ReferenceCache
from expense_bot.sheets.client import SheetsClient

logger = logging.getLogger(__name__)


def build_driver(settings: Settings, sheets: SheetsClient) -> ConversationDriver:
    """Wire the conversation driver to the spreadsheet."""

    return ConversationDriver(
        store=UserStateStore(buckets=settings.state_store_buckets),
        cache=ReferenceCache(sheets, ttl_seconds=settings.reference_cache_ttl_seconds),
        appender=RecordAppender(sheets),
        sheet_url=settings.sheet_url,
    )


async def run_bot() -> None:
    """Run polling bot process."""

    settings = get_settings()
    setup_logging(settings.log_level)
    settings.require_runtime()
    allowed = parse_allowed_ids(settings.allowed_user_ids)

    bot = Bot(token=settings.telegram_bot_token)
    sheets = SheetsClient.from_settings(settings)
    dispatcher = Dispatcher(driver=build_driver(settings, sheets))
    dispatcher.include_router(expense_router)

    logger.info("Bot started for %d allowed users", len(allowed))
    try:
        await dispatcher.start_polling(bot)
    finally:
        await sheets.aclose()
        await bot.session.close()


def main() -> None:
    asyncio.run(run_bot())


if __name__ == "__main__":
    main()
