"""Telegram bot handlers for the expense entry workflow."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from aiogram import Router
from aiogram.exceptions import TelegramAPIError
from aiogram.types import CallbackQuery, InlineKeyboardMarkup, Message, ReplyKeyboardMarkup, ReplyKeyboardRemove

from expense_bot.bot import texts
from expense_bot.bot.keyboards.calendar import CalendarCallback, calendar_keyboard
from expense_bot.bot.keyboards.choices import choices_keyboard
from expense_bot.config import get_settings
from expense_bot.conversation.driver import ConversationDriver
from expense_bot.conversation.events import DateCanceled, DateSelected, TextEvent
from expense_bot.conversation.replies import Reply
from expense_bot.security.telegram_auth import is_bot_user_allowed

logger = logging.getLogger(__name__)

router = Router()

ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove]


def reply_markup_for(reply: Reply, *, today: date, columns: int) -> Optional[ReplyMarkup]:
    """Translate the driver's keyboard request into a Telegram markup."""

    if reply.show_calendar:
        return calendar_keyboard(today.year, today.month)
    if reply.choices:
        return choices_keyboard(reply.choices, columns=columns)
    if reply.remove_keyboard:
        return ReplyKeyboardRemove(remove_keyboard=True)
    return None


async def _send(message: Message, reply: Optional[Reply]) -> None:
    if reply is None:
        return
    markup = reply_markup_for(reply, today=date.today(), columns=get_settings().keyboard_columns)
    try:
        await message.answer(reply.text, reply_markup=markup)
    except TelegramAPIError:
        logger.exception("Failed to send reply to chat %s", message.chat.id)


async def _ensure_allowed_message(message: Message) -> bool:
    user_id = message.from_user.id if message.from_user else None
    if not is_bot_user_allowed(user_id, get_settings()):
        logger.warning("Denied message from user %s", user_id)
        await message.answer(texts.ACCESS_DENIED)
        return False
    return True


async def _ensure_allowed_callback(callback: CallbackQuery) -> bool:
    user_id = callback.from_user.id if callback.from_user else None
    if not is_bot_user_allowed(user_id, get_settings()):
        logger.warning("Denied callback from user %s", user_id)
        await callback.answer(texts.ACCESS_DENIED, show_alert=True)
        return False
    return True


async def _delete_picker(message: Message) -> None:
    try:
        await message.delete()
    except TelegramAPIError:
        logger.exception("Failed to delete calendar message %s", message.message_id)


@router.callback_query(CalendarCallback.filter())
async def on_calendar(callback: CallbackQuery, callback_data: CalendarCallback, driver: ConversationDriver) -> None:
    """Handle calendar navigation, day selection and cancel."""

    if not await _ensure_allowed_callback(callback):
        return

    message = callback.message if isinstance(callback.message, Message) else None
    if message is None or callback_data.action == "noop":
        await callback.answer()
        return

    if callback_data.action == "nav":
        await message.edit_reply_markup(reply_markup=calendar_keyboard(callback_data.year, callback_data.month))
        await callback.answer()
        return

    if callback_data.action == "day":
        event = DateSelected(date(callback_data.year, callback_data.month, callback_data.day))
    else:
        event = DateCanceled()

    reply = await driver.handle(callback.from_user.id, event)
    if reply is not None:
        await _delete_picker(message)
    await _send(message, reply)
    await callback.answer()


@router.message()
async def on_message(message: Message, driver: ConversationDriver) -> None:
    """Route every message (commands included) through the conversation driver."""

    if not await _ensure_allowed_message(message):
        return

    logger.info("Message from user %s: %r", message.from_user.id, message.text)
    reply = await driver.handle(message.from_user.id, TextEvent(message.text or ""))
    await _send(message, reply)
