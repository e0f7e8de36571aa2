"""Expense entry state machine: one inbound event in, one reply out."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from expense_bot.bot import texts
from expense_bot.conversation.events import (
    CMD_ADD,
    CMD_CANCEL,
    CMD_SKIP,
    CMD_START,
    DateCanceled,
    DateSelected,
    InboundEvent,
)
from expense_bot.conversation.replies import Reply
from expense_bot.conversation.stages import (
    AwaitingAmount,
    AwaitingCard,
    AwaitingCategory,
    AwaitingComment,
    AwaitingDate,
    AwaitingSpender,
    Idle,
    UserConversationState,
)
from expense_bot.conversation.store import UserStateStore
from expense_bot.errors import AppendError, ReferenceFetchError
from expense_bot.schemas.expense import CompletedRecord
from expense_bot.sheets.appender import RecordAppender
from expense_bot.sheets.cache import ReferenceCache, ReferenceSnapshot
from expense_bot.validators.fields import format_date, parse_date, parse_positive_int

logger = logging.getLogger(__name__)

StepHandler = Callable[[int, UserConversationState, str], Awaitable[Reply]]


class ConversationDriver:
    """Advance a user's expense draft one step per inbound event."""

    def __init__(
        self,
        store: UserStateStore,
        cache: ReferenceCache,
        appender: RecordAppender,
        *,
        sheet_url: str = "",
    ) -> None:
        self._store = store
        self._cache = cache
        self._appender = appender
        self._sheet_url = sheet_url
        self._handlers: dict[type, StepHandler] = {
            Idle: self._on_idle,
            AwaitingDate: self._on_date,
            AwaitingSpender: self._on_spender,
            AwaitingCategory: self._on_category,
            AwaitingAmount: self._on_amount,
            AwaitingComment: self._on_comment,
            AwaitingCard: self._on_card,
        }

    async def handle(self, user_id: int, event: InboundEvent) -> Optional[Reply]:
        """Apply one event to the user's state.

        Returns None when the event is stale and nothing should be sent, which
        only happens for calendar presses outside the date step.
        """

        state = await self._store.get(user_id)

        if isinstance(event, (DateSelected, DateCanceled)):
            if not isinstance(state.stage, AwaitingDate):
                logger.info("Ignoring stale calendar event from user %s", user_id)
                return None
            if isinstance(event, DateCanceled):
                return await self._cancel(user_id)
            return await self._on_date(user_id, state, format_date(event.value))

        text = event.text.strip()
        if text == CMD_START:
            return Reply(texts.GREETING.format(sheet_url=self._sheet_url))
        if text == CMD_CANCEL:
            return await self._cancel(user_id)
        if text == CMD_ADD:
            await self._store.replace(user_id, UserConversationState(stage=AwaitingDate()))
            logger.info("User %s started a new expense", user_id)
            return Reply(texts.ASK_DATE, show_calendar=True)

        handler = self._handlers.get(type(state.stage))
        if handler is None:
            logger.warning("User %s had unknown stage %r, resetting", user_id, state.stage)
            await self._store.reset(user_id)
            return Reply(texts.SESSION_EXPIRED, remove_keyboard=True)
        return await handler(user_id, state, text)

    async def _cancel(self, user_id: int) -> Reply:
        await self._store.reset(user_id)
        logger.info("User %s canceled the expense entry", user_id)
        return Reply(texts.CANCELED, remove_keyboard=True)

    async def _snapshot(self) -> Optional[ReferenceSnapshot]:
        try:
            return await self._cache.get_categories()
        except ReferenceFetchError:
            logger.exception("Reference lists unavailable")
            return None

    async def _on_idle(self, user_id: int, state: UserConversationState, text: str) -> Reply:
        return Reply(texts.IDLE_HELP)

    async def _on_date(self, user_id: int, state: UserConversationState, text: str) -> Reply:
        parsed = parse_date(text)
        if parsed is None:
            return Reply(texts.RETRY_DATE, show_calendar=True)

        snapshot = await self._snapshot()
        if snapshot is None:
            return Reply(texts.REFERENCE_FAILED)

        await self._store.replace(user_id, state.advance(AwaitingSpender(date=format_date(parsed))))
        return Reply(texts.ASK_SPENDER, choices=snapshot.spenders)

    async def _on_spender(self, user_id: int, state: UserConversationState, text: str) -> Reply:
        snapshot = await self._snapshot()
        if snapshot is None:
            return Reply(texts.REFERENCE_FAILED)
        if text not in snapshot.spenders:
            return Reply(texts.RETRY_SPENDER, choices=snapshot.spenders)

        stage = state.stage
        await self._store.replace(user_id, state.advance(AwaitingCategory(date=stage.date, spender=text)))
        return Reply(texts.ASK_CATEGORY, choices=snapshot.categories)

    async def _on_category(self, user_id: int, state: UserConversationState, text: str) -> Reply:
        snapshot = await self._snapshot()
        if snapshot is None:
            return Reply(texts.REFERENCE_FAILED)
        if text not in snapshot.categories:
            return Reply(texts.RETRY_CATEGORY, choices=snapshot.categories)

        stage = state.stage
        await self._store.replace(
            user_id,
            state.advance(AwaitingAmount(date=stage.date, spender=stage.spender, category=text)),
        )
        return Reply(texts.ASK_AMOUNT, remove_keyboard=True)

    async def _on_amount(self, user_id: int, state: UserConversationState, text: str) -> Reply:
        amount = parse_positive_int(text)
        if amount is None:
            return Reply(texts.RETRY_AMOUNT)

        stage = state.stage
        await self._store.replace(
            user_id,
            state.advance(
                AwaitingComment(date=stage.date, spender=stage.spender, category=stage.category, amount=amount)
            ),
        )
        return Reply(texts.ASK_COMMENT)

    async def _on_comment(self, user_id: int, state: UserConversationState, text: str) -> Reply:
        comment = "" if text == CMD_SKIP else text

        snapshot = await self._snapshot()
        if snapshot is None:
            return Reply(texts.REFERENCE_FAILED)

        stage = state.stage
        await self._store.replace(
            user_id,
            state.advance(
                AwaitingCard(
                    date=stage.date,
                    spender=stage.spender,
                    category=stage.category,
                    amount=stage.amount,
                    comment=comment,
                )
            ),
        )
        return Reply(texts.ASK_CARD, choices=snapshot.cards)

    async def _on_card(self, user_id: int, state: UserConversationState, text: str) -> Reply:
        snapshot = await self._snapshot()
        if snapshot is None:
            return Reply(texts.REFERENCE_FAILED)
        if text not in snapshot.cards:
            return Reply(texts.RETRY_CARD, choices=snapshot.cards)

        stage = state.stage
        record = CompletedRecord(
            date=stage.date,
            spender=stage.spender,
            category=stage.category,
            amount=stage.amount,
            comment=stage.comment,
            card=text,
        )
        try:
            await self._appender.append(record)
        except AppendError:
            logger.exception("Append failed for user %s", user_id)
            return Reply(texts.APPEND_FAILED, choices=snapshot.cards)

        await self._store.reset(user_id)
        return Reply(texts.SAVED, remove_keyboard=True)
