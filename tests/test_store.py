from __future__ import annotations

import asyncio

import pytest

from expense_bot.conversation.stages import AwaitingDate, AwaitingSpender, Idle, Step, UserConversationState
from expense_bot.conversation.store import UserStateStore


@pytest.mark.asyncio
async def test_get_creates_idle_state(store: UserStateStore) -> None:
    state = await store.get(42)
    assert state.step is Step.IDLE
    assert state.fields == {}
    assert await store.get(42) is state


@pytest.mark.asyncio
async def test_replace_and_reset(store: UserStateStore) -> None:
    await store.replace(7, UserConversationState(stage=AwaitingSpender(date="09.01.2026")))
    state = await store.get(7)
    assert state.step is Step.AWAITING_SPENDER
    assert state.fields == {"date": "09.01.2026"}

    fresh = await store.reset(7)
    assert isinstance(fresh.stage, Idle)
    assert await store.get(7) is fresh


@pytest.mark.asyncio
async def test_users_are_isolated(store: UserStateStore) -> None:
    await store.replace(1, UserConversationState(stage=AwaitingDate()))
    assert (await store.get(2)).step is Step.IDLE
    assert (await store.get(1)).step is Step.AWAITING_DATE


@pytest.mark.asyncio
async def test_concurrent_access_many_users(store: UserStateStore) -> None:
    async def touch(user_id: int) -> None:
        await store.get(user_id)
        await store.replace(user_id, UserConversationState(stage=AwaitingDate()))

    await asyncio.gather(*(touch(user_id) for user_id in range(200)))
    states = await asyncio.gather(*(store.get(user_id) for user_id in range(200)))
    assert all(state.step is Step.AWAITING_DATE for state in states)


def test_advance_updates_timestamp() -> None:
    state = UserConversationState()
    moved = state.advance(AwaitingDate())
    assert moved.step is Step.AWAITING_DATE
    assert moved.last_updated >= state.last_updated
    assert state.step is Step.IDLE


def test_invalid_bucket_count() -> None:
    with pytest.raises(ValueError):
        UserStateStore(buckets=0)
