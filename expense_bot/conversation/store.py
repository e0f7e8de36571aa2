"""In-memory per-user conversation state storage."""

from __future__ import annotations

import asyncio

from expense_bot.conversation.stages import UserConversationState


class UserStateStore:
    """Concurrency-safe map of user ID to conversation state.

    Users are spread over buckets, each with its own lock, so users in
    different buckets never contend. Stored values are immutable; callers
    change a user's state only through ``replace`` or ``reset``.
    """

    def __init__(self, buckets: int = 16) -> None:
        if buckets < 1:
            raise ValueError("buckets must be >= 1")
        self._locks = [asyncio.Lock() for _ in range(buckets)]
        self._shards: list[dict[int, UserConversationState]] = [{} for _ in range(buckets)]

    def _bucket(self, user_id: int) -> int:
        return hash(user_id) % len(self._shards)

    async def get(self, user_id: int) -> UserConversationState:
        """Return the user's state, creating an idle one on first access."""

        index = self._bucket(user_id)
        async with self._locks[index]:
            shard = self._shards[index]
            state = shard.get(user_id)
            if state is None:
                state = UserConversationState()
                shard[user_id] = state
            return state

    async def replace(self, user_id: int, state: UserConversationState) -> None:
        index = self._bucket(user_id)
        async with self._locks[index]:
            self._shards[index][user_id] = state

    async def reset(self, user_id: int) -> UserConversationState:
        """Drop any partially entered fields and return the fresh idle state."""

        state = UserConversationState()
        await self.replace(user_id, state)
        return state
