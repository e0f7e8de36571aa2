"""Time-bounded cache of the spreadsheet reference lists."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from expense_bot.sheets.client import ReferenceSource

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


def normalize_column(values: Iterable[Any]) -> tuple[str, ...]:
    """Trim cells, drop blanks and duplicates, keep source order."""

    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        text = str(value).strip()
        if not text or text in seen:
            continue
        seen.add(text)
        result.append(text)
    return tuple(result)


@dataclass(frozen=True)
class ReferenceSnapshot:
    """All three reference lists as one immutable value."""

    spenders: tuple[str, ...]
    categories: tuple[str, ...]
    cards: tuple[str, ...]
    expires_at: float

    def is_empty(self) -> bool:
        return not (self.spenders or self.categories or self.cards)


class ReferenceCache:
    """Serve the reference snapshot, refetching it once the TTL elapses.

    Concurrent callers that miss at the same time each fetch; the lock only
    guards reading and swapping the snapshot, never the network call.
    """

    def __init__(
        self,
        source: ReferenceSource,
        *,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = asyncio.Lock()
        self._snapshot: Optional[ReferenceSnapshot] = None

    async def get_categories(self) -> ReferenceSnapshot:
        """Return a fresh-enough snapshot; raise ReferenceFetchError if a refetch fails."""

        async with self._lock:
            snapshot = self._snapshot
        if snapshot is not None and self._clock() < snapshot.expires_at and not snapshot.is_empty():
            return snapshot

        columns = await self._source.fetch_reference_columns()
        fresh = ReferenceSnapshot(
            spenders=normalize_column(columns.spenders),
            categories=normalize_column(columns.categories),
            cards=normalize_column(columns.cards),
            expires_at=self._clock() + self._ttl,
        )

        async with self._lock:
            self._snapshot = fresh
        logger.info(
            "Reference lists refreshed: %d spenders, %d categories, %d cards",
            len(fresh.spenders),
            len(fresh.categories),
            len(fresh.cards),
        )
        return fresh

    async def invalidate(self) -> None:
        async with self._lock:
            self._snapshot = None
