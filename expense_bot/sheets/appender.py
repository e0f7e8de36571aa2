"""Append completed expense records to the ledger sheet."""

from __future__ import annotations

import logging

from expense_bot.schemas.expense import CompletedRecord
from expense_bot.sheets.client import Ledger

logger = logging.getLogger(__name__)


class RecordAppender:
    """Write one CompletedRecord as one ledger row.

    No retry happens here. A failure may still have landed remotely, so
    resubmitting can produce a duplicate row.
    """

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger

    async def append(self, record: CompletedRecord) -> list[object]:
        """Append the record and return the row that was sent; raises AppendError."""

        row = record.to_row()
        await self._ledger.append_row(row)
        logger.info("Expense recorded: date=%s category=%s amount=%s", record.date, record.category, record.amount)
        return row
