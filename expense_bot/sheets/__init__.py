"""Spreadsheet package exports."""

from expense_bot.sheets.appender import RecordAppender
from expense_bot.sheets.cache import ReferenceCache, ReferenceSnapshot
from expense_bot.sheets.client import ReferenceColumns, SheetsClient

__all__ = ["RecordAppender", "ReferenceCache", "ReferenceSnapshot", "ReferenceColumns", "SheetsClient"]
