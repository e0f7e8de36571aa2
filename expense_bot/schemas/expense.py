"""Completed expense record handed to the ledger."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from expense_bot.validators.fields import DATE_FORMAT, parse_date


class CompletedRecord(BaseModel):
    """Fully collected expense entry, ready for a single append."""

    model_config = ConfigDict(frozen=True)

    date: str
    spender: str = Field(min_length=1)
    category: str = Field(min_length=1)
    amount: int = Field(gt=0)
    comment: str = ""
    card: str = Field(min_length=1)

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        if parse_date(value) is None:
            raise ValueError("date must be a real calendar date in DD.MM.YYYY format")
        return value.strip()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def month(self) -> int:
        """Month number (1-12) derived from the record date."""

        return datetime.strptime(self.date, DATE_FORMAT).month

    def to_row(self) -> list[object]:
        """Ledger column order: date, spender, category, amount, comment, card, month."""

        return [self.date, self.spender, self.category, self.amount, self.comment, self.card, self.month]
