"""Conversation steps and the per-step state variants."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Union


class Step(str, Enum):
    """Position in the fixed expense entry sequence."""

    IDLE = "idle"
    AWAITING_DATE = "awaiting_date"
    AWAITING_SPENDER = "awaiting_spender"
    AWAITING_CATEGORY = "awaiting_category"
    AWAITING_AMOUNT = "awaiting_amount"
    AWAITING_COMMENT = "awaiting_comment"
    AWAITING_CARD = "awaiting_card"


# Each variant carries exactly the fields collected before its step.


@dataclass(frozen=True)
class Idle:
    step = Step.IDLE


@dataclass(frozen=True)
class AwaitingDate:
    step = Step.AWAITING_DATE


@dataclass(frozen=True)
class AwaitingSpender:
    step = Step.AWAITING_SPENDER

    date: str


@dataclass(frozen=True)
class AwaitingCategory:
    step = Step.AWAITING_CATEGORY

    date: str
    spender: str


@dataclass(frozen=True)
class AwaitingAmount:
    step = Step.AWAITING_AMOUNT

    date: str
    spender: str
    category: str


@dataclass(frozen=True)
class AwaitingComment:
    step = Step.AWAITING_COMMENT

    date: str
    spender: str
    category: str
    amount: int


@dataclass(frozen=True)
class AwaitingCard:
    step = Step.AWAITING_CARD

    date: str
    spender: str
    category: str
    amount: int
    comment: str


Stage = Union[Idle, AwaitingDate, AwaitingSpender, AwaitingCategory, AwaitingAmount, AwaitingComment, AwaitingCard]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UserConversationState:
    """Immutable conversation state of one user; replaced on every transition."""

    stage: Stage = field(default_factory=Idle)
    last_updated: datetime = field(default_factory=_utcnow)

    @property
    def step(self) -> Step:
        return self.stage.step

    @property
    def fields(self) -> dict[str, Any]:
        """Fields collected so far, keyed by name."""

        return asdict(self.stage)

    def advance(self, stage: Stage) -> "UserConversationState":
        return UserConversationState(stage=stage, last_updated=_utcnow())
