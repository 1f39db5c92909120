"""Facts published by the ledger after each confirmed mutation.

Every fact carries a ledger-wide monotonically increasing ``seq`` so that
consumers can resume from the last fact they processed.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from src.pb_common.enums import BetStatus, FactKind


class LedgerFact(BaseModel):
    seq: int
    kind: FactKind
    occurred_at: datetime


class BetCreated(LedgerFact):
    kind: Literal[FactKind.BET_CREATED] = FactKind.BET_CREATED
    bet_id: int
    title: str
    creator: str


class BetPlaced(LedgerFact):
    kind: Literal[FactKind.BET_PLACED] = FactKind.BET_PLACED
    bet_id: int
    bettor: str
    amount: int
    is_for: bool


class BetClosed(LedgerFact):
    kind: Literal[FactKind.BET_CLOSED] = FactKind.BET_CLOSED
    bet_id: int


class BetResolved(LedgerFact):
    """Terminal transition. ``result`` is RESOLVED_FOR, RESOLVED_AGAINST or CANCELLED."""

    kind: Literal[FactKind.BET_RESOLVED] = FactKind.BET_RESOLVED
    bet_id: int
    result: BetStatus


class Withdrawal(LedgerFact):
    kind: Literal[FactKind.WITHDRAWAL] = FactKind.WITHDRAWAL
    bet_id: int
    user: str
    amount: int


class OwnerWithdrawal(LedgerFact):
    kind: Literal[FactKind.OWNER_WITHDRAWAL] = FactKind.OWNER_WITHDRAWAL
    amount: int


def affected_bet_id(fact: LedgerFact) -> int | None:
    """Return the bet a fact refers to, or None for treasury-only facts."""
    return getattr(fact, "bet_id", None)
