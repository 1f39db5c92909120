"""Global enums.

Status codes 0-4 are the wire codes the ledger reports in BetResolved facts.
Business rules never compare them numerically; use the transition table in
pb_registry.domain.state_machine instead.
"""

from enum import Enum


class BetStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    RESOLVED_FOR = "RESOLVED_FOR"
    RESOLVED_AGAINST = "RESOLVED_AGAINST"
    CANCELLED = "CANCELLED"

    @property
    def code(self) -> int:
        return _STATUS_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "BetStatus":
        for status, value in _STATUS_CODES.items():
            if value == code:
                return status
        raise ValueError(f"Unknown bet status code: {code}")


_STATUS_CODES = {
    BetStatus.OPEN: 0,
    BetStatus.CLOSED: 1,
    BetStatus.RESOLVED_FOR: 2,
    BetStatus.RESOLVED_AGAINST: 3,
    BetStatus.CANCELLED: 4,
}


class BetSide(str, Enum):
    FOR = "FOR"
    AGAINST = "AGAINST"

    @property
    def opposite(self) -> "BetSide":
        return BetSide.AGAINST if self is BetSide.FOR else BetSide.FOR


class BetAction(str, Enum):
    """Registry commands that move a bet through its lifecycle."""
    CLOSE = "CLOSE"
    CANCEL = "CANCEL"
    RESOLVE_FOR = "RESOLVE_FOR"
    RESOLVE_AGAINST = "RESOLVE_AGAINST"


class FactKind(str, Enum):
    BET_CREATED = "BetCreated"
    BET_PLACED = "BetPlaced"
    BET_CLOSED = "BetClosed"
    BET_RESOLVED = "BetResolved"
    WITHDRAWAL = "Withdrawal"
    OWNER_WITHDRAWAL = "OwnerWithdrawal"


class StatusFilter(str, Enum):
    ALL = "all"
    OPEN = "open"
    CLOSED = "closed"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class BetSort(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    HIGHEST_VALUE = "highest-value"
