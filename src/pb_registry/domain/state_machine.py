"""Bet lifecycle state machine.

    OPEN   --close-->            CLOSED
    OPEN   --cancel-->           CANCELLED
    CLOSED --cancel-->           CANCELLED
    OPEN   --resolve(side)-->    RESOLVED_FOR | RESOLVED_AGAINST
    CLOSED --resolve(side)-->    RESOLVED_FOR | RESOLVED_AGAINST

Any (status, action) pair missing from the table is illegal.
"""

from src.pb_common.enums import BetAction, BetStatus
from src.pb_common.errors import InvalidTransitionError

_TRANSITIONS: dict[tuple[BetStatus, BetAction], BetStatus] = {
    (BetStatus.OPEN, BetAction.CLOSE): BetStatus.CLOSED,
    (BetStatus.OPEN, BetAction.CANCEL): BetStatus.CANCELLED,
    (BetStatus.CLOSED, BetAction.CANCEL): BetStatus.CANCELLED,
    (BetStatus.OPEN, BetAction.RESOLVE_FOR): BetStatus.RESOLVED_FOR,
    (BetStatus.OPEN, BetAction.RESOLVE_AGAINST): BetStatus.RESOLVED_AGAINST,
    (BetStatus.CLOSED, BetAction.RESOLVE_FOR): BetStatus.RESOLVED_FOR,
    (BetStatus.CLOSED, BetAction.RESOLVE_AGAINST): BetStatus.RESOLVED_AGAINST,
}

_TERMINAL = frozenset(
    {BetStatus.RESOLVED_FOR, BetStatus.RESOLVED_AGAINST, BetStatus.CANCELLED}
)


def is_terminal(status: BetStatus) -> bool:
    return status in _TERMINAL


def accepts_stakes(status: BetStatus) -> bool:
    return status is BetStatus.OPEN


def resolve_action(for_won: bool) -> BetAction:
    return BetAction.RESOLVE_FOR if for_won else BetAction.RESOLVE_AGAINST


def next_status(bet_id: int, current: BetStatus, action: BetAction) -> BetStatus:
    """Look up the status ``action`` leads to, or raise InvalidTransitionError."""
    target = _TRANSITIONS.get((current, action))
    if target is None:
        raise InvalidTransitionError(bet_id, current.value, action.value.lower())
    return target
