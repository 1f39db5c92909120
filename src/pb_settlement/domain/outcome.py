"""Which side a terminal status pays out."""

from src.pb_common.enums import BetSide, BetStatus

_WINNERS = {
    BetStatus.RESOLVED_FOR: BetSide.FOR,
    BetStatus.RESOLVED_AGAINST: BetSide.AGAINST,
}


def outcome_status(for_won: bool) -> BetStatus:
    return BetStatus.RESOLVED_FOR if for_won else BetStatus.RESOLVED_AGAINST


def winning_side(status: BetStatus) -> BetSide | None:
    """Return the payable side for a resolved bet, None otherwise (incl. CANCELLED)."""
    return _WINNERS.get(status)
