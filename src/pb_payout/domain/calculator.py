"""Pari-mutuel odds and payout arithmetic: pure functions, no ledger access.

Quote (before a stake is committed), stake s on side X:
    new_side  = side_total(X) + s
    winnings  = (s / new_side) * (pool * (1 - fee/100) + s)

Settlement (pools frozen at resolution), winner stake w on winning side W,
losing side L:
    fee       = L * fee/100                      (retained by the platform)
    payout    = (w / W) * (W + L * (1 - fee/100))

Cancellation refunds every stake in full. Integer results floor, so the sum
of payouts never exceeds what the pool holds.
"""

from dataclasses import dataclass

from src.pb_common.amounts import validate_fee_pct
from src.pb_common.enums import BetSide, BetStatus
from src.pb_common.errors import InternalError, InvalidTransitionError, ValidationError
from src.pb_ledger.domain.models import Bet, Position
from src.pb_settlement.domain.outcome import winning_side


@dataclass(frozen=True)
class Odds:
    """Decimal odds per side; None when nobody has staked that side yet."""

    odds_for: float | None
    odds_against: float | None


def calculate_odds(total_for: int, total_against: int) -> Odds:
    total_pool = total_for + total_against
    return Odds(
        odds_for=total_pool / total_for if total_for > 0 else None,
        odds_against=total_pool / total_against if total_against > 0 else None,
    )


def projected_winnings(
    total_for: int, total_against: int, side: BetSide, stake: int, fee_pct: int
) -> int:
    """Advisory pre-trade payout for an extra ``stake`` on ``side``.

    Later stakes by other users move the side totals, so the realized payout
    may differ.
    """
    if stake <= 0:
        raise ValidationError(f"stake amount must be positive, got {stake}")
    validate_fee_pct(fee_pct)
    total_pool = total_for + total_against
    side_total = total_for if side is BetSide.FOR else total_against
    new_side_total = side_total + stake
    return stake * (total_pool * (100 - fee_pct) + stake * 100) // (new_side_total * 100)


def platform_fee(losing_pool: int, fee_pct: int) -> int:
    """Fee retained from the losing pool at resolution (floors)."""
    validate_fee_pct(fee_pct)
    return losing_pool * fee_pct // 100


def resolved_payout(stake: int, winning_total: int, losing_total: int, fee_pct: int) -> int:
    if stake == 0:
        return 0
    validate_fee_pct(fee_pct)
    return (
        stake
        * (winning_total * 100 + losing_total * (100 - fee_pct))
        // (winning_total * 100)
    )


def position_payout(bet: Bet, position: Position) -> int:
    """Amount owed to ``position`` on a terminal bet, ignoring the withdrawn flag."""
    if bet.status is BetStatus.CANCELLED:
        return position.total_stake

    winner = winning_side(bet.status)
    if winner is None:
        raise InvalidTransitionError(bet.id, bet.status.value, "pay out")
    if bet.fee_pct is None:
        raise InternalError(f"Resolved bet {bet.id} has no frozen fee percent")
    return resolved_payout(
        stake=position.side_amount(winner),
        winning_total=bet.side_total(winner),
        losing_total=bet.side_total(winner.opposite),
        fee_pct=bet.fee_pct,
    )
