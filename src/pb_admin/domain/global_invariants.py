# src/pb_admin/domain/global_invariants.py
"""Global solvency invariant check (INV-G)."""
import logging

from src.pb_ledger.domain.models import Bet, Position
from src.pb_payout.domain.calculator import position_payout
from src.pb_registry.domain.state_machine import is_terminal

logger = logging.getLogger(__name__)


def outstanding_liability(bet: Bet, positions: list[Position]) -> int:
    """Units the ledger still owes stakers of one bet.

    Non-terminal bets owe their whole pool (it may still be refunded);
    terminal bets owe the payout of every unwithdrawn position.
    """
    if not is_terminal(bet.status):
        return bet.total_pool
    return sum(position_payout(bet, p) for p in positions if not p.withdrawn)


def check_global_invariants(total_balance: int, owner_balance: int, liabilities: int) -> list[str]:
    """Check INV-G: ledger balance covers owner balance + staker liabilities."""
    violations: list[str] = []
    required = owner_balance + liabilities
    if total_balance < required:
        msg = (
            f"INV-G violated: total_balance({total_balance}) < "
            f"owner_balance({owner_balance}) + liabilities({liabilities}) = {required}"
        )
        violations.append(msg)
        logger.error(msg)
    return violations
