"""Withdrawal eligibility rule."""

from src.pb_ledger.domain.models import Bet, Position
from src.pb_registry.domain.state_machine import is_terminal


def can_withdraw(bet: Bet, position: Position) -> bool:
    """True iff the bet is terminal, the position has stake and has not been paid."""
    return is_terminal(bet.status) and position.has_stake and not position.withdrawn
