"""PositionTracker: withdrawal eligibility, payout amounts and withdrawal.

A position pays out at most once. ``withdraw`` hands the flag flip and the
transfer to the ledger as one unit: if the transfer fails, the ledger
restores ``withdrawn=False`` and raises LedgerError, so the caller may
re-issue the command. Re-issuing after a successful withdrawal fails with
AlreadyWithdrawnError and moves no funds.
"""
import logging
from dataclasses import dataclass

from src.pb_common.errors import AlreadyWithdrawnError, NotEligibleError
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_ledger.domain.models import Bet, Position
from src.pb_payout.domain.calculator import position_payout
from src.pb_position.domain.eligibility import can_withdraw
from src.pb_registry.application.service import require_bet
from src.pb_registry.domain.state_machine import is_terminal

logger = logging.getLogger(__name__)


@dataclass
class WithdrawalResult:
    bet_id: int
    user_id: str
    amount: int
    position: Position


class PositionTracker:
    async def get_position(
        self, ledger: LedgerProtocol, bet_id: int, user_id: str
    ) -> tuple[Bet, Position]:
        """Return the bet and the user's position (an empty one if never staked)."""
        bet = await require_bet(ledger, bet_id)
        position = await ledger.get_position(bet_id, user_id)
        if position is None:
            position = Position(bet_id=bet_id, user_id=user_id)
        return bet, position

    async def is_withdrawable(self, ledger: LedgerProtocol, bet_id: int, user_id: str) -> bool:
        bet, position = await self.get_position(ledger, bet_id, user_id)
        return can_withdraw(bet, position)

    async def payout_amount(self, ledger: LedgerProtocol, bet_id: int, user_id: str) -> int:
        bet, position = await self.get_position(ledger, bet_id, user_id)
        return position_payout(bet, position)

    async def withdraw(
        self, ledger: LedgerProtocol, bet_id: int, user_id: str
    ) -> WithdrawalResult:
        bet, position = await self.get_position(ledger, bet_id, user_id)
        if not is_terminal(bet.status):
            raise NotEligibleError(bet_id, user_id, f"bet is still {bet.status.value}")
        if not position.has_stake:
            raise NotEligibleError(bet_id, user_id, "no stake on this bet")
        if position.withdrawn:
            raise AlreadyWithdrawnError(bet_id, user_id)

        amount = position_payout(bet, position)
        updated = await ledger.withdraw(bet_id, user_id, amount)
        logger.info(
            "Withdrawal: bet=%d user=%s status=%s amount=%d",
            bet_id,
            user_id,
            bet.status.value,
            amount,
        )
        return WithdrawalResult(bet_id=bet_id, user_id=user_id, amount=amount, position=updated)
