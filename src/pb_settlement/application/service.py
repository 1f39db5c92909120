"""SettlementService: owner-declared resolution of a bet.

Resolution freezes both pools and the fee percent on the bet; every later
payout claim is computed from those frozen numbers. The platform fee is
taken from the losing pool only.
"""
import logging
from dataclasses import dataclass

from config.settings import settings
from src.pb_common.amounts import validate_fee_pct
from src.pb_common.enums import BetSide
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_ledger.domain.models import Bet
from src.pb_payout.domain.calculator import platform_fee
from src.pb_registry.application.service import require_bet, require_owner
from src.pb_registry.domain.state_machine import next_status, resolve_action
from src.pb_settlement.domain.outcome import outcome_status

logger = logging.getLogger(__name__)


@dataclass
class SettlementResult:
    bet: Bet
    fee: int               # units retained by the platform
    distributable: int     # units shared pro-rata among winners


class SettlementService:
    def __init__(self, fee_pct: int | None = None) -> None:
        self._fee_pct = settings.PLATFORM_FEE_PCT if fee_pct is None else fee_pct
        validate_fee_pct(self._fee_pct)

    async def resolve(
        self, ledger: LedgerProtocol, bet_id: int, caller_id: str, for_won: bool
    ) -> SettlementResult:
        bet = await require_bet(ledger, bet_id)
        await require_owner(ledger, caller_id, "resolve bets")
        next_status(bet_id, bet.status, resolve_action(for_won))

        status = outcome_status(for_won)
        winner = BetSide.FOR if for_won else BetSide.AGAINST
        fee = platform_fee(bet.side_total(winner.opposite), self._fee_pct)

        # Rejected by the ledger if a stake landed between this read and the write
        resolved = await ledger.resolve_bet(
            bet_id, status, self._fee_pct, fee, (bet.total_for, bet.total_against)
        )

        logger.info(
            "Bet resolved: id=%d result=%s pools=(%d, %d) fee=%d",
            bet_id,
            status.value,
            resolved.total_for,
            resolved.total_against,
            fee,
        )
        return SettlementResult(bet=resolved, fee=fee, distributable=resolved.total_pool - fee)
