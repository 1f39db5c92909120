# src/pb_admin/application/service.py
"""Admin application service: owner treasury and invariant audit."""
import logging
from typing import Any

from config.settings import settings
from src.pb_admin.domain.global_invariants import (
    check_global_invariants,
    outstanding_liability,
)
from src.pb_common.amounts import validate_amount
from src.pb_common.errors import ValidationError
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_pool.domain.invariants import check_pool_invariants
from src.pb_registry.application.service import require_owner

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, fee_pct: int | None = None) -> None:
        self._fee_pct = settings.PLATFORM_FEE_PCT if fee_pct is None else fee_pct

    async def get_platform_summary(self, ledger: LedgerProtocol) -> dict[str, Any]:
        return {
            "owner": await ledger.get_owner(),
            "fee_pct": self._fee_pct,
            "bet_count": await ledger.bet_count(),
            "owner_balance": await ledger.owner_balance(),
            "total_balance": await ledger.total_balance(),
        }

    async def owner_withdraw(
        self, ledger: LedgerProtocol, caller_id: str, amount: int
    ) -> dict[str, Any]:
        await require_owner(ledger, caller_id, "withdraw platform fees")
        try:
            validate_amount(amount)
        except ValueError as exc:
            raise ValidationError(str(exc)) from None

        remaining = await ledger.owner_withdraw(amount)
        logger.info("Owner withdrawal: amount=%d remaining=%d", amount, remaining)
        return {"amount": amount, "owner_balance": remaining}

    async def verify_all_invariants(self, ledger: LedgerProtocol) -> dict[str, object]:
        """Run per-bet pool checks (INV-P1/P2) and the global solvency check (INV-G)."""
        violations: list[str] = []
        liabilities = 0
        for bet_id in range(await ledger.bet_count()):
            bet = await ledger.get_bet(bet_id)
            if bet is None:
                violations.append(f"Bet {bet_id} missing from ledger")
                continue
            positions = await ledger.list_positions(bet_id)
            violations.extend(check_pool_invariants(bet, positions))
            liabilities += outstanding_liability(bet, positions)

        violations.extend(
            check_global_invariants(
                await ledger.total_balance(), await ledger.owner_balance(), liabilities
            )
        )
        return {"ok": len(violations) == 0, "violations": violations}
