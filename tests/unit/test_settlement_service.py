"""Unit tests for SettlementService.resolve."""

from unittest.mock import AsyncMock

import pytest

from src.pb_common.enums import BetSide, BetStatus
from src.pb_common.errors import (
    AuthorizationError,
    InvalidTransitionError,
    LedgerError,
    NotFoundError,
)
from src.pb_ledger.domain.models import Bet
from src.pb_ledger.infrastructure.memory_ledger import InMemoryLedger
from src.pb_settlement.application.service import SettlementService
from tests.helpers import OWNER, seed_bet

_STAKES = [("bob", BetSide.FOR, 3000), ("carol", BetSide.AGAINST, 1000)]


@pytest.fixture
def service() -> SettlementService:
    return SettlementService(fee_pct=10)


class TestResolve:
    async def test_for_wins_fee_from_losing_pool(
        self, service: SettlementService, ledger: InMemoryLedger
    ) -> None:
        bet = await seed_bet(ledger, _STAKES)
        result = await service.resolve(ledger, bet.id, OWNER, for_won=True)
        assert result.bet.status is BetStatus.RESOLVED_FOR
        assert result.bet.fee_pct == 10
        assert result.fee == 100
        assert result.distributable == 3900
        assert await ledger.owner_balance() == 100

    async def test_against_wins(self, service: SettlementService, ledger: InMemoryLedger) -> None:
        bet = await seed_bet(ledger, _STAKES)
        result = await service.resolve(ledger, bet.id, OWNER, for_won=False)
        assert result.bet.status is BetStatus.RESOLVED_AGAINST
        assert result.fee == 300

    async def test_closed_bet_can_resolve(
        self, service: SettlementService, ledger: InMemoryLedger
    ) -> None:
        bet = await seed_bet(ledger, _STAKES)
        await ledger.close_bet(bet.id)
        result = await service.resolve(ledger, bet.id, OWNER, for_won=True)
        assert result.bet.status is BetStatus.RESOLVED_FOR

    async def test_fee_floors(self, ledger: InMemoryLedger) -> None:
        bet = await seed_bet(ledger, [("bob", BetSide.FOR, 10), ("carol", BetSide.AGAINST, 19)])
        result = await SettlementService(fee_pct=5).resolve(ledger, bet.id, OWNER, for_won=True)
        assert result.fee == 0

    async def test_non_owner_rejected(
        self, service: SettlementService, ledger: InMemoryLedger
    ) -> None:
        bet = await seed_bet(ledger, _STAKES)
        with pytest.raises(AuthorizationError):
            await service.resolve(ledger, bet.id, "bob", for_won=True)
        assert (await ledger.get_bet(bet.id)).status is BetStatus.OPEN

    @pytest.mark.parametrize("for_won_first", [True, False])
    async def test_terminal_bet_rejected(
        self, service: SettlementService, ledger: InMemoryLedger, for_won_first: bool
    ) -> None:
        bet = await seed_bet(ledger, _STAKES)
        await service.resolve(ledger, bet.id, OWNER, for_won=for_won_first)
        with pytest.raises(InvalidTransitionError):
            await service.resolve(ledger, bet.id, OWNER, for_won=True)
        assert await ledger.owner_balance() == (100 if for_won_first else 300)

    async def test_cancelled_bet_rejected(
        self, service: SettlementService, ledger: InMemoryLedger
    ) -> None:
        bet = await seed_bet(ledger, _STAKES)
        await ledger.cancel_bet(bet.id)
        with pytest.raises(InvalidTransitionError):
            await service.resolve(ledger, bet.id, OWNER, for_won=False)

    async def test_unknown_bet(self, service: SettlementService, ledger: InMemoryLedger) -> None:
        with pytest.raises(NotFoundError):
            await service.resolve(ledger, 42, OWNER, for_won=True)

    async def test_passes_observed_pools_to_ledger(self, service: SettlementService) -> None:
        ledger = AsyncMock()
        ledger.get_owner.return_value = OWNER
        ledger.get_bet.return_value = Bet(
            id=7, title="t", description="d", image_url=None, creator="x",
            total_for=40, total_against=60,
        )
        ledger.resolve_bet.side_effect = LedgerError("pools changed")
        with pytest.raises(LedgerError):
            await service.resolve(ledger, 7, OWNER, for_won=False)
        ledger.resolve_bet.assert_awaited_once_with(
            7, BetStatus.RESOLVED_AGAINST, 10, 4, (40, 60)
        )
