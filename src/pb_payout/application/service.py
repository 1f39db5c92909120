"""PayoutQuoteService: advisory odds and projected winnings for a bet."""

from pydantic import BaseModel

from config.settings import settings
from src.pb_common.amounts import units_to_display, validate_fee_pct
from src.pb_common.enums import BetSide
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_payout.domain.calculator import calculate_odds, projected_winnings
from src.pb_registry.application.service import require_bet


class QuoteResponse(BaseModel):
    bet_id: int
    side: BetSide
    amount: int
    total_for: int
    total_against: int
    odds_for: float | None
    odds_against: float | None
    fee_pct: int
    projected_winnings: int
    projected_winnings_display: str


class PayoutQuoteService:
    def __init__(self, fee_pct: int | None = None) -> None:
        self._fee_pct = settings.PLATFORM_FEE_PCT if fee_pct is None else fee_pct
        validate_fee_pct(self._fee_pct)

    async def quote(
        self, ledger: LedgerProtocol, bet_id: int, side: BetSide, amount: int
    ) -> QuoteResponse:
        bet = await require_bet(ledger, bet_id)
        odds = calculate_odds(bet.total_for, bet.total_against)
        winnings = projected_winnings(
            bet.total_for, bet.total_against, side, amount, self._fee_pct
        )
        return QuoteResponse(
            bet_id=bet_id,
            side=side,
            amount=amount,
            total_for=bet.total_for,
            total_against=bet.total_against,
            odds_for=round(odds.odds_for, 2) if odds.odds_for is not None else None,
            odds_against=round(odds.odds_against, 2) if odds.odds_against is not None else None,
            fee_pct=self._fee_pct,
            projected_winnings=winnings,
            projected_winnings_display=units_to_display(winnings),
        )
