"""Pydantic schemas for pb_position API responses."""

from pydantic import BaseModel

from src.pb_common.amounts import units_to_display
from src.pb_ledger.domain.models import Bet, Position
from src.pb_payout.domain.calculator import position_payout
from src.pb_position.application.service import WithdrawalResult
from src.pb_position.domain.eligibility import can_withdraw
from src.pb_registry.domain.state_machine import is_terminal


class PositionResponse(BaseModel):
    bet_id: int
    user_id: str
    bet_status: str
    for_amount: int
    against_amount: int
    withdrawn: bool
    withdrawable: bool
    payout: int | None          # None while the bet is not terminal
    payout_display: str | None

    @classmethod
    def from_domain(cls, bet: Bet, position: Position) -> "PositionResponse":
        terminal = is_terminal(bet.status)
        payout = position_payout(bet, position) if terminal else None
        return cls(
            bet_id=bet.id,
            user_id=position.user_id,
            bet_status=bet.status.value,
            for_amount=position.for_amount,
            against_amount=position.against_amount,
            withdrawn=position.withdrawn,
            withdrawable=can_withdraw(bet, position),
            payout=payout,
            payout_display=units_to_display(payout) if payout is not None else None,
        )


class WithdrawResponse(BaseModel):
    bet_id: int
    user_id: str
    amount: int
    amount_display: str

    @classmethod
    def from_result(cls, result: WithdrawalResult) -> "WithdrawResponse":
        return cls(
            bet_id=result.bet_id,
            user_id=result.user_id,
            amount=result.amount,
            amount_display=units_to_display(result.amount),
        )
