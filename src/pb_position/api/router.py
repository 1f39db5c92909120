"""pb_position REST endpoints.

GET  /bets/{bet_id}/position: caller's position, eligibility and payout
POST /bets/{bet_id}/withdraw: pay out the caller's position exactly once
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.pb_common.response import ApiResponse
from src.pb_gateway.api.utils import respond
from src.pb_gateway.auth.dependencies import get_current_account, get_ledger
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_position.application.schemas import PositionResponse, WithdrawResponse
from src.pb_position.application.service import PositionTracker

router = APIRouter(prefix="/bets", tags=["positions"])

_service = PositionTracker()


@router.get("/{bet_id}/position")
async def get_position(
    bet_id: int,
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    bet, position = await _service.get_position(ledger, bet_id, account_id)
    return respond(request, PositionResponse.from_domain(bet, position).model_dump())


@router.post("/{bet_id}/withdraw")
async def withdraw(
    bet_id: int,
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    result = await _service.withdraw(ledger, bet_id, account_id)
    return respond(request, WithdrawResponse.from_result(result).model_dump(), "Withdrawn")
