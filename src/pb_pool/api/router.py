"""pb_pool REST endpoints.

POST /bets/{bet_id}/stakes: stake an amount on one side of an OPEN bet
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from src.pb_common.enums import BetSide
from src.pb_common.response import ApiResponse
from src.pb_gateway.api.utils import respond
from src.pb_gateway.auth.dependencies import get_current_account, get_ledger
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_pool.application.service import PoolAccountingService

router = APIRouter(prefix="/bets", tags=["stakes"])

_service = PoolAccountingService()


class PlaceStakeRequest(BaseModel):
    side: BetSide
    # Positivity is enforced by the service so the error carries the engine's code
    amount: int = Field(..., description="Stake in ledger units, must be > 0")


@router.post("/{bet_id}/stakes")
async def place_stake(
    bet_id: int,
    body: PlaceStakeRequest,
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    bet, position = await _service.place_stake(
        ledger, bet_id, account_id, body.side, body.amount
    )
    data = {
        "bet_id": bet.id,
        "total_for": bet.total_for,
        "total_against": bet.total_against,
        "for_amount": position.for_amount,
        "against_amount": position.against_amount,
    }
    return respond(request, data, "Stake placed")
