"""pb_payout REST endpoints.

GET /bets/{bet_id}/quote?side=FOR&amount=...: odds + projected winnings
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.pb_common.enums import BetSide
from src.pb_common.response import ApiResponse
from src.pb_gateway.api.utils import respond
from src.pb_gateway.auth.dependencies import get_ledger
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_payout.application.service import PayoutQuoteService

router = APIRouter(prefix="/bets", tags=["quotes"])

_service = PayoutQuoteService()


@router.get("/{bet_id}/quote")
async def quote(
    bet_id: int,
    request: Request,
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
    side: BetSide = Query(...),
    amount: int = Query(...),
) -> ApiResponse:
    result = await _service.quote(ledger, bet_id, side, amount)
    return respond(request, result.model_dump())
