"""pb_settlement REST endpoints.

POST /bets/{bet_id}/resolve: owner only, {"for_won": true|false}
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from src.pb_common.response import ApiResponse
from src.pb_gateway.api.utils import respond
from src.pb_gateway.auth.dependencies import get_current_account, get_ledger
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_registry.application.schemas import BetDetail
from src.pb_settlement.application.service import SettlementService

router = APIRouter(prefix="/bets", tags=["settlement"])

_service = SettlementService()


class ResolveRequest(BaseModel):
    for_won: bool


@router.post("/{bet_id}/resolve")
async def resolve_bet(
    bet_id: int,
    body: ResolveRequest,
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    result = await _service.resolve(ledger, bet_id, account_id, body.for_won)
    data = {
        "bet": BetDetail.from_domain(result.bet).model_dump(),
        "fee": result.fee,
        "distributable": result.distributable,
    }
    return respond(request, data, "Bet resolved")
