"""pb_stats REST endpoints.

GET /me/stats: caller's active/past bets and totals
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.pb_common.response import ApiResponse
from src.pb_gateway.api.utils import respond
from src.pb_gateway.auth.dependencies import get_current_account, get_ledger
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_stats.application.service import UserStatsService

router = APIRouter(prefix="/me", tags=["stats"])

_service = UserStatsService()


@router.get("/stats")
async def my_stats(
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    stats = await _service.get_user_stats(ledger, account_id)
    return respond(request, stats.model_dump())
