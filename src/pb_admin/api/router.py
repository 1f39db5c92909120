"""pb_admin REST endpoints (platform owner only).

GET  /admin/summary  owner, fee, balances
POST /admin/withdraw  withdraw accrued platform fees
GET  /admin/invariants  pool + solvency audit
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from src.pb_admin.application.service import AdminService
from src.pb_common.response import ApiResponse
from src.pb_gateway.api.utils import respond
from src.pb_gateway.auth.dependencies import get_current_account, get_ledger
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_registry.application.service import require_owner

router = APIRouter(prefix="/admin", tags=["admin"])

_service = AdminService()


class OwnerWithdrawRequest(BaseModel):
    amount: int


@router.get("/summary")
async def summary(
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    await require_owner(ledger, account_id, "view the platform summary")
    return respond(request, await _service.get_platform_summary(ledger))


@router.post("/withdraw")
async def owner_withdraw(
    body: OwnerWithdrawRequest,
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    result = await _service.owner_withdraw(ledger, account_id, body.amount)
    return respond(request, result, "Funds withdrawn")


@router.get("/invariants")
async def invariants(
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    await require_owner(ledger, account_id, "audit invariants")
    return respond(request, await _service.verify_all_invariants(ledger))
