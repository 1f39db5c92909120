"""pb_registry REST endpoints.

POST /bets  create a bet (any account unless restricted)
GET  /bets  listing with search / status filter / sort
GET  /bets/{bet_id}  full detail with current odds
POST /bets/{bet_id}/close  owner only, OPEN → CLOSED
POST /bets/{bet_id}/cancel  owner only, OPEN|CLOSED → CANCELLED
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status

from src.pb_common.enums import BetSort, StatusFilter
from src.pb_common.response import ApiResponse
from src.pb_gateway.api.utils import respond
from src.pb_gateway.auth.dependencies import get_board, get_current_account, get_ledger
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_registry.application.board import BetBoard
from src.pb_registry.application.schemas import (
    BetDetail,
    BetListItem,
    BetListResponse,
    CreateBetRequest,
)
from src.pb_registry.application.service import BetRegistryService

router = APIRouter(prefix="/bets", tags=["bets"])

_service = BetRegistryService()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_bet(
    body: CreateBetRequest,
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    bet = await _service.create(
        ledger, body.title, body.description, body.image_url, account_id
    )
    return respond(request, BetDetail.from_domain(bet).model_dump(), "Bet created")


@router.get("")
async def list_bets(
    request: Request,
    board: Annotated[BetBoard, Depends(get_board)],
    search: str | None = Query(None, max_length=200),
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status"),
    sort: BetSort = Query(BetSort.NEWEST),
) -> ApiResponse:
    bets = await board.listing(search, status_filter, sort)
    result = BetListResponse(
        items=[BetListItem.from_domain(b) for b in bets], total=len(bets)
    )
    return respond(request, result.model_dump())


@router.get("/{bet_id}")
async def get_bet(
    bet_id: int,
    request: Request,
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    bet = await _service.get(ledger, bet_id)
    return respond(request, BetDetail.from_domain(bet).model_dump())


@router.post("/{bet_id}/close")
async def close_bet(
    bet_id: int,
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    bet = await _service.close(ledger, bet_id, account_id)
    return respond(request, BetDetail.from_domain(bet).model_dump(), "Bet closed")


@router.post("/{bet_id}/cancel")
async def cancel_bet(
    bet_id: int,
    request: Request,
    account_id: Annotated[str, Depends(get_current_account)],
    ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
) -> ApiResponse:
    bet = await _service.cancel(ledger, bet_id, account_id)
    return respond(request, BetDetail.from_domain(bet).model_dump(), "Bet cancelled")
