"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.settings import settings
from src.pb_admin.api.router import router as admin_router
from src.pb_common.errors import AppError, ValidationError
from src.pb_common.response import error_response
from src.pb_gateway.api.utils import request_id_of
from src.pb_gateway.middleware.request_log import RequestLogMiddleware
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_ledger.infrastructure.memory_ledger import InMemoryLedger
from src.pb_payout.api.router import router as payout_router
from src.pb_pool.api.router import router as pool_router
from src.pb_position.api.router import router as position_router
from src.pb_registry.api.router import router as registry_router
from src.pb_registry.application.board import BetBoard
from src.pb_settlement.api.router import router as settlement_router
from src.pb_stats.api.router import router as stats_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: catch the bet board up with the ledger's fact stream."""
    applied = await app.state.board.refresh()
    logger.info(
        "Ledger ready: owner=%s bets=%d facts_applied=%d",
        await app.state.ledger.get_owner(),
        await app.state.ledger.bet_count(),
        applied,
    )
    yield


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("Request failed: code=%d %s", exc.code, exc.message)
    resp = error_response(exc.code, exc.message, request_id_of(request))
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
    return await app_error_handler(request, ValidationError(fields or "malformed request"))


def create_app(ledger: LedgerProtocol | None = None) -> FastAPI:
    """Build the app around ``ledger`` (an InMemoryLedger when omitted)."""
    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    if ledger is None:
        ledger = InMemoryLedger(owner_id=settings.PLATFORM_OWNER_ID)
    app.state.ledger = ledger
    app.state.board = BetBoard(ledger)

    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]

    for router in (
        registry_router,
        pool_router,
        payout_router,
        settlement_router,
        position_router,
        stats_router,
        admin_router,
    ):
        app.include_router(router, prefix="/api/v1")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": "0.1.0"}

    return app


app = create_app()
