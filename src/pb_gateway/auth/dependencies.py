"""FastAPI dependencies: caller identity and the ledger handle.

Usage in any router:
    @router.post("/bets/{bet_id}/withdraw")
    async def withdraw(
        account_id: Annotated[str, Depends(get_current_account)],
        ledger: Annotated[LedgerProtocol, Depends(get_ledger)],
    ): ...
"""

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from src.pb_common.errors import InvalidTokenError
from src.pb_gateway.auth.jwt_handler import decode_access_token
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_registry.application.board import BetBoard

# Tokens are issued out of band; tokenUrl only feeds the Swagger "Authorize" button
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


async def get_current_account(token: str | None = Depends(oauth2_scheme)) -> str:
    """Extract and validate the Bearer token, return the caller's account id.

    Raises InvalidTokenError (HTTP 401) if the token is missing, invalid or expired.
    """
    if not token:
        raise InvalidTokenError()
    return decode_access_token(token)


def get_ledger(request: Request) -> LedgerProtocol:
    """Ledger handle attached to app.state at startup."""
    return request.app.state.ledger


def get_board(request: Request) -> BetBoard:
    return request.app.state.board
