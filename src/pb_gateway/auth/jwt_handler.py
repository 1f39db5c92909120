"""Access-token creation and verification for the HTTP boundary.

The token subject is the account id the engine uses as ``user_id`` /
``caller_id``. How an account proves control of that id (wallet signature,
SSO, ...) happens before a token is issued and is not handled here.

HS256 (symmetric HMAC) with a shared JWT_SECRET. No revocation: a token
stays valid until it expires.
"""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from config.settings import settings
from src.pb_common.errors import InvalidTokenError

_ALGORITHM = settings.JWT_ALGORITHM  # "HS256"
_ACCESS_EXPIRE = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)


def create_access_token(account_id: str) -> str:
    """Issue a short-lived access token (default: 30 min)."""
    now = datetime.now(UTC)
    payload = {
        "sub": account_id,
        "type": "access",
        "iat": now,
        "exp": now + _ACCESS_EXPIRE,
    }
    return str(jwt.encode(payload, settings.JWT_SECRET, algorithm=_ALGORITHM))


def decode_access_token(token: str) -> str:
    """Validate ``token`` and return its account id.

    Raises:
        InvalidTokenError: signature, expiry, type or subject is invalid.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[_ALGORITHM],  # Explicit list prevents algorithm confusion
        )
    except JWTError:
        raise InvalidTokenError() from None

    if payload.get("type") != "access" or not payload.get("sub"):
        raise InvalidTokenError()
    return str(payload["sub"])
