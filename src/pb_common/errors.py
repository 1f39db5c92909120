"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Input/Auth
  2xxx: Treasury
  3xxx: Bet
  5xxx: Position
  9xxx: Ledger/System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Input/Auth ---

class ValidationError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Invalid input: {detail}", 422)


class AuthorizationError(AppError):
    def __init__(self, caller_id: str, action: str) -> None:
        super().__init__(1002, f"Account {caller_id} is not allowed to {action}", 403)


class InvalidTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "Access token is invalid or expired", 401)


# --- 2xxx: Treasury ---

class InsufficientOwnerBalanceError(AppError):
    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient owner balance: requested {requested}, available {available}",
            422,
        )


# --- 3xxx: Bet ---

class NotFoundError(AppError):
    def __init__(self, bet_id: int) -> None:
        super().__init__(3001, f"Bet not found: {bet_id}", 404)


class InvalidTransitionError(AppError):
    def __init__(self, bet_id: int, status: str, action: str) -> None:
        super().__init__(3002, f"Bet {bet_id} in status {status} cannot {action}", 422)


# --- 5xxx: Position ---

class AlreadyWithdrawnError(AppError):
    def __init__(self, bet_id: int, user_id: str) -> None:
        super().__init__(5001, f"Position of {user_id} on bet {bet_id} already withdrawn", 409)


class NotEligibleError(AppError):
    def __init__(self, bet_id: int, user_id: str, reason: str) -> None:
        super().__init__(5002, f"{user_id} cannot withdraw from bet {bet_id}: {reason}", 422)


# --- 9xxx: Ledger/System ---

class LedgerError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9001, f"Ledger failure: {detail}", 502)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
