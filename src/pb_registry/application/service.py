"""BetRegistryService: owns bet records and the lifecycle state machine.

Every command validates against a fresh ledger snapshot, then asks the
ledger to apply it; the ledger re-checks the transition under its own
serialization, so a race resolves to InvalidTransitionError.
"""
import logging

from config.settings import settings
from src.pb_common.enums import BetAction
from src.pb_common.errors import AuthorizationError, NotFoundError, ValidationError
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_ledger.domain.models import Bet
from src.pb_registry.domain.state_machine import next_status

logger = logging.getLogger(__name__)


async def require_bet(ledger: LedgerProtocol, bet_id: int) -> Bet:
    bet = await ledger.get_bet(bet_id)
    if bet is None:
        raise NotFoundError(bet_id)
    return bet


async def require_owner(ledger: LedgerProtocol, caller_id: str, action: str) -> None:
    if caller_id != await ledger.get_owner():
        raise AuthorizationError(caller_id, action)


class BetRegistryService:
    def __init__(self, restrict_creation_to_owner: bool | None = None) -> None:
        if restrict_creation_to_owner is None:
            restrict_creation_to_owner = settings.RESTRICT_BET_CREATION_TO_OWNER
        self._restrict_creation = restrict_creation_to_owner

    async def create(
        self,
        ledger: LedgerProtocol,
        title: str,
        description: str,
        image_url: str | None,
        creator_id: str,
    ) -> Bet:
        if not title or not title.strip():
            raise ValidationError("title must not be empty")
        if not description or not description.strip():
            raise ValidationError("description must not be empty")
        if self._restrict_creation:
            await require_owner(ledger, creator_id, "create bets")

        bet = await ledger.create_bet(title, description, image_url or None, creator_id)
        logger.info("Bet created: id=%d creator=%s title=%r", bet.id, creator_id, title)
        return bet

    async def get(self, ledger: LedgerProtocol, bet_id: int) -> Bet:
        return await require_bet(ledger, bet_id)

    async def close(self, ledger: LedgerProtocol, bet_id: int, caller_id: str) -> Bet:
        bet = await require_bet(ledger, bet_id)
        await require_owner(ledger, caller_id, "close bets")
        next_status(bet_id, bet.status, BetAction.CLOSE)

        closed = await ledger.close_bet(bet_id)
        logger.info("Bet closed: id=%d", bet_id)
        return closed

    async def cancel(self, ledger: LedgerProtocol, bet_id: int, caller_id: str) -> Bet:
        bet = await require_bet(ledger, bet_id)
        await require_owner(ledger, caller_id, "cancel bets")
        next_status(bet_id, bet.status, BetAction.CANCEL)

        cancelled = await ledger.cancel_bet(bet_id)
        logger.info(
            "Bet cancelled: id=%d refundable_pool=%d", bet_id, cancelled.total_pool
        )
        return cancelled
