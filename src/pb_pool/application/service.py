"""PoolAccountingService: stake placement.

The ledger applies the pool increment and the position increment as one
unit, which keeps sum(position.for_amount) == bet.total_for (and the
against-side equivalent) for every bet.
"""
import logging

from src.pb_common.amounts import validate_amount
from src.pb_common.enums import BetSide
from src.pb_common.errors import InvalidTransitionError, ValidationError
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_ledger.domain.models import Bet, Position
from src.pb_registry.application.service import require_bet
from src.pb_registry.domain.state_machine import accepts_stakes

logger = logging.getLogger(__name__)


class PoolAccountingService:
    async def place_stake(
        self,
        ledger: LedgerProtocol,
        bet_id: int,
        user_id: str,
        side: BetSide,
        amount: int,
    ) -> tuple[Bet, Position]:
        # Amount is checked before the bet lookup: a zero stake fails regardless of status
        try:
            validate_amount(amount)
        except ValueError as exc:
            raise ValidationError(str(exc)) from None

        bet = await require_bet(ledger, bet_id)
        if not accepts_stakes(bet.status):
            raise InvalidTransitionError(bet_id, bet.status.value, "accept stakes")

        bet, position = await ledger.place_stake(bet_id, user_id, side, amount)
        logger.info(
            "Stake placed: bet=%d user=%s side=%s amount=%d pools=(%d, %d)",
            bet_id,
            user_id,
            side.value,
            amount,
            bet.total_for,
            bet.total_against,
        )
        return bet, position
