"""Helpers shared by unit and integration tests."""

from src.pb_common.enums import BetSide
from src.pb_ledger.domain.models import Bet
from src.pb_ledger.infrastructure.memory_ledger import InMemoryLedger

OWNER = "owner"


async def seed_bet(
    ledger: InMemoryLedger,
    stakes: list[tuple[str, BetSide, int]] = (),
    title: str = "Will it rain tomorrow?",
    description: str = "Resolves FOR if any rain is recorded downtown.",
) -> Bet:
    """Create a bet directly on the ledger and apply ``stakes`` in order."""
    bet = await ledger.create_bet(title, description, None, "alice")
    for user_id, side, amount in stakes:
        bet, _ = await ledger.place_stake(bet.id, user_id, side, amount)
    return bet
