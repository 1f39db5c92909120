# src/pb_ledger/domain/ledger.py
"""Ledger Protocol: the engine's only handle on canonical state.

The ledger serializes every mutating call and applies each one atomically.
Unit tests use InMemoryLedger; a deployment can plug in any adapter that
conforms to this Protocol (e.g. a contract client). Mutations return only
after the ledger has confirmed them.
"""

from typing import Protocol

from src.pb_common.enums import BetSide, BetStatus
from src.pb_ledger.domain.facts import LedgerFact
from src.pb_ledger.domain.models import Bet, Position


class LedgerProtocol(Protocol):
    async def get_owner(self) -> str: ...

    async def bet_count(self) -> int: ...

    async def get_bet(self, bet_id: int) -> Bet | None: ...

    async def get_position(self, bet_id: int, user_id: str) -> Position | None: ...

    async def list_positions(self, bet_id: int) -> list[Position]: ...

    async def create_bet(
        self,
        title: str,
        description: str,
        image_url: str | None,
        creator: str,
    ) -> Bet: ...

    async def place_stake(
        self, bet_id: int, user_id: str, side: BetSide, amount: int
    ) -> tuple[Bet, Position]: ...

    async def close_bet(self, bet_id: int) -> Bet: ...

    async def cancel_bet(self, bet_id: int) -> Bet: ...

    async def resolve_bet(
        self,
        bet_id: int,
        status: BetStatus,
        fee_pct: int,
        fee: int,
        expected_pools: tuple[int, int],
    ) -> Bet: ...

    async def withdraw(self, bet_id: int, user_id: str, amount: int) -> Position: ...

    async def owner_balance(self) -> int: ...

    async def total_balance(self) -> int: ...

    async def owner_withdraw(self, amount: int) -> int: ...

    async def facts_since(self, seq: int) -> list[LedgerFact]: ...
