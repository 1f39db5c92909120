"""InMemoryLedger: reference LedgerProtocol implementation.

One asyncio.Lock serializes every mutation, and each mutation re-checks its
own precondition under the lock, so a command that raced with another one
on the same bet is rejected instead of half-applied. Snapshots returned to
callers are copies.
"""
import asyncio
import logging
from collections import defaultdict
from dataclasses import replace

from src.pb_common.datetime_utils import utc_now
from src.pb_common.enums import BetAction, BetSide, BetStatus
from src.pb_common.errors import (
    AlreadyWithdrawnError,
    InsufficientOwnerBalanceError,
    InvalidTransitionError,
    LedgerError,
    NotEligibleError,
    NotFoundError,
    ValidationError,
)
from src.pb_ledger.domain.facts import (
    BetClosed,
    BetCreated,
    BetPlaced,
    BetResolved,
    LedgerFact,
    OwnerWithdrawal,
    Withdrawal,
)
from src.pb_ledger.domain.models import Bet, Position
from src.pb_registry.domain.state_machine import accepts_stakes, next_status

logger = logging.getLogger(__name__)

_RESOLVE_ACTIONS = {
    BetStatus.RESOLVED_FOR: BetAction.RESOLVE_FOR,
    BetStatus.RESOLVED_AGAINST: BetAction.RESOLVE_AGAINST,
}


class InMemoryLedger:
    def __init__(self, owner_id: str) -> None:
        self._owner_id = owner_id
        self._bets: list[Bet] = []
        self._positions: dict[tuple[int, str], Position] = {}
        self._accounts: dict[str, int] = defaultdict(int)
        self._total_balance = 0
        self._owner_balance = 0
        self._facts: list[LedgerFact] = []
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Reads (point-in-time snapshots)
    # ------------------------------------------------------------------

    async def get_owner(self) -> str:
        return self._owner_id

    async def bet_count(self) -> int:
        return len(self._bets)

    async def get_bet(self, bet_id: int) -> Bet | None:
        if not (0 <= bet_id < len(self._bets)):
            return None
        return replace(self._bets[bet_id])

    async def get_position(self, bet_id: int, user_id: str) -> Position | None:
        position = self._positions.get((bet_id, user_id))
        return replace(position) if position is not None else None

    async def list_positions(self, bet_id: int) -> list[Position]:
        return [replace(p) for (bid, _), p in self._positions.items() if bid == bet_id]

    async def owner_balance(self) -> int:
        return self._owner_balance

    async def total_balance(self) -> int:
        return self._total_balance

    async def facts_since(self, seq: int) -> list[LedgerFact]:
        # seq starts at 1, so list index == seq of the following fact
        return list(self._facts[seq:])

    def balance_of(self, account: str) -> int:
        """Amount transferred out of the ledger to ``account`` so far."""
        return self._accounts[account]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_bet(
        self,
        title: str,
        description: str,
        image_url: str | None,
        creator: str,
    ) -> Bet:
        async with self._lock:
            now = utc_now()
            bet = Bet(
                id=len(self._bets),
                title=title,
                description=description,
                image_url=image_url,
                creator=creator,
                created_at=now,
                updated_at=now,
            )
            self._bets.append(bet)
            self._emit(BetCreated, bet_id=bet.id, title=title, creator=creator)
            return replace(bet)

    async def place_stake(
        self, bet_id: int, user_id: str, side: BetSide, amount: int
    ) -> tuple[Bet, Position]:
        if amount <= 0:
            raise ValidationError(f"stake amount must be positive, got {amount}")
        async with self._lock:
            bet = self._require_bet(bet_id)
            if not accepts_stakes(bet.status):
                raise InvalidTransitionError(bet_id, bet.status.value, "accept stakes")

            now = utc_now()
            position = self._positions.get((bet_id, user_id))
            if position is None:
                position = Position(bet_id=bet_id, user_id=user_id, created_at=now)
                self._positions[(bet_id, user_id)] = position

            if side is BetSide.FOR:
                bet.total_for += amount
                position.for_amount += amount
            else:
                bet.total_against += amount
                position.against_amount += amount
            bet.updated_at = now
            position.updated_at = now
            self._total_balance += amount

            self._emit(
                BetPlaced,
                bet_id=bet_id,
                bettor=user_id,
                amount=amount,
                is_for=side is BetSide.FOR,
            )
            return replace(bet), replace(position)

    async def close_bet(self, bet_id: int) -> Bet:
        async with self._lock:
            bet = self._require_bet(bet_id)
            self._transition(bet, BetAction.CLOSE)
            self._emit(BetClosed, bet_id=bet_id)
            return replace(bet)

    async def cancel_bet(self, bet_id: int) -> Bet:
        async with self._lock:
            bet = self._require_bet(bet_id)
            self._transition(bet, BetAction.CANCEL)
            self._emit(BetResolved, bet_id=bet_id, result=bet.status)
            return replace(bet)

    async def resolve_bet(
        self,
        bet_id: int,
        status: BetStatus,
        fee_pct: int,
        fee: int,
        expected_pools: tuple[int, int],
    ) -> Bet:
        action = _RESOLVE_ACTIONS.get(status)
        if action is None:
            raise ValidationError(f"{status.value} is not a resolution outcome")
        async with self._lock:
            bet = self._require_bet(bet_id)
            if (bet.total_for, bet.total_against) != expected_pools:
                raise LedgerError(
                    f"bet {bet_id} pools changed to ({bet.total_for}, {bet.total_against}) "
                    f"before resolution at {expected_pools}"
                )
            self._transition(bet, action)
            bet.fee_pct = fee_pct
            self._owner_balance += fee
            self._emit(BetResolved, bet_id=bet_id, result=bet.status)
            return replace(bet)

    async def withdraw(self, bet_id: int, user_id: str, amount: int) -> Position:
        async with self._lock:
            self._require_bet(bet_id)
            position = self._positions.get((bet_id, user_id))
            if position is None or not position.has_stake:
                raise NotEligibleError(bet_id, user_id, "no stake on this bet")
            if position.withdrawn:
                raise AlreadyWithdrawnError(bet_id, user_id)

            position.withdrawn = True
            try:
                if amount > 0:
                    self._transfer(user_id, amount)
            except LedgerError:
                position.withdrawn = False
                raise
            position.updated_at = utc_now()
            self._emit(Withdrawal, bet_id=bet_id, user=user_id, amount=amount)
            return replace(position)

    async def owner_withdraw(self, amount: int) -> int:
        async with self._lock:
            if amount > self._owner_balance:
                raise InsufficientOwnerBalanceError(amount, self._owner_balance)
            self._transfer(self._owner_id, amount)
            self._owner_balance -= amount
            self._emit(OwnerWithdrawal, amount=amount)
            return self._owner_balance

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _require_bet(self, bet_id: int) -> Bet:
        if not (0 <= bet_id < len(self._bets)):
            raise NotFoundError(bet_id)
        return self._bets[bet_id]

    def _transition(self, bet: Bet, action: BetAction) -> None:
        bet.status = next_status(bet.id, bet.status, action)
        bet.updated_at = utc_now()

    def _transfer(self, to: str, amount: int) -> None:
        if amount > self._total_balance:
            raise LedgerError(
                f"transfer of {amount} exceeds ledger balance {self._total_balance}"
            )
        self._total_balance -= amount
        self._accounts[to] += amount

    def _emit(self, fact_type: type[LedgerFact], **fields: object) -> None:
        fact = fact_type(seq=len(self._facts) + 1, occurred_at=utc_now(), **fields)
        self._facts.append(fact)
        logger.debug("Ledger fact #%d %s", fact.seq, fact.kind.value)
