"""BetBoard: cached bet listing kept current from the ledger fact stream.

The cache only reloads bets named by facts newer than its cursor, so a
listing costs one ``facts_since`` call plus one ``get_bet`` per changed bet.
"""
import logging

from src.pb_common.enums import BetSort, StatusFilter
from src.pb_ledger.application.feed import FactFeed
from src.pb_ledger.domain.facts import LedgerFact, affected_bet_id
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_ledger.domain.models import Bet
from src.pb_registry.domain.board import filter_bets

logger = logging.getLogger(__name__)


class BetBoard:
    def __init__(self, ledger: LedgerProtocol) -> None:
        self._ledger = ledger
        self._bets: dict[int, Bet] = {}
        self._feed = FactFeed(ledger)
        self._feed.subscribe(self._on_fact)

    async def _on_fact(self, fact: LedgerFact) -> None:
        bet_id = affected_bet_id(fact)
        if bet_id is None:
            return
        bet = await self._ledger.get_bet(bet_id)
        if bet is None:
            logger.warning("Fact #%d names unknown bet %d", fact.seq, bet_id)
            return
        self._bets[bet_id] = bet

    async def refresh(self) -> int:
        """Apply pending facts; return how many were applied."""
        return len(await self._feed.poll())

    async def listing(
        self,
        search: str | None = None,
        status_filter: StatusFilter = StatusFilter.ALL,
        sort: BetSort = BetSort.NEWEST,
    ) -> list[Bet]:
        await self.refresh()
        return filter_bets(list(self._bets.values()), search, status_filter, sort)
