"""FactFeed: cursor over the ledger's fact stream.

Consumers call ``poll()`` after a confirmed mutation (or on a timer) to push
new facts to subscribed handlers. Handlers may be plain callables or
coroutine functions.
"""
import inspect
import logging
from collections.abc import Awaitable, Callable

from src.pb_ledger.domain.facts import LedgerFact
from src.pb_ledger.domain.ledger import LedgerProtocol

logger = logging.getLogger(__name__)

FactHandler = Callable[[LedgerFact], Awaitable[None] | None]


class FactFeed:
    def __init__(self, ledger: LedgerProtocol, start_after: int = 0) -> None:
        self._ledger = ledger
        self._cursor = start_after
        self._handlers: list[FactHandler] = []

    @property
    def cursor(self) -> int:
        return self._cursor

    def subscribe(self, handler: FactHandler) -> None:
        self._handlers.append(handler)

    async def poll(self) -> list[LedgerFact]:
        """Deliver every fact newer than the cursor; return what was delivered.

        The cursor only advances past a fact once all handlers accepted it, so
        a handler failure makes the next poll retry from that fact.
        """
        facts = await self._ledger.facts_since(self._cursor)
        for fact in facts:
            for handler in self._handlers:
                result = handler(fact)
                if inspect.isawaitable(result):
                    await result
            self._cursor = fact.seq
        if facts:
            logger.debug("FactFeed delivered %d facts, cursor=%d", len(facts), self._cursor)
        return facts
