"""Unit tests for bet listing filters, BetBoard and FactFeed."""

from unittest.mock import MagicMock

import pytest

from src.pb_common.enums import BetSide, BetSort, FactKind, StatusFilter
from src.pb_ledger.application.feed import FactFeed
from src.pb_ledger.domain.models import Bet
from src.pb_ledger.infrastructure.memory_ledger import InMemoryLedger
from src.pb_registry.application.board import BetBoard
from src.pb_registry.domain.board import filter_bets
from tests.helpers import seed_bet


def _bet(bet_id: int, title: str, total_for: int = 0, description: str = "d") -> Bet:
    return Bet(
        id=bet_id, title=title, description=description, image_url=None,
        creator="x", total_for=total_for,
    )


class TestFilterBets:
    def test_newest_first_by_default(self) -> None:
        bets = [_bet(0, "a"), _bet(2, "c"), _bet(1, "b")]
        assert [b.id for b in filter_bets(bets)] == [2, 1, 0]

    def test_oldest(self) -> None:
        bets = [_bet(1, "b"), _bet(0, "a")]
        assert [b.id for b in filter_bets(bets, sort=BetSort.OLDEST)] == [0, 1]

    def test_highest_value_ties_broken_by_id(self) -> None:
        bets = [_bet(0, "a", 5), _bet(1, "b", 9), _bet(2, "c", 5)]
        assert [b.id for b in filter_bets(bets, sort=BetSort.HIGHEST_VALUE)] == [1, 0, 2]

    def test_search_is_case_insensitive_over_title_and_description(self) -> None:
        bets = [_bet(0, "Rain in Paris"), _bet(1, "Snow", description="paris forecast"), _bet(2, "x")]
        assert {b.id for b in filter_bets(bets, search="PARIS")} == {0, 1}

    def test_status_filter(self) -> None:
        from src.pb_common.enums import BetStatus

        bets = [_bet(0, "a"), _bet(1, "b"), _bet(2, "c")]
        bets[1].status = BetStatus.RESOLVED_AGAINST
        bets[2].status = BetStatus.CANCELLED
        assert [b.id for b in filter_bets(bets, status_filter=StatusFilter.RESOLVED)] == [1]
        assert [b.id for b in filter_bets(bets, status_filter=StatusFilter.OPEN)] == [0]


class TestFactFeed:
    async def test_delivers_in_order_and_advances_cursor(self, ledger: InMemoryLedger) -> None:
        feed = FactFeed(ledger)
        seen: list[FactKind] = []
        feed.subscribe(lambda fact: seen.append(fact.kind))

        await seed_bet(ledger, [("bob", BetSide.FOR, 3)])
        await feed.poll()
        assert seen == [FactKind.BET_CREATED, FactKind.BET_PLACED]
        assert feed.cursor == 2
        assert await feed.poll() == []

    async def test_failed_handler_retries_from_same_fact(self, ledger: InMemoryLedger) -> None:
        feed = FactFeed(ledger)
        handler = MagicMock(side_effect=[RuntimeError("boom"), None])
        feed.subscribe(handler)
        await seed_bet(ledger)

        with pytest.raises(RuntimeError):
            await feed.poll()
        assert feed.cursor == 0
        delivered = await feed.poll()
        assert [f.seq for f in delivered] == [1]
        assert feed.cursor == 1

    async def test_async_handler(self, ledger: InMemoryLedger) -> None:
        feed = FactFeed(ledger, start_after=1)
        seqs: list[int] = []

        async def handler(fact) -> None:
            seqs.append(fact.seq)

        feed.subscribe(handler)
        await seed_bet(ledger, [("bob", BetSide.FOR, 1)])
        await feed.poll()
        assert seqs == [2]


class TestBetBoard:
    async def test_listing_tracks_ledger_changes(self, ledger: InMemoryLedger) -> None:
        board = BetBoard(ledger)
        first = await seed_bet(ledger, title="Rain")
        assert [b.id for b in await board.listing()] == [first.id]

        await ledger.place_stake(first.id, "bob", BetSide.FOR, 40)
        second = await seed_bet(ledger, [("carol", BetSide.AGAINST, 10)], title="Snow")
        await ledger.close_bet(second.id)

        bets = await board.listing(sort=BetSort.HIGHEST_VALUE)
        assert [(b.id, b.total_pool) for b in bets] == [(first.id, 40), (second.id, 10)]
        closed = await board.listing(status_filter=StatusFilter.CLOSED)
        assert [b.title for b in closed] == ["Snow"]

    async def test_treasury_facts_are_ignored(self, ledger: InMemoryLedger) -> None:
        board = BetBoard(ledger)
        await ledger.owner_withdraw(0)
        assert await board.refresh() == 1
        assert await board.listing() == []
