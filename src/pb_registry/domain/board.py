"""Search, status filter and sort for bet listings: pure functions."""

from src.pb_common.enums import BetSort, BetStatus, StatusFilter
from src.pb_ledger.domain.models import Bet

_FILTER_STATUSES: dict[StatusFilter, frozenset[BetStatus]] = {
    StatusFilter.OPEN: frozenset({BetStatus.OPEN}),
    StatusFilter.CLOSED: frozenset({BetStatus.CLOSED}),
    StatusFilter.RESOLVED: frozenset({BetStatus.RESOLVED_FOR, BetStatus.RESOLVED_AGAINST}),
    StatusFilter.CANCELLED: frozenset({BetStatus.CANCELLED}),
}


def matches_search(bet: Bet, search: str | None) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in bet.title.lower() or needle in bet.description.lower()


def matches_status(bet: Bet, status_filter: StatusFilter) -> bool:
    if status_filter is StatusFilter.ALL:
        return True
    return bet.status in _FILTER_STATUSES[status_filter]


def filter_bets(
    bets: list[Bet],
    search: str | None = None,
    status_filter: StatusFilter = StatusFilter.ALL,
    sort: BetSort = BetSort.NEWEST,
) -> list[Bet]:
    filtered = [b for b in bets if matches_search(b, search) and matches_status(b, status_filter)]

    # ids are sequential, so id order is creation order
    if sort is BetSort.NEWEST:
        filtered.sort(key=lambda b: b.id, reverse=True)
    elif sort is BetSort.OLDEST:
        filtered.sort(key=lambda b: b.id)
    else:
        filtered.sort(key=lambda b: (-b.total_pool, b.id))
    return filtered
