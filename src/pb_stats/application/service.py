"""UserStatsService: per-user projection over all bets.

Recomputed on every call by scanning bet ids 0..bet_count-1 and reading
the user's position on each: O(bets) ledger reads. Fine at modest bet
counts; it holds no state of its own.

Winnings are the pari-mutuel payout of positions on resolved bets, whether
or not they were withdrawn yet. Cancellation refunds are not winnings.
"""
import logging

from src.pb_common.amounts import units_to_display
from src.pb_common.enums import BetStatus
from src.pb_ledger.domain.ledger import LedgerProtocol
from src.pb_ledger.domain.models import Bet, Position
from src.pb_payout.domain.calculator import position_payout
from src.pb_position.domain.eligibility import can_withdraw
from src.pb_registry.domain.state_machine import is_terminal
from src.pb_stats.application.schemas import UserBetItem, UserStats

logger = logging.getLogger(__name__)


def _to_item(bet: Bet, position: Position) -> UserBetItem:
    return UserBetItem(
        id=bet.id,
        title=bet.title,
        status=bet.status.value,
        for_amount=position.for_amount,
        against_amount=position.against_amount,
        total_for=bet.total_for,
        total_against=bet.total_against,
        withdrawn=position.withdrawn,
        withdrawable=can_withdraw(bet, position),
        payout=position_payout(bet, position) if is_terminal(bet.status) else None,
    )


class UserStatsService:
    async def get_user_stats(self, ledger: LedgerProtocol, user_id: str) -> UserStats:
        active: list[UserBetItem] = []
        past: list[UserBetItem] = []
        skipped: list[int] = []
        total_amount_bet = 0
        total_winnings = 0

        for bet_id in range(await ledger.bet_count()):
            try:
                bet = await ledger.get_bet(bet_id)
                position = await ledger.get_position(bet_id, user_id)
                if bet is None or position is None or not position.has_stake:
                    continue
                item = _to_item(bet, position)
            except Exception:
                # One unreadable record must not abort the whole projection
                logger.exception("Skipping bet %d in stats for user %s", bet_id, user_id)
                skipped.append(bet_id)
                continue

            total_amount_bet += position.total_stake
            if is_terminal(bet.status):
                past.append(item)
                if bet.status is not BetStatus.CANCELLED and item.payout:
                    total_winnings += item.payout
            else:
                active.append(item)

        return UserStats(
            user_id=user_id,
            total_bets_placed=len(active) + len(past),
            total_amount_bet=total_amount_bet,
            total_amount_bet_display=units_to_display(total_amount_bet),
            total_winnings=total_winnings,
            total_winnings_display=units_to_display(total_winnings),
            active_bets=active,
            past_bets=past,
            skipped_bet_ids=skipped,
        )
