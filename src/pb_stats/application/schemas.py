"""Pydantic schemas for pb_stats."""

from pydantic import BaseModel


class UserBetItem(BaseModel):
    id: int
    title: str
    status: str
    for_amount: int
    against_amount: int
    total_for: int
    total_against: int
    withdrawn: bool
    withdrawable: bool
    payout: int | None     # None while the bet is OPEN or CLOSED


class UserStats(BaseModel):
    user_id: str
    total_bets_placed: int
    total_amount_bet: int
    total_amount_bet_display: str
    total_winnings: int
    total_winnings_display: str
    active_bets: list[UserBetItem]
    past_bets: list[UserBetItem]
    skipped_bet_ids: list[int]
