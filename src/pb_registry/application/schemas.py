"""Pydantic schemas for pb_registry API requests and responses."""

from pydantic import BaseModel, Field

from src.pb_common.amounts import units_to_display
from src.pb_common.datetime_utils import iso_or_none
from src.pb_ledger.domain.models import Bet
from src.pb_payout.domain.calculator import calculate_odds
from src.pb_registry.domain.state_machine import is_terminal


class CreateBetRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=5000)
    image_url: str | None = Field(None, max_length=2000)


def _round_odds(value: float | None) -> float | None:
    return round(value, 2) if value is not None else None


class BetListItem(BaseModel):
    id: int
    title: str
    status: str
    total_for: int
    total_against: int
    total_pool: int
    total_pool_display: str
    created_at: str | None

    @classmethod
    def from_domain(cls, bet: Bet) -> "BetListItem":
        return cls(
            id=bet.id,
            title=bet.title,
            status=bet.status.value,
            total_for=bet.total_for,
            total_against=bet.total_against,
            total_pool=bet.total_pool,
            total_pool_display=units_to_display(bet.total_pool),
            created_at=iso_or_none(bet.created_at),
        )


class BetListResponse(BaseModel):
    items: list[BetListItem]
    total: int


class BetDetail(BaseModel):
    id: int
    title: str
    description: str
    image_url: str | None
    creator: str
    status: str
    status_code: int
    is_terminal: bool
    total_for: int
    total_against: int
    total_pool: int
    total_for_display: str
    total_against_display: str
    odds_for: float | None
    odds_against: float | None
    fee_pct: int | None
    created_at: str | None
    updated_at: str | None

    @classmethod
    def from_domain(cls, bet: Bet) -> "BetDetail":
        odds = calculate_odds(bet.total_for, bet.total_against)
        return cls(
            id=bet.id,
            title=bet.title,
            description=bet.description,
            image_url=bet.image_url,
            creator=bet.creator,
            status=bet.status.value,
            status_code=bet.status.code,
            is_terminal=is_terminal(bet.status),
            total_for=bet.total_for,
            total_against=bet.total_against,
            total_pool=bet.total_pool,
            total_for_display=units_to_display(bet.total_for),
            total_against_display=units_to_display(bet.total_against),
            odds_for=_round_odds(odds.odds_for),
            odds_against=_round_odds(odds.odds_against),
            fee_pct=bet.fee_pct,
            created_at=iso_or_none(bet.created_at),
            updated_at=iso_or_none(bet.updated_at),
        )
