"""Domain models for pb_ledger: pure dataclasses, no business logic.

Snapshots handed out by a ledger are copies; mutating one never changes
ledger state.
"""

from dataclasses import dataclass
from datetime import datetime

from src.pb_common.enums import BetSide, BetStatus


@dataclass
class Bet:
    id: int
    title: str
    description: str
    image_url: str | None
    creator: str
    total_for: int = 0            # units, sum of all positions' for_amount
    total_against: int = 0        # units, sum of all positions' against_amount
    status: BetStatus = BetStatus.OPEN
    fee_pct: int | None = None    # frozen at resolution, None until then
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def total_pool(self) -> int:
        return self.total_for + self.total_against

    def side_total(self, side: BetSide) -> int:
        return self.total_for if side is BetSide.FOR else self.total_against


@dataclass
class Position:
    bet_id: int
    user_id: str
    for_amount: int = 0
    against_amount: int = 0
    withdrawn: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def total_stake(self) -> int:
        return self.for_amount + self.against_amount

    @property
    def has_stake(self) -> bool:
        return self.total_stake > 0

    def side_amount(self, side: BetSide) -> int:
        return self.for_amount if side is BetSide.FOR else self.against_amount
