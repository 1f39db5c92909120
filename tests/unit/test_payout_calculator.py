"""Unit tests for pb_payout.domain.calculator (pure pari-mutuel arithmetic)."""

import pytest

from src.pb_common.enums import BetSide, BetStatus
from src.pb_common.errors import InternalError, InvalidTransitionError, ValidationError
from src.pb_ledger.domain.models import Bet, Position
from src.pb_payout.domain.calculator import (
    calculate_odds,
    platform_fee,
    position_payout,
    projected_winnings,
    resolved_payout,
)


def _bet(status: BetStatus, total_for: int, total_against: int, fee_pct: int | None = 10) -> Bet:
    return Bet(
        id=0,
        title="t",
        description="d",
        image_url=None,
        creator="alice",
        total_for=total_for,
        total_against=total_against,
        status=status,
        fee_pct=fee_pct,
    )


class TestCalculateOdds:
    def test_three_to_one(self) -> None:
        odds = calculate_odds(3, 1)
        assert round(odds.odds_for, 2) == 1.33
        assert odds.odds_against == 4.0

    def test_empty_side_has_no_odds(self) -> None:
        odds = calculate_odds(5, 0)
        assert odds.odds_for == 1.0
        assert odds.odds_against is None

    def test_empty_bet(self) -> None:
        odds = calculate_odds(0, 0)
        assert odds.odds_for is None
        assert odds.odds_against is None


class TestProjectedWinnings:
    def test_fee_applies_to_existing_pool_only(self) -> None:
        # pool=4000, fee 10% → 3600 + stake 1000 = 4600; share = 1000/(3000+1000)
        assert projected_winnings(3000, 1000, BetSide.FOR, 1000, 10) == 1150

    def test_against_side(self) -> None:
        # share = 1000/(1000+1000) of (4000*0.9 + 1000) = 2300
        assert projected_winnings(3000, 1000, BetSide.AGAINST, 1000, 10) == 2300

    def test_first_stake_on_empty_bet_returns_stake(self) -> None:
        assert projected_winnings(0, 0, BetSide.FOR, 500, 10) == 500

    def test_zero_fee(self) -> None:
        # (1/2) * (2 + 1) = 1.5 → 1500 in units of 1000
        assert projected_winnings(1000, 1000, BetSide.FOR, 1000, 0) == 1500

    def test_floors(self) -> None:
        # exact value 1 * (3*97 + 100) / (2*100) = 1.955
        assert projected_winnings(1, 2, BetSide.FOR, 1, 3) == 1

    @pytest.mark.parametrize("stake", [0, -1])
    def test_non_positive_stake_rejected(self, stake: int) -> None:
        with pytest.raises(ValidationError):
            projected_winnings(10, 10, BetSide.FOR, stake, 5)


class TestPlatformFee:
    def test_ten_percent_of_losing_pool(self) -> None:
        assert platform_fee(1000, 10) == 100

    def test_floors(self) -> None:
        assert platform_fee(999, 10) == 99

    def test_invalid_pct(self) -> None:
        with pytest.raises(ValueError):
            platform_fee(1000, 150)


class TestResolvedPayout:
    def test_worked_example(self) -> None:
        # totalFor=3 (A=2, B=1), totalAgainst=1, fee 10% → winner pool 3.9
        assert resolved_payout(2000, 3000, 1000, 10) == 2600
        assert resolved_payout(1000, 3000, 1000, 10) == 1300

    def test_zero_stake(self) -> None:
        assert resolved_payout(0, 0, 1000, 10) == 0

    def test_sum_never_exceeds_distributable_pool(self) -> None:
        stakes = [333, 333, 334]
        winning, losing, fee_pct = sum(stakes), 101, 7
        paid = sum(resolved_payout(s, winning, losing, fee_pct) for s in stakes)
        assert paid <= winning + losing - platform_fee(losing, fee_pct)


class TestPositionPayout:
    def test_resolved_for_pays_for_side(self) -> None:
        bet = _bet(BetStatus.RESOLVED_FOR, 3000, 1000)
        pos = Position(bet_id=0, user_id="a", for_amount=2000, against_amount=500)
        assert position_payout(bet, pos) == 2600

    def test_resolved_against_pays_against_side(self) -> None:
        bet = _bet(BetStatus.RESOLVED_AGAINST, 3000, 1000)
        pos = Position(bet_id=0, user_id="a", for_amount=0, against_amount=1000)
        # 1000/1000 * (1000 + 3000*0.9)
        assert position_payout(bet, pos) == 3700

    def test_loser_gets_zero(self) -> None:
        bet = _bet(BetStatus.RESOLVED_AGAINST, 3000, 1000)
        pos = Position(bet_id=0, user_id="a", for_amount=2000)
        assert position_payout(bet, pos) == 0

    def test_cancelled_refunds_both_sides(self) -> None:
        bet = _bet(BetStatus.CANCELLED, 3000, 1000, fee_pct=None)
        pos = Position(bet_id=0, user_id="a", for_amount=2000, against_amount=300)
        assert position_payout(bet, pos) == 2300

    @pytest.mark.parametrize("status", [BetStatus.OPEN, BetStatus.CLOSED])
    def test_non_terminal_rejected(self, status: BetStatus) -> None:
        bet = _bet(status, 3000, 1000)
        with pytest.raises(InvalidTransitionError):
            position_payout(bet, Position(bet_id=0, user_id="a", for_amount=1))

    def test_resolved_without_fee_is_internal_error(self) -> None:
        bet = _bet(BetStatus.RESOLVED_FOR, 3000, 1000, fee_pct=None)
        with pytest.raises(InternalError):
            position_payout(bet, Position(bet_id=0, user_id="a", for_amount=1))
