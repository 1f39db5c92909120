"""Pool invariant verification.

INV-P1: sum(position.for_amount)     == bet.total_for
INV-P2: sum(position.against_amount) == bet.total_against
"""

import logging

from src.pb_ledger.domain.models import Bet, Position

logger = logging.getLogger(__name__)


def check_pool_invariants(bet: Bet, positions: list[Position]) -> list[str]:
    """Return violation strings for one bet (empty list when consistent)."""
    violations: list[str] = []
    for_sum = sum(p.for_amount for p in positions)
    against_sum = sum(p.against_amount for p in positions)

    if for_sum != bet.total_for:
        violations.append(
            f"INV-P1 violated: bet={bet.id} sum(for_amount)={for_sum} != total_for={bet.total_for}"
        )
    if against_sum != bet.total_against:
        violations.append(
            f"INV-P2 violated: bet={bet.id} sum(against_amount)={against_sum} "
            f"!= total_against={bet.total_against}"
        )

    if violations:
        for v in violations:
            logger.error(v)
    else:
        logger.debug(
            "Pool invariants OK: bet=%d, for=%d, against=%d",
            bet.id,
            bet.total_for,
            bet.total_against,
        )
    return violations
