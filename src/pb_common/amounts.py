"""Integer arithmetic utilities for ledger amounts.

All stakes, pools, payouts and balances are int in the ledger's smallest
unit. No float, no Decimal.
"""

from config.settings import settings


def validate_amount(amount: int) -> None:
    """Validate that a stake or withdrawal amount is a positive integer."""
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValueError(f"Amount must be a positive integer, got {amount!r}")


def validate_fee_pct(fee_pct: int) -> None:
    """Validate that a platform fee percent is in the range [0, 100]."""
    if not (0 <= fee_pct <= 100):
        raise ValueError(f"Fee percent must be between 0 and 100, got {fee_pct}")


def units_to_display(amount: int, decimals: int | None = None, places: int = 4) -> str:
    """Convert units to a truncated display string: 1500000000000000000 -> '1.5000'.

    ``decimals`` defaults to settings.AMOUNT_DECIMALS.
    """
    if decimals is None:
        decimals = settings.AMOUNT_DECIMALS
    sign = "-" if amount < 0 else ""
    amount = abs(amount)
    whole, frac = divmod(amount, 10**decimals)
    if places == 0:
        return f"{sign}{whole:,}"
    frac_str = f"{frac:0{decimals}d}"[:places].ljust(places, "0") if decimals else "0" * places
    return f"{sign}{whole:,}.{frac_str}"
