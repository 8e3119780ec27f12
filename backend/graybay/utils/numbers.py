"""
Rounding helpers for figures shown on the dashboard.
"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round like a spreadsheet does: halves go away from zero.

    Python's round() uses banker's rounding, which turns 12.25 into 12.2;
    dashboard figures expect 12.3.
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def percentage(part: float, whole: float) -> float:
    """part / whole × 100, or 0 when whole is zero."""
    if not whole:
        return 0.0
    return part / whole * 100
