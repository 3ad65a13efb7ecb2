"""
Fixed-precision rounding for reported outputs.
"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float, places: int) -> float:
    """
    Round to a fixed number of decimal places, ties away from zero.

    The exact binary value of the float is rounded, not its shortest repr, so
    1.005 (stored as 1.00499999999999989...) rounds down to 1.0. Callers must
    pass finite values.

    Parameters
    ----------
    value : float
        Finite value to round
    places : int
        Number of decimal places (>= 0)

    Returns
    -------
    float
        Rounded value
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
