"""
Analytics module for closed-form Black-Scholes-Merton pricing.

Provides the standard normal helpers, fixed-precision rounding and the
pricing engine itself.
"""

from bsm_pricer.analytics.black_scholes import (
    auxiliary,
    normalize,
    price,
    price_inputs,
    validate_inputs,
)
from bsm_pricer.analytics.normal import norm_cdf, norm_pdf
from bsm_pricer.analytics.rounding import round_half_away

__all__ = [
    "auxiliary",
    "norm_cdf",
    "norm_pdf",
    "normalize",
    "price",
    "price_inputs",
    "round_half_away",
    "validate_inputs",
]
