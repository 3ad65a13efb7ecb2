"""
Black-Scholes-Merton Option Pricing Engine

Closed-form European call and put premiums and Greeks with continuous
dividend yield.
"""

from bsm_pricer._version import __version__

# Core components
from bsm_pricer.analytics.black_scholes import price, price_inputs
from bsm_pricer.analytics.normal import norm_cdf, norm_pdf
from bsm_pricer.errors import InvalidDomainInputError, NonFiniteResultError, PricingError
from bsm_pricer.types import (
    AuxiliaryVariables,
    NormalizedParameters,
    OptionMetrics,
    PricingInputs,
    PricingResult,
)

# Presentation
from bsm_pricer.presentation import display_values, format_report

__all__ = [
    # Version
    "__version__",
    # Engine
    "price",
    "price_inputs",
    "norm_cdf",
    "norm_pdf",
    # Types
    "PricingInputs",
    "NormalizedParameters",
    "AuxiliaryVariables",
    "OptionMetrics",
    "PricingResult",
    # Errors
    "PricingError",
    "InvalidDomainInputError",
    "NonFiniteResultError",
    # Presentation
    "display_values",
    "format_report",
]
