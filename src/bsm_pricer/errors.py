"""
Exceptions raised by the pricing engine.
"""


class PricingError(ValueError):
    """Base class for pricing failures."""


class InvalidDomainInputError(PricingError):
    """
    An input lies outside the domain of the model.

    Raised for a non-positive spot, strike, expiry or volatility, and for any
    input that is NaN or infinite.
    """

    def __init__(self, field: str, value: float, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} {reason} (got {value!r})")


class NonFiniteResultError(PricingError):
    """One or more outputs came out NaN or infinite."""

    def __init__(self, fields: list[str], detail: str | None = None):
        self.fields = list(fields)
        message = f"non-finite result for: {', '.join(self.fields)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
