"""
Pricing input and result types.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class PricingInputs:
    """
    Market and contract inputs in the units a trader types them.

    Attributes
    ----------
    spot : float
        Underlying price (> 0)
    strike : float
        Strike price (> 0)
    expiry : float
        Time to expiry in calendar days (> 0)
    volatility : float
        Annualized volatility in percent, e.g. 20 for 20% (> 0)
    risk_free_rate : float
        Risk-free rate in percent per year
    dividend : float
        Continuous dividend yield in percent per year
    """

    spot: float
    strike: float
    expiry: float
    volatility: float
    risk_free_rate: float
    dividend: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PricingInputs":
        """Build inputs from a mapping, coercing every field to float."""
        missing = [
            name
            for name in ("spot", "strike", "expiry", "volatility", "risk_free_rate")
            if name not in data
        ]
        if missing:
            raise ValueError(f"Missing pricing inputs: {', '.join(missing)}")
        return cls(
            spot=float(data["spot"]),
            strike=float(data["strike"]),
            expiry=float(data["expiry"]),
            volatility=float(data["volatility"]),
            risk_free_rate=float(data["risk_free_rate"]),
            dividend=float(data.get("dividend", 0.0)),
        )

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class NormalizedParameters:
    """
    Inputs converted to model units.

    Attributes
    ----------
    rate : float
        Risk-free rate as a decimal (R)
    vol : float
        Volatility as a decimal (V)
    time : float
        Time to expiry in years of 365 days (T)
    dividend : float
        Dividend yield as a decimal (D)
    """

    rate: float
    vol: float
    time: float
    dividend: float


@dataclass(frozen=True)
class AuxiliaryVariables:
    """The d1/d2 pair shared by every premium and Greek of one computation."""

    d1: float
    d2: float


@dataclass(frozen=True)
class OptionMetrics:
    """
    Premium and Greeks for one side (call or put).

    Attributes
    ----------
    premium : float
        Option value, rounded to 2 decimals
    delta : float
        dV/dS, rounded to 3 decimals
    theta : float
        Time decay per calendar day, rounded to 3 decimals
    vega : float
        Change per 1 point of volatility, rounded to 3 decimals
    gamma : float
        d²V/dS², rounded to 3 decimals
    rho : float
        Change per 1 point of rate, rounded to 3 decimals
    """

    premium: float
    delta: float
    theta: float
    vega: float
    gamma: float
    rho: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class PricingResult:
    """
    Complete output of one Black-Scholes-Merton computation.

    Attributes
    ----------
    call : OptionMetrics
        Call side
    put : OptionMetrics
        Put side
    inputs : PricingInputs
        Inputs the result was computed from
    params : NormalizedParameters
        Normalized model parameters
    aux : AuxiliaryVariables
        The d1/d2 pair both sides were computed from
    """

    call: OptionMetrics
    put: OptionMetrics
    inputs: PricingInputs
    params: NormalizedParameters
    aux: AuxiliaryVariables

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "inputs": self.inputs.to_dict(),
            "call": self.call.to_dict(),
            "put": self.put.to_dict(),
            "d1": self.aux.d1,
            "d2": self.aux.d2,
        }

    def __repr__(self) -> str:
        return (
            f"PricingResult(\n"
            f"  call={self.call},\n"
            f"  put={self.put},\n"
            f"  d1={self.aux.d1:.6f}, d2={self.aux.d2:.6f}\n"
            f")"
        )
