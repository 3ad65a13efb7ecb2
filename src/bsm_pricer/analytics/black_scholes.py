"""
Black-Scholes-Merton closed-form pricing with continuous dividend yield.

Inputs arrive in trader units (days, percent) and are normalized to model
units once. d1 and d2 are then computed once and every premium and Greek for
both sides is derived from that single pair. Each output is rounded on its
own: premiums to 2 decimals, Greeks to 3. Intermediates are never rounded,
with one exception: call theta consumes the rounded call delta.
"""

import logging
import math

from bsm_pricer.analytics.normal import SQRT_2PI, norm_cdf, norm_pdf
from bsm_pricer.analytics.rounding import round_half_away
from bsm_pricer.errors import InvalidDomainInputError, NonFiniteResultError
from bsm_pricer.types import (
    AuxiliaryVariables,
    NormalizedParameters,
    OptionMetrics,
    PricingInputs,
    PricingResult,
)

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.0
PREMIUM_PLACES = 2
GREEK_PLACES = 3

_POSITIVE_FIELDS = ("spot", "strike", "expiry", "volatility")
_OUTPUT_FIELDS = (
    "call_premium",
    "put_premium",
    "call_delta",
    "put_delta",
    "gamma",
    "vega",
    "call_rho",
    "put_rho",
    "call_theta",
    "put_theta",
)


def validate_inputs(inputs: PricingInputs) -> None:
    """
    Reject inputs outside the model's domain.

    Raises
    ------
    InvalidDomainInputError
        If any input is NaN/inf, or spot, strike, expiry or volatility is <= 0
    """
    for field, value in inputs.to_dict().items():
        if not math.isfinite(value):
            logger.warning("Rejected pricing input %s=%r", field, value)
            raise InvalidDomainInputError(field, value, "must be finite")
    for field in _POSITIVE_FIELDS:
        value = getattr(inputs, field)
        if value <= 0:
            logger.warning("Rejected pricing input %s=%r", field, value)
            raise InvalidDomainInputError(field, value, "must be positive")


def normalize(inputs: PricingInputs) -> NormalizedParameters:
    """Convert percent and day inputs to decimal rates and years."""
    return NormalizedParameters(
        rate=inputs.risk_free_rate / 100,
        vol=inputs.volatility / 100,
        time=inputs.expiry / DAYS_PER_YEAR,
        dividend=inputs.dividend / 100,
    )


def auxiliary(inputs: PricingInputs, params: NormalizedParameters) -> AuxiliaryVariables:
    """
    Compute d1 and d2.

    d1 = (ln(S/K) + (R - D + V²/2)·T) / (V·√T)
    d2 = d1 - V·√T
    """
    R, V, T, D = params.rate, params.vol, params.time, params.dividend
    d1 = (math.log(inputs.spot / inputs.strike) + (R - D + V**2 / 2) * T) / (V * math.sqrt(T))
    d2 = d1 - V * math.sqrt(T)
    return AuxiliaryVariables(d1=d1, d2=d2)


# Every formula below returns the raw, unrounded value.


def call_premium(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    R, T, D = params.rate, params.time, params.dividend
    r1 = inputs.spot * math.exp(-D * T) * norm_cdf(aux.d1)
    r2 = inputs.strike * math.exp(-R * T) * norm_cdf(aux.d2)
    return r1 - r2


def put_premium(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    R, T, D = params.rate, params.time, params.dividend
    return (
        inputs.strike * math.exp(-R * T) * norm_cdf(-aux.d2)
        - inputs.spot * math.exp(-D * T) * norm_cdf(-aux.d1)
    )


def call_delta(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    return math.exp(-params.dividend * params.time) * norm_cdf(aux.d1)


def put_delta(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    return math.exp(-params.dividend * params.time) * (norm_cdf(aux.d1) - 1)


def gamma(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    """Gamma = φ(d1)·e^(-DT) / (S·V·√T), identical for calls and puts."""
    V, T, D = params.vol, params.time, params.dividend
    return norm_pdf(aux.d1) * math.exp(-T * D) / (inputs.spot * V * math.sqrt(T))


def vega(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    """Vega per 1 point (1%) of volatility, identical for calls and puts."""
    T, D = params.time, params.dividend
    return norm_pdf(aux.d1) * math.exp(-T * D) * inputs.spot * math.sqrt(T) / 100


def call_rho(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    """
    Rho per 1 point (1%) of rate.

    Carries an extra e^(-DT) factor that the textbook formula does not have.
    Outputs are expected to match that convention, so keep it.
    """
    R, T, D = params.rate, params.time, params.dividend
    return inputs.strike * T * math.exp(-R * T) * norm_cdf(aux.d2) * math.exp(-D * T) / 100


def put_rho(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    R, T, D = params.rate, params.time, params.dividend
    return -inputs.strike * T * math.exp(-R * T) * norm_cdf(-aux.d2) * math.exp(-D * T) / 100


def _theta_decay(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    # -(S/√(2π))·e^(-d1²/2)·V·e^(-TD) / (2√T), evaluated directly, not via norm_pdf
    V, T, D = params.vol, params.time, params.dividend
    numerator = -(inputs.spot / SQRT_2PI) * math.exp(aux.d1 * aux.d1 / -2) * V * math.exp(-T * D)
    return numerator / (2 * math.sqrt(T))


def call_theta(
    inputs: PricingInputs,
    params: NormalizedParameters,
    aux: AuxiliaryVariables,
    rounded_call_delta: float,
) -> float:
    """
    Call theta per calendar day.

    The dividend term uses the call delta as reported (rounded to 3 decimals),
    not the raw e^(-DT)·Φ(d1). Put theta does not mirror this.
    """
    R, T, D = params.rate, params.time, params.dividend
    carry = D * inputs.spot * rounded_call_delta
    financing = R * inputs.strike * math.exp(-R * T) * norm_cdf(-aux.d2)
    return (_theta_decay(inputs, params, aux) + carry - financing) / DAYS_PER_YEAR


def put_theta(inputs: PricingInputs, params: NormalizedParameters, aux: AuxiliaryVariables) -> float:
    """Put theta per calendar day, dividend term recomputed from Φ(-d1)."""
    R, T, D = params.rate, params.time, params.dividend
    carry = D * inputs.spot * norm_cdf(-aux.d1) * math.exp(-T * D)
    financing = R * inputs.strike * math.exp(-R * T) * norm_cdf(-aux.d2)
    return (_theta_decay(inputs, params, aux) - carry + financing) / DAYS_PER_YEAR


def _check_finite(raw: dict[str, float]) -> None:
    bad = [name for name, value in raw.items() if not math.isfinite(value)]
    if bad:
        raise NonFiniteResultError(bad)


def price_inputs(inputs: PricingInputs) -> PricingResult:
    """
    Price a European call and put under Black-Scholes-Merton.

    Parameters
    ----------
    inputs : PricingInputs
        Spot, strike, expiry (days), volatility (%), rate (%), dividend (%)

    Returns
    -------
    PricingResult
        Call and put metrics sharing one d1/d2 pair

    Raises
    ------
    InvalidDomainInputError
        If the inputs lie outside the model's domain
    NonFiniteResultError
        If any output is NaN or infinite, or an intermediate overflows
    """
    validate_inputs(inputs)
    params = normalize(inputs)

    try:
        aux = auxiliary(inputs, params)
        raw = {
            "call_premium": call_premium(inputs, params, aux),
            "put_premium": put_premium(inputs, params, aux),
            "call_delta": call_delta(inputs, params, aux),
            "put_delta": put_delta(inputs, params, aux),
            "gamma": gamma(inputs, params, aux),
            "vega": vega(inputs, params, aux),
            "call_rho": call_rho(inputs, params, aux),
            "put_rho": put_rho(inputs, params, aux),
            "put_theta": put_theta(inputs, params, aux),
        }
    except (OverflowError, ZeroDivisionError, ValueError) as exc:
        # ValueError here is a math domain error, e.g. ln(S/K) once S/K underflows to 0
        raise NonFiniteResultError(list(_OUTPUT_FIELDS), str(exc)) from exc
    _check_finite(raw)

    rounded_call_delta = round_half_away(raw["call_delta"], GREEK_PLACES)
    raw["call_theta"] = call_theta(inputs, params, aux, rounded_call_delta)
    _check_finite({"call_theta": raw["call_theta"]})

    logger.debug(
        "Normalized R=%r V=%r T=%r D=%r; d1=%r d2=%r",
        params.rate,
        params.vol,
        params.time,
        params.dividend,
        aux.d1,
        aux.d2,
    )

    shared_gamma = round_half_away(raw["gamma"], GREEK_PLACES)
    shared_vega = round_half_away(raw["vega"], GREEK_PLACES)
    call = OptionMetrics(
        premium=round_half_away(raw["call_premium"], PREMIUM_PLACES),
        delta=rounded_call_delta,
        theta=round_half_away(raw["call_theta"], GREEK_PLACES),
        vega=shared_vega,
        gamma=shared_gamma,
        rho=round_half_away(raw["call_rho"], GREEK_PLACES),
    )
    put = OptionMetrics(
        premium=round_half_away(raw["put_premium"], PREMIUM_PLACES),
        delta=round_half_away(raw["put_delta"], GREEK_PLACES),
        theta=round_half_away(raw["put_theta"], GREEK_PLACES),
        vega=shared_vega,
        gamma=shared_gamma,
        rho=round_half_away(raw["put_rho"], GREEK_PLACES),
    )
    return PricingResult(call=call, put=put, inputs=inputs, params=params, aux=aux)


def price(
    spot: float,
    strike: float,
    expiry_days: float,
    volatility_pct: float,
    risk_free_rate_pct: float,
    dividend_pct: float = 0.0,
) -> PricingResult:
    """
    Price a European call and put from raw trader inputs.

    Parameters
    ----------
    spot : float
        Underlying price (> 0)
    strike : float
        Strike price (> 0)
    expiry_days : float
        Calendar days to expiry (> 0)
    volatility_pct : float
        Annualized volatility in percent (> 0)
    risk_free_rate_pct : float
        Risk-free rate in percent per year
    dividend_pct : float
        Continuous dividend yield in percent per year

    Returns
    -------
    PricingResult
        Call and put metrics

    Examples
    --------
    >>> result = price(100, 100, 365, 20, 5)
    >>> result.call.premium, result.put.premium
    (10.45, 5.57)
    """
    inputs = PricingInputs(
        spot=spot,
        strike=strike,
        expiry=expiry_days,
        volatility=volatility_pct,
        risk_free_rate=risk_free_rate_pct,
        dividend=dividend_pct,
    )
    return price_inputs(inputs)
