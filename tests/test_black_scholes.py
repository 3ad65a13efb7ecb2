"""
Tests for the Black-Scholes-Merton pricing engine.
"""

import math

import pytest

from bsm_pricer.analytics import black_scholes as bs
from bsm_pricer.analytics.black_scholes import auxiliary, normalize, price, price_inputs
from bsm_pricer.analytics.normal import norm_cdf
from bsm_pricer.analytics.rounding import round_half_away
from bsm_pricer.types import PricingInputs, PricingResult
from tests.utils.black_scholes import (
    bsm_call,
    bsm_gamma,
    bsm_put,
    bsm_rho_call,
    bsm_rho_put,
    bsm_theta_put,
    bsm_vega,
)

# spot, strike, expiry (days), volatility (%), rate (%), dividend (%)
VALID_INPUTS = [
    (100, 100, 365, 20, 5, 0),  # ATM
    (100, 90, 365, 20, 5, 0),  # ITM call
    (100, 110, 365, 20, 5, 0),  # OTM call
    (100, 110, 90, 25, 4, 2),  # dividend
    (120, 100, 30, 30, 3, 1.5),  # deep ITM, short dated
    (50, 60, 730, 45, 6, 8),  # long dated, dividend above rate
    (100, 100, 182, 35, 2, 12),
    (2500, 2400, 7, 15, 4.5, 1.2),  # index-like, one week
    (10, 12, 1, 80, 5, 0),  # one day, high vol
    (100, 100, 365, 20, -0.5, 0),  # negative rate
]


def _model_units(args):
    spot, strike, expiry, vol, rate, div = args
    return spot, strike, rate / 100, div / 100, vol / 100, expiry / 365


class TestReferenceScenario:
    """ATM one-year call: S=K=100, 365 days, 20% vol, 5% rate, no dividend."""

    @pytest.fixture
    def result(self) -> PricingResult:
        return price(100, 100, 365, 20, 5, 0)

    def test_premiums(self, result):
        assert result.call.premium == pytest.approx(10.45, abs=0.05)
        assert result.put.premium == pytest.approx(5.57, abs=0.05)

    def test_deltas(self, result):
        assert result.call.delta == pytest.approx(0.637, abs=0.01)
        assert result.put.delta == pytest.approx(-0.363, abs=0.01)

    def test_gamma_vega(self, result):
        assert result.call.gamma == pytest.approx(0.019, abs=0.002)
        assert result.call.vega == pytest.approx(0.375, abs=0.02)

    def test_auxiliary_variables(self, result):
        assert result.aux.d1 == pytest.approx(0.35, abs=1e-12)
        assert result.aux.d2 == pytest.approx(0.15, abs=1e-12)

    def test_price_matches_price_inputs(self, result):
        inputs = PricingInputs(
            spot=100, strike=100, expiry=365, volatility=20, risk_free_rate=5, dividend=0
        )
        assert price_inputs(inputs) == result


class TestNormalization:
    """Test conversion from trader units to model units."""

    def test_normalize(self):
        inputs = PricingInputs(
            spot=100, strike=95, expiry=73, volatility=25, risk_free_rate=4, dividend=1.5
        )
        params = normalize(inputs)
        assert params.rate == 0.04
        assert params.vol == 0.25
        assert params.time == 0.2
        assert params.dividend == 0.015

    def test_normalize_is_pure(self):
        inputs = PricingInputs(
            spot=100, strike=95, expiry=73, volatility=25, risk_free_rate=4, dividend=1.5
        )
        assert normalize(inputs) == normalize(inputs)
        assert inputs.expiry == 73

    def test_auxiliary_formula(self):
        inputs = PricingInputs(
            spot=100, strike=110, expiry=90, volatility=25, risk_free_rate=4, dividend=2
        )
        params = normalize(inputs)
        aux = auxiliary(inputs, params)
        expected_d1 = (
            math.log(100 / 110) + (0.04 - 0.02 + 0.25**2 / 2) * (90 / 365)
        ) / (0.25 * math.sqrt(90 / 365))
        assert aux.d1 == pytest.approx(expected_d1, abs=1e-14)
        assert aux.d2 == pytest.approx(expected_d1 - 0.25 * math.sqrt(90 / 365), abs=1e-14)


class TestPutCallParity:
    """C - P = S·e^(-DT) - K·e^(-RT), up to premium rounding."""

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_parity(self, args):
        result = price(*args)
        spot, strike, r, q, _, T = _model_units(args)
        rhs = spot * math.exp(-q * T) - strike * math.exp(-r * T)
        assert abs((result.call.premium - result.put.premium) - rhs) <= 0.01 + 1e-9


class TestBounds:
    """Sign and range properties of the Greeks."""

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_delta_bounds(self, args):
        result = price(*args)
        assert 0.0 <= result.call.delta <= 1.0
        assert -1.0 <= result.put.delta <= 0.0

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_gamma_vega_non_negative(self, args):
        result = price(*args)
        assert result.call.gamma >= 0.0
        assert result.call.vega >= 0.0

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_rho_signs(self, args):
        result = price(*args)
        assert result.call.rho >= 0.0
        assert result.put.rho <= 0.0


class TestSharedGreeks:
    """Gamma and vega do not depend on the side."""

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_gamma_vega_shared(self, args):
        result = price(*args)
        assert result.call.gamma == result.put.gamma
        assert result.call.vega == result.put.vega


class TestSymmetry:
    """At the money with zero rate and dividend the call and put coincide."""

    @pytest.mark.parametrize("spot,expiry,vol", [(100, 365, 20), (42.5, 90, 55), (1000, 7, 12)])
    def test_atm_zero_rate_call_equals_put(self, spot, expiry, vol):
        result = price(spot, spot, expiry, vol, 0, 0)
        assert result.call.premium == pytest.approx(result.put.premium, abs=1e-12)
        assert result.call.theta == pytest.approx(result.put.theta, abs=1e-12)


class TestDeterminism:
    """Identical inputs yield bit-identical outputs."""

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_repeat_calls_identical(self, args):
        first = price(*args)
        second = price(*args)
        assert first == second
        assert first.to_dict() == second.to_dict()


class TestTextbookAgreement:
    """Compare against independent textbook formulas."""

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_premiums(self, args):
        result = price(*args)
        S, K, r, q, sigma, T = _model_units(args)
        assert result.call.premium == pytest.approx(bsm_call(S, K, r, q, sigma, T), abs=0.005 + 1e-9)
        assert result.put.premium == pytest.approx(bsm_put(S, K, r, q, sigma, T), abs=0.005 + 1e-9)

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_gamma_and_vega_per_point(self, args):
        result = price(*args)
        S, K, r, q, sigma, T = _model_units(args)
        assert result.call.gamma == pytest.approx(bsm_gamma(S, K, r, q, sigma, T), abs=0.0005 + 1e-9)
        assert result.call.vega == pytest.approx(
            bsm_vega(S, K, r, q, sigma, T) / 100, abs=0.0005 + 1e-9
        )

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_rho_carries_dividend_discount(self, args):
        result = price(*args)
        S, K, r, q, sigma, T = _model_units(args)
        discount = math.exp(-q * T)
        assert result.call.rho == pytest.approx(
            bsm_rho_call(S, K, r, q, sigma, T) * discount / 100, abs=0.0005 + 1e-9
        )
        assert result.put.rho == pytest.approx(
            bsm_rho_put(S, K, r, q, sigma, T) * discount / 100, abs=0.0005 + 1e-9
        )

    def test_rho_differs_from_textbook_with_dividend(self):
        inputs = PricingInputs(
            spot=50, strike=60, expiry=730, volatility=45, risk_free_rate=6, dividend=8
        )
        params = normalize(inputs)
        aux = auxiliary(inputs, params)
        textbook = bsm_rho_call(50, 60, 0.06, 0.08, 0.45, 2.0) / 100
        assert bs.call_rho(inputs, params, aux) == pytest.approx(
            textbook * math.exp(-0.08 * 2.0), rel=1e-9
        )
        assert abs(bs.call_rho(inputs, params, aux) - textbook) > 0.01

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_put_theta_per_day(self, args):
        result = price(*args)
        S, K, r, q, sigma, T = _model_units(args)
        assert result.put.theta == pytest.approx(
            bsm_theta_put(S, K, r, q, sigma, T) / 365, abs=0.0005 + 1e-9
        )


class TestThetaAsymmetry:
    """
    Call theta's dividend term uses the reported (rounded) call delta; put
    theta recomputes Φ(-d1)·e^(-TD) rather than reusing put delta.
    """

    @pytest.fixture
    def context(self):
        inputs = PricingInputs(
            spot=100, strike=90, expiry=90, volatility=40, risk_free_rate=5, dividend=15
        )
        params = normalize(inputs)
        return inputs, params, auxiliary(inputs, params)

    def test_call_theta_uses_rounded_delta(self, context):
        inputs, params, aux = context
        raw_delta = bs.call_delta(inputs, params, aux)
        rounded_delta = round_half_away(raw_delta, 3)
        assert rounded_delta != raw_delta

        with_rounded = bs.call_theta(inputs, params, aux, rounded_delta)
        with_raw = bs.call_theta(inputs, params, aux, raw_delta)
        assert with_rounded == pytest.approx(-0.014501666222473118, abs=1e-10)
        assert with_raw == pytest.approx(-0.014491017324321164, abs=1e-10)

        # The reported value follows the rounded-delta variant across a rounding boundary
        result = price_inputs(inputs)
        assert result.call.theta == -0.015
        assert round_half_away(with_raw, 3) == -0.014

    def test_put_theta_recomputes_dividend_term(self, context):
        inputs, params, aux = context
        R, T, D = params.rate, params.time, params.dividend
        common = -(inputs.spot / math.sqrt(2 * math.pi)) * math.exp(aux.d1**2 / -2) * params.vol
        common = common * math.exp(-T * D) / (2 * math.sqrt(T))
        financing = R * inputs.strike * math.exp(-R * T) * norm_cdf(-aux.d2)
        expected = (common - D * inputs.spot * norm_cdf(-aux.d1) * math.exp(-T * D) + financing) / 365
        assert bs.put_theta(inputs, params, aux) == pytest.approx(expected, abs=1e-15)

        # Not derived from the reported put delta
        rounded_put_delta = price_inputs(inputs).put.delta
        from_put_delta = (common + D * inputs.spot * rounded_put_delta + financing) / 365
        assert abs(bs.put_theta(inputs, params, aux) - from_put_delta) > 1e-7

    def test_thetas_match_without_dividend(self):
        # With D = 0 the dividend terms vanish and rounding of delta is irrelevant
        inputs = PricingInputs(
            spot=100, strike=100, expiry=365, volatility=20, risk_free_rate=0, dividend=0
        )
        params = normalize(inputs)
        aux = auxiliary(inputs, params)
        raw_delta = bs.call_delta(inputs, params, aux)
        assert bs.call_theta(inputs, params, aux, round_half_away(raw_delta, 3)) == bs.call_theta(
            inputs, params, aux, raw_delta
        )


class TestRoundingPolicy:
    """Premiums carry 2 decimals, Greeks 3."""

    @pytest.mark.parametrize("args", VALID_INPUTS)
    def test_output_precision(self, args):
        result = price(*args)
        for metrics in (result.call, result.put):
            assert round(metrics.premium, 2) == metrics.premium
            for value in (metrics.delta, metrics.gamma, metrics.vega, metrics.theta, metrics.rho):
                assert round(value, 3) == value

    def test_intermediates_not_rounded(self):
        result = price(100, 110, 90, 25, 4, 2)
        assert result.aux.d1 != round(result.aux.d1, 6)
        assert result.params.time == 90 / 365
