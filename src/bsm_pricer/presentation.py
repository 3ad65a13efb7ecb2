"""
Display formatting for pricing results.

Values are keyed by the calculator's output field labels.
Gamma and vega do not depend on the side and are shown once, from the call.
"""

from bsm_pricer.types import PricingResult

DISPLAY_LABELS = (
    "call-premium",
    "put-premium",
    "call-delta",
    "put-delta",
    "call-theta",
    "put-theta",
    "call-rho",
    "put-rho",
    "gamma",
    "vega",
)


def format_number(value: float) -> str:
    """
    Format a rounded output the way a JavaScript number prints.

    Integral values drop the fractional part and negative zero prints as "0".
    """
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def display_values(result: PricingResult) -> dict[str, str]:
    """
    Map each display label to its formatted value.

    Parameters
    ----------
    result : PricingResult
        Engine output

    Returns
    -------
    dict[str, str]
        Label -> decimal string, in DISPLAY_LABELS order
    """
    call, put = result.call, result.put
    values = {
        "call-premium": call.premium,
        "put-premium": put.premium,
        "call-delta": call.delta,
        "put-delta": put.delta,
        "call-theta": call.theta,
        "put-theta": put.theta,
        "call-rho": call.rho,
        "put-rho": put.rho,
        "gamma": call.gamma,
        "vega": call.vega,
    }
    return {label: format_number(values[label]) for label in DISPLAY_LABELS}


def format_report(result: PricingResult) -> str:
    """Render the call/put table printed by the CLI."""
    values = display_values(result)
    lines = [
        f"  {'':<10} {'Call':>12} {'Put':>12}",
        f"  {'-' * 36}",
    ]
    for name in ("premium", "delta", "theta", "rho"):
        lines.append(
            f"  {name.capitalize():<10} "
            f"{values['call-' + name]:>12} {values['put-' + name]:>12}"
        )
    lines.append(f"  {'Gamma':<10} {values['gamma']:>12}")
    lines.append(f"  {'Vega':<10} {values['vega']:>12}")
    return "\n".join(lines)
