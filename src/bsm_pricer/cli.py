#!/usr/bin/env python
"""
Command-line interface for Black-Scholes-Merton option pricing.

This module provides the main CLI entrypoint for the bsm-price command.

Example usage:
    bsm-price --spot 100 --strike 100 --expiry 365 --volatility 20 --rate 5
    bsm-price --spot 100 --strike 95 --expiry 30 --volatility 25 --rate 4 --dividend 1.5 --json
    bsm-price --config scenarios/spot_ladder.json --out results/spot_ladder
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from bsm_pricer.analytics.black_scholes import price
from bsm_pricer.errors import PricingError
from bsm_pricer.presentation import format_number, format_report
from bsm_pricer.scenarios.io import format_table, load_config, save_results
from bsm_pricer.scenarios.run import run_scenario

logger = logging.getLogger(__name__)

_SINGLE_ARGS = ("spot", "strike", "expiry", "volatility", "rate")


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Black-Scholes-Merton option pricing with continuous dividend yield",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Market and contract parameters
    parser.add_argument("--spot", type=float, help="Underlying spot price")
    parser.add_argument("--strike", type=float, help="Strike price")
    parser.add_argument("--expiry", type=float, help="Time to expiry (calendar days)")
    parser.add_argument("--volatility", type=float, help="Annualized volatility (percent)")
    parser.add_argument("--rate", type=float, help="Risk-free rate (percent per year)")
    parser.add_argument(
        "--dividend",
        type=float,
        default=0.0,
        help="Continuous dividend yield (percent per year)",
    )

    # Output
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON instead of a table",
    )

    # Scenario runs
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Scenario config (JSON) to re-price across a ladder of one input",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Directory to save scenario results (results.json, summary.txt)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(args)


def _run_single(parsed: argparse.Namespace) -> int:
    missing = [f"--{name}" for name in _SINGLE_ARGS if getattr(parsed, name) is None]
    if missing:
        print(f"Error: pricing requires: {', '.join(missing)}")
        return 1

    try:
        result = price(
            parsed.spot,
            parsed.strike,
            parsed.expiry,
            parsed.volatility,
            parsed.rate,
            parsed.dividend,
        )
    except PricingError as e:
        print(f"Error: {e}")
        return 1

    if parsed.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print("=" * 70)
    print("Black-Scholes-Merton Option Pricing")
    print("=" * 70)
    print("\nInput Parameters:")
    print(f"  Spot Price:             {parsed.spot:,.2f}")
    print(f"  Strike Price:           {parsed.strike:,.2f}")
    print(f"  Time to Expiry:         {format_number(parsed.expiry)} days")
    print(f"  Volatility:             {format_number(parsed.volatility)}%")
    print(f"  Risk-free Rate:         {format_number(parsed.rate)}%")
    print(f"  Dividend Yield:         {format_number(parsed.dividend)}%")
    print(f"\n  d1 = {result.aux.d1:.6f}, d2 = {result.aux.d2:.6f}")
    print("\nResults:")
    print(format_report(result))
    print("\n" + "=" * 70)
    return 0


def _run_scenario(parsed: argparse.Namespace) -> int:
    try:
        config = load_config(parsed.config)
    except FileNotFoundError:
        print(f"Error: scenario config not found: {parsed.config}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    results = run_scenario(config)

    if parsed.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        print("=" * 70)
        print(f"Scenario: {config.name}")
        print("=" * 70)
        print(format_table(results, config.sweep))

    if parsed.out is not None:
        save_results(results, parsed.out, config.name)
        if not parsed.json:
            print(f"\nResults saved to {parsed.out}")

    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Exit code (0 for success, non-zero for errors).
    """
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Parsed arguments: %s", vars(parsed))

    if parsed.config is not None:
        return _run_scenario(parsed)
    return _run_single(parsed)


if __name__ == "__main__":
    sys.exit(main())
