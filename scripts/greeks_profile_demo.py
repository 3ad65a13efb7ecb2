#!/usr/bin/env python
"""
Greeks profile visualization.

Re-prices a 30-day at-the-money contract across a spot ladder and plots
premium, delta, gamma and theta for both sides. Requires the 'plot' extra.
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bsm_pricer.scenarios import ScenarioConfig, format_table, run_scenario
from bsm_pricer.types import PricingInputs


def main():
    """Generate Greeks-vs-spot plots for a call and a put."""
    inputs = PricingInputs(
        spot=100.0,
        strike=100.0,
        expiry=30.0,
        volatility=20.0,
        risk_free_rate=5.0,
        dividend=1.0,
    )
    config = ScenarioConfig(
        name="greeks_profile",
        inputs=inputs,
        sweep="spot",
        start=70.0,
        stop=130.0,
        n_points=61,
    )

    print("=" * 80)
    print("Greeks Profile vs Spot")
    print("=" * 80)
    print(f"\nBase inputs: {inputs}")
    print(f"Spot ladder: {config.start} to {config.stop} ({config.n_points} points)\n")

    results = [r for r in run_scenario(config) if r.ok]
    print(format_table(results[::10], config.sweep))

    spots = np.array([r.sweep_value for r in results])
    panels = [
        ("Premium", "premium"),
        ("Delta", "delta"),
        ("Gamma", "gamma"),
        ("Theta (per day)", "theta"),
    ]

    print("\nGenerating plot...")
    fig, axes = plt.subplots(2, 2, figsize=(12, 8), sharex=True)
    for ax, (title, field) in zip(axes.flat, panels):
        call_values = np.array([getattr(r.result.call, field) for r in results])
        put_values = np.array([getattr(r.result.put, field) for r in results])
        ax.plot(spots, call_values, "-", label="Call", linewidth=2)
        if field != "gamma":
            ax.plot(spots, put_values, "--", label="Put", linewidth=2)
        ax.axvline(inputs.strike, color="k", alpha=0.3, linestyle=":")
        ax.set_title(title, fontsize=12)
        ax.grid(True, alpha=0.3, linestyle=":")
        ax.legend(fontsize=9)
    for ax in axes[1]:
        ax.set_xlabel("Spot", fontsize=11)
    fig.suptitle("Black-Scholes-Merton Greeks (K=100, 30 days)", fontsize=14, fontweight="bold")
    fig.tight_layout()

    plots_dir = Path(__file__).parent.parent / "plots"
    plots_dir.mkdir(exist_ok=True)

    output_path = plots_dir / "greeks_profile.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"\nPlot saved to: {output_path}")

    plt.show()


if __name__ == "__main__":
    main()
