#!/usr/bin/env python
"""
Command-line interface for Black-Scholes-Merton option pricing.

This is a thin wrapper around bsm_pricer.cli for running from a checkout.
Prefer using the installed 'bsm-price' command or 'python -m bsm_pricer.cli'.

Example usage:
    bsm-price --spot 100 --strike 100 --expiry 365 --volatility 20 --rate 5
    python scripts/bsm_price.py --spot 100 --strike 110 --expiry 90 \
        --volatility 25 --rate 4 --dividend 2
"""

import sys
from pathlib import Path

# Add parent directory to path to allow running without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bsm_pricer.cli import main

if __name__ == "__main__":
    sys.exit(main())
