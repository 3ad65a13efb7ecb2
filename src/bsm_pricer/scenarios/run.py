"""
Scenario execution: price the same contract across a ladder of one input.
"""

import logging
import platform
import subprocess
import sys
from concurrent.futures import ProcessPoolExecutor
from dataclasses import replace
from datetime import datetime

import numpy as np

from bsm_pricer.analytics.black_scholes import price_inputs
from bsm_pricer.errors import PricingError
from bsm_pricer.scenarios.types import ScenarioConfig, ScenarioMetadata, ScenarioResult
from bsm_pricer.types import PricingInputs, PricingResult

logger = logging.getLogger(__name__)


def get_git_commit() -> str | None:
    """Get current git commit hash if available."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            timeout=1,
            check=False
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (subprocess.TimeoutExpired, FileNotFoundError):
        pass
    return None


def create_metadata(config: ScenarioConfig) -> ScenarioMetadata:
    """Create metadata for reproducibility."""
    return ScenarioMetadata(
        timestamp=datetime.now().isoformat(),
        python_version=f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        numpy_version=np.__version__,
        os_platform=platform.platform(),
        git_commit=get_git_commit(),
        sweep=config.sweep,
        n_points=config.n_points,
    )


def build_ladder(config: ScenarioConfig) -> list[PricingInputs]:
    """Inputs for every ladder point, base inputs with the swept field replaced."""
    values = np.linspace(config.start, config.stop, config.n_points)
    return [replace(config.inputs, **{config.sweep: float(v)}) for v in values]


def _price_point(inputs: PricingInputs) -> tuple[PricingResult | None, str | None]:
    # Module-level so the process pool can pickle it
    try:
        return price_inputs(inputs), None
    except PricingError as e:
        return None, str(e)


def run_scenario(config: ScenarioConfig) -> list[ScenarioResult]:
    """
    Run a scenario with the given configuration.

    Points whose inputs fall outside the model's domain, or whose outputs are
    not finite, are logged and kept with ``error`` set; any other exception
    propagates.

    Parameters
    ----------
    config : ScenarioConfig
        Scenario configuration

    Returns
    -------
    list[ScenarioResult]
        One result per ladder point, in ladder order

    Raises
    ------
    ValueError
        If configuration is invalid
    """
    config.validate()
    ladder = build_ladder(config)
    metadata = create_metadata(config)

    logger.info(
        "Running scenario %s: %s from %s to %s over %d points",
        config.name,
        config.sweep,
        config.start,
        config.stop,
        config.n_points,
    )

    if config.max_workers is None or config.max_workers == 1:
        outcomes = [_price_point(inputs) for inputs in ladder]
    else:
        with ProcessPoolExecutor(max_workers=config.max_workers) as ex:
            outcomes = list(ex.map(_price_point, ladder))

    results = []
    for inputs, (result, error) in zip(ladder, outcomes):
        sweep_value = getattr(inputs, config.sweep)
        if error is not None:
            logger.warning(
                "Skipped %s=%r in scenario %s: %s", config.sweep, sweep_value, config.name, error
            )
        results.append(
            ScenarioResult(
                scenario_name=config.name,
                sweep_value=sweep_value,
                inputs=inputs,
                result=result,
                error=error,
                metadata=metadata,
            )
        )

    n_failed = sum(1 for r in results if not r.ok)
    logger.info("Scenario %s finished: %d priced, %d skipped", config.name, len(results) - n_failed, n_failed)
    return results
