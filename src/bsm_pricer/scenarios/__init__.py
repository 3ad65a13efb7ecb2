"""
Scenarios package: re-price a contract across a ladder of one input.
"""

from bsm_pricer.scenarios.io import format_table, load_config, load_results, save_results
from bsm_pricer.scenarios.run import build_ladder, run_scenario
from bsm_pricer.scenarios.types import (
    SWEEPABLE_FIELDS,
    ScenarioConfig,
    ScenarioMetadata,
    ScenarioResult,
)

__all__ = [
    "SWEEPABLE_FIELDS",
    "ScenarioConfig",
    "ScenarioMetadata",
    "ScenarioResult",
    "build_ladder",
    "format_table",
    "load_config",
    "load_results",
    "run_scenario",
    "save_results",
]
