"""
I/O utilities for scenario configs and results.
"""

import json
import logging
from pathlib import Path

from bsm_pricer.presentation import format_number
from bsm_pricer.scenarios.types import ScenarioConfig, ScenarioResult

logger = logging.getLogger(__name__)

_COLUMNS = (
    ("C prem", "call", "premium"),
    ("P prem", "put", "premium"),
    ("C delta", "call", "delta"),
    ("P delta", "put", "delta"),
    ("Gamma", "call", "gamma"),
    ("Vega", "call", "vega"),
    ("C theta", "call", "theta"),
    ("P theta", "put", "theta"),
    ("C rho", "call", "rho"),
    ("P rho", "put", "rho"),
)


def load_config(path: Path) -> ScenarioConfig:
    """
    Load a scenario configuration from a JSON file.

    Raises
    ------
    ValueError
        If the file is not valid JSON or the config is incomplete
    """
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid scenario config {path}: {e}") from e
    return ScenarioConfig.from_dict(data)


def format_table(results: list[ScenarioResult], sweep: str) -> str:
    """Render ladder results as a fixed-width table, one row per point."""
    width = 12 + 10 * len(_COLUMNS)
    header = f"{sweep:>12}" + "".join(f"{title:>10}" for title, _, _ in _COLUMNS)
    lines = ["-" * width, header, "-" * width]
    for r in results:
        row = f"{format_number(r.sweep_value):>12}"
        if r.result is None:
            row += f"  {r.error}"
        else:
            for _, side, name in _COLUMNS:
                metrics = r.result.call if side == "call" else r.result.put
                row += f"{format_number(getattr(metrics, name)):>10}"
        lines.append(row)
    lines.append("-" * width)
    return "\n".join(lines)


def save_results(
    results: list[ScenarioResult],
    out_dir: Path,
    scenario_name: str
) -> None:
    """
    Save scenario results to JSON and summary text files.

    Creates:
    - results.json: Full machine-readable results
    - summary.txt: Human-readable table summary

    Parameters
    ----------
    results : list[ScenarioResult]
        Scenario results to save
    out_dir : Path
        Output directory
    scenario_name : str
        Name of scenario for headers
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    json_path = out_dir / "results.json"
    json_data = {
        "scenario_name": scenario_name,
        "n_results": len(results),
        "results": [r.to_dict() for r in results]
    }

    with open(json_path, "w") as f:
        json.dump(json_data, f, indent=2)

    summary_path = out_dir / "summary.txt"
    with open(summary_path, "w") as f:
        f.write("=" * 112 + "\n")
        f.write(f"Scenario: {scenario_name}\n")
        f.write("=" * 112 + "\n")
        f.write(f"\nTotal points: {len(results)}\n")

        if results:
            meta = results[0].metadata
            base = results[0].inputs
            f.write("\nMetadata:\n")
            f.write(f"  Timestamp:      {meta.timestamp}\n")
            f.write(f"  Python:         {meta.python_version}\n")
            f.write(f"  NumPy:          {meta.numpy_version}\n")
            f.write(f"  Platform:       {meta.os_platform}\n")
            f.write(f"  Git commit:     {meta.git_commit or 'N/A'}\n")
            f.write(f"  Sweep:          {meta.sweep} ({meta.n_points} points)\n")
            f.write("\nBase inputs:\n")
            for field, value in base.to_dict().items():
                if field != meta.sweep:
                    f.write(f"  {field + ':':<16}{format_number(value)}\n")
            f.write("\n" + format_table(results, meta.sweep) + "\n")

    logger.info("Saved %d scenario results to %s", len(results), out_dir)


def load_results(results_dir: Path) -> dict:
    """
    Load scenario results from JSON file.

    Parameters
    ----------
    results_dir : Path
        Directory containing results.json

    Returns
    -------
    dict
        Loaded scenario data
    """
    json_path = results_dir / "results.json"
    with open(json_path) as f:
        return json.load(f)
