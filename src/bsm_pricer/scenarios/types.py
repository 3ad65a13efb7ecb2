"""
Types and dataclasses for scenario runs.
"""

from dataclasses import dataclass
from typing import Any

from bsm_pricer.types import PricingInputs, PricingResult

SWEEPABLE_FIELDS = ("spot", "strike", "expiry", "volatility", "risk_free_rate", "dividend")


@dataclass
class ScenarioConfig:
    """
    Configuration for re-pricing across a ladder of one input.

    Attributes
    ----------
    name : str
        Scenario identifier
    inputs : PricingInputs
        Base inputs; the swept field is overridden at each point
    sweep : str
        Field to sweep, one of SWEEPABLE_FIELDS
    start : float
        First ladder value
    stop : float
        Last ladder value (inclusive)
    n_points : int
        Number of ladder points
    max_workers : int | None
        Process pool size; None or 1 prices sequentially
    """

    name: str
    inputs: PricingInputs
    sweep: str
    start: float
    stop: float
    n_points: int = 11
    max_workers: int | None = None

    def validate(self) -> None:
        """
        Raises
        ------
        ValueError
            If the sweep field, point count or worker count is invalid
        """
        if self.sweep not in SWEEPABLE_FIELDS:
            raise ValueError(
                f"sweep must be one of {', '.join(SWEEPABLE_FIELDS)} (got {self.sweep!r})"
            )
        if self.n_points < 1:
            raise ValueError(f"n_points must be >= 1 (got {self.n_points})")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1 (got {self.max_workers})")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScenarioConfig":
        """
        Build a config from its JSON form.

        Expected shape::

            {
              "name": "spot_ladder",
              "inputs": {"spot": 100, "strike": 100, "expiry": 30,
                         "volatility": 20, "risk_free_rate": 5, "dividend": 0},
              "sweep": {"field": "spot", "start": 80, "stop": 120, "n_points": 9},
              "max_workers": 1
            }
        """
        if not isinstance(data, dict):
            raise ValueError("Scenario config must be a JSON object")
        for key in ("name", "inputs", "sweep"):
            if key not in data:
                raise ValueError(f"Scenario config is missing '{key}'")
        for key in ("inputs", "sweep"):
            if not isinstance(data[key], dict):
                raise ValueError(f"Scenario '{key}' must be an object")
        sweep = data["sweep"]
        for key in ("field", "start", "stop"):
            if key not in sweep:
                raise ValueError(f"Scenario sweep is missing '{key}'")

        max_workers = data.get("max_workers")
        try:
            config = cls(
                name=str(data["name"]),
                inputs=PricingInputs.from_dict(data["inputs"]),
                sweep=str(sweep["field"]),
                start=float(sweep["start"]),
                stop=float(sweep["stop"]),
                n_points=int(sweep.get("n_points", 11)),
                max_workers=None if max_workers is None else int(max_workers),
            )
        except TypeError as e:
            raise ValueError(f"Invalid scenario config: {e}") from e
        config.validate()
        return config


@dataclass
class ScenarioMetadata:
    """
    Metadata for reproducible scenario runs.

    Captures environment and configuration for full reproducibility.
    """

    timestamp: str
    python_version: str
    numpy_version: str
    os_platform: str
    git_commit: str | None
    sweep: str
    n_points: int


@dataclass
class ScenarioResult:
    """
    One ladder point.

    Attributes
    ----------
    scenario_name : str
        Name of the scenario configuration
    sweep_value : float
        Value of the swept input at this point
    inputs : PricingInputs
        Full inputs priced at this point
    result : PricingResult | None
        Engine output, None when the point was rejected
    error : str | None
        Why the point was rejected, None on success
    metadata : ScenarioMetadata
        Run metadata, shared by all points of one run
    """

    scenario_name: str
    sweep_value: float
    inputs: PricingInputs
    result: PricingResult | None
    error: str | None
    metadata: ScenarioMetadata

    @property
    def ok(self) -> bool:
        return self.result is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "scenario_name": self.scenario_name,
            "sweep_value": self.sweep_value,
            "inputs": self.inputs.to_dict(),
            "call": self.result.call.to_dict() if self.result else None,
            "put": self.result.put.to_dict() if self.result else None,
            "d1": self.result.aux.d1 if self.result else None,
            "d2": self.result.aux.d2 if self.result else None,
            "error": self.error,
            "metadata": {
                "timestamp": self.metadata.timestamp,
                "python_version": self.metadata.python_version,
                "numpy_version": self.metadata.numpy_version,
                "os_platform": self.metadata.os_platform,
                "git_commit": self.metadata.git_commit,
                "sweep": self.metadata.sweep,
                "n_points": self.metadata.n_points,
            },
        }
