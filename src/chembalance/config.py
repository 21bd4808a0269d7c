"""Configuration for chembalance tools."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from chembalance.constants import INITIAL_COEFFICIENT_VALUES

LOG_LEVEL_ENV = "CHEMBALANCE_LOG_LEVEL"


@dataclass(frozen=True)
class BalancerConfiguration:
    """Settings shared by the command line and persistence helpers.

    Attributes:
        initial_coefficient: Coefficient that terms start at and return to on reset.
        log_level: Name of the level for the package logger.
    """

    initial_coefficient: int = 0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.initial_coefficient not in INITIAL_COEFFICIENT_VALUES:
            raise ValueError(
                f"initial_coefficient must be one of {INITIAL_COEFFICIENT_VALUES}, "
                f"got {self.initial_coefficient!r}"
            )


def _parse_configuration(data: Dict[str, Any]) -> BalancerConfiguration:
    initial_coefficient = data.get("initial_coefficient", 0)
    if isinstance(initial_coefficient, bool) or not isinstance(initial_coefficient, int):
        raise ValueError(f"initial_coefficient must be an integer, got {initial_coefficient!r}")
    return BalancerConfiguration(
        initial_coefficient=initial_coefficient,
        log_level=str(data.get("log_level", "WARNING")).upper(),
    )


def load_configuration(config_file: str | Path | None = None) -> BalancerConfiguration:
    """Load settings from an optional JSON file, then apply environment overrides."""
    data: Dict[str, Any] = {}
    if config_file is not None:
        with open(config_file, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {config_file} must contain a JSON object.")

    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        data["log_level"] = env_level.strip()

    return _parse_configuration(data)
