"""End-to-end scenario definitions."""

from pathlib import Path
from typing import Any

import yaml

SCENARIOS_FILE = Path(__file__).parent / "scenarios.yaml"


def load_scenarios() -> list[dict[str, Any]]:
    """Return the scenarios from ``scenarios.yaml``."""
    with open(SCENARIOS_FILE) as f:
        return yaml.safe_load(f)["scenarios"]
