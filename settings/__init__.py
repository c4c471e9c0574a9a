"""Application settings."""

import os
from pathlib import Path


def _bounds(raw: str | None) -> tuple[float, float, float, float] | None:
    """Parse 'xmin,xmax,ymin,ymax' into floats."""
    if not raw:
        return None
    values = tuple(float(v) for v in raw.split(","))
    if len(values) != 4:
        raise ValueError(f"POLICY_SPACE_BOUNDS needs 4 values, got {len(values)}")
    return values


# Grid
GRID_STEP = float(os.getenv("POLICY_SPACE_STEP", "0.1"))
GRID_BOUNDS = _bounds(os.getenv("POLICY_SPACE_BOUNDS"))
WORKERS = int(os.getenv("POLICY_SPACE_WORKERS", "1"))

# Data
PARTIES_PATH = os.getenv("POLICY_SPACE_PARTIES") or None

# Output
OUTPUT_DIR = Path(os.getenv("POLICY_SPACE_OUTPUT", "output"))

# Logging
LOG_DIR = Path("logs")
LOG_LEVEL = os.getenv("POLICY_SPACE_LOG_LEVEL", "INFO")
