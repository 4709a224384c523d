"""
Configuration constants for WikiWalker.

All paths and tunable defaults are defined here. Values that vary per
deployment are read from environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of wikiwalker/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains the site map and recorded trajectories)
DATA_DIR = PROJECT_ROOT / "data"

# Site map: title -> list of linked titles
SITE_MAP_PATH = DATA_DIR / "site_map.msgpack"

# Recorded click paths: list of lists of titles
TRAJECTORIES_PATH = DATA_DIR / "trajectories.json"

# =============================================================================
# Loader Configuration
# =============================================================================

# Suffixes accepted for each kind of input file
SITE_MAP_SUFFIXES = (".msgpack", ".json")
TRAJECTORY_SUFFIXES = (".json", ".jsonl")

# =============================================================================
# Prediction Configuration
# =============================================================================

# Number of steps predicted when the caller does not ask for a length
DEFAULT_TRAJECTORY_LENGTH = 10

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "site_map": SITE_MAP_PATH.exists(),
        "trajectories": TRAJECTORIES_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
