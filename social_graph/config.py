"""
Configuration constants for the Social Graph Explorer.

All paths and tunable settings are defined here. Values that vary per
machine are read from environment variables (a project .env is loaded
first if present).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of social_graph/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Data directory (contains network files)
DATA_DIR = PROJECT_ROOT / "data"

# Network file offered when no path is given on the command line
DEFAULT_NETWORK_PATH = Path(
    os.environ.get("SOCIAL_GRAPH_FILE", str(DATA_DIR / "network.txt"))
)

# =============================================================================
# File Format Configuration
# =============================================================================

# Encoding used to read network files
NETWORK_FILE_ENCODING = "utf-8"

# =============================================================================
# Console Configuration
# =============================================================================

# Width of the "=====" rules printed around menu results
MENU_RULE_WIDTH = 44

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
