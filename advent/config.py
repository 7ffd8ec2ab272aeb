"""Configuration for Advent Harness."""

import os
from pathlib import Path

# Paths
BASE_DIR = Path(__file__).parent.parent
CACHE_DIR = Path(os.getenv("ADVENT_CACHE_DIR", Path.cwd() / "inputs"))
SESSION_FILENAME = "session"
DB_PATH = Path(os.getenv("ADVENT_DB_PATH", CACHE_DIR / "history.db"))

# Remote source
REMOTE_HOST = os.getenv("ADVENT_REMOTE_HOST", "adventofcode.com")
HTTP_TIMEOUT_SECONDS = float(os.getenv("ADVENT_HTTP_TIMEOUT", "30"))

# Units
DEFAULT_GROUP = os.getenv("ADVENT_YEAR", "2015")
FIRST_UNIT = 1
LAST_UNIT = 25

# Logging
LOG_LEVEL = os.getenv("ADVENT_LOG_LEVEL", "WARNING").upper()
