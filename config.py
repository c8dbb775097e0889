"""
config.py
---------
Central configuration module. Loads optional overrides from a .env file
and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Database ──────────────────────────────────────────────
DEFAULT_DB_PATH: str = os.path.join("..", "sqlite1.db")
DB_PATH: str = os.getenv("SQLITE_DEMO_DB_PATH", DEFAULT_DB_PATH)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

# ── Report ────────────────────────────────────────────────
RULE_WIDTH: int = 30
NULL_DISPLAY: str = "NULL"
