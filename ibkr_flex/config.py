# ibkr_flex/config.py
"""Environment-driven settings for the parser and the storage layer."""

import os

# Database URL for idempotent trade storage, default to local SQLite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ibkr_flex.db")

# Wall-clock zone of brokerage timestamps (trading hours reference)
IBKR_TIMEZONE = os.getenv("IBKR_FLEX_TIMEZONE", "US/Eastern")

LOG_LEVEL = os.getenv("IBKR_FLEX_LOG_LEVEL", "INFO")
