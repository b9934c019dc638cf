"""Utility modules for cross-cutting concerns."""

from utils.timezone import now_utc, today_utc
from utils.logging_config import setup_logging
