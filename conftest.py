"""Pytest configuration for test logging."""
from lrcalc.config import LOG_LEVEL
from lrcalc.observability.logging_config import configure_logging

configure_logging(LOG_LEVEL)
