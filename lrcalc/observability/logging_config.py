"""Centralized logging configuration."""
import logging


def configure_logging(level: str = "INFO"):
    """Configure logging with appropriate levels for different modules."""
    log_level = getattr(logging, level.upper())

    # Base configuration
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override any existing configuration
    )

    # Guard decisions are only interesting when something is refused
    logging.getLogger("lrcalc.guards").setLevel(max(log_level, logging.WARNING))
    # Keep pipeline tracing at the requested level
    logging.getLogger("lrcalc.observability").setLevel(log_level)
    logging.getLogger("lrcalc.calculator").setLevel(log_level)
    # Set root logger to the desired level
    logging.getLogger().setLevel(log_level)
