"""
Logging configuration for the bridge CLI.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure package logging on stderr; stdout is reserved for JSON payloads."""
    log_level = getattr(logging, str(level).upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    package_logger = logging.getLogger("fxbridge")
    package_logger.setLevel(log_level)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.propagate = False
