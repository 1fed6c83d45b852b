"""
Logging configuration and utilities for the pricing core.
"""
import logging

from .config import LIBRARY_LOGGER, configure_logging, get_logger, log_curve_built, log_price

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

__all__ = ["configure_logging", "get_logger", "log_curve_built", "log_price"]
