"""
Logging configuration and utilities for datediff.
"""
from .config import configure_logging, get_logger, log_interval

__all__ = ["configure_logging", "get_logger", "log_interval"]
