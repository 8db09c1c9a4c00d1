"""
Monitoring Package

Structured logging setup for applications embedding the library.
"""

from fuzzy_substring.services.monitoring.logging import ServiceJsonFormatter, get_logger, setup_logging

__all__ = ["ServiceJsonFormatter", "get_logger", "setup_logging"]
