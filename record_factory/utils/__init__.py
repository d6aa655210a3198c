"""
Utilities package for record-factory.

Exports shared helpers for logging. Keep this package lightweight and free of
record-specific logic.
"""

from record_factory.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
