"""
Utilities package for mdbaccess.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from mdbaccess.utils.logging import configure_logging, get_logger
from mdbaccess.utils.text import split_lines

__all__ = [
    "configure_logging",
    "get_logger",
    "split_lines",
]
