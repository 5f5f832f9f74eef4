"""
Infrastructure package for mdbaccess.

Centralizes process invocation of the mdbtools executables. Keep this layer
focused on I/O, decoupled from decoding and export logic.
"""

from mdbaccess.infrastructure.runner import ToolOutput, ToolRunner

__all__ = [
    "ToolOutput",
    "ToolRunner",
]
