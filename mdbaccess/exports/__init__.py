"""
Export sources for mdbaccess.

Re-exports the abstract interfaces and the concrete export paths so downstream
code can import from `mdbaccess.exports` directly.
"""

from mdbaccess.exports.abstract import AbstractExportSource, ExportSource
from mdbaccess.exports.query import QueryExport
from mdbaccess.exports.table import TableExport

__all__ = [
    # Abstracts
    "AbstractExportSource",
    "ExportSource",
    # Concrete sources
    "QueryExport",
    "TableExport",
]
