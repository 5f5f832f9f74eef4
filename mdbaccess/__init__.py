"""
mdbaccess - read Microsoft Access databases through the mdbtools toolkit.

The package shells out to the mdbtools executables and turns their text output
into Python data:

- Table and column listings
- Table contents as CSV, INSERT statements, or decoded records
- Ad-hoc SQL query results via mdb-sql
- Schema dumps for a single table or the whole database

Binary format parsing and SQL generation stay inside mdbtools; this package
builds argument vectors, runs the tools, and decodes their delimited output.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "LGPL-3.0"

# Public API exports
from mdbaccess.client import AccessDatabase
from mdbaccess.config import Settings, get_settings
from mdbaccess.decoder import (
    QUERY_OFFSET,
    TABLE_OFFSET,
    decode_columns,
    decode_export,
    decode_records,
)
from mdbaccess.domain.models import DecodedExport, Record, TableSnapshot
from mdbaccess.dumper import dump_database
from mdbaccess.errors import (
    DatabaseFileNotFound,
    ExternalToolFailure,
    MalformedExport,
    MdbAccessError,
    RowShapeMismatch,
)
from mdbaccess.infrastructure.runner import ToolOutput, ToolRunner
from mdbaccess.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Client
    "AccessDatabase",
    "dump_database",
    # Decoding
    "TABLE_OFFSET",
    "QUERY_OFFSET",
    "decode_columns",
    "decode_records",
    "decode_export",
    "DecodedExport",
    "Record",
    "TableSnapshot",
    # Errors
    "MdbAccessError",
    "DatabaseFileNotFound",
    "MalformedExport",
    "RowShapeMismatch",
    "ExternalToolFailure",
    # Process invocation
    "ToolOutput",
    "ToolRunner",
    # Logging
    "configure_logging",
    "get_logger",
]
