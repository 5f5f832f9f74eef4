"""
Domain package for mdbaccess.

Exports the structured shapes decoded from mdbtools output.
Keep this package focused on data definitions and validation concerns.
"""

from mdbaccess.domain.models import DecodedExport, Record, TableSnapshot

__all__ = [
    "DecodedExport",
    "Record",
    "TableSnapshot",
]
