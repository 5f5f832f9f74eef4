"""
Domain models for mdbaccess.

Defines the structured shapes produced from mdbtools text output. Models are
frozen: each one is constructed once per call and handed to the caller.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

Record = Dict[str, Optional[str]]


class DecodedExport(BaseModel):
    """
    Column names and row records decoded from one delimited-text export.
    """

    columns: List[str] = Field(..., description="Column names in export order.")
    records: List[Record] = Field(default_factory=list, description="One mapping per data row.")

    model_config = {
        "frozen": True,
    }


class TableSnapshot(DecodedExport):
    """
    Full contents of one table read from an Access database.
    """

    table: str = Field(..., description="Table name inside the database.")

    @property
    def row_count(self) -> int:
        return len(self.records)


__all__ = ["Record", "DecodedExport", "TableSnapshot"]
