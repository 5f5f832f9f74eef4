"""
Table export: one table dumped as CSV by ``mdb-export``.

The header line is the only row ahead of the data, so the offset is 1.
"""

from __future__ import annotations

from typing import List, Optional

from mdbaccess.config import get_settings
from mdbaccess.decoder import TABLE_OFFSET
from mdbaccess.exports.abstract import AbstractExportSource
from mdbaccess.infrastructure.runner import ToolRunner


class TableExport(AbstractExportSource):
    """
    Export every row of ``table`` with dates rendered through ``date_format``.
    """

    name: str = "table"
    description: str = "mdb-export of a single table as CSV."
    offset: int = TABLE_OFFSET
    command: str = "mdb-export"

    def __init__(self, table: str, date_format: Optional[str] = None) -> None:
        self.table = table
        self.date_format = date_format or get_settings().date_format

    @property
    def context(self) -> str:
        return self.table

    def build_args(self, database: str, include_headers: bool = True) -> List[str]:
        args: List[str] = []
        if not include_headers:
            args.append("-H")
        args += ["-D", self.date_format, database, self.table]
        return args

    def fetch(self, runner: ToolRunner, database: str, include_headers: bool = True) -> List[str]:
        output = runner.run(
            self.command, self.build_args(database, include_headers), context=self.table
        )
        return output.lines


__all__ = ["TableExport"]
