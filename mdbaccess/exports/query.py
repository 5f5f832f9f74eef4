"""
Query export: an ad-hoc SQL statement run through ``mdb-sql``.

``mdb-sql`` prints one extra non-data line ahead of the rows, so the offset
is 2. The statement is written to the process' stdin.
"""

from __future__ import annotations

from typing import List

from mdbaccess.decoder import QUERY_OFFSET
from mdbaccess.exports.abstract import AbstractExportSource
from mdbaccess.infrastructure.runner import ToolRunner


class QueryExport(AbstractExportSource):
    """
    Run ``sql`` against the database and export the result as CSV.
    """

    name: str = "query"
    description: str = "mdb-sql query result, comma-delimited, no footer."
    offset: int = QUERY_OFFSET
    command: str = "mdb-sql"

    def __init__(self, sql: str) -> None:
        if not sql or not sql.strip():
            raise ValueError("Query text must not be empty")
        self.sql = sql.strip()

    @property
    def context(self) -> str:
        return self.sql

    def build_args(self, database: str, include_headers: bool = True) -> List[str]:
        args: List[str] = []
        if not include_headers:
            args.append("-H")
        args += ["-p", "-F", "-d", ",", database]
        return args

    def fetch(self, runner: ToolRunner, database: str, include_headers: bool = True) -> List[str]:
        output = runner.run(
            self.command,
            self.build_args(database, include_headers),
            input_text=self.sql + "\n",
            context=self.sql,
        )
        return output.lines


__all__ = ["QueryExport"]
