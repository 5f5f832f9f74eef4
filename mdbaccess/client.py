"""
Client for reading Microsoft Access databases through mdbtools.

Usage:
    from mdbaccess.client import AccessDatabase

    db = AccessDatabase("example.mdb")
    for table in db.get_tables():
        print(db.get_columns(table))
        print(db.get_data(table))

    rows = db.get_data("test", "SELECT * FROM test WHERE description = 'test123'")
    print(db.get_database_sql("mysql"))
"""

from __future__ import annotations

import os
from typing import List, Optional

from mdbaccess.config import Settings, get_settings
from mdbaccess.decoder import decode_columns, decode_export, decode_records
from mdbaccess.domain.models import Record, TableSnapshot
from mdbaccess.errors import DatabaseFileNotFound
from mdbaccess.exports.abstract import ExportSource
from mdbaccess.exports.query import QueryExport
from mdbaccess.exports.table import TableExport
from mdbaccess.infrastructure.runner import ToolRunner
from mdbaccess.utils.logging import get_logger

log = get_logger(__name__)


class AccessDatabase:
    """
    One Access database file read through the mdbtools executables.

    Parameters
    ----------
    path : str or os.PathLike
        Location of the ``.mdb``/``.accdb`` file.
    settings : Settings, optional
        Overrides for the cached environment settings.
    runner : ToolRunner, optional
        Process invoker; built from ``settings`` when omitted.

    Raises
    ------
    DatabaseFileNotFound
        If ``path`` does not exist.
    """

    def __init__(
        self,
        path: "str | os.PathLike[str]",
        settings: Optional[Settings] = None,
        runner: Optional[ToolRunner] = None,
    ) -> None:
        path = os.fspath(path)
        if not os.path.exists(path):
            raise DatabaseFileNotFound(f"File '{path}' not found")
        self.path = path
        self.settings = settings or get_settings()
        self.runner = runner or ToolRunner.from_settings(self.settings)

    def __repr__(self) -> str:
        return f"AccessDatabase({self.path!r})"

    def _table_export(self, table: str) -> TableExport:
        return TableExport(table, date_format=self.settings.date_format)

    def get_version(self) -> str:
        """Return the file-format version reported by ``mdb-ver``."""
        return self.runner.run("mdb-ver", [self.path]).text

    def get_tables(self) -> List[str]:
        """List the user tables in the database."""
        lines = self.runner.run("mdb-tables", ["-1", self.path]).lines
        return [line for line in lines if line.strip()]

    def get_csv(self, table: str, include_headers: bool = True) -> str:
        """Return ``table`` as CSV text."""
        return "\n".join(self._table_export(table).fetch(self.runner, self.path, include_headers))

    def get_sql(self, table: str, sql_format: Optional[str] = None) -> str:
        """Return the contents of ``table`` as INSERT statements in ``sql_format``."""
        sql_format = sql_format or self.settings.sql_format
        args = ["-I", sql_format, "-D", self.settings.date_format, self.path, table]
        return self.runner.run("mdb-export", args).text

    def get_columns(self, table: str) -> List[str]:
        """Return the column names of ``table`` in export order."""
        lines = self._table_export(table).fetch(self.runner, self.path)
        return decode_columns(lines, context=table)

    def get_data(self, table: str, query: Optional[str] = None) -> List[Record]:
        """
        Return the rows of ``table`` (or of ``query``) as column -> value mappings.

        Without ``query`` the whole table is exported. With ``query`` the
        statement is run through ``mdb-sql`` and its result is decoded against
        the columns of ``table``, so the query must select every column of the
        table in export order. In strict mode a narrower projection raises
        :class:`RowShapeMismatch`.
        """
        source: ExportSource = QueryExport(query) if query else self._table_export(table)
        lines = source.fetch(self.runner, self.path)
        columns = self.get_columns(table) if query else decode_columns(lines, context=table)
        records = decode_records(
            lines,
            columns,
            offset=source.offset,
            context=source.context,
            strict=self.settings.strict_rows,
        )
        log.debug(
            "Decoded export",
            extra={"source": source.name, "context": source.context, "rows": len(records)},
        )
        return records

    def read_table(self, table: str) -> TableSnapshot:
        """Export ``table`` once and return its columns and records together."""
        source = self._table_export(table)
        lines = source.fetch(self.runner, self.path)
        decoded = decode_export(
            lines, offset=source.offset, context=table, strict=self.settings.strict_rows
        )
        return TableSnapshot(table=table, columns=decoded.columns, records=decoded.records)

    def get_table_sql(self, table: str, sql_format: Optional[str] = None) -> str:
        """Return the CREATE statement for ``table`` in ``sql_format``."""
        sql_format = sql_format or self.settings.sql_format
        return self.runner.run("mdb-schema", ["-T", table, self.path, sql_format]).text

    def get_database_sql(self, sql_format: Optional[str] = None) -> str:
        """Return the schema of every table in ``sql_format``."""
        sql_format = sql_format or self.settings.sql_format
        return self.runner.run("mdb-schema", [self.path, sql_format]).text


__all__ = ["AccessDatabase"]
