"""
Tabular decoding of mdbtools delimited-text output.

`mdb-export` and `mdb-sql` print CSV; the subprocess runner hands us that output
as a list of lines. This module turns those lines into column names and
per-row records.

Offsets:
- 1 for a plain table export (the header line precedes the data)
- 2 for a query-result export (mdb-sql prints one more non-data line)

The export tool emits a blank record at end of output. When the last decoded
record has more than one field and both its first and last values are empty it
is dropped. Single-column tables keep a trailing empty value.
"""

from __future__ import annotations

import csv
import io
import sys
from typing import List, Optional, Sequence, Union

from mdbaccess.domain.models import DecodedExport, Record
from mdbaccess.errors import MalformedExport, RowShapeMismatch
from mdbaccess.utils.logging import get_logger
from mdbaccess.utils.text import split_lines

log = get_logger(__name__)

TABLE_OFFSET = 1
QUERY_OFFSET = 2

# Memo fields routinely exceed the csv module default of 128 KiB.
csv.field_size_limit(sys.maxsize)


def _parse(raw_lines: Union[str, Sequence[str]], context: Optional[str] = None) -> List[List[str]]:
    # Each element is one physical line; re-terminate every line so quoted
    # fields spanning lines keep their newlines and a final blank line survives.
    lines = split_lines(raw_lines) if isinstance(raw_lines, str) else raw_lines
    text = "".join(f"{line}\n" for line in lines)
    try:
        return list(csv.reader(io.StringIO(text, newline="")))
    except csv.Error as exc:
        raise MalformedExport(f"Export is not valid CSV: {exc}", context=context) from exc


def _is_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


def _is_artifact(record: Record) -> bool:
    if len(record) <= 1:
        return False
    values = list(record.values())
    return _is_empty(values[0]) and _is_empty(values[-1])


def _columns_from_rows(rows: List[List[str]], context: Optional[str]) -> List[str]:
    if not rows or not rows[0]:
        raise MalformedExport("Export has no header line", context=context)
    return list(rows[0])


def _records_from_rows(
    rows: List[List[str]],
    columns: Sequence[str],
    offset: int,
    context: Optional[str],
    strict: bool,
) -> List[Record]:
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    if len(rows) < offset:
        raise MalformedExport(
            f"Export has {len(rows)} row(s), fewer than offset {offset}", context=context
        )

    width = len(columns)
    last_row_number = len(rows)
    records: List[Record] = []
    for row_number, row in enumerate(rows[offset:], start=offset + 1):
        if not row and (width == 1 or row_number == last_row_number):
            # single-column empty value, or the trailing artifact line
            records.append({name: "" for name in columns})
            continue
        if len(row) != width:
            if strict:
                raise RowShapeMismatch(row_number, width, len(row), context=context)
            log.warning(
                "Row shape mismatch; padding/truncating",
                extra={
                    "row_number": row_number,
                    "expected": width,
                    "actual": len(row),
                    "context": context,
                },
            )
            row = (list(row) + [""] * width)[:width]
        records.append(dict(zip(columns, row)))

    if records and _is_artifact(records[-1]):
        records.pop()
    return records


def decode_columns(raw_lines: Union[str, Sequence[str]], context: Optional[str] = None) -> List[str]:
    """
    Decode the column names from the first record of an export.

    Parameters
    ----------
    raw_lines : str or sequence of str
        Complete output of a table export with headers enabled.
    context : str, optional
        Table name or query text, carried into any error raised.

    Raises
    ------
    MalformedExport
        If the export is empty or its first record holds no fields.
    """
    if not raw_lines:
        raise MalformedExport("Export is empty", context=context)
    return _columns_from_rows(_parse(raw_lines, context), context)


def decode_records(
    raw_lines: Union[str, Sequence[str]],
    columns: Sequence[str],
    offset: int = TABLE_OFFSET,
    context: Optional[str] = None,
    strict: bool = True,
) -> List[Record]:
    """
    Decode data rows of an export into records keyed by ``columns``.

    Parameters
    ----------
    raw_lines : str or sequence of str
        Complete export output, header lines included.
    columns : sequence of str
        Column names, usually from :func:`decode_columns`.
    offset : int
        Number of leading parsed rows to skip before data rows begin.
    context : str, optional
        Table name or query text, carried into any error raised.
    strict : bool
        Raise :class:`RowShapeMismatch` on a row whose field count differs from
        ``len(columns)``. When False the row is padded or truncated instead.
        A blank line counts as zero fields unless the table has one column or
        the line is the last one.

    Raises
    ------
    MalformedExport
        If the export holds fewer parsed rows than ``offset`` or is not valid CSV.
    RowShapeMismatch
        If ``strict`` and a data row has the wrong number of fields.
    """
    return _records_from_rows(_parse(raw_lines, context), columns, offset, context, strict)


def decode_export(
    raw_lines: Union[str, Sequence[str]],
    offset: int = TABLE_OFFSET,
    columns: Optional[Sequence[str]] = None,
    context: Optional[str] = None,
    strict: bool = True,
) -> DecodedExport:
    """
    Parse an export once and return both its columns and records.

    Column names come from the first record unless ``columns`` is given.
    """
    if not raw_lines:
        raise MalformedExport("Export is empty", context=context)
    rows = _parse(raw_lines, context)
    names = list(columns) if columns is not None else _columns_from_rows(rows, context)
    records = _records_from_rows(rows, names, offset, context, strict)
    return DecodedExport(columns=names, records=records)


__all__ = [
    "TABLE_OFFSET",
    "QUERY_OFFSET",
    "decode_columns",
    "decode_records",
    "decode_export",
]
