"""
Dump every table of an Access database to disk.

Usage (example from CLI):
    from mdbaccess.client import AccessDatabase
    from mdbaccess.dumper import dump_database

    results = dump_database(AccessDatabase("example.mdb"), "dump")

Outputs written to the target directory:
- `<table>.json` per table (`table`, `columns`, `records`); a `_2`, `_3`, ... suffix
  keeps names unique after unsafe characters are replaced
- `schema.sql` (CREATE statements for the whole database)
- `manifest.json` (per-table outcome summary)
"""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Literal, Optional, Set

from mdbaccess.client import AccessDatabase
from mdbaccess.errors import MdbAccessError
from mdbaccess.utils.logging import get_logger

log = get_logger(__name__)

FailurePolicy = Literal["tolerant", "strict"]

_UNSAFE_FILENAME = re.compile(r"[^A-Za-z0-9._-]+")


def _table_filename(table: str, used: Set[str]) -> str:
    # Unique per dump, case-insensitively, and never one of the fixed artifacts.
    stem = _UNSAFE_FILENAME.sub("_", table).strip("._") or "table"
    name, n = f"{stem}.json", 2
    while name.lower() in used:
        name, n = f"{stem}_{n}.json", n + 1
    used.add(name.lower())
    return name


def _write_json(path: Path, payload: Any) -> None:
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def _dump_table(db: AccessDatabase, table: str, path: Path) -> Dict[str, Any]:
    snapshot = db.read_table(table)
    _write_json(path, snapshot.model_dump(mode="json"))
    return {
        "table": table,
        "file": path.name,
        "columns": len(snapshot.columns),
        "rows": snapshot.row_count,
    }


def dump_database(
    db: AccessDatabase,
    output_dir: Path | str,
    tables: Optional[Iterable[str]] = None,
    sql_format: Optional[str] = None,
    failure_policy: FailurePolicy = "tolerant",
) -> List[Dict[str, Any]]:
    """
    Export tables and schema of ``db`` into ``output_dir``.

    Parameters
    ----------
    db : AccessDatabase
        Database to read.
    output_dir : Path | str
        Directory for the JSON and SQL artifacts; created when missing.
    tables : iterable[str] | None
        Tables to dump. Defaults to every table reported by the database.
    sql_format : str | None
        Flavour for `schema.sql`. Defaults to the configured SQL format.
    failure_policy : "tolerant" | "strict"
        Tolerant records a failed table in its result and moves on; strict
        re-raises the first failure.

    Returns
    -------
    List[dict]
        One result per table with `rows`/`columns` on success or `error` on
        failure.
    """
    target = Path(output_dir)
    target.mkdir(parents=True, exist_ok=True)
    names = list(tables) if tables is not None else db.get_tables()

    results: List[Dict[str, Any]] = []
    used = {"manifest.json", "schema.sql"}
    for table in names:
        path = target / _table_filename(table, used)
        log.info(f"[DUMP START] {table}", extra={"table": table})
        try:
            result = _dump_table(db, table, path)
        except MdbAccessError as exc:
            if failure_policy == "strict":
                log.error(f"[DUMP FAILED] {table}", extra={"table": table})
                raise
            log.warning(
                f"[DUMP FAILED] {table}",
                extra={"table": table, "error": str(exc), "error_type": type(exc).__name__},
            )
            result = {"table": table, "error": str(exc), "error_type": type(exc).__name__}
        else:
            log.info(f"[DUMP SUCCESS] {table}", extra={"table": table, "rows": result["rows"]})
        results.append(result)

    schema = db.get_database_sql(sql_format)
    (target / "schema.sql").write_text(schema + "\n", encoding="utf-8")

    manifest = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": str(db.path),
        "version": db.get_version(),
        "tables": results,
    }
    _write_json(target / "manifest.json", manifest)

    failed = sum(1 for r in results if "error" in r)
    log.info(
        f"[DUMP COMPLETE] {len(results) - failed}/{len(results)} table(s) written",
        extra={"output_dir": str(target), "failed": failed},
    )
    return results


__all__ = ["FailurePolicy", "dump_database"]
