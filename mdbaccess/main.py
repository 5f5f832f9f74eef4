from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from mdbaccess.client import AccessDatabase
from mdbaccess.config import get_settings
from mdbaccess.dumper import dump_database
from mdbaccess.errors import MdbAccessError
from mdbaccess.reporter import print_dump_results, print_names, print_records
from mdbaccess.utils.logging import configure_logging

app = typer.Typer(help="Read Microsoft Access databases through mdbtools.")


def _database_arg() -> Any:
    return typer.Argument(..., help="Path to the .mdb/.accdb file.")


def _format_option() -> Any:
    return typer.Option(
        None, "--format", "-f", help="SQL flavour (e.g. mysql, postgres, sqlite). Default from settings."
    )


def _open(database: Path) -> AccessDatabase:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return AccessDatabase(database, settings=settings)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"mdbtools={settings.mdbtools_path or '<PATH>'} | "
        f"date_format={settings.date_format!r} sql_format={settings.sql_format} | "
        f"timeout={settings.command_timeout_seconds}s retries={settings.retry_attempts} "
        f"strict_rows={settings.strict_rows}"
    )


@app.command()
def version(database: Path = _database_arg()) -> None:
    """
    Show the file-format version of the database.
    """
    typer.echo(_open(database).get_version())


@app.command()
def tables(
    database: Path = _database_arg(),
    plain: bool = typer.Option(False, "--plain", help="One table name per line."),
) -> None:
    """
    List tables in the database.
    """
    names = _open(database).get_tables()
    if plain:
        for name in names:
            typer.echo(name)
        return
    print_names(f"Tables in {database.name}", names)


@app.command()
def columns(database: Path = _database_arg(), table: str = typer.Argument(...)) -> None:
    """
    List the columns of a table.
    """
    print_names(f"Columns of {table}", _open(database).get_columns(table))


@app.command()
def data(
    database: Path = _database_arg(),
    table: str = typer.Argument(...),
    query: Optional[str] = typer.Option(
        None, "--query", "-q", help="SQL query to run instead of exporting the whole table."
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit records as JSON."),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", help="Show at most this many rows in table output."
    ),
) -> None:
    """
    Show the rows of a table, or of a query run against the database.
    """
    db = _open(database)
    records = db.get_data(table, query)
    if as_json:
        typer.echo(json.dumps(records, indent=2, ensure_ascii=False))
        return
    names = list(records[0]) if records else db.get_columns(table)
    print_records(query or table, names, records, limit=limit)


@app.command()
def csv(
    database: Path = _database_arg(),
    table: str = typer.Argument(...),
    no_header: bool = typer.Option(False, "--no-header", help="Omit the header line."),
) -> None:
    """
    Print a table as CSV.
    """
    typer.echo(_open(database).get_csv(table, include_headers=not no_header))


@app.command()
def sql(
    database: Path = _database_arg(),
    table: str = typer.Argument(...),
    sql_format: Optional[str] = _format_option(),
) -> None:
    """
    Print a table's contents as INSERT statements.
    """
    typer.echo(_open(database).get_sql(table, sql_format))


@app.command()
def schema(
    database: Path = _database_arg(),
    table: Optional[str] = typer.Option(None, "--table", "-t", help="Limit to one table."),
    sql_format: Optional[str] = _format_option(),
) -> None:
    """
    Print CREATE statements for the database or a single table.
    """
    db = _open(database)
    if table:
        typer.echo(db.get_table_sql(table, sql_format))
    else:
        typer.echo(db.get_database_sql(sql_format))


@app.command()
def dump(
    database: Path = _database_arg(),
    output_dir: Path = typer.Option(Path("dump"), "--output", "-o", help="Target directory."),
    sql_format: Optional[str] = _format_option(),
    strict: bool = typer.Option(False, "--strict", help="Stop at the first failing table."),
) -> None:
    """
    Dump every table as JSON plus the schema as SQL.
    """
    results = dump_database(
        _open(database),
        output_dir,
        sql_format=sql_format,
        failure_policy="strict" if strict else "tolerant",
    )
    print_dump_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
    except MdbAccessError as exc:
        typer.echo(f"Error: {exc}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
