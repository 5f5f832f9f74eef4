from __future__ import annotations

import pytest

from mdbaccess.client import AccessDatabase
from mdbaccess.domain.models import TableSnapshot
from mdbaccess.errors import DatabaseFileNotFound, ExternalToolFailure, RowShapeMismatch

ORDERS_EXPORT = [
    "OrderID,Customer,Placed",
    '1,"Smith, J.",2003-01-02 00:00:00',
    "2,Jones,2003-02-11 00:00:00",
    ",,",
]
# mdb-sql prepends one non-data line ahead of the header.
QUERY_OUTPUT = [
    "",
    "OrderID,Customer,Placed",
    "2,Jones,2003-02-11 00:00:00",
]
EXPECTED_ORDER_ROWS = 2


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(DatabaseFileNotFound, match="missing.mdb"):
        AccessDatabase(tmp_path / "missing.mdb")


def test_get_version_joins_lines(make_db) -> None:
    db = make_db({"mdb-ver": ["JET4"]})

    assert db.get_version() == "JET4"
    assert db.runner.last_call.args == [db.path]


def test_get_tables_one_per_line_and_skips_blanks(make_db) -> None:
    db = make_db({"mdb-tables": ["Customers", "Orders", ""]})

    assert db.get_tables() == ["Customers", "Orders"]
    assert db.runner.last_call.args == ["-1", db.path]


def test_get_columns_uses_table_export(make_db) -> None:
    db = make_db({"mdb-export": ORDERS_EXPORT})

    assert db.get_columns("Orders") == ["OrderID", "Customer", "Placed"]
    call = db.runner.last_call
    assert call.command == "mdb-export"
    assert call.args == ["-D", "%F %T", db.path, "Orders"]
    assert call.context == "Orders"


def test_get_data_for_table_drops_trailing_artifact(make_db) -> None:
    db = make_db({"mdb-export": ORDERS_EXPORT})

    records = db.get_data("Orders")

    assert len(records) == EXPECTED_ORDER_ROWS
    assert records[0] == {
        "OrderID": "1",
        "Customer": "Smith, J.",
        "Placed": "2003-01-02 00:00:00",
    }


def test_get_data_for_query_runs_mdb_sql_with_offset_two(make_db) -> None:
    db = make_db({"mdb-export": ORDERS_EXPORT, "mdb-sql": QUERY_OUTPUT})
    sql = "SELECT * FROM Orders WHERE Customer = 'Jones'"

    records = db.get_data("Orders", sql)

    assert records == [
        {"OrderID": "2", "Customer": "Jones", "Placed": "2003-02-11 00:00:00"}
    ]
    (call,) = [c for c in db.runner.calls if c.command == "mdb-sql"]
    assert call.args == ["-p", "-F", "-d", ",", db.path]
    assert call.input_text == sql + "\n"
    assert call.context == sql


def test_get_data_for_query_uses_table_columns(make_db) -> None:
    # The header printed by mdb-sql is skipped; names come from the table export.
    output = ["", "id,who,when", "2,Jones,2003-02-11 00:00:00"]
    db = make_db({"mdb-export": ORDERS_EXPORT, "mdb-sql": output})

    (record,) = db.get_data("Orders", "SELECT * FROM Orders")

    assert list(record) == ["OrderID", "Customer", "Placed"]
    assert [c.command for c in db.runner.calls].count("mdb-export") == 1


def test_get_data_for_query_subset_projection_is_a_shape_mismatch(make_db) -> None:
    output = ["", "OrderID,Customer", "2,Jones"]
    db = make_db({"mdb-export": ORDERS_EXPORT, "mdb-sql": output})
    sql = "SELECT OrderID, Customer FROM Orders"

    with pytest.raises(RowShapeMismatch) as excinfo:
        db.get_data("Orders", sql)

    assert excinfo.value.context == sql


def test_get_data_reports_table_name_on_shape_mismatch(make_db) -> None:
    db = make_db({"mdb-export": ["a,b", "1,x,extra"]})

    with pytest.raises(RowShapeMismatch, match="Orders"):
        db.get_data("Orders")


def test_get_data_lenient_rows_when_strict_disabled(make_db) -> None:
    db = make_db({"mdb-export": ["a,b", "1,x,extra"]}, strict_rows=False)

    assert db.get_data("Orders") == [{"a": "1", "b": "x"}]


def test_get_data_propagates_tool_failure(make_db) -> None:
    failure = ExternalToolFailure("exited with status 1", command=["mdb-export"], exit_status=1)
    db = make_db({"mdb-export": failure})

    with pytest.raises(ExternalToolFailure):
        db.get_data("Orders")


def test_get_csv_with_and_without_headers(make_db) -> None:
    db = make_db({"mdb-export": ORDERS_EXPORT})

    assert db.get_csv("Orders") == "\n".join(ORDERS_EXPORT)
    db.get_csv("Orders", include_headers=False)
    assert db.runner.last_call.args[0] == "-H"


def test_get_sql_uses_insert_mode(make_db) -> None:
    db = make_db({"mdb-export": ["INSERT INTO `Orders` (`OrderID`) VALUES (1);"]})

    assert db.get_sql("Orders", "postgres").startswith("INSERT INTO")
    assert db.runner.last_call.args == ["-I", "postgres", "-D", "%F %T", db.path, "Orders"]


def test_get_sql_defaults_to_configured_format(make_db) -> None:
    db = make_db({"mdb-export": []}, sql_format="sqlite")

    db.get_sql("Orders")

    assert db.runner.last_call.args[1] == "sqlite"


def test_get_table_sql_and_database_sql(make_db) -> None:
    db = make_db({"mdb-schema": ["CREATE TABLE `Orders`", " (", " );"]})

    assert db.get_table_sql("Orders") == "CREATE TABLE `Orders`\n (\n );"
    assert db.runner.last_call.args == ["-T", "Orders", db.path, "mysql"]

    db.get_database_sql("postgres")
    assert db.runner.last_call.args == [db.path, "postgres"]


def test_read_table_returns_snapshot(make_db) -> None:
    db = make_db({"mdb-export": ORDERS_EXPORT})

    snapshot = db.read_table("Orders")

    assert isinstance(snapshot, TableSnapshot)
    assert snapshot.table == "Orders"
    assert snapshot.columns == ["OrderID", "Customer", "Placed"]
    assert snapshot.row_count == EXPECTED_ORDER_ROWS
    assert len(db.runner.calls) == 1
