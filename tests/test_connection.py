"""
Connection lifecycle and transaction scope tests.
"""

import os
import sqlite3

import pytest

from db.connection import open_database, resolve_db_path, transaction
from db.errors import DatabaseConnectionError, TransactionError


def test_resolve_db_path_is_absolute():
    path = resolve_db_path(os.path.join("..", "sqlite1.db"))
    assert os.path.isabs(path)
    assert path.endswith("sqlite1.db")


def test_resolve_db_path_rejects_empty():
    with pytest.raises(DatabaseConnectionError):
        resolve_db_path("   ")


def test_open_database_missing_directory_fails(tmp_path):
    missing = tmp_path / "nope" / "deeper" / "demo.db"
    with pytest.raises(DatabaseConnectionError):
        with open_database(str(missing)):
            pass


def test_open_database_prints_banner_and_closes(db_path, capsys):
    with open_database(db_path) as conn:
        conn.execute("SELECT 1")

    out = capsys.readouterr().out
    assert "Connected to: " + os.path.abspath(db_path) in out
    assert "Database connection closed." in out
    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_open_database_closes_on_error(db_path):
    with pytest.raises(RuntimeError):
        with open_database(db_path) as conn:
            raise RuntimeError("boom")

    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_transaction_commits(conn):
    conn.execute("CREATE TABLE t (v INTEGER)")
    with transaction(conn):
        conn.execute("INSERT INTO t VALUES (1)")
        conn.execute("INSERT INTO t VALUES (2)")

    assert conn.execute("SELECT COUNT(*) FROM t").fetchone()[0] == 2
    assert not conn.in_transaction


def test_transaction_rolls_back_on_any_error(conn):
    conn.execute("CREATE TABLE t (v INTEGER)")

    with pytest.raises(TransactionError) as exc_info:
        with transaction(conn):
            conn.execute("INSERT INTO t VALUES (1)")
            raise ValueError("second statement failed")

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert conn.execute("SELECT COUNT(*) FROM t").fetchone()[0] == 0
    assert not conn.in_transaction
