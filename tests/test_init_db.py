"""
Schema initialization tests: table creation, seeding and idempotence.
"""

import pytest

from db.errors import TableSetupError
from db.init_db import (
    SEED_PRODUCTS,
    SEED_USERS,
    USERS_SCHEMA,
    create_tables,
    ensure_table,
    seed_if_empty,
)


def _count(conn, table):
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def _table_sql(conn):
    rows = conn.execute(
        "SELECT name, sql FROM sqlite_master WHERE type = 'table' ORDER BY name"
    ).fetchall()
    return [(r["name"], r["sql"]) for r in rows]


def test_fresh_setup_seeds_three_rows_each(conn, capsys):
    create_tables(conn)

    assert _count(conn, "users") == 3
    assert _count(conn, "products") == 3
    out = capsys.readouterr().out
    assert "Inserted initial users" in out
    assert "Inserted initial products" in out
    assert "Tables ready!" in out


def test_setup_twice_is_idempotent(conn, capsys):
    create_tables(conn)
    schema_before = _table_sql(conn)
    capsys.readouterr()

    create_tables(conn)

    assert _table_sql(conn) == schema_before
    assert _count(conn, "users") == 3
    assert _count(conn, "products") == 3
    assert "Inserted initial" not in capsys.readouterr().out


def test_seed_values_match_literals(seeded_conn):
    users = seeded_conn.execute("SELECT name, email, age, created_at FROM users ORDER BY id").fetchall()
    assert [(u["name"], u["email"], u["age"]) for u in users] == [
        (s["name"], s["email"], s["age"]) for s in SEED_USERS
    ]
    # created_at is defaulted by the store
    assert all(u["created_at"] for u in users)

    products = seeded_conn.execute("SELECT name, price, category, stock FROM products ORDER BY id").fetchall()
    assert [tuple(p) for p in products] == [
        (s["name"], s["price"], s["category"], s["stock"]) for s in SEED_PRODUCTS
    ]


def test_seed_gate_is_table_wide(conn):
    ensure_table(conn, "users", USERS_SCHEMA)
    conn.execute("INSERT INTO users (name, email) VALUES ('Someone', 'someone@example.com')")

    assert seed_if_empty(conn, "users", SEED_USERS) is False
    assert _count(conn, "users") == 1


def test_seed_failure_rolls_back_all_rows(conn):
    ensure_table(conn, "users", USERS_SCHEMA)
    rows = [
        {"name": "A", "email": "dup@example.com", "age": 1},
        {"name": "B", "email": "dup@example.com", "age": 2},
    ]

    with pytest.raises(TableSetupError):
        seed_if_empty(conn, "users", rows)

    assert _count(conn, "users") == 0
    assert not conn.in_transaction


def test_ensure_table_wraps_sql_errors(conn):
    with pytest.raises(TableSetupError):
        ensure_table(conn, "broken", "CREATE TABLE broken (")


def test_seed_missing_table_raises(conn):
    with pytest.raises(TableSetupError):
        seed_if_empty(conn, "no_such_table", SEED_USERS)
