"""Integration tests: build → execute against a real SQLite in-memory DB.

``sqlite3`` plays the caller-supplied execution collaborator: every
statement is built by sqlbrace and handed over as finished text.
"""
from __future__ import annotations

import sqlite3

import pytest

from sqlbrace import skip
from sqlbrace.compile.builder import QueryBuilder


@pytest.fixture()
def db() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.execute(
        "CREATE TABLE users ("
        " user_id INTEGER PRIMARY KEY,"
        " name TEXT NOT NULL,"
        " email TEXT,"
        " score REAL,"
        " block INTEGER NOT NULL DEFAULT 0)"
    )
    yield conn
    conn.close()


def _insert(db: sqlite3.Connection, qb: QueryBuilder, row: dict) -> None:
    columns = list(row)
    db.execute(qb.build("INSERT INTO users (?#) VALUES (?a)", [columns, list(row.values())]))


def test_insert_and_select_roundtrip(db, sqlite_builder):
    _insert(db, sqlite_builder, {"user_id": 1, "name": "Jack", "email": None, "score": 2.5})
    _insert(db, sqlite_builder, {"user_id": 2, "name": "O'Brien", "email": "ob@x", "score": 3.0})

    rows = db.execute(
        sqlite_builder.build("SELECT ?# FROM users WHERE user_id IN (?a) ORDER BY user_id", [
            ["name", "email", "score"],
            [1, 2],
        ])
    ).fetchall()

    assert [tuple(r) for r in rows] == [("Jack", None, 2.5), ("O'Brien", "ob@x", 3.0)]


def test_update_with_assignments(db, sqlite_builder):
    _insert(db, sqlite_builder, {"user_id": 1, "name": "Jack"})
    db.execute(
        sqlite_builder.build(
            "UPDATE users SET ?a WHERE user_id = ?d",
            [{"name": "Jill", "block": True}, 1],
        )
    )
    row = db.execute("SELECT name, block FROM users WHERE user_id = 1").fetchone()
    assert tuple(row) == ("Jill", 1)


@pytest.mark.parametrize(("last", "expected"), [(1, ["Blocked"]), (skip(), ["Blocked", "Open"])])
def test_conditional_block_filters_rows(db, sqlite_builder, last, expected):
    _insert(db, sqlite_builder, {"user_id": 1, "name": "Open", "block": 0})
    _insert(db, sqlite_builder, {"user_id": 2, "name": "Blocked", "block": 1})

    sql = sqlite_builder.build(
        "SELECT name FROM users WHERE user_id > ?d{ AND block = ?d} ORDER BY name",
        [0, last],
    )
    assert [r["name"] for r in db.execute(sql)] == expected
