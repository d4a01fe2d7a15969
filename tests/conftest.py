# tests/conftest.py
"""Shared fixtures: mocked psycopg2 connections and an in-memory SQLite store."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import sqlite3
from unittest.mock import MagicMock

import psycopg2
import pytest

from db.init_db import create_tables
from repositories.toll_gateway import TollDataGateway


class _SqliteCursor:
    """Context-managed cursor accepting psycopg2-style `%s` placeholders."""

    _ERRORS = {
        sqlite3.IntegrityError: psycopg2.IntegrityError,
        sqlite3.OperationalError: psycopg2.OperationalError,
        sqlite3.ProgrammingError: psycopg2.ProgrammingError,
    }

    def __init__(self, raw):
        self._cur = raw.cursor()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def execute(self, sql, params=None):
        try:
            if params is None:
                self._cur.executescript(sql)
            else:
                self._cur.execute(sql.strip().replace("%s", "?"), params)
        except sqlite3.Error as e:
            raise self._ERRORS.get(type(e), psycopg2.DatabaseError)(str(e)) from e

    @property
    def rowcount(self):
        return self._cur.rowcount

    def fetchone(self):
        return self._cur.fetchone()

    def fetchall(self):
        return self._cur.fetchall()

    def close(self):
        self._cur.close()


class SqliteConnection:
    """Minimal psycopg2-like connection over sqlite3 for scenario tests."""

    def __init__(self):
        self._raw = sqlite3.connect(":memory:")
        self._raw.execute("PRAGMA foreign_keys = ON")

    def cursor(self):
        return _SqliteCursor(self._raw)

    def commit(self):
        self._raw.commit()

    def rollback(self):
        self._raw.rollback()

    def close(self):
        self._raw.close()


@pytest.fixture
def sqlite_conn():
    conn = SqliteConnection()
    create_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def gateway(sqlite_conn):
    return TollDataGateway(sqlite_conn)


@pytest.fixture
def mock_conn():
    """A MagicMock connection whose cursor context yields `mock_conn.cur`."""
    conn = MagicMock()
    cur = MagicMock()
    cur.rowcount = 1
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    conn.cursor.return_value.__enter__.return_value = cur
    conn.cursor.return_value.__exit__.return_value = False
    conn.cur = cur
    return conn
