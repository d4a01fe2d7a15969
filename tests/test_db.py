# tests/test_db.py
"""Unit tests for schema bootstrap and connection helpers."""

from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from config import DATABASE_URL
from db.connection import connect
from db.init_db import SCHEMA_SQL, create_tables


class TestCreateTables:
    def test_executes_schema_and_commits(self, mock_conn):
        create_tables(mock_conn)
        mock_conn.cur.execute.assert_called_once_with(SCHEMA_SQL)
        mock_conn.commit.assert_called_once()

    def test_rolls_back_and_reraises_on_failure(self, mock_conn):
        mock_conn.cur.execute.side_effect = psycopg2.ProgrammingError("syntax error")
        with pytest.raises(psycopg2.ProgrammingError):
            create_tables(mock_conn)
        mock_conn.rollback.assert_called_once()
        mock_conn.commit.assert_not_called()

    def test_unit_status_is_unbounded_text(self):
        assert "status              TEXT\n" in SCHEMA_SQL

    def test_schema_declares_all_tables(self):
        for table in ("vehicle", "on_board_unit", "toll_charge", "road_segment"):
            assert f"CREATE TABLE IF NOT EXISTS {table} " in SCHEMA_SQL


class TestConnect:
    def test_defaults_to_database_url(self):
        with patch("db.connection.psycopg2.connect", return_value=MagicMock()) as fake:
            connect()
        fake.assert_called_once_with(DATABASE_URL)

    def test_explicit_dsn(self):
        with patch("db.connection.psycopg2.connect", return_value=MagicMock()) as fake:
            connect("postgresql://u:p@db:5432/toll")
        fake.assert_called_once_with("postgresql://u:p@db:5432/toll")

    def test_unreachable_database_propagates(self):
        with patch("db.connection.psycopg2.connect",
                   side_effect=psycopg2.OperationalError("refused")):
            with pytest.raises(psycopg2.OperationalError):
                connect()
