"""
Tests for app/db/client.py - placeholder rewriting and query execution.
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.db.client import DatabaseClient, to_bind_params


class TestToBindParams:
    def test_rewrites_numbered_placeholders(self):
        statement, bound = to_bind_params("SELECT * FROM jobs WHERE id = $1 AND title = $2", [7, "j1"])
        assert statement == "SELECT * FROM jobs WHERE id = :p1 AND title = :p2"
        assert bound == {"p1": 7, "p2": "j1"}

    def test_repeated_placeholder(self):
        statement, bound = to_bind_params("SELECT $1, $1", ["a"])
        assert statement == "SELECT :p1, :p1"
        assert bound == {"p1": "a"}

    def test_no_placeholders(self):
        statement, bound = to_bind_params("SELECT 1", [])
        assert statement == "SELECT 1"
        assert bound == {}

    def test_missing_value_raises(self):
        with pytest.raises(ValueError):
            to_bind_params("SELECT $2", ["only one"])


class TestExecute:
    def test_returns_rows_as_dicts(self, db_session, job_ids):
        client = DatabaseClient(db_session)
        rows = client.execute("SELECT id, title FROM jobs WHERE id = $1", [job_ids[1]])
        assert rows == [{"id": job_ids[1], "title": "j2"}]

    def test_statement_without_rows(self, db_session):
        client = DatabaseClient(db_session)
        assert client.execute("UPDATE jobs SET salary = $1 WHERE title = $2", [1, "nobody"]) == []

    def test_driver_errors_propagate(self, db_session):
        client = DatabaseClient(db_session)
        with pytest.raises(OperationalError):
            client.execute("SELECT * FROM no_such_table")
