"""Shared pytest fixtures for chainsql tests."""
from __future__ import annotations

import pytest

from chainsql.build.base import SQLQueryBuilder
from chainsql.build.mysql import MySQLQueryBuilder
from chainsql.build.postgres import PostgresQueryBuilder


@pytest.fixture(params=[MySQLQueryBuilder, PostgresQueryBuilder], ids=["mysql", "postgres"])
def builder(request: pytest.FixtureRequest) -> SQLQueryBuilder:
    """A fresh builder of each built-in dialect."""
    return request.param()
