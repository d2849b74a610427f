"""Unit tests for BuilderFactory and create_query_builder."""

from __future__ import annotations

import pytest

import chainsql
from chainsql import (
    BuilderConfig,
    BuilderFactory,
    ConfigError,
    Dialect,
    MySQLQueryBuilder,
    PostgresQueryBuilder,
    create_query_builder,
)


def test_builtin_dialects_registered():
    assert BuilderFactory.registered_targets() == ["mysql", "postgres"]


@pytest.mark.parametrize(
    ("dialect", "expected"),
    [
        (Dialect.MYSQL, MySQLQueryBuilder),
        (Dialect.POSTGRES, PostgresQueryBuilder),
        ("mysql", MySQLQueryBuilder),
        ("postgres", PostgresQueryBuilder),
        (BuilderConfig(dialect="postgres"), PostgresQueryBuilder),
    ],
)
def test_create_query_builder_resolves_dialect(dialect, expected):
    assert isinstance(create_query_builder(dialect), expected)


def test_create_query_builder_defaults_to_mysql():
    assert create_query_builder().dialect_name == "mysql"


def test_create_returns_fresh_instances():
    assert create_query_builder("mysql") is not create_query_builder("mysql")


def test_unknown_dialect_raises():
    with pytest.raises(ConfigError) as exc_info:
        create_query_builder("oracle")
    assert exc_info.value.target == "oracle"
    assert "Registered dialects: ['mysql', 'postgres']" in str(exc_info.value)


def test_register_decorator_adds_dialect():
    @BuilderFactory.register("mariadb")
    class MariaDBQueryBuilder(MySQLQueryBuilder):
        @property
        def dialect_name(self) -> str:
            return "mariadb"

    try:
        builder = chainsql.create_query_builder("mariadb")
        assert isinstance(builder, MariaDBQueryBuilder)
        assert builder.select("t", ["a"]).limit(1, 2).get_sql() == "SELECT a FROM t LIMIT 1, 2;"
    finally:
        BuilderFactory.unregister("mariadb")
    assert "mariadb" not in BuilderFactory.registered_targets()
