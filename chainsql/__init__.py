"""chainsql – chainable, dialect-aware SQL query builders.

Public API
----------
``create_query_builder``
    Return a fresh builder for a dialect given as a ``Dialect``, its name,
    or a ``BuilderConfig``.

Re-exported types
-----------------
``SQLQueryBuilder``, ``MySQLQueryBuilder``, ``PostgresQueryBuilder``,
``QueryState``, ``QueryType``, ``Dialect``, ``BuilderConfig``, and all
error classes.

Extensibility
-------------
New dialect builders can be registered via::

    from chainsql.build.registry import BuilderFactory

    @BuilderFactory.register("sqlite")
    class SQLiteQueryBuilder(SQLQueryBuilder):
        ...

After registration, ``create_query_builder("sqlite")`` returns it.
"""

from __future__ import annotations

from chainsql.build.base import SQLQueryBuilder, WhereValue
from chainsql.build.mysql import MySQLQueryBuilder
from chainsql.build.postgres import PostgresQueryBuilder
from chainsql.build.registry import BuilderFactory
from chainsql.errors import ChainSQLError, ConfigError, StateError
from chainsql.schema.dialect import BuilderConfig, Dialect
from chainsql.schema.state import QueryState, QueryType

# ---------------------------------------------------------------------------
# Register built-in builders with BuilderFactory
# ---------------------------------------------------------------------------

BuilderFactory.register_class(Dialect.MYSQL.value, MySQLQueryBuilder)
BuilderFactory.register_class(Dialect.POSTGRES.value, PostgresQueryBuilder)

__all__ = [
    # Entry point
    "create_query_builder",
    # Builders
    "SQLQueryBuilder",
    "MySQLQueryBuilder",
    "PostgresQueryBuilder",
    "BuilderFactory",
    "WhereValue",
    # State
    "QueryState",
    "QueryType",
    # Configuration
    "Dialect",
    "BuilderConfig",
    # Errors
    "ChainSQLError",
    "StateError",
    "ConfigError",
]


def create_query_builder(
    dialect: Dialect | str | BuilderConfig = Dialect.MYSQL,
) -> SQLQueryBuilder:
    """Return a fresh query builder for ``dialect``.

    Example::

        builder = chainsql.create_query_builder(Dialect.POSTGRES)
        sql = builder.select("users", ["name"]).limit(10, 20).get_sql()

    Args:
        dialect: A :class:`Dialect` member, its string value, or a
            :class:`BuilderConfig`.

    Returns:
        A new builder instance owned by the caller.

    Raises:
        ConfigError: If no builder is registered for the dialect.
    """
    if isinstance(dialect, BuilderConfig):
        dialect = dialect.dialect
    name = dialect.value if isinstance(dialect, Dialect) else dialect
    return BuilderFactory.create(name)
