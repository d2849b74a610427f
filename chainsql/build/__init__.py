"""chainsql build layer: dialect query builders."""
from chainsql.build.base import SQLQueryBuilder, WhereValue
from chainsql.build.mysql import MySQLQueryBuilder
from chainsql.build.postgres import PostgresQueryBuilder
from chainsql.build.registry import BuilderFactory

__all__ = [
    "SQLQueryBuilder",
    "WhereValue",
    "MySQLQueryBuilder",
    "PostgresQueryBuilder",
    "BuilderFactory",
]
