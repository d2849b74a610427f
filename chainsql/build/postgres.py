"""PostgreSQL dialect query builder."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chainsql.build.base import SQLQueryBuilder, WhereValue
from chainsql.build.mysql import MySQLQueryBuilder
from chainsql.schema.state import QueryState

logger = logging.getLogger(__name__)


class PostgresQueryBuilder(SQLQueryBuilder):
    """Builds PostgreSQL-flavoured SELECT queries.

    Postgres differs from MySQL only in its LIMIT syntax here, so this
    builder wraps a :class:`MySQLQueryBuilder` and forwards every step to it
    except ``limit``, which emits ``LIMIT <start> OFFSET <offset>``.

    Args:
        delegate: Builder receiving the shared steps.  Defaults to a fresh
            :class:`MySQLQueryBuilder`.
    """

    def __init__(self, delegate: MySQLQueryBuilder | None = None) -> None:
        self._delegate = delegate or MySQLQueryBuilder()

    @property
    def dialect_name(self) -> str:
        return "postgres"

    @property
    def state(self) -> QueryState:
        return self._delegate.state

    def select(self, table: str, fields: Sequence[str]) -> PostgresQueryBuilder:
        self._delegate.select(table, fields)
        return self

    def where(
        self, field: str, value: WhereValue, operator: str = "="
    ) -> PostgresQueryBuilder:
        self._delegate.where(field, value, operator)
        return self

    def limit(self, start: int, offset: int) -> PostgresQueryBuilder:
        # the delegate enforces the SELECT-only rule
        self._delegate.limit(start, offset)
        self._delegate.state.limit_clause = f" LIMIT {start} OFFSET {offset}"
        logger.debug("limit:%s", self._delegate.state.limit_clause)
        return self

    def get_sql(self) -> str:
        return self._delegate.get_sql()
