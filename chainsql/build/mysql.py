"""MySQL dialect query builder."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chainsql.build.base import SQLQueryBuilder, WhereValue
from chainsql.errors import StateError
from chainsql.schema.state import QueryState, QueryType

logger = logging.getLogger(__name__)


class MySQLQueryBuilder(SQLQueryBuilder):
    """Builds MySQL-flavoured SELECT queries.

    Holds the common construction logic; other dialects reuse it by
    composing an instance and replacing only the steps that differ.

    LIMIT syntax: ``LIMIT <start>, <offset>``.
    """

    def __init__(self) -> None:
        self._state = QueryState()

    @property
    def dialect_name(self) -> str:
        return "mysql"

    @property
    def state(self) -> QueryState:
        return self._state

    def select(self, table: str, fields: Sequence[str]) -> MySQLQueryBuilder:
        self._reset()
        self._state.base = f"SELECT {', '.join(fields)} FROM {table}"
        self._state.type = QueryType.SELECT
        logger.debug("select: %s", self._state.base)
        return self

    def where(
        self, field: str, value: WhereValue, operator: str = "="
    ) -> MySQLQueryBuilder:
        self._require("where", QueryType.SELECT, QueryType.UPDATE)
        clause = f"{field} {operator} '{value}'"
        self._state.where_clauses.append(clause)
        logger.debug("where: %s", clause)
        return self

    def limit(self, start: int, offset: int) -> MySQLQueryBuilder:
        self._require("limit", QueryType.SELECT)
        self._state.limit_clause = f" LIMIT {start}, {offset}"
        logger.debug("limit:%s", self._state.limit_clause)
        return self

    def get_sql(self) -> str:
        state = self._state
        if not state.base:
            raise StateError(
                "Nothing to build: call select() first.",
                step="get_sql",
                query_type=state.type.value,
            )
        sql = state.base
        if state.where_clauses:
            sql += " WHERE " + " AND ".join(state.where_clauses)
        if state.limit_clause is not None:
            sql += state.limit_clause
        sql += ";"
        logger.debug("sql: %s", sql)
        return sql

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._state = QueryState()

    def _require(self, step: str, *allowed: QueryType) -> None:
        """Raise :class:`StateError` unless the query type is in ``allowed``."""
        if self._state.accepts(*allowed):
            return
        names = [t.value.upper() for t in allowed]
        logger.debug(
            "rejected %s on %s query (allowed: %s)",
            step,
            self._state.type.value,
            names,
        )
        raise StateError(
            f"{step.upper()} can only be added to {' or '.join(names)}",
            step=step,
            query_type=self._state.type.value,
            allowed=[t.value for t in allowed],
        )
