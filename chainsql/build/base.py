"""Builder abstraction: the SQLQueryBuilder ABC.

The Builder pattern (GoF) is used:
- ``SQLQueryBuilder`` declares the construction steps every dialect supports.
- ``MySQLQueryBuilder`` and ``PostgresQueryBuilder`` implement the steps,
  producing slightly different SQL for the same call sequence.

Every construction step returns the builder itself so calls chain::

    sql = builder.select("users", ["name"]).where("age", 18, ">").get_sql()
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Union

from chainsql.schema.state import QueryState

#: Values accepted by ``where``; always rendered with ``str()``.
WhereValue = Union[str, int, float]


class SQLQueryBuilder(ABC):
    """Abstract base for dialect-specific query builders.

    A builder instance is not thread-safe: drive it from one caller at a
    time.
    """

    @abstractmethod
    def select(self, table: str, fields: Sequence[str]) -> SQLQueryBuilder:
        """Start a new SELECT query, discarding any previous state.

        Args:
            table: Table name for the FROM clause.
            fields: Column names; an empty sequence is emitted as-is.

        Returns:
            The builder itself.
        """

    @abstractmethod
    def where(
        self, field: str, value: WhereValue, operator: str = "="
    ) -> SQLQueryBuilder:
        """Append a ``<field> <operator> '<value>'`` condition.

        Raises:
            StateError: If the current query is not a SELECT or UPDATE.
        """

    @abstractmethod
    def limit(self, start: int, offset: int) -> SQLQueryBuilder:
        """Set the LIMIT constraint.

        Raises:
            StateError: If the current query is not a SELECT.
        """

    @abstractmethod
    def get_sql(self) -> str:
        """Return the assembled SQL string terminated by ``;``."""

    @property
    @abstractmethod
    def state(self) -> QueryState:
        """Return the live query state."""

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'mysql'`` or ``'postgres'``)."""
