"""Pydantic model for the query state a builder accumulates.

Each builder owns exactly one ``QueryState``.  ``select`` replaces it with a
fresh instance; ``where`` and ``limit`` mutate it in place; ``get_sql`` only
reads it.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QueryType(str, Enum):
    """Kind of statement under construction."""

    SELECT = "select"
    UPDATE = "update"
    OTHER = "other"


class QueryState(BaseModel):
    """Clauses collected so far for one query.

    Attributes:
        base: The leading ``SELECT ... FROM ...`` fragment.
        type: Statement kind; decides which steps are accepted.
        where_clauses: Rendered WHERE conditions in insertion order.
        limit_clause: Rendered LIMIT fragment including its leading space.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    base: str = ""
    type: QueryType = QueryType.OTHER
    where_clauses: list[str] = Field(default_factory=list)
    limit_clause: str | None = None

    def accepts(self, *types: QueryType) -> bool:
        """Return True when the current type is one of ``types``."""
        return self.type in types
