"""Custom exception hierarchy for chainsql.

All public errors inherit from ChainSQLError so callers can catch the base
class for any chainsql-specific failure.
"""
from __future__ import annotations

from typing import Any


class ChainSQLError(Exception):
    """Base exception for all chainsql errors."""


class StateError(ChainSQLError):
    """Raised when a construction step does not fit the current query type.

    Typical causes are calling ``where`` or ``limit`` before ``select``, or
    calling ``limit`` on a query that is not a SELECT.  The step is rejected
    before any state is touched.

    Args:
        message: Human-readable description.
        step: Name of the rejected builder step (e.g. ``'limit'``).
        query_type: The query type the builder held when the step was called.
        allowed: Query types the step accepts.
    """

    def __init__(
        self,
        message: str,
        step: str,
        query_type: str | None = None,
        allowed: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.step = step
        self.query_type = query_type
        self.allowed: list[str] = allowed or []

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured description of the misordered call."""
        return {
            "error": "INVALID_STATE",
            "message": str(self),
            "details": {
                "step": self.step,
                "query_type": self.query_type,
                "allowed": self.allowed,
            },
        }


class ConfigError(ChainSQLError):
    """Raised when a builder configuration cannot be resolved.

    Args:
        message: Human-readable description.
        target: The dialect name that failed to resolve, if any.
    """

    def __init__(self, message: str, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target
