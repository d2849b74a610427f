"""chainsql schema layer: query state and dialect configuration."""
from chainsql.schema.dialect import BuilderConfig, Dialect
from chainsql.schema.state import QueryState, QueryType

__all__ = [
    "BuilderConfig",
    "Dialect",
    "QueryState",
    "QueryType",
]
