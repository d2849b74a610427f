"""Unit tests for QueryState and BuilderConfig."""

from __future__ import annotations

import pydantic
import pytest

from chainsql.errors import ConfigError, StateError
from chainsql.schema.dialect import BuilderConfig, Dialect
from chainsql.schema.state import QueryState, QueryType


def test_fresh_state_is_empty():
    state = QueryState()
    assert state.base == ""
    assert state.type is QueryType.OTHER
    assert state.where_clauses == []
    assert state.limit_clause is None


def test_state_rejects_unknown_fields():
    with pytest.raises(pydantic.ValidationError):
        QueryState(order_by="id")


def test_state_validates_assignment():
    state = QueryState()
    with pytest.raises(pydantic.ValidationError):
        state.type = "delete"


def test_state_accepts():
    state = QueryState(type=QueryType.UPDATE)
    assert state.accepts(QueryType.SELECT, QueryType.UPDATE)
    assert not state.accepts(QueryType.SELECT)


def test_config_default_dialect():
    assert BuilderConfig().dialect is Dialect.MYSQL


def test_config_from_json():
    assert BuilderConfig.from_json('{"dialect": "postgres"}').dialect is Dialect.POSTGRES


def test_config_from_mapping_unknown_dialect():
    with pytest.raises(ConfigError) as exc_info:
        BuilderConfig.from_mapping({"dialect": "oracle"})
    assert exc_info.value.target == "oracle"


def test_config_from_mapping_extra_key():
    with pytest.raises(ConfigError):
        BuilderConfig.from_mapping({"dialect": "mysql", "pool_size": 4})


@pytest.mark.parametrize("raw", ["not json", "[1, 2]"])
def test_config_from_json_invalid(raw):
    with pytest.raises(ConfigError):
        BuilderConfig.from_json(raw)


def test_state_error_response():
    err = StateError(
        "LIMIT can only be added to SELECT",
        step="limit",
        query_type="other",
        allowed=["select"],
    )
    assert err.to_error_response() == {
        "error": "INVALID_STATE",
        "message": "LIMIT can only be added to SELECT",
        "details": {"step": "limit", "query_type": "other", "allowed": ["select"]},
    }
