"""Dialect selection and builder configuration.

Pick a dialect explicitly and hand it to
:func:`chainsql.create_query_builder`::

    from chainsql import BuilderConfig, create_query_builder

    config = BuilderConfig.from_json('{"dialect": "postgres"}')
    builder = create_query_builder(config)
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from chainsql.errors import ConfigError


class Dialect(str, Enum):
    """Supported SQL dialects."""

    MYSQL = "mysql"
    POSTGRES = "postgres"


class BuilderConfig(BaseModel):
    """Configuration for creating a query builder.

    Attributes:
        dialect: Target dialect (``'mysql'`` or ``'postgres'``).
    """

    model_config = ConfigDict(extra="forbid")

    dialect: Dialect = Dialect.MYSQL

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BuilderConfig":
        """Build a config from a plain mapping.

        Raises:
            ConfigError: If the mapping has unknown keys or an unknown dialect.
        """
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as exc:
            raise ConfigError(
                f"Invalid builder configuration: {exc}",
                target=str(data.get("dialect")) if "dialect" in data else None,
            ) from exc

    @classmethod
    def from_json(cls, raw: str) -> "BuilderConfig":
        """Build a config from a JSON object string.

        Raises:
            ConfigError: If ``raw`` is not a JSON object or fails validation.
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError("Builder configuration must be a JSON object.")
        return cls.from_mapping(data)
