"""Builder registry.

``BuilderFactory`` maps dialect names to :class:`SQLQueryBuilder`
implementations so that a new dialect can be added without touching the
callers that pick one.

Usage::

    from chainsql.build.registry import BuilderFactory

    @BuilderFactory.register("sqlite")
    class SQLiteQueryBuilder(MySQLQueryBuilder):
        ...

    builder = BuilderFactory.create("sqlite")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

from chainsql.build.base import SQLQueryBuilder
from chainsql.errors import ConfigError

logger = logging.getLogger(__name__)


class BuilderFactory:
    """Registry mapping dialect names to :class:`SQLQueryBuilder` classes.

    Callers register a builder class once; :meth:`create` returns a fresh
    instance on every call, so builders are never shared between callers.
    """

    _builders: ClassVar[dict[str, type[SQLQueryBuilder]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[SQLQueryBuilder]], type[SQLQueryBuilder]]:
        """Decorator that registers a builder class under ``name``.

        Args:
            name: The dialect name (e.g. ``"postgres"``).

        Returns:
            A decorator that registers and returns the builder class.
        """

        def decorator(builder_cls: type[SQLQueryBuilder]) -> type[SQLQueryBuilder]:
            cls.register_class(name, builder_cls)
            return builder_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, builder_cls: type[SQLQueryBuilder]) -> None:
        """Register a builder class without using the decorator form."""
        logger.debug("registering %s builder: %s", name, builder_cls.__name__)
        cls._builders[name] = builder_cls

    @classmethod
    def create(cls, name: str) -> SQLQueryBuilder:
        """Instantiate the builder registered for ``name``.

        Raises:
            ConfigError: If no builder is registered for ``name``.
        """
        builder_cls = cls._builders.get(name)
        if builder_cls is None:
            registered = sorted(cls._builders)
            raise ConfigError(
                f"Unsupported dialect: '{name}'. Registered dialects: {registered}.",
                target=name,
            )
        return builder_cls()

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect names."""
        return sorted(cls._builders)

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove ``name`` from the registry if present."""
        cls._builders.pop(name, None)
