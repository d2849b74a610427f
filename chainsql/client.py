"""Client code and ``chainsql-demo`` command.

The client talks to every builder through :class:`SQLQueryBuilder` only, so
any registered dialect can be passed in without changing it.  No director
object is needed: callers want a different query almost every time.

Usage
-----
Print the demo query for every registered dialect::

    chainsql-demo

Print it for one dialect with debug logging::

    chainsql-demo --dialect postgres -v
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from chainsql import BuilderFactory, ChainSQLError, SQLQueryBuilder, create_query_builder

logger = logging.getLogger(__name__)

_DISPLAY_NAMES = {
    "mysql": "MySQL",
    "postgres": "PostgreSQL",
}


def build_user_query(builder: SQLQueryBuilder) -> str:
    """Build the sample ``users`` query with ``builder``."""
    return (
        builder.select("users", ["name", "email", "password"])
        .where("age", 18, ">")
        .where("age", 30, "<")
        .limit(10, 20)
        .get_sql()
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chainsql-demo",
        description="Print the sample users query for one or all dialects.",
    )
    parser.add_argument(
        "--dialect",
        default="all",
        choices=[*BuilderFactory.registered_targets(), "all"],
        help="Dialect to build for (default: all).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every builder step.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for ``chainsql-demo``; returns the process exit code."""
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.dialect == "all":
        targets = BuilderFactory.registered_targets()
    else:
        targets = [args.dialect]

    blocks: list[str] = []
    for target in targets:
        try:
            sql = build_user_query(create_query_builder(target))
        except ChainSQLError as exc:
            logger.error("could not build %s query: %s", target, exc)
            print(f"error: {exc}", file=sys.stderr)
            return 1
        name = _DISPLAY_NAMES.get(target, target)
        blocks.append(f"Testing {name} query builder:\n{sql}")

    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())
