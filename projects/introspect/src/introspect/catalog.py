"""Shared plumbing for readers that query a catalog through SQLAlchemy."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from sqlalchemy import text

if TYPE_CHECKING:
    from sqlalchemy import Engine, RowMapping

    from introspect.types import EnumMap

logger = getLogger(__name__)

# Schema name the generator falls back to when none is given
DEFAULT_SCHEMA = "public"


class DuplicateEnumError(ValueError):
    """Raised when two inline enum columns resolve to the same enum name."""


class CatalogDatabase:
    """Base class for readers backed by a SQLAlchemy engine.

    Every query checks out its own connection, so one reader can serve
    concurrent per-table lookups.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the reader with an engine for the target database."""
        self.engine = engine

    def fetch(self, query: str, **params: Any) -> list[RowMapping]:  # noqa: ANN401
        """Run a catalog query and return its rows as mappings."""
        logger.debug("Catalog query on %s: %s", self.engine.url.database, params)
        with self.engine.connect() as connection:
            return list(connection.execute(text(query), params).mappings())


def inline_enum_name(table: str, column: str) -> str:
    """Name the enum type a column declares inline (MySQL, SQLite).

    The dot keeps ``order.item_status`` apart from ``order_item.status``.
    """
    return f"{table}.{column}"


def add_inline_enum(
    enums: EnumMap,
    table: str,
    column: str,
    values: list[str],
) -> None:
    """Record the enum of a column, refusing to overwrite another column's enum.

    Raises:
        DuplicateEnumError: If the enum name is already taken

    """
    name = inline_enum_name(table, column)
    if name in enums:
        msg = f"Enum name {name!r} of column {column!r} in {table!r} is ambiguous"
        raise DuplicateEnumError(msg)
    enums[name] = values
