"""SQLite catalog reader."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from sqlalchemy import inspect

from introspect.catalog import (
    DEFAULT_SCHEMA,
    CatalogDatabase,
    add_inline_enum,
    inline_enum_name,
)
from introspect.enum_detection import detect_enum_for_column
from introspect.types import ColumnDescriptor, EnumMap

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy import RowMapping

COLUMNS_QUERY = """
    SELECT name, type, "notnull", pk
    FROM pragma_table_info(:table, :schema)
    ORDER BY cid
"""

# Strips length / precision arguments: VARCHAR(255) -> varchar
TYPE_ARGUMENTS = re.compile(r"\s*\(.*\)\s*$")


def _database_name(schema: str) -> str:
    return "main" if schema == DEFAULT_SCHEMA else schema


def normalize_type(declared_type: str) -> str:
    """Reduce a declared column type to its lower-case base name."""
    return TYPE_ARGUMENTS.sub("", declared_type).strip().lower()


def column_from_row(
    table: str,
    row: RowMapping,
    enum_columns: Iterable[str],
) -> ColumnDescriptor:
    """Build a descriptor from a ``pragma_table_info`` row.

    Primary key columns are reported as not nullable.
    """
    database_type = normalize_type(row["type"])
    return ColumnDescriptor(
        name=row["name"],
        database_type=database_type,
        is_nullable=not (row["notnull"] or row["pk"]),
        udt_name=(
            inline_enum_name(table, row["name"])
            if row["name"] in enum_columns
            else database_type
        ),
    )


class SqliteDatabase(CatalogDatabase):
    """Reads tables, columns and check-constraint enums from a SQLite database.

    The default schema name refers to the ``main`` database; attached
    databases are addressed by their own name.
    """

    def list_tables(self, schema: str) -> list[str]:
        """Return the user tables and views of the database, sorted by name.

        System tables are excluded.
        """
        database = _database_name(schema)
        with self.engine.connect() as connection:
            inspector = inspect(connection)
            return sorted(
                [
                    *inspector.get_table_names(schema=database),
                    *inspector.get_view_names(schema=database),
                ],
            )

    def _is_view(self, table: str, database: str) -> bool:
        with self.engine.connect() as connection:
            return table in inspect(connection).get_view_names(schema=database)

    def _columns(self, table: str, database: str) -> list[RowMapping]:
        return self.fetch(COLUMNS_QUERY, table=table, schema=database)

    def _enum_columns(
        self,
        table: str,
        database: str,
        column_names: Iterable[str],
    ) -> dict[str, list[str]]:
        """Map columns restricted by an ``IN (...)`` check to their values.

        Views carry no check constraints and map to nothing.
        """
        if self._is_view(table, database):
            return {}

        with self.engine.connect() as connection:
            constraints = inspect(connection).get_check_constraints(
                table,
                schema=database,
            )

        enum_columns: dict[str, list[str]] = {}
        for column_name in column_names:
            for constraint in constraints:
                if values := detect_enum_for_column(constraint["sqltext"], column_name):
                    enum_columns[column_name] = values
                    break
        return enum_columns

    def get_enum_types(self, schema: str) -> EnumMap:
        """Return one enum type per check-constrained column."""
        database = _database_name(schema)
        enums: EnumMap = {}
        for table in self.list_tables(schema):
            column_names = [row["name"] for row in self._columns(table, database)]
            for column, values in self._enum_columns(
                table,
                database,
                column_names,
            ).items():
                add_inline_enum(enums, table, column, values)
        return enums

    def get_table_columns(self, table: str, schema: str) -> list[ColumnDescriptor]:
        """Return the column descriptors of a table."""
        database = _database_name(schema)
        rows = self._columns(table, database)
        enum_columns = self._enum_columns(table, database, [row["name"] for row in rows])
        return [column_from_row(table, row, enum_columns) for row in rows]
