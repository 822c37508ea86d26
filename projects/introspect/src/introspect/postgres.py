"""PostgreSQL catalog reader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from introspect.catalog import CatalogDatabase
from introspect.types import ColumnDescriptor, EnumMap

if TYPE_CHECKING:
    from sqlalchemy import RowMapping

TABLES_QUERY = """
    SELECT table_name
    FROM information_schema.columns
    WHERE table_schema = :schema
    GROUP BY table_name
    ORDER BY table_name
"""

ENUMS_QUERY = """
    SELECT t.typname AS name, e.enumlabel AS value
    FROM pg_type t
    JOIN pg_enum e ON t.oid = e.enumtypid
    JOIN pg_catalog.pg_namespace n ON n.oid = t.typnamespace
    WHERE n.nspname = :schema
    ORDER BY t.typname ASC, e.enumsortorder ASC
"""

COLUMNS_QUERY = """
    SELECT column_name, data_type, udt_name, is_nullable
    FROM information_schema.columns
    WHERE table_name = :table AND table_schema = :schema
    ORDER BY ordinal_position
"""


def column_from_row(row: RowMapping) -> ColumnDescriptor:
    """Build a descriptor from an ``information_schema.columns`` row.

    Array columns report ``ARRAY`` as their data type and the element type,
    prefixed with an underscore, as their udt name.
    """
    is_array = row["data_type"] == "ARRAY"
    udt_name = row["udt_name"].removeprefix("_") if is_array else row["udt_name"]
    return ColumnDescriptor(
        name=row["column_name"],
        database_type=udt_name,
        is_nullable=row["is_nullable"] == "YES",
        is_array=is_array,
        udt_name=udt_name,
    )


class PostgresDatabase(CatalogDatabase):
    """Reads tables, columns and enum types from a PostgreSQL schema."""

    def list_tables(self, schema: str) -> list[str]:
        """Return every table (and view) with columns in the schema."""
        return [row["table_name"] for row in self.fetch(TABLES_QUERY, schema=schema)]

    def get_enum_types(self, schema: str) -> EnumMap:
        """Return the enum types of the schema, members in declaration order."""
        enums: EnumMap = {}
        for row in self.fetch(ENUMS_QUERY, schema=schema):
            enums.setdefault(row["name"], []).append(row["value"])
        return enums

    def get_table_columns(self, table: str, schema: str) -> list[ColumnDescriptor]:
        """Return the column descriptors of a table."""
        rows = self.fetch(COLUMNS_QUERY, table=table, schema=schema)
        return [column_from_row(row) for row in rows]
