"""MySQL catalog reader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from introspect.catalog import (
    DEFAULT_SCHEMA,
    CatalogDatabase,
    add_inline_enum,
    inline_enum_name,
)
from introspect.enum_detection import parse_enum_column_type
from introspect.types import ColumnDescriptor, EnumMap

if TYPE_CHECKING:
    from sqlalchemy import RowMapping

# MySQL has no schemas inside a database; the default schema is the connected one
SCHEMA_FILTER = "table_schema = COALESCE(:schema, DATABASE())"

TABLES_QUERY = f"""
    SELECT table_name AS table_name
    FROM information_schema.tables
    WHERE {SCHEMA_FILTER}
    ORDER BY table_name
"""  # noqa: S608

ENUMS_QUERY = f"""
    SELECT table_name AS table_name, column_name AS column_name,
           column_type AS column_type
    FROM information_schema.columns
    WHERE data_type = 'enum' AND {SCHEMA_FILTER}
    ORDER BY table_name, ordinal_position
"""  # noqa: S608

COLUMNS_QUERY = f"""
    SELECT column_name AS column_name, data_type AS data_type,
           column_type AS column_type, is_nullable AS is_nullable
    FROM information_schema.columns
    WHERE table_name = :table AND {SCHEMA_FILTER}
    ORDER BY ordinal_position
"""  # noqa: S608


def normalize_type(data_type: str, column_type: str) -> str:
    """Lower-case the data type, reading ``tinyint(1)`` as a boolean."""
    base = data_type.lower()
    if base == "tinyint" and column_type.lower().startswith("tinyint(1)"):
        return "boolean"
    return base


def column_from_row(table: str, row: RowMapping) -> ColumnDescriptor:
    """Build a descriptor from an ``information_schema.columns`` row."""
    database_type = normalize_type(row["data_type"], row["column_type"])
    return ColumnDescriptor(
        name=row["column_name"],
        database_type=database_type,
        is_nullable=row["is_nullable"] == "YES",
        udt_name=(
            inline_enum_name(table, row["column_name"])
            if database_type == "enum"
            else database_type
        ),
    )


def _schema_param(schema: str) -> str | None:
    return None if schema == DEFAULT_SCHEMA else schema


class MysqlDatabase(CatalogDatabase):
    """Reads tables, columns and inline enum types from a MySQL database."""

    def list_tables(self, schema: str) -> list[str]:
        """Return the tables and views of the database."""
        rows = self.fetch(TABLES_QUERY, schema=_schema_param(schema))
        return [row["table_name"] for row in rows]

    def get_enum_types(self, schema: str) -> EnumMap:
        """Return one enum type per enum column, named ``<table>.<column>``."""
        rows = self.fetch(ENUMS_QUERY, schema=_schema_param(schema))
        enums: EnumMap = {}
        for row in rows:
            add_inline_enum(
                enums,
                row["table_name"],
                row["column_name"],
                parse_enum_column_type(row["column_type"]),
            )
        return enums

    def get_table_columns(self, table: str, schema: str) -> list[ColumnDescriptor]:
        """Return the column descriptors of a table."""
        rows = self.fetch(COLUMNS_QUERY, table=table, schema=_schema_param(schema))
        return [column_from_row(table, row) for row in rows]
