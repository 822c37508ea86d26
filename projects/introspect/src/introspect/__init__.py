"""Database catalog readers for type generation."""

from introspect.catalog import DEFAULT_SCHEMA, CatalogDatabase, DuplicateEnumError
from introspect.main import UnsupportedDatabaseError, connect
from introspect.mysql import MysqlDatabase
from introspect.postgres import PostgresDatabase
from introspect.sqlite import SqliteDatabase
from introspect.types import ColumnDescriptor, Database, EnumMap

__all__ = [
    "DEFAULT_SCHEMA",
    "CatalogDatabase",
    "ColumnDescriptor",
    "Database",
    "DuplicateEnumError",
    "EnumMap",
    "MysqlDatabase",
    "PostgresDatabase",
    "SqliteDatabase",
    "UnsupportedDatabaseError",
    "connect",
]
