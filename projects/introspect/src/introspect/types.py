"""Metadata records shared by the database readers and the type generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

# Enum type name -> member literals, in catalog declaration order
type EnumMap = dict[str, list[str]]


@dataclass(frozen=True)
class ColumnDescriptor:
    """Snapshot of one column's type information as read from the catalog."""

    name: str
    database_type: str
    is_nullable: bool
    is_array: bool = False
    udt_name: str = ""


class Database(Protocol):
    """Catalog queries a reader must answer for the generator."""

    def list_tables(self, schema: str) -> Sequence[str]:
        """Return the names of all tables in the schema."""
        ...

    def get_enum_types(self, schema: str) -> EnumMap:
        """Return the enum types declared in the schema."""
        ...

    def get_table_columns(self, table: str, schema: str) -> Sequence[ColumnDescriptor]:
        """Return the column descriptors of a table, in ordinal order."""
        ...
