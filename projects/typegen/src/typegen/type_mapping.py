"""Mapping of database column types to TypeScript type expressions."""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from introspect import ColumnDescriptor, EnumMap

logger = getLogger(__name__)

# Catalog type names of PostgreSQL, MySQL and SQLite, by TypeScript type
_TYPES_BY_TARGET = {
    "string": (
        "bpchar",
        "char",
        "character",
        "varchar",
        "character varying",
        "nvarchar",
        "text",
        "citext",
        "uuid",
        "bytea",
        "inet",
        "cidr",
        "macaddr",
        "time",
        "timetz",
        "interval",
        "name",
        "tinytext",
        "mediumtext",
        "longtext",
        "geometry",
        "set",
    ),
    "number": (
        "int2",
        "int4",
        "int8",
        "float4",
        "float8",
        "numeric",
        "money",
        "oid",
        "integer",
        "int",
        "smallint",
        "mediumint",
        "bigint",
        "tinyint",
        "double",
        "double precision",
        "decimal",
        "float",
        "real",
        "year",
    ),
    "boolean": ("bool", "boolean"),
    "Object": ("json", "jsonb"),
    "Date": ("date", "timestamp", "timestamptz", "datetime"),
    "Buffer": (
        "tinyblob",
        "mediumblob",
        "longblob",
        "blob",
        "binary",
        "varbinary",
        "bit",
    ),
}

TYPESCRIPT_TYPES: dict[str, str] = {
    database_type: target
    for target, database_types in _TYPES_BY_TARGET.items()
    for database_type in database_types
}

FALLBACK_TYPE = "any"

NON_IDENTIFIER = re.compile(r"[^0-9A-Za-z]+")


def enum_type_name(name: str) -> str:
    """Convert an enum name to a PascalCase TypeScript identifier."""
    identifier = "".join(
        word[0].upper() + word[1:] for word in NON_IDENTIFIER.split(name) if word
    )
    if not identifier or identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


def enum_type_names(enums: EnumMap) -> dict[str, str]:
    """Assign every enum a distinct TypeScript identifier.

    Enums are named in map order; an enum whose PascalCase form is already
    taken gets the lowest free numeric suffix, so ``a_bc`` and ``ab_c``
    become ``ABc`` and ``ABc2``.
    """
    names: dict[str, str] = {}
    taken: set[str] = set()
    for name in enums:
        identifier = candidate = enum_type_name(name)
        suffix = 2
        while candidate in taken:
            candidate = f"{identifier}{suffix}"
            suffix += 1
        names[name] = candidate
        taken.add(candidate)
    return names


def base_type(descriptor: ColumnDescriptor, enums: EnumMap) -> str:
    """Resolve the element type of a column, ignoring arrays and nullability."""
    if descriptor.udt_name in enums:
        return enum_type_names(enums)[descriptor.udt_name]

    if target := TYPESCRIPT_TYPES.get(descriptor.database_type):
        return target

    logger.warning(
        "Type [%s] of column [%s] has been mapped to [%s] "
        "because no specific type has been found.",
        descriptor.database_type,
        descriptor.name,
        FALLBACK_TYPE,
    )
    return FALLBACK_TYPE


def map_type(descriptor: ColumnDescriptor, enums: EnumMap) -> str:
    """Return the TypeScript type expression for a column.

    Nullability wraps the whole type, so a nullable array column maps to
    ``Array<T> | null`` rather than ``Array<T | null>``.

    Examples:
        int4 -> number
        _int4 (array) -> Array<number>
        nullable text -> string | null
        nullable mood[] with enum mood -> Array<Mood> | null

    """
    type_expression = base_type(descriptor, enums)
    if descriptor.is_array:
        type_expression = f"Array<{type_expression}>"
    if descriptor.is_nullable:
        type_expression = f"{type_expression} | null"
    return type_expression
