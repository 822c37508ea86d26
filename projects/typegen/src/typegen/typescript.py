"""TypeScript declaration fragments for enums and tables."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from typegen.type_mapping import enum_type_name, enum_type_names, map_type

if TYPE_CHECKING:
    from collections.abc import Sequence

    from introspect import ColumnDescriptor, EnumMap

logger = getLogger(__name__)

INDENT = "    "

# Names that would shadow TypeScript types when used as identifiers
RESERVED_NAMES = frozenset(("string", "number", "package"))


def normalize_name(name: str) -> str:
    """Suffix names that collide with TypeScript reserved words."""
    return f"{name}_" if name in RESERVED_NAMES else name


# Escapes keeping an enum member a valid single-line string literal
LITERAL_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    },
)

# Type of an enum without members, which no value satisfies
EMPTY_UNION = "never"


def quote_literal(value: str) -> str:
    """Quote an enum member as a single-line TypeScript string literal."""
    return f"'{value.translate(LITERAL_ESCAPES)}'"


def generate_enum_type(enums: EnumMap) -> str:
    """Generate one union type alias per enum, in map order.

    Enums whose PascalCase names collide are told apart by a numeric
    suffix; an enum without members is declared as ``never``.
    """
    names = enum_type_names(enums)
    declarations = []
    for name, values in enums.items():
        if names[name] != enum_type_name(name):
            logger.warning(
                "Enum [%s] has been named [%s] because [%s] is already taken.",
                name,
                names[name],
                enum_type_name(name),
            )
        union = " | ".join(quote_literal(value) for value in values) or EMPTY_UNION
        declarations.append(f"export type {names[name]} = {union};\n")
    return "".join(declarations)


def generate_table_types(
    table_name: str,
    columns: Sequence[ColumnDescriptor],
    enums: EnumMap,
) -> str:
    """Generate the ``<table>Fields`` namespace with one type alias per column."""
    table = normalize_name(table_name)
    lines = [
        "",
        f"export namespace {table}Fields {{",
        *(
            f"{INDENT}export type {normalize_name(column.name)} = "
            f"{map_type(column, enums)};"
            for column in columns
        ),
        "}",
        "",
    ]
    return "\n".join(lines)


def generate_table_interface(
    table_name: str,
    columns: Sequence[ColumnDescriptor],
    enums: EnumMap,  # noqa: ARG001
) -> str:
    """Generate the table's row interface, typed through its Fields namespace."""
    table = normalize_name(table_name)
    lines = [
        "",
        f"export interface {table} {{",
        *(
            f"{INDENT}{normalize_name(column.name)}: "
            f"{table}Fields.{normalize_name(column.name)};"
            for column in columns
        ),
        "}",
        "",
    ]
    return "\n".join(lines)
