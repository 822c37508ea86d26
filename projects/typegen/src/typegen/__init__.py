"""TypeScript type generation from database catalogs."""

from typegen.main import (
    FragmentGenerator,
    extract_command,
    get_time,
    typescript_of_schema,
    typescript_of_table,
)
from typegen.type_mapping import enum_type_name, map_type
from typegen.typescript import (
    generate_enum_type,
    generate_table_interface,
    generate_table_types,
)

__all__ = [
    "FragmentGenerator",
    "enum_type_name",
    "extract_command",
    "generate_enum_type",
    "generate_table_interface",
    "generate_table_types",
    "get_time",
    "map_type",
    "typescript_of_schema",
    "typescript_of_table",
]
