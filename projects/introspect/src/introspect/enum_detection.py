"""Enum member extraction from catalog text (check constraints, column types)."""

import re

# Reusable regex components for better readability
IDENTIFIER = r"[\"'`\[]?(\w+)[\"'`\]]?"  # Captures identifier inside optional quotes
LITERAL = r"'((?:[^']|'')*)'"  # Captures a quoted literal, '' being an escaped quote
WHITESPACE = r"\s*"
OPEN_PAREN = r"\("
CLOSE_PAREN = r"\)"
IN = r"IN"
LITERALS = r"((?:\s*'(?:[^']|'')*'\s*,?)+)"

IN_PATTERN = re.compile(
    WHITESPACE.join((IDENTIFIER, IN, OPEN_PAREN, LITERALS, CLOSE_PAREN)),
    re.IGNORECASE,
)
COLUMN_TYPE_PATTERN = re.compile(
    WHITESPACE.join(("^enum", OPEN_PAREN, LITERALS, CLOSE_PAREN + "$")),
    re.IGNORECASE,
)


def _literals(text: str) -> list[str]:
    return [value.replace("''", "'") for value in re.findall(LITERAL, text)]


def detect_enum_for_column(constraint_text: str, column_name: str) -> list[str]:
    """Return the allowed values if a check constraint restricts the column to a set.

    Handles constraints like:
    - column IN ('value1', 'value2', 'value3')
    - "column" IN ('value1', 'value2', 'value3')
    """
    if match := IN_PATTERN.search(constraint_text):
        return _literals(match[2]) if match[1] == column_name else []
    return []


def parse_enum_column_type(column_type: str) -> list[str]:
    """Return the members of a MySQL ``enum('a','b')`` column type."""
    if match := COLUMN_TYPE_PATTERN.match(column_type.strip()):
        return _literals(match[1])
    return []
