"""Tests for enum member extraction from check constraints and column types."""

from introspect.enum_detection import detect_enum_for_column, parse_enum_column_type


def test_simple_in_clause() -> None:
    """Test basic IN clause with string values."""
    constraint = "status IN ('active', 'inactive', 'pending')"
    result = detect_enum_for_column(constraint, "status")
    assert result == ["active", "inactive", "pending"]


def test_in_clause_with_spaces() -> None:
    """Test IN clause with various spacing."""
    constraint = "role IN( 'admin' , 'user' , 'moderator' )"
    result = detect_enum_for_column(constraint, "role")
    assert result == ["admin", "user", "moderator"]


def test_in_clause_case_insensitive() -> None:
    """Test that IN matching is case insensitive."""
    constraint = "status in ('active', 'inactive')"
    result = detect_enum_for_column(constraint, "status")
    assert result == ["active", "inactive"]


def test_quoted_column_name() -> None:
    """Test that a double-quoted column name is matched."""
    constraint = "\"kind\" IN ('a', 'b')"
    assert detect_enum_for_column(constraint, "kind") == ["a", "b"]


def test_numeric_in_clause_is_not_enum() -> None:
    """Test IN clause with no quoted values."""
    constraint = "status IN (1, 2, 3)"
    assert detect_enum_for_column(constraint, "status") == []


def test_range_constraint_is_not_enum() -> None:
    """Test constraint that's not an IN clause."""
    constraint = "score >= 0 AND score <= 100"
    assert detect_enum_for_column(constraint, "score") == []


def test_column_not_referenced() -> None:
    """Test no detection when another column is constrained."""
    constraint = "status IN ('active', 'inactive', 'pending')"
    assert detect_enum_for_column(constraint, "role") == []


def test_partial_column_name_match() -> None:
    """Test that column names must match exactly."""
    constraint = "user_status IN ('active', 'inactive')"
    assert detect_enum_for_column(constraint, "status") == []
    assert detect_enum_for_column(constraint, "user_status") == ["active", "inactive"]


def test_mixed_case_column_names() -> None:
    """Test column name matching is case sensitive."""
    constraint = "Status IN ('active', 'inactive')"
    assert detect_enum_for_column(constraint, "Status") == ["active", "inactive"]
    assert detect_enum_for_column(constraint, "status") == []


def test_empty_constraint() -> None:
    """Test handling of empty constraint text."""
    assert detect_enum_for_column("", "status") == []


def test_malformed_in_clause() -> None:
    """Test handling of malformed IN clause."""
    constraint = "status IN (active, inactive"
    assert detect_enum_for_column(constraint, "status") == []


def test_complex_values_in_enum() -> None:
    """Test enum values with special characters."""
    constraint = "status IN ('multi-word', 'with_underscore', 'with space')"
    result = detect_enum_for_column(constraint, "status")
    assert result == ["multi-word", "with_underscore", "with space"]


def test_escaped_quote_in_value() -> None:
    """Test that doubled single quotes are unescaped."""
    constraint = "name IN ('it''s', 'plain')"
    assert detect_enum_for_column(constraint, "name") == ["it's", "plain"]


def test_mysql_enum_column_type() -> None:
    """Test parsing of a MySQL enum column type."""
    assert parse_enum_column_type("enum('small','medium','large')") == [
        "small",
        "medium",
        "large",
    ]


def test_mysql_enum_column_type_keeps_order_and_escapes() -> None:
    """Test member order is preserved and quotes are unescaped."""
    assert parse_enum_column_type("ENUM('z','a','o''clock')") == ["z", "a", "o'clock"]


def test_mysql_non_enum_column_type() -> None:
    """Test that other column types yield no members."""
    assert parse_enum_column_type("varchar(255)") == []
    assert parse_enum_column_type("set('a','b')") == []
