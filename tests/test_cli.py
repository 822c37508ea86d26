"""Tests for the schemats command line interface."""

import sqlite3
import sys
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from schemats.cli import generate


@pytest.fixture(name="sample_database")
def blog_sample_database() -> Generator[Path]:
    """Create a sample SQLite database for testing."""
    with tempfile.NamedTemporaryFile(suffix=".sqlite", delete=False) as f:
        db_path = Path(f.name)

    conn = sqlite3.connect(db_path)
    conn.execute(
        """
        CREATE TABLE posts (
            id INTEGER PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            state TEXT NOT NULL CHECK (state IN ('draft', 'published')),
            body TEXT
        )
    """,
    )
    conn.execute(
        """
        CREATE TABLE comments (
            id INTEGER PRIMARY KEY,
            post_id INTEGER NOT NULL,
            content TEXT NOT NULL
        )
    """,
    )
    conn.commit()
    conn.close()

    yield db_path

    db_path.unlink()


def test_generate_writes_definitions(sample_database: Path, tmp_path: Path) -> None:
    """Test that all tables and enums are written to the output file."""
    output = tmp_path / "schema.ts"
    generate(connection=f"sqlite:///{sample_database}", output=output)

    definitions = output.read_text(encoding="utf-8")
    assert definitions.startswith("\n/* tslint:disable */\n")
    assert "export type PostsState = 'draft' | 'published';\n" in definitions
    assert "export namespace postsFields {\n" in definitions
    assert "    export type state = PostsState;\n" in definitions
    assert "    export type body = string | null;\n" in definitions
    assert "export interface comments {\n" in definitions
    # Tables are listed by name
    assert definitions.index("interface comments") < definitions.index(
        "interface posts",
    )


def test_generate_selected_tables_in_namespace(
    sample_database: Path,
    tmp_path: Path,
) -> None:
    """Test comma-separated table selection and namespace wrapping."""
    output = tmp_path / "schema.ts"
    generate(
        connection=f"sqlite:///{sample_database}",
        output=output,
        table=("posts,comments",),
        namespace="blog",
    )

    definitions = output.read_text(encoding="utf-8")
    assert "export namespace blog {\n" in definitions
    assert "    export interface posts {\n" in definitions
    assert definitions.index("interface posts") < definitions.index(
        "interface comments",
    )
    assert definitions.endswith("}\n")


def test_generate_unsupported_database(tmp_path: Path) -> None:
    """Test that an unsupported database exits with an error."""
    with pytest.raises(SystemExit) as excinfo:
        generate(connection="oracle://u:p@localhost/db", output=tmp_path / "x.ts")
    assert excinfo.value.code == 1


def test_generate_missing_output_directory(sample_database: Path) -> None:
    """Test that a missing output directory exits with an error."""
    with pytest.raises(SystemExit) as excinfo:
        generate(
            connection=f"sqlite:///{sample_database}",
            output=Path("/nonexistent/dir/schema.ts"),
        )
    assert excinfo.value.code == 1


def test_generate_unknown_table(sample_database: Path, tmp_path: Path) -> None:
    """Test that a database error while reading exits with an error."""
    output = tmp_path / "schema.ts"
    with pytest.raises(SystemExit) as excinfo:
        generate(
            connection=f"sqlite:///{sample_database}",
            output=output,
            schema="missing",
        )
    assert excinfo.value.code == 1
    assert not output.exists()


def test_generate_records_invoked_command(
    sample_database: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Test that the header holds the command line as typed, subcommand included."""
    output = tmp_path / "schema.ts"
    connection = f"sqlite:///{sample_database}"
    monkeypatch.setattr(
        sys,
        "argv",
        ["/venv/bin/schemats", "generate", "-c", connection, "-o", str(output)],
    )
    generate(connection=connection, output=output)

    definitions = output.read_text(encoding="utf-8")
    assert f" * $ schemats generate -c {connection} -o {output}\n" in definitions


def test_generate_malformed_connection(tmp_path: Path) -> None:
    """Test that an unparsable connection URI exits with an error."""
    output = tmp_path / "schema.ts"
    with pytest.raises(SystemExit) as excinfo:
        generate(connection="not a uri", output=output)
    assert excinfo.value.code == 1
    assert not output.exists()
