"""Assembly of a TypeScript schema document from a database catalog."""

from __future__ import annotations

import re
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from datetime import datetime
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from introspect import DEFAULT_SCHEMA
from typegen import typescript
from typegen.typescript import INDENT

if TYPE_CHECKING:
    from collections.abc import Sequence

    from introspect import ColumnDescriptor, Database, EnumMap

logger = getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

# Rendered in place of a fragment the generator did not produce
MISSING_FRAGMENT = "undefined"

# scheme://user:password@ -> scheme://username:password@
CREDENTIALS = re.compile(r"(?P<scheme>\w[\w+.-]*)://[^:/@\s]+:[^@\s]*@")
REDACTED_CREDENTIALS = r"\g<scheme>://username:password@"

_JINJA_ENV = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=False,  # noqa: S701
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


class FragmentGenerator(Protocol):
    """Producer of the declaration fragments a document is assembled from."""

    def generate_enum_type(self, enums: EnumMap) -> str | None:
        """Generate declarations for all enum types."""
        ...

    def generate_table_types(
        self,
        table_name: str,
        columns: Sequence[ColumnDescriptor],
        enums: EnumMap,
    ) -> str | None:
        """Generate the column type map of a table."""
        ...

    def generate_table_interface(
        self,
        table_name: str,
        columns: Sequence[ColumnDescriptor],
        enums: EnumMap,
    ) -> str | None:
        """Generate the row interface of a table."""
        ...


def _text(fragment: str | None) -> str:
    return MISSING_FRAGMENT if fragment is None else fragment


def extract_command(argv: Sequence[str]) -> str:
    """Rebuild the invoked command line with connection credentials redacted.

    The program and script name (the first two arguments) are dropped.
    Arguments without ``user:password@`` credentials are kept as they are.
    """
    return " ".join(CREDENTIALS.sub(REDACTED_CREDENTIALS, arg) for arg in argv[2:])


def get_time() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")  # noqa: DTZ005


def typescript_of_table(
    db: Database,
    table: str,
    schema: str,
    enums: EnumMap,
    generator: FragmentGenerator = typescript,
) -> str:
    """Generate the type map followed by the interface of one table."""
    columns = db.get_table_columns(table, schema)
    table_types = generator.generate_table_types(table, columns, enums)
    table_interface = generator.generate_table_interface(table, columns, enums)
    return _text(table_types) + _text(table_interface)


def typescript_of_schema(  # noqa: PLR0913
    db: Database,
    namespace: str | None,
    tables: Sequence[str],
    schema: str | None,
    command: str,
    time: str,
    *,
    generator: FragmentGenerator = typescript,
    max_workers: int | None = None,
) -> str:
    """Generate the TypeScript document for the tables of a schema.

    Args:
        db: Reader for the database catalog
        namespace: Namespace wrapping all declarations, or None for none
        tables: Tables to generate; every table of the schema when empty
        schema: Schema to read, defaulting to ``public``
        command: Redacted command line recorded in the header
        time: Generation time recorded in the header
        generator: Producer of the declaration fragments
        max_workers: Maximum number of concurrent per-table catalog queries

    Returns:
        The complete document text

    """
    schema = schema or DEFAULT_SCHEMA
    if not tables:
        tables = db.list_tables(schema)

    # Enums are read even for an explicit table list, any table may use them
    enums = db.get_enum_types(schema)
    logger.debug(
        "Generating %d table(s) and %d enum(s) from schema %s",
        len(tables),
        len(enums),
        schema,
    )

    table_fragments = _generate_tables(
        db,
        tables,
        schema,
        enums,
        generator,
        max_workers=max_workers,
    )

    body = _text(generator.generate_enum_type(enums)) + "".join(table_fragments)

    template = _JINJA_ENV.get_template("document.ts.j2")
    return template.render(
        time=time,
        command=command,
        namespace_name=namespace,
        indent=INDENT,
        lines=document_lines(body),
    )


def _generate_tables(  # noqa: PLR0913
    db: Database,
    tables: Sequence[str],
    schema: str,
    enums: EnumMap,
    generator: FragmentGenerator,
    *,
    max_workers: int | None,
) -> list[str]:
    """Generate the fragments of every table concurrently, in table order.

    The first failing table query is raised as soon as it fails; queries
    that have not started yet are cancelled.
    """
    executor = ThreadPoolExecutor(max_workers=max_workers)
    futures = [
        executor.submit(typescript_of_table, db, table, schema, enums, generator)
        for table in tables
    ]
    try:
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        for future in futures:
            if future in done and (error := future.exception()) is not None:
                raise error
        return [future.result() for future in futures]
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def document_lines(body: str) -> list[str]:
    """Split a document body on line feeds only.

    Other line break characters belong to the text of the line they are on.
    A final line feed ends the last line rather than starting an empty one.
    """
    if not body:
        return []
    return body.removesuffix("\n").split("\n")
