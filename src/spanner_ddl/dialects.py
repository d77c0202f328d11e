"""
Per-dialect rendering strategies.

Each Spanner dialect gets one renderer object implementing the same interface.
Printers in `src.spanner_ddl.sql` ask the renderer for every clause whose
spelling or placement differs between dialects:

- column type names and lengths
- DEFAULT casting and auto-generation defaults
- primary key placement (inside or after the table body)
- INTERLEAVE clause separator
- the index STORING / INCLUDE keyword
- the check-constraint block terminator
- CREATE SEQUENCE options

Renderers are stateless; `get_dialect_renderer` returns shared instances.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import ClassVar

from src.enums import Dialect, InterleaveType, SequenceKind
from src.logger import LOGGER
from src.spanner_ddl.errors import UnknownDialectError
from src.spanner_ddl.models import (
    AutoGenCol,
    CreateSequence,
    DefaultValue,
    InterleavedParent,
    is_sequence_generator,
    is_uuid_generator,
)
from src.spanner_ddl.types import (
    Type,
    TypeName,
    pg_print_column_def_type,
    pg_type_name,
    print_column_def_type,
)


class DialectRenderer:
    """Base interface for a dialect renderer."""

    dialect: ClassVar[str]
    storing_keyword: ClassVar[str]
    # Appended after the last check constraint in place of its ",\n".
    check_constraints_terminator: ClassVar[str]
    interleave_separator: ClassVar[str]
    # Type names whose DEFAULT expression is wrapped in CAST(... AS <type>).
    cast_type_names: ClassVar[frozenset[str]]

    def render_type(self, column_type: Type) -> str:
        """Type clause for a column definition."""
        raise NotImplementedError

    def cast_type_name(self, column_type: Type) -> str:
        """Type name used as the CAST target of a DEFAULT expression."""
        raise NotImplementedError

    def render_auto_gen(self, auto_gen: AutoGenCol) -> str:
        """DEFAULT clause for an auto-generated column, or "" if none applies."""
        raise NotImplementedError

    def close_table_body(self, key_parts: Sequence[str]) -> str:
        """Text from the end of the column/check block up to (not including) INTERLEAVE."""
        raise NotImplementedError

    def render_sequence(self, sequence: CreateSequence, quoted_name: str) -> str:
        """Full CREATE SEQUENCE statement."""
        raise NotImplementedError

    # ---------- shared ----------

    def render_default_value(self, default_value: DefaultValue, column_type: Type) -> str:
        """DEFAULT clause, cast to the column type for cast-sensitive types."""
        if not default_value.is_present:
            return ""
        statement = default_value.value.statement
        type_name = self.cast_type_name(column_type)
        if type_name in self.cast_type_names:
            return f" DEFAULT (CAST({statement} AS {type_name}))"
        return f" DEFAULT ({statement})"

    def render_interleave(self, parent: InterleavedParent, quoted_parent_name: str) -> str:
        """INTERLEAVE clause; ON DELETE is only emitted for the PARENT variant."""
        if parent.interleave_type == InterleaveType.IN:
            return f"{self.interleave_separator}INTERLEAVE IN {quoted_parent_name}"
        clause = f"{self.interleave_separator}INTERLEAVE IN PARENT {quoted_parent_name}"
        if parent.on_delete:
            clause += f" ON DELETE {parent.on_delete}"
        return clause


class GoogleStandardSqlDialect(DialectRenderer):
    """GoogleSQL: backticks, STRING(MAX), PRIMARY KEY after the closing parenthesis."""

    dialect = Dialect.GOOGLE_STANDARD_SQL
    storing_keyword = "STORING"
    check_constraints_terminator = "\n"
    interleave_separator = ",\n"
    cast_type_names = frozenset(
        {TypeName.FLOAT32.value, TypeName.NUMERIC.value, TypeName.BOOL.value, TypeName.BYTES.value}
    )

    def render_type(self, column_type: Type) -> str:
        return print_column_def_type(column_type)

    def cast_type_name(self, column_type: Type) -> str:
        return column_type.name

    def render_auto_gen(self, auto_gen: AutoGenCol) -> str:
        if is_uuid_generator(auto_gen):
            return " DEFAULT (GENERATE_UUID())"
        if is_sequence_generator(auto_gen):
            return f" DEFAULT (GET_NEXT_SEQUENCE_VALUE(SEQUENCE {auto_gen.name}))"
        return ""

    def close_table_body(self, key_parts: Sequence[str]) -> str:
        if not key_parts:
            return ") "
        return f") PRIMARY KEY ({', '.join(key_parts)})"

    def render_sequence(self, sequence: CreateSequence, quoted_name: str) -> str:
        options: list[str] = []
        if sequence.sequence_kind == SequenceKind.BIT_REVERSED_POSITIVE:
            options.append("sequence_kind='bit_reversed_positive'")
        if sequence.skip_range_min:
            options.append(f"skip_range_min = {sequence.skip_range_min}")
        if sequence.skip_range_max:
            options.append(f"skip_range_max = {sequence.skip_range_max}")
        if sequence.start_with_counter:
            options.append(f"start_with_counter = {sequence.start_with_counter}")

        statement = f"CREATE SEQUENCE {quoted_name}"
        if options:
            statement += f" OPTIONS ({', '.join(options)}) "
        return statement


class PostgreSqlDialect(DialectRenderer):
    """PostgreSQL interface: VARCHAR/INT8 names, PRIMARY KEY inside the table body."""

    dialect = Dialect.POSTGRESQL
    storing_keyword = "INCLUDE"
    # PRIMARY KEY follows the check block inside the body, so keep the comma.
    check_constraints_terminator = ",\n"
    interleave_separator = " "
    cast_type_names = frozenset({"FLOAT8", "FLOAT4", "REAL", "NUMERIC", "DECIMAL", "BOOL", "BYTEA"})

    def render_type(self, column_type: Type) -> str:
        if column_type.is_array:
            LOGGER.warning(
                "Array type %s is not supported by the PostgreSQL dialect; "
                "falling back to VARCHAR at maximum length.",
                column_type.name,
            )
        return pg_print_column_def_type(column_type)

    def cast_type_name(self, column_type: Type) -> str:
        return pg_type_name(column_type)

    def render_auto_gen(self, auto_gen: AutoGenCol) -> str:
        if is_uuid_generator(auto_gen):
            return " DEFAULT (spanner.generate_uuid())"
        if is_sequence_generator(auto_gen):
            return f" DEFAULT NEXTVAL('{auto_gen.name}')"
        return ""

    def close_table_body(self, key_parts: Sequence[str]) -> str:
        if not key_parts:
            return ") "
        return f"\tPRIMARY KEY ({', '.join(key_parts)})\n)"

    def render_sequence(self, sequence: CreateSequence, quoted_name: str) -> str:
        options: list[str] = []
        if sequence.sequence_kind == SequenceKind.BIT_REVERSED_POSITIVE:
            options.append("BIT_REVERSED_POSITIVE")
        if sequence.skip_range_min and sequence.skip_range_max:
            options.append(f"SKIP RANGE {sequence.skip_range_min} {sequence.skip_range_max}")
        if sequence.start_with_counter:
            options.append(f"START COUNTER WITH {sequence.start_with_counter}")

        statement = f"CREATE SEQUENCE {quoted_name}"
        for option in options:
            statement += f" {option}"
        return statement


_RENDERERS = MappingProxyType(
    {
        Dialect.GOOGLE_STANDARD_SQL.value: GoogleStandardSqlDialect(),
        Dialect.POSTGRESQL.value: PostgreSqlDialect(),
    }
)


def get_dialect_renderer(dialect: str) -> DialectRenderer:
    """Shared renderer for `dialect`."""
    try:
        return _RENDERERS[dialect]
    except KeyError:
        raise UnknownDialectError(f"Unsupported Spanner dialect: {dialect!r}") from None
