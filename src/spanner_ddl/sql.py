"""
DDL string builders for Spanner schema entities.

All functions return fully-formed statement text (or clause text for the
column/key helpers) without a trailing terminator. Dialect-specific spelling and
placement is delegated to the renderer on `Config`; identifier quoting to
`Config.quote`.

Design guarantees
- Deterministic, side-effect free string generation.
- Key parts are printed in ascending `IndexKey.order`, whatever their list order.
- Cross-table references are resolved through the `Schema` mapping by id.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from src.constants import CASSANDRA_TYPE_OPTION
from src.logger import LOGGER
from src.spanner_ddl.config import Config
from src.spanner_ddl.dialects import get_dialect_renderer
from src.spanner_ddl.models import (
    CheckConstraint,
    ColumnDef,
    CreateIndex,
    CreateSequence,
    CreateTable,
    Foreignkey,
    IndexKey,
    Schema,
)
from src.spanner_ddl.utils import format_options, max_string_length

# Column options that are carried into the OPTIONS (...) clause.
_RECOGNISED_COLUMN_OPTIONS = (CASSANDRA_TYPE_OPTION,)


# ---------- columns & keys ----------


def render_column_def(column: ColumnDef, config: Config) -> tuple[str, str]:
    """
    Column definition and its comment, returned separately so the caller can
    align comments across the column block.
    """
    renderer = config.renderer
    text = f"{config.quote(column.name)} {renderer.render_type(column.type)}"
    if column.not_null:
        text += " NOT NULL "
    text += renderer.render_default_value(column.default_value, column.type)
    text += renderer.render_auto_gen(column.auto_gen)
    text += _render_column_options(column.options)
    return text, column.comment


def _render_column_options(options: Mapping[str, str]) -> str:
    recognised = {
        key: options[key] for key in _RECOGNISED_COLUMN_OPTIONS if options.get(key)
    }
    if not recognised:
        return ""
    return f" OPTIONS ({format_options(recognised)})"


def order_key_parts(keys: Iterable[IndexKey]) -> list[IndexKey]:
    """Key parts sorted by `order` (stable for equal orders)."""
    return sorted(keys, key=lambda key: key.order)


def render_key_part(key: IndexKey, table: CreateTable, config: Config) -> str:
    """Quoted column name, suffixed with DESC for descending parts; ASC is implicit."""
    column = config.quote(table.col_defs[key.col_id].name)
    if key.desc:
        return f"{column} DESC"
    return column


def _render_key_parts(keys: Iterable[IndexKey], table: CreateTable, config: Config) -> list[str]:
    return [render_key_part(key, table, config) for key in order_key_parts(keys)]


def render_check_constraints(checks: Sequence[CheckConstraint], dialect: str) -> str:
    """
    Check-constraint block for a CREATE TABLE body, one constraint per line.

    The last line ends with the dialect's terminator instead of ",\\n".
    """
    if not checks:
        return ""
    lines = []
    for check in checks:
        if check.name:
            lines.append(f"\tCONSTRAINT {check.name} CHECK {check.expr}")
        else:
            lines.append(f"\tCHECK {check.expr}")
    terminator = get_dialect_renderer(dialect).check_constraints_terminator
    return ",\n".join(lines) + terminator


# ---------- CREATE TABLE ----------


def render_create_table(table: CreateTable, schema: Schema, config: Config) -> str:
    """CREATE TABLE with columns, check constraints, primary key and interleave clause."""
    column_lines: list[str] = []
    column_comments: list[str] = []
    for col_id in table.col_ids:
        text, comment = render_column_def(table.col_defs[col_id], config)
        column_lines.append(f"\t{text},")
        column_comments.append(comment)

    width = max_string_length(column_lines)
    columns = ""
    for line, comment in zip(column_lines, column_comments):
        columns += line
        if config.comments and comment:
            columns += " " * (width - len(line)) + " -- " + comment
        columns += "\n"

    banner = ""
    if config.comments and table.comment:
        banner = f"--\n-- {table.comment}\n--\n"

    checks = render_check_constraints(table.check_constraints, config.dialect)
    keys = _render_key_parts(table.primary_keys, table, config)
    closing = config.renderer.close_table_body(keys)
    interleave = render_interleave(table, schema, config)
    header = f"{banner}CREATE TABLE {config.quote(table.name)} (\n"
    return f"{header}{columns}{checks}{closing}{interleave}"


def render_interleave(table: CreateTable, schema: Schema, config: Config) -> str:
    """INTERLEAVE clause for `table`, or "" if it has no parent in `schema`."""
    if not table.is_interleaved:
        return ""
    parent = schema.get(table.parent_table.id)
    if parent is None:
        LOGGER.warning(
            "Interleave parent %s of table %s is not in the schema; omitting INTERLEAVE.",
            table.parent_table.id,
            table.name,
        )
        return ""
    return config.renderer.render_interleave(table.parent_table, config.quote(parent.name))


# ---------- CREATE INDEX ----------


def render_create_index(index: CreateIndex, table: CreateTable, config: Config) -> str:
    """
    CREATE [UNIQUE] INDEX ... ON ... (...) [STORING|INCLUDE (...)].

    Stored columns that are primary-key columns are already in every index and
    are left out; the storing clause is dropped when nothing remains.
    """
    keys = _render_key_parts(index.keys, table, config)
    unique = "UNIQUE " if index.unique else ""

    storing = ""
    if index.stored_column_ids is not None:
        stored = [
            config.quote(table.col_defs[col_id].name)
            for col_id in index.stored_column_ids
            if not table.is_primary_key_column(col_id)
        ]
        if stored:
            storing = f" {config.renderer.storing_keyword} ({', '.join(stored)})"

    return (
        f"CREATE {unique}INDEX {config.quote(index.name)} ON {config.quote(table.name)} "
        f"({', '.join(keys)}){storing}"
    )


# ---------- foreign keys ----------


def _foreign_key_clause(
    foreign_key: Foreignkey, schema: Schema, config: Config, table_id: str
) -> str:
    table = schema[table_id]
    referenced = schema[foreign_key.refer_table_id]
    if len(foreign_key.col_ids) != len(foreign_key.refer_column_ids):
        raise ValueError(
            f"Foreign key {foreign_key.name or foreign_key.id!r} on {table.name} pairs "
            f"{len(foreign_key.col_ids)} column(s) with "
            f"{len(foreign_key.refer_column_ids)} referenced column(s)."
        )
    columns = [config.quote(table.col_defs[col_id].name) for col_id in foreign_key.col_ids]
    referenced_columns = [
        config.quote(referenced.col_defs[col_id].name) for col_id in foreign_key.refer_column_ids
    ]

    constraint = f"CONSTRAINT {config.quote(foreign_key.name)} " if foreign_key.name else ""
    clause = (
        f"{constraint}FOREIGN KEY ({', '.join(columns)}) "
        f"REFERENCES {config.quote(referenced.name)} ({', '.join(referenced_columns)})"
    )
    if foreign_key.on_delete:
        clause += f" ON DELETE {foreign_key.on_delete}"
    return clause


def render_foreign_key(
    foreign_key: Foreignkey, schema: Schema, config: Config, table_id: str
) -> str:
    """Inline ``[CONSTRAINT name] FOREIGN KEY (...) REFERENCES t (...)`` clause."""
    return _foreign_key_clause(foreign_key, schema, config, table_id)


def render_foreign_key_alter_table(
    foreign_key: Foreignkey, schema: Schema, config: Config, table_id: str
) -> str:
    """ALTER TABLE ... ADD [CONSTRAINT name] FOREIGN KEY (...) REFERENCES t (...)."""
    clause = _foreign_key_clause(foreign_key, schema, config, table_id)
    return f"ALTER TABLE {config.quote(schema[table_id].name)} ADD {clause}"


# ---------- CREATE SEQUENCE ----------


def render_sequence(sequence: CreateSequence, config: Config) -> str:
    """CREATE SEQUENCE with the dialect's option syntax."""
    return config.renderer.render_sequence(sequence, config.quote(sequence.name))
