"""
High-level schema printing.

`SchemaPrinter` turns a whole schema into an ordered list of DDL statements:
  1) CREATE SEQUENCE statements (by sequence name)
  2) CREATE TABLE for each table in dependency order, each followed by its
     CREATE INDEX statements
  3) ALTER TABLE ... ADD FOREIGN KEY for every foreign key, in table order

Foreign keys are never inlined in CREATE TABLE: emitting them last means no
table is referenced before it exists, and circular foreign keys need no
special handling.

Statements carry no terminator; joining them is the caller's concern.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from src.logger import LOGGER
from src.spanner_ddl.config import Config
from src.spanner_ddl.models import CreateSequence, Schema
from src.spanner_ddl.ordering import order_table_ids
from src.spanner_ddl.sql import (
    render_create_index,
    render_create_table,
    render_foreign_key_alter_table,
    render_sequence,
)

TableOrderer = Callable[[Schema], list[str]]


class SchemaPrinter:
    """Sequences the entity printers into the statement order described above."""

    def __init__(self, config: Config, orderer: TableOrderer | None = None) -> None:
        """
        Initialize the printer.

        A custom table orderer can be injected for testing.
        """
        self.config: Config = config
        self.orderer: TableOrderer = orderer or order_table_ids

    # ---------- public API ----------

    def print_ddl(
        self,
        schema: Schema,
        sequences: Mapping[str, CreateSequence] | None = None,
    ) -> list[str]:
        """Render `schema` and `sequences` as an ordered list of DDL statements."""
        table_ids = self.orderer(schema)

        sequence_statements = self._sequences(sequences or {})
        table_statements = self._tables(schema, table_ids) if self.config.tables else []
        foreign_key_statements = (
            self._foreign_keys(schema, table_ids) if self.config.foreign_keys else []
        )

        LOGGER.info(
            "DDL generated (%s): sequences=%d, tables/indexes=%d, foreign keys=%d",
            self.config.dialect,
            len(sequence_statements),
            len(table_statements),
            len(foreign_key_statements),
        )
        return sequence_statements + table_statements + foreign_key_statements

    # ---------- statement groups ----------

    def _sequences(self, sequences: Mapping[str, CreateSequence]) -> list[str]:
        ordered = sorted(sequences.values(), key=lambda seq: (seq.name, seq.id))
        return [render_sequence(sequence, self.config) for sequence in ordered]

    def _tables(self, schema: Schema, table_ids: list[str]) -> list[str]:
        statements: list[str] = []
        for table_id in table_ids:
            table = schema[table_id]
            statements.append(render_create_table(table, schema, self.config))
            for index in table.indexes:
                statements.append(render_create_index(index, table, self.config))
        return statements

    def _foreign_keys(self, schema: Schema, table_ids: list[str]) -> list[str]:
        statements: list[str] = []
        for table_id in table_ids:
            for foreign_key in schema[table_id].foreign_keys:
                statements.append(
                    render_foreign_key_alter_table(foreign_key, schema, self.config, table_id)
                )
        return statements


def get_ddl(
    config: Config,
    schema: Schema,
    sequences: Mapping[str, CreateSequence] | None = None,
) -> list[str]:
    """Ordered DDL statements for `schema` (and `sequences`) under `config`."""
    return SchemaPrinter(config).print_ddl(schema, sequences)
