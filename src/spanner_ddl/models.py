"""
Domain models describing a Spanner schema.

The schema builder populates these once; printers only read them.

Conventions and semantics
-------------------------
- Entities are addressed by `id`. Cross-table links (foreign keys, interleaving)
  hold ids and are resolved through the `Schema` mapping at print time.
- `CreateTable.col_ids` fixes the column print order; `CreateTable.col_defs` is the
  lookup by id and must contain every id in `col_ids`.
- Key parts carry an explicit `order`; printers sort on it rather than trusting
  list order.
- Empty strings mean "absent" for optional text fields (names, comments, rules).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from src.constants import UUID_GENERATOR_NAME
from src.enums import GenerationType, InterleaveType
from src.spanner_ddl.types import Type


@dataclass(frozen=True)
class Expression:
    """Literal SQL expression text with its own id."""

    expression_id: str = ""
    statement: str = ""


@dataclass(frozen=True)
class DefaultValue:
    """Column default; `is_present=False` means no DEFAULT clause."""

    is_present: bool = False
    value: Expression = field(default_factory=Expression)


@dataclass(frozen=True)
class AutoGenCol:
    """
    Database-side value generation for a column.

    `name` is the generator for pre-defined generation (e.g. "UUID") or the
    sequence name for sequence-backed generation.
    """

    name: str = ""
    generation_type: str = ""


@dataclass(frozen=True)
class ColumnDef:
    """Column definition: ``column_name type [NOT NULL] [DEFAULT ...] [OPTIONS (...)]``."""

    name: str
    type: Type
    not_null: bool = False
    comment: str = ""
    id: str = ""
    auto_gen: AutoGenCol = field(default_factory=AutoGenCol)
    default_value: DefaultValue = field(default_factory=DefaultValue)
    options: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class IndexKey:
    """Primary-key or index key part; ascending unless `desc`."""

    col_id: str
    desc: bool = False
    order: int = 0


@dataclass(frozen=True)
class CheckConstraint:
    id: str = ""
    name: str = ""
    expr: str = ""
    expr_id: str = ""


@dataclass(frozen=True)
class Foreignkey:
    """
    Foreign key from `col_ids` of the owning table to `refer_column_ids` of
    `refer_table_id`. Both column lists are paired by position.
    """

    col_ids: Sequence[str]
    refer_table_id: str
    refer_column_ids: Sequence[str]
    name: str = ""
    id: str = ""
    on_delete: str = ""
    on_update: str = ""


@dataclass(frozen=True)
class InterleavedParent:
    """Interleave parent reference; an empty `id` means the table is not interleaved."""

    id: str = ""
    on_delete: str = ""
    interleave_type: str = InterleaveType.IN_PARENT


@dataclass(frozen=True)
class CreateIndex:
    """
    ``CREATE [UNIQUE] INDEX name ON table (key_part, ...) [STORING (...)]``.

    `stored_column_ids=None` means no storing clause at all.
    """

    name: str
    table_id: str
    keys: Sequence[IndexKey]
    unique: bool = False
    id: str = ""
    stored_column_ids: Sequence[str] | None = None


@dataclass(frozen=True)
class CreateTable:
    """``CREATE TABLE name (column_def, ...) PRIMARY KEY (...) [, INTERLEAVE ...]``."""

    name: str
    col_ids: Sequence[str]
    col_defs: Mapping[str, ColumnDef]
    primary_keys: Sequence[IndexKey] = ()
    foreign_keys: Sequence[Foreignkey] = ()
    indexes: Sequence[CreateIndex] = ()
    parent_table: InterleavedParent = field(default_factory=InterleavedParent)
    check_constraints: Sequence[CheckConstraint] = ()
    comment: str = ""
    id: str = ""
    shard_id_column: str = ""

    @property
    def is_interleaved(self) -> bool:
        return self.parent_table.id != ""

    def is_primary_key_column(self, col_id: str) -> bool:
        """True if `col_id` is one of the table's primary-key parts."""
        return any(key.col_id == col_id for key in self.primary_keys)


@dataclass(frozen=True)
class CreateSequence:
    """``CREATE SEQUENCE name [options]``."""

    id: str
    name: str
    sequence_kind: str = ""
    skip_range_min: str = ""
    skip_range_max: str = ""
    start_with_counter: str = ""
    # table id -> ids of the columns drawing values from this sequence
    columns_using_seq: Mapping[str, Sequence[str]] = field(default_factory=dict)


Schema: TypeAlias = Mapping[str, CreateTable]


def new_schema() -> dict[str, CreateTable]:
    """Empty schema for the builder to populate."""
    return {}


def has_interleaved_tables(schema: Schema) -> bool:
    """True if any table in `schema` is interleaved in a parent."""
    return any(table.is_interleaved for table in schema.values())


def is_uuid_generator(auto_gen: AutoGenCol) -> bool:
    return (
        auto_gen.name == UUID_GENERATOR_NAME
        and auto_gen.generation_type == GenerationType.PRE_DEFINED
    )


def is_sequence_generator(auto_gen: AutoGenCol) -> bool:
    return auto_gen.generation_type == GenerationType.SEQUENCE
