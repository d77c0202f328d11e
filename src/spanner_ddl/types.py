"""
Column type vocabulary for Spanner DDL and the GoogleSQL <-> PostgreSQL type maps.

Conventions
- `Type.name` holds the canonical (GoogleSQL) type name, e.g. "STRING".
- `Type.length` is only meaningful for STRING and BYTES; `MAX_LENGTH` means "MAX".
- Arrays of arrays are not representable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from src.constants import MAX_LENGTH, PG_MAX_LENGTH


class TypeName(StrEnum):
    """Canonical Spanner type names (GoogleSQL spelling)."""

    BOOL = "BOOL"
    BYTES = "BYTES"
    DATE = "DATE"
    FLOAT32 = "FLOAT32"
    FLOAT64 = "FLOAT64"
    INT64 = "INT64"
    STRING = "STRING"
    TIMESTAMP = "TIMESTAMP"
    NUMERIC = "NUMERIC"
    JSON = "JSON"


class PgTypeName(StrEnum):
    """PostgreSQL-dialect type names that differ from their GoogleSQL counterparts."""

    BYTEA = "BYTEA"
    FLOAT4 = "FLOAT4"
    FLOAT8 = "FLOAT8"
    INT8 = "INT8"
    VARCHAR = "VARCHAR"
    TIMESTAMPTZ = "TIMESTAMPTZ"
    JSONB = "JSONB"


STANDARD_TO_PG_TYPE_MAP: Final = MappingProxyType(
    {
        TypeName.BYTES.value: PgTypeName.BYTEA.value,
        TypeName.FLOAT32.value: PgTypeName.FLOAT4.value,
        TypeName.FLOAT64.value: PgTypeName.FLOAT8.value,
        TypeName.INT64.value: PgTypeName.INT8.value,
        TypeName.STRING.value: PgTypeName.VARCHAR.value,
        TypeName.TIMESTAMP.value: PgTypeName.TIMESTAMPTZ.value,
        TypeName.JSON.value: PgTypeName.JSONB.value,
    }
)

PG_TO_STANDARD_TYPE_MAP: Final = MappingProxyType(
    {pg: standard for standard, pg in STANDARD_TO_PG_TYPE_MAP.items()}
)

_LENGTHED_TYPES: Final = frozenset({TypeName.STRING.value, TypeName.BYTES.value})


@dataclass(frozen=True)
class Type:
    """Column type: canonical name, optional length and array flag."""

    name: str
    length: int = 0
    is_array: bool = False

    @property
    def has_max_length(self) -> bool:
        return self.length == MAX_LENGTH


def pg_type_name(column_type: Type) -> str:
    """PostgreSQL-dialect name for `column_type`; unmapped names pass through."""
    return STANDARD_TO_PG_TYPE_MAP.get(column_type.name, column_type.name)


def standard_type_name(pg_name: str) -> str:
    """GoogleSQL name for a PostgreSQL-dialect type name; unmapped names pass through."""
    return PG_TO_STANDARD_TYPE_MAP.get(pg_name, pg_name)


def print_column_def_type(column_type: Type) -> str:
    """
    GoogleSQL type clause, e.g. ``STRING(MAX)``, ``BYTES(16)``, ``ARRAY<INT64>``.
    """
    text = column_type.name
    if column_type.name in _LENGTHED_TYPES:
        length = "MAX" if column_type.has_max_length else str(column_type.length)
        text = f"{text}({length})"
    if column_type.is_array:
        text = f"ARRAY<{text}>"
    return text


def pg_print_column_def_type(column_type: Type) -> str:
    """
    PostgreSQL-dialect type clause, e.g. ``VARCHAR(2621440)``, ``INT8``, ``BYTEA``.

    The PostgreSQL dialect has no array type here; an array column falls back to
    ``VARCHAR`` at maximum length. BYTEA never carries a length.
    """
    text = pg_type_name(column_type)
    length = column_type.length
    if column_type.is_array:
        text = PgTypeName.VARCHAR.value
        length = PG_MAX_LENGTH
    if column_type.name == TypeName.STRING or column_type.is_array:
        if length in (MAX_LENGTH, PG_MAX_LENGTH):
            length = PG_MAX_LENGTH
        text = f"{text}({length})"
    return text
