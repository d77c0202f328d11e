"""
Identifier quoting policy for Spanner DDL.

Rules
- Quoting disabled: names are emitted verbatim.
- GoogleSQL: every name is backticked.
- PostgreSQL: a name is double-quoted only when it is a reserved keyword
  (case-insensitive) or the source database treats identifiers case-sensitively.
- Embedded quote characters are doubled.
"""

from __future__ import annotations

from src.enums import Dialect, SourceDatabase
from src.spanner_ddl.keywords import PG_RESERVED_KEYWORDS

_CASE_SENSITIVE_SOURCES = frozenset({SourceDatabase.POSTGRES.value, SourceDatabase.PGDUMP.value})


def is_reserved_in_postgresql(identifier: str) -> bool:
    """True if `identifier` is a PostgreSQL-dialect reserved keyword, ignoring case."""
    return identifier.upper() in PG_RESERVED_KEYWORDS


def is_source_case_sensitive(source: str) -> bool:
    """True for source databases whose identifiers are case-sensitive."""
    return source in _CASE_SENSITIVE_SOURCES


def backtick_identifier(identifier: str) -> str:
    """Quote a single identifier with backticks, doubling embedded backticks."""
    return f"`{identifier.replace('`', '``')}`"


def double_quote_identifier(identifier: str) -> str:
    """Quote a single identifier with double quotes, doubling embedded double quotes."""
    return '"' + identifier.replace('"', '""') + '"'


def quote_identifier(identifier: str, *, protect_ids: bool, dialect: str, source: str = "") -> str:
    """Quote `identifier` for `dialect` according to the policy in the module docstring."""
    if not protect_ids:
        return identifier
    if dialect == Dialect.POSTGRESQL:
        if is_reserved_in_postgresql(identifier) or is_source_case_sensitive(source):
            return double_quote_identifier(identifier)
        return identifier
    return backtick_identifier(identifier)
