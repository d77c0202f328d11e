from __future__ import annotations

from collections.abc import Iterable, Mapping


def escape_sql_literal(value: str) -> str:
    """
    Escape a Python string for use as a single-quoted SQL literal.
    Doubles single quotes per SQL rules. Empty/None → empty string.
    """
    return (value or "").replace("'", "''")


def format_options(options: Mapping[str, str]) -> str:
    """
    Format an OPTIONS list: `key = 'value', k2 = 'v2'`.
    Keys are option names (NOT quoted); values are SQL string literals.
    Keys are sorted for deterministic output.
    """
    return ", ".join(
        f"{key} = '{escape_sql_literal(value)}'"
        for key, value in sorted(options.items(), key=lambda item: item[0])
    )


def max_string_length(values: Iterable[str]) -> int:
    """Length of the longest string in `values` (0 when empty)."""
    return max((len(value) for value in values), default=0)
