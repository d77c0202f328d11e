"""Shared constant values used across the DDL generator."""

from typing import Final

# Sentinel for Type.length meaning "the maximum the column type allows".
MAX_LENGTH: Final[int] = 2**63 - 1
# Maximum allowed STRING length (GoogleSQL).
STRING_MAX_LENGTH: Final[int] = 2621440
# Maximum allowed BYTES length (GoogleSQL).
BYTES_MAX_LENGTH: Final[int] = 10485760
MAX_NON_KEY_COLUMN_LENGTH: Final[int] = 1677721600
# PostgreSQL dialect has no MAX keyword; VARCHAR lengths top out here.
PG_MAX_LENGTH: Final[int] = 2621440

UUID_GENERATOR_NAME: Final[str] = "UUID"
CASSANDRA_TYPE_OPTION: Final[str] = "cassandra_type"
