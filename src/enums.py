"""Enumerations used throughout the Spanner DDL generator."""

from enum import StrEnum


class Dialect(StrEnum):
    """SQL surface syntax of the target Spanner database."""

    GOOGLE_STANDARD_SQL = "google_standard_sql"
    POSTGRESQL = "postgresql"


class SourceDatabase(StrEnum):
    """Kind of source system the schema was converted from."""

    UNKNOWN = ""
    POSTGRES = "postgres"
    PGDUMP = "pg_dump"
    MYSQL = "mysql"
    MYSQLDUMP = "mysqldump"
    SQLSERVER = "sqlserver"
    ORACLE = "oracle"
    DYNAMODB = "dynamodb"
    CASSANDRA = "cassandra"
    CSV = "csv"


class InterleaveType(StrEnum):
    """Flavour of the INTERLEAVE clause."""

    IN = "IN"
    IN_PARENT = "IN PARENT"


class GenerationType(StrEnum):
    """How an auto-generated column gets its value."""

    PRE_DEFINED = "Pre-defined"
    SEQUENCE = "Sequence"


class SequenceKind(StrEnum):
    """Sequence kinds supported by Spanner."""

    BIT_REVERSED_POSITIVE = "BIT REVERSED POSITIVE"
