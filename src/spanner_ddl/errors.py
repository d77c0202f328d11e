"""Exceptions raised by the DDL generator."""


class SpannerDdlError(Exception):
    """Base class for DDL generation failures."""


class UnknownDialectError(SpannerDdlError, ValueError):
    """Dialect is not one of the supported Spanner dialects."""


class SchemaOrderingError(SpannerDdlError):
    """Tables cannot be linearised for printing."""


class InterleaveCycleError(SchemaOrderingError):
    """Interleave parents form a cycle, so no table in it can be printed first."""


class DuplicateTableNameError(SchemaOrderingError):
    """Two tables share a display name, so ordering by name is ambiguous."""
