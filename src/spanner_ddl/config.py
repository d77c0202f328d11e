"""Print configuration: which statements to emit and how to spell them."""

from __future__ import annotations

from dataclasses import dataclass

from src import settings
from src.enums import Dialect, SourceDatabase
from src.spanner_ddl.dialects import DialectRenderer, get_dialect_renderer
from src.spanner_ddl.identifiers import quote_identifier


@dataclass(frozen=True)
class Config:
    """
    Controls how schema entities are printed.

    comments:
        Emit table banners and trailing column comments.
    protect_ids:
        Quote table, column, index and constraint names.
    tables:
        Emit CREATE TABLE / CREATE INDEX statements.
    foreign_keys:
        Emit ALTER TABLE ... ADD FOREIGN KEY statements.
    dialect:
        Target Spanner dialect.
    source:
        Source database kind; only consulted for PostgreSQL case-sensitive quoting.
    """

    comments: bool = False
    protect_ids: bool = True
    tables: bool = True
    foreign_keys: bool = True
    dialect: str = Dialect.GOOGLE_STANDARD_SQL
    source: str = SourceDatabase.UNKNOWN

    def __post_init__(self) -> None:
        get_dialect_renderer(self.dialect)  # raises UnknownDialectError

    @classmethod
    def from_settings(cls) -> Config:
        """Build a config from the environment-backed settings."""
        return cls(
            comments=settings.DDL_COMMENTS,
            protect_ids=settings.DDL_PROTECT_IDS,
            tables=settings.DDL_TABLES,
            foreign_keys=settings.DDL_FOREIGN_KEYS,
            dialect=settings.SPANNER_DIALECT,
            source=settings.SOURCE_DATABASE,
        )

    @property
    def renderer(self) -> DialectRenderer:
        """Rendering strategy for the target dialect."""
        return get_dialect_renderer(self.dialect)

    @property
    def is_postgresql(self) -> bool:
        return self.dialect == Dialect.POSTGRESQL

    def quote(self, identifier: str) -> str:
        """Quote `identifier` according to this config's dialect and source."""
        return quote_identifier(
            identifier,
            protect_ids=self.protect_ids,
            dialect=self.dialect,
            source=self.source,
        )
