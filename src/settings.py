"""Configuration values sourced from environment variables."""

import os
from typing import Final

from src.enums import Dialect, SourceDatabase


def _flag(key: str, default: str) -> bool:
    return os.getenv(key=key, default=default).upper() == "TRUE"


_dialect = os.getenv(key="SPANNER_DIALECT", default="google_standard_sql")
_source_database = os.getenv(key="SOURCE_DATABASE", default="")


SPANNER_DIALECT: Final[str] = Dialect(_dialect)
SOURCE_DATABASE: Final[str] = SourceDatabase(_source_database)
DDL_COMMENTS: Final[bool] = _flag("DDL_COMMENTS", default="False")
DDL_PROTECT_IDS: Final[bool] = _flag("DDL_PROTECT_IDS", default="True")
DDL_TABLES: Final[bool] = _flag("DDL_TABLES", default="True")
DDL_FOREIGN_KEYS: Final[bool] = _flag("DDL_FOREIGN_KEYS", default="True")
LOG_LEVEL: Final[str] = os.getenv(key="LOG_LEVEL", default="INFO")
LOGGER_NAME: Final[str] = os.getenv(key="LOGGER_NAME", default="spanner-ddl")
LOG_COLOUR_ENABLED: Final[bool] = _flag("LOG_COLOUR_ENABLED", default="True")
