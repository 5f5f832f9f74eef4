"""
Configuration settings for mdbaccess.

Uses Pydantic Settings to load environment variables for the mdbtools install
location, export defaults, subprocess limits, and logging.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # mdbtools
    mdbtools_path: Optional[str] = Field(None, alias="MDBTOOLS_PATH")
    date_format: str = Field("%F %T", alias="MDB_DATE_FORMAT")
    sql_format: str = Field("mysql", alias="MDB_SQL_FORMAT")

    # Subprocess
    command_timeout_seconds: float = Field(60.0, alias="MDB_COMMAND_TIMEOUT")
    retry_attempts: int = Field(1, alias="MDB_RETRY_ATTEMPTS", ge=1)

    # Decoding
    strict_rows: bool = Field(True, alias="MDB_STRICT_ROWS")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
