"""Settings for jobscope.

Configuration is environment-driven: every field can be overridden with a
``JOBSCOPE_``-prefixed environment variable or a ``.env`` file.

Examples:
    >>> import os
    >>> os.environ["JOBSCOPE_JOBSTORE_URL"] = "postgresql://localhost/scheduler"
    >>> JobscopeSettings().jobstore_url
    'postgresql://localhost/scheduler'
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class JobscopeSettings(BaseSettings):
    """Settings shared by the API and the CLI.

    Fields
    ──────
    jobstore_url       : SQLAlchemy URL of the APScheduler job store to inspect
    jobstore_alias     : Alias the job store is registered under (the job group)
    jobstore_tablename : Table APScheduler persists jobs into
    log_level          : Structlog log level
    json_logs          : Force JSON (True) or console (False) logs; None = auto
    host / port        : Bind address for ``jobscope serve``
    api_prefix         : URL prefix for all API endpoints
    """

    model_config = SettingsConfigDict(
        env_prefix="JOBSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Job store ────────────────────────────────────────────────
    jobstore_url: str = Field(
        default="sqlite:///jobs.sqlite",
        description="SQLAlchemy URL of the APScheduler job store",
    )
    jobstore_alias: str = "default"
    jobstore_tablename: str = "apscheduler_jobs"

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None

    # ── API ──────────────────────────────────────────────────────
    host: str = "127.0.0.1"
    port: int = 12100
    api_prefix: str = "/api/v1"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
