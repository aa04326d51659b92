"""Platform primitives shared by the jobscope layers: errors, logging, settings, timestamps."""

from jobscope.core.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    JobNotFoundError,
    JobscopeError,
    ReadOnlyJobStoreError,
    SchedulerQueryError,
)
from jobscope.core.logging import configure_logging, get_logger
from jobscope.core.timestamps import earliest, latest

__all__ = [
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "JobNotFoundError",
    "JobscopeError",
    "ReadOnlyJobStoreError",
    "SchedulerQueryError",
    "configure_logging",
    "get_logger",
    "earliest",
    "latest",
]
