"""
Structured error types for jobscope.

Errors raised at the scheduler-engine boundary carry a category, a retry
flag, structured context (job/trigger keys, the query that failed) and the
chained underlying exception, so the introspection service can log them
with full detail before absorbing them.

Manifesto:
    - **Typed Error Hierarchy:** Engine failures are distinguishable from
      configuration mistakes.
    - **Explicit Retry Semantics:** Nothing in jobscope retries; every error
      says so via ``retryable=False``.
    - **Rich Context:** Errors carry the query and keys for logging.
    - **Error Chaining:** The underlying APScheduler / SQLAlchemy exception is
      preserved as ``cause``.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                     JobscopeError                         │
        │        (category, retryable, context, cause)             │
        ├──────────────────────────────────────────────────────────┤
        │   SchedulerQueryError          ConfigError               │
        │   (ORCHESTRATION)              (CONFIG)                  │
        │        │                                                  │
        │   JobNotFoundError    ReadOnlyJobStoreError (STORAGE)    │
        └──────────────────────────────────────────────────────────┘

Usage:
    from jobscope.core.errors import SchedulerQueryError

    try:
        jobs = scheduler.get_jobs(jobstore=alias)
    except Exception as e:
        raise SchedulerQueryError("Unable to list jobs", cause=e).with_context(
            query="get_job_keys", job_group=alias,
        )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and routing.

    Attributes:
        ORCHESTRATION: Scheduler engine queries and state lookups
        STORAGE: Job store access (database, file system)
        CONFIG: Missing or invalid settings
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    ORCHESTRATION = "ORCHESTRATION"  # Scheduler engine queries
    STORAGE = "STORAGE"              # Job store access
    CONFIG = "CONFIG"                # Missing config, invalid settings
    INTERNAL = "INTERNAL"            # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"              # Uncategorized errors


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Only the fields that were set end up in ``to_dict()``, which keeps log
    lines short.

    Attributes:
        query: Name of the engine query that was attempted
        job_name: Job name, when the query concerned one job
        job_group: Job group, when the query concerned one job
        trigger_name: Trigger name, for trigger state lookups
        trigger_group: Trigger group, for trigger state lookups
        metadata: Additional key-value pairs
    """

    query: str | None = None
    job_name: str | None = None
    job_group: str | None = None
    trigger_name: str | None = None
    trigger_group: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["query", "job_name", "job_group", "trigger_name", "trigger_group"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class JobscopeError(Exception):
    """
    Base exception for all jobscope errors.

    Subclasses set ``default_category`` and ``default_retryable`` so callers
    rarely need to pass them explicitly.

    Examples:
        >>> error = JobscopeError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(query="get_job_keys").context.query
        'get_job_keys'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> JobscopeError:
        """Add context fields and return self (fluent API)."""
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize error for logging."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
            "context": self.context.to_dict(),
        }
        if self.cause is not None:
            result["cause"] = repr(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, category={self.category.value})"


class SchedulerQueryError(JobscopeError):
    """A read-only query against the scheduler engine failed."""

    default_category = ErrorCategory.ORCHESTRATION


class JobNotFoundError(SchedulerQueryError):
    """The engine holds no job under the requested key."""

    def __init__(self, job_name: str, job_group: str, **kwargs: Any):
        super().__init__(f"Job not found: {job_group}.{job_name}", **kwargs)
        self.with_context(job_name=job_name, job_group=job_group)


class ReadOnlyJobStoreError(JobscopeError):
    """A write was attempted on a job store opened for inspection."""

    default_category = ErrorCategory.STORAGE


class ConfigError(JobscopeError):
    """Invalid or missing configuration."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "JobscopeError",
    "SchedulerQueryError",
    "JobNotFoundError",
    "ReadOnlyJobStoreError",
    "ConfigError",
]
