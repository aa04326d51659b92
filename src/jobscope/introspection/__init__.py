"""Scheduler introspection for jobscope.

Read-only views over a running job scheduler:

    ┌──────────────────┐   queries   ┌───────────────────────────┐
    │ SchedulerEngine  │ ◄────────── │ JobIntrospectionService   │
    │ (APScheduler, …) │             │   list_jobs()             │
    └──────────────────┘             │   list_job_parameters()   │
                                     │   list_job_triggers()     │
                                     │   list_job_groups()       │
                                     │   list_trigger_groups()   │
                                     └─────────────┬─────────────┘
                                                   │
                              classify_trigger()   │   aggregate_job_status()
                                                   ▼
                          TriggerDescriptor / JobDescriptor / JobParameter

Quick Start:
    >>> from jobscope.introspection import APSchedulerEngine, JobIntrospectionService
    >>> service = JobIntrospectionService(APSchedulerEngine(scheduler))
    >>> service.list_job_groups()
    ['default']
"""

from __future__ import annotations

from .aggregator import aggregate_job_status
from .classifier import classify_trigger
from .models import JobDescriptor, JobParameter, JobStatus, ScheduleType, TriggerDescriptor
from .protocol import (
    REPEAT_INDEFINITELY,
    ExpressionSchedule,
    IntervalSchedule,
    JobDetail,
    JobKey,
    OtherSchedule,
    Schedule,
    SchedulerEngine,
    TriggerHandle,
    TriggerKey,
    TriggerState,
)
from .service import JobIntrospectionService


def __getattr__(name: str):  # noqa: N807
    """Lazy import the APScheduler engine so the core types load without it."""
    if name in ("APSchedulerEngine", "open_engine"):
        from . import apscheduler_engine

        return getattr(apscheduler_engine, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Engine boundary
    "SchedulerEngine",
    "JobKey",
    "TriggerKey",
    "TriggerState",
    "JobDetail",
    "TriggerHandle",
    "Schedule",
    "IntervalSchedule",
    "ExpressionSchedule",
    "OtherSchedule",
    "REPEAT_INDEFINITELY",
    "APSchedulerEngine",
    "open_engine",
    # Records
    "JobDescriptor",
    "JobParameter",
    "TriggerDescriptor",
    "JobStatus",
    "ScheduleType",
    # Operations
    "classify_trigger",
    "aggregate_job_status",
    "JobIntrospectionService",
]
