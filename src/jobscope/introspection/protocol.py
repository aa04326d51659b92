"""Scheduler engine protocol.

┌──────────────────────────────────────────────────────────────────────────────┐
│  SCHEDULER ENGINE PROTOCOL                                                    │
│                                                                               │
│  The introspection layer never talks to a concrete scheduler. It reads       │
│  through the six read-only queries below; adapters (APScheduler, test        │
│  fakes) translate their own job and trigger objects into the plain value     │
│  types defined here.                                                          │
│                                                                               │
│  ┌─────────────────────┐   get_job_keys()        ┌────────────────────────┐  │
│  │  APSchedulerEngine  │ ◄────────────────────── │  JobIntrospection      │  │
│  │  (adapter)          │   get_job_detail()      │  Service               │  │
│  │                     │   get_triggers_of_job() │                        │  │
│  │                     │   get_trigger_state()   │  classify / aggregate  │  │
│  └─────────────────────┘   get_*_group_names()   └────────────────────────┘  │
│                                                                               │
│  Trigger kind is decided once, when the adapter builds a TriggerHandle:      │
│  the ``schedule`` field is one of IntervalSchedule, ExpressionSchedule or    │
│  OtherSchedule. Nothing downstream inspects engine trigger classes.          │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Protocol, runtime_checkable

# Engine-side repeat count for a trigger without an end.
REPEAT_INDEFINITELY = -1


class TriggerState(str, Enum):
    """Live state of a trigger inside the engine."""

    NORMAL = "NORMAL"  # eligible to fire
    PAUSED = "PAUSED"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"
    BLOCKED = "BLOCKED"
    NONE = "NONE"  # unknown to the engine


@dataclass(frozen=True, slots=True)
class JobKey:
    """Identity of a job: (name, group)."""

    name: str
    group: str

    def __str__(self) -> str:
        return f"{self.group}.{self.name}"


@dataclass(frozen=True, slots=True)
class TriggerKey:
    """Identity of a trigger: (name, group)."""

    name: str
    group: str

    def __str__(self) -> str:
        return f"{self.group}.{self.name}"


# ── Schedule variants ────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class IntervalSchedule:
    """Fixed-interval schedule.

    ``repeat_count`` counts fires *after* the first one, or is
    :data:`REPEAT_INDEFINITELY`.
    """

    repeat_count: int
    repeat_interval: timedelta


@dataclass(frozen=True, slots=True)
class ExpressionSchedule:
    """Calendar-expression (cron-like) schedule."""

    expression: str


@dataclass(frozen=True, slots=True)
class OtherSchedule:
    """Any schedule kind that is neither interval nor expression based."""

    description: str = ""


Schedule = IntervalSchedule | ExpressionSchedule | OtherSchedule


# ── Engine records ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class JobDetail:
    """Static definition of a job as stored by the engine."""

    key: JobKey
    job_class: str
    concurrent_execution_disallowed: bool = False
    data: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TriggerHandle:
    """One trigger as seen through the engine, with its schedule already classified."""

    key: TriggerKey
    job_key: JobKey
    schedule: Schedule
    start_time: datetime | None = None
    previous_fire_time: datetime | None = None
    next_fire_time: datetime | None = None


@runtime_checkable
class SchedulerEngine(Protocol):
    """Read-only query interface over a running scheduler.

    Implementations raise on query failure (storage or communication
    errors); they never return partial results.

    Implementations:
        - APSchedulerEngine: APScheduler 3.x schedulers
    """

    def get_job_keys(self) -> list[JobKey]:
        """Every job key across all job groups, in engine order."""
        ...

    def get_job_group_names(self) -> list[str]:
        ...

    def get_trigger_group_names(self) -> list[str]:
        ...

    def get_job_detail(self, job_key: JobKey) -> JobDetail:
        ...

    def get_triggers_of_job(self, job_key: JobKey) -> list[TriggerHandle]:
        """Triggers attached to the job, in engine order."""
        ...

    def get_trigger_state(self, trigger_key: TriggerKey) -> TriggerState:
        ...
