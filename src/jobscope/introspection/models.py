"""
Introspection records.

Plain dataclasses returned by :class:`~jobscope.introspection.service.JobIntrospectionService`.
They are built fresh on every call from live engine state and are never
persisted. The API and the CLI render them as they are.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class ScheduleType(str, Enum):
    """Schedule kind reported for a trigger."""

    INTERVAL = "INTERVAL"
    EXPRESSION = "EXPRESSION"


@dataclass(slots=True)
class JobDescriptor:
    """One configured job with its aggregate status."""

    job_name: str = ""
    job_group: str = ""
    job_class: str = ""
    concurrent_execution_disallowed: bool = False
    is_active: bool = False
    last_fire_date: datetime | None = None
    next_fire_date: datetime | None = None


@dataclass(slots=True)
class JobParameter:
    """One entry of a job's data map, value rendered as text."""

    key: str = ""
    value: str = ""


@dataclass(slots=True)
class TriggerDescriptor:
    """One trigger of a job.

    ``cron_expression`` is only set for EXPRESSION triggers; ``repeat_count``
    and ``repeat_interval`` only for INTERVAL triggers. ``repeat_count`` is
    the total number of fires.
    """

    trigger_name: str = ""
    trigger_group: str = ""
    schedule_type: ScheduleType = ScheduleType.EXPRESSION
    start_date: datetime | None = None
    last_fire_date: datetime | None = None
    next_fire_date: datetime | None = None
    cron_expression: str | None = None
    repeat_count: int | None = None
    repeat_interval: timedelta | None = None


@dataclass(frozen=True, slots=True)
class JobStatus:
    """Aggregate status of a job across all of its triggers."""

    is_active: bool = False
    last_fire_date: datetime | None = None
    next_fire_date: datetime | None = None
