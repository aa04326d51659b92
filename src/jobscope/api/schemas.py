"""
Response schemas for the jobscope API.

Each schema reads straight from the matching introspection dataclass
(``from_attributes``), so routers never copy fields by hand.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from jobscope.introspection.models import ScheduleType


class JobSchema(BaseModel):
    """Configured job with its aggregate status.

    UI Hints:
        Table columns: Group, Name, Class, Active (badge), Last Fire, Next Fire.
    """

    model_config = ConfigDict(from_attributes=True)

    job_name: str = Field(description="Job name, unique within its group")
    job_group: str = Field(description="Job group")
    job_class: str = Field(default="", description="Implementation reference")
    concurrent_execution_disallowed: bool = Field(
        default=False, description="Whether the job refuses overlapping runs"
    )
    is_active: bool = Field(default=False, description="At least one trigger can fire")
    last_fire_date: datetime | None = Field(default=None, description="Most recent fire of any trigger")
    next_fire_date: datetime | None = Field(default=None, description="Soonest upcoming fire of any trigger")


class JobParameterSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    value: str = ""


class TriggerSchema(BaseModel):
    """One trigger of a job.

    ``cron_expression`` is set only for EXPRESSION triggers,
    ``repeat_count`` / ``repeat_interval`` only for INTERVAL triggers.
    """

    model_config = ConfigDict(from_attributes=True)

    trigger_name: str
    trigger_group: str
    schedule_type: ScheduleType
    start_date: datetime | None = None
    last_fire_date: datetime | None = None
    next_fire_date: datetime | None = None
    cron_expression: str | None = None
    repeat_count: int | None = Field(default=None, description="Total number of fires; 0 means unbounded")
    repeat_interval: timedelta | None = Field(default=None, description="Time between fires")
