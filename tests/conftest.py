"""
Shared pytest fixtures for jobscope tests.

The in-memory engine lives in ``tests._support.engine`` so test modules can
build their own jobs and triggers with the same helpers.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from jobscope.introspection.protocol import (
    ExpressionSchedule,
    IntervalSchedule,
    JobKey,
    TriggerState,
)
from tests._support.engine import FakeEngine, make_trigger, ts


@pytest.fixture()
def engine() -> FakeEngine:
    """Empty in-memory engine."""
    return FakeEngine()


@pytest.fixture()
def populated_engine() -> FakeEngine:
    """Engine with an interval job, a two-trigger cron job and an unscheduled job."""
    engine = FakeEngine()
    report = JobKey("reportJob", "DEFAULT")
    engine.add_job(
        "reportJob",
        disallow_concurrent=True,
        data={"recipient": "ops@example.com", "retries": 3, "template": None},
        triggers=[
            (
                make_trigger(
                    "reportTrigger",
                    job=report,
                    schedule=IntervalSchedule(repeat_count=4, repeat_interval=timedelta(minutes=5)),
                    start=ts(0),
                    previous=ts(10),
                    next_=ts(15),
                ),
                TriggerState.NORMAL,
            )
        ],
    )
    cleanup = JobKey("cleanupJob", "maintenance")
    engine.add_job(
        "cleanupJob",
        "maintenance",
        job_class="maintenance.tasks:cleanup",
        triggers=[
            (
                make_trigger(
                    "nightly",
                    job=cleanup,
                    group="maintenance",
                    schedule=ExpressionSchedule("0 0 2 * * *"),
                    previous=ts(-60),
                    next_=ts(120),
                ),
                TriggerState.PAUSED,
            ),
            (
                make_trigger(
                    "hourly",
                    job=cleanup,
                    group="maintenance",
                    schedule=ExpressionSchedule("0 0 * * * *"),
                    previous=ts(-5),
                    next_=ts(55),
                ),
                TriggerState.NORMAL,
            ),
        ],
    )
    engine.add_job("archiveJob", "maintenance", job_class="maintenance.tasks:archive")
    return engine
