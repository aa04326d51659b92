"""APScheduler-based scheduler engine.

Wraps an APScheduler 3.x scheduler so it can be inspected through the
:class:`~jobscope.introspection.protocol.SchedulerEngine` protocol.

Mapping:

- job group and trigger group are the job store alias
- a job is keyed by ``(job.id, alias)``; APScheduler stores exactly one
  trigger per job, so the trigger shares the job's key
- ``IntervalTrigger`` → interval schedule, ``CronTrigger`` → expression
  schedule, anything else (``DateTrigger``, combining triggers) → other
- a job whose ``next_run_time`` is ``None`` has been paused

APScheduler does not remember when a job last ran, so the engine listens
for job-executed and job-error events and keeps the latest scheduled run
time per job. Fires that happened before the engine was created are
unknown.

.. note::

    Job store aliases are only registered once the scheduler is started.
    Start it (``paused=True`` is enough) before handing it to the engine.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED, JobExecutionEvent
from apscheduler.job import Job
from apscheduler.jobstores.base import BaseJobStore
from apscheduler.jobstores.sqlalchemy import SQLAlchemyJobStore
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.base import BaseTrigger
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy import and_, inspect, select

from jobscope.core.errors import (
    ConfigError,
    JobNotFoundError,
    JobscopeError,
    ReadOnlyJobStoreError,
    SchedulerQueryError,
)
from jobscope.core.logging import get_logger
from jobscope.core.settings import JobscopeSettings
from jobscope.introspection.protocol import (
    REPEAT_INDEFINITELY,
    ExpressionSchedule,
    IntervalSchedule,
    JobDetail,
    JobKey,
    OtherSchedule,
    Schedule,
    TriggerHandle,
    TriggerKey,
    TriggerState,
)

logger = get_logger(__name__)

# Quartz field order; the year is appended only when restricted.
_CRON_FIELDS = ("second", "minute", "hour", "day", "month", "day_of_week")


@contextmanager
def _querying(query: str, **context: Any) -> Iterator[None]:
    """Wrap engine failures raised inside the block in SchedulerQueryError."""
    try:
        yield
    except JobscopeError:
        raise
    except Exception as exc:
        raise SchedulerQueryError(
            f"Scheduler query failed: {query}", cause=exc
        ).with_context(query=query, **context) from exc


def cron_expression(trigger: CronTrigger) -> str:
    """Render a cron trigger as ``second minute hour day month day_of_week [year]``."""
    fields = {f.name: str(f) for f in trigger.fields}
    parts = [fields[name] for name in _CRON_FIELDS]
    if fields["year"] != "*":
        parts.append(fields["year"])
    return " ".join(parts)


def repeat_count(trigger: IntervalTrigger) -> int:
    """Fires after the first one before ``end_date``, or REPEAT_INDEFINITELY."""
    if trigger.end_date is None:
        return REPEAT_INDEFINITELY
    return max((trigger.end_date - trigger.start_date) // trigger.interval, 0)


def classify_schedule(trigger: BaseTrigger) -> Schedule:
    match trigger:
        case IntervalTrigger():
            return IntervalSchedule(
                repeat_count=repeat_count(trigger),
                repeat_interval=trigger.interval,
            )
        case CronTrigger():
            return ExpressionSchedule(expression=cron_expression(trigger))
        case _:
            return OtherSchedule(description=str(trigger))


def _start_time(trigger: BaseTrigger) -> datetime | None:
    # DateTrigger only knows its single run date
    return getattr(trigger, "start_date", None) or getattr(trigger, "run_date", None)


class APSchedulerEngine:
    """Read-only view of an APScheduler 3.x scheduler.

    Example::

        >>> scheduler = BackgroundScheduler()
        >>> scheduler.start(paused=True)
        >>> engine = APSchedulerEngine(scheduler)
        >>> engine.get_job_group_names()
        ['default']
    """

    name: str = "apscheduler"

    def __init__(self, scheduler: BaseScheduler) -> None:
        self._scheduler = scheduler
        self._last_fired: dict[tuple[str, str], datetime] = {}
        scheduler.add_listener(self._record_fire, EVENT_JOB_EXECUTED | EVENT_JOB_ERROR)

    def _record_fire(self, event: JobExecutionEvent) -> None:
        self._last_fired[(event.job_id, event.jobstore)] = event.scheduled_run_time

    def _aliases(self) -> list[str]:
        # APScheduler exposes no public accessor for registered job stores
        with self._scheduler._jobstores_lock:
            return list(self._scheduler._jobstores)

    def _lookup(self, job_key: JobKey) -> Job:
        job = self._scheduler.get_job(job_key.name, jobstore=job_key.group)
        if job is None:
            raise JobNotFoundError(job_key.name, job_key.group)
        return job

    # ------------------------------------------------------------------
    # SchedulerEngine protocol
    # ------------------------------------------------------------------

    def get_job_keys(self) -> list[JobKey]:
        with _querying("get_job_keys"):
            return [
                JobKey(job.id, alias)
                for alias in self._aliases()
                for job in self._scheduler.get_jobs(jobstore=alias)
            ]

    def get_job_group_names(self) -> list[str]:
        with _querying("get_job_group_names"):
            return self._aliases()

    def get_trigger_group_names(self) -> list[str]:
        with _querying("get_trigger_group_names"):
            return self._aliases()

    def get_job_detail(self, job_key: JobKey) -> JobDetail:
        with _querying("get_job_detail", job_name=job_key.name, job_group=job_key.group):
            job = self._lookup(job_key)
            return JobDetail(
                key=job_key,
                job_class=job.func_ref or repr(job.func),
                concurrent_execution_disallowed=job.max_instances == 1,
                data=dict(job.kwargs),
            )

    def get_triggers_of_job(self, job_key: JobKey) -> list[TriggerHandle]:
        with _querying("get_triggers_of_job", job_name=job_key.name, job_group=job_key.group):
            job = self._lookup(job_key)
            return [
                TriggerHandle(
                    key=TriggerKey(job.id, job_key.group),
                    job_key=job_key,
                    schedule=classify_schedule(job.trigger),
                    start_time=_start_time(job.trigger),
                    previous_fire_time=self._last_fired.get((job.id, job_key.group)),
                    next_fire_time=job.next_run_time,
                )
            ]

    def get_trigger_state(self, trigger_key: TriggerKey) -> TriggerState:
        with _querying(
            "get_trigger_state",
            trigger_name=trigger_key.name,
            trigger_group=trigger_key.group,
        ):
            job = self._scheduler.get_job(trigger_key.name, jobstore=trigger_key.group)
            if job is None:
                return TriggerState.NONE
            if job.next_run_time is None:
                return TriggerState.PAUSED
            return TriggerState.NORMAL


class ReadOnlySQLAlchemyJobStore(SQLAlchemyJobStore):
    """SQLAlchemy job store that never writes.

    The stock store creates its table on start and deletes every row it
    cannot unpickle. This one requires an existing table and skips
    unrestorable rows with a warning. Every write raises
    :class:`~jobscope.core.errors.ReadOnlyJobStoreError`.
    """

    def start(self, scheduler: BaseScheduler, alias: str) -> None:
        BaseJobStore.start(self, scheduler, alias)
        with self.engine.connect() as connection:
            if not inspect(connection).has_table(self.jobs_t.name, schema=self.jobs_t.schema):
                raise ConfigError(
                    f"Job table {self.jobs_t.name!r} not found"
                ).with_context(table=self.jobs_t.name)

    def _get_jobs(self, *conditions: Any) -> list[Job]:
        selectable = select(self.jobs_t.c.id, self.jobs_t.c.job_state).order_by(
            self.jobs_t.c.next_run_time
        )
        if conditions:
            selectable = selectable.where(and_(*conditions))

        jobs = []
        with self.engine.connect() as connection:
            for row in connection.execute(selectable):
                try:
                    jobs.append(self._reconstitute_job(row.job_state))
                except Exception as exc:
                    logger.warning(
                        "job_restore_skipped",
                        job_id=row.id,
                        jobstore=self._alias,
                        error=str(exc),
                    )
        return jobs

    def _refuse(self, operation: str) -> None:
        raise ReadOnlyJobStoreError(
            f"Job store is read-only: {operation}"
        ).with_context(query=operation)

    def add_job(self, job: Job) -> None:
        self._refuse("add_job")

    def update_job(self, job: Job) -> None:
        self._refuse("update_job")

    def remove_job(self, job_id: str) -> None:
        self._refuse("remove_job")

    def remove_all_jobs(self) -> None:
        self._refuse("remove_all_jobs")


@contextmanager
def open_engine(settings: JobscopeSettings) -> Iterator[APSchedulerEngine]:
    """Attach to the job store configured in *settings* for inspection.

    The scheduler is started paused, so no job fires while it is open, and
    the job store is a :class:`ReadOnlySQLAlchemyJobStore`. Jobs whose
    function cannot be imported here are left out of the listings but stay
    in the store.
    """
    jobstore = ReadOnlySQLAlchemyJobStore(
        url=settings.jobstore_url,
        tablename=settings.jobstore_tablename,
    )
    scheduler = BackgroundScheduler(jobstores={settings.jobstore_alias: jobstore})

    with _querying("open_jobstore", url=settings.jobstore_url):
        scheduler.start(paused=True)
    logger.debug("jobstore_opened", alias=settings.jobstore_alias)

    try:
        yield APSchedulerEngine(scheduler)
    finally:
        scheduler.shutdown(wait=False)
