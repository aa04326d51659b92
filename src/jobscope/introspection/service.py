"""
Job introspection operations.

Read-only views over a running scheduler: the configured jobs with their
aggregate status, a job's parameters, a job's triggers, and the job and
trigger group names.

Every operation queries the engine afresh and never raises. When an engine
query fails the failure is logged as a warning and the operation returns an
empty list. ``list_jobs`` applies this to the whole listing: if anything
fails while processing one job, including a trigger state lookup, the
result is empty for all jobs.
"""

from __future__ import annotations

from jobscope.core.logging import get_logger
from jobscope.introspection.aggregator import aggregate_job_status
from jobscope.introspection.classifier import classify_trigger
from jobscope.introspection.models import JobDescriptor, JobParameter, TriggerDescriptor
from jobscope.introspection.protocol import JobKey, SchedulerEngine

logger = get_logger(__name__)


class JobIntrospectionService:
    """Provides information from the scheduler engine.

    Example:
        >>> service = JobIntrospectionService(APSchedulerEngine(scheduler))
        >>> [job.job_name for job in service.list_jobs() if job.is_active]
        ['reportJob']
    """

    def __init__(self, engine: SchedulerEngine) -> None:
        self._engine = engine

    def list_jobs(self) -> list[JobDescriptor]:
        """All configured jobs with their aggregate status, in engine order."""
        result: list[JobDescriptor] = []

        try:
            for job_key in self._engine.get_job_keys():
                detail = self._engine.get_job_detail(job_key)
                triggers = self._engine.get_triggers_of_job(job_key)
                status = aggregate_job_status(triggers, self._engine.get_trigger_state)

                result.append(
                    JobDescriptor(
                        job_name=job_key.name,
                        job_group=job_key.group,
                        job_class=detail.job_class,
                        concurrent_execution_disallowed=detail.concurrent_execution_disallowed,
                        is_active=status.is_active,
                        last_fire_date=status.last_fire_date,
                        next_fire_date=status.next_fire_date,
                    )
                )
        except Exception as exc:
            logger.warning(
                "job_listing_failed",
                query="list_jobs",
                error=str(exc),
                exc_info=True,
            )
            return []

        return result

    def list_job_parameters(self, job_name: str, job_group: str) -> list[JobParameter]:
        """Entries of the job's data map, values rendered as text (``None`` → ``""``)."""
        job_key = JobKey(job_name, job_group)

        try:
            detail = self._engine.get_job_detail(job_key)
            return [
                JobParameter(key=key, value="" if value is None else str(value))
                for key, value in detail.data.items()
            ]
        except Exception as exc:
            logger.warning(
                "job_parameters_failed",
                query="list_job_parameters",
                job=str(job_key),
                error=str(exc),
                exc_info=True,
            )
            return []

    def list_job_triggers(self, job_name: str, job_group: str) -> list[TriggerDescriptor]:
        """All triggers configured for the job, in engine order."""
        job_key = JobKey(job_name, job_group)

        try:
            return [classify_trigger(t) for t in self._engine.get_triggers_of_job(job_key)]
        except Exception as exc:
            logger.warning(
                "job_triggers_failed",
                query="list_job_triggers",
                job=str(job_key),
                error=str(exc),
                exc_info=True,
            )
            return []

    def list_job_groups(self) -> list[str]:
        """Names of all known job groups."""
        try:
            return list(self._engine.get_job_group_names())
        except Exception as exc:
            logger.warning(
                "job_groups_failed", query="list_job_groups", error=str(exc), exc_info=True
            )
            return []

    def list_trigger_groups(self) -> list[str]:
        """Names of all known trigger groups."""
        try:
            return list(self._engine.get_trigger_group_names())
        except Exception as exc:
            logger.warning(
                "trigger_groups_failed", query="list_trigger_groups", error=str(exc), exc_info=True
            )
            return []
