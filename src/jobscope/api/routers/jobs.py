"""
Jobs router: read-only scheduler introspection.

GET /jobs
GET /jobs/{job_group}/{job_name}/parameters
GET /jobs/{job_group}/{job_name}/triggers
GET /job-groups
GET /trigger-groups
"""

from __future__ import annotations

from fastapi import APIRouter, Path

from jobscope.api.deps import Service
from jobscope.api.schemas import JobParameterSchema, JobSchema, TriggerSchema

router = APIRouter()


@router.get("/jobs", response_model=list[JobSchema])
def list_jobs(service: Service):
    """List all configured jobs with their aggregate status.

    Example:
        GET /api/v1/jobs

        Response:
        [
            {
                "job_name": "reportJob",
                "job_group": "default",
                "job_class": "reports.tasks:build_report",
                "concurrent_execution_disallowed": true,
                "is_active": true,
                "last_fire_date": "2026-10-17T08:00:00Z",
                "next_fire_date": "2026-10-17T08:05:00Z"
            }
        ]
    """
    return [JobSchema.model_validate(job) for job in service.list_jobs()]


@router.get("/jobs/{job_group}/{job_name}/parameters", response_model=list[JobParameterSchema])
def list_job_parameters(
    service: Service,
    job_group: str = Path(..., description="Job group"),
    job_name: str = Path(..., description="Job name"),
):
    """List the data map entries of one job."""
    return [
        JobParameterSchema.model_validate(p)
        for p in service.list_job_parameters(job_name, job_group)
    ]


@router.get("/jobs/{job_group}/{job_name}/triggers", response_model=list[TriggerSchema])
def list_job_triggers(
    service: Service,
    job_group: str = Path(..., description="Job group"),
    job_name: str = Path(..., description="Job name"),
):
    """List the triggers of one job.

    An unknown job yields an empty list, the same as a job without triggers.
    """
    return [
        TriggerSchema.model_validate(t)
        for t in service.list_job_triggers(job_name, job_group)
    ]


@router.get("/job-groups", response_model=list[str])
def list_job_groups(service: Service):
    return service.list_job_groups()


@router.get("/trigger-groups", response_model=list[str])
def list_trigger_groups(service: Service):
    return service.list_trigger_groups()
