"""Job status aggregation over all triggers of one job."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from jobscope.core.timestamps import earliest, latest
from jobscope.introspection.models import JobStatus
from jobscope.introspection.protocol import TriggerHandle, TriggerKey, TriggerState

TriggerStateLookup = Callable[[TriggerKey], TriggerState]


def aggregate_job_status(
    triggers: Sequence[TriggerHandle],
    state_of: TriggerStateLookup,
) -> JobStatus:
    """Reduce a job's triggers to one status.

    - ``last_fire_date``: most recent previous fire of any trigger
    - ``next_fire_date``: soonest upcoming fire of any trigger
    - ``is_active``: at least one trigger is in the NORMAL state

    A job without triggers has no schedule: inactive, no timestamps.

    ``state_of`` is called for every trigger. Whatever it raises propagates,
    so a job never gets a partial status.
    """
    if not triggers:
        return JobStatus()

    last_fire = None
    next_fire = None
    is_active = False

    for trigger in triggers:
        last_fire = latest(last_fire, trigger.previous_fire_time)
        next_fire = earliest(next_fire, trigger.next_fire_time)

        if state_of(trigger.key) == TriggerState.NORMAL:
            is_active = True

    return JobStatus(
        is_active=is_active,
        last_fire_date=last_fire,
        next_fire_date=next_fire,
    )
