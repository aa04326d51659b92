"""Schedule classification: engine trigger handle → :class:`TriggerDescriptor`."""

from __future__ import annotations

from jobscope.introspection.models import ScheduleType, TriggerDescriptor
from jobscope.introspection.protocol import (
    ExpressionSchedule,
    IntervalSchedule,
    TriggerHandle,
)


def classify_trigger(trigger: TriggerHandle) -> TriggerDescriptor:
    """Describe one trigger, with kind-specific parameters normalized.

    Interval schedules report INTERVAL; expression schedules and every other
    kind report EXPRESSION. Only the fields of the matched kind are set.

    The engine counts repeats *after* the first fire, while descriptors
    report the total number of fires, so ``repeat_count`` is shifted by one.
    """
    descriptor = TriggerDescriptor(
        trigger_name=trigger.key.name,
        trigger_group=trigger.key.group,
        start_date=trigger.start_time,
        last_fire_date=trigger.previous_fire_time,
        next_fire_date=trigger.next_fire_time,
    )

    match trigger.schedule:
        case IntervalSchedule(repeat_count=repeat_count, repeat_interval=repeat_interval):
            descriptor.schedule_type = ScheduleType.INTERVAL
            descriptor.repeat_count = repeat_count + 1
            descriptor.repeat_interval = repeat_interval
        case ExpressionSchedule(expression=expression):
            descriptor.schedule_type = ScheduleType.EXPRESSION
            descriptor.cron_expression = expression
        case _:
            descriptor.schedule_type = ScheduleType.EXPRESSION

    return descriptor
