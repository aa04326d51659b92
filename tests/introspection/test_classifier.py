"""Tests for jobscope.introspection.classifier."""

from __future__ import annotations

from datetime import timedelta

import pytest

from jobscope.introspection.classifier import classify_trigger
from jobscope.introspection.models import ScheduleType
from jobscope.introspection.protocol import (
    REPEAT_INDEFINITELY,
    ExpressionSchedule,
    IntervalSchedule,
    OtherSchedule,
)
from tests._support.engine import make_trigger, ts


class TestIntervalTriggers:
    def test_reports_interval_kind(self):
        trigger = make_trigger(
            "every5",
            schedule=IntervalSchedule(repeat_count=4, repeat_interval=timedelta(minutes=5)),
        )
        d = classify_trigger(trigger)
        assert d.schedule_type == ScheduleType.INTERVAL
        assert d.repeat_interval == timedelta(minutes=5)

    @pytest.mark.parametrize("configured, reported", [(0, 1), (4, 5), (99, 100)])
    def test_repeat_count_reports_total_fires(self, configured, reported):
        trigger = make_trigger(
            "t",
            schedule=IntervalSchedule(repeat_count=configured, repeat_interval=timedelta(seconds=1)),
        )
        assert classify_trigger(trigger).repeat_count == reported

    def test_indefinite_repeat_is_shifted_too(self):
        trigger = make_trigger(
            "t",
            schedule=IntervalSchedule(
                repeat_count=REPEAT_INDEFINITELY, repeat_interval=timedelta(hours=1)
            ),
        )
        assert classify_trigger(trigger).repeat_count == 0

    def test_never_carries_expression(self):
        trigger = make_trigger(
            "t",
            schedule=IntervalSchedule(repeat_count=1, repeat_interval=timedelta(seconds=30)),
        )
        assert classify_trigger(trigger).cron_expression is None


class TestExpressionTriggers:
    def test_reports_expression(self):
        d = classify_trigger(make_trigger("nightly", schedule=ExpressionSchedule("0 0 2 * * ?")))
        assert d.schedule_type == ScheduleType.EXPRESSION
        assert d.cron_expression == "0 0 2 * * ?"

    def test_never_carries_repeat_fields(self):
        d = classify_trigger(make_trigger("nightly", schedule=ExpressionSchedule("0 0 2 * * ?")))
        assert d.repeat_count is None
        assert d.repeat_interval is None


class TestOtherTriggers:
    def test_falls_back_to_expression_kind(self):
        d = classify_trigger(make_trigger("once", schedule=OtherSchedule("date[2026-12-01]")))
        assert d.schedule_type == ScheduleType.EXPRESSION

    def test_carries_no_kind_specific_fields(self):
        d = classify_trigger(make_trigger("once", schedule=OtherSchedule()))
        assert d.cron_expression is None
        assert d.repeat_count is None
        assert d.repeat_interval is None


class TestCommonFields:
    def test_identity_and_timestamps_are_copied(self):
        trigger = make_trigger(
            "reportTrigger",
            group="reports",
            start=ts(0),
            previous=ts(10),
            next_=ts(15),
        )
        d = classify_trigger(trigger)
        assert (d.trigger_name, d.trigger_group) == ("reportTrigger", "reports")
        assert d.start_date == ts(0)
        assert d.last_fire_date == ts(10)
        assert d.next_fire_date == ts(15)

    def test_absent_timestamps_stay_absent(self):
        d = classify_trigger(make_trigger("fresh"))
        assert d.start_date is None
        assert d.last_fire_date is None
        assert d.next_fire_date is None
