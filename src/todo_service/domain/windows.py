"""Relative time windows used to filter tasks by expiry.

Day windows exclude both bounds, week windows include both. Day windows start
at local midnight; week windows start on Sunday at the local time of day of
"now", so a Wednesday 15:30 lookup covers Sunday 15:30 up to the next
Sunday 15:30.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone, tzinfo
from enum import Enum

ONE_TICK = timedelta(microseconds=1)


class TaskFilter(str, Enum):
    """Selectors accepted by the task listing operation."""

    ALL = "all"
    ONLY_TODAY = "today"
    ONLY_NEXT_DAY = "next_day"
    ONLY_CURRENT_WEEK = "current_week"
    ONLY_NEXT_WEEK = "next_week"


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """A closed or open date-time range over ``expiry_at``."""

    start: datetime
    end: datetime
    inclusive: bool

    def contains(self, instant: datetime) -> bool:
        if self.inclusive:
            return self.start <= instant <= self.end
        return self.start < instant < self.end

    def astimezone(self, zone: tzinfo) -> "TimeWindow":
        return TimeWindow(self.start.astimezone(zone), self.end.astimezone(zone), self.inclusive)


def _local_midnight(moment: datetime, zone: tzinfo) -> datetime:
    local = moment.astimezone(zone)
    return datetime.combine(local.date(), time.min, tzinfo=zone)


def _shift_days(moment: datetime, days: int, zone: tzinfo) -> datetime:
    # Calendar arithmetic on the wall clock so DST changes keep the local time of day.
    shifted = moment.date() + timedelta(days=days)
    return datetime.combine(shifted, moment.time(), tzinfo=zone)


def _day_window(now: datetime, zone: tzinfo, offset_days: int) -> TimeWindow:
    start = _shift_days(_local_midnight(now, zone), offset_days, zone)
    end = _shift_days(start, 1, zone) - ONE_TICK
    return TimeWindow(start, end, inclusive=False)


def _week_window(now: datetime, zone: tzinfo, offset_weeks: int) -> TimeWindow:
    local = now.astimezone(zone)
    # datetime.weekday() counts from Monday; weeks here start on Sunday.
    days_since_sunday = (local.weekday() + 1) % 7
    start = _shift_days(local, -days_since_sunday + 7 * offset_weeks, zone)
    end = _shift_days(start, 7, zone) - ONE_TICK
    return TimeWindow(start, end, inclusive=True)


def resolve_window(
    filter_by: TaskFilter,
    now: datetime,
    zone: tzinfo = timezone.utc,
) -> TimeWindow | None:
    """Return the expiry window selected by ``filter_by`` relative to ``now``.

    ``None`` means no restriction. The returned bounds are expressed in
    ``zone``; callers comparing against UTC storage should convert them with
    :meth:`TimeWindow.astimezone`.
    """

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if filter_by is TaskFilter.ONLY_TODAY:
        return _day_window(now, zone, 0)
    if filter_by is TaskFilter.ONLY_NEXT_DAY:
        return _day_window(now, zone, 1)
    if filter_by is TaskFilter.ONLY_CURRENT_WEEK:
        return _week_window(now, zone, 0)
    if filter_by is TaskFilter.ONLY_NEXT_WEEK:
        return _week_window(now, zone, 1)
    return None


__all__ = ["ONE_TICK", "TaskFilter", "TimeWindow", "resolve_window"]
