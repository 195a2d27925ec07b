"""Clock-string and date helpers shared by the builder and the optimizer."""

from __future__ import annotations

from datetime import date, datetime, time


def parse_clock(value: str) -> int:
    """Return minutes after midnight for an ``HH:MM`` string."""

    hours, minutes = value.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def to_time(value: str) -> time:
    minutes = parse_clock(value)
    return time(minutes // 60, minutes % 60)


def as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def at_clock(day: date | datetime | str, clock: str) -> datetime:
    """Anchor an ``HH:MM`` clock string on ``day``."""

    return datetime.combine(as_date(day), to_time(clock))


def minutes_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def weekday_sunday_first(moment: datetime | date) -> int:
    """Weekday index with Sunday = 0, matching OperatingHours.day_of_week."""

    return (moment.weekday() + 1) % 7
