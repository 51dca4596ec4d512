"""Group chronologically ordered conditions into calendar-day buckets."""

from collections.abc import Iterable
from datetime import UTC, date, datetime

from yrweather.models.weather import ZERO_TIME, Condition, Day


def group_by_day(conditions: Iterable[Condition], max_days: int) -> list[Day]:
    """Bucket consecutive same-date conditions into at most ``max_days`` days.

    Input must already be sorted by time. Dates are full UTC calendar dates,
    so the 31st of one month never merges with the 31st of another. A slot
    whose time could not be parsed stays with the day it arrived in (or the
    next dated day, if it comes first). Iteration stops as soon as
    ``max_days`` days are complete; the trailing day is kept if the input
    runs out first.
    """
    if max_days <= 0:
        return []

    forecast: list[Day] = []
    slots: list[Condition] = []
    current: date | None = None
    for slot in conditions:
        if slot.time == ZERO_TIME:
            slots.append(slot)
            continue
        slot_date = utc_date(slot.time)
        if current is not None and slot_date != current:
            forecast.append(Day(date=current, slots=slots))
            if len(forecast) >= max_days:
                return forecast
            slots = []
        if current is None or slot_date != current:
            current = slot_date
        slots.append(slot)

    if slots:
        forecast.append(Day(date=current or ZERO_TIME.date(), slots=slots))
    return forecast


def utc_date(value: datetime) -> date:
    """Calendar date of ``value`` in UTC; naive times are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).date()
