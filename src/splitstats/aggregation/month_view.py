"""Calendar views of workout history.

Groups records by local calendar day and lays a month out as a grid,
for the dashboard and connections calendars.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Sequence

from dateutil.relativedelta import relativedelta

from splitstats.models.types import CalendarDay, CalendarMonth, WorkoutRecord

# Colour classes for workout names, reused cyclically
COLOR_PALETTE = (
    "bg-blue-500",
    "bg-green-500",
    "bg-purple-500",
    "bg-red-500",
    "bg-yellow-500",
    "bg-pink-500",
    "bg-indigo-500",
    "bg-orange-500",
)


def group_by_day(records: Sequence[WorkoutRecord]) -> dict[date, list[WorkoutRecord]]:
    """Map each day to its records, keeping input order within a day."""
    by_day: dict[date, list[WorkoutRecord]] = {}
    for record in records:
        if record.date is None:
            continue
        by_day.setdefault(record.date, []).append(record)
    return by_day


def workouts_on(records: Sequence[WorkoutRecord], day: date) -> list[WorkoutRecord]:
    """Records dated on ``day``, in input order."""
    return [r for r in records if r.date == day]


def workout_colors(
    records: Sequence[WorkoutRecord],
    palette: Sequence[str] = COLOR_PALETTE,
) -> dict[str, str]:
    """Assign palette entries to workout names in sorted name order."""
    names = sorted({r.workout_name for r in records})
    return {name: palette[index % len(palette)] for index, name in enumerate(names)}


def shift_month(day: date, delta: int) -> date:
    """First day of the month ``delta`` months away from ``day``."""
    return day.replace(day=1) + relativedelta(months=delta)


def month_grid(
    records: Sequence[WorkoutRecord],
    year: int,
    month: int,
    week_start: int = calendar.SUNDAY,
    today: date | None = None,
) -> CalendarMonth:
    """Lay out a month for display.

    Args:
        records: Workout history; records outside the month are ignored.
        year: Calendar year.
        month: Month number, 1-12.
        week_start: First column of the grid, 0=Monday .. 6=Sunday.
        today: Day to flag as today, defaults to the current date.

    Returns:
        CalendarMonth with the number of blank cells before the 1st and
        one CalendarDay per day of the month.
    """
    if today is None:
        today = date.today()

    first = date(year, month, 1)
    _, days_in_month = calendar.monthrange(year, month)
    by_day = group_by_day(records)

    days = []
    for offset in range(days_in_month):
        day = first.replace(day=offset + 1)
        days.append(
            CalendarDay(
                day=day,
                workouts=by_day.get(day, []),
                is_today=day == today,
            )
        )

    return CalendarMonth(
        year=year,
        month=month,
        label=f"{first:%B %Y}",
        leading_blanks=(first.weekday() - week_start) % 7,
        days=days,
    )
