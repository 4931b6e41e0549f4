"""Statistics page assembly.

Combines the individual aggregates into one StatsReport. Windowed
figures use the selected time range; personal records, recent records,
exercise names and progress always use the full history.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Sequence

from splitstats.aggregation import stats
from splitstats.config import StatsSettings, TimeRange
from splitstats.models.types import StatsReport, WorkoutRecord

logger = logging.getLogger(__name__)

_USE_SETTINGS = object()


def build_stats_report(
    records: Sequence[WorkoutRecord],
    months: TimeRange | object = _USE_SETTINGS,
    exercise_name: str | None = None,
    settings: StatsSettings | None = None,
    now: date | datetime | None = None,
) -> StatsReport:
    """Compute every aggregate shown on the statistics page.

    Args:
        records: Full workout history.
        months: Window for the summary, volume, type and frequency
            figures. Defaults to settings.time_range.
        exercise_name: Exercise whose progress to include, if any.
        settings: Week start, default range and chart limits.
        now: Reference point for the time window.

    Returns:
        StatsReport with all aggregates filled in.
    """
    if settings is None:
        settings = StatsSettings()
    if months is _USE_SETTINGS:
        months = settings.time_range

    windowed = stats.filter_by_time_range(records, months, now=now)
    logger.debug(
        f"Building stats report: {len(windowed)}/{len(records)} records in range {months!r}"
    )

    progress = []
    snapshot = None
    if exercise_name:
        progress = stats.exercise_progress(records, exercise_name)
        snapshot = stats.exercise_snapshot(progress)

    prs = stats.personal_records(records)

    return StatsReport(
        summary=stats.summary_metrics(windowed),
        weekly_volume=stats.weekly_volume(windowed, week_start=settings.week_start),
        exercise_types=stats.exercise_type_distribution(windowed),
        top_workouts=stats.top_workouts_by_frequency(windowed, limit=settings.top_workouts),
        personal_records=prs,
        recent_records=stats.recent_personal_records(prs, now=now),
        exercise_names=stats.exercise_names(records),
        selected_exercise=exercise_name,
        progress=progress,
        snapshot=snapshot,
    )
