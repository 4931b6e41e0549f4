"""Workout history statistics.

Pure functions over a collection of WorkoutRecords. Nothing here performs
I/O or mutates its input; every function returns the empty/zero shape of
its result for empty input.
"""

from __future__ import annotations

import calendar
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from dateutil.relativedelta import relativedelta

from splitstats.aggregation.strength import (
    epley_one_rep_max,
    has_full_set,
    round_half_up,
    tonnage,
)
from splitstats.config import DEFAULT_TOP_WORKOUTS, TimeRange
from splitstats.models.types import (
    ExerciseSnapshot,
    ExerciseTypeDistribution,
    PersonalRecord,
    ProgressPoint,
    ProgressSummary,
    StrengthResult,
    SummaryMetrics,
    WeeklyVolume,
    WorkoutFrequency,
    WorkoutRecord,
)

# "Recent achievements": personal records among the top few set within this many days
RECENT_RECORD_DAYS = 30
RECENT_RECORD_LIMIT = 3


def _is_all_time(months: TimeRange) -> bool:
    return months is None or months == "all" or months <= 0


def _dated(records: Iterable[WorkoutRecord]) -> list[WorkoutRecord]:
    return [r for r in records if r.date is not None]


def _strength_results(record: WorkoutRecord) -> list[StrengthResult]:
    return [e for e in record.exercises if isinstance(e, StrengthResult)]


def start_of_week(day: date, week_start: int = calendar.SUNDAY) -> date:
    """First day of the week containing ``day`` (week_start: 0=Monday .. 6=Sunday)."""
    return day - timedelta(days=(day.weekday() - week_start) % 7)


def week_label(day: date) -> str:
    """Short label such as "Jan 7"."""
    return f"{day:%b} {day.day}"


# ============================================================================
# Filtering
# ============================================================================


def filter_by_time_range(
    records: Sequence[WorkoutRecord],
    months: TimeRange,
    now: date | datetime | None = None,
) -> list[WorkoutRecord]:
    """Keep records dated strictly after ``now`` minus ``months`` months.

    Args:
        records: Workout history.
        months: Window length in months; "all", None or 0 for all time.
        now: Reference point, defaults to today.

    Returns:
        Matching records in input order. All-time returns every record,
        undated ones included.
    """
    if _is_all_time(months):
        return list(records)

    if now is None:
        now = date.today()
    elif isinstance(now, datetime):
        now = now.date()
    cutoff = now - relativedelta(months=months)

    return [r for r in records if r.date is not None and r.date > cutoff]


# ============================================================================
# Summary
# ============================================================================


def summary_metrics(records: Sequence[WorkoutRecord]) -> SummaryMetrics:
    """Compute headline metrics.

    weekly_average divides by the span between the earliest and latest
    dates in weeks, floored at one week. With fewer than two distinct
    dates there is no span, and weekly_average equals total_workouts.
    """
    total_workouts = len(records)
    if total_workouts == 0:
        return SummaryMetrics()

    total_exercises = 0
    strength_count = 0
    cardio_count = 0
    total_volume = 0.0

    for record in records:
        total_exercises += len(record.exercises)
        for exercise in record.exercises:
            if isinstance(exercise, StrengthResult):
                strength_count += 1
                total_volume += tonnage(exercise)
            else:
                cardio_count += 1

    dates = {r.date for r in records if r.date is not None}
    if len(dates) < 2:
        weekly_average = float(total_workouts)
    else:
        weeks = max(1.0, (max(dates) - min(dates)).days / 7)
        weekly_average = round_half_up(total_workouts / weeks, 1)

    return SummaryMetrics(
        total_workouts=total_workouts,
        total_exercises=total_exercises,
        avg_exercises_per_workout=round_half_up(total_exercises / total_workouts, 1),
        weekly_average=weekly_average,
        strength_exercise_count=strength_count,
        cardio_exercise_count=cardio_count,
        total_volume=total_volume,
    )


def weekly_volume(
    records: Sequence[WorkoutRecord],
    week_start: int = calendar.SUNDAY,
) -> list[WeeklyVolume]:
    """Bucket strength tonnage and workout counts by calendar week.

    Buckets run from the week holding the earliest dated record to the
    week holding the latest, inclusive; empty weeks are kept with zeros.
    """
    dated = _dated(records)
    if not dated:
        return []

    first_week = start_of_week(min(r.date for r in dated), week_start)
    last_week = start_of_week(max(r.date for r in dated), week_start)
    week_count = (last_week - first_week).days // 7 + 1

    volumes = [0.0] * week_count
    workout_counts = [0] * week_count
    for record in dated:
        index = (record.date - first_week).days // 7
        workout_counts[index] += 1
        volumes[index] += sum(tonnage(e) for e in _strength_results(record))

    buckets = []
    for index in range(week_count):
        start = first_week + timedelta(weeks=index)
        buckets.append(
            WeeklyVolume(
                week_start=start,
                week_label=week_label(start),
                volume=volumes[index],
                workout_count=workout_counts[index],
            )
        )
    return buckets


def exercise_type_distribution(records: Sequence[WorkoutRecord]) -> ExerciseTypeDistribution:
    """Count exercise entries (not workouts) per type."""
    counts = Counter(e.type for r in records for e in r.exercises)
    return ExerciseTypeDistribution(strength=counts["strength"], cardio=counts["cardio"])


def top_workouts_by_frequency(
    records: Sequence[WorkoutRecord],
    limit: int = DEFAULT_TOP_WORKOUTS,
) -> list[WorkoutFrequency]:
    """Most frequently recorded workout names, ties in first-seen order."""
    if limit <= 0:
        return []
    # Counter keeps first-insertion order and sorted() is stable
    counts = Counter(r.workout_name for r in records)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [WorkoutFrequency(workout_name=name, count=count) for name, count in ranked[:limit]]


# ============================================================================
# Personal records & progress
# ============================================================================


def personal_records(records: Sequence[WorkoutRecord]) -> list[PersonalRecord]:
    """Best estimated one-rep max per strength exercise across all records.

    Results without both weight and reps are ignored. The earliest result
    wins a tie for the same exercise. Sorted by estimate, highest first.
    Callers pass the full history; personal records are never windowed.
    """
    best: dict[str, PersonalRecord] = {}

    for record in records:
        for exercise in _strength_results(record):
            if not has_full_set(exercise):
                continue
            estimate = epley_one_rep_max(exercise.best_weight, exercise.best_reps)
            current = best.get(exercise.name)
            if current is None or estimate > current.estimated_one_rep_max:
                best[exercise.name] = PersonalRecord(
                    name=exercise.name,
                    weight=exercise.best_weight,
                    reps=exercise.best_reps,
                    date=record.date,
                    estimated_one_rep_max=estimate,
                )

    return sorted(best.values(), key=lambda pr: pr.estimated_one_rep_max, reverse=True)


def recent_personal_records(
    prs: Sequence[PersonalRecord],
    now: date | datetime | None = None,
    days: int = RECENT_RECORD_DAYS,
    limit: int = RECENT_RECORD_LIMIT,
) -> list[PersonalRecord]:
    """Top personal records that were set recently.

    Takes the first ``limit`` entries of ``prs`` (already ranked), then
    keeps those dated on or after ``now`` minus ``days`` days. Undated
    records never count as recent.
    """
    if now is None:
        now = date.today()
    elif isinstance(now, datetime):
        now = now.date()
    since = now - timedelta(days=days)

    return [pr for pr in prs[:max(limit, 0)] if pr.date is not None and pr.date >= since]


def exercise_progress(
    records: Sequence[WorkoutRecord],
    exercise_name: str,
) -> list[ProgressPoint]:
    """Chronological series for one strength exercise.

    Uses the first strength result named ``exercise_name`` that has a
    weight in each dated record. Missing reps count as 0 in both the
    point and its estimate.
    """
    points = []
    for record in sorted(_dated(records), key=lambda r: r.date):
        match = next(
            (
                e
                for e in _strength_results(record)
                if e.name == exercise_name and e.best_weight is not None
            ),
            None,
        )
        if match is None:
            continue
        reps = match.best_reps or 0
        points.append(
            ProgressPoint(
                date=record.date,
                weight=match.best_weight,
                reps=reps,
                estimated_1rm=epley_one_rep_max(match.best_weight, reps),
            )
        )
    return points


def progress_summary(series: Sequence[ProgressPoint]) -> ProgressSummary | None:
    """Change from the first to the last point; None with fewer than two."""
    if len(series) < 2:
        return None

    first, last = series[0], series[-1]
    one_rep_max_delta = last.estimated_1rm - first.estimated_1rm
    if first.estimated_1rm == 0:
        progress_percent = 0
    else:
        progress_percent = int(round_half_up(one_rep_max_delta / first.estimated_1rm * 100))

    return ProgressSummary(
        weight_delta=last.weight - first.weight,
        one_rep_max_delta=one_rep_max_delta,
        progress_percent=progress_percent,
    )


def exercise_snapshot(series: Sequence[ProgressPoint]) -> ExerciseSnapshot | None:
    """Latest weight, reps and estimate for a series, plus its progress."""
    if not series:
        return None
    last = series[-1]
    return ExerciseSnapshot(
        current_weight=last.weight,
        current_reps=last.reps,
        current_1rm=last.estimated_1rm,
        progress=progress_summary(series),
    )


def exercise_names(records: Sequence[WorkoutRecord]) -> list[str]:
    """Sorted distinct exercise names of any type."""
    return sorted({e.name for r in records for e in r.exercises})
