"""Pydantic models for splitstats.

Input models mirror the JSON returned by the workout-history service
(camelCase keys). Output models are the view-model structures the
aggregation layer produces.
"""

from __future__ import annotations

import logging
import math
from datetime import date as Date
from datetime import datetime
from typing import Annotated, Literal, Union

from dateutil.parser import isoparse
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

logger = logging.getLogger(__name__)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ============================================================================
# Workout history (input)
# ============================================================================


def _lenient_number(value: object, field: str, integer: bool = False) -> float | int | None:
    """Coerce an optional metric, dropping values that are not usable numbers.

    Fractional counts (e.g. 5.5 reps) and non-numeric text become None so
    the rest of the exercise and its workout are kept.
    """
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        number = math.nan
    if isinstance(value, bool) or not math.isfinite(number) or (integer and not number.is_integer()):
        logger.warning(f"Ignoring invalid {field} {value!r}")
        return None
    return int(number) if integer else number


class StrengthResult(_Frozen):
    """Best set of a strength exercise within a workout."""

    name: str
    type: Literal["strength"] = "strength"
    best_weight: float | None = Field(default=None, alias="bestWeight")
    best_reps: int | None = Field(default=None, alias="bestReps")

    @field_validator("best_weight", mode="before")
    @classmethod
    def _check_weight(cls, value: object) -> float | None:
        return _lenient_number(value, "bestWeight")

    @field_validator("best_reps", mode="before")
    @classmethod
    def _check_reps(cls, value: object) -> int | None:
        return _lenient_number(value, "bestReps", integer=True)


class CardioResult(_Frozen):
    """Outcome of a cardio exercise within a workout."""

    name: str
    type: Literal["cardio"] = "cardio"
    duration: float | None = None  # minutes
    distance: float | None = None

    @field_validator("duration", "distance", mode="before")
    @classmethod
    def _check_metric(cls, value: object, info: ValidationInfo) -> float | None:
        return _lenient_number(value, info.field_name)


ExerciseResult = Annotated[
    Union[StrengthResult, CardioResult],
    Field(discriminator="type"),
]


def to_local_date(value: object) -> Date | None:
    """Normalize a date, datetime or ISO-8601 string to a local calendar date.

    Aware datetimes are converted to local time before the date is taken.
    Returns None for anything that cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = isoparse(value.strip())
        except (ValueError, OverflowError):
            return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, Date):
        return value
    return None


class WorkoutRecord(_Frozen):
    """One completed workout.

    ``date`` is None when the service sent a missing or unparseable date.
    Such records still count towards totals but are left out of anything
    bucketed by date.
    """

    id: str
    workout_name: str = Field(alias="workoutName")
    date: Date | None = None
    exercises: tuple[ExerciseResult, ...] = ()

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: object) -> Date | None:
        parsed = to_local_date(value)
        if parsed is None and value is not None:
            logger.warning(f"Unparseable workout date {value!r}, treating as undated")
        return parsed


# ============================================================================
# Aggregates (output)
# ============================================================================


class SummaryMetrics(_Frozen):
    """Headline numbers for a set of workouts."""

    total_workouts: int = 0
    total_exercises: int = 0
    avg_exercises_per_workout: float = 0.0
    weekly_average: float = 0.0
    strength_exercise_count: int = 0
    cardio_exercise_count: int = 0
    total_volume: float = 0.0


class WeeklyVolume(_Frozen):
    """Strength tonnage and workout count for one calendar week."""

    week_start: Date
    week_label: str
    volume: float
    workout_count: int


class ExerciseTypeDistribution(_Frozen):
    strength: int = 0
    cardio: int = 0


class WorkoutFrequency(_Frozen):
    workout_name: str
    count: int


class PersonalRecord(_Frozen):
    """Best-ever estimated one-rep max for an exercise."""

    name: str
    weight: float
    reps: int
    date: Date | None
    estimated_one_rep_max: float


class ProgressPoint(_Frozen):
    date: Date
    weight: float
    reps: int
    estimated_1rm: float


class ProgressSummary(_Frozen):
    """Change between the first and last point of a progress series."""

    weight_delta: float
    one_rep_max_delta: float
    progress_percent: int


class ExerciseSnapshot(_Frozen):
    """Latest figures for a selected exercise."""

    current_weight: float
    current_reps: int
    current_1rm: float
    progress: ProgressSummary | None


class StatsReport(_Frozen):
    """Everything a statistics page displays, computed in one pass."""

    summary: SummaryMetrics
    weekly_volume: list[WeeklyVolume]
    exercise_types: ExerciseTypeDistribution
    top_workouts: list[WorkoutFrequency]
    personal_records: list[PersonalRecord]
    recent_records: list[PersonalRecord] = Field(default_factory=list)
    exercise_names: list[str]
    selected_exercise: str | None = None
    progress: list[ProgressPoint] = Field(default_factory=list)
    snapshot: ExerciseSnapshot | None = None


class CalendarDay(_Frozen):
    day: Date
    workouts: list[WorkoutRecord]
    is_today: bool = False


class CalendarMonth(_Frozen):
    """Month view: blank cells before the 1st, then one cell per day."""

    year: int
    month: int
    label: str
    leading_blanks: int
    days: list[CalendarDay]
