"""Runtime settings read from SPLITSTATS_* environment variables."""

from __future__ import annotations

import calendar
import logging
import os
from dataclasses import dataclass
from typing import Literal, Mapping, Union

TimeRange = Union[int, Literal["all"], None]

DEFAULT_WEEK_START = calendar.SUNDAY
DEFAULT_TIME_RANGE: TimeRange = 6
DEFAULT_TOP_WORKOUTS = 5
DEFAULT_LOG_LEVEL = "INFO"

# Month ranges offered by the stats page; 0 / "all" means all time
TIME_RANGE_CHOICES = ("1", "3", "6", "12", "all")

_WEEKDAYS = {name.lower(): index for index, name in enumerate(calendar.day_name)}
_WEEKDAYS.update({name.lower(): index for index, name in enumerate(calendar.day_abbr)})


def parse_week_start(value: str | int) -> int:
    """Parse a weekday given as 0-6 (Monday=0) or a day name."""
    if isinstance(value, int):
        index = value
    else:
        text = value.strip().lower()
        if text in _WEEKDAYS:
            return _WEEKDAYS[text]
        try:
            index = int(text)
        except ValueError:
            raise ValueError(f"Unknown weekday: {value!r}") from None
    if not 0 <= index <= 6:
        raise ValueError(f"Weekday must be between 0 and 6, got {index}")
    return index


def parse_time_range(value: str | int | None) -> TimeRange:
    """Parse a month count; "all", "0" and empty mean all time."""
    if value is None:
        return "all"
    if isinstance(value, int):
        months = value
    else:
        text = value.strip().lower()
        if text in ("", "all"):
            return "all"
        try:
            months = int(text)
        except ValueError:
            raise ValueError(f"Time range must be a month count or 'all', got {value!r}") from None
    if months < 0:
        raise ValueError(f"Time range must not be negative, got {months}")
    return "all" if months == 0 else months


@dataclass(frozen=True)
class StatsSettings:
    """Aggregation and presentation settings.

    Attributes:
        week_start: First day of the week, 0=Monday .. 6=Sunday.
        time_range: Default window in months, or "all".
        top_workouts: How many workouts the frequency chart shows.
        log_level: Level name passed to logging.
    """

    week_start: int = DEFAULT_WEEK_START
    time_range: TimeRange = DEFAULT_TIME_RANGE
    top_workouts: int = DEFAULT_TOP_WORKOUTS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StatsSettings:
        """Build settings from the environment.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ

        try:
            week_start = parse_week_start(
                env.get("SPLITSTATS_WEEK_START", str(DEFAULT_WEEK_START))
            )
        except ValueError as e:
            raise ValueError(f"SPLITSTATS_WEEK_START: {e}") from e

        try:
            time_range = parse_time_range(
                env.get("SPLITSTATS_TIME_RANGE", str(DEFAULT_TIME_RANGE))
            )
        except ValueError as e:
            raise ValueError(f"SPLITSTATS_TIME_RANGE: {e}") from e

        raw_top = env.get("SPLITSTATS_TOP_WORKOUTS", str(DEFAULT_TOP_WORKOUTS))
        try:
            top_workouts = int(raw_top)
        except ValueError:
            raise ValueError(f"SPLITSTATS_TOP_WORKOUTS: expected an integer, got {raw_top!r}") from None
        if top_workouts < 1:
            raise ValueError(f"SPLITSTATS_TOP_WORKOUTS: must be at least 1, got {top_workouts}")

        log_level = env.get("SPLITSTATS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"SPLITSTATS_LOG_LEVEL: unknown level {log_level!r}")

        return cls(
            week_start=week_start,
            time_range=time_range,
            top_workouts=top_workouts,
            log_level=log_level,
        )
