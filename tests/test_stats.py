"""Tests for workout history statistics."""

import calendar
from datetime import date, datetime, timedelta

import pytest

from splitstats.aggregation.stats import (
    exercise_names,
    exercise_progress,
    exercise_snapshot,
    exercise_type_distribution,
    filter_by_time_range,
    personal_records,
    progress_summary,
    recent_personal_records,
    start_of_week,
    summary_metrics,
    top_workouts_by_frequency,
    weekly_volume,
)
from splitstats.models.types import (
    CardioResult,
    PersonalRecord,
    ProgressPoint,
    StrengthResult,
    SummaryMetrics,
)


class TestFilterByTimeRange:
    """Test time-window filtering."""

    def test_all_time_is_identity(self, history):
        """'all' returns every record in input order."""
        reordered = list(reversed(history))
        assert filter_by_time_range(reordered, "all") == reordered

    def test_zero_and_none_mean_all_time(self, history):
        assert filter_by_time_range(history, 0) == history
        assert filter_by_time_range(history, None) == history

    def test_cutoff_is_exclusive(self, make_record):
        """A record exactly on the cutoff day is dropped."""
        on_cutoff = make_record("A", date(2024, 3, 15))
        after_cutoff = make_record("B", date(2024, 3, 16))
        result = filter_by_time_range([on_cutoff, after_cutoff], 3, now=date(2024, 6, 15))
        assert result == [after_cutoff]

    def test_month_arithmetic_clamps_to_month_end(self, make_record):
        """One month before March 31 is February 29 in a leap year."""
        feb_29 = make_record("A", date(2024, 2, 29))
        mar_1 = make_record("B", date(2024, 3, 1))
        result = filter_by_time_range([feb_29, mar_1], 1, now=date(2024, 3, 31))
        assert result == [mar_1]

    def test_accepts_datetime_now(self, history):
        result = filter_by_time_range(history, 1, now=datetime(2024, 2, 10, 18, 30))
        assert [r.date for r in result] == [date(2024, 1, 15), date(2024, 1, 29)]

    def test_undated_records_dropped_from_window(self, make_record):
        undated = make_record("A", None)
        assert filter_by_time_range([undated], 6, now=date(2024, 1, 1)) == []
        assert filter_by_time_range([undated], "all") == [undated]

    def test_empty_input(self):
        assert filter_by_time_range([], 6, now=date(2024, 1, 1)) == []


class TestSummaryMetrics:
    """Test headline metrics."""

    def test_empty_returns_zeros(self):
        """No records gives all-zero metrics without raising."""
        assert summary_metrics([]) == SummaryMetrics()

    def test_counts_and_volume(self, history):
        metrics = summary_metrics(history)
        assert metrics.total_workouts == 3
        assert metrics.total_exercises == 5
        assert metrics.avg_exercises_per_workout == 1.7
        assert metrics.strength_exercise_count == 4
        assert metrics.cardio_exercise_count == 1
        assert metrics.total_volume == 1850

    def test_total_exercises_matches_record_lengths(self, history):
        assert summary_metrics(history).total_exercises == sum(len(r.exercises) for r in history)

    def test_weekly_average_over_span(self, history):
        """3 workouts over 28 days = 0.75/week, rounded half up to 0.8."""
        assert summary_metrics(history).weekly_average == 0.8

    def test_weekly_average_independent_of_order(self, history):
        assert summary_metrics(list(reversed(history))).weekly_average == 0.8

    def test_weekly_average_single_record(self, make_record):
        assert summary_metrics([make_record("A", date(2024, 1, 1))]).weekly_average == 1.0

    def test_weekly_average_single_distinct_date(self, make_record):
        """Two workouts on one day have no span: average equals total."""
        day = date(2024, 1, 1)
        records = [make_record("A", day), make_record("B", day)]
        assert summary_metrics(records).weekly_average == 2.0

    def test_short_span_floors_at_one_week(self, make_record):
        records = [make_record("A", date(2024, 1, 1)), make_record("B", date(2024, 1, 4))]
        assert summary_metrics(records).weekly_average == 2.0

    def test_missing_reps_excluded_from_volume_but_counted(self, make_record):
        """Weight without reps adds no tonnage but still counts as strength."""
        record = make_record("A", date(2024, 1, 1), StrengthResult(name="Curl", best_weight=20))
        metrics = summary_metrics([record])
        assert metrics.total_volume == 0
        assert metrics.strength_exercise_count == 1

    def test_undated_records_still_counted(self, make_record):
        records = [make_record("A", None, CardioResult(name="Running"))]
        metrics = summary_metrics(records)
        assert metrics.total_workouts == 1
        assert metrics.cardio_exercise_count == 1
        assert metrics.weekly_average == 1.0


class TestWeeklyVolume:
    """Test weekly volume buckets."""

    def test_empty(self):
        assert weekly_volume([]) == []

    def test_sunday_weeks_have_no_gaps(self, history):
        buckets = weekly_volume(history)
        assert [b.week_start for b in buckets] == [
            date(2023, 12, 31),
            date(2024, 1, 7),
            date(2024, 1, 14),
            date(2024, 1, 21),
            date(2024, 1, 28),
        ]
        assert [b.volume for b in buckets] == [500, 0, 800, 0, 550]
        assert [b.workout_count for b in buckets] == [1, 0, 1, 0, 1]

    def test_consecutive_buckets_seven_days_apart(self, history):
        starts = [b.week_start for b in weekly_volume(history)]
        assert all(b - a == timedelta(days=7) for a, b in zip(starts, starts[1:]))

    def test_monday_week_start(self, history):
        buckets = weekly_volume(history, week_start=calendar.MONDAY)
        assert buckets[0].week_start == date(2024, 1, 1)
        assert buckets[-1].week_start == date(2024, 1, 29)
        assert len(buckets) == 5

    def test_week_labels(self, history):
        labels = [b.week_label for b in weekly_volume(history)]
        assert labels[:2] == ["Dec 31", "Jan 7"]

    def test_week_start_day_belongs_to_new_week(self, make_record):
        """Buckets are half-open: a Sunday opens the next Sunday week."""
        records = [
            make_record("A", date(2024, 1, 6), StrengthResult(name="Squat", best_weight=100, best_reps=1)),
            make_record("B", date(2024, 1, 7), StrengthResult(name="Squat", best_weight=200, best_reps=1)),
        ]
        buckets = weekly_volume(records)
        assert [(b.week_start, b.volume) for b in buckets] == [
            (date(2023, 12, 31), 100),
            (date(2024, 1, 7), 200),
        ]

    def test_single_day_gives_one_bucket(self, make_record):
        assert len(weekly_volume([make_record("A", date(2024, 1, 3))])) == 1

    def test_undated_records_ignored(self, make_record):
        records = [make_record("A", None), make_record("B", date(2024, 1, 3))]
        buckets = weekly_volume(records)
        assert len(buckets) == 1
        assert buckets[0].workout_count == 1


class TestStartOfWeek:
    def test_sunday_start(self):
        assert start_of_week(date(2024, 1, 3)) == date(2023, 12, 31)
        assert start_of_week(date(2023, 12, 31)) == date(2023, 12, 31)

    def test_monday_start(self):
        assert start_of_week(date(2024, 1, 7), calendar.MONDAY) == date(2024, 1, 1)


class TestDistributions:
    """Test exercise type and workout frequency distributions."""

    def test_exercise_type_distribution(self, history):
        distribution = exercise_type_distribution(history)
        assert distribution.strength == 4
        assert distribution.cardio == 1

    def test_exercise_type_distribution_empty(self):
        distribution = exercise_type_distribution([])
        assert (distribution.strength, distribution.cardio) == (0, 0)

    def test_same_name_counted_once(self, make_record):
        records = [make_record("Legs", date(2024, 1, 1)), make_record("Legs", date(2024, 1, 3))]
        top = top_workouts_by_frequency(records)
        assert len(top) == 1
        assert (top[0].workout_name, top[0].count) == ("Legs", 2)

    def test_ties_keep_first_seen_order(self, make_record):
        names = ["A", "B", "B", "C", "A", "D"]
        records = [make_record(name, date(2024, 1, i + 1)) for i, name in enumerate(names)]
        top = top_workouts_by_frequency(records)
        assert [(t.workout_name, t.count) for t in top] == [("A", 2), ("B", 2), ("C", 1), ("D", 1)]

    def test_limit(self, make_record):
        records = [make_record(str(i), date(2024, 1, 1)) for i in range(8)]
        assert [t.workout_name for t in top_workouts_by_frequency(records)] == ["0", "1", "2", "3", "4"]
        assert len(top_workouts_by_frequency(records, limit=2)) == 2
        assert top_workouts_by_frequency(records, limit=0) == []


class TestPersonalRecords:
    """Test personal record detection."""

    def test_best_estimate_kept(self, make_record):
        records = [
            make_record("Push", date(2024, 1, 1), StrengthResult(name="Bench", best_weight=100, best_reps=5)),
            make_record("Push", date(2024, 1, 8), StrengthResult(name="Bench", best_weight=110, best_reps=5)),
        ]
        prs = personal_records(records)
        assert len(prs) == 1
        assert prs[0].name == "Bench"
        assert prs[0].weight == 110
        assert prs[0].reps == 5
        assert prs[0].date == date(2024, 1, 8)
        assert prs[0].estimated_one_rep_max == pytest.approx(128.33, abs=0.01)

    def test_sorted_by_estimate_descending(self, history):
        prs = personal_records(history)
        assert [pr.name for pr in prs] == ["Bench Press", "Barbell Row"]

    def test_missing_reps_excluded(self, history):
        assert "Bicep Curl" not in [pr.name for pr in personal_records(history)]

    def test_tie_keeps_earliest(self, make_record):
        records = [
            make_record("A", date(2024, 1, 1), StrengthResult(name="Squat", best_weight=150, best_reps=3)),
            make_record("B", date(2024, 2, 1), StrengthResult(name="Squat", best_weight=150, best_reps=3)),
        ]
        assert personal_records(records)[0].date == date(2024, 1, 1)

    def test_cardio_ignored(self, make_record):
        records = [make_record("A", date(2024, 1, 1), CardioResult(name="Rowing", duration=10))]
        assert personal_records(records) == []

    def test_idempotent(self, history):
        assert personal_records(history) == personal_records(history)

    def test_empty(self):
        assert personal_records([]) == []


class TestRecentPersonalRecords:
    """Test the recent achievements shortlist."""

    @staticmethod
    def _pr(name, day, estimate):
        return PersonalRecord(name=name, weight=100, reps=5, date=day, estimated_one_rep_max=estimate)

    def test_thirty_day_boundary(self, history):
        prs = personal_records(history)
        # Barbell Row was set on 2024-01-15
        on_boundary = recent_personal_records(prs, now=date(2024, 2, 14))
        assert [pr.name for pr in on_boundary] == ["Bench Press", "Barbell Row"]
        past_boundary = recent_personal_records(prs, now=date(2024, 2, 15))
        assert [pr.name for pr in past_boundary] == ["Bench Press"]

    def test_accepts_datetime_now(self, history):
        prs = personal_records(history)
        assert len(recent_personal_records(prs, now=datetime(2024, 2, 14, 23, 59))) == 2

    def test_limit_applied_before_date_filter(self):
        """An old top record takes a slot instead of letting a fourth one in."""
        prs = [
            self._pr("Squat", date(2023, 6, 1), 200),
            self._pr("Deadlift", date(2024, 3, 1), 190),
            self._pr("Bench", date(2024, 3, 2), 120),
            self._pr("Row", date(2024, 3, 3), 100),
        ]
        recent = recent_personal_records(prs, now=date(2024, 3, 10))
        assert [pr.name for pr in recent] == ["Deadlift", "Bench"]

    def test_custom_window_and_limit(self):
        prs = [self._pr("Squat", date(2024, 3, 1), 200), self._pr("Bench", date(2024, 3, 8), 120)]
        assert recent_personal_records(prs, now=date(2024, 3, 10), days=7) == [prs[1]]
        assert recent_personal_records(prs, now=date(2024, 3, 10), limit=0) == []

    def test_undated_excluded(self):
        prs = [self._pr("Squat", None, 200), self._pr("Bench", date(2024, 3, 8), 120)]
        assert recent_personal_records(prs, now=date(2024, 3, 10)) == [prs[1]]

    def test_empty(self):
        assert recent_personal_records([], now=date(2024, 3, 10)) == []


class TestExerciseProgress:
    """Test per-exercise progress series."""

    def test_sorted_by_date(self, history):
        series = exercise_progress(list(reversed(history)), "Bench Press")
        assert [p.date for p in series] == [date(2024, 1, 1), date(2024, 1, 29)]
        assert [p.weight for p in series] == [100, 110]

    def test_dates_non_decreasing(self, history):
        series = exercise_progress(history, "Bench Press")
        assert all(a.date <= b.date for a, b in zip(series, series[1:]))

    def test_missing_reps_count_as_zero(self, history):
        """Unlike personal records, weight without reps stays in the series."""
        series = exercise_progress(history, "Bicep Curl")
        assert len(series) == 1
        assert series[0].reps == 0
        assert series[0].estimated_1rm == 20

    def test_missing_weight_excluded(self, make_record):
        records = [make_record("A", date(2024, 1, 1), StrengthResult(name="Dip", best_reps=12))]
        assert exercise_progress(records, "Dip") == []

    def test_cardio_with_same_name_ignored(self, make_record):
        records = [make_record("A", date(2024, 1, 1), CardioResult(name="Sled Push", duration=5))]
        assert exercise_progress(records, "Sled Push") == []

    def test_undated_records_ignored(self, make_record):
        records = [make_record("A", None, StrengthResult(name="Squat", best_weight=100, best_reps=5))]
        assert exercise_progress(records, "Squat") == []

    def test_unknown_exercise(self, history):
        assert exercise_progress(history, "Nope") == []


class TestProgressSummary:
    """Test first-to-last progress deltas."""

    def _point(self, day, weight, reps, estimate):
        return ProgressPoint(date=day, weight=weight, reps=reps, estimated_1rm=estimate)

    def test_fewer_than_two_points(self, history):
        assert progress_summary([]) is None
        assert progress_summary(exercise_progress(history, "Barbell Row")) is None

    def test_deltas(self, history):
        summary = progress_summary(exercise_progress(history, "Bench Press"))
        assert summary.weight_delta == 10
        assert summary.one_rep_max_delta == pytest.approx(11.667, abs=0.001)
        assert summary.progress_percent == 10

    def test_percent_rounds_half_up(self):
        series = [
            self._point(date(2024, 1, 1), 100, 0, 100.0),
            self._point(date(2024, 2, 1), 102.5, 0, 102.5),
        ]
        assert progress_summary(series).progress_percent == 3

    def test_zero_first_estimate_guarded(self):
        series = [
            self._point(date(2024, 1, 1), 0, 0, 0.0),
            self._point(date(2024, 2, 1), 10, 0, 10.0),
        ]
        assert progress_summary(series).progress_percent == 0

    def test_regression_is_negative(self):
        series = [
            self._point(date(2024, 1, 1), 100, 0, 100.0),
            self._point(date(2024, 2, 1), 90, 0, 90.0),
        ]
        summary = progress_summary(series)
        assert summary.weight_delta == -10
        assert summary.progress_percent == -10


class TestExerciseSnapshot:
    def test_empty(self):
        assert exercise_snapshot([]) is None

    def test_single_point_has_no_progress(self, history):
        snapshot = exercise_snapshot(exercise_progress(history, "Barbell Row"))
        assert snapshot.current_weight == 80
        assert snapshot.current_reps == 10
        assert snapshot.progress is None

    def test_latest_values(self, history):
        snapshot = exercise_snapshot(exercise_progress(history, "Bench Press"))
        assert snapshot.current_weight == 110
        assert snapshot.current_1rm == pytest.approx(128.33, abs=0.01)
        assert snapshot.progress.progress_percent == 10


class TestExerciseNames:
    def test_sorted_and_unique(self, history):
        assert exercise_names(history) == ["Barbell Row", "Bench Press", "Bicep Curl", "Running"]

    def test_empty(self):
        assert exercise_names([]) == []
