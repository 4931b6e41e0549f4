"""Shared pytest fixtures for splitstats tests."""

from datetime import date

import pytest

from splitstats.models.types import CardioResult, StrengthResult, WorkoutRecord


@pytest.fixture
def make_record():
    """Factory for WorkoutRecords with sequential ids."""
    counter = {"n": 0}

    def _make(workout_name, day, *exercises):
        counter["n"] += 1
        return WorkoutRecord(
            id=f"rec-{counter['n']}",
            workout_name=workout_name,
            date=day,
            exercises=list(exercises),
        )

    return _make


@pytest.fixture
def history(make_record):
    """Three workouts two weeks apart (2024-01-01 is a Monday).

    Tonnage: 500 + 800 + 550 = 1850. The curl has no reps.
    """
    return [
        make_record(
            "Push",
            date(2024, 1, 1),
            StrengthResult(name="Bench Press", best_weight=100, best_reps=5),
            CardioResult(name="Running", duration=20, distance=3),
        ),
        make_record(
            "Pull",
            date(2024, 1, 15),
            StrengthResult(name="Barbell Row", best_weight=80, best_reps=10),
            StrengthResult(name="Bicep Curl", best_weight=20),
        ),
        make_record(
            "Push",
            date(2024, 1, 29),
            StrengthResult(name="Bench Press", best_weight=110, best_reps=5),
        ),
    ]
