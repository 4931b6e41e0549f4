"""Strength-training formulas shared by the aggregation modules."""

from __future__ import annotations

import math

from splitstats.models.types import StrengthResult

# Epley: 1RM = weight * (1 + reps / EPLEY_REPS_DIVISOR)
EPLEY_REPS_DIVISOR = 30


def epley_one_rep_max(weight: float, reps: int) -> float:
    """Estimate a one-rep max from a weight lifted for ``reps`` repetitions."""
    return weight * (1 + reps / EPLEY_REPS_DIVISOR)


def has_full_set(result: StrengthResult) -> bool:
    """True when both weight and reps were recorded."""
    return result.best_weight is not None and result.best_reps is not None


def tonnage(result: StrengthResult) -> float:
    """Load moved (weight x reps), 0 when either value is missing."""
    if not has_full_set(result):
        return 0.0
    return result.best_weight * result.best_reps


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going up (2.5 -> 3, -2.5 -> -2)."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor
