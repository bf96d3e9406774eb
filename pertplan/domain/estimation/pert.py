"""PERT arithmetic.

Pure functions for three-point estimation. The expected time is the
weighted average (O + 4M + P) / 6 and the standard deviation is
(P - O) / 6.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel

from pertplan.domain.project.models import Estimates, Task

# =============================================================================
# Constants
# =============================================================================

FORMULA = "E = (O + 4M + P) / 6"

# Sigma multiplier -> label shown next to the band
CONFIDENCE_LEVELS = {
    1: "±1σ (68% conf.)",
    2: "±2σ (95% conf.)",
    3: "±3σ (99% conf.)",
}


class ConfidenceBand(BaseModel):
    """Range of likely outcomes at k standard deviations."""

    sigma: int
    label: str
    low: float
    high: float


# =============================================================================
# Core arithmetic
# =============================================================================


def expected(optimistic: float, most_likely: float, pessimistic: float) -> float:
    """Return the PERT expected time (O + 4M + P) / 6."""
    return (optimistic + 4 * most_likely + pessimistic) / 6


def std_dev(optimistic: float, pessimistic: float) -> float:
    """Return the PERT standard deviation (P - O) / 6."""
    return (pessimistic - optimistic) / 6


def confidence_band(expected_time: float, deviation: float, k: int) -> tuple[float, float]:
    """Return the (low, high) range expected ± k·deviation.

    Raises:
        ValueError: If k is not 1, 2 or 3.
    """
    if k not in CONFIDENCE_LEVELS:
        raise ValueError(f"Confidence band must be 1, 2 or 3 sigma, got {k}")
    return (expected_time - k * deviation, expected_time + k * deviation)


def confidence_bands(expected_time: float, deviation: float) -> list[ConfidenceBand]:
    """Return the 1σ, 2σ and 3σ bands with their display labels."""
    bands = []
    for k, label in CONFIDENCE_LEVELS.items():
        low, high = confidence_band(expected_time, deviation, k)
        bands.append(ConfidenceBand(sigma=k, label=label, low=low, high=high))
    return bands


# =============================================================================
# Task-level helpers
# =============================================================================


def estimates_expected(estimates: Estimates) -> float:
    return expected(estimates.optimistic, estimates.most_likely, estimates.pessimistic)


def task_expected(task: Task) -> float:
    """Expected hours for a task."""
    return estimates_expected(task.estimates)


def task_std_dev(task: Task) -> float:
    """Standard deviation in hours for a task."""
    return std_dev(task.estimates.optimistic, task.estimates.pessimistic)


# =============================================================================
# Formatting
# =============================================================================


def format_hours(hours: Any) -> str:
    """Format hours with two decimals.

    Never fails: None, NaN, infinities and non-numeric input all format as
    "0.00". Halves round away from zero.
    """
    if hours is None or isinstance(hours, bool):
        return "0.00"
    try:
        value = float(hours)
    except (TypeError, ValueError):
        return "0.00"
    if not math.isfinite(value):
        return "0.00"

    rounded = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:.2f}"
