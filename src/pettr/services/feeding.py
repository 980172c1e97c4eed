"""Feeding variance classification for finished food entries.

Variance compares how long the food actually lasted with how long it was
expected to last::

    variance = (actual_days - expected_days) / expected_days * 100

A negative variance means the food ran out early (overfeeding), a positive
one means it lasted longer than planned (underfeeding). Buckets by magnitude:

    |variance| <  5      normal
    5 <= |variance| < 15 slightly-over / slightly-under
    |variance| >= 15     overfeeding / underfeeding
"""

from datetime import date

from pettr.domain.errors import InvalidExpectedDays, InvalidQuantity
from pettr.domain.food import (
    FeedingAssessment,
    FeedingClassification,
    FeedingStatus,
    FoodEntry,
)
from pettr.services.depletion import (
    actual_days_elapsed,
    daily_amount_grams,
    expected_days,
    total_mass_grams,
)

NORMAL_BAND_PERCENT = 5.0
SLIGHT_BAND_PERCENT = 15.0


def variance_percent(expected: int, actual: int) -> float:
    """Return the signed percentage by which actual days differ from expected."""
    if isinstance(expected, bool) or not isinstance(expected, int) or expected <= 0:
        raise InvalidExpectedDays(
            f"Expected days must be a positive integer, got {expected!r}"
        )
    return (actual - expected) * 100 / expected


def classify(expected: int, actual: int) -> FeedingClassification:
    """Bucket the day variance into a feeding status."""
    if actual < 0:
        raise InvalidQuantity(f"Actual days cannot be negative, got {actual!r}")
    variance = variance_percent(expected, actual)
    magnitude = abs(variance)
    if magnitude < NORMAL_BAND_PERCENT:
        status = FeedingStatus.NORMAL
    elif magnitude < SLIGHT_BAND_PERCENT:
        if variance < 0:
            status = FeedingStatus.SLIGHTLY_OVER
        else:
            status = FeedingStatus.SLIGHTLY_UNDER
    elif variance < 0:
        status = FeedingStatus.OVERFEEDING
    else:
        status = FeedingStatus.UNDERFEEDING
    return FeedingClassification(status=status, variance_percent=variance)


def assess_feeding(
    entry: FoodEntry, date_finished: date | None = None
) -> FeedingAssessment:
    """Classify a finished entry using its own or the given finish date."""
    finished = date_finished or entry.date_finished
    if finished is None:
        raise InvalidQuantity("Food entry has no finish date")
    total = total_mass_grams(entry)
    daily = daily_amount_grams(entry)
    expected = expected_days(total, daily)
    actual = actual_days_elapsed(entry.date_started, finished)
    classification = classify(expected, actual)
    return FeedingAssessment(
        status=classification.status,
        variance_percent=round(classification.variance_percent, 2),
        actual_days_elapsed=actual,
        expected_days=expected,
        expected_daily_grams=daily,
        actual_daily_grams=total / actual,
    )
