"""Human-readable feeding status messages."""

from pettr.domain.food import FeedingStatus


def status_label(status: FeedingStatus) -> str:
    """Return the display label for a feeding status."""
    match status:
        case FeedingStatus.OVERFEEDING:
            return "Overfeeding"
        case FeedingStatus.SLIGHTLY_OVER:
            return "Slightly Over"
        case FeedingStatus.NORMAL:
            return "Normal"
        case FeedingStatus.SLIGHTLY_UNDER:
            return "Slightly Under"
        case FeedingStatus.UNDERFEEDING:
            return "Underfeeding"


def status_icon(status: FeedingStatus) -> str:
    """Return the icon glyph for a feeding status."""
    match status:
        case FeedingStatus.OVERFEEDING:
            return "🔴"
        case FeedingStatus.SLIGHTLY_OVER:
            return "🟠"
        case FeedingStatus.NORMAL:
            return "🟢"
        case FeedingStatus.SLIGHTLY_UNDER | FeedingStatus.UNDERFEEDING:
            return "🟡"


def format_status_message(
    status: FeedingStatus, actual_days_elapsed: int, expected_days: int
) -> str:
    """Format a status line such as '🔴 Overfeeding by ~3 days'."""
    label = f"{status_icon(status)} {status_label(status)}"
    if status is FeedingStatus.NORMAL:
        return label
    difference = abs(actual_days_elapsed - expected_days)
    return f"{label} by ~{difference} {_days(difference)}"


def format_variance(variance_percent: float) -> str:
    """Format a signed variance such as '+12.5%'."""
    sign = "+" if variance_percent > 0 else ""
    return f"{sign}{variance_percent:.1f}%"


def format_finish_summary(
    status: FeedingStatus, actual_days_elapsed: int, expected_days: int
) -> str:
    """Format the notice shown when an entry is marked finished."""
    return (
        f"Finished! Consumed in {actual_days_elapsed} {_days(actual_days_elapsed)} "
        f"(expected {expected_days} {_days(expected_days)}). "
        f"Status: {status_label(status)}"
    )


def _days(count: int) -> str:
    return "day" if count == 1 else "days"
