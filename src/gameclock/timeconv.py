"""Minute arithmetic for the game clock.

All clock times are integer minutes since the clock started. A day is
always 24 hours of 60 minutes; there is no calendar beyond that.
"""

MINUTES_IN_HOUR = 60
MINUTES_IN_DAY = 24 * MINUTES_IN_HOUR


def minutes_in_hours(hours: int) -> int:
    return hours * MINUTES_IN_HOUR


def minutes_in_days(days: int) -> int:
    return days * MINUTES_IN_DAY


def total_minutes(days: int, hours: int, minutes: int) -> int:
    """Absolute minute for (days, hours, minutes).

    Out-of-range or negative parts are folded into the sum as-is, so
    total_minutes(0, 25, 0) == total_minutes(1, 1, 0).
    """
    return minutes_in_days(days) + minutes_in_hours(hours) + minutes


def split_minutes(t: int) -> tuple:
    """Inverse of total_minutes for t >= 0: (day, hour, minute)."""
    return (t // MINUTES_IN_DAY,
            t % MINUTES_IN_DAY // MINUTES_IN_HOUR,
            t % MINUTES_IN_HOUR)
