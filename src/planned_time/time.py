# SPDX-License-Identifier: MIT

import math
import re

import pendulum

DATE_FORMAT = "YYYY-MM-DD"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Approximate lengths used when humanizing, matching a 400-year Gregorian cycle
_DAYS_PER_MONTH = 146097 / 4800
_DAYS_PER_YEAR = 146097 / 400


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a calendar day in strict 'YYYY-MM-DD' format.

    Raises:
        ValueError: If the string is not exactly in 'YYYY-MM-DD' format or
            names a day that does not exist
    """
    if not _DATE_PATTERN.match(date_str):
        raise ValueError(f"'{date_str}' is not in {DATE_FORMAT} format")
    return pendulum.from_format(date_str, DATE_FORMAT).date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format(DATE_FORMAT)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("ddd, MMM Do YYYY")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def humanize_seconds(seconds: int) -> str:
    """
    Render a number of seconds as a coarse natural-language duration.

    The value is rounded to the nearest conventional unit, so 7200 becomes
    "2 hours", 86400 becomes "a day" and 2700 becomes "an hour".

    Args:
        seconds: A non-negative number of seconds

    Returns:
        A short approximation such as "a few seconds", "30 minutes" or "3 days"
    """
    total_seconds = abs(seconds)

    rounded_seconds = _round_half_up(total_seconds)
    minutes = _round_half_up(total_seconds / 60)
    hours = _round_half_up(total_seconds / 3600)
    days = _round_half_up(total_seconds / 86400)
    months = _round_half_up(total_seconds / 86400 / _DAYS_PER_MONTH)
    years = _round_half_up(total_seconds / 86400 / _DAYS_PER_YEAR)

    if rounded_seconds < 45:
        return "a few seconds"
    if minutes <= 1:
        return "a minute"
    if minutes < 45:
        return f"{minutes} minutes"
    if hours <= 1:
        return "an hour"
    if hours < 22:
        return f"{hours} hours"
    if days <= 1:
        return "a day"
    if days < 26:
        return f"{days} days"
    if months <= 1:
        return "a month"
    if months < 11:
        return f"{months} months"
    if years <= 1:
        return "a year"
    return f"{years} years"
