# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from planned_time.configuration import MAX_RANGE_DAYS
from planned_time.error import (
    ConflictingOptionsError,
    InvalidDateError,
    RangeOrderError,
    RangeTooLargeError,
)
from planned_time.model.date_interval import DateInterval
from planned_time.time import DATE_FORMAT, date_from_str, today_local


def resolve_date_range(
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    tomorrow: bool = False,
    week: bool = False,
    today: Optional[pendulum.Date] = None,
) -> DateInterval:
    """
    Turn the date options of the get command into a validated query interval.

    Args:
        from_date: Start day as 'YYYY-MM-DD', defaults to today
        to_date: End day as 'YYYY-MM-DD', defaults to today
        tomorrow: Query only the day after today
        week: Query today and the following six days
        today: The current day, defaults to the local calendar date

    Returns:
        The inclusive query interval

    Raises:
        ConflictingOptionsError: If both tomorrow and week are set
        InvalidDateError: If a date is not in 'YYYY-MM-DD' format
        RangeOrderError: If the start day is after the end day
        RangeTooLargeError: If the interval spans more than MAX_RANGE_DAYS days
    """
    if tomorrow and week:
        raise ConflictingOptionsError(
            "Do you want tomorrow or the next week? Make up your mind!"
        )

    if today is None:
        today = today_local()

    if tomorrow:
        start = today.add(days=1)
        end = start
    elif week:
        start = today
        end = today.add(days=6)
    else:
        start = _parse_query_date(from_date, today)
        end = _parse_query_date(to_date, today)

    if start > end:
        raise RangeOrderError("Provided fromDate occurs after toDate.")

    # Days apart, so 13 means 14 inclusive days
    if start.diff(end).in_days() > MAX_RANGE_DAYS - 1:
        raise RangeTooLargeError(
            f"A maximum of {MAX_RANGE_DAYS} days of planned time can be requested "
            "at once. Please update the provided fromDate and/or toDate options."
        )

    return DateInterval(start, end)


def _parse_query_date(
    date_str: Optional[str], default: pendulum.Date
) -> pendulum.Date:
    if date_str is None:
        return default
    try:
        return date_from_str(date_str)
    except ValueError:
        raise InvalidDateError(
            f"Invalid date '{date_str}' provided. Dates must be formatted as {DATE_FORMAT}."
        )
