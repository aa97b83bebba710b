# SPDX-License-Identifier: MIT

from typing import Any, Optional

import pendulum


class DateInterval:
    """
    An inclusive range of calendar days.

    The bounds are always stored in order: building an interval from a later
    and an earlier day swaps them.
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: pendulum.Date, end: pendulum.Date) -> None:
        if end < start:
            start, end = end, start
        self._start = start
        self._end = end

    @property
    def start(self) -> pendulum.Date:
        return self._start

    @property
    def end(self) -> pendulum.Date:
        return self._end

    def day_count(self) -> int:
        return self._start.diff(self._end).in_days() + 1

    def days(self) -> list[pendulum.Date]:
        return [self._start.add(days=offset) for offset in range(self.day_count())]

    def intersection(self, other: "DateInterval") -> Optional["DateInterval"]:
        start = max(self._start, other.start)
        end = min(self._end, other.end)
        if start > end:
            return None
        return DateInterval(start, end)

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, pendulum.Date):
            return False
        return self._start <= day <= self._end

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DateInterval):
            return NotImplemented
        return self._start == other.start and self._end == other.end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"DateInterval({self._start.isoformat()}, {self._end.isoformat()})"
