# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, Optional, TypedDict

import pendulum

from planned_time.model.date_interval import DateInterval


class PlanItemReference(TypedDict):
    self: str
    type: NotRequired[str]


# "from" is a keyword, so this one needs the functional syntax
PlanDateValue = TypedDict(
    "PlanDateValue",
    {
        "from": str,
        "to": str,
        "timePlannedSeconds": NotRequired[Optional[int]],
    },
)


class PlanDates(TypedDict):
    values: list[PlanDateValue]


class PlanRecord(TypedDict):
    self: NotRequired[str]
    planItem: PlanItemReference
    description: NotRequired[Optional[str]]
    secondsPerDay: NotRequired[Optional[int]]
    dates: PlanDates


class PlannedItem(TypedDict):
    task: str
    task_key: str
    description: Optional[str]
    seconds_per_day: int
    planned_time: str
    plan: Optional[str]


DayMapping = dict[pendulum.Date, list[PlannedItem]]

PlanCorrection = Literal["skipped", "swapped"]


class PlanDiagnostic(TypedDict):
    task: str
    correction: PlanCorrection
    interval: Optional[DateInterval]
    message: str
