# SPDX-License-Identifier: MIT

from typing import Optional

from planned_time.error import UpstreamFetchError
from planned_time.model.date_interval import DateInterval
from planned_time.model.plan import (
    DayMapping,
    PlanDiagnostic,
    PlanDateValue,
    PlannedItem,
    PlanRecord,
)
from planned_time.time import date_from_str, date_to_str, humanize_seconds


def task_key_from_reference(reference: str) -> str:
    """Return the part of an item reference after its last '/'."""
    return reference[reference.rfind("/") + 1 :]


def _plan_task(plan: PlanRecord) -> str:
    try:
        task = plan["planItem"]["self"]
    except (KeyError, TypeError) as e:
        raise UpstreamFetchError(
            f"Malformed plan record without an item reference: {e}"
        )
    if not isinstance(task, str):
        raise UpstreamFetchError(f"Malformed plan record item reference: {task!r}")
    return task


def _plan_date_values(plan: PlanRecord, task: str) -> list[PlanDateValue]:
    try:
        date_values = plan["dates"]["values"]
    except (KeyError, TypeError) as e:
        raise UpstreamFetchError(f"Malformed plan record for {task}: missing {e}")
    if not isinstance(date_values, list) or not all(
        isinstance(date_value, dict) for date_value in date_values
    ):
        raise UpstreamFetchError(f"Malformed plan dates for {task}: {date_values!r}")
    return date_values


def extract_plan_intervals(
    plan: PlanRecord,
    diagnostics: Optional[list[PlanDiagnostic]] = None,
) -> list[tuple[DateInterval, int]]:
    """
    Get a normalized interval for each sub-range of a plan that carries time.

    Sub-ranges with no planned seconds are dropped and sub-ranges whose end
    precedes their start are swapped. Neither is treated as an error.

    Args:
        plan: A plan record as returned by the Tempo API
        diagnostics: Optional list that receives a note for each dropped or
            swapped sub-range

    Returns:
        (interval, planned seconds per day) pairs in the order received

    Raises:
        UpstreamFetchError: If the record lacks its item reference or dates,
            a sub-range date cannot be parsed or planned seconds are not a
            non-negative integer
    """
    task = _plan_task(plan)
    intervals: list[tuple[DateInterval, int]] = []

    for date_value in _plan_date_values(plan, task):
        planned_seconds = date_value.get("timePlannedSeconds")
        if planned_seconds is not None and (
            isinstance(planned_seconds, bool)
            or not isinstance(planned_seconds, int)
            or planned_seconds < 0
        ):
            raise UpstreamFetchError(
                f"Malformed planned seconds for {task}: {planned_seconds!r}"
            )
        if not planned_seconds:
            if diagnostics is not None:
                diagnostics.append(
                    {
                        "task": task,
                        "correction": "skipped",
                        "interval": None,
                        "message": (
                            f"Skipped {date_value.get('from')} to {date_value.get('to')}"
                            " with no planned seconds"
                        ),
                    }
                )
            continue

        try:
            start = date_from_str(date_value["from"])
            end = date_from_str(date_value["to"])
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamFetchError(f"Malformed plan dates for {task}: {e}")

        interval = DateInterval(start, end)
        if end < start and diagnostics is not None:
            diagnostics.append(
                {
                    "task": task,
                    "correction": "swapped",
                    "interval": interval,
                    "message": (
                        f"Swapped reversed dates {date_to_str(start)} to "
                        f"{date_to_str(end)}"
                    ),
                }
            )

        intervals.append((interval, planned_seconds))

    return intervals


def build_planned_item(plan: PlanRecord, seconds_per_day: int) -> PlannedItem:
    task = _plan_task(plan)
    description = plan.get("description")
    if description is not None and not isinstance(description, str):
        raise UpstreamFetchError(
            f"Malformed plan description for {task}: {description!r}"
        )
    return {
        "task": task,
        "task_key": task_key_from_reference(task),
        "description": description,
        "seconds_per_day": seconds_per_day,
        "planned_time": humanize_seconds(seconds_per_day),
        "plan": plan.get("self"),
    }


def map_plans(
    query: DateInterval,
    plans: list[PlanRecord],
    diagnostics: Optional[list[PlanDiagnostic]] = None,
) -> DayMapping:
    """
    Distribute plan records onto the days of the query interval.

    Every day of the query is present in the result, in chronological order,
    even if nothing is planned for it. A record whose sub-ranges overlap on a
    day contributes one item per sub-range to that day.

    Args:
        query: The interval the user asked for
        plans: Plan records as returned by the Tempo API
        diagnostics: Optional list that receives a note for each corrected
            sub-range

    Returns:
        Mapping of each day to the items planned on it, in record order
    """
    mapped_plans: DayMapping = {day: [] for day in query.days()}

    for plan in plans:
        for plan_interval, seconds_per_day in extract_plan_intervals(
            plan, diagnostics
        ):
            applicable_interval = query.intersection(plan_interval)
            if applicable_interval is None:
                continue

            planned_item = build_planned_item(plan, seconds_per_day)
            for day in applicable_interval.days():
                mapped_plans[day].append(planned_item)

    return mapped_plans
