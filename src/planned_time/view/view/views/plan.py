# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from planned_time.color import (
    DAY_TITLE_COLOR,
    EMPTY_DAY_COLOR,
    HEADING_COLOR,
    WARNING_COLOR,
)
from planned_time.model.date_interval import DateInterval
from planned_time.model.plan import DayMapping, PlanDiagnostic, PlannedItem
from planned_time.time import date_to_display_str, date_to_str
from planned_time.view.view.views.header import header

COLUMNS = ["Task", "Planned Time", "Description", "Task Link"]


def task_link(jira_base_url: str, task_key: str) -> str:
    return f"{jira_base_url}browse/{task_key}"


def day_table(
    day_title: str,
    planned_items: list[PlannedItem],
    jira_base_url: str,
) -> Table:
    table = Table(
        title=f"[{DAY_TITLE_COLOR}]Planned time for {day_title}[/{DAY_TITLE_COLOR}]",
        box=box.SIMPLE,
    )
    for column in COLUMNS:
        table.add_column(f"[bold {HEADING_COLOR}]{column}[/bold {HEADING_COLOR}]")

    if len(planned_items) == 0:
        table.add_row(
            f"[{EMPTY_DAY_COLOR}]No planned time for this day![/{EMPTY_DAY_COLOR}]",
            "",
            "",
            "",
        )
        return table

    for planned_item in planned_items:
        table.add_row(
            planned_item["task_key"],
            planned_item["planned_time"],
            escape(planned_item["description"] or ""),
            task_link(jira_base_url, planned_item["task_key"]),
        )
    return table


def planned_time_view(
    account_id: str,
    query: DateInterval,
    mapped_plans: DayMapping,
    jira_base_url: str,
    console: Optional[Console] = None,
) -> None:
    header(account_id, f"{date_to_str(query.start)} - {date_to_str(query.end)}")

    if console is None:
        console = Console()

    for day, planned_items in mapped_plans.items():
        console.print(day_table(date_to_display_str(day), planned_items, jira_base_url))


def diagnostics_view(
    diagnostics: list[PlanDiagnostic], console: Optional[Console] = None
) -> None:
    if len(diagnostics) == 0:
        return

    if console is None:
        console = Console(stderr=True)

    for diagnostic in diagnostics:
        console.print(
            f"[{WARNING_COLOR}]{escape(diagnostic['task'])}: {escape(diagnostic['message'])}[/{WARNING_COLOR}]"
        )
