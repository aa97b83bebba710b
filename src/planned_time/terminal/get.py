# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from planned_time.color import ERROR_COLOR
from planned_time.error import MissingConfigError, PlannedTimeError
from planned_time.model.plan import PlanDiagnostic
from planned_time.repository.configuration import CONFIGURATION_REPO
from planned_time.repository.plan import PlanRepository
from planned_time.service.date_range import resolve_date_range
from planned_time.service.plan import map_plans
from planned_time.view.view.views.plan import diagnostics_view, planned_time_view

error_console = Console(stderr=True)


def get(
    from_date: Annotated[
        Optional[str],
        typer.Option(
            "--from",
            "--fromDate",
            help="The start date to get planned time for (defaults to the current day). Format: YYYY-MM-DD",
        ),
    ] = None,
    to_date: Annotated[
        Optional[str],
        typer.Option(
            "--to",
            "--toDate",
            help="The end date to get planned time for (defaults to the current day). Format: YYYY-MM-DD",
        ),
    ] = None,
    tomorrow: Annotated[
        bool,
        typer.Option("--tomorrow", help="Get planned time for tomorrow"),
    ] = False,
    week: Annotated[
        bool,
        typer.Option(
            "--week",
            help="Get planned time for the next week (including today)",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Report plan date ranges that were skipped or corrected",
        ),
    ] = False,
) -> None:
    """
    Get your planned time from Tempo. A span of up to 14 days can be specified.
    If no dates are provided, only the current day will be returned.
    """
    diagnostics: Optional[list[PlanDiagnostic]] = [] if verbose else None

    try:
        config = CONFIGURATION_REPO.get_config()
        account_id = config["accountId"]
        token = config["token"]
        jira_base_url = CONFIGURATION_REPO.get_jira_base_url()

        if not account_id or not token:
            raise MissingConfigError(
                "New install, who dis? It looks like you haven't run the config "
                "command yet to specify your account id and token."
            )

        query = resolve_date_range(
            from_date=from_date, to_date=to_date, tomorrow=tomorrow, week=week
        )
        plans = PlanRepository(account_id, token).get_plans(query)
        mapped_plans = map_plans(query, plans, diagnostics)
    except PlannedTimeError as e:
        error_console.print(f"[{ERROR_COLOR}]{escape(str(e))}[/{ERROR_COLOR}]")
        raise typer.Exit(1)

    planned_time_view(account_id, query, mapped_plans, jira_base_url)
    if diagnostics is not None:
        diagnostics_view(diagnostics, error_console)
