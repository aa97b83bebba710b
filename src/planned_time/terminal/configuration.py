# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from planned_time.color import ERROR_COLOR, SUCCESS_COLOR
from planned_time.error import PlannedTimeError
from planned_time.repository.configuration import CONFIGURATION_REPO
from planned_time.view.view.views.configuration import configuration_view


def config(
    account_id: Annotated[
        Optional[str],
        typer.Option("--account", "-a", help="Your Tempo account id"),
    ] = None,
    token: Annotated[
        Optional[str],
        typer.Option("--token", "-t", help="Your Tempo access token"),
    ] = None,
    jira_base_url: Annotated[
        Optional[str],
        typer.Option(
            "--url",
            "-u",
            help="Jira base URL used for task links, e.g. https://mycompany.atlassian.net",
        ),
    ] = None,
) -> None:
    """
    Specify data (i.e. accountId and accessToken) needed for subsequent Tempo API calls.
    Also allows a custom jiraBaseUrl to be specified for display purposes.
    Without options, the current configuration is displayed.
    """
    console = Console()

    try:
        if account_id is None and token is None and jira_base_url is None:
            configuration_view(
                CONFIGURATION_REPO.get_config(), CONFIGURATION_REPO.get_jira_base_url()
            )
            return

        CONFIGURATION_REPO.update_config(
            account_id=account_id,
            token=token,
            jira_base_url=jira_base_url,
        )
        CONFIGURATION_REPO.flush()
    except PlannedTimeError as e:
        error_console = Console(stderr=True)
        error_console.print(f"[{ERROR_COLOR}]{escape(str(e))}[/{ERROR_COLOR}]")
        raise typer.Exit(1)

    console.print(
        f"[{SUCCESS_COLOR}]Configuration updated successfully![/{SUCCESS_COLOR}]\n"
    )
    configuration_view(
        CONFIGURATION_REPO.get_config(),
        CONFIGURATION_REPO.get_jira_base_url(),
        title="Updated Configuration",
    )
