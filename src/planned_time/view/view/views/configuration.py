# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table

from planned_time import configuration


def mask_token(token: Optional[str]) -> str:
    if not token:
        return "None"
    if len(token) <= 4:
        return "*" * len(token)
    return f"{'*' * (len(token) - 4)}{token[-4:]}"


def configuration_view(
    config: configuration.Configuration,
    jira_base_url: str,
    title: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Display the stored configuration with the token masked."""
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("accountId", config["accountId"] or "None")
    table.add_row("token", mask_token(config["token"]))
    table.add_row(
        "jiraBaseUrl",
        jira_base_url if config["jiraBaseUrl"] else f"{jira_base_url} (default)",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    if console is None:
        console = Console()
    console.print(table)
