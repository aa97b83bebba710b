# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from planned_time.configuration import APP_NAME
from planned_time.view.state import get_show_header


def header(account_id: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with account information.

    Args:
        account_id: The Tempo account the results belong to
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    account = f"[plum1]{account_id}[/plum1]"

    print(Padding(f"[dark_orange]{APP_NAME}[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(account, (0, 1)))
