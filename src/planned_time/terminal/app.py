# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from planned_time.terminal.configuration import config
from planned_time.terminal.custom_typer import AliasedTyperGroup
from planned_time.terminal.get import get
from planned_time.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="tempo-planned-time - View your Tempo planned time in the CLI",
    no_args_is_help=True,
)
app.command(name="get, g")(get)
app.command(name="config, c")(config)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output above results",
        ),
    ] = False,
) -> None:
    """
    tempo-planned-time - View your Tempo planned time in the CLI

    Global options that apply to all commands.
    """
    view_state.set_show_header(not no_header)


def run() -> None:
    app()
