# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from flightboard.terminal import configuration, flight, view, work_package
from flightboard.terminal.custom_typer import AliasedTyperGroup
from flightboard.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Flightboard - Flight operations timeline in the CLI",
    no_args_is_help=True,
)
app.add_typer(flight.app, name="flight, f")
app.add_typer(work_package.app, name="work-package, wp")
app.add_typer(view.app, name="view, v")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    Flightboard - Flight operations timeline in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
