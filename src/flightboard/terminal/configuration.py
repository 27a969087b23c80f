# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from flightboard import configuration
from flightboard.repository.configuration import CONFIGURATION_REPO
from flightboard.terminal.custom_typer import AliasedTyperGroup
from flightboard.terminal.parse import parse_scale_formats

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("unit_width", str(config["unit_width"]))
    table.add_row("glyph_width", str(config["glyph_width"]))
    table.add_row(
        "scale_formats",
        ", ".join(f"{s['unit']}={s['format']}" for s in config["scale_formats"]),
    )
    table.add_row(
        "task_types",
        ", ".join(
            f"{t['type_index']}:{t.get('caption') or ''} ({t['bar_color']})"
            for t in config["task_types"]
        ),
    )
    table.add_row("log_level", config.get("log_level", "WARNING"))

    console.print(table)


@app.command("set, s")
def set_config(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Show report headers"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding flights.yaml"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    unit_width: Annotated[
        Optional[int],
        typer.Option("--unit-width", min=1, help="Minimum width of a finest ruler box"),
    ] = None,
    glyph_width: Annotated[
        Optional[float],
        typer.Option("--glyph-width", min=0.1, help="Average width of a label character"),
    ] = None,
    scales: Annotated[
        Optional[list[str]],
        typer.Option("--scale", "-sc", help="Default scale as UNIT=FORMAT, coarsest first, repeatable"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"One of: {', '.join(LOG_LEVELS)}"),
    ] = None,
) -> None:
    """Change configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of: {', '.join(LOG_LEVELS)}")

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        unit_width=unit_width,
        glyph_width=glyph_width,
        scale_formats=parse_scale_formats(scales),
        log_level=log_level.upper() if log_level is not None else None,
    )
    view()
