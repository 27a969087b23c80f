# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from flightboard.repository.configuration import CONFIGURATION_REPO
from flightboard.repository.flight import FLIGHT_REPO
from flightboard.repository.work_package import WORK_PACKAGE_REPO
from flightboard.service.aircraft import (
    AIRCRAFT_CATEGORIES,
    build_task_groups,
    get_aircraft_category_values,
)
from flightboard.service.exceptions import CategoryNotFoundError
from flightboard.service.flight import arrival_time, departure_time, search_flights
from flightboard.service.gantt import layout_gantt
from flightboard.service.scale import build_time_scales, layout_ruler
from flightboard.service.time_marks import InvalidRangeError
from flightboard.service.timeline import get_task_type_infos
from flightboard.service.work_package import search_work_packages
from flightboard.terminal.custom_typer import AliasedTyperGroup
from flightboard.terminal.flight import build_flight_filter
from flightboard.terminal.parse import parse_datetime, parse_scale_formats
from flightboard.terminal.work_package import build_work_package_filter
from flightboard.time import now_utc
from flightboard.view.view.views.flight import category_values_view
from flightboard.view.view.views.gantt import gantt_view, ruler_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

SCALE_HELP = "Scale as UNIT=FORMAT, coarsest first, repeatable (e.g. -sc 'day=DD MMM' -sc 'hour-3=HH')"


@app.command("ruler, r")
def ruler(
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--start",
            "-s",
            parser=parse_datetime,
            help="Start of the ruler (YYYY-MM-DD[THH:mm], today, now, or day offset like 1, -1)",
        ),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            "-e",
            parser=parse_datetime,
            help="End of the ruler (defaults to one day after the start)",
        ),
    ] = None,
    scales: Annotated[
        Optional[list[str]], typer.Option("--scale", "-sc", help=SCALE_HELP)
    ] = None,
    unit_width: Annotated[
        Optional[int],
        typer.Option("--unit-width", "-uw", min=1, help="Minimum width of a finest box"),
    ] = None,
) -> None:
    """Display a time ruler over a range."""
    config = CONFIGURATION_REPO.get_config()
    scale_formats = parse_scale_formats(scales) or config["scale_formats"]

    if start is None:
        start = now_utc().start_of("day")
    if end is None:
        end = start.add(days=1)

    try:
        time_scales = build_time_scales(start, end, scale_formats)
    except InvalidRangeError as e:
        raise typer.BadParameter(str(e))

    console = Console()
    ruler_layout = layout_ruler(
        time_scales, console.width, unit_width or config["unit_width"]
    )
    ruler_view(
        "ruler",
        ruler_layout,
        f"{start.format('YYYY-MM-DD HH:mm')} to {end.format('YYYY-MM-DD HH:mm')}",
    )


@app.command("gantt, g")
def gantt(
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--start",
            "-s",
            parser=parse_datetime,
            help="Start of the timeline (defaults to the earliest departure)",
        ),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            "-e",
            parser=parse_datetime,
            help="End of the timeline (defaults to the latest arrival)",
        ),
    ] = None,
    registrations: Annotated[
        Optional[list[str]],
        typer.Option("--registration", "-r", help="accepts multiple options"),
    ] = None,
    departure_stations: Annotated[
        Optional[list[str]],
        typer.Option("--from", help="Scheduled departure station, repeatable"),
    ] = None,
    arrival_stations: Annotated[
        Optional[list[str]],
        typer.Option("--to", help="Scheduled arrival station, repeatable"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", min=1, help="Maximum number of flights"),
    ] = None,
    work_package_limit: Annotated[
        Optional[int],
        typer.Option("--work-package-limit", "-wl", min=0, help="Maximum number of work packages, 0 hides them"),
    ] = None,
    expand: Annotated[
        Optional[list[str]],
        typer.Option("--expand", "-x", help="Registration to show one task per row, repeatable"),
    ] = None,
    expand_all: Annotated[
        bool, typer.Option("--expand-all", "-xa", help="Expand every registration")
    ] = False,
    scales: Annotated[
        Optional[list[str]], typer.Option("--scale", "-sc", help=SCALE_HELP)
    ] = None,
    unit_width: Annotated[
        Optional[int],
        typer.Option("--unit-width", "-uw", min=1, help="Minimum width of a finest box"),
    ] = None,
    left_width: Annotated[
        int,
        typer.Option("--left-width", "-lw", min=4, help="Width of left column for registrations"),
    ] = 20,
) -> None:
    """Display flights and work packages per aircraft registration on a gantt timeline."""
    config = CONFIGURATION_REPO.get_config()
    scale_formats = parse_scale_formats(scales) or config["scale_formats"]

    flight_filter = build_flight_filter(
        start=start,
        end=end,
        registrations=registrations,
        departure_stations=departure_stations,
        arrival_stations=arrival_stations,
        limit=limit,
    )
    flights = search_flights(FLIGHT_REPO.get_all_flights(), flight_filter)

    # Work packages sit at one station, match it against either flight end
    stations = (departure_stations or []) + (arrival_stations or [])
    work_package_filter = build_work_package_filter(
        start=start,
        end=end,
        registrations=registrations,
        stations=stations,
        limit=work_package_limit,
    )
    work_packages = (
        []
        if work_package_limit == 0
        else search_work_packages(
            WORK_PACKAGE_REPO.get_all_work_packages(), work_package_filter
        )
    )

    if start is None:
        starts = [t for t in map(departure_time, flights) if t is not None]
        starts += [wp["start_time"] for wp in work_packages if wp["start_time"] is not None]
        start = min(starts) if starts else now_utc().start_of("day")
    if end is None:
        ends = [t for t in map(arrival_time, flights) if t is not None]
        ends += [wp["end_time"] for wp in work_packages if wp["end_time"] is not None]
        end = max(ends) if ends else start.add(days=1)

    task_groups = build_task_groups(flights, work_packages)
    expanded_groups = (
        {group["name"] for group in task_groups} if expand_all else set(expand or [])
    )

    console = Console()
    try:
        layout = layout_gantt(
            task_groups,
            expanded_groups,
            start,
            end,
            scale_formats,
            viewport_width=console.width - left_width,
            unit_width=unit_width or config["unit_width"],
            type_infos=get_task_type_infos(config["task_types"]),
            glyph_width=config["glyph_width"],
        )
    except InvalidRangeError as e:
        raise typer.BadParameter(str(e))

    gantt_view(
        "gantt",
        layout,
        left_column_width=left_width,
        sub_header=f"{start.format('YYYY-MM-DD HH:mm')} to {end.format('YYYY-MM-DD HH:mm')}",
    )


@app.command("categories, c", no_args_is_help=True)
def categories(
    category: Annotated[
        str,
        typer.Argument(help=f"One of: {', '.join(AIRCRAFT_CATEGORIES)}"),
    ],
) -> None:
    """Display the registrations or stations of flights and work packages together."""
    try:
        values = get_aircraft_category_values(
            FLIGHT_REPO.get_all_flights(),
            WORK_PACKAGE_REPO.get_all_work_packages(),
            category,
        )
    except CategoryNotFoundError as e:
        Console().print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    category_values_view(category, values)
