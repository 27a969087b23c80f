# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from flightboard.model.work_package_filter import WorkPackageFilter
from flightboard.repository.work_package import WORK_PACKAGE_REPO
from flightboard.service.exceptions import (
    CategoryNotFoundError,
    WorkPackageNotFoundError,
)
from flightboard.service.work_package import (
    WORK_PACKAGE_CATEGORIES,
    get_category_values,
    search_work_packages,
)
from flightboard.terminal.custom_typer import AliasedTyperGroup
from flightboard.terminal.parse import parse_datetime
from flightboard.view.view.views import work_package as work_package_report
from flightboard.view.view.views.flight import category_values_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def build_work_package_filter(
    start: Optional[pendulum.DateTime] = None,
    end: Optional[pendulum.DateTime] = None,
    registrations: Optional[list[str]] = None,
    stations: Optional[list[str]] = None,
    limit: Optional[int] = None,
) -> WorkPackageFilter:
    return {
        "start_time": start,
        "end_time": end,
        "registrations": registrations,
        "stations": stations,
        "limit": limit,
    }


@app.command("list, ls")
def list_work_packages(
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", "-nw", help="Truncate long column values")
    ] = False,
) -> None:
    """Display every known work package."""
    work_packages = WORK_PACKAGE_REPO.get_all_work_packages()
    work_package_report.work_packages_view("work packages", work_packages, no_wrap=no_wrap)


@app.command("search, s")
def search(
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--start",
            "-s",
            parser=parse_datetime,
            help="Earliest start (YYYY-MM-DD[THH:mm], today, now, or day offset like 1, -1)",
        ),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            "-e",
            parser=parse_datetime,
            help="Latest end (YYYY-MM-DD[THH:mm], today, now, or day offset like 1, -1)",
        ),
    ] = None,
    registrations: Annotated[
        Optional[list[str]],
        typer.Option("--registration", "-r", help="accepts multiple options"),
    ] = None,
    stations: Annotated[
        Optional[list[str]],
        typer.Option("--station", help="accepts multiple options"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", min=1, help="Maximum number of work packages"),
    ] = None,
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", "-nw", help="Truncate long column values")
    ] = False,
) -> None:
    """Search work packages by time window, registration and station."""
    work_package_filter = build_work_package_filter(
        start=start,
        end=end,
        registrations=registrations,
        stations=stations,
        limit=limit,
    )
    work_packages = search_work_packages(
        WORK_PACKAGE_REPO.get_all_work_packages(), work_package_filter
    )
    work_package_report.work_packages_view(
        "work package search", work_packages, no_wrap=no_wrap
    )


@app.command("show, sh", no_args_is_help=True)
def show(id: str) -> None:
    """Display a single work package."""
    try:
        work_package = WORK_PACKAGE_REPO.get_work_package(id)
    except WorkPackageNotFoundError as e:
        Console().print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    work_package_report.single_work_package_view(work_package)


@app.command("categories, c", no_args_is_help=True)
def categories(
    category: Annotated[
        str,
        typer.Argument(help=f"One of: {', '.join(WORK_PACKAGE_CATEGORIES)}"),
    ],
) -> None:
    """Display the distinct values of a work package category."""
    try:
        values = get_category_values(WORK_PACKAGE_REPO.get_all_work_packages(), category)
    except CategoryNotFoundError as e:
        Console().print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    category_values_view(category, values)
