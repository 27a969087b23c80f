# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from flightboard.model.flight_filter import FlightFilter
from flightboard.repository.flight import FLIGHT_REPO
from flightboard.service.exceptions import CategoryNotFoundError, FlightNotFoundError
from flightboard.service.flight import (
    FLIGHT_CATEGORIES,
    get_category_values,
    search_flights,
)
from flightboard.terminal.custom_typer import AliasedTyperGroup
from flightboard.terminal.parse import parse_datetime
from flightboard.view.view.views import flight as flight_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def build_flight_filter(
    start: Optional[pendulum.DateTime] = None,
    end: Optional[pendulum.DateTime] = None,
    flight_numbers: Optional[list[str]] = None,
    airlines: Optional[list[str]] = None,
    registrations: Optional[list[str]] = None,
    aircraft_types: Optional[list[str]] = None,
    departure_stations: Optional[list[str]] = None,
    arrival_stations: Optional[list[str]] = None,
    limit: Optional[int] = None,
) -> FlightFilter:
    return {
        "start_time": start,
        "end_time": end,
        "flight_numbers": flight_numbers,
        "airlines": airlines,
        "registrations": registrations,
        "aircraft_types": aircraft_types,
        "departure_stations": departure_stations,
        "arrival_stations": arrival_stations,
        "limit": limit,
    }


@app.command("list, ls")
def list_flights(
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", "-nw", help="Truncate long column values")
    ] = False,
) -> None:
    """Display every known flight."""
    flights = FLIGHT_REPO.get_all_flights()
    flight_report.flights_view("flights", flights, no_wrap=no_wrap)


@app.command("search, s")
def search(
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--start",
            "-s",
            parser=parse_datetime,
            help="Earliest departure (YYYY-MM-DD[THH:mm], today, now, or day offset like 1, -1)",
        ),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            "-e",
            parser=parse_datetime,
            help="Latest arrival (YYYY-MM-DD[THH:mm], today, now, or day offset like 1, -1)",
        ),
    ] = None,
    flight_numbers: Annotated[
        Optional[list[str]],
        typer.Option("--flight-number", "-f", help="accepts multiple options"),
    ] = None,
    airlines: Annotated[
        Optional[list[str]],
        typer.Option("--airline", "-a", help="accepts multiple options"),
    ] = None,
    registrations: Annotated[
        Optional[list[str]],
        typer.Option("--registration", "-r", help="accepts multiple options"),
    ] = None,
    aircraft_types: Annotated[
        Optional[list[str]],
        typer.Option("--aircraft-type", "-t", help="accepts multiple options"),
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
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", "-nw", help="Truncate long column values")
    ] = False,
) -> None:
    """Search flights by time window and categorical values."""
    flight_filter = build_flight_filter(
        start=start,
        end=end,
        flight_numbers=flight_numbers,
        airlines=airlines,
        registrations=registrations,
        aircraft_types=aircraft_types,
        departure_stations=departure_stations,
        arrival_stations=arrival_stations,
        limit=limit,
    )
    flights = search_flights(FLIGHT_REPO.get_all_flights(), flight_filter)
    flight_report.flights_view("flight search", flights, no_wrap=no_wrap)


@app.command("show, sh", no_args_is_help=True)
def show(id: str) -> None:
    """Display a single flight."""
    try:
        flight = FLIGHT_REPO.get_flight(id)
    except FlightNotFoundError as e:
        Console().print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    flight_report.single_flight_view(flight)


@app.command("categories, c", no_args_is_help=True)
def categories(
    category: Annotated[
        str,
        typer.Argument(help=f"One of: {', '.join(FLIGHT_CATEGORIES)}"),
    ],
) -> None:
    """Display the distinct values of a flight category."""
    try:
        values = get_category_values(FLIGHT_REPO.get_all_flights(), category)
    except CategoryNotFoundError as e:
        Console().print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    flight_report.category_values_view(category, values)
