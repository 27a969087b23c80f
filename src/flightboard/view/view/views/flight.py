# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from flightboard.model.flight import Flight
from flightboard.service.flight import arrival_time, departure_time
from flightboard.time import datetime_to_display_local_datetime_str_optional
from flightboard.view.view.views.header import header

DEFAULT_FLIGHT_COLUMNS = [
    "flight_number",
    "airline",
    "registration",
    "aircraft_type",
    "scheduled_departure_station",
    "scheduled_arrival_station",
    "departure",
    "arrival",
]


def flights_view(
    report_name: str,
    flights: list[Flight],
    columns: list[str] = DEFAULT_FLIGHT_COLUMNS,
    no_wrap: bool = False,
) -> None:
    header(report_name, f"{len(flights)} flights")

    flights_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap:
            flights_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            flights_table.add_column(column)

    for flight in flights:
        row = []
        for column in columns:
            column_value = ""
            if column == "departure":
                column_value = (
                    datetime_to_display_local_datetime_str_optional(
                        departure_time(flight)
                    )
                    or ""
                )
            elif column == "arrival":
                column_value = (
                    datetime_to_display_local_datetime_str_optional(arrival_time(flight))
                    or ""
                )
            elif isinstance(flight.get(column), pendulum.DateTime):
                column_value = (
                    datetime_to_display_local_datetime_str_optional(flight.get(column))  # type: ignore[arg-type]
                    or ""
                )
            elif flight.get(column) is not None:
                column_value = str(flight.get(column))
            row.append(column_value)
        flights_table.add_row(*row)

    console = Console()
    console.print(flights_table)


def single_flight_view(flight: Flight) -> None:
    header("flight", flight["flight_number"])

    flight_table = Table(box=box.SIMPLE)
    flight_table.add_column("property")
    flight_table.add_column("value")

    for key, value in flight.items():
        if isinstance(value, pendulum.DateTime):
            flight_table.add_row(
                key, datetime_to_display_local_datetime_str_optional(value)
            )
        else:
            flight_table.add_row(key, "" if value is None else str(value))

    console = Console()
    console.print(flight_table)


def category_values_view(category: str, values: list[str]) -> None:
    header("categories", category)

    console = Console()
    if not values:
        console.print("\n[dim]No values[/dim]\n")
        return
    for value in values:
        console.print(f"  {value}")
