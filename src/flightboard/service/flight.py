# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional

import pendulum

from flightboard.model.flight import Flight
from flightboard.model.flight_filter import FlightFilter
from flightboard.model.task import Task
from flightboard.service.exceptions import CategoryNotFoundError
from flightboard.service.filter import distinct_sorted, in_values

logger = logging.getLogger(__name__)

FLIGHT_CATEGORIES = (
    "registrations",
    "airlines",
    "aircraftTypes",
    "flightNumbers",
    "stations",
)

SCHEDULED_TYPE_INDEX = 0
ESTIMATED_TYPE_INDEX = 1
ACTUAL_TYPE_INDEX = 2


def departure_time(flight: Flight) -> Optional[pendulum.DateTime]:
    """Best known departure time: actual, then estimated, then scheduled."""
    return (
        flight["actual_departure_time"]
        or flight["estimated_departure_time"]
        or flight["scheduled_departure_time"]
    )


def arrival_time(flight: Flight) -> Optional[pendulum.DateTime]:
    """Best known arrival time: actual, then estimated, then scheduled."""
    return (
        flight["actual_arrival_time"]
        or flight["estimated_arrival_time"]
        or flight["scheduled_arrival_time"]
    )


def search_flights(
    flights: Iterable[Flight], flight_filter: FlightFilter
) -> list[Flight]:
    """
    Return the flights matching every criterion of the filter.

    - start_time: best known departure time must be at or after it
    - end_time: best known arrival time must be at or before it
    - list criteria: the flight's value must be one of the listed values,
      an empty or missing list matches everything
    - limit: keep at most this many results

    A flight without a known departure (arrival) time never matches a
    start_time (end_time) bound.
    """
    start_time = flight_filter.get("start_time")
    end_time = flight_filter.get("end_time")

    results: list[Flight] = []
    for flight in flights:
        if start_time is not None:
            flight_departure = departure_time(flight)
            if flight_departure is None or flight_departure < start_time:
                continue
        if end_time is not None:
            flight_arrival = arrival_time(flight)
            if flight_arrival is None or flight_arrival > end_time:
                continue
        if not in_values(flight_filter.get("flight_numbers"), flight["flight_number"]):
            continue
        if not in_values(flight_filter.get("airlines"), flight["airline"]):
            continue
        if not in_values(flight_filter.get("registrations"), flight["registration"]):
            continue
        if not in_values(flight_filter.get("aircraft_types"), flight["aircraft_type"]):
            continue
        if not in_values(
            flight_filter.get("departure_stations"),
            flight["scheduled_departure_station"],
        ):
            continue
        if not in_values(
            flight_filter.get("arrival_stations"), flight["scheduled_arrival_station"]
        ):
            continue
        results.append(flight)

    limit = flight_filter.get("limit")
    if limit:
        results = results[:limit]

    logger.debug("Flight search matched %d flights", len(results))
    return results


def get_category_values(flights: Iterable[Flight], category: str) -> list[str]:
    """
    Return the sorted distinct values of a flight category.

    "stations" merges departure and arrival stations.

    Raises:
        CategoryNotFoundError: If the category is unknown
    """
    match category:
        case "registrations":
            return distinct_sorted(flights, lambda f: f["registration"])
        case "airlines":
            return distinct_sorted(flights, lambda f: f["airline"])
        case "aircraftTypes":
            return distinct_sorted(flights, lambda f: f["aircraft_type"])
        case "flightNumbers":
            return distinct_sorted(flights, lambda f: f["flight_number"])
        case "stations":
            return distinct_sorted(
                flights,
                lambda f: f["scheduled_departure_station"],
                lambda f: f["scheduled_arrival_station"],
            )
    raise CategoryNotFoundError(category, FLIGHT_CATEGORIES)


def __flight_type_index(flight: Flight) -> int:
    if flight["actual_departure_time"] is not None:
        return ACTUAL_TYPE_INDEX
    if flight["estimated_departure_time"] is not None:
        return ESTIMATED_TYPE_INDEX
    return SCHEDULED_TYPE_INDEX


def flight_to_task(flight: Flight) -> Optional[Task]:
    """Convert a flight to a timeline task, None if its times are unknown."""
    start_time = departure_time(flight)
    end_time = arrival_time(flight)
    if flight["id"] is None or start_time is None or end_time is None:
        return None

    return {
        "id": flight["id"],
        "name": flight["flight_number"] or "",
        "start_time": start_time,
        "end_time": end_time,
        "type_index": __flight_type_index(flight),
        "start_name": flight["scheduled_departure_station"],
        "end_name": flight["scheduled_arrival_station"],
    }

