# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from flightboard import configuration, time
from flightboard.model.entity_id import EntityId, generate_entity_id
from flightboard.model.flight import Flight
from flightboard.service.exceptions import FlightNotFoundError
from flightboard.template.flight import get_flight_template

logger = logging.getLogger(__name__)

FLIGHT_TIME_FIELDS = (
    "scheduled_departure_time",
    "estimated_departure_time",
    "actual_departure_time",
    "scheduled_arrival_time",
    "estimated_arrival_time",
    "actual_arrival_time",
)


class FlightRepository:
    """
    Flights held in memory, read lazily from the flights data file.

    Changes only live for the lifetime of the repository.
    """

    def __init__(self, data_path: Optional[Path] = None) -> None:
        self._data_path = data_path
        self._flights: Optional[list[Flight]] = None

    @property
    def data_path(self) -> Path:
        if self._data_path is not None:
            return self._data_path
        return configuration.DATA_FLIGHTS_PATH

    @property
    def flights(self) -> list[Flight]:
        if self._flights is None:
            self.__load_data()
        if self._flights is None:
            raise ValueError()
        return self._flights

    def __load_data(self) -> None:
        self._flights = []
        if not self.data_path.is_file():
            logger.warning("No flight data found at %s", self.data_path)
            return

        raw_data = load(self.data_path.read_text(), Loader=Loader)
        if raw_data is None:
            return
        for raw_flight in raw_data.get("flights") or []:
            self._flights.append(self.__convert_flight_for_deserialization(raw_flight))
        logger.info("Loaded %d flights from %s", len(self._flights), self.data_path)

    def __convert_flight_for_deserialization(self, raw_flight: dict[str, Any]) -> Flight:
        flight = get_flight_template()
        for key in flight:
            if key in raw_flight:
                flight[key] = raw_flight[key]  # type: ignore[literal-required]
        for field in FLIGHT_TIME_FIELDS:
            flight[field] = time.datetime_from_value_optional(  # type: ignore[literal-required]
                raw_flight.get(field)
            )
        if flight["id"] is None:
            flight["id"] = generate_entity_id()
        else:
            flight["id"] = str(flight["id"])
        return flight

    def save_new_flight(self, flight: Flight) -> EntityId:
        new_flight = deepcopy(flight)
        new_flight["id"] = generate_entity_id()
        self.flights.append(new_flight)
        logger.info("Flight %s created", new_flight["id"])
        return new_flight["id"]

    def get_all_flights(self) -> list[Flight]:
        return deepcopy(self.flights)

    def get_flight(self, id: EntityId) -> Flight:
        for flight in self.flights:
            if flight["id"] == id:
                return deepcopy(flight)
        raise FlightNotFoundError(id)

    def modify_flight(self, id: EntityId, /, **changes: Any) -> Flight:
        """
        Update the given fields of a flight and return the updated flight.

        Raises:
            FlightNotFoundError: If no flight has this id
            KeyError: If a field is not a flight field
        """
        matches = [flight for flight in self.flights if flight["id"] == id]
        if len(matches) == 0:
            raise FlightNotFoundError(id)
        flight = matches[0]

        for key, value in changes.items():
            if key == "id" or key not in flight:
                raise KeyError(f"Flight has no modifiable field '{key}'")
            flight[key] = value  # type: ignore[literal-required]

        logger.info("Flight %s updated", id)
        return deepcopy(flight)

    def delete_flight(self, id: EntityId) -> None:
        before = len(self.flights)
        self._flights = [flight for flight in self.flights if flight["id"] != id]
        if len(self._flights) != before:
            logger.info("Flight %s deleted", id)


FLIGHT_REPO = FlightRepository()
