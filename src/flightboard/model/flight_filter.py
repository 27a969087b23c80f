# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class FlightFilter(TypedDict, total=False):
    start_time: Optional[pendulum.DateTime]
    end_time: Optional[pendulum.DateTime]
    flight_numbers: Optional[list[str]]
    airlines: Optional[list[str]]
    registrations: Optional[list[str]]
    aircraft_types: Optional[list[str]]
    departure_stations: Optional[list[str]]
    arrival_stations: Optional[list[str]]
    limit: Optional[int]
