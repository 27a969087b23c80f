# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from flightboard.model.entity_id import EntityId


class Flight(TypedDict):
    id: Optional[EntityId]
    flight_number: Optional[str]
    airline: Optional[str]
    registration: Optional[str]
    aircraft_type: Optional[str]
    scheduled_departure_station: Optional[str]
    scheduled_arrival_station: Optional[str]
    scheduled_departure_time: Optional[pendulum.DateTime]
    estimated_departure_time: Optional[pendulum.DateTime]
    actual_departure_time: Optional[pendulum.DateTime]
    scheduled_arrival_time: Optional[pendulum.DateTime]
    estimated_arrival_time: Optional[pendulum.DateTime]
    actual_arrival_time: Optional[pendulum.DateTime]
