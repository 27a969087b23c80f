# SPDX-License-Identifier: MIT

from flightboard.model.flight import Flight


def get_flight_template() -> Flight:
    return {
        "id": None,
        "flight_number": None,
        "airline": None,
        "registration": None,
        "aircraft_type": None,
        "scheduled_departure_station": None,
        "scheduled_arrival_station": None,
        "scheduled_departure_time": None,
        "estimated_departure_time": None,
        "actual_departure_time": None,
        "scheduled_arrival_time": None,
        "estimated_arrival_time": None,
        "actual_arrival_time": None,
    }
