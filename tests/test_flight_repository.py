# SPDX-License-Identifier: MIT

import pytest

from conftest import make_flight, utc
from flightboard.repository.flight import FlightRepository
from flightboard.service.exceptions import FlightNotFoundError


def test_loads_flights_with_string_and_timestamp_times(flight_repo):
    flight = flight_repo.get_flight("f-1")

    assert flight["flight_number"] == "DY600"
    assert flight["scheduled_departure_time"] == utc(2024, 1, 1, 6)
    assert flight["actual_departure_time"] == utc(2024, 1, 1, 6, 10)
    assert flight["actual_arrival_time"] == utc(2024, 1, 1, 7, 5)
    assert flight["estimated_departure_time"] is None


def test_flight_without_id_gets_one(flight_repo):
    flights = flight_repo.get_all_flights()

    assert len(flights) == 3
    assert flights[2]["flight_number"] == "DY601"
    assert isinstance(flights[2]["id"], str)
    assert flights[2]["scheduled_departure_time"] is None


def test_missing_data_file_gives_no_flights(tmp_path):
    repo = FlightRepository(tmp_path / "missing.yaml")

    assert repo.get_all_flights() == []


def test_empty_data_file_gives_no_flights(tmp_path):
    path = tmp_path / "flights.yaml"
    path.write_text("")

    assert FlightRepository(path).get_all_flights() == []


def test_unknown_flight(flight_repo):
    with pytest.raises(FlightNotFoundError):
        flight_repo.get_flight("nope")


def test_returned_flights_are_copies(flight_repo):
    flight_repo.get_all_flights()[0]["registration"] = "LN-XXX"
    flight_repo.get_flight("f-1")["registration"] = "LN-YYY"

    assert flight_repo.get_flight("f-1")["registration"] == "LN-ABC"


def test_save_new_flight(flight_repo):
    flight = make_flight("ignored", flight_number="DY700")

    new_id = flight_repo.save_new_flight(flight)

    assert new_id != "ignored"
    assert flight_repo.get_flight(new_id)["flight_number"] == "DY700"
    assert len(flight_repo.get_all_flights()) == 4


def test_modify_flight(flight_repo):
    updated = flight_repo.modify_flight(
        "f-2", estimated_departure_time=utc(2024, 1, 1, 9, 45)
    )

    assert updated["estimated_departure_time"] == utc(2024, 1, 1, 9, 45)
    assert flight_repo.get_flight("f-2")["estimated_departure_time"] == utc(
        2024, 1, 1, 9, 45
    )


@pytest.mark.parametrize("field", ["id", "gate"])
def test_modify_flight_rejects_unknown_fields(flight_repo, field):
    with pytest.raises(KeyError):
        flight_repo.modify_flight("f-2", **{field: "x"})


def test_modify_unknown_flight(flight_repo):
    with pytest.raises(FlightNotFoundError):
        flight_repo.modify_flight("nope", airline="DY")


def test_delete_flight(flight_repo):
    flight_repo.delete_flight("f-1")
    flight_repo.delete_flight("nope")

    assert [flight["id"] for flight in flight_repo.get_all_flights()][:1] == ["f-2"]
    with pytest.raises(FlightNotFoundError):
        flight_repo.get_flight("f-1")
