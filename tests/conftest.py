# SPDX-License-Identifier: MIT

from pathlib import Path

import pendulum
import pytest

from flightboard import configuration
from flightboard.model.flight import Flight
from flightboard.model.scale import ScaleFormat
from flightboard.model.task import Task
from flightboard.model.work_package import WorkPackage
from flightboard.repository.configuration import CONFIGURATION_REPO
from flightboard.repository.flight import FlightRepository
from flightboard.repository.work_package import WorkPackageRepository
from flightboard.template.flight import get_flight_template
from flightboard.template.work_package import get_work_package_template

FLIGHTS_YAML = """\
flights:
  - id: f-1
    flight_number: DY600
    airline: DY
    registration: LN-ABC
    aircraft_type: B738
    scheduled_departure_station: OSL
    scheduled_arrival_station: BGO
    scheduled_departure_time: "2024-01-01T06:00:00+00:00"
    scheduled_arrival_time: "2024-01-01T07:00:00+00:00"
    actual_departure_time: 2024-01-01T06:10:00Z
    actual_arrival_time: 2024-01-01T07:05:00Z
  - id: f-2
    flight_number: SK4001
    airline: SK
    registration: SE-RZZ
    aircraft_type: A320
    scheduled_departure_station: BGO
    scheduled_arrival_station: TRD
    scheduled_departure_time: "2024-01-01T09:00:00+00:00"
    scheduled_arrival_time: "2024-01-01T10:00:00+00:00"
  - flight_number: DY601
    airline: DY
    registration: LN-ABC
    aircraft_type: B738
    scheduled_departure_station: BGO
    scheduled_arrival_station: OSL
"""

WORK_PACKAGES_YAML = """\
work_packages:
  - id: wp-1
    name: A-check
    registration: LN-ABC
    station: BGO
    start_time: "2024-01-01T08:00:00+00:00"
    end_time: 2024-01-01T11:00:00Z
  - name: Wheel change
    registration: LN-XYZ
    station: OSL
    start_time: "2024-01-01T14:00:00+00:00"
    end_time: "2024-01-01T15:00:00+00:00"
"""


def utc(*args: int) -> pendulum.DateTime:
    return pendulum.datetime(*args, tz="UTC")


def make_task(
    id: str,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    type_index: int = 0,
    name: str = "DY600",
    start_name: str | None = None,
    end_name: str | None = None,
) -> Task:
    return {
        "id": id,
        "name": name,
        "start_time": start,
        "end_time": end,
        "type_index": type_index,
        "start_name": start_name,
        "end_name": end_name,
    }


def make_flight(id: str, **fields: object) -> Flight:
    flight = get_flight_template()
    flight["id"] = id
    for key, value in fields.items():
        flight[key] = value  # type: ignore[literal-required]
    return flight


def make_work_package(id: str, **fields: object) -> WorkPackage:
    work_package = get_work_package_template()
    work_package["id"] = id
    for key, value in fields.items():
        work_package[key] = value  # type: ignore[literal-required]
    return work_package


@pytest.fixture
def day_hour_formats() -> list[ScaleFormat]:
    return [
        {"unit": "day", "format": "DD"},
        {"unit": "hour", "format": "HH"},
    ]


@pytest.fixture
def flights() -> list[Flight]:
    return [
        make_flight(
            "f-1",
            flight_number="DY600",
            airline="DY",
            registration="LN-ABC",
            aircraft_type="B738",
            scheduled_departure_station="OSL",
            scheduled_arrival_station="BGO",
            scheduled_departure_time=utc(2024, 1, 1, 6),
            scheduled_arrival_time=utc(2024, 1, 1, 7),
            actual_departure_time=utc(2024, 1, 1, 6, 10),
            actual_arrival_time=utc(2024, 1, 1, 7, 5),
        ),
        make_flight(
            "f-2",
            flight_number="SK4001",
            airline="SK",
            registration="SE-RZZ",
            aircraft_type="A320",
            scheduled_departure_station="BGO",
            scheduled_arrival_station="TRD",
            scheduled_departure_time=utc(2024, 1, 1, 9),
            estimated_departure_time=utc(2024, 1, 1, 9, 30),
            scheduled_arrival_time=utc(2024, 1, 1, 10),
        ),
        make_flight(
            "f-3",
            flight_number="DY602",
            airline="DY",
            registration="LN-ABC",
            aircraft_type="B738",
            scheduled_departure_station="BGO",
            scheduled_arrival_station="SVG",
            scheduled_departure_time=utc(2024, 1, 1, 12),
            scheduled_arrival_time=utc(2024, 1, 1, 13),
        ),
        make_flight(
            "f-4",
            flight_number="WF100",
            airline="WF",
            registration=None,
            aircraft_type="DH8D",
            scheduled_departure_station="TOS",
            scheduled_arrival_station=None,
        ),
    ]


@pytest.fixture
def work_packages() -> list[WorkPackage]:
    return [
        make_work_package(
            "wp-1",
            name="A-check",
            registration="LN-ABC",
            station="BGO",
            start_time=utc(2024, 1, 1, 8),
            end_time=utc(2024, 1, 1, 11),
        ),
        make_work_package(
            "wp-2",
            name="Wheel change",
            registration="LN-XYZ",
            station="OSL",
            start_time=utc(2024, 1, 1, 14),
            end_time=utc(2024, 1, 1, 15),
        ),
        make_work_package("wp-3", name="Deferred defect", station="TOS"),
    ]


@pytest.fixture
def flights_file(tmp_path: Path) -> Path:
    path = tmp_path / "flights.yaml"
    path.write_text(FLIGHTS_YAML)
    return path


@pytest.fixture
def flight_repo(flights_file: Path) -> FlightRepository:
    return FlightRepository(flights_file)


@pytest.fixture
def work_packages_file(tmp_path: Path) -> Path:
    path = tmp_path / "work_packages.yaml"
    path.write_text(WORK_PACKAGES_YAML)
    return path


@pytest.fixture
def work_package_repo(work_packages_file: Path) -> WorkPackageRepository:
    return WorkPackageRepository(work_packages_file)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_path = tmp_path / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return config_path
