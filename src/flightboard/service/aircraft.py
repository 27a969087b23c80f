# SPDX-License-Identifier: MIT

import logging
from typing import Iterable

from flightboard.model.flight import Flight
from flightboard.model.task import Task, TaskGroup
from flightboard.model.work_package import WorkPackage
from flightboard.service import flight as flight_service
from flightboard.service import work_package as work_package_service
from flightboard.service.exceptions import CategoryNotFoundError

logger = logging.getLogger(__name__)

AIRCRAFT_CATEGORIES = ("registrations", "stations")

UNKNOWN_REGISTRATION = "[no registration]"


def get_aircraft_category_values(
    flights: Iterable[Flight], work_packages: Iterable[WorkPackage], category: str
) -> list[str]:
    """
    Merge the registrations or stations of flights and work packages.

    Raises:
        CategoryNotFoundError: If the category is not shared by both records
    """
    if category not in AIRCRAFT_CATEGORIES:
        raise CategoryNotFoundError(category, AIRCRAFT_CATEGORIES)

    values = set(flight_service.get_category_values(flights, category))
    values.update(work_package_service.get_category_values(work_packages, category))
    return sorted(values)


def build_task_groups(
    flights: Iterable[Flight], work_packages: Iterable[WorkPackage] = ()
) -> list[TaskGroup]:
    """
    Group flights and work packages into one timeline row band per aircraft
    registration.

    Groups are sorted by registration and tasks by start time. Records
    without known start and end times are left out.
    """
    tasks: list[tuple[str, Task]] = []
    skipped = 0
    for flight in flights:
        task = flight_service.flight_to_task(flight)
        if task is None:
            skipped += 1
            continue
        tasks.append((flight["registration"] or UNKNOWN_REGISTRATION, task))
    for work_package in work_packages:
        task = work_package_service.work_package_to_task(work_package)
        if task is None:
            skipped += 1
            continue
        tasks.append((work_package["registration"] or UNKNOWN_REGISTRATION, task))

    if skipped:
        logger.info("Left %d records without known times off the timeline", skipped)

    groups: dict[str, list[Task]] = {}
    for registration, task in tasks:
        groups.setdefault(registration, []).append(task)

    return [
        {
            "name": registration,
            "tasks": sorted(groups[registration], key=lambda t: t["start_time"]),
        }
        for registration in sorted(groups)
    ]
