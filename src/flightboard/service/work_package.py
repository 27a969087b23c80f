# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional

from flightboard.model.task import Task
from flightboard.model.work_package import WorkPackage
from flightboard.model.work_package_filter import WorkPackageFilter
from flightboard.service.exceptions import CategoryNotFoundError
from flightboard.service.filter import distinct_sorted, in_values

logger = logging.getLogger(__name__)

WORK_PACKAGE_CATEGORIES = ("registrations", "stations")

WORK_PACKAGE_TYPE_INDEX = 3


def search_work_packages(
    work_packages: Iterable[WorkPackage], work_package_filter: WorkPackageFilter
) -> list[WorkPackage]:
    """
    Return the work packages matching every criterion of the filter.

    A work package must start at or after start_time and end at or before
    end_time; one without a start (end) time never matches a start_time
    (end_time) bound. Empty lists match everything, limit truncates.
    """
    start_time = work_package_filter.get("start_time")
    end_time = work_package_filter.get("end_time")

    results: list[WorkPackage] = []
    for work_package in work_packages:
        if start_time is not None and (
            work_package["start_time"] is None or work_package["start_time"] < start_time
        ):
            continue
        if end_time is not None and (
            work_package["end_time"] is None or work_package["end_time"] > end_time
        ):
            continue
        if not in_values(
            work_package_filter.get("registrations"), work_package["registration"]
        ):
            continue
        if not in_values(work_package_filter.get("stations"), work_package["station"]):
            continue
        results.append(work_package)

    limit = work_package_filter.get("limit")
    if limit:
        results = results[:limit]

    logger.debug("Work package search matched %d work packages", len(results))
    return results


def get_category_values(
    work_packages: Iterable[WorkPackage], category: str
) -> list[str]:
    """
    Return the sorted distinct values of a work package category.

    Raises:
        CategoryNotFoundError: If the category is unknown
    """
    match category:
        case "registrations":
            return distinct_sorted(work_packages, lambda w: w["registration"])
        case "stations":
            return distinct_sorted(work_packages, lambda w: w["station"])
    raise CategoryNotFoundError(category, WORK_PACKAGE_CATEGORIES)


def work_package_to_task(work_package: WorkPackage) -> Optional[Task]:
    """Convert a work package to a timeline task, None if its times are unknown."""
    if (
        work_package["id"] is None
        or work_package["start_time"] is None
        or work_package["end_time"] is None
    ):
        return None

    return {
        "id": work_package["id"],
        "name": work_package["name"] or "",
        "start_time": work_package["start_time"],
        "end_time": work_package["end_time"],
        "type_index": WORK_PACKAGE_TYPE_INDEX,
        "start_name": work_package["station"],
        "end_name": None,
    }
