# SPDX-License-Identifier: MIT

from typing import Any, Iterable, Optional


class FlightServiceError(Exception):
    """Base exception for flight and work package lookups."""

    def __init__(
        self,
        message: str,
        code: str = "FLIGHT_SERVICE_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class FlightNotFoundError(FlightServiceError):
    """Raised when no flight has the requested id."""

    def __init__(self, flight_id: str):
        super().__init__(
            message=f"Flight with ID {flight_id} not found",
            code="FLIGHT_NOT_FOUND",
            details={"flight_id": flight_id},
        )


class WorkPackageNotFoundError(FlightServiceError):
    """Raised when no work package has the requested id."""

    def __init__(self, work_package_id: str):
        super().__init__(
            message=f"Work package with ID {work_package_id} not found",
            code="WORK_PACKAGE_NOT_FOUND",
            details={"work_package_id": work_package_id},
        )


class CategoryNotFoundError(FlightServiceError):
    """Raised when distinct values are requested for an unknown category."""

    def __init__(self, category: str, categories: Iterable[str]):
        super().__init__(
            message=f"Category {category} not found",
            code="CATEGORY_NOT_FOUND",
            details={"category": category, "categories": list(categories)},
        )
