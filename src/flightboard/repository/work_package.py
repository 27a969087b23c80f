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
from flightboard.model.work_package import WorkPackage
from flightboard.service.exceptions import WorkPackageNotFoundError
from flightboard.template.work_package import get_work_package_template

logger = logging.getLogger(__name__)


class WorkPackageRepository:
    """Work packages held in memory, read lazily from the work packages data file."""

    def __init__(self, data_path: Optional[Path] = None) -> None:
        self._data_path = data_path
        self._work_packages: Optional[list[WorkPackage]] = None

    @property
    def data_path(self) -> Path:
        if self._data_path is not None:
            return self._data_path
        return configuration.DATA_WORK_PACKAGES_PATH

    @property
    def work_packages(self) -> list[WorkPackage]:
        if self._work_packages is None:
            self.__load_data()
        if self._work_packages is None:
            raise ValueError()
        return self._work_packages

    def __load_data(self) -> None:
        self._work_packages = []
        if not self.data_path.is_file():
            logger.info("No work package data found at %s", self.data_path)
            return

        raw_data = load(self.data_path.read_text(), Loader=Loader)
        if raw_data is None:
            return
        for raw_work_package in raw_data.get("work_packages") or []:
            self._work_packages.append(
                self.__convert_work_package_for_deserialization(raw_work_package)
            )
        logger.info(
            "Loaded %d work packages from %s", len(self._work_packages), self.data_path
        )

    def __convert_work_package_for_deserialization(
        self, raw_work_package: dict[str, Any]
    ) -> WorkPackage:
        work_package = get_work_package_template()
        for key in work_package:
            if key in raw_work_package:
                work_package[key] = raw_work_package[key]  # type: ignore[literal-required]
        work_package["start_time"] = time.datetime_from_value_optional(
            raw_work_package.get("start_time")
        )
        work_package["end_time"] = time.datetime_from_value_optional(
            raw_work_package.get("end_time")
        )
        if work_package["id"] is None:
            work_package["id"] = generate_entity_id()
        else:
            work_package["id"] = str(work_package["id"])
        return work_package

    def save_new_work_package(self, work_package: WorkPackage) -> EntityId:
        new_work_package = deepcopy(work_package)
        new_work_package["id"] = generate_entity_id()
        self.work_packages.append(new_work_package)
        logger.info("Work package %s created", new_work_package["id"])
        return new_work_package["id"]

    def get_all_work_packages(self) -> list[WorkPackage]:
        return deepcopy(self.work_packages)

    def get_work_package(self, id: EntityId) -> WorkPackage:
        for work_package in self.work_packages:
            if work_package["id"] == id:
                return deepcopy(work_package)
        raise WorkPackageNotFoundError(id)

    def modify_work_package(self, id: EntityId, /, **changes: Any) -> WorkPackage:
        """
        Update the given fields of a work package and return it.

        Raises:
            WorkPackageNotFoundError: If no work package has this id
            KeyError: If a field is not a work package field
        """
        matches = [wp for wp in self.work_packages if wp["id"] == id]
        if len(matches) == 0:
            raise WorkPackageNotFoundError(id)
        work_package = matches[0]

        for key, value in changes.items():
            if key == "id" or key not in work_package:
                raise KeyError(f"Work package has no modifiable field '{key}'")
            work_package[key] = value  # type: ignore[literal-required]

        logger.info("Work package %s updated", id)
        return deepcopy(work_package)

    def delete_work_package(self, id: EntityId) -> None:
        before = len(self.work_packages)
        self._work_packages = [wp for wp in self.work_packages if wp["id"] != id]
        if len(self._work_packages) != before:
            logger.info("Work package %s deleted", id)


WORK_PACKAGE_REPO = WorkPackageRepository()
