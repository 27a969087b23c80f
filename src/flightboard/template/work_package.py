# SPDX-License-Identifier: MIT

from flightboard.model.work_package import WorkPackage


def get_work_package_template() -> WorkPackage:
    return {
        "id": None,
        "name": None,
        "registration": None,
        "station": None,
        "start_time": None,
        "end_time": None,
    }
