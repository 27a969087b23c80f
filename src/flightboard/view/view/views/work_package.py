# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from flightboard.model.work_package import WorkPackage
from flightboard.time import datetime_to_display_local_datetime_str_optional
from flightboard.view.view.views.header import header

DEFAULT_WORK_PACKAGE_COLUMNS = [
    "name",
    "registration",
    "station",
    "start_time",
    "end_time",
]


def work_packages_view(
    report_name: str,
    work_packages: list[WorkPackage],
    columns: list[str] = DEFAULT_WORK_PACKAGE_COLUMNS,
    no_wrap: bool = False,
) -> None:
    header(report_name, f"{len(work_packages)} work packages")

    work_packages_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap:
            work_packages_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            work_packages_table.add_column(column)

    for work_package in work_packages:
        row = []
        for column in columns:
            value = work_package.get(column)
            if isinstance(value, pendulum.DateTime):
                row.append(datetime_to_display_local_datetime_str_optional(value) or "")
            else:
                row.append("" if value is None else str(value))
        work_packages_table.add_row(*row)

    console = Console()
    console.print(work_packages_table)


def single_work_package_view(work_package: WorkPackage) -> None:
    header("work package", work_package["name"])

    work_package_table = Table(box=box.SIMPLE)
    work_package_table.add_column("property")
    work_package_table.add_column("value")

    for key, value in work_package.items():
        if isinstance(value, pendulum.DateTime):
            work_package_table.add_row(
                key, datetime_to_display_local_datetime_str_optional(value)
            )
        else:
            work_package_table.add_row(key, "" if value is None else str(value))

    console = Console()
    console.print(work_package_table)
