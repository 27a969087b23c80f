# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_value_optional(
    value: Optional[str | datetime.datetime],
) -> Optional[pendulum.DateTime]:
    """Accept either an ISO string or a datetime already parsed by the YAML loader."""
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="UTC")
    return datetime_from_str(value)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def milliseconds_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    """Signed number of milliseconds from start to end."""
    return (end - start).total_seconds() * 1000
