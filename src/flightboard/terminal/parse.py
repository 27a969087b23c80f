# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from flightboard.model.scale import ScaleFormat
from flightboard.service.time_marks import parse_time_unit
from flightboard.time import datetime_from_str_utc


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        return datetime_from_str_utc(datetime)

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today().add(days=days_offset).start_of("day")
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today().start_of("day").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday().start_of("day").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow().start_of("day").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_scale_format(scale_param: str) -> ScaleFormat:
    """
    Parse a scale given as UNIT=FORMAT, e.g. "day=DD MMM" or "hour-3=HH".

    Raises:
        typer.BadParameter: If the separator is missing or the unit is invalid
    """
    unit, separator, format = scale_param.partition("=")
    if separator == "" or unit.strip() == "" or format == "":
        raise typer.BadParameter(
            f"Scale must be in UNIT=FORMAT format (e.g. day=DD or hour-3=HH), got '{scale_param}'"
        )

    unit = unit.strip()
    try:
        parse_time_unit(unit)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    return {"unit": unit, "format": format}


def parse_scale_formats(scale_params: Optional[list[str]]) -> Optional[list[ScaleFormat]]:
    if not scale_params:
        return None
    return [parse_scale_format(scale_param) for scale_param in scale_params]
