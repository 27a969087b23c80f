# SPDX-License-Identifier: MIT

import re
from typing import cast

import pendulum

from flightboard.model.time_unit import TIME_UNIT_BASES, TimeUnit, TimeUnitBase

_TIME_UNIT_PATTERN = re.compile(r"^(?P<base>[a-z]+)(?:-(?P<step>-?\d+))?$")


class InvalidRangeError(ValueError):
    """Raised when a time range is reversed or a unit step is not positive."""

    pass


def parse_time_unit(unit: str) -> TimeUnit:
    """
    Parse a unit string such as "hour", "hour-3", "day", "week" or "month".

    Only hours support a step other than 1: "hour-3" anchors at 00, 03, 06...
    of each calendar day.

    Raises:
        InvalidRangeError: If the step is zero or negative
        ValueError: If the unit is unknown or the step is not supported
    """
    match = _TIME_UNIT_PATTERN.match(unit.strip().lower())
    if match is None or match.group("base") not in TIME_UNIT_BASES:
        raise ValueError(
            f"Unknown time unit '{unit}', expected one of: {', '.join(TIME_UNIT_BASES)}"
        )

    base = cast(TimeUnitBase, match.group("base"))
    step = int(match.group("step")) if match.group("step") is not None else 1

    if step <= 0:
        raise InvalidRangeError(f"Time unit step must be positive, got {step}")
    if base != "hour" and step != 1:
        raise ValueError(f"Only hour units support a step, got '{unit}'")

    return {"base": base, "step": step}


def _wall_clock_boundary(
    date: pendulum.Date, hour: int, reference: pendulum.DateTime
) -> pendulum.DateTime:
    """
    The instant showing `hour` o'clock on `date` in the timezone of `reference`.

    An ambiguous wall clock time keeps the fold of `reference`. A wall clock
    time skipped by a DST change resolves to the first instant after the gap.
    """
    boundary = pendulum.datetime(
        date.year, date.month, date.day, hour, tz=reference.timezone, fold=reference.fold
    )
    if boundary.hour != hour or boundary.day != date.day:
        boundary = pendulum.datetime(
            date.year, date.month, date.day, hour, tz=reference.timezone, fold=1
        )
    return boundary


def round_down(time: pendulum.DateTime, unit: str) -> pendulum.DateTime:
    """Return the boundary of `unit` at or before `time`."""
    time_unit = parse_time_unit(unit)

    match time_unit["base"]:
        case "hour":
            anchored_hour = (time.hour // time_unit["step"]) * time_unit["step"]
            return _wall_clock_boundary(time.date(), anchored_hour, time)
        case "day":
            return _wall_clock_boundary(time.date(), 0, time)
        case "week":
            return _wall_clock_boundary(time.date().start_of("week"), 0, time)
        case "month":
            return _wall_clock_boundary(time.date().start_of("month"), 0, time)


def next_boundary(time: pendulum.DateTime, unit: str) -> pendulum.DateTime:
    """Return the first boundary of `unit` strictly after `time`."""
    time_unit = parse_time_unit(unit)
    boundary = round_down(time, unit)

    match time_unit["base"]:
        case "hour":
            # A step that does not divide 24 is cut short at midnight. Around a
            # DST change the wall clock anchor of boundary + step can be the
            # same boundary again, so keep moving until it passes time.
            offset = time_unit["step"]
            candidate = round_down(boundary.add(hours=offset), unit)
            while candidate <= time:
                offset += 1
                candidate = round_down(boundary.add(hours=offset), unit)
            return candidate
        case "day":
            return _wall_clock_boundary(boundary.date().add(days=1), 0, boundary)
        case "week":
            return _wall_clock_boundary(boundary.date().add(weeks=1), 0, boundary)
        case "month":
            return _wall_clock_boundary(boundary.date().add(months=1), 0, boundary)


def round_up(time: pendulum.DateTime, unit: str) -> pendulum.DateTime:
    """Return the boundary of `unit` at or after `time`."""
    boundary = round_down(time, unit)
    if boundary == time:
        return boundary
    return next_boundary(time, unit)


def get_time_marks_of_interval(
    min_time: pendulum.DateTime, max_time: pendulum.DateTime, unit: str
) -> list[pendulum.DateTime]:
    """
    Generate the boundaries of `unit` covering [min_time, max_time].

    The first mark is the boundary at or before min_time and the last mark is
    the boundary at or after max_time. Consecutive marks delimit one box, so
    at least two marks are always returned.

    Args:
        min_time: Start of the range
        max_time: End of the range
        unit: Unit string, see parse_time_unit

    Returns:
        Strictly increasing list of boundary timestamps

    Raises:
        InvalidRangeError: If min_time is after max_time
    """
    if min_time > max_time:
        raise InvalidRangeError(
            f"Range start {min_time.isoformat()} is after range end {max_time.isoformat()}"
        )

    current = round_down(min_time, unit)
    end = round_up(max_time, unit)

    marks = [current]
    while current < end or len(marks) < 2:
        following = next_boundary(current, unit)
        if following <= current:
            raise RuntimeError(
                f"Time unit '{unit}' did not advance past {current.isoformat()}"
            )
        current = following
        marks.append(current)

    return marks
