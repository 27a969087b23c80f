# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

TimeUnitBase = Literal["hour", "day", "week", "month"]

TIME_UNIT_BASES: tuple[TimeUnitBase, ...] = ("hour", "day", "week", "month")


class TimeUnit(TypedDict):
    """A ruler granularity such as "hour", "day" or "hour-3" (base + step)."""

    base: TimeUnitBase
    step: int
