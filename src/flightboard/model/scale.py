# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class ScaleFormat(TypedDict):
    # e.g. "hour", "hour-3", "day", "week", "month"
    unit: str
    # pendulum format string, e.g. "DD MMM" or "HH"
    format: str


class TimeBox(TypedDict):
    time: pendulum.DateTime
    weight: int
    text: str


class TimeScale(TypedDict):
    unit: str
    boxes: list[TimeBox]


class RulerBox(TypedDict):
    time: pendulum.DateTime
    width: int
    text: str


class RulerLayout(TypedDict):
    unit_width: int
    unit_count: int
    total_width: int
    rows: list[list[RulerBox]]
