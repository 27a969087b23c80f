# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from functools import lru_cache
from typing import Iterator, Optional, Sequence

import pendulum

from flightboard.model.scale import (
    RulerBox,
    RulerLayout,
    ScaleFormat,
    TimeBox,
    TimeScale,
)
from flightboard.service.time_marks import (
    InvalidRangeError,
    get_time_marks_of_interval,
    round_up,
)

logger = logging.getLogger(__name__)


def aggregate_weights(
    finer_boxes: Sequence[TimeBox], coarser_boxes: Sequence[TimeBox]
) -> list[TimeBox]:
    """
    Compute the weight of each coarser box from the finer boxes it contains.

    Both sequences must be sorted by time. They are merged backwards in a
    single pass: each finer box is credited to the last coarser box whose
    time is less than or equal to its own, so a finer box sitting exactly on
    a coarser boundary belongs to the coarser box starting there.

    Args:
        finer_boxes: Boxes of the finer scale, weights already computed
        coarser_boxes: Boxes of the coarser scale

    Returns:
        Copies of the coarser boxes with their weight populated
    """
    weighted: list[TimeBox] = [
        {"time": box["time"], "weight": 0, "text": box["text"]}
        for box in coarser_boxes
    ]

    finer: Iterator[TimeBox] = reversed(finer_boxes)
    pending: Optional[TimeBox] = next(finer, None)
    for box in reversed(weighted):
        while pending is not None and box["time"] <= pending["time"]:
            box["weight"] += pending["weight"]
            pending = next(finer, None)

    return weighted


def _boxes_for_marks(marks: list[pendulum.DateTime], format: str) -> list[TimeBox]:
    # Consecutive marks delimit a box; the final mark only closes the last one
    return [{"time": mark, "weight": 1, "text": mark.format(format)} for mark in marks[:-1]]


@lru_cache(maxsize=64)
def _build_time_scales(
    min_time: pendulum.DateTime,
    max_time: pendulum.DateTime,
    timezone_name: Optional[str],
    scale_formats: tuple[tuple[str, str], ...],
) -> list[TimeScale]:
    finest_unit = scale_formats[-1][0]
    rounded_max_time = round_up(max_time, finest_unit)

    # Build from finest to coarsest. Each coarser scale starts from the first
    # box of the next finer one so that every finer box has a coarser parent.
    scales: list[TimeScale] = []
    scale_min_time = min_time
    for unit, format in reversed(scale_formats):
        marks = get_time_marks_of_interval(scale_min_time, rounded_max_time, unit)
        boxes = _boxes_for_marks(marks, format)
        if scales:
            boxes = aggregate_weights(scales[0]["boxes"], boxes)
        scales.insert(0, {"unit": unit, "boxes": boxes})
        scale_min_time = boxes[0]["time"]

    logger.debug(
        "Built %d time scales over %s - %s with %d unit boxes",
        len(scales),
        min_time.isoformat(),
        rounded_max_time.isoformat(),
        len(scales[-1]["boxes"]),
    )
    return scales


def build_time_scales(
    min_time: pendulum.DateTime,
    max_time: pendulum.DateTime,
    scale_formats: Sequence[ScaleFormat],
) -> list[TimeScale]:
    """
    Build the weighted box rows of a time ruler.

    Scale formats are ordered from coarsest to finest. max_time is first
    rounded up to the finest unit. Finest boxes weigh 1 each; every coarser
    scale is weighted against the next finer one, so the weights of each
    scale sum up to the number of finest boxes.

    Results are memoized, each call gets its own copy.

    Raises:
        InvalidRangeError: If min_time is after max_time or a unit step is not positive
        ValueError: If a unit is unknown
    """
    if not scale_formats:
        return []
    if min_time > max_time:
        raise InvalidRangeError(
            f"Range start {min_time.isoformat()} is after range end {max_time.isoformat()}"
        )

    key = tuple(
        (scale_format["unit"], scale_format["format"]) for scale_format in scale_formats
    )
    return deepcopy(
        _build_time_scales(min_time, max_time, min_time.timezone_name, key)
    )


def layout_ruler(
    time_scales: Sequence[TimeScale], viewport_width: float, min_unit_width: int
) -> RulerLayout:
    """
    Turn weighted time scales into rows of sized boxes.

    Each finest box is given the same width, at least min_unit_width and
    stretched to fill viewport_width when there is room. A coarser box is as
    wide as the finest boxes it spans.

    Args:
        time_scales: Scales from build_time_scales, coarsest first
        viewport_width: Width available to the ruler
        min_unit_width: Minimum width of a finest box

    Returns:
        RulerLayout with one row per scale
    """
    if not time_scales:
        return {
            "unit_width": min_unit_width,
            "unit_count": 0,
            "total_width": 0,
            "rows": [],
        }

    unit_count = len(time_scales[-1]["boxes"])
    if unit_count == 0:
        unit_width = min_unit_width
    else:
        unit_width = round(max(min_unit_width, viewport_width / unit_count))

    rows: list[list[RulerBox]] = []
    for time_scale in time_scales:
        rows.append(
            [
                {
                    "time": box["time"],
                    "width": unit_width * box["weight"],
                    "text": box["text"],
                }
                for box in time_scale["boxes"]
            ]
        )

    return {
        "unit_width": unit_width,
        "unit_count": unit_count,
        "total_width": unit_width * unit_count,
        "rows": rows,
    }
