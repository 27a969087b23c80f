# SPDX-License-Identifier: MIT

from typing import Mapping, Sequence

import pendulum

from flightboard.model.scale import ScaleFormat
from flightboard.model.task import TaskGroup, TaskTypeInfo
from flightboard.model.task_bar import GanttLayout
from flightboard.service.scale import build_time_scales, layout_ruler
from flightboard.service.time_marks import next_boundary
from flightboard.service.timeline import (
    compute_millisecond_width,
    layout_task_groups,
)


def layout_gantt(
    task_groups: Sequence[TaskGroup],
    expanded_groups: set[str],
    min_time: pendulum.DateTime,
    max_time: pendulum.DateTime,
    scale_formats: Sequence[ScaleFormat],
    viewport_width: float,
    unit_width: int,
    type_infos: Mapping[int, TaskTypeInfo],
    glyph_width: float = 1.0,
) -> GanttLayout:
    """
    Lay out the ruler and task bars of a gantt chart for a viewport width.

    Call again with a new viewport_width whenever the hosting view is
    resized; the previous layout is fully replaced.

    The timeline shares the ruler's origin (its first finest box) and its
    total width, so bars line up with the ruler boxes.

    Args:
        task_groups: Groups of tasks, one row band each
        expanded_groups: Names of the groups shown one task per row
        min_time: Start of the visible range
        max_time: End of the visible range
        scale_formats: Ruler scales, coarsest first
        viewport_width: Width available to the chart
        unit_width: Minimum width of a finest ruler box
        type_infos: Task styles by type index
        glyph_width: Average width of one label character

    Returns:
        The ruler rows, the milliseconds to pixels factor and the group rows
    """
    time_scales = build_time_scales(min_time, max_time, scale_formats)
    ruler = layout_ruler(time_scales, viewport_width, unit_width)

    if not time_scales:
        return {
            "ruler": ruler,
            "millisecond_width": 0.0,
            "groups": layout_task_groups(
                task_groups, expanded_groups, min_time, 0.0, type_infos, glyph_width
            ),
        }

    finest = time_scales[-1]
    origin = finest["boxes"][0]["time"]
    end = next_boundary(finest["boxes"][-1]["time"], finest["unit"])
    millisecond_width = compute_millisecond_width(origin, end, ruler["total_width"])

    return {
        "ruler": ruler,
        "millisecond_width": millisecond_width,
        "groups": layout_task_groups(
            task_groups,
            expanded_groups,
            origin,
            millisecond_width,
            type_infos,
            glyph_width,
        ),
    }
