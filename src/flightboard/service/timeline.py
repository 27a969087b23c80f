# SPDX-License-Identifier: MIT

from typing import Iterable, Mapping, Optional

import pendulum

from flightboard.color import get_default_task_color
from flightboard.configuration import TaskTypeConfig
from flightboard.model.task import Task, TaskGroup, TaskTypeInfo
from flightboard.model.task_bar import GroupLayout, Justify, TaskBar
from flightboard.service.time_marks import InvalidRangeError
from flightboard.time import (
    datetime_to_display_local_datetime_str,
    milliseconds_between,
)


def pixel_x(
    time: pendulum.DateTime, min_time: pendulum.DateTime, millisecond_width: float
) -> float:
    return milliseconds_between(min_time, time) * millisecond_width


def pixel_width(task: Task, millisecond_width: float) -> float:
    # A task ending before it starts is drawn with no width
    return max(
        0.0,
        milliseconds_between(task["start_time"], task["end_time"]) * millisecond_width,
    )


def compute_millisecond_width(
    min_time: pendulum.DateTime, max_time: pendulum.DateTime, width: float
) -> float:
    """
    Pixels per millisecond needed to fit [min_time, max_time] into width.

    Returns 0 for an empty range.

    Raises:
        InvalidRangeError: If min_time is after max_time
    """
    if min_time > max_time:
        raise InvalidRangeError(
            f"Range start {min_time.isoformat()} is after range end {max_time.isoformat()}"
        )
    duration = milliseconds_between(min_time, max_time)
    if duration == 0:
        return 0.0
    return width / duration


def get_task_type_infos(
    task_types: Iterable[TaskTypeConfig],
) -> dict[int, TaskTypeInfo]:
    """Index configured task types by their type index."""
    return {
        task_type["type_index"]: {
            "type_index": task_type["type_index"],
            "bar_color": task_type["bar_color"],
            "icon": task_type.get("icon"),
            "caption": task_type.get("caption"),
        }
        for task_type in task_types
    }


def has_room_for_end_labels(task: Task, width: float, glyph_width: float) -> bool:
    """
    Whether a bar of the given width can show its start and end labels next
    to the main label without overlap, estimated from character counts.
    """
    start_name = task.get("start_name")
    end_name = task.get("end_name")
    if not start_name or not end_name:
        return False

    total_text_length = len(task["name"]) + len(start_name) + len(end_name)
    return width > total_text_length * glyph_width


def task_title(task: Task, type_info: Optional[TaskTypeInfo]) -> str:
    caption = ""
    if type_info is not None and type_info["caption"]:
        caption = f"{type_info['caption']}: "

    route = ""
    start_name = task.get("start_name")
    end_name = task.get("end_name")
    if start_name and end_name:
        route = f"( {start_name}-{end_name})"

    return (
        f"{caption}{task['name']}{route}\n"
        f"Start: {datetime_to_display_local_datetime_str(task['start_time'])}\n"
        f"End: {datetime_to_display_local_datetime_str(task['end_time'])}"
    )


def layout_task_bar(
    task: Task,
    min_time: pendulum.DateTime,
    millisecond_width: float,
    type_infos: Mapping[int, TaskTypeInfo],
    glyph_width: float,
) -> TaskBar:
    """
    Position a task on the timeline and pick its color and label arrangement.

    Args:
        task: The task to place
        min_time: Time at pixel 0
        millisecond_width: Pixels per millisecond
        type_infos: Styles by type index; unknown types get a default color
        glyph_width: Average width of one label character

    Returns:
        The task bar geometry and labels
    """
    width = pixel_width(task, millisecond_width)
    type_info = type_infos.get(task["type_index"])
    color = (
        type_info["bar_color"]
        if type_info is not None and type_info["bar_color"]
        else get_default_task_color(task["type_index"])
    )

    multiple_texts = has_room_for_end_labels(task, width, glyph_width)
    justify: Justify = "space-between" if multiple_texts else "center"

    return {
        "task_id": task["id"],
        "left": pixel_x(task["start_time"], min_time, millisecond_width),
        "width": width,
        "color": color,
        "icon": type_info["icon"] if type_info is not None else None,
        "caption": type_info["caption"] if type_info is not None else None,
        "justify": justify,
        "label": task["name"],
        "start_label": task.get("start_name") if multiple_texts else None,
        "end_label": task.get("end_name") if multiple_texts else None,
        "title": task_title(task, type_info),
    }


def layout_task_groups(
    task_groups: Iterable[TaskGroup],
    expanded_groups: set[str],
    min_time: pendulum.DateTime,
    millisecond_width: float,
    type_infos: Mapping[int, TaskTypeInfo],
    glyph_width: float,
) -> list[GroupLayout]:
    """
    Lay out every group as its own band of rows.

    An expanded group gets an empty header row followed by one row per task.
    A collapsed group draws all of its bars on a single row; overlapping bars
    are not moved apart.
    """
    layouts: list[GroupLayout] = []
    for group in task_groups:
        bars = [
            layout_task_bar(task, min_time, millisecond_width, type_infos, glyph_width)
            for task in group["tasks"]
        ]
        expanded = group["name"] in expanded_groups
        if expanded:
            rows: list[list[TaskBar]] = [[]] + [[bar] for bar in bars]
        else:
            rows = [bars]
        layouts.append({"name": group["name"], "expanded": expanded, "rows": rows})
    return layouts
