# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from flightboard.model.entity_id import EntityId
from flightboard.model.scale import RulerLayout

Justify = Literal["center", "space-between"]


class TaskBar(TypedDict):
    task_id: EntityId
    left: float
    width: float
    color: str
    icon: Optional[str]
    caption: Optional[str]
    justify: Justify
    label: str
    start_label: Optional[str]
    end_label: Optional[str]
    title: str


class GroupLayout(TypedDict):
    name: str
    expanded: bool
    # An expanded group starts with an empty header row, then one row per task.
    # A collapsed group puts every bar on a single row.
    rows: list[list[TaskBar]]


class GanttLayout(TypedDict):
    ruler: RulerLayout
    millisecond_width: float
    groups: list[GroupLayout]
