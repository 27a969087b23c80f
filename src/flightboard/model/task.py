# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import pendulum

from flightboard.model.entity_id import EntityId


class Task(TypedDict):
    id: EntityId
    name: str
    start_time: pendulum.DateTime
    end_time: pendulum.DateTime
    type_index: int
    start_name: NotRequired[Optional[str]]
    end_name: NotRequired[Optional[str]]


class TaskGroup(TypedDict):
    name: str
    tasks: list[Task]


class TaskTypeInfo(TypedDict):
    type_index: int
    bar_color: str
    icon: Optional[str]
    caption: Optional[str]
