# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from flightboard.model.entity_id import EntityId


class WorkPackage(TypedDict):
    id: Optional[EntityId]
    name: Optional[str]
    registration: Optional[str]
    station: Optional[str]
    start_time: Optional[pendulum.DateTime]
    end_time: Optional[pendulum.DateTime]
