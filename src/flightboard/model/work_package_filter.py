# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class WorkPackageFilter(TypedDict, total=False):
    start_time: Optional[pendulum.DateTime]
    end_time: Optional[pendulum.DateTime]
    registrations: Optional[list[str]]
    stations: Optional[list[str]]
    limit: Optional[int]
