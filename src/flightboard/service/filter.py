# SPDX-License-Identifier: MIT

from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def in_values(values: Optional[list[str]], value: Optional[str]) -> bool:
    """An empty or missing list of values matches everything."""
    if not values:
        return True
    return value in values


def distinct_sorted(
    records: Iterable[T], *getters: Callable[[T], Optional[str]]
) -> list[str]:
    values: set[str] = set()
    for record in records:
        for getter in getters:
            value = getter(record)
            if value is not None:
                values.add(value)
    return sorted(values)
