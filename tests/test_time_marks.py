# SPDX-License-Identifier: MIT

import pendulum
import pytest

from conftest import utc
from flightboard.service.time_marks import (
    InvalidRangeError,
    get_time_marks_of_interval,
    next_boundary,
    parse_time_unit,
    round_down,
    round_up,
)


class TestParseTimeUnit:
    def test_single_units(self):
        assert parse_time_unit("hour") == {"base": "hour", "step": 1}
        assert parse_time_unit("day") == {"base": "day", "step": 1}
        assert parse_time_unit("week") == {"base": "week", "step": 1}
        assert parse_time_unit("month") == {"base": "month", "step": 1}

    def test_multi_hour(self):
        assert parse_time_unit("hour-3") == {"base": "hour", "step": 3}

    @pytest.mark.parametrize("unit", ["hour-0", "hour--2"])
    def test_non_positive_step(self, unit):
        with pytest.raises(InvalidRangeError):
            parse_time_unit(unit)

    @pytest.mark.parametrize("unit", ["fortnight", "day-2", "", "hour-x"])
    def test_unknown_or_unsupported(self, unit):
        with pytest.raises(ValueError) as excinfo:
            parse_time_unit(unit)
        assert not isinstance(excinfo.value, InvalidRangeError)


class TestRounding:
    def test_round_down_hour_step_anchors_on_day(self):
        assert round_down(utc(2024, 1, 1, 5, 59), "hour-3") == utc(2024, 1, 1, 3)
        assert round_down(utc(2024, 1, 1, 23, 10), "hour-6") == utc(2024, 1, 1, 18)

    def test_round_down_week_starts_monday(self):
        # 2024-01-03 is a Wednesday
        assert round_down(utc(2024, 1, 3, 12), "week") == utc(2024, 1, 1)

    def test_round_up_on_boundary_is_identity(self):
        assert round_up(utc(2024, 1, 1, 6), "hour") == utc(2024, 1, 1, 6)
        assert round_up(utc(2024, 2, 1), "month") == utc(2024, 2, 1)

    def test_round_up_off_boundary(self):
        assert round_up(utc(2024, 1, 1, 5, 30), "hour") == utc(2024, 1, 1, 6)
        assert round_up(utc(2024, 1, 15), "month") == utc(2024, 2, 1)

    def test_step_not_dividing_day_is_cut_at_midnight(self):
        assert next_boundary(utc(2024, 1, 1, 20), "hour-5") == utc(2024, 1, 2, 0)


class TestTimeMarks:
    def test_hour_marks_round_max_up(self):
        marks = get_time_marks_of_interval(
            utc(2024, 1, 1), utc(2024, 1, 1, 5, 30), "hour"
        )
        assert marks == [utc(2024, 1, 1, hour) for hour in range(7)]

    def test_multi_hour_marks(self):
        marks = get_time_marks_of_interval(
            utc(2024, 1, 1), utc(2024, 1, 1, 5, 30), "hour-3"
        )
        assert marks == [utc(2024, 1, 1, 0), utc(2024, 1, 1, 3), utc(2024, 1, 1, 6)]

    def test_multi_hour_marks_across_midnight(self):
        marks = get_time_marks_of_interval(
            utc(2024, 1, 1, 18), utc(2024, 1, 2, 2), "hour-5"
        )
        assert marks == [
            utc(2024, 1, 1, 15),
            utc(2024, 1, 1, 20),
            utc(2024, 1, 2, 0),
            utc(2024, 1, 2, 5),
        ]

    def test_day_week_month_marks(self):
        assert get_time_marks_of_interval(
            utc(2024, 1, 1, 10), utc(2024, 1, 3), "day"
        ) == [utc(2024, 1, 1), utc(2024, 1, 2), utc(2024, 1, 3)]
        assert get_time_marks_of_interval(
            utc(2024, 1, 3), utc(2024, 1, 10), "week"
        ) == [utc(2024, 1, 1), utc(2024, 1, 8), utc(2024, 1, 15)]
        assert get_time_marks_of_interval(
            utc(2024, 1, 15), utc(2024, 3, 1), "month"
        ) == [utc(2024, 1, 1), utc(2024, 2, 1), utc(2024, 3, 1)]

    def test_empty_range_still_has_one_box(self):
        marks = get_time_marks_of_interval(utc(2024, 1, 1), utc(2024, 1, 1), "hour")
        assert marks == [utc(2024, 1, 1, 0), utc(2024, 1, 1, 1)]

    def test_reversed_range_fails(self):
        with pytest.raises(InvalidRangeError):
            get_time_marks_of_interval(utc(2024, 1, 2), utc(2024, 1, 1), "day")

    def test_zero_step_fails(self):
        with pytest.raises(InvalidRangeError):
            get_time_marks_of_interval(utc(2024, 1, 1), utc(2024, 1, 2), "hour-0")

    @pytest.mark.parametrize("unit", ["hour", "hour-2", "hour-3", "hour-6", "day", "week", "month"])
    @pytest.mark.parametrize(
        "min_time,max_time",
        [
            (utc(2024, 1, 1, 0, 17), utc(2024, 1, 1, 0, 17)),
            (utc(2024, 1, 30, 22, 45), utc(2024, 3, 2, 1, 5)),
            (utc(2023, 12, 31, 23), utc(2024, 1, 1, 1)),
        ],
    )
    def test_marks_are_increasing_boundaries(self, unit, min_time, max_time):
        marks = get_time_marks_of_interval(min_time, max_time, unit)

        assert len(marks) >= 2
        assert marks[0] <= min_time
        assert marks[-1] >= max_time
        for mark in marks:
            assert round_down(mark, unit) == mark
        for earlier, later in zip(marks, marks[1:]):
            assert earlier < later

    def test_is_idempotent(self):
        first = get_time_marks_of_interval(utc(2024, 1, 1), utc(2024, 2, 1), "hour-6")
        second = get_time_marks_of_interval(utc(2024, 1, 1), utc(2024, 2, 1), "hour-6")
        assert first == second

    def test_boundaries_follow_the_range_timezone(self):
        # Clocks in Oslo go forward at 02:00 on 2024-03-31, that day has 23 hours
        start = pendulum.datetime(2024, 3, 31, tz="Europe/Oslo")
        end = pendulum.datetime(2024, 4, 1, tz="Europe/Oslo")

        assert get_time_marks_of_interval(start, end, "day") == [start, end]
        hour_marks = get_time_marks_of_interval(start, end, "hour")
        assert len(hour_marks) - 1 == 23
        assert all(mark.minute == 0 for mark in hour_marks)


class TestDaylightSavingGaps:
    # Clocks in Oslo go from 02:00 to 03:00 on 2024-03-31
    def oslo(self, *args: int) -> pendulum.DateTime:
        return pendulum.datetime(*args, tz="Europe/Oslo")

    def test_skipped_anchor_resolves_after_the_gap(self):
        assert round_down(self.oslo(2024, 3, 31, 3, 30), "hour-2") == self.oslo(
            2024, 3, 31, 3
        )
        assert next_boundary(self.oslo(2024, 3, 31), "hour-2") == self.oslo(
            2024, 3, 31, 3
        )

    def test_multi_hour_marks_across_gap(self):
        start = self.oslo(2024, 3, 30, 19)

        marks = get_time_marks_of_interval(start, start.add(hours=30), "hour-2")

        assert marks[:7] == [
            self.oslo(2024, 3, 30, 18),
            self.oslo(2024, 3, 30, 20),
            self.oslo(2024, 3, 30, 22),
            self.oslo(2024, 3, 31, 0),
            self.oslo(2024, 3, 31, 3),
            self.oslo(2024, 3, 31, 4),
            self.oslo(2024, 3, 31, 6),
        ]
        assert marks[-1] == self.oslo(2024, 4, 1, 2)
        for earlier, later in zip(marks, marks[1:]):
            assert earlier < later
        for mark in marks:
            assert round_down(mark, "hour-2") == mark

    @pytest.mark.parametrize("unit", ["hour", "hour-3", "day"])
    def test_half_hour_gap(self, unit):
        # Lord Howe Island moves from +10:30 to +11:00 at 02:00 on 2024-10-06
        start = pendulum.datetime(2024, 10, 5, 20, tz="Australia/Lord_Howe")

        marks = get_time_marks_of_interval(start, start.add(hours=12), unit)

        assert len(marks) >= 2
        for earlier, later in zip(marks, marks[1:]):
            assert earlier < later
        for mark in marks:
            assert round_down(mark, unit) == mark
