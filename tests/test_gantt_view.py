# SPDX-License-Identifier: MIT

from flightboard.model.task_bar import TaskBar
from flightboard.view.view.views.gantt import _bar_text, _merge_cells, _paint_bars


def make_bar(**fields) -> TaskBar:
    bar: TaskBar = {
        "task_id": "t",
        "left": 0,
        "width": 0,
        "color": "green",
        "icon": None,
        "caption": None,
        "justify": "center",
        "label": "DY600",
        "start_label": None,
        "end_label": None,
        "title": "DY600",
    }
    bar.update(fields)  # type: ignore[typeddict-item]
    return bar


def test_bar_text_space_between():
    bar = make_bar(justify="space-between", start_label="OSL", end_label="BGO")

    assert _bar_text(bar, 15) == "OSL  DY600  BGO"


def test_bar_text_centered():
    assert _bar_text(make_bar(), 7) == " DY600 "
    assert _bar_text(make_bar(), 3) == "DY6"


def test_bar_text_with_icon():
    assert _bar_text(make_bar(icon="●"), 9) == " ● DY600 "


def test_paint_bars_fills_total_width():
    row = _paint_bars([make_bar(left=2, width=7)], 20)

    assert row.plain == "   DY600" + " " * 12
    assert len(row.plain) == 20


def test_zero_width_bar_takes_one_cell():
    row = _paint_bars([make_bar(left=4, width=0)], 10)

    assert row.plain == "    D     "


def test_bars_are_clipped_to_total_width():
    row = _paint_bars([make_bar(left=8, width=10), make_bar(left=30, width=5)], 10)

    assert len(row.plain) == 10


def test_merge_cells():
    cells = [("a", "x"), ("b", "x"), ("c", "y")]

    assert _merge_cells(cells) == [("ab", "x"), ("c", "y")]


def test_bar_left_of_origin_is_not_painted():
    row = _paint_bars([make_bar(left=-12, width=5), make_bar(left=-5, width=5)], 10)

    assert row.plain == " " * 10


def test_bar_crossing_origin_is_clipped():
    row = _paint_bars([make_bar(left=-3, width=8)], 10)

    assert row.plain == "DY600     "
