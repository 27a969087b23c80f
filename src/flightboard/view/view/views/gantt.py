# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from flightboard.color import (
    GROUP_NAME_COLOR,
    RULER_ALTERNATE_BACKGROUND,
    RULER_TEXT_COLOR,
)
from flightboard.model.scale import RulerLayout
from flightboard.model.task_bar import GanttLayout, GroupLayout, TaskBar
from flightboard.view.view.views.header import header

# Zero-duration bars still take one cell so they stay visible
MIN_BAR_CELLS = 1

Cell = tuple[str, str]


def ruler_view(
    report_name: str,
    ruler: RulerLayout,
    sub_header: Optional[str] = None,
) -> None:
    """Display the rows of a time ruler."""
    header(report_name, sub_header)

    console = Console()
    if not ruler["rows"]:
        console.print("\n[dim]No time scales to display[/dim]\n")
        return

    rows = _build_ruler_rows(ruler, left_column_width=0)
    console.print(Padding(Group(*rows), (1, 0, 1, 0)))


def gantt_view(
    report_name: str,
    layout: GanttLayout,
    left_column_width: int = 20,
    sub_header: Optional[str] = None,
) -> None:
    """
    Display a ruler followed by one band of rows per task group.

    Args:
        report_name: The name of the report
        layout: Layout from layout_gantt, sized for the console width
        left_column_width: Width of the column holding group names
        sub_header: Optional line shown under the report name
    """
    header(report_name, sub_header)

    console = Console()
    ruler = layout["ruler"]
    if not ruler["rows"]:
        console.print("\n[dim]No time scales to display[/dim]\n")
        return

    chart_elements: list[Text] = _build_ruler_rows(ruler, left_column_width)
    chart_elements.append(
        Text("─" * (left_column_width + ruler["total_width"]), style="dim")
    )

    if not layout["groups"]:
        chart_elements.append(Text("No flights or work packages to display", style="dim"))

    for group in layout["groups"]:
        chart_elements.extend(
            _build_group_rows(group, ruler["total_width"], left_column_width)
        )

    console.print(Padding(Group(*chart_elements), (1, 0, 1, 0)))


def _build_ruler_rows(ruler: RulerLayout, left_column_width: int) -> list[Text]:
    rows: list[Text] = []
    for ruler_row in ruler["rows"]:
        row = Text(" " * left_column_width)
        for i, ruler_box in enumerate(ruler_row):
            width = ruler_box["width"]
            if width <= 0:
                continue
            style = RULER_TEXT_COLOR
            if i % 2 == 1:
                style = f"{style} {RULER_ALTERNATE_BACKGROUND}"
            label = ruler_box["text"][: width - 1].center(width - 1)
            row.append(label, style=style)
            row.append("│", style="dim")
        rows.append(row)
    return rows


def _left_column(text: str, left_column_width: int) -> str:
    if len(text) > left_column_width - 1:
        return text[: max(left_column_width - 4, 0)] + "... "
    return text.ljust(left_column_width)


def _build_group_rows(
    group: GroupLayout, total_width: int, left_column_width: int
) -> list[Text]:
    rows: list[Text] = []
    marker = "▾" if group["expanded"] else "▸"
    for i, bars in enumerate(group["rows"]):
        if i == 0:
            left = _left_column(f"{marker} {group['name']}", left_column_width)
            left_style = GROUP_NAME_COLOR
        else:
            left = _left_column(f"    {bars[0]['label']}" if bars else "", left_column_width)
            left_style = "dim"

        row = Text(left, style=left_style)
        row.append_text(_paint_bars(bars, total_width))
        rows.append(row)
    return rows


def _bar_text(bar: TaskBar, width: int) -> str:
    label = bar["label"]
    if bar["icon"]:
        label = f"{bar['icon']} {label}"

    if bar["justify"] == "space-between" and bar["start_label"] and bar["end_label"]:
        start_label = bar["start_label"]
        end_label = bar["end_label"]
        middle_width = width - len(start_label) - len(end_label)
        if middle_width >= 0:
            middle = label[:middle_width].center(middle_width)
            return f"{start_label}{middle}{end_label}"

    return label[:width].center(width)


def _paint_bars(bars: list[TaskBar], total_width: int) -> Text:
    cells: list[Cell] = [(" ", "")] * total_width
    for bar in bars:
        right = bar["left"] + bar["width"]
        if bar["left"] < 0 and round(right) <= 0:
            continue
        start = max(0, round(bar["left"]))
        if start >= total_width:
            continue
        end = max(start + MIN_BAR_CELLS, round(right))
        end = min(end, total_width)

        style = f"bold white on {bar['color']}"
        for offset, char in enumerate(_bar_text(bar, end - start)):
            cells[start + offset] = (char, style)

    row = Text()
    for char, style in _merge_cells(cells):
        row.append(char, style=style)
    return row


def _merge_cells(cells: list[Cell]) -> list[Cell]:
    merged: list[Cell] = []
    for char, style in cells:
        if merged and merged[-1][1] == style:
            merged[-1] = (merged[-1][0] + char, style)
        else:
            merged.append((char, style))
    return merged
