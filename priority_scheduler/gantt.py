from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice

COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart: a bar of ``=`` per time unit, the process ids
    underneath, then the boundary times.
    """
    if not slices:
        return "(no execution)"

    bar = "|"
    labels = " "
    time_marks = "0"

    for sl in sorted(slices, key=lambda s: (s.start_time, s.end_time)):
        width = max(1, sl.end_time - sl.start_time)
        bar += "=" * width + "|"
        labels += f"P{sl.pid}"[:width].ljust(width) + " "
        time_marks += str(sl.end_time).rjust(width + 1)

    return "\n".join(["Gantt Chart:", bar, labels, time_marks])


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel with one colored block per slice, plus a string of
    boundary times to print below it.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    pid_to_color: Dict[int, str] = {}
    timeline = Text()
    labels = Text()
    time_marks = "0"

    for sl in sorted(slices, key=lambda s: (s.start_time, s.end_time)):
        color = pid_to_color.setdefault(sl.pid, COLORS[len(pid_to_color) % len(COLORS)])
        width = max(1, sl.end_time - sl.start_time)

        timeline.append(" " * width, style=f"on {color}")
        labels.append(f"P{sl.pid}"[:width].ljust(width), style="bold")
        time_marks += str(sl.end_time).rjust(width)

    grid = Table.grid(padding=(0, 0))
    grid.add_row(timeline)
    grid.add_row(labels)

    return Panel.fit(grid, title="Gantt Chart"), time_marks
