from __future__ import annotations

from typing import List

from .scheduler import PriorityScheduler

HEADER = "Process\tTurnaround Time\tWaiting Time\tResponse Time"


def format_report(scheduler: PriorityScheduler) -> str:
    """
    Plain-text report of a finished run: one tab-separated row per scheduled
    process in dispatch order, followed by the three averages.
    """
    lines: List[str] = [HEADER]
    for p in scheduler.scheduled:
        lines.append(
            f"{p.pid}\t\t{scheduler.calculate_turnaround_time(p)}"
            f"\t\t\t{scheduler.calculate_waiting_time(p)}"
            f"\t\t\t{scheduler.calculate_response_time(p)}"
        )

    lines.append("")
    lines.append(f"Average Turnaround Time: {scheduler.calculate_average_turnaround_time()}")
    lines.append(f"Average Waiting Time: {scheduler.calculate_average_waiting_time()}")
    lines.append(f"Average Response Time: {scheduler.calculate_average_response_time()}")
    return "\n".join(lines)
