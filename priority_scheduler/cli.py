from __future__ import annotations

import argparse
from typing import List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import SchedulerError, WorkloadError
from .gantt import build_rich_gantt
from .log import configure_logging
from .metrics import summarize_process_metrics
from .models import Process, ScheduleResult
from .report import format_report
from .scheduler import PriorityScheduler
from .workload_io import load_workload

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def demo_workload() -> List[Process]:
    return [
        Process(pid=1, arrival_time=0, burst_time=5, priority=2),
        Process(pid=2, arrival_time=1, burst_time=3, priority=1),
        Process(pid=3, arrival_time=2, burst_time=6, priority=3),
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="priority-scheduler",
        description="Non-preemptive priority CPU scheduling simulator.",
    )
    parser.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Path to JSON or CSV workload file (default: built-in three-process demo).",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "table"],
        default="text",
        help="Report style: tab-separated text or Rich tables (default: text).",
    )
    parser.add_argument(
        "--gantt",
        action="store_true",
        help="Also print a Gantt chart of the schedule.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log verbosity on stderr (default: WARNING).",
    )
    return parser


def _print_tables(result: ScheduleResult, console: Console) -> None:
    headers = ["PID", "Arrive", "Burst", "Priority", "Start", "Complete", "Turnaround", "Wait", "Response"]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        proc_table.add_column(h, justify="center" if h in {"PID", "Priority"} else "right")

    for p in result.processes:
        proc_table.add_row(
            str(p.pid),
            str(p.arrival_time),
            str(p.burst_time),
            str(p.priority),
            str(p.start_time),
            str(p.completion_time),
            str(p.turnaround_time),
            str(p.waiting_time),
            str(p.response_time),
        )

    console.print(proc_table)
    console.print()

    summary = summarize_process_metrics(result.processes)
    sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
    sys_table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
    sys_table.add_row("Avg response", f"{summary['avg_response']:.2f}")
    if result.system:
        sys_table.add_row("Makespan", str(result.system.makespan))
        sys_table.add_row("Throughput (proc/time)", f"{result.system.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{result.system.cpu_utilization*100:.1f}%")

    console.print(sys_table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)

    scheduler = PriorityScheduler()
    configure_logging(args.log_level, scheduler)

    try:
        processes = load_workload(args.workload) if args.workload else demo_workload()
        for process in processes:
            scheduler.insert(process)
        scheduler.run_scheduling_pass()

        if args.format == "text":
            # Rich expands tabs; the text report goes straight to stdout.
            print(format_report(scheduler))
        else:
            _print_tables(scheduler.result(), console)

        if args.gantt:
            panel, time_marks = build_rich_gantt(scheduler.timeline)
            console.print()
            console.print(panel)
            if time_marks:
                console.print(time_marks)
    except (SchedulerError, WorkloadError, OSError) as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
