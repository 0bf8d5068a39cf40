from rich.panel import Panel

from priority_scheduler.cli import demo_workload
from priority_scheduler.gantt import build_rich_gantt, render_gantt
from priority_scheduler.report import HEADER, format_report
from priority_scheduler.scheduler import PriorityScheduler


def _sample_scheduler():
    scheduler = PriorityScheduler()
    for p in demo_workload():
        scheduler.insert(p)
    scheduler.run_scheduling_pass()
    return scheduler


def test_sample_report():
    assert format_report(_sample_scheduler()).splitlines() == [
        HEADER,
        "2\t\t2\t\t\t-1\t\t\t-1",
        "1\t\t8\t\t\t3\t\t\t3",
        "3\t\t12\t\t\t6\t\t\t6",
        "",
        "Average Turnaround Time: 7.333333333333333",
        "Average Waiting Time: 2.6666666666666665",
        "Average Response Time: 2.6666666666666665",
    ]


def test_header_columns():
    assert HEADER.split("\t") == ["Process", "Turnaround Time", "Waiting Time", "Response Time"]


def test_plain_gantt():
    lines = render_gantt(_sample_scheduler().timeline).splitlines()
    assert lines[0] == "Gantt Chart:"
    assert lines[1] == "|===|=====|======|"
    assert lines[2].split() == ["P2", "P1", "P3"]
    assert lines[3].split() == ["0", "3", "8", "14"]


def test_plain_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_rich_gantt():
    panel, marks = build_rich_gantt(_sample_scheduler().timeline)
    assert isinstance(panel, Panel)
    assert marks.split() == ["0", "3", "8", "14"]


def test_rich_gantt_empty():
    panel, marks = build_rich_gantt([])
    assert panel.renderable == "No execution"
    assert marks == ""
