import pytest

from priority_scheduler.errors import EmptyAverageError
from priority_scheduler.metrics import average, compute_system_metrics, summarize_process_metrics
from priority_scheduler.models import Process, ProcessMetrics, ScheduledSlice


def test_average():
    assert average([8, 2, 12], "turnaround time") == pytest.approx(22 / 3)
    assert average(iter([4]), "waiting time") == 4


def test_average_of_nothing():
    with pytest.raises(EmptyAverageError) as excinfo:
        average([], "response time")
    assert excinfo.value.metric == "response time"
    assert "response time" in str(excinfo.value)


def test_system_metrics_with_idle_start():
    p = Process(1, arrival_time=0, burst_time=3, priority=1, start_time=1, completion_time=4)
    system = compute_system_metrics([p], [ScheduledSlice(1, 1, 4)])

    assert system.makespan == 4
    assert system.cpu_busy_time == 3
    assert system.throughput == pytest.approx(0.25)
    assert system.cpu_utilization == pytest.approx(0.75)


def test_system_metrics_empty():
    system = compute_system_metrics([], [])
    assert system.makespan == 0
    assert system.throughput == 0.0
    assert system.cpu_utilization == 0.0


def test_summarize_process_metrics():
    rows = [
        ProcessMetrics(1, 0, 5, 2, 3, 8, turnaround_time=8, waiting_time=3, response_time=3),
        ProcessMetrics(2, 1, 3, 1, 0, 3, turnaround_time=2, waiting_time=-1, response_time=-1),
    ]
    summary = summarize_process_metrics(rows)
    assert summary == {"avg_turnaround": 5.0, "avg_waiting": 1.0, "avg_response": 1.0}


def test_summarize_nothing():
    with pytest.raises(EmptyAverageError):
        summarize_process_metrics([])
