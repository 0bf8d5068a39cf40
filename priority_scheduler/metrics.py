from __future__ import annotations

from typing import Iterable, List

from .errors import EmptyAverageError
from .models import Process, ProcessMetrics, ScheduledSlice, SystemMetrics


def average(values: Iterable[float], metric: str) -> float:
    """
    Arithmetic mean of ``values``. Raises EmptyAverageError when there is
    nothing to average instead of dividing by zero.
    """
    values = list(values)
    if not values:
        raise EmptyAverageError(metric)
    return sum(values) / len(values)


def compute_system_metrics(processes: List[Process], timeline: List[ScheduledSlice]) -> SystemMetrics:
    """
    Compute makespan, throughput and CPU utilization for a finished run.
    """
    if not processes:
        return SystemMetrics(cpu_busy_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)

    makespan = max(p.completion_time for p in processes)
    cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in timeline)

    throughput = len(processes) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    return SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )


def summarize_process_metrics(rows: List[ProcessMetrics]) -> dict:
    """
    Return averages of the per-process metrics, keyed for table rendering.
    """
    return {
        "avg_turnaround": average((r.turnaround_time for r in rows), "turnaround time"),
        "avg_waiting": average((r.waiting_time for r in rows), "waiting time"),
        "avg_response": average((r.response_time for r in rows), "response time"),
    }
