from __future__ import annotations


class SchedulerError(Exception):
    """Base class for scheduling and metric failures."""


class EmptyQueueError(SchedulerError):
    def __init__(self) -> None:
        super().__init__("Queue is empty")


class EmptyAverageError(SchedulerError):
    def __init__(self, metric: str) -> None:
        super().__init__(f"No processes to average {metric} over")
        self.metric = metric


class UnscheduledProcessError(SchedulerError):
    def __init__(self, pid: int) -> None:
        super().__init__(f"Process {pid} has not been scheduled")
        self.pid = pid


class WorkloadError(ValueError):
    """Raised when a workload file cannot be turned into processes."""
