from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

# Timing fields hold this value until the scheduling pass dispatches the process.
UNSCHEDULED = -1


@dataclass
class Process:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int
    start_time: int = UNSCHEDULED
    completion_time: int = UNSCHEDULED

    @property
    def is_scheduled(self) -> bool:
        return self.completion_time != UNSCHEDULED


@dataclass
class ScheduledSlice:
    """
    One contiguous run of a process on the CPU.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class ProcessMetrics:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int
    start_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int
    response_time: int


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
