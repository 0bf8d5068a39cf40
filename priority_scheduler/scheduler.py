from __future__ import annotations

import logging
from typing import List

from .errors import EmptyQueueError, UnscheduledProcessError
from .metrics import average, compute_system_metrics
from .models import Process, ProcessMetrics, ScheduledSlice, ScheduleResult

logger = logging.getLogger(__name__)


class PriorityScheduler:
    """
    Non-preemptive priority scheduler.

    Processes wait in a queue ordered by ascending priority value (lower
    value runs first). Equal priorities keep their insertion order. The
    scheduling pass drains the queue; dispatched processes stay reachable
    through ``scheduled`` for metric queries afterwards.

    Arrival time is never consulted when picking the next process, so a
    process can be started before it arrives. Its waiting and response
    times then come out negative.
    """

    def __init__(self) -> None:
        self._queue: List[Process] = []
        self._current_time = 0
        self.processes: List[Process] = []
        self.scheduled: List[Process] = []
        self.timeline: List[ScheduledSlice] = []

    @property
    def current_time(self) -> int:
        return self._current_time

    def __len__(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        return not self._queue

    def insert(self, process: Process) -> None:
        """
        Queue ``process`` behind every entry whose priority is <= its own.
        """
        index = len(self._queue)
        for i, queued in enumerate(self._queue):
            if process.priority < queued.priority:
                index = i
                break

        self._queue.insert(index, process)
        self.processes.append(process)
        logger.debug("queued process %s (priority %s) at position %d", process.pid, process.priority, index)

    def peek(self) -> Process:
        if not self._queue:
            raise EmptyQueueError()
        return self._queue[0]

    def remove_highest_priority(self) -> Process:
        if not self._queue:
            raise EmptyQueueError()
        return self._queue.pop(0)

    def run_scheduling_pass(self) -> List[Process]:
        """
        Dispatch every queued process in priority order, each running to
        completion before the next starts. Returns the processes dispatched
        by this pass.
        """
        dispatched: List[Process] = []

        while not self.is_empty():
            process = self.remove_highest_priority()
            if process.is_scheduled:
                # Timing fields are written once; a re-queued process is dropped.
                logger.debug("process %s already ran, skipping", process.pid)
                continue

            logger.debug("process %s runs from %d to %d", process.pid, self._current_time,
                         self._current_time + process.burst_time)
            process.start_time = self._current_time
            process.completion_time = self._current_time + process.burst_time
            self._current_time += process.burst_time

            self.timeline.append(
                ScheduledSlice(pid=process.pid, start_time=process.start_time, end_time=process.completion_time)
            )
            self.scheduled.append(process)
            dispatched.append(process)

        logger.info("scheduling pass dispatched %d process(es), clock at %d", len(dispatched), self._current_time)
        return dispatched

    def calculate_turnaround_time(self, process: Process) -> int:
        if not process.is_scheduled:
            raise UnscheduledProcessError(process.pid)
        return process.completion_time - process.arrival_time

    def calculate_waiting_time(self, process: Process) -> int:
        return self.calculate_turnaround_time(process) - process.burst_time

    def calculate_response_time(self, process: Process) -> int:
        if not process.is_scheduled:
            raise UnscheduledProcessError(process.pid)
        # Equals the waiting time while every process runs in a single burst.
        return process.start_time - process.arrival_time

    def calculate_average_turnaround_time(self) -> float:
        return average((self.calculate_turnaround_time(p) for p in self.scheduled), "turnaround time")

    def calculate_average_waiting_time(self) -> float:
        return average((self.calculate_waiting_time(p) for p in self.scheduled), "waiting time")

    def calculate_average_response_time(self) -> float:
        return average((self.calculate_response_time(p) for p in self.scheduled), "response time")

    def result(self) -> ScheduleResult:
        """
        Snapshot of the run so far: one metrics row per scheduled process in
        dispatch order, the timeline, and system-wide metrics.
        """
        rows = [
            ProcessMetrics(
                pid=p.pid,
                arrival_time=p.arrival_time,
                burst_time=p.burst_time,
                priority=p.priority,
                start_time=p.start_time,
                completion_time=p.completion_time,
                turnaround_time=self.calculate_turnaround_time(p),
                waiting_time=self.calculate_waiting_time(p),
                response_time=self.calculate_response_time(p),
            )
            for p in self.scheduled
        ]
        return ScheduleResult(
            processes=rows,
            timeline=list(self.timeline),
            system=compute_system_metrics(self.scheduled, self.timeline),
        )
