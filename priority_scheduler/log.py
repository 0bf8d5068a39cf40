"""Logging setup for the command line.

Library modules log through ``logging.getLogger(__name__)`` and stay silent
unless a handler is attached. ``configure_logging`` attaches a Rich handler on
stderr and stamps each record with the simulated clock of a scheduler, so
log lines read as ``[t=8] process 3 runs from 8 to 14``.

Attributes:
    LOG_FORMAT (str): message format used by the Rich handler.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .scheduler import PriorityScheduler

LOG_FORMAT = "[t=%(simtime)s] %(message)s"


class SimTimeFilter(logging.Filter):
    """Adds the scheduler's current time to each record as ``simtime``."""

    def __init__(self, scheduler: Optional[PriorityScheduler] = None):
        super().__init__()
        self.scheduler = scheduler

    def filter(self, record: logging.LogRecord) -> bool:
        record.simtime = "-" if self.scheduler is None else self.scheduler.current_time
        return True


def configure_logging(level: str = "WARNING", scheduler: Optional[PriorityScheduler] = None) -> logging.Logger:
    """
    Route the package logger to stderr at ``level`` (given in all caps, e.g.
    "DEBUG"). Calling it again replaces the previous handler.
    """
    lg = logging.getLogger("priority_scheduler")
    for handler in list(lg.handlers):
        if isinstance(handler, RichHandler):
            lg.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(SimTimeFilter(scheduler))

    lg.addHandler(handler)
    lg.setLevel(getattr(logging, level.upper()))
    return lg
