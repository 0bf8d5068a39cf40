"""
Priority scheduler package.

Simulates non-preemptive priority CPU scheduling and reports turnaround,
waiting and response times for each process.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["cli"]
