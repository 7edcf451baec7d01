"""
blocktimer - time a block of work and print how long it took.

Provides three interfaces over the same reporting behavior:
  - timer()        : run a zero-argument callable once and report it
  - @timed         : function/method decorator, reports every call
  - time_block()   : context manager for inline code blocks

Reports look like:
    ["<name>" execution time: <duration> <unit-word>]

Durations are whole seconds, milliseconds or nanoseconds, read from
time.perf_counter_ns. Every interface returns or exposes the Measurement.
"""

import logging

from .core.timer import DEFAULT_NAME, Measurement, Timer
from .core.units import DEFAULT_FORMAT, TimeFormat

from .interfaces.decorators import timer, timed, time_block

from .output.formatter import ADVISORY, format_report_line, print_report

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "timer",
    "timed",
    "time_block",
    "Timer",
    "Measurement",
    "TimeFormat",
    "DEFAULT_FORMAT",
    "DEFAULT_NAME",
    "ADVISORY",
    "format_report_line",
    "print_report",
]
