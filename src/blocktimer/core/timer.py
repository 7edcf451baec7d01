"""
Monotonic timer using perf_counter_ns for nanosecond accuracy.

Provides the lowest-level timing primitive used by all interfaces.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .units import DEFAULT_FORMAT, TimeFormat

DEFAULT_NAME = "Code"

Clock = Callable[[], int]


@dataclass(frozen=True)
class Measurement:
    """
    Immutable result of a single timed block.

    Stores raw nanosecond timestamps and the unit the block is reported in.
    """

    name: str
    start_ns: int
    end_ns: int
    time_format: TimeFormat = DEFAULT_FORMAT

    @property
    def duration_ns(self) -> int:
        """Return raw nanosecond duration."""
        return self.end_ns - self.start_ns

    @property
    def duration(self) -> int:
        """Return the duration as a whole number of report units, truncated toward zero."""
        units = abs(self.duration_ns) // self.time_format.nanoseconds
        return units if self.duration_ns >= 0 else -units

    @property
    def unit_word(self) -> str:
        return self.time_format.word

    @property
    def needs_advisory(self) -> bool:
        """True when a reading in whole seconds is too coarse to be useful."""
        return self.time_format is TimeFormat.SEC and self.duration <= 1


class Timer:
    """
    Context-manager and manual start/stop timer.

    Reads time.perf_counter_ns by default, which is monotonic and
    unaffected by system clock adjustments.
    """

    def __init__(self, name: str = DEFAULT_NAME,
                 time_format: Union[TimeFormat, str] = DEFAULT_FORMAT,
                 clock: Optional[Clock] = None):
        """
        Initialize timer with a block name and reporting unit.

        Args:
            name: Label for this measurement
            time_format: TimeFormat member or its label ("sec", "milis", "nano")
            clock: Callable returning integer nanoseconds; defaults to perf_counter_ns
        """
        self.name = name
        self.time_format = TimeFormat.from_label(time_format)
        self._clock = clock or time.perf_counter_ns
        self._start_ns: Optional[int] = None
        self._record: Optional[Measurement] = None

    def start(self) -> "Timer":
        """Start the timer and return self for chaining."""
        self._start_ns = self._clock()
        return self

    def stop(self) -> Measurement:
        """Stop the timer and return the completed Measurement."""
        end_ns = self._clock()
        if self._start_ns is None:
            raise RuntimeError(f"timer {self.name!r} was stopped before it was started")
        self._record = Measurement(
            name=self.name,
            start_ns=self._start_ns,
            end_ns=end_ns,
            time_format=self.time_format,
        )
        return self._record

    def __enter__(self) -> "Timer":
        return self.start()

    def __exit__(self, *_) -> None:
        self.stop()

    @property
    def record(self) -> Optional[Measurement]:
        """Return the completed measurement, or None if not yet stopped."""
        return self._record
