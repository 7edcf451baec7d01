"""
Closed set of reporting units for timed blocks.

Each unit knows its selector label, the word printed in reports
and how many nanoseconds make up one whole unit.
"""

import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class TimeFormat(Enum):
    """Unit a measurement is reported in."""

    SEC = ("sec", "seconds", 1_000_000_000)
    MILIS = ("milis", "miliseconds", 1_000_000)
    NANO = ("nano", "nanoseconds", 1)

    def __init__(self, label: str, word: str, nanoseconds: int):
        self.label = label
        self.word = word
        self.nanoseconds = nanoseconds

    @classmethod
    def from_label(cls, value: Union["TimeFormat", str]) -> "TimeFormat":
        """
        Resolve a selector into a TimeFormat member.

        Unrecognized labels fall back to MILIS.

        Raises:
            TypeError: if value is neither a TimeFormat nor a string
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"time format must be str or TimeFormat, got {type(value).__name__}")

        for member in cls:
            if member.label == value:
                return member

        logger.debug("unrecognized time format %r, using %r", value, cls.MILIS.label)
        return cls.MILIS


DEFAULT_FORMAT = TimeFormat.MILIS
