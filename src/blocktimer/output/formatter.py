"""
Output renderer for timed blocks.

All formatting decisions are centralized here. Reports are written to
an injectable text sink; sys.stdout is looked up at call time when no
sink is given. Color uses ANSI codes via colorama and is only applied
when the sink is a terminal, so redirected output keeps the plain shape.
Setting NO_COLOR, or passing color=False, disables it on terminals too.
"""

import os
import sys
from typing import Optional, TextIO

import colorama

from ..core.timer import Measurement

colorama.just_fix_windows_console()

ADVISORY = "Friendly reminder: consider timing your code at a higher resolution"


class _Color:
    """ANSI color constants."""

    RESET  = colorama.Style.RESET_ALL
    CYAN   = colorama.Fore.CYAN
    GREEN  = colorama.Fore.GREEN
    YELLOW = colorama.Fore.YELLOW


def _wants_color(stream: TextIO) -> bool:
    """Return True if the sink is an interactive terminal and NO_COLOR is unset."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def format_report_line(measurement: Measurement, color: bool = False) -> str:
    """
    Render the one-line report for a measurement, without newline.

    Shape: ["<name>" execution time: <duration> <unit-word>]
    """
    name = f'"{measurement.name}"'
    duration = f"{measurement.duration} {measurement.unit_word}"
    if color:
        name = f"{_Color.CYAN}{name}{_Color.RESET}"
        duration = f"{_Color.GREEN}{duration}{_Color.RESET}"
    return f"[{name} execution time: {duration}]"


def format_report(measurement: Measurement, color: bool = False) -> str:
    """Render the report line plus the advisory when the reading is too coarse."""
    text = format_report_line(measurement, color) + "\n"
    if measurement.needs_advisory:
        advisory = f"{_Color.YELLOW}{ADVISORY}{_Color.RESET}" if color else ADVISORY
        text += advisory + "\n"
    return text


def print_report(measurement: Measurement, stream: Optional[TextIO] = None,
                 color: Optional[bool] = None) -> None:
    """
    Write the report for a measurement to the sink in a single write call.

    Args:
        measurement: The completed measurement
        stream: Text sink; defaults to the current sys.stdout. Only write
            is required, flush is called when the sink has one
        color: Force color on or off; None colors terminals unless NO_COLOR is set
    """
    sink = stream if stream is not None else sys.stdout
    if color is None:
        color = _wants_color(sink)
    sink.write(format_report(measurement, color=color))
    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()
