"""
User-facing timing interfaces: one-shot call, decorator and context manager.

Usage:
    timer(lambda: build_index(docs), "nano", "build index")

    @timed                              # uses default name (function name)
    def my_function(): ...

    @timed("custom label", time_format="sec")
    def my_function(): ...

    with time_block("db query"):        # inline block timing
        result = db.query(...)
"""

import functools
import inspect
import logging
from contextlib import contextmanager
from typing import Callable, Optional, TextIO, Union

from ..core.timer import DEFAULT_NAME, Clock, Measurement, Timer
from ..core.units import DEFAULT_FORMAT, TimeFormat
from ..output.formatter import print_report

logger = logging.getLogger(__name__)

FormatArg = Union[TimeFormat, str]


def _finish(timer: Timer, completed: bool, stream: Optional[TextIO],
            color: Optional[bool] = None) -> Measurement:
    """Stop the timer and report it; failed blocks are logged instead of printed."""
    measurement = timer.stop()
    if completed:
        print_report(measurement, stream, color)
    else:
        logger.warning(
            "%r failed after %d %s",
            measurement.name, measurement.duration, measurement.unit_word,
        )
    return measurement


def timer(work: Callable[[], None], time_format: FormatArg = DEFAULT_FORMAT,
          name: str = DEFAULT_NAME, *, stream: Optional[TextIO] = None,
          clock: Optional[Clock] = None, color: Optional[bool] = None) -> Measurement:
    """
    Run work once, print its execution time and return the measurement.

    Args:
        work: Zero-argument callable, invoked exactly once on this thread
        time_format: "sec", "milis" or "nano" (or a TimeFormat); unknown
            labels fall back to milliseconds
        name: Label shown in the report
        stream: Text sink for the report; defaults to sys.stdout
        clock: Monotonic clock returning integer nanoseconds
        color: Force ANSI color on or off; None colors terminals only

    Returns:
        The completed Measurement

    Exceptions raised by work propagate unchanged and no report is printed.
    """
    running = Timer(name, time_format, clock=clock).start()
    completed = False
    try:
        work()
        completed = True
    finally:
        measurement = _finish(running, completed, stream, color)
    return measurement


@contextmanager
def time_block(name: str = DEFAULT_NAME, time_format: FormatArg = DEFAULT_FORMAT,
               *, stream: Optional[TextIO] = None, clock: Optional[Clock] = None,
               color: Optional[bool] = None):
    """
    Context manager for timing an inline block of code.

    Yields the running Timer; its record is set once the block exits.

    Example:
        with time_block("parse json", "nano"):
            data = json.loads(raw)
    """
    running = Timer(name, time_format, clock=clock).start()
    completed = False
    try:
        yield running
        completed = True
    finally:
        _finish(running, completed, stream, color)


def _make_wrapper(fn: Callable, name: str, time_format: FormatArg,
                  stream: Optional[TextIO], color: Optional[bool]) -> Callable:
    """Wrap a callable to time and report each invocation."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        running = Timer(name, time_format).start()
        completed = False
        try:
            result = fn(*args, **kwargs)
            completed = True
            return result
        finally:
            _finish(running, completed, stream, color)

    return wrapper


def _make_async_wrapper(fn: Callable, name: str, time_format: FormatArg,
                        stream: Optional[TextIO], color: Optional[bool]) -> Callable:
    """Wrap an async callable to time each awaited invocation."""

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs):
        running = Timer(name, time_format).start()
        completed = False
        try:
            result = await fn(*args, **kwargs)
            completed = True
            return result
        finally:
            _finish(running, completed, stream, color)

    return wrapper


def _build_decorator(label: Optional[str], time_format: FormatArg,
                     stream: Optional[TextIO], color: Optional[bool]) -> Callable:
    """Return a decorator that times the given function with the resolved label."""

    def decorator(fn: Callable) -> Callable:
        name = label or fn.__qualname__
        if inspect.iscoroutinefunction(fn):
            return _make_async_wrapper(fn, name, time_format, stream, color)
        return _make_wrapper(fn, name, time_format, stream, color)

    return decorator


def timed(arg=None, *, name: Optional[str] = None,
          time_format: FormatArg = DEFAULT_FORMAT, stream: Optional[TextIO] = None,
          color: Optional[bool] = None):
    """
    Decorator that reports the execution time of every call.

    Supported usage patterns:
        @timed
        @timed("custom name")
        @timed(name="custom name", time_format="nano")
        @timed("name", stream=sys.stderr)

    Args:
        arg: Either the decorated function (bare @timed) or a string label
        name: Keyword-only custom label
        time_format: Reporting unit for every call
        stream: Text sink for reports; defaults to sys.stdout
        color: Force ANSI color on or off; None colors terminals only
    """
    if callable(arg):
        return _build_decorator(name, time_format, stream, color)(arg)

    if isinstance(arg, str):
        return _build_decorator(arg, time_format, stream, color)

    return _build_decorator(name, time_format, stream, color)
