"""
blocktimer demo script.

Run this directly to see all interfaces in action:
    python demo.py
"""

import asyncio
import logging
import sys
import time

from blocktimer import TimeFormat, time_block, timed, timer


# --- 1. Function decorator ---------------------------------------------------

@timed("sum of range")
def heavy_sum(limit):
    """Sum a large range."""
    return sum(range(limit))


# --- 2. Async decorator ------------------------------------------------------

@timed("async fetch simulation", time_format="nano")
async def fake_fetch(url):
    """Simulate an async HTTP request."""
    await asyncio.sleep(0.005)
    return f"response from {url}"


def flaky():
    time.sleep(0.002)
    raise RuntimeError("upstream unavailable")


# --- run everything ----------------------------------------------------------

def main():
    """Execute all demos."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("\n--- timer ---")
    timer(lambda: time.sleep(0.005), "milis", "Sleep")
    timer(lambda: None, "nano")
    measurement = timer(lambda: time.sleep(0.2), TimeFormat.SEC, "Short nap")
    print(f"\n(returned {measurement.duration_ns} ns)")
    timer(lambda: None, "fortnights", "Unknown unit")

    print("\n--- decorator ---")
    heavy_sum(1_000_000)
    heavy_sum(5_000_000)

    print("\n--- async ---")
    asyncio.run(fake_fetch("https://api.example.com/data"))

    print("\n--- time_block ---")
    with time_block("json serialization simulation", stream=sys.stderr):
        time.sleep(0.002)

    print("\n--- failure ---")
    try:
        timer(flaky, name="flaky call")
    except RuntimeError as exc:
        print(f"caller saw: {exc}")


if __name__ == "__main__":
    main()
