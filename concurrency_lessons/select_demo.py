"""Two servers sending at different rates, read by a random choice among ready cases."""

from __future__ import annotations

import queue
import random
import threading
import time
from typing import Sequence

MESSAGES = ("This is from Server-1", "This is from Server-2")
INTERVALS = (6.0, 3.0)

_POLL = 0.001
_PUT_TIMEOUT = 0.05


def server(channel: queue.Queue, message: str, interval: float, stop: threading.Event) -> None:
    """Send ``message`` every ``interval`` seconds until ``stop`` is set."""
    while not stop.wait(interval):
        while True:
            try:
                channel.put(message, timeout=_PUT_TIMEOUT)
                break
            except queue.Full:
                if stop.is_set():
                    return


def select_messages(
    intervals: Sequence[float] = INTERVALS, limit: int | None = None
) -> list[tuple[str, str]]:
    """Read from both servers, picking at random among the ready cases.

    Each server's channel backs two cases: "one" and "two" read from the first,
    "three" and "four" from the second. Stops after ``limit`` messages, or never
    when ``limit`` is None. Returns the (case, message) pairs in order.
    """
    if len(intervals) != len(MESSAGES):
        raise ValueError(f"expected {len(MESSAGES)} intervals, got {len(intervals)}")
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")

    channels = [queue.Queue(maxsize=1) for _ in MESSAGES]
    cases = [
        ("one", channels[0]),
        ("two", channels[0]),
        ("three", channels[1]),
        ("four", channels[1]),
    ]
    stop = threading.Event()
    servers = [
        threading.Thread(target=server, args=(channel, message, interval, stop), daemon=True)
        for channel, message, interval in zip(channels, MESSAGES, intervals)
    ]
    for thread in servers:
        thread.start()

    selected: list[tuple[str, str]] = []
    try:
        while limit is None or len(selected) < limit:
            ready = [case for case in cases if not case[1].empty()]
            if not ready:
                time.sleep(_POLL)
                continue
            label, channel = random.choice(ready)
            message = channel.get_nowait()
            print(f"Case {label} :  {message}")
            selected.append((label, message))
    finally:
        stop.set()
        for thread in servers:
            thread.join()
    return selected


def main(argv: Sequence[str] | None = None) -> int:
    print("Select with Channels")
    print("--------------------")
    select_messages()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())