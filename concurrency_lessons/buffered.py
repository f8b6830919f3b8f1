"""A fast sender filling a buffered queue that a slow listener drains."""

from __future__ import annotations

import queue
import threading
import time
from typing import Sequence

CLOSED = object()
"""Put on a channel to tell its listener that nothing more will come."""

COUNT = 100
BUFFER_SIZE = 10
DELAY = 1.0


def listen(channel: queue.Queue, delay: float, received: list) -> None:
    """Take items off ``channel`` until :data:`CLOSED` arrives, working ``delay`` seconds on each."""
    while True:
        item = channel.get()
        if item is CLOSED:
            return
        print("Got", item, "from channel")
        received.append(item)
        time.sleep(delay)


def run(count: int = COUNT, buffer_size: int = BUFFER_SIZE, delay: float = DELAY) -> list[int]:
    """Send ``count`` numbers through a buffer of ``buffer_size``; return what the listener got."""
    if buffer_size < 1:
        raise ValueError("buffer_size must be at least 1")
    if count < 0:
        raise ValueError("count must not be negative")

    channel: queue.Queue = queue.Queue(maxsize=buffer_size)
    received: list[int] = []
    listener = threading.Thread(target=listen, args=(channel, delay, received), daemon=True)
    listener.start()

    for number in range(count):
        print("sending", number, "to channel...")
        channel.put(number)
        print("sent", number, "to channel!")

    print("Done!")
    channel.put(CLOSED)
    listener.join()
    return received


def main(argv: Sequence[str] | None = None) -> int:
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())