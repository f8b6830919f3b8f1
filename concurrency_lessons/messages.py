"""A shared message updated from threads, with and without contention."""

from __future__ import annotations

import threading
from typing import Iterable, Sequence


class MessageBox:
    """A message that threads may replace safely."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._lock = threading.Lock()

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    def update(self, text: str) -> None:
        with self._lock:
            self._text = text

    def show(self) -> str:
        """Print the current message and return it."""
        text = self.text
        print(text)
        return text


def announce(messages: Iterable[str], initial: str = "Hello, world!") -> list[str]:
    """Update the message in a thread, wait, and show it, once per message in turn."""
    box = MessageBox(initial)
    shown = []
    for message in messages:
        worker = threading.Thread(target=box.update, args=(message,))
        worker.start()
        worker.join()
        shown.append(box.show())
    return shown


def race(messages: Iterable[str], initial: str = "Hello world!") -> str:
    """Update the message from all threads at once; show and return the winner."""
    box = MessageBox(initial)
    workers = [threading.Thread(target=box.update, args=(message,)) for message in messages]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return box.show()


def main(argv: Sequence[str] | None = None) -> int:
    announce(["Hello, universe!", "Hello, cosmos!", "Hello, boom!"], "Hello, world!")
    race(["hello universe", "hello galaxy"], "Hello world!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())