"""Shouting back whatever is typed, with the work done in another thread."""

from __future__ import annotations

import queue
import threading
from types import TracebackType
from typing import Sequence

_CLOSED = object()


def shout(text: str) -> str:
    """Return ``text`` in upper case followed by three exclamation marks."""
    return f"{text.upper()}!!!"


class Shouter:
    """A worker thread that answers every request with its shouted form."""

    def __init__(self) -> None:
        self._ping: queue.Queue = queue.Queue(maxsize=1)
        self._pong: queue.Queue = queue.Queue(maxsize=1)
        self._closed = False
        self._worker = threading.Thread(target=self._serve, daemon=True)
        self._worker.start()

    def _serve(self) -> None:
        while True:
            text = self._ping.get()
            if text is _CLOSED:
                return
            self._pong.put(shout(text))

    def ask(self, text: str) -> str:
        """Send ``text`` to the worker and wait for its answer."""
        if self._closed:
            raise RuntimeError("the shouter is closed")
        self._ping.put(text)
        return self._pong.get()

    def close(self) -> None:
        """Stop the worker; further requests raise RuntimeError."""
        if self._closed:
            return
        self._closed = True
        self._ping.put(_CLOSED)
        self._worker.join()

    def __enter__(self) -> Shouter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    print("Type something and press ENTER (enter Q to quit)")
    with Shouter() as shouter:
        while True:
            try:
                line = input("->")
            except EOFError:
                break
            words = line.split()
            user_input = words[0] if words else ""
            if user_input.lower() == "q":
                break
            print("Response : ", shouter.ask(user_input))
        print("All Done. Closing channels.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())