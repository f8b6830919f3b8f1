"""Printing words from several threads and waiting for all of them."""

from __future__ import annotations

import threading
from typing import Iterable, Sequence

WORDS = (
    "alpha",
    "beta",
    "gamma",
    "delta",
    "pi",
    "zeta",
    "eta",
    "theta",
    "epsilon",
)


def print_something(text: str) -> None:
    """Print one line of text."""
    print(text)


def print_words(words: Iterable[str]) -> list[str]:
    """Print every word as "<index> : <word>" from its own thread; return the lines."""
    lines = [f"{index} : {word}" for index, word in enumerate(words)]
    threads = [threading.Thread(target=print_something, args=(line,)) for line in lines]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    print_words(WORDS)
    print_something("SOMEthing to PRint")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())