"""Dijkstra's solution to the dining philosophers problem, using threads and locks."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Philosopher:
    """A philosopher and the indices of the two forks beside their plate."""

    name: str
    left_fork: int
    right_fork: int


PHILOSOPHERS = (
    Philosopher("Plato", left_fork=4, right_fork=0),
    Philosopher("Socrates", left_fork=0, right_fork=1),
    Philosopher("Aristotle", left_fork=1, right_fork=2),
    Philosopher("Pascal", left_fork=2, right_fork=3),
    Philosopher("Locke", left_fork=3, right_fork=4),
)

HUNGER = 3
EAT_TIME = 1.0
THINK_TIME = 3.0


def _check_table(philosophers: Sequence[Philosopher]) -> None:
    forks = range(len(philosophers))
    for philosopher in philosophers:
        if philosopher.left_fork not in forks or philosopher.right_fork not in forks:
            raise ValueError(f"{philosopher.name} has a fork that is not on the table")
        if philosopher.left_fork == philosopher.right_fork:
            raise ValueError(f"{philosopher.name} needs two different forks")


def _sit_and_eat(
    philosopher: Philosopher,
    forks: dict[int, threading.Lock],
    seated: threading.Barrier,
    hunger: int,
    eat_time: float,
    think_time: float,
    departures: list[str],
) -> None:
    print(f"{philosopher.name} is seated at the table.")
    seated.wait()

    sides = [("left", philosopher.left_fork), ("right", philosopher.right_fork)]
    # Always take the lower-numbered fork first so no cycle of waiters can form.
    sides.sort(key=lambda side: side[1])

    for _ in range(hunger):
        for side, fork in sides:
            forks[fork].acquire()
            print(f"\t{philosopher.name} takes the {side} fork.")

        print(f"\t{philosopher.name} has both forks and is eating.")
        time.sleep(eat_time)

        print(f"\t{philosopher.name} is thinking.")
        time.sleep(think_time)

        forks[philosopher.left_fork].release()
        forks[philosopher.right_fork].release()
        print(f"\t{philosopher.name} put down the forks.")

    print(philosopher.name, "is satisified.")
    print(philosopher.name, "left the table.")
    departures.append(philosopher.name)


def dine(
    philosophers: Sequence[Philosopher] = PHILOSOPHERS,
    hunger: int = HUNGER,
    eat_time: float = EAT_TIME,
    think_time: float = THINK_TIME,
) -> list[str]:
    """Run the meal and return the philosophers' names in the order they left."""
    _check_table(philosophers)
    if not philosophers:
        return []

    forks = {index: threading.Lock() for index in range(len(philosophers))}
    seated = threading.Barrier(len(philosophers))
    departures: list[str] = []

    threads = [
        threading.Thread(
            target=_sit_and_eat,
            args=(philosopher, forks, seated, hunger, eat_time, think_time, departures),
        )
        for philosopher in philosophers
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return departures


def main(argv: Sequence[str] | None = None) -> int:
    print("Dining Philosophers Problem")
    print("---------------------------")
    print("The table is empty.")
    dine()
    print("The table is empty.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())