"""A year of weekly income added to one balance from several threads."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Income:
    source: str
    amount: int


INCOMES = (
    Income("Main job", 500),
    Income("Gifts", 10),
    Income("Part time job", 50),
    Income("Investments", 100),
)

WEEKS = 52


def accumulate(incomes: Iterable[Income] = INCOMES, weeks: int = WEEKS) -> int:
    """Add every income once a week, one thread per income; return the final balance."""
    balance = 0
    lock = threading.Lock()

    def earn(income: Income) -> None:
        nonlocal balance
        for week in range(1, weeks + 1):
            with lock:
                balance += income.amount
            print(f"on week {week}, you earned ${income.amount}.00 from {income.source}")

    workers = [threading.Thread(target=earn, args=(income,)) for income in incomes]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return balance


def main(argv: Sequence[str] | None = None) -> int:
    print("Initial accound balance : $0.00")
    balance = accumulate(INCOMES, WEEKS)
    print(f"Final bank balance : ${balance}.00")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())