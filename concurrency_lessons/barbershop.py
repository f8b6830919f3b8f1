"""The sleeping barber problem: barbers in threads serving a bounded waiting room."""

from __future__ import annotations

import queue
import random
import threading
import time
from typing import Sequence

from termcolor import colored

SEATING_CAPACITY = 10
ARRIVAL_RATE = 0.1
CUT_DURATION = 1.0
TIME_OPEN = 2.0
BARBERS = ("Frank", "Gerd", "Susano", "Killua")

_CLOSED = object()


def _say(text: str, colour: str) -> None:
    print(colored(text, colour))


class BarberShop:
    """A shop whose barbers nap when the waiting room is empty."""

    def __init__(self, capacity: int = SEATING_CAPACITY, hair_cut_duration: float = CUT_DURATION) -> None:
        if capacity < 1:
            raise ValueError("the waiting room needs at least one chair")
        self.capacity = capacity
        self.hair_cut_duration = hair_cut_duration
        self.number_of_barbers = 0
        self.open = True
        self.arrived: list[str] = []
        self.served: list[tuple[str, str]] = []
        self.turned_away: list[str] = []
        self.gone_home: list[str] = []
        self._clients: queue.Queue = queue.Queue(maxsize=capacity)
        self._done: queue.Queue = queue.Queue()
        self._lock = threading.Lock()

    def add_barber(self, barber: str) -> None:
        """Put a barber to work in a thread of their own."""
        with self._lock:
            if not self.open:
                raise RuntimeError("the shop is closed")
            self.number_of_barbers += 1
        threading.Thread(target=self._work, args=(barber,), daemon=True).start()

    def _work(self, barber: str) -> None:
        sleeping = False
        _say(f"{barber} goes to the waiting room to check for clients.", "yellow")
        while True:
            if self._clients.empty():
                _say(f"There is nothing to do, so {barber} takes a nap.", "yellow")
                sleeping = True

            client = self._clients.get()
            if client is _CLOSED:
                self.send_barber_home(barber)
                return

            if sleeping:
                _say(f"{client} wakes {barber} up.", "blue")
                sleeping = False
            self.cut_hair(barber, client)

    def cut_hair(self, barber: str, client: str) -> None:
        _say(f"{barber} is cutting {client}'s hair.", "green")
        time.sleep(self.hair_cut_duration)
        _say(f"{barber} is finished cutting {client}'s hair.", "green")
        with self._lock:
            self.served.append((barber, client))

    def send_barber_home(self, barber: str) -> None:
        _say(f"{barber} is going home.", "cyan")
        with self._lock:
            self.gone_home.append(barber)
        self._done.put(barber)

    def close_shop_for_day(self) -> None:
        """Turn new clients away, let the barbers finish the waiting room, and wait for them to leave."""
        _say("Closing shop for the day.", "cyan")
        with self._lock:
            if not self.open:
                raise RuntimeError("the shop is already closed")
            self.open = False
            barbers = self.number_of_barbers

        for _ in range(barbers):
            self._clients.put(_CLOSED)
        for _ in range(barbers):
            self._done.get()

        _say("---------------------------------------------------------------------", "magenta")
        _say("The Barbershop is now closed for the day, and everyone has gone home.", "magenta")

    def add_client(self, client: str) -> bool:
        """Seat a client in the waiting room; return False if they had to leave."""
        _say(f"*** {client} arrives!", "green")
        with self._lock:
            self.arrived.append(client)
            if not self.open:
                outcome = "closed"
            else:
                try:
                    self._clients.put_nowait(client)
                    outcome = "seated"
                except queue.Full:
                    outcome = "full"
            if outcome != "seated":
                self.turned_away.append(client)

        if outcome == "seated":
            _say(f"{client} takes a seat in the waiting room.", "yellow")
            return True
        if outcome == "full":
            _say(f"The waiting room is full, so {client} leaves.", "red")
        else:
            _say(f"The shop is already closed, so {client} leaves!", "red")
        return False


def simulate(
    barbers: Sequence[str] = BARBERS,
    capacity: int = SEATING_CAPACITY,
    cut_duration: float = CUT_DURATION,
    time_open: float = TIME_OPEN,
    arrival_rate: float = ARRIVAL_RATE,
    seed: int | None = None,
) -> BarberShop:
    """Run a day at the shop, with clients arriving every 0 to 2*arrival_rate seconds."""
    rng = random.Random(seed)
    shop = BarberShop(capacity, cut_duration)
    _say("The shop is open for the day!", "green")
    for barber in barbers:
        shop.add_barber(barber)

    closing = threading.Event()

    def arrivals() -> None:
        number = 1
        while not closing.wait(rng.random() * 2 * arrival_rate):
            shop.add_client(f"Client #{number}")
            number += 1

    arriving = threading.Thread(target=arrivals, daemon=True)
    arriving.start()
    time.sleep(time_open)
    closing.set()
    arriving.join()
    shop.close_shop_for_day()
    return shop


def main(argv: Sequence[str] | None = None) -> int:
    _say("The Sleeping Barber Problem", "yellow")
    _say("---------------------------", "yellow")
    simulate()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())