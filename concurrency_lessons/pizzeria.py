"""A pizzeria: a producer thread making orders and a consumer delivering them."""

from __future__ import annotations

import queue
import random
import threading
import time
from dataclasses import dataclass
from typing import Iterator, Sequence

from termcolor import colored

NUMBER_OF_PIZZAS = 10

_CLOSED = object()


@dataclass(frozen=True)
class PizzaOrder:
    pizza_number: int
    message: str = ""
    success: bool = False


class Pizzeria:
    """Makes pizzas in the background and hands them over one at a time."""

    def __init__(
        self,
        number_of_pizzas: int = NUMBER_OF_PIZZAS,
        rng: random.Random | None = None,
        delay_unit: float = 1.0,
    ) -> None:
        self.number_of_pizzas = number_of_pizzas
        self.made = 0
        self.failed = 0
        self.total = 0
        self._rng = rng or random.Random()
        self._delay_unit = delay_unit
        self._data: queue.Queue = queue.Queue(maxsize=1)
        self._quit = threading.Event()
        self._finished = threading.Event()

    def make_pizza(self, number: int) -> PizzaOrder:
        """Try to make the order after ``number``; past the last one, return an empty order."""
        number += 1
        if number > self.number_of_pizzas:
            return PizzaOrder(number)

        delay = self._rng.randint(1, 5)
        print(f"Received order #{number}!")

        roll = self._rng.randint(1, 12)
        if roll < 5:
            self.failed += 1
        else:
            self.made += 1
        self.total += 1

        print(f"Making pizza #{number}. It will take {delay} seconds....")
        time.sleep(delay * self._delay_unit)

        if roll <= 2:
            return PizzaOrder(number, f"*** We ran out of ingredients for pizza #{number}!")
        if roll <= 4:
            return PizzaOrder(number, f"*** The cook quit while making pizza #{number}!")
        return PizzaOrder(number, f"Pizza order #{number} is ready!", True)

    def run(self) -> None:
        """Make orders until :meth:`close` is called."""
        number = 0
        while True:
            order = self.make_pizza(number)
            number = order.pizza_number
            while True:
                try:
                    self._data.put(order, timeout=0.01)
                    break
                except queue.Full:
                    if self._quit.is_set():
                        self._shut_down()
                        return

    def _shut_down(self) -> None:
        try:
            self._data.get_nowait()
        except queue.Empty:
            pass
        self._data.put(_CLOSED)
        self._finished.set()

    def close(self) -> None:
        """Ask the producer to stop and wait until it has."""
        self._quit.set()
        self._finished.wait()

    def orders(self) -> Iterator[PizzaOrder]:
        """Yield orders as they are made, until the producer has stopped."""
        while True:
            item = self._data.get()
            if item is _CLOSED:
                return
            yield item


def day_rating(failed: int) -> tuple[str, str]:
    """Return the verdict on the day and the colour to print it in."""
    if failed > 9:
        return "It was an awful day...", "red"
    if failed >= 6:
        return "It was not a very good day...", "red"
    if failed >= 4:
        return "It was an okay day....", "yellow"
    if failed >= 2:
        return "It was a pretty good day!", "yellow"
    return "It was a great day!", "green"


def _say(text: str, colour: str) -> None:
    print(colored(text, colour))


def main(argv: Sequence[str] | None = None) -> int:
    _say("The Pizzeria is open for business!", "cyan")
    _say("----------------------------------", "cyan")

    pizzeria = Pizzeria()
    producer = threading.Thread(target=pizzeria.run, daemon=True)
    producer.start()

    for order in pizzeria.orders():
        if order.pizza_number <= pizzeria.number_of_pizzas:
            if order.success:
                _say(order.message, "green")
                _say(f"Order #{order.pizza_number} is out for delivery!", "green")
            else:
                _say(order.message, "red")
                _say("The customer is really mad!", "red")
        else:
            _say("Done making pizzas...", "cyan")
            pizzeria.close()

    producer.join()

    _say("-----------------", "cyan")
    _say("Done for the day.", "cyan")
    _say(
        f"We made {pizzeria.made} pizzas, but failed to make {pizzeria.failed}, "
        f"with {pizzeria.total} attempts in total.",
        "cyan",
    )
    verdict, colour = day_rating(pizzeria.failed)
    _say(verdict, colour)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())