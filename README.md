# concurrency-lessons

Small, runnable programs that each show one classic concurrency pattern
using Python threads, locks, barriers, events and queues.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The programs

| Command | Module | What it shows |
|---|---|---|
| `waitgroup-demo` | `concurrency_lessons.waitgroup_demo` | Printing nine words as `<index> : <word>`, each from its own thread, and waiting for all of them |
| `messages-demo` | `concurrency_lessons.messages` | Replacing a shared, lock-protected message from worker threads, first one at a time, then all at once |
| `income-demo` | `concurrency_lessons.income` | Four incomes added to one balance for 52 weeks, one thread per income; the final balance is $34320.00 |
| `pizzeria` | `concurrency_lessons.pizzeria` | Producer-consumer: a thread making ten pizza orders that the main thread delivers, then a verdict on the day |
| `dining-philosophers` | `concurrency_lessons.dining` | Five philosophers sharing five forks, always taking the lower-numbered fork first so no deadlock can form |
| `buffered-channel-demo` | `concurrency_lessons.buffered` | A fast sender putting 100 numbers into a queue of 10 that a listener drains at one per second |
| `select-demo` | `concurrency_lessons.select_demo` | Reading from two servers sending every 6 and 3 seconds, picking at random among the ready cases; runs until interrupted |
| `shout` | `concurrency_lessons.shout` | Request and reply with a worker thread: type a word and get it back upper-cased with `!!!`; `q` or end of input quits |
| `sleeping-barber` | `concurrency_lessons.barbershop` | Four barbers, a waiting room of ten chairs, clients arriving at random for two seconds |

Each command prints what happens as it happens. Several of them sleep between
steps on purpose, so they take from a few seconds to a couple of minutes.
The pizzeria and the sleeping barber print in colour.

## Using the pieces from Python

The building blocks can be called directly, and their timings are
parameters, so they can run quickly:

```python
from concurrency_lessons.income import Income, accumulate
from concurrency_lessons.pizzeria import day_rating
from concurrency_lessons.shout import Shouter, shout
from concurrency_lessons.dining import dine
from concurrency_lessons.barbershop import simulate
from concurrency_lessons.buffered import run

accumulate([Income("Main job", 500), Income("Gifts", 10)], weeks=52)  # 26520
day_rating(3)           # ("It was a pretty good day!", "yellow")
shout("hello")          # "HELLO!!!"

with Shouter() as shouter:
    shouter.ask("ping")  # "PING!!!"

dine(eat_time=0, think_time=0)   # names in the order the philosophers left
run(count=20, buffer_size=5, delay=0)  # [0, 1, ..., 19]
shop = simulate(cut_duration=0.01, time_open=0.2, arrival_rate=0.01, seed=1)
shop.served, shop.turned_away
```

Other pieces:

- `concurrency_lessons.waitgroup_demo.print_words(words)` prints and returns the numbered lines.
- `concurrency_lessons.messages.MessageBox` holds a message that threads may
  replace; `announce(messages)` and `race(messages)` return what was shown.
- `concurrency_lessons.pizzeria.Pizzeria` takes the number of pizzas, a
  `random.Random` and a delay unit; `run()` produces orders in a thread,
  `orders()` yields them and `close()` stops the producer.
- `concurrency_lessons.select_demo.select_messages(intervals, limit)` stops
  after `limit` messages and returns the `(case, message)` pairs.
- `concurrency_lessons.barbershop.BarberShop` can be driven by hand with
  `add_barber`, `add_client` and `close_shop_for_day`.

## What it does not do

There is no web application, database or mail sending here: the package is
only the command-line demonstrations and the functions listed above.