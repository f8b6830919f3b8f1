import pytest

from concurrency_lessons.dining import PHILOSOPHERS, Philosopher, dine


def test_everyone_leaves_exactly_once():
    departures = dine(PHILOSOPHERS, hunger=2, eat_time=0, think_time=0)
    assert sorted(departures) == sorted(p.name for p in PHILOSOPHERS)


def test_each_philosopher_eats_hunger_times(capsys):
    dine(PHILOSOPHERS, hunger=3, eat_time=0, think_time=0)
    out = capsys.readouterr().out
    for philosopher in PHILOSOPHERS:
        assert out.count(f"\t{philosopher.name} has both forks and is eating.\n") == 3
        assert out.count(f"{philosopher.name} is satisified.") == 1


def test_everyone_is_seated_before_eating(capsys):
    dine(PHILOSOPHERS, hunger=1, eat_time=0, think_time=0)
    out = capsys.readouterr().out
    last_seat = max(out.index(f"{p.name} is seated at the table.") for p in PHILOSOPHERS)
    first_meal = out.index("has both forks and is eating.")
    assert last_seat < first_meal


def test_lower_fork_taken_first(capsys):
    dine(PHILOSOPHERS, hunger=1, eat_time=0, think_time=0)
    out = capsys.readouterr().out
    right = out.index("\tPlato takes the right fork.")
    left = out.index("\tPlato takes the left fork.")
    assert right < left


def test_zero_hunger_still_leaves(capsys):
    departures = dine(PHILOSOPHERS[:2], hunger=0, eat_time=0, think_time=0)
    out = capsys.readouterr().out
    assert sorted(departures) == ["Plato", "Socrates"] or "eating" not in out
    assert "eating" not in out


def test_fork_off_the_table_rejected():
    with pytest.raises(ValueError):
        dine([Philosopher("Kant", left_fork=0, right_fork=5)], hunger=1, eat_time=0, think_time=0)


def test_same_fork_twice_rejected():
    with pytest.raises(ValueError):
        dine([Philosopher("Hume", left_fork=0, right_fork=0)], hunger=1, eat_time=0, think_time=0)


def test_empty_table():
    assert dine([], hunger=1, eat_time=0, think_time=0) == []