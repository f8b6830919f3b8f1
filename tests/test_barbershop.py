import pytest

from concurrency_lessons.barbershop import BarberShop, simulate


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        BarberShop(capacity=0)


def test_full_waiting_room_turns_client_away(capsys):
    shop = BarberShop(capacity=1, hair_cut_duration=0)
    assert shop.add_client("Ann") is True
    assert shop.add_client("Bob") is False
    assert shop.turned_away == ["Bob"]
    assert "The waiting room is full, so Bob leaves." in capsys.readouterr().out
    shop.close_shop_for_day()


def test_closed_shop_turns_client_away(capsys):
    shop = BarberShop(capacity=2, hair_cut_duration=0)
    shop.close_shop_for_day()
    assert shop.add_client("Cid") is False
    assert shop.open is False
    assert shop.turned_away == ["Cid"]
    assert "The shop is already closed, so Cid leaves!" in capsys.readouterr().out


def test_closing_twice_raises():
    shop = BarberShop(capacity=1, hair_cut_duration=0)
    shop.close_shop_for_day()
    with pytest.raises(RuntimeError):
        shop.close_shop_for_day()


def test_cannot_hire_after_closing():
    shop = BarberShop(capacity=1, hair_cut_duration=0)
    shop.close_shop_for_day()
    with pytest.raises(RuntimeError):
        shop.add_barber("Late")


def test_waiting_clients_are_served_before_going_home():
    shop = BarberShop(capacity=5, hair_cut_duration=0)
    shop.add_barber("Frank")
    clients = ["c1", "c2", "c3"]
    for client in clients:
        assert shop.add_client(client)
    shop.close_shop_for_day()
    assert shop.served == [("Frank", client) for client in clients]
    assert shop.gone_home == ["Frank"]
    assert shop.number_of_barbers == 1


def test_every_barber_goes_home(capsys):
    shop = BarberShop(capacity=2, hair_cut_duration=0)
    for barber in ("Frank", "Gerd"):
        shop.add_barber(barber)
    shop.close_shop_for_day()
    assert sorted(shop.gone_home) == ["Frank", "Gerd"]
    out = capsys.readouterr().out
    assert "Frank is going home." in out
    assert "The Barbershop is now closed for the day, and everyone has gone home." in out


def test_simulated_day_accounts_for_every_client():
    shop = simulate(
        barbers=("Frank", "Gerd"),
        capacity=3,
        cut_duration=0.01,
        time_open=0.2,
        arrival_rate=0.005,
        seed=7,
    )
    assert shop.arrived
    assert shop.arrived == [f"Client #{n}" for n in range(1, len(shop.arrived) + 1)]
    served_clients = [client for _, client in shop.served]
    assert len(served_clients) == len(set(served_clients))
    assert sorted(served_clients + shop.turned_away) == sorted(shop.arrived)
    assert sorted(shop.gone_home) == ["Frank", "Gerd"]
    assert shop.open is False


def test_simulated_day_without_barbers_serves_nobody():
    shop = simulate(
        barbers=(),
        capacity=2,
        cut_duration=0.0,
        time_open=0.1,
        arrival_rate=0.005,
        seed=1,
    )
    assert shop.served == []
    assert len(shop.turned_away) == max(len(shop.arrived) - 2, 0)