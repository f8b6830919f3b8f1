from concurrency_lessons.messages import MessageBox, announce, main, race


def test_update_then_show(capsys):
    box = MessageBox("start")
    box.update("changed")
    assert box.show() == "changed"
    assert capsys.readouterr().out == "changed\n"


def test_default_text_is_empty():
    assert MessageBox().text == ""


def test_announce_shows_each_message_in_order(capsys):
    messages = ["Hello, universe!", "Hello, cosmos!", "Hello, boom!"]
    assert announce(messages) == messages
    assert capsys.readouterr().out.splitlines() == messages


def test_announce_nothing():
    assert announce([], "Hello, world!") == []


def test_race_winner_is_one_of_the_updates():
    messages = ["hello universe", "hello galaxy"]
    assert race(messages, "Hello world!") in messages


def test_race_without_updates_keeps_initial():
    assert race([], "Hello world!") == "Hello world!"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["Hello, universe!", "Hello, cosmos!", "Hello, boom!"]
    assert lines[3] in ("hello universe", "hello galaxy")