from concurrency_lessons.income import INCOMES, Income, accumulate, main


def test_main_reports_final_balance(capsys):
    assert main([]) == 0
    assert "$34320.00" in capsys.readouterr().out


def test_accumulate_default_year():
    assert accumulate(INCOMES, 52) == 34320


def test_accumulate_no_incomes():
    assert accumulate([], 52) == 0


def test_accumulate_is_linear_in_weeks():
    one_week = accumulate(INCOMES, 1)
    assert accumulate(INCOMES, 10) == 10 * one_week


def test_weekly_lines_printed(capsys):
    accumulate([Income("Gifts", 10)], 2)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "on week 1, you earned $10.00 from Gifts",
        "on week 2, you earned $10.00 from Gifts",
    ]