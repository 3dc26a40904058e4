from workhub_dashboard.common.formatting import format_hours, round_hours


def test_format_hours_minutes():
    assert format_hours(7.5) == "7h 30m"
    assert format_hours(0) == "0h 0m"


def test_format_hours_carries_rounded_minutes():
    assert format_hours(7.999) == "8h 0m"


def test_round_hours_one_decimal():
    assert round_hours(2.449) == 2.4
    assert round_hours(None) == 0.0
