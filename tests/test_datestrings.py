import pytest

from duinokit.datestrings import day_short_str, day_str, month_short_str, month_str


def test_known_names():
    assert month_str(1) == "January"
    assert month_str(12) == "December"
    assert day_str(1) == "Sunday"
    assert day_str(7) == "Saturday"


def test_short_names_pinned():
    assert month_short_str(9) == "Sep"
    assert day_short_str(4) == "Wed"


def test_index_zero_placeholders():
    assert month_str(0) == ""
    assert month_short_str(0) == "Err"
    assert day_str(0) == "Err"
    assert day_short_str(0) == "Err"


@pytest.mark.parametrize("month", range(1, 13))
def test_month_short_is_prefix_of_long(month):
    assert month_short_str(month) == month_str(month)[:3]
    assert len(month_str(month)) <= 9


@pytest.mark.parametrize("day", range(1, 8))
def test_day_short_is_prefix_of_long(day):
    assert day_short_str(day) == day_str(day)[:3]
    assert len(day_str(day)) <= 9


def test_names_are_distinct():
    assert len({month_str(m) for m in range(1, 13)}) == 12
    assert len({day_short_str(d) for d in range(1, 8)}) == 7


@pytest.mark.parametrize("func,bad", [
    (month_str, 13),
    (month_short_str, 13),
    (day_str, 8),
    (day_short_str, 8),
    (month_str, -1),
    (day_short_str, -1),
])
def test_out_of_range_raises(func, bad):
    with pytest.raises(ValueError):
        func(bad)