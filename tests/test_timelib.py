import calendar
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from duinokit.timelib import (
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MIN,
    SECS_PER_WEEK,
    SECS_YR_2000,
    Clock,
    DayOfWeek,
    TimeElements,
    TimeStatus,
    break_time,
    calendar_yr_to_tm,
    day_of_week,
    days_to_time,
    elapsed_days,
    elapsed_secs_this_week,
    elapsed_secs_today,
    hours_to_time,
    is_leap_year,
    make_time,
    minutes_to_time,
    next_midnight,
    next_sunday,
    number_of_hours,
    number_of_minutes,
    number_of_seconds,
    previous_midnight,
    previous_sunday,
    tm_year_to_calendar,
    tm_year_to_y2k,
    weeks_to_time,
    y2k_year_to_tm,
)

SAMPLE_TIMES = [0, 59, 86399, 951782400, 951868799, SECS_YR_2000, 1709214330, 4102444799, 4294967295]


def _utc(t):
    return datetime.fromtimestamp(t, timezone.utc)


def _weekday(dt):
    return dt.isoweekday() % 7 + 1


class FakeMillis:
    def __init__(self, value=0):
        self.value = value

    def __call__(self):
        return self.value


def test_break_time_epoch():
    tm = break_time(0)
    assert tm_year_to_calendar(tm.year) == 1970
    assert (tm.hour, tm.minute, tm.second) == (0, 0, 0)
    assert tm.wday == DayOfWeek.THURSDAY


def test_break_time_y2k():
    tm = break_time(SECS_YR_2000)
    assert tm.year == y2k_year_to_tm(0)
    assert tm.wday == DayOfWeek.SATURDAY
    assert make_time(replace(tm, day=1, month=1)) == SECS_YR_2000


@pytest.mark.parametrize("t", SAMPLE_TIMES)
def test_break_time_matches_datetime(t):
    tm = break_time(t)
    dt = _utc(t)
    assert tm_year_to_calendar(tm.year) == dt.year
    assert (tm.month, tm.day) == (dt.month, dt.day)
    assert (tm.hour, tm.minute, tm.second) == (dt.hour, dt.minute, dt.second)
    assert tm.wday == _weekday(dt)


@pytest.mark.parametrize("t", SAMPLE_TIMES)
def test_make_time_round_trip(t):
    assert make_time(break_time(t)) == t


def test_break_time_wraps_to_32_bits():
    assert break_time(2**32 + 5) == break_time(5)


def test_make_time_rejects_bad_month():
    with pytest.raises(ValueError):
        make_time(TimeElements(day=1, month=14, year=10))


def test_leap_years_match_calendar():
    for offset in range(0, 200):
        assert is_leap_year(offset) == calendar.isleap(1970 + offset)


def test_year_conversions_round_trip():
    assert calendar_yr_to_tm(tm_year_to_calendar(55)) == 55
    assert y2k_year_to_tm(tm_year_to_y2k(55)) == 55
    assert tm_year_to_calendar(y2k_year_to_tm(0)) == _utc(SECS_YR_2000).year


@pytest.mark.parametrize("t", SAMPLE_TIMES[:-1])
def test_elapsed_time_helpers_agree_with_break_time(t):
    tm = break_time(t)
    assert number_of_seconds(t) == tm.second
    assert number_of_minutes(t) == tm.minute
    assert number_of_hours(t) == tm.hour
    assert day_of_week(t) == tm.wday
    midnight = make_time(replace(tm, hour=0, minute=0, second=0))
    assert previous_midnight(t) == midnight
    assert elapsed_secs_today(t) == t - midnight
    assert elapsed_days(t) * SECS_PER_DAY == midnight
    assert next_midnight(t) - previous_midnight(t) == SECS_PER_DAY


@pytest.mark.parametrize("t", [SECS_YR_2000, 951782400, 1709214330, 1000000000])
def test_week_helpers(t):
    start = previous_sunday(t)
    assert start <= t < next_sunday(t)
    assert next_sunday(t) - start == SECS_PER_WEEK
    assert break_time(start).wday == DayOfWeek.SUNDAY
    assert start == previous_midnight(start)
    assert elapsed_secs_this_week(t) == t - start


def test_duration_conversions():
    assert minutes_to_time(1) == SECS_PER_MIN
    assert hours_to_time(1) == SECS_PER_HOUR
    assert days_to_time(1) == SECS_PER_DAY
    assert weeks_to_time(1) == SECS_PER_WEEK
    assert days_to_time(7) == weeks_to_time(1)
    assert hours_to_time(24) == days_to_time(1)


def test_new_clock_is_not_set():
    clock = Clock(FakeMillis())
    assert clock.time_status() == TimeStatus.NOT_SET
    assert clock.now() == 0


def test_clock_default_millis_source():
    clock = Clock()
    clock.set_time(SECS_YR_2000)
    assert clock.time_status() == TimeStatus.SET
    assert clock.now() >= SECS_YR_2000


def test_clock_counts_seconds_from_millis():
    millis = FakeMillis(5000)
    clock = Clock(millis)
    clock.set_time(1000)
    assert clock.now() == 1000
    millis.value += 2500
    assert clock.now() == 1002
    millis.value += 500
    assert clock.now() == 1003
    assert clock.time_status() == TimeStatus.SET


def test_clock_survives_millis_wraparound():
    millis = FakeMillis(2**32 - 500)
    clock = Clock(millis)
    clock.set_time(10)
    millis.value = 700
    assert clock.now() == 11


def test_set_date_time_four_and_two_digit_years():
    expected = int(datetime(2024, 2, 29, 13, 45, 30, tzinfo=timezone.utc).timestamp())
    clock = Clock(FakeMillis())
    clock.set_date_time(13, 45, 30, 29, 2, 2024)
    assert clock.now() == expected
    other = Clock(FakeMillis())
    other.set_date_time(13, 45, 30, 29, 2, 24)
    assert other.now() == expected


def test_clock_field_accessors():
    clock = Clock(FakeMillis())
    clock.set_date_time(13, 45, 30, 29, 2, 2024)
    dt = _utc(clock.now())
    assert clock.year() == dt.year
    assert clock.month() == dt.month
    assert clock.day() == dt.day
    assert clock.hour() == dt.hour
    assert clock.minute() == dt.minute
    assert clock.second() == dt.second
    assert clock.weekday() == _weekday(dt)


@pytest.mark.parametrize("t", SAMPLE_TIMES[:-1])
def test_clock_accessors_with_explicit_time(t):
    clock = Clock(FakeMillis())
    tm = break_time(t)
    assert clock.hour(t) == tm.hour
    assert clock.minute(t) == tm.minute
    assert clock.second(t) == tm.second
    assert clock.day(t) == tm.day
    assert clock.month(t) == tm.month
    assert clock.weekday(t) == tm.wday
    assert clock.year(t) == tm_year_to_calendar(tm.year)


@pytest.mark.parametrize("hour", [0, 1, 11, 12, 13, 23])
def test_twelve_hour_format_and_am_pm(hour):
    t = SECS_YR_2000 + hour * SECS_PER_HOUR
    clock = Clock(FakeMillis())
    dt = _utc(t)
    assert clock.hour_format12(t) == int(dt.strftime("%I"))
    assert clock.is_pm(t) == (dt.strftime("%p") == "PM")
    assert clock.is_am(t) != clock.is_pm(t)


def test_adjust_time():
    clock = Clock(FakeMillis())
    clock.set_time(1000)
    clock.adjust_time(-10)
    assert clock.now() == 990
    clock.adjust_time(25)
    assert clock.now() == 1015


def test_sync_provider_sets_time():
    clock = Clock(FakeMillis())
    clock.set_sync_provider(lambda: 5000)
    assert clock.now() == 5000
    assert clock.time_status() == TimeStatus.SET


def test_failing_provider_leaves_clock_unset():
    clock = Clock(FakeMillis())
    clock.set_sync_provider(lambda: 0)
    assert clock.time_status() == TimeStatus.NOT_SET


def test_failing_provider_after_set_needs_sync():
    clock = Clock(FakeMillis())
    clock.set_time(100)
    clock.set_sync_provider(lambda: 0)
    assert clock.time_status() == TimeStatus.NEEDS_SYNC
    assert clock.now() == 100


def test_provider_called_after_interval():
    millis = FakeMillis()
    calls = []

    def provider():
        calls.append(millis.value)
        return 500 + millis.value // 1000

    clock = Clock(millis)
    clock.set_sync_provider(provider)
    assert len(calls) == 1
    millis.value = 299_000
    clock.now()
    assert len(calls) == 1
    millis.value = 300_000
    assert clock.now() == 800
    assert len(calls) == 2


def test_set_sync_interval():
    millis = FakeMillis()
    calls = []

    def provider():
        calls.append(millis.value)
        return 500 + millis.value // 1000

    clock = Clock(millis)
    clock.set_sync_provider(provider)
    clock.set_sync_interval(10)
    millis.value = 9_000
    assert clock.now() == 509
    assert len(calls) == 1
    millis.value = 10_000
    assert clock.now() == 510
    assert len(calls) == 2
    assert clock.time_status() == TimeStatus.SET