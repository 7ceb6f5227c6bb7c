"""Seconds-since-1970 time keeping: calendar conversion and a soft clock."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, Optional

_U32 = 0xFFFFFFFF

SECS_PER_MIN = 60
SECS_PER_HOUR = 3600
SECS_PER_DAY = SECS_PER_HOUR * 24
DAYS_PER_WEEK = 7
SECS_PER_WEEK = SECS_PER_DAY * DAYS_PER_WEEK
SECS_PER_YEAR = SECS_PER_DAY * 365
SECS_YR_2000 = 946684800

DEFAULT_SYNC_INTERVAL = 300

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class TimeStatus(IntEnum):
    """Whether a clock has been set and recently synchronised."""

    NOT_SET = 0
    NEEDS_SYNC = 1
    SET = 2


class DayOfWeek(IntEnum):
    """Day of the week, Sunday being day 1."""

    INVALID = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


@dataclass
class TimeElements:
    """A point in time broken into fields; ``year`` is an offset from 1970."""

    second: int = 0
    minute: int = 0
    hour: int = 0
    wday: int = 0
    day: int = 0
    month: int = 0
    year: int = 0


def is_leap_year(year_offset: int) -> bool:
    """Return True if the year ``1970 + year_offset`` is a leap year."""
    year = 1970 + year_offset
    return year > 0 and year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_lengths(year_offset: int) -> tuple[int, ...]:
    feb = 29 if is_leap_year(year_offset) else 28
    return _MONTH_DAYS[:1] + (feb,) + _MONTH_DAYS[2:]


def break_time(t: int) -> TimeElements:
    """Split a 32-bit count of seconds since 1970 into calendar fields."""
    t &= _U32
    t, second = divmod(t, 60)
    t, minute = divmod(t, 60)
    days, hour = divmod(t, 24)
    wday = (days + 4) % 7 + 1

    year = 0
    while True:
        length = 366 if is_leap_year(year) else 365
        if days < length:
            break
        days -= length
        year += 1

    month = 13
    for number, length in enumerate(_month_lengths(year), start=1):
        if days < length:
            month = number
            break
        days -= length

    return TimeElements(
        second=second,
        minute=minute,
        hour=hour,
        wday=wday,
        day=days + 1,
        month=month,
        year=year,
    )


def make_time(tm: TimeElements) -> int:
    """Assemble calendar fields into seconds since 1970, modulo 2**32."""
    if not 0 <= tm.month <= 12:
        raise ValueError(f"month out of range: {tm.month}")
    leap_days = sum(1 for y in range(tm.year) if is_leap_year(y))
    seconds = (tm.year * 365 + leap_days) * SECS_PER_DAY
    lengths = _month_lengths(tm.year)
    seconds += sum(lengths[: max(tm.month - 1, 0)]) * SECS_PER_DAY
    seconds += (tm.day - 1) * SECS_PER_DAY
    seconds += tm.hour * SECS_PER_HOUR
    seconds += tm.minute * SECS_PER_MIN
    seconds += tm.second
    return seconds & _U32


def tm_year_to_calendar(year: int) -> int:
    """Full four-digit year from an offset from 1970."""
    return year + 1970


def calendar_yr_to_tm(year: int) -> int:
    """Offset from 1970 from a full four-digit year."""
    return year - 1970


def tm_year_to_y2k(year: int) -> int:
    """Offset from 2000 from an offset from 1970."""
    return year - 30


def y2k_year_to_tm(year: int) -> int:
    """Offset from 1970 from an offset from 2000."""
    return year + 30


def number_of_seconds(t: int) -> int:
    return t % SECS_PER_MIN


def number_of_minutes(t: int) -> int:
    return (t // SECS_PER_MIN) % SECS_PER_MIN


def number_of_hours(t: int) -> int:
    return (t % SECS_PER_DAY) // SECS_PER_HOUR


def day_of_week(t: int) -> int:
    """Day of the week for ``t``, 1 being Sunday."""
    return (t // SECS_PER_DAY + 4) % DAYS_PER_WEEK + 1


def elapsed_days(t: int) -> int:
    """Whole days since 1 January 1970."""
    return t // SECS_PER_DAY


def elapsed_secs_today(t: int) -> int:
    """Seconds since the last midnight."""
    return t % SECS_PER_DAY


def previous_midnight(t: int) -> int:
    """Time at the start of the day holding ``t``."""
    return (t // SECS_PER_DAY) * SECS_PER_DAY


def next_midnight(t: int) -> int:
    """Time at the end of the day holding ``t``."""
    return previous_midnight(t) + SECS_PER_DAY


def elapsed_secs_this_week(t: int) -> int:
    """Seconds since the start of the week, which begins on Sunday."""
    return elapsed_secs_today(t) + (day_of_week(t) - 1) * SECS_PER_DAY


def previous_sunday(t: int) -> int:
    """Time at the start of the week holding ``t``."""
    return t - elapsed_secs_this_week(t)


def next_sunday(t: int) -> int:
    """Time at the end of the week holding ``t``."""
    return previous_sunday(t) + SECS_PER_WEEK


def minutes_to_time(minutes: int) -> int:
    return minutes * SECS_PER_MIN


def hours_to_time(hours: int) -> int:
    return hours * SECS_PER_HOUR


def days_to_time(days: int) -> int:
    return days * SECS_PER_DAY


def weeks_to_time(weeks: int) -> int:
    return weeks * SECS_PER_WEEK


def _monotonic_millis() -> int:
    return int(time.monotonic() * 1000)


class Clock:
    """A seconds clock driven by a millisecond counter, with optional external sync.

    ``millis`` is a callable returning a free-running 32-bit millisecond count.
    A sync provider returns the current time, or 0 when it cannot tell.
    """

    def __init__(self, millis: Optional[Callable[[], int]] = None) -> None:
        self._millis = millis if millis is not None else _monotonic_millis
        self._sys_time = 0
        self._prev_millis = 0
        self._next_sync_time = 0
        self._sync_interval = DEFAULT_SYNC_INTERVAL
        self._status = TimeStatus.NOT_SET
        self._provider: Optional[Callable[[], int]] = None
        self._cache_time: Optional[int] = None
        self._cache = TimeElements()

    def now(self) -> int:
        """Current time in seconds since 1970, syncing if one is due."""
        elapsed = (self._millis() - self._prev_millis) & _U32
        whole = elapsed // 1000
        self._sys_time = (self._sys_time + whole) & _U32
        self._prev_millis = (self._prev_millis + whole * 1000) & _U32

        if self._next_sync_time <= self._sys_time and self._provider is not None:
            t = self._provider()
            if t:
                self.set_time(t)
            else:
                self._next_sync_time = (self._sys_time + self._sync_interval) & _U32
                if self._status != TimeStatus.NOT_SET:
                    self._status = TimeStatus.NEEDS_SYNC
        return self._sys_time

    def set_time(self, t: int) -> None:
        """Set the clock to ``t`` seconds since 1970."""
        self._sys_time = t & _U32
        self._next_sync_time = (self._sys_time + self._sync_interval) & _U32
        self._status = TimeStatus.SET
        self._prev_millis = self._millis() & _U32

    def set_date_time(
        self, hour: int, minute: int, second: int, day: int, month: int, year: int
    ) -> None:
        """Set the clock from fields; ``year`` is four digits or two (from 2000)."""
        offset = year - 1970 if year > 99 else year + 30
        tm = TimeElements(
            second=second, minute=minute, hour=hour, day=day, month=month, year=offset
        )
        self.set_time(make_time(tm))

    def adjust_time(self, adjustment: int) -> None:
        """Shift the clock by ``adjustment`` seconds."""
        self._sys_time = (self._sys_time + adjustment) & _U32

    def time_status(self) -> TimeStatus:
        """Whether the clock is set and recently synchronised."""
        self.now()
        return self._status

    def set_sync_provider(self, provider: Optional[Callable[[], int]]) -> None:
        """Install the external time source and sync with it at once."""
        self._provider = provider
        self._next_sync_time = self._sys_time
        self.now()

    def set_sync_interval(self, interval: int) -> None:
        """Set the number of seconds between syncs."""
        self._sync_interval = interval & _U32
        self._next_sync_time = (self._sys_time + self._sync_interval) & _U32

    def _elements(self, t: Optional[int]) -> TimeElements:
        if t is None:
            t = self.now()
        if t != self._cache_time:
            self._cache = break_time(t)
            self._cache_time = t
        return replace(self._cache)

    def hour(self, t: Optional[int] = None) -> int:
        return self._elements(t).hour

    def hour_format12(self, t: Optional[int] = None) -> int:
        """Hour on a 12-hour dial: midnight and noon are 12."""
        hour = self._elements(t).hour
        if hour == 0:
            return 12
        return hour - 12 if hour > 12 else hour

    def is_am(self, t: Optional[int] = None) -> bool:
        return not self.is_pm(t)

    def is_pm(self, t: Optional[int] = None) -> bool:
        return self.hour(t) >= 12

    def minute(self, t: Optional[int] = None) -> int:
        return self._elements(t).minute

    def second(self, t: Optional[int] = None) -> int:
        return self._elements(t).second

    def day(self, t: Optional[int] = None) -> int:
        return self._elements(t).day

    def weekday(self, t: Optional[int] = None) -> int:
        """Day of the week, Sunday being 1."""
        return self._elements(t).wday

    def month(self, t: Optional[int] = None) -> int:
        return self._elements(t).month

    def year(self, t: Optional[int] = None) -> int:
        """Full four-digit year."""
        return tm_year_to_calendar(self._elements(t).year)