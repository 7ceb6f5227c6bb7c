# duinokit

Small building blocks for microcontroller-style projects, in plain Python:

- `duinokit.timelib`: a seconds-since-1970 software clock (`Clock`) with an
  optional external sync provider. It also converts between timestamps and
  calendar fields and has helpers for midnights, Sundays and elapsed time.
- `duinokit.datestrings`: English month and weekday names, long and short.
- `duinokit.lcd_i2c`: a driver (`LiquidCrystalI2C`) for HD44780 character
  LCDs that sit behind an I2C port expander. It works with any bus object
  you supply.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Calendar helpers

Timestamps are 32-bit counts of seconds since 1970-01-01 00:00:00.
`break_time` splits one into a `TimeElements` dataclass with the fields
`second`, `minute`, `hour`, `wday`, `day`, `month` and `year`. `wday` runs
from 1 for Sunday to 7 for Saturday, and `year` is an offset from 1970.
`make_time` turns the fields back into a timestamp, wrapped to 32 bits. It
raises `ValueError` if `month` is outside 0–12.

```python
from duinokit.timelib import break_time, make_time, day_of_week, next_midnight

tm = break_time(946684800)          # 2000-01-01 00:00:00
print(tm.year, tm.month, tm.day, tm.wday)   # 30 1 1 7
assert make_time(tm) == 946684800
print(day_of_week(946684800))       # 7 (Saturday)
print(next_midnight(946684800 + 5)) # 946771200
```

Other helpers:

- Year conversions: `tm_year_to_calendar`, `calendar_yr_to_tm`,
  `tm_year_to_y2k` and `y2k_year_to_tm`.
- Leap years: `is_leap_year(year_offset)`, where the year is counted from 1970.
- Parts of a timestamp: `number_of_seconds`, `number_of_minutes`,
  `number_of_hours`, `day_of_week`, `elapsed_days`, `elapsed_secs_today` and
  `elapsed_secs_this_week`.
- Boundaries: `previous_midnight`, `next_midnight`, `previous_sunday` and
  `next_sunday`.
- Durations: `minutes_to_time`, `hours_to_time`, `days_to_time` and
  `weeks_to_time`.

Constants such as `SECS_PER_DAY`, `SECS_PER_WEEK` and `SECS_YR_2000` are
also defined. The enums `TimeStatus` and `DayOfWeek` name the clock states
and the weekdays.

## The software clock

A `Clock` counts whole seconds from a millisecond source. The source is a
callable that returns a free-running millisecond count. If you give none,
the clock uses `time.monotonic`.

```python
import time
from duinokit.timelib import Clock, TimeStatus

clock = Clock(lambda: int(time.monotonic() * 1000))
clock.set_date_time(12, 30, 0, 24, 12, 2023)   # hour, minute, second, day, month, year
assert clock.time_status() is TimeStatus.SET
print(clock.hour(), clock.minute(), clock.is_pm())   # 12 30 True
```

- `set_date_time` accepts a four-digit year or a two-digit year counted
  from 2000.
- `set_time(t)` sets the clock from a timestamp.
- `adjust_time(seconds)` shifts the clock by a number of seconds.
- `now()` returns the current timestamp.

The field accessors `hour`, `hour_format12`, `is_am`, `is_pm`, `minute`,
`second`, `day`, `weekday`, `month` and `year` each take an optional
timestamp. When none is given they use the clock's current time.

`set_sync_provider` registers a callable that returns the current timestamp,
or 0 when none is available, and syncs with it at once. `set_sync_interval`
sets how many seconds pass between sync attempts; the default is 300. If a
sync fails on a clock that was already set, `time_status()` reports
`TimeStatus.NEEDS_SYNC`. A clock that has never been set stays
`TimeStatus.NOT_SET`.

## Date strings

```python
from duinokit.datestrings import month_str, month_short_str, day_str, day_short_str

month_str(3)        # "March"
month_short_str(3)  # "Mar"
day_str(1)          # "Sunday"
day_short_str(7)    # "Sat"
```

Index 0 is the error entry in each table: `""` for `month_str` and `"Err"`
for the others. An index past the end of a table raises `ValueError`.

## Character LCD over I2C

`LiquidCrystalI2C` drives the display in 4-bit mode. It sends single bytes
through a bus object that you pass in. That object needs a method
`write_byte(address, value)`, such as an SMBus handle.

The optional `delay_us` callable receives each wait the display needs, in
microseconds. If you give none, the driver uses `time.sleep`.

```python
import time
from duinokit.lcd_i2c import LiquidCrystalI2C

lcd = LiquidCrystalI2C(0x27, 16, 2, bus, lambda us: time.sleep(us / 1_000_000))
lcd.init()
lcd.backlight()
lcd.set_cursor(0, 0)
lcd.print_str("Hello")
lcd.create_char(0, [0x00, 0x0A, 0x1F, 0x1F, 0x0E, 0x04, 0x00, 0x00])
lcd.set_cursor(0, 1)
lcd.write(0)
```

Setup and output:

- `init()` runs the power-up sequence for the size given to the constructor.
- `begin(cols, lines, dotsize)` runs the power-up sequence for an explicit
  size and font.
- `print_str` accepts `str`, which it encodes as Latin-1, or `bytes`. It
  returns the number of bytes written.
- `write` sends one data byte. `command` sends one instruction byte.

Display state:

- `clear`, `home`, `display`/`no_display`, `cursor`/`no_cursor`,
  `blink`/`no_blink`, `scroll_display_left`/`scroll_display_right`,
  `left_to_right`/`right_to_left` and `autoscroll`/`no_autoscroll`.
- `backlight`, `no_backlight` and `set_backlight(value)` switch the
  backlight.

Errors:

- `set_cursor` raises `ValueError` for a row that has no display address.
- `create_char` raises `ValueError` for a glyph of fewer than eight rows.

The module also exports the controller's command and flag constants, for
example `CLEAR_DISPLAY`, `DISPLAY_ON`, `LINES_2` and `DOTS_5X10`.

## What is not included

The package has no I2C bus implementation of its own, so you must supply
the bus object.

The LCD driver only writes. It cannot read back the busy flag or display
memory, and it has no formatting of numbers; convert values to text before
calling `print_str`.