"""HD44780 character LCD driven in 4-bit mode through an I2C port expander."""

from __future__ import annotations

import time
from typing import Callable, Iterable, Optional, Protocol, Union

# commands
CLEAR_DISPLAY = 0x01
RETURN_HOME = 0x02
ENTRY_MODE_SET = 0x04
DISPLAY_CONTROL = 0x08
CURSOR_SHIFT = 0x10
FUNCTION_SET = 0x20
SET_CGRAM_ADDR = 0x40
SET_DDRAM_ADDR = 0x80

# flags for display entry mode
ENTRY_RIGHT = 0x00
ENTRY_LEFT = 0x02
ENTRY_SHIFT_INCREMENT = 0x01
ENTRY_SHIFT_DECREMENT = 0x00

# flags for display on/off control
DISPLAY_ON = 0x04
DISPLAY_OFF = 0x00
CURSOR_ON = 0x02
CURSOR_OFF = 0x00
BLINK_ON = 0x01
BLINK_OFF = 0x00

# flags for display/cursor shift
DISPLAY_MOVE = 0x08
CURSOR_MOVE = 0x00
MOVE_RIGHT = 0x04
MOVE_LEFT = 0x00

# flags for function set
MODE_8BIT = 0x10
MODE_4BIT = 0x00
LINES_2 = 0x08
LINES_1 = 0x00
DOTS_5X10 = 0x04
DOTS_5X8 = 0x00

# flags for backlight control
BACKLIGHT = 0x08
NO_BACKLIGHT = 0x00

# expander pins
EN = 0b00000100
RW = 0b00000010
RS = 0b00000001

_ROW_OFFSETS = (0x00, 0x40, 0x14, 0x54)


class I2CBus(Protocol):
    """Anything that can send one byte to a device on an I2C bus."""

    def write_byte(self, address: int, value: int) -> None: ...


def _sleep_us(microseconds: int) -> None:
    time.sleep(microseconds / 1_000_000)


class LiquidCrystalI2C:
    """A character LCD behind a PCF8574-style expander at ``address`` on ``bus``."""

    def __init__(
        self,
        address: int,
        cols: int,
        rows: int,
        bus: I2CBus,
        delay_us: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.address = address
        self.cols = cols
        self.rows = rows
        self._bus = bus
        self._delay_us = delay_us if delay_us is not None else _sleep_us
        self._backlight = NO_BACKLIGHT
        self._display_function = MODE_4BIT | LINES_1 | DOTS_5X8
        self._display_control = 0
        self._display_mode = 0
        self._num_lines = rows

    def init(self) -> None:
        """Reset the function flags and run the power-up sequence."""
        self._display_function = MODE_4BIT | LINES_1 | DOTS_5X8
        self.begin(self.cols, self.rows)

    def begin(self, cols: int, lines: int, dotsize: int = DOTS_5X8) -> None:
        """Put the controller into 4-bit mode and set the default state."""
        if lines > 1:
            self._display_function |= LINES_2
        self._num_lines = lines

        if dotsize != 0 and lines == 1:
            self._display_function |= DOTS_5X10

        # the controller needs over 40 ms after power rises before commands
        self._delay_us(50_000)

        self._expander_write(self._backlight)
        self._delay_us(1_000_000)

        # three tries at 8-bit mode, then switch to 4-bit
        self._write4bits(0x03 << 4)
        self._delay_us(4500)
        self._write4bits(0x03 << 4)
        self._delay_us(4500)
        self._write4bits(0x03 << 4)
        self._delay_us(150)
        self._write4bits(0x02 << 4)

        self.command(FUNCTION_SET | self._display_function)

        self._display_control = DISPLAY_ON | CURSOR_OFF | BLINK_OFF
        self.display()

        self.clear()

        self._display_mode = ENTRY_LEFT | ENTRY_SHIFT_DECREMENT
        self.command(ENTRY_MODE_SET | self._display_mode)

        self.home()

    def clear(self) -> None:
        """Clear the display and move the cursor to the origin."""
        self.command(CLEAR_DISPLAY)
        self._delay_us(2000)

    def home(self) -> None:
        """Move the cursor to the origin."""
        self.command(RETURN_HOME)
        self._delay_us(2000)

    def set_cursor(self, col: int, row: int) -> None:
        """Move the cursor to ``col`` on ``row``, both counted from 0."""
        if row > self._num_lines:
            row = self._num_lines - 1
        if not 0 <= row < len(_ROW_OFFSETS):
            raise ValueError(f"row out of range: {row}")
        self.command(SET_DDRAM_ADDR | (col + _ROW_OFFSETS[row]))

    def _update_control(self) -> None:
        self.command(DISPLAY_CONTROL | self._display_control)

    def no_display(self) -> None:
        self._display_control &= ~DISPLAY_ON
        self._update_control()

    def display(self) -> None:
        self._display_control |= DISPLAY_ON
        self._update_control()

    def no_cursor(self) -> None:
        self._display_control &= ~CURSOR_ON
        self._update_control()

    def cursor(self) -> None:
        self._display_control |= CURSOR_ON
        self._update_control()

    def no_blink(self) -> None:
        self._display_control &= ~BLINK_ON
        self._update_control()

    def blink(self) -> None:
        self._display_control |= BLINK_ON
        self._update_control()

    def scroll_display_left(self) -> None:
        """Shift the visible window left without changing display memory."""
        self.command(CURSOR_SHIFT | DISPLAY_MOVE | MOVE_LEFT)

    def scroll_display_right(self) -> None:
        """Shift the visible window right without changing display memory."""
        self.command(CURSOR_SHIFT | DISPLAY_MOVE | MOVE_RIGHT)

    def _update_mode(self) -> None:
        self.command(ENTRY_MODE_SET | self._display_mode)

    def left_to_right(self) -> None:
        self._display_mode |= ENTRY_LEFT
        self._update_mode()

    def right_to_left(self) -> None:
        self._display_mode &= ~ENTRY_LEFT
        self._update_mode()

    def autoscroll(self) -> None:
        """Right-justify text from the cursor."""
        self._display_mode |= ENTRY_SHIFT_INCREMENT
        self._update_mode()

    def no_autoscroll(self) -> None:
        """Left-justify text from the cursor."""
        self._display_mode &= ~ENTRY_SHIFT_INCREMENT
        self._update_mode()

    def create_char(self, location: int, charmap: Iterable[int]) -> None:
        """Load an eight-row glyph into one of the eight CGRAM slots."""
        rows = list(charmap)
        if len(rows) < 8:
            raise ValueError(f"a glyph needs 8 rows, got {len(rows)}")
        location &= 0x7
        self.command(SET_CGRAM_ADDR | (location << 3))
        for row in rows[:8]:
            self.write(row)

    def no_backlight(self) -> None:
        self._backlight = NO_BACKLIGHT
        self._expander_write(0)

    def backlight(self) -> None:
        self._backlight = BACKLIGHT
        self._expander_write(0)

    def set_backlight(self, value: int) -> None:
        """Turn the backlight on for a true value, off otherwise."""
        if value:
            self.backlight()
        else:
            self.no_backlight()

    def command(self, value: int) -> None:
        """Send an instruction byte."""
        self._send(value, 0)

    def write(self, value: int) -> int:
        """Send a data byte; returns the number of bytes written."""
        self._send(value, RS)
        return 1

    def print_str(self, text: Union[str, bytes]) -> int:
        """Write each character of ``text``; returns the number of bytes written."""
        data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
        return sum(self.write(byte) for byte in data)

    def _send(self, value: int, mode: int) -> None:
        value &= 0xFF
        high = value & 0xF0
        low = (value << 4) & 0xF0
        self._write4bits(high | mode)
        self._write4bits(low | mode)

    def _write4bits(self, value: int) -> None:
        self._expander_write(value)
        self._pulse_enable(value)

    def _expander_write(self, data: int) -> None:
        self._bus.write_byte(self.address, (data | self._backlight) & 0xFF)

    def _pulse_enable(self, data: int) -> None:
        self._expander_write(data | EN)
        self._delay_us(1)  # enable pulse must be over 450 ns
        self._expander_write(data & ~EN)
        self._delay_us(50)  # commands need over 37 us to settle