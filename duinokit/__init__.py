"""Software clock and calendar helpers, date strings and an I2C character LCD driver."""

__version__ = "0.1.0"
__all__ = ["timelib", "datestrings", "lcd_i2c"]