"""English names of months and weekdays, long and three-letter forms."""

from __future__ import annotations

MAX_STRING_LEN = 9
SHORT_STR_LEN = 3

_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_MONTH_SHORT_NAMES = "ErrJanFebMarAprMayJunJulAugSepOctNovDec"

_DAY_NAMES = (
    "Err",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_DAY_SHORT_NAMES = "ErrSunMonTueWedThuFriSat"


def _lookup(names: tuple[str, ...], index: int, kind: str) -> str:
    if not 0 <= index < len(names):
        raise ValueError(f"{kind} out of range: {index}")
    return names[index]


def _short(packed: str, index: int, kind: str) -> str:
    count = len(packed) // SHORT_STR_LEN
    if not 0 <= index < count:
        raise ValueError(f"{kind} out of range: {index}")
    start = index * SHORT_STR_LEN
    return packed[start : start + SHORT_STR_LEN]


def month_str(month: int) -> str:
    """Full month name, January being 1; 0 gives an empty string."""
    return _lookup(_MONTH_NAMES, month, "month")


def month_short_str(month: int) -> str:
    """Three-letter month name, January being 1; 0 gives "Err"."""
    return _short(_MONTH_SHORT_NAMES, month, "month")


def day_str(day: int) -> str:
    """Full weekday name, Sunday being 1; 0 gives "Err"."""
    return _lookup(_DAY_NAMES, day, "day")


def day_short_str(day: int) -> str:
    """Three-letter weekday name, Sunday being 1; 0 gives "Err"."""
    return _short(_DAY_SHORT_NAMES, day, "day")