"""Time moments and intervals with microsecond resolution."""

from __future__ import annotations

import functools
import time
from dataclasses import dataclass
from typing import Any, Optional

ONE_SECOND = 1_000_000
_SECONDS_PER_DAY = 24 * 3600
_HALF_DAY = 12 * 3600 * ONE_SECOND
_FULL_DAY = 24 * 3600 * ONE_SECOND


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Number of days since 1970-01-01 for a Gregorian date; negative before it."""
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400  # [0, 399]
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1  # [0, 365]
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy  # [0, 146096]
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Gregorian (year, month, day) of a day count since 1970-01-01."""
    days += 719468
    era = days // 146097
    doe = days - era * 146097  # [0, 146096]
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365  # [0, 399]
    year = yoe + era * 400
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)  # [0, 365]
    mp = (5 * doy + 2) // 153  # [0, 11]
    day = doy - (153 * mp + 2) // 5 + 1  # [1, 31]
    month = mp + 3 if mp < 10 else mp - 9  # [1, 12]
    return year + (month <= 2), month, day


def weekday_from_days(days: int) -> int:
    """Day of the week of a day count since 1970-01-01, Sunday being 0."""
    return (days + 4) % 7


@functools.lru_cache(maxsize=None)
def _local_offset_seconds() -> int:
    now = time.time()
    local = time.localtime(now)
    utc = time.gmtime(now)
    hours = local.tm_hour - utc.tm_hour
    if hours > 12:
        hours -= 24
    if hours < -12:
        hours += 24
    return hours * 3600


@dataclass(order=True)
class ChronoPoint:
    """A moment (microseconds since the epoch) or an interval in microseconds."""

    us: int = 0

    ONE_SECOND = ONE_SECOND

    @classmethod
    def now(cls) -> "ChronoPoint":
        """The current moment, rounded down to the microsecond."""
        return cls(time.time_ns() // 1000)

    @classmethod
    def from_seconds(cls, seconds: int | float) -> "ChronoPoint":
        """A point of ``seconds``, truncated to the microsecond."""
        if isinstance(seconds, int):
            return cls(seconds * ONE_SECOND)
        return cls(int(seconds * ONE_SECOND))

    def __bool__(self) -> bool:
        return self.us != 0

    @property
    def seconds(self) -> int:
        """Whole seconds, truncated toward zero."""
        return _trunc_div(self.us, ONE_SECOND)

    @property
    def fractional_us(self) -> int:
        """Microseconds after the whole second."""
        return _trunc_mod(self.us, ONE_SECOND)

    def get_tm(self) -> time.struct_time:
        """Break the point down into UTC calendar fields."""
        seconds = self.seconds
        days = seconds // _SECONDS_PER_DAY
        rest = seconds - days * _SECONDS_PER_DAY
        year, month, day = civil_from_days(days)
        hour, rest = divmod(rest, 3600)
        minute, second = divmod(rest, 60)
        c_weekday = weekday_from_days(days)
        yday = days - days_from_civil(year, 1, 1)
        return time.struct_time(
            (year, month, day, hour, minute, second, (c_weekday + 6) % 7, yday + 1, 0)
        )

    def set_tm(self, tm: Any, ms: int = 0) -> None:
        """Set the point from UTC calendar fields plus milliseconds."""
        days = days_from_civil(tm.tm_year, tm.tm_mon, tm.tm_mday)
        total_seconds = days * _SECONDS_PER_DAY + tm.tm_hour * 3600 + tm.tm_min * 60 + tm.tm_sec
        self.us = total_seconds * ONE_SECOND + ms * 1000

    def set_time(self, hour: int, minute: int, second: int, ms: int = 0) -> None:
        """Set the time of day, then move by a day to the moment nearest to now."""
        tm = self.get_tm()
        fields = list(tm)
        fields[3:6] = [hour, minute, second]
        self.set_tm(time.struct_time(fields), ms)

        now = ChronoPoint.now()
        if self > now:
            if self.us - now.us >= _HALF_DAY:
                self.us -= _FULL_DAY
        elif self < now:
            if now.us - self.us >= _HALF_DAY:
                self.us += _FULL_DAY

    def to_local(self) -> "ChronoPoint":
        """Shift from UTC to local time in place; returns self."""
        self.us += ONE_SECOND * _local_offset_seconds()
        return self

    def from_local(self) -> "ChronoPoint":
        """Shift from local time to UTC in place; returns self."""
        self.us -= ONE_SECOND * _local_offset_seconds()
        return self

    def elapsed(self, to: Optional["ChronoPoint"] = None) -> "ChronoPoint":
        """Interval from this point to ``to``, the current moment by default."""
        if to is None:
            to = ChronoPoint.now()
        return to - self

    def __add__(self, other: "ChronoPoint") -> "ChronoPoint":
        if not isinstance(other, ChronoPoint):
            return NotImplemented
        return ChronoPoint(self.us + other.us)

    def __sub__(self, other: "ChronoPoint") -> "ChronoPoint":
        if not isinstance(other, ChronoPoint):
            return NotImplemented
        return ChronoPoint(self.us - other.us)

    def __mul__(self, factor: int) -> "ChronoPoint":
        if not isinstance(factor, int):
            return NotImplemented
        return ChronoPoint(self.us * factor)

    def __truediv__(self, divisor: int) -> "ChronoPoint":
        if not isinstance(divisor, int):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("division of a ChronoPoint by zero")
        return ChronoPoint(_trunc_div(self.us, divisor))

    def to_string(self, print_ms: bool = True, print_date: bool = False) -> str:
        """Format as ``[YYYY-MM-DD ][hh:]mm:ss[.zzz]``."""
        tm = self.get_tm()
        parts = []
        if print_date:
            parts.append(f"{tm.tm_year:04d}-{tm.tm_mon:02d}-{tm.tm_mday:02d} ")
        if print_date or tm.tm_hour:
            parts.append(f"{tm.tm_hour:02d}:")
        parts.append(f"{tm.tm_min:02d}:{tm.tm_sec:02d}")
        if print_ms:
            ms = _trunc_div(self.fractional_us, 1000)
            parts.append(f".{ms:03d}")
        return "".join(parts)

    def to_profiling_time(self) -> str:
        """Microseconds for intervals up to two seconds, otherwise ``to_string``."""
        if self.us > 2 * ONE_SECOND:
            return self.to_string(False)
        return f"{self.us} us."

    def __str__(self) -> str:
        return self.to_string()