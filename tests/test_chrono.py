import datetime
import time

import pytest

from d2modgen.chrono import (
    ChronoPoint,
    civil_from_days,
    days_from_civil,
    weekday_from_days,
)

EPOCH = datetime.date(1970, 1, 1)


def test_epoch_is_day_zero():
    assert days_from_civil(1970, 1, 1) == 0
    assert civil_from_days(0) == (1970, 1, 1)


def test_epoch_was_thursday():
    assert weekday_from_days(0) == 4


@pytest.mark.parametrize(
    "date",
    [
        datetime.date(1, 1, 1),
        datetime.date(1600, 2, 29),
        datetime.date(1900, 3, 1),
        datetime.date(1969, 12, 31),
        datetime.date(2000, 2, 29),
        datetime.date(2022, 7, 15),
        datetime.date(2100, 12, 31),
    ],
)
def test_days_from_civil_matches_date_arithmetic(date):
    days = days_from_civil(date.year, date.month, date.day)
    assert days == (date - EPOCH).days
    assert civil_from_days(days) == (date.year, date.month, date.day)


@pytest.mark.parametrize("days", range(-800, 800, 37))
def test_weekday_matches_calendar(days):
    date = EPOCH + datetime.timedelta(days=days)
    # isoweekday: Monday=1 .. Sunday=7; Sunday maps to 0.
    assert weekday_from_days(days) == date.isoweekday() % 7


@pytest.mark.parametrize("seconds", [0, 59, 86399, 951782400, 1234567890, 4102444799])
def test_get_tm_matches_gmtime(seconds):
    tm = ChronoPoint.from_seconds(seconds).get_tm()
    assert tuple(tm) == tuple(time.gmtime(seconds))


@pytest.mark.parametrize("seconds", [0, 1234567890, 1656000000])
def test_set_tm_round_trip(seconds):
    point = ChronoPoint()
    point.set_tm(time.gmtime(seconds), 250)
    assert point.us == seconds * ChronoPoint.ONE_SECOND + 250 * 1000
    assert tuple(point.get_tm()) == tuple(time.gmtime(seconds))


def test_from_seconds_truncates_fraction():
    assert ChronoPoint.from_seconds(1.5).us == 1_500_000
    assert ChronoPoint.from_seconds(3).us == 3 * ChronoPoint.ONE_SECOND
    assert ChronoPoint.from_seconds(-1.5).us == -1_500_000


def test_seconds_and_fraction_truncate_toward_zero():
    point = ChronoPoint(-1_500_000)
    assert point.seconds == -1
    assert point.fractional_us == -500_000


def test_bool_is_false_only_for_zero():
    assert not ChronoPoint()
    assert ChronoPoint(1)


def test_arithmetic_and_ordering():
    a = ChronoPoint.from_seconds(10)
    b = ChronoPoint.from_seconds(4)
    assert (a - b).us == 6 * ChronoPoint.ONE_SECOND
    assert (a + b).us == 14 * ChronoPoint.ONE_SECOND
    assert (b * 3).us == 12 * ChronoPoint.ONE_SECOND
    assert (ChronoPoint(-7) / 2).us == -3
    assert b < a
    assert a >= b
    assert a == ChronoPoint.from_seconds(10)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        ChronoPoint(5) / 0


def test_elapsed_between_points():
    a = ChronoPoint.from_seconds(100)
    b = ChronoPoint.from_seconds(130)
    assert a.elapsed(b) == b - a


def test_elapsed_until_now_is_not_negative():
    start = ChronoPoint.now()
    assert start.elapsed().us >= 0


def test_now_is_close_to_system_clock():
    before = time.time_ns() // 1000
    point = ChronoPoint.now()
    after = time.time_ns() // 1000
    assert before <= point.us <= after


def test_local_round_trip_returns_same_object():
    point = ChronoPoint.from_seconds(1234567890)
    original = point.us
    assert point.to_local() is point
    assert point.from_local() is point
    assert point.us == original


def test_local_offset_is_whole_hours():
    point = ChronoPoint()
    point.to_local()
    assert point.us % (3600 * ChronoPoint.ONE_SECOND) == 0
    assert abs(point.us) <= 12 * 3600 * ChronoPoint.ONE_SECOND


def test_to_string_without_hours():
    assert ChronoPoint.from_seconds(61).to_string(False) == "01:01"


def test_to_string_with_hours_and_ms():
    assert ChronoPoint.from_seconds(3661.5).to_string() == "01:01:01.500"


def test_to_string_with_date():
    assert ChronoPoint().to_string(False, True) == "1970-01-01 00:00:00"


def test_profiling_time_short_interval_in_microseconds():
    assert ChronoPoint.from_seconds(1).to_profiling_time() == "1000000 us."


def test_profiling_time_long_interval_formatted():
    point = ChronoPoint.from_seconds(125)
    assert point.to_profiling_time() == point.to_string(False)


@pytest.mark.parametrize("hour", [0, 6, 12, 18, 23])
def test_set_time_lands_near_now(hour):
    point = ChronoPoint.now()
    point.set_time(hour, 30, 15)
    tm = point.get_tm()
    assert (tm.tm_hour, tm.tm_min, tm.tm_sec) == (hour, 30, 15)
    assert point.fractional_us == 0
    distance = abs((point - ChronoPoint.now()).us)
    assert distance <= 12 * 3600 * ChronoPoint.ONE_SECOND + ChronoPoint.ONE_SECOND