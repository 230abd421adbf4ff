import time
from datetime import datetime, timedelta, timezone

import pytest

from rislang.timefuncs import (
    KITCHEN,
    RFC1123,
    RFC1123Z,
    RFC3339,
    RFC3339_NANO,
    STAMP_MILLI,
    TimeParseError,
    UNIX_DATE,
    now,
    parse,
    sleep,
)


def test_parse_rfc3339_utc():
    result = parse(RFC3339, "2023-06-15T10:30:45Z")
    assert result == datetime(2023, 6, 15, 10, 30, 45, tzinfo=timezone.utc)
    assert result.utcoffset() == timedelta(0)


def test_parse_rfc3339_with_offset():
    result = parse(RFC3339, "2023-06-15T10:30:45+02:00")
    assert result.utcoffset() == timedelta(hours=2)
    assert (result.hour, result.minute, result.second) == (10, 30, 45)


def test_parse_rfc3339_nano_fraction():
    result = parse(RFC3339_NANO, "2023-06-15T10:30:45.123456789Z")
    assert result.microsecond == 123456


def test_parse_rfc1123z():
    result = parse(RFC1123Z, "Tue, 10 Nov 2009 23:00:00 +0100")
    assert (result.year, result.month, result.day, result.hour) == (2009, 11, 10, 23)
    assert result.utcoffset() == timedelta(hours=1)


def test_parse_rfc1123_named_zone_utc():
    result = parse(RFC1123, "Tue, 10 Nov 2009 23:00:00 UTC")
    assert result.utcoffset() == timedelta(0)


def test_parse_unix_date_padded_day():
    result = parse(UNIX_DATE, "Mon Jan  2 15:04:05 MST 2006")
    assert (result.year, result.month, result.day) == (2006, 1, 2)
    assert result.tzname() == "MST"


def test_parse_kitchen_pm():
    result = parse(KITCHEN, "3:04PM")
    assert (result.hour, result.minute) == (15, 4)


def test_parse_kitchen_midnight_am():
    assert parse(KITCHEN, "12:00AM").hour == 0


def test_parse_stamp_milli():
    result = parse(STAMP_MILLI, "Feb  3 04:05:06.789")
    assert (result.month, result.day, result.microsecond) == (2, 3, 789000)


def test_parse_two_digit_year():
    assert parse("06-01-02", "99-12-31").year == 1999
    assert parse("06-01-02", "23-12-31").year == 2023


def test_parse_matches_strftime_round_trip():
    moment = datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%SZ")
    assert parse(RFC3339, text) == moment


def test_month_out_of_range():
    with pytest.raises(TimeParseError, match="month out of range"):
        parse("2006-01-02", "2023-13-01")


def test_day_out_of_range():
    with pytest.raises(TimeParseError, match="day out of range"):
        parse("2006-01-02", "2023-02-30")


def test_cannot_parse_names_elements():
    with pytest.raises(TimeParseError) as info:
        parse("2006-01-02", "abc")
    assert info.value.layout_elem == "2006"
    assert info.value.value_elem == "abc"


def test_extra_text():
    with pytest.raises(TimeParseError, match="extra text"):
        parse("2006-01-02", "2023-01-02 trailing")


def test_parse_rejects_non_string():
    with pytest.raises(TypeError):
        parse(RFC3339, 123)


def test_now_is_aware_and_current():
    before = datetime.now(timezone.utc)
    current = now()
    after = datetime.now(timezone.utc)
    assert current.tzinfo is not None
    assert before - timedelta(seconds=1) <= current <= after + timedelta(seconds=1)


def test_sleep_waits():
    start = time.monotonic()
    result = sleep(0.05)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.04


def test_sleep_negative_returns_immediately():
    start = time.monotonic()
    result = sleep(-5)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed < 1


def test_sleep_rejects_non_number():
    with pytest.raises(TypeError):
        sleep("1")