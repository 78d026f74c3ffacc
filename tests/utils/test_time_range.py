"""Tests for validity time decoding and the hourly clock."""

from datetime import datetime, timedelta, timezone

import pytest

from hourcast.exceptions import InvalidDuration, InvalidInstant, InvertedRange, MalformedTimeRange
from hourcast.utils.duration import apply_duration, parse_duration
from hourcast.utils.time_range import hourly_clock, parse_instant, parse_time_range, truncate_to_hour

UTC = timezone.utc

@pytest.mark.parametrize("text,expected", [
    ("2024-06-01T10:00:00Z", datetime(2024, 6, 1, 10, tzinfo=UTC)),
    ("2024-06-01T10:00:00+00:00", datetime(2024, 6, 1, 10, tzinfo=UTC)),
    ("2024-06-01T06:00:00-04:00", datetime(2024, 6, 1, 10, tzinfo=UTC)),
    ("2024-06-01T10:00:00.5Z", datetime(2024, 6, 1, 10, 0, 0, 500000, tzinfo=UTC)),
    ("2024-06-01T10:00:00.123456789Z", datetime(2024, 6, 1, 10, 0, 0, 123456, tzinfo=UTC)),
])
def test_parse_instant(text, expected):
    assert parse_instant(text) == expected

@pytest.mark.parametrize("text", [
    "2024-06-01T10:00:00",
    "2024-06-01 10:00:00Z",
    "2024-13-01T10:00:00Z",
    "2024-02-30T10:00:00Z",
    "yesterday",
])
def test_parse_instant_rejects(text):
    with pytest.raises(InvalidInstant) as exc_info:
        parse_instant(text)
    assert exc_info.value.value == text

def test_parse_time_range():
    interval = parse_time_range("2024-06-01T10:00:00+00:00/PT2H")
    assert interval.start == datetime(2024, 6, 1, 10, tzinfo=UTC)
    assert interval.end == datetime(2024, 6, 1, 12, tzinfo=UTC)

def test_parse_time_range_zero_duration():
    interval = parse_time_range("2024-06-01T10:00:00+00:00/PT0S")
    assert interval.duration == timedelta(0)
    assert not interval.covers(interval.start)

@pytest.mark.parametrize("text", [
    "2024-06-01T10:00:00+00:00",
    "2024-06-01T10:00:00+00:00/PT1H/PT1H",
    "",
])
def test_parse_time_range_malformed(text):
    with pytest.raises(MalformedTimeRange) as exc_info:
        parse_time_range(text)
    assert exc_info.value.value == text

def test_parse_time_range_bad_parts():
    with pytest.raises(InvalidInstant):
        parse_time_range("soon/PT1H")
    with pytest.raises(InvalidDuration):
        parse_time_range("2024-06-01T10:00:00+00:00/1 hour")

def test_truncate_to_hour():
    eastern = timezone(timedelta(hours=-4))
    instant = datetime(2024, 6, 1, 6, 45, 12, 999, tzinfo=eastern)
    assert truncate_to_hour(instant) == datetime(2024, 6, 1, 10, tzinfo=UTC)

def test_hourly_clock_is_inclusive():
    start = datetime(2024, 6, 1, 10, 15, tzinfo=UTC)
    end = datetime(2024, 6, 1, 13, 5, tzinfo=UTC)
    hours = list(hourly_clock(start, end))
    assert hours == [datetime(2024, 6, 1, h, tzinfo=UTC) for h in (10, 11, 12, 13)]

def test_hourly_clock_equal_bounds():
    start = datetime(2024, 6, 1, 10, 30, tzinfo=UTC)
    assert list(hourly_clock(start, start)) == [datetime(2024, 6, 1, 10, tzinfo=UTC)]

def test_hourly_clock_inverted():
    start = datetime(2024, 6, 1, 12, tzinfo=UTC)
    with pytest.raises(InvertedRange):
        hourly_clock(start, start - timedelta(hours=2))

def test_hourly_clock_same_hour_after_truncation():
    # Start after end, but both truncate to the same hour
    start = datetime(2024, 6, 1, 10, 50, tzinfo=UTC)
    end = datetime(2024, 6, 1, 10, 10, tzinfo=UTC)
    assert len(list(hourly_clock(start, end))) == 1

@pytest.mark.parametrize("valid_time,expected_end", [
    ("2024-01-31T12:00:00+00:00/P1M", datetime(2024, 2, 29, 12, tzinfo=UTC)),
    ("2023-01-31T12:00:00+00:00/P1M", datetime(2023, 2, 28, 12, tzinfo=UTC)),
    ("2024-02-29T00:00:00Z/P1Y", datetime(2025, 2, 28, tzinfo=UTC)),
    ("2024-01-31T23:00:00Z/P1Y1M1DT1H", datetime(2025, 3, 2, 0, tzinfo=UTC)),
    ("2024-06-01T10:00:00Z/P2W", datetime(2024, 6, 15, 10, tzinfo=UTC)),
])
def test_parse_time_range_end_is_reproducible(valid_time, expected_end):
    """Re-applying the duration to the interval start gives the same end."""
    interval = parse_time_range(valid_time)
    duration = parse_duration(valid_time.split("/")[1])

    assert interval.end == expected_end
    assert apply_duration(interval.start, duration) == interval.end
    assert apply_duration(interval.start, duration) == apply_duration(interval.start, duration)

def test_hourly_clock_ends_at_last_representable_hour():
    last = datetime.max.replace(minute=0, second=0, microsecond=0, tzinfo=UTC)
    hours = list(hourly_clock(last - timedelta(hours=1), last))
    assert hours == [last - timedelta(hours=1), last]
