"""Forecast validity time decoding and hourly clock helpers."""

import re
from collections.abc import Iterator
from datetime import UTC
from datetime import datetime
from datetime import timedelta

from hourcast.exceptions import InvalidInstant
from hourcast.exceptions import InvertedRange
from hourcast.exceptions import MalformedTimeRange
from hourcast.models.weather import Interval
from hourcast.utils.duration import apply_duration
from hourcast.utils.duration import parse_duration


ONE_HOUR = timedelta(hours=1)

_RFC3339_PATTERN = re.compile(
    r"(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})",
    re.ASCII
)


def parse_instant(text: str) -> datetime:
    """Parse an RFC3339 timestamp with an explicit UTC offset.

    Raises:
        InvalidInstant: If the text is not RFC3339 or names an impossible date
    """
    match = _RFC3339_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidInstant(f"could not parse time '{text}': not RFC3339", text)

    # datetime carries microseconds only
    fraction = (match['fraction'] or '')[:6].ljust(6, '0')
    offset = '+00:00' if match['offset'] == 'Z' else match['offset']
    try:
        return datetime.fromisoformat(f"{match['base']}.{fraction}{offset}")
    except ValueError as e:
        raise InvalidInstant(f"could not parse time '{text}': {e}", text) from e


def parse_time_range(valid_time: str) -> Interval:
    """Decode a forecast ``validTime`` such as ``2024-06-01T10:00:00+00:00/PT2H``.

    Args:
        valid_time: RFC3339 start and ISO-8601 duration joined by ``/``

    Returns:
        Interval from the start to the start advanced by the duration

    Raises:
        MalformedTimeRange: If the text does not split into exactly two parts
        InvalidInstant: If the start is not RFC3339
        InvalidDuration: If the duration is malformed
    """
    parts = valid_time.split('/')
    if len(parts) != 2:
        raise MalformedTimeRange(f"malformed time + duration: {valid_time}", valid_time)

    start = parse_instant(parts[0])
    duration = parse_duration(parts[1])
    return Interval(start=start, end=apply_duration(start, duration))


def truncate_to_hour(instant: datetime) -> datetime:
    """Round an aware instant down to a whole UTC hour."""
    return instant.astimezone(UTC).replace(minute=0, second=0, microsecond=0)


def hourly_clock(start: datetime, end: datetime) -> Iterator[datetime]:
    """Yield every whole hour from ``start`` to ``end``, both inclusive.

    Both bounds are truncated to the hour first. The range is checked when
    the clock is created, not when it is first iterated.

    Raises:
        InvertedRange: If the truncated start is after the truncated end
    """
    first = truncate_to_hour(start)
    last = truncate_to_hour(end)
    if first > last:
        raise InvertedRange(first, last)
    return _hours_between(first, last)


def _hours_between(first: datetime, last: datetime) -> Iterator[datetime]:
    current = first
    yield current
    # Never step past last; it may be the final representable hour
    while current < last:
        current += ONE_HOUR
        yield current
