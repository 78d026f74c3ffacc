"""ISO-8601 duration parsing and calendar-aware application.

Only the unsigned, whole-number subset used by forecast grid validity times
is supported::

    PnW
    PnYnMnDTnHnMnS   (every component optional)
"""

import re
from dataclasses import dataclass
from datetime import datetime
from datetime import timedelta

from dateutil.relativedelta import relativedelta

from hourcast.exceptions import InvalidDuration


# Components are held to the signed 64-bit range
MAX_COMPONENT = 2**63 - 1

_DURATION_PATTERN = re.compile(
    r"P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?"
    r"|P(?P<weeks>\d+)W",
    re.ASCII
)

_FIELDS = ('years', 'months', 'days', 'hours', 'minutes', 'seconds')


@dataclass(frozen=True)
class Duration:
    """Calendar and clock delta with non-negative integer fields."""
    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def is_zero(self) -> bool:
        return not any(getattr(self, name) for name in _FIELDS)

    def isoformat(self) -> str:
        """Render back to the general ISO-8601 form, e.g. ``P1DT6H``."""
        date_part = "".join(
            f"{value}{unit}"
            for value, unit in ((self.years, 'Y'), (self.months, 'M'), (self.days, 'D'))
            if value
        )
        time_part = "".join(
            f"{value}{unit}"
            for value, unit in ((self.hours, 'H'), (self.minutes, 'M'), (self.seconds, 'S'))
            if value
        )
        if self.is_zero:
            return "PT0S"
        return f"P{date_part}" + (f"T{time_part}" if time_part else "")

    def clock_delta(self) -> timedelta:
        """Hours, minutes and seconds as a fixed-length delta."""
        return timedelta(hours=self.hours, minutes=self.minutes, seconds=self.seconds)


def _to_int(text: str | None, field: str, source: str) -> int:
    if not text:
        return 0
    value = int(text)
    if value > MAX_COMPONENT:
        raise InvalidDuration(
            f"could not parse {field} value '{text}' in '{source}': out of range",
            source,
            field=field
        )
    return value


def parse_duration(text: str) -> Duration:
    """Parse an ISO-8601 duration string.

    Args:
        text: Duration text such as ``PT1H`` or ``P2W``

    Returns:
        Parsed Duration

    Raises:
        InvalidDuration: If the text matches neither the week nor the general
            form, or a component overflows the 64-bit integer range
    """
    match = _DURATION_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidDuration(f"'{text}' is not a valid iso8601 duration", text)

    groups = match.groupdict()
    if groups['weeks'] is not None:
        weeks = _to_int(groups['weeks'], 'weeks', text)
        if weeks * 7 > MAX_COMPONENT:
            raise InvalidDuration(
                f"could not parse weeks value '{groups['weeks']}' in '{text}': out of range",
                text,
                field='weeks'
            )
        return Duration(days=7 * weeks)

    return Duration(**{name: _to_int(groups[name], name, text) for name in _FIELDS})


def apply_duration(start: datetime, duration: Duration) -> datetime:
    """Advance an instant by a duration.

    Years, months and days are applied one after another against the calendar
    (a month added to Jan 31 lands on the last day of February), then hours,
    minutes and seconds are added as fixed offsets.

    Raises:
        InvalidDuration: If the result falls outside the supported date range
    """
    try:
        result = start + relativedelta(years=duration.years)
        result = result + relativedelta(months=duration.months)
        result = result + relativedelta(days=duration.days)
        return result + duration.clock_delta()
    except (OverflowError, ValueError) as e:
        raise InvalidDuration(
            f"applying {duration.isoformat()} to {start.isoformat()} is out of range: {e}",
            duration.isoformat()
        ) from e
