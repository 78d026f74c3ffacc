"""Forecast request model and validation."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC
from datetime import datetime
from datetime import timedelta
from zoneinfo import ZoneInfo
from zoneinfo import ZoneInfoNotFoundError

from hourcast.exceptions import ValidationError


PERMITTED_PROPERTIES = (
    "dewpoint",
    "heatIndex",
    "maxTemperature",
    "minTemperature",
    "pressure",
    "probabilityOfPrecipitation",
    "probabilityOfThunder",
    "quantitativePrecipitation",
    "relativeHumidity",
    "skyCover",
    "temperature",
    "windChill",
    "windDirection",
    "windSpeed",
)


def load_timezone(name: str) -> ZoneInfo:
    """Load an IANA timezone.

    Raises:
        ValidationError: If the zone is unknown
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(
            f"could not load display timezone '{name}'",
            {"timezone": name, "error": str(e)}
        ) from e


def split_properties(properties: str | Sequence[str]) -> tuple[str, ...]:
    """Split a comma separated property list, keeping request order."""
    if isinstance(properties, str):
        properties = properties.split(",")
    return tuple(p.strip() for p in properties)


@dataclass(frozen=True)
class ForecastRequest:
    """What to fetch and how to display it."""
    address: str
    properties: tuple[str, ...]
    start: datetime
    end: datetime
    display_timezone: ZoneInfo
    freedom: bool = False

    @classmethod
    def build(
        cls,
        address: str,
        properties: str | Sequence[str],
        hours: int,
        offset: int = 0,
        display_timezone: str = "UTC",
        freedom: bool = False,
        now: datetime | None = None
    ) -> 'ForecastRequest':
        """Validate user input and compute the display window.

        The window starts ``offset`` hours from ``now`` and runs ``hours``
        hours past that.

        Raises:
            ValidationError: If the address is empty, a property is not
                permitted, the timezone is unknown or the window falls
                outside the supported date range
        """
        tz = load_timezone(display_timezone)

        if not address or not address.strip():
            raise ValidationError("address cannot be empty")

        names = split_properties(properties)
        for name in names:
            if name not in PERMITTED_PROPERTIES:
                raise ValidationError(
                    f"requested property '{name}' is not in {list(PERMITTED_PROPERTIES)}",
                    {"property": name}
                )

        try:
            start = (now or datetime.now(UTC)) + timedelta(hours=offset)
            end = start + timedelta(hours=hours)
        except OverflowError as e:
            raise ValidationError(
                f"forecast window of {hours} hours at offset {offset} is out of range",
                {"hours": hours, "offset": offset}
            ) from e

        return cls(
            address=address.strip(),
            properties=names,
            start=start,
            end=end,
            display_timezone=tz,
            freedom=freedom
        )
