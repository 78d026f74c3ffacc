"""Forecast grid data models."""

from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from datetime import timedelta


@dataclass(frozen=True)
class Interval:
    """Half-open time range ``[start, end)``."""
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("interval end must not precede its start")

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def covers(self, instant: datetime) -> bool:
        """Check whether ``start <= instant < end``."""
        return self.start <= instant < self.end

    def compare(self, instant: datetime) -> int:
        """Classify an instant against the interval.

        Returns:
            -1 if the instant is before ``start``, 1 if it is at or after
            ``end``, 0 if the interval covers it
        """
        if instant < self.start:
            return -1
        if instant >= self.end:
            return 1
        return 0


@dataclass(frozen=True)
class Coordinates:
    """Geographic coordinates in decimal degrees."""
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherPoint:
    """One forecast grid value valid over an interval."""
    interval: Interval
    value: float
    unit: str

    @property
    def start(self) -> datetime:
        return self.interval.start

    @property
    def end(self) -> datetime:
        return self.interval.end


@dataclass(frozen=True)
class PropertySeries:
    """All points of one weather property, ordered by interval start."""
    name: str
    unit: str
    points: tuple[WeatherPoint, ...] = ()

    @classmethod
    def from_points(cls, name: str, unit: str, points: Iterable[WeatherPoint]) -> 'PropertySeries':
        """Build a series, sorting points by interval start.

        The sort is stable, so points sharing a start keep their source order.
        """
        return cls(name=name, unit=unit, points=tuple(sorted(points, key=lambda p: p.start)))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[WeatherPoint]:
        return iter(self.points)

    def __getitem__(self, idx: int) -> WeatherPoint:
        return self.points[idx]
