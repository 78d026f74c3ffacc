"""Alignment of per-property forecast series onto an hourly table."""

from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from hourcast.models.weather import PropertySeries
from hourcast.models.weather import WeatherPoint
from hourcast.utils.logging_utils import LoggerMixin
from hourcast.utils.time_range import hourly_clock
from hourcast.utils.units import format_weather_value
from hourcast.utils.units import liberate


class CursorState(Enum):
    """Where a cursor stands relative to the current hour."""
    SCANNING = "scanning"    # next point starts after the current hour
    COVERING = "covering"    # current point covers the current hour
    EXHAUSTED = "exhausted"  # no points left


class PropertyCursor:
    """Forward-only position in one property's sorted series.

    A point the clock has moved past is skipped for good, so over a whole
    run the cursor inspects each point a bounded number of times.
    """

    def __init__(self, series: PropertySeries):
        self.series = series
        self.position = 0
        self.state = CursorState.SCANNING if len(series) else CursorState.EXHAUSTED

    @property
    def name(self) -> str:
        return self.series.name

    def advance_to(self, hour: datetime) -> WeatherPoint | None:
        """Return the point covering ``hour``, or None when nothing does.

        Hours must be presented in non-decreasing order.
        """
        while self.position < len(self.series):
            point = self.series[self.position]
            cmp = point.interval.compare(hour)
            if cmp == 0:
                self.state = CursorState.COVERING
                return point
            if cmp < 0:
                self.state = CursorState.SCANNING
                return None
            self.position += 1

        self.state = CursorState.EXHAUSTED
        return None


@dataclass(frozen=True)
class AlignedRow:
    """One hour of the forecast table."""
    at: datetime
    cells: tuple[WeatherPoint | None, ...]

    def formatted(self, freedom: bool = False) -> list[str]:
        """Render every cell as ``value unit`` or ``No Data``."""
        return [format_weather_value(cell, freedom) for cell in self.cells]

    def to_dict(self, properties: Sequence[str], freedom: bool = False) -> dict[str, Any]:
        """Convert to dictionary keyed by property name."""
        data: dict[str, Any] = {'time': self.at.isoformat()}
        for name, cell in zip(properties, self.cells, strict=True):
            if cell is None:
                data[name] = None
                continue
            if freedom:
                cell = liberate(cell)
            data[name] = {'value': cell.value, 'unit': cell.unit}
        return data


class AlignmentEngine(LoggerMixin):
    """Merge several sorted property series against an hourly clock."""

    def __init__(self, series: Mapping[str, PropertySeries], properties: Sequence[str]):
        super().__init__()
        self.series = series
        self.properties = list(properties)

    def _series_for(self, name: str) -> PropertySeries:
        series = self.series.get(name)
        if series is None:
            return PropertySeries(name=name, unit='')
        return series

    def align(self, start: datetime, end: datetime) -> list[AlignedRow]:
        """Build one row per whole hour from ``start`` to ``end`` inclusive.

        Raises:
            InvertedRange: If ``start`` is after ``end`` once both are
                truncated to the hour
        """
        clock = hourly_clock(start, end)
        cursors = [PropertyCursor(self._series_for(name)) for name in self.properties]

        rows = [
            AlignedRow(at=hour, cells=tuple(cursor.advance_to(hour) for cursor in cursors))
            for hour in clock
        ]

        self.debug(
            "Aligned forecast series",
            rows=len(rows),
            properties=",".join(self.properties),
            positions=",".join(f"{c.name}:{c.position}/{len(c.series)}" for c in cursors)
        )
        return rows
