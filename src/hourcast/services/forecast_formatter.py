"""Rendering of aligned forecast tables."""

import json
from datetime import datetime
from datetime import tzinfo

from tabulate import tabulate

from hourcast.services.forecast_service import ForecastTable


class ForecastFormatter:
    """Centralized forecast formatting service."""

    TABLE_FORMAT = "psql"

    @staticmethod
    def format_time(at: datetime, display_timezone: tzinfo) -> str:
        """Format an hour as ``Jan  2 15:04:05`` in the display timezone."""
        local = at.astimezone(display_timezone)
        return f"{local:%b} {local.day:2d} {local:%H:%M:%S}"

    @staticmethod
    def format_header(table: ForecastTable) -> str:
        """Location lines printed above the text table."""
        return (
            f"lat: {table.coordinates.latitude} long: {table.coordinates.longitude}\n"
            f"forecastGridDataURL: {table.grid_data_url}"
        )

    @classmethod
    def format_table(cls, table: ForecastTable, display_timezone: tzinfo, freedom: bool = False) -> str:
        """Format the forecast as a text table, one row per hour.

        Args:
            table: Aligned forecast
            display_timezone: Timezone for the time column
            freedom: Convert values to imperial units

        Returns:
            Table text
        """
        headers = ["time", *table.properties]
        body = [
            [cls.format_time(row.at, display_timezone), *row.formatted(freedom)]
            for row in table.rows
        ]
        return tabulate(
            body,
            headers=headers,
            tablefmt=cls.TABLE_FORMAT,
            disable_numparse=True,
            colalign=("left", *("right" for _ in table.properties))
        )

    @classmethod
    def format_json(cls, table: ForecastTable, freedom: bool = False) -> str:
        """Format the forecast as JSON with raw values and unit tokens."""
        return json.dumps(
            {
                "latitude": table.coordinates.latitude,
                "longitude": table.coordinates.longitude,
                "grid_data_url": table.grid_data_url,
                "properties": list(table.properties),
                "rows": [row.to_dict(table.properties, freedom) for row in table.rows],
            },
            indent=2
        )
