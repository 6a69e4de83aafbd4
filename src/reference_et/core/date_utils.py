"""
Date utilities.

Centralizes date parsing and day-of-year handling. Dates are anchored at
midnight UTC.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union
import pytz

from ..exceptions import InvalidInputError


DATE_FORMAT = "%Y-%m-%d"


class DateUtils:
    """Utilities for date handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_date(value: Union[str, date, datetime]) -> date:
        """
        Parse a calendar date.

        Args:
            value: Date string in YYYY-MM-DD format, or a date/datetime

        Returns:
            Calendar date

        Raises:
            InvalidInputError: If the value cannot be parsed
        """
        if isinstance(value, datetime):
            return DateUtils.to_utc_datetime(value).date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise InvalidInputError(f"Invalid date: {value!r}")

        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except ValueError:
            raise InvalidInputError(
                f"Invalid date format: {value!r}, must be YYYY-MM-DD"
            )

    @staticmethod
    def to_utc_datetime(value: Union[date, datetime]) -> datetime:
        """
        Convert a date or datetime to an aware UTC datetime.

        Args:
            value: Date (taken as midnight UTC) or datetime (naive assumed UTC)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return pytz.UTC.localize(value)
            return value.astimezone(pytz.UTC)
        return pytz.UTC.localize(datetime.combine(value, datetime.min.time()))

    @staticmethod
    def day_of_year(value: Union[str, date, datetime]) -> int:
        """
        Get the day of year (1-365/366) for a date.

        Args:
            value: Date string, date or datetime

        Returns:
            Day of year
        """
        return DateUtils.parse_date(value).timetuple().tm_yday

    def format_date(self, value: Union[date, datetime]) -> str:
        """
        Format a date as YYYY-MM-DD.

        Args:
            value: Date or datetime

        Returns:
            Formatted date string
        """
        formatted = self.parse_date(value).strftime(DATE_FORMAT)
        self.logger.debug(f"Formatted date {value!r} -> {formatted}")
        return formatted
