# eos_benefits/utils/date_converter.py

import calendar
from datetime import date, datetime
from typing import Optional, Union

from eos_benefits.constants import DATE_FORMAT


def to_date(value: Union[date, datetime]) -> date:
    """Drops the time-of-day part of a datetime; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def to_date_str(value: Optional[date]) -> str:
    if value is None:
        return "-"
    return value.strftime(DATE_FORMAT)


def is_last_day_of_month(value: date) -> bool:
    return value.day == calendar.monthrange(value.year, value.month)[1]


def month_end(year: int, month: int) -> date:
    """Last calendar day of the given month (month is 1-12)."""
    return date(year, month, calendar.monthrange(year, month)[1])


def previous_month_end(year: int, month: int) -> date:
    """Last calendar day of the month before the given one."""
    if month == 1:
        return date(year - 1, 12, 31)
    return month_end(year, month - 1)
