# eos_benefits/business_logic/service_period_calculator.py

from datetime import date, datetime
from typing import Tuple, Union

from eos_benefits.business_logic.entities.service_breakdown_entity import ServiceBreakdownEntity
from eos_benefits.constants import DAYS_PER_MONTH, MONTHS_PER_YEAR
from eos_benefits.utils.date_converter import to_date, is_last_day_of_month
import logging

logger = logging.getLogger(__name__)


def _adjusted_day(value: date) -> int:
    # 30/360: the 31st and the last day of February count as the 30th
    if value.day == 31 or is_last_day_of_month(value):
        return DAYS_PER_MONTH
    return value.day


def _roll_over(years: int, months: int, days: int) -> Tuple[int, int, int]:
    if days >= DAYS_PER_MONTH:
        days -= DAYS_PER_MONTH
        months += 1
    if months >= MONTHS_PER_YEAR:
        months -= MONTHS_PER_YEAR
        years += 1
    return years, months, days


def compute_service_period(start_date: Union[date, datetime],
                           end_date: Union[date, datetime]) -> ServiceBreakdownEntity:
    """
    Elapsed service between start_date and end_date on a 30/360 basis.

    Both days are counted (hire day and as-of day), except on an exact
    anniversary where N whole years stay N years. A same-day or reversed
    range yields a zero breakdown; no error is raised.
    """
    start = to_date(start_date)
    end = to_date(end_date)

    years = end.year - start.year
    if years > 0 and (end.month, end.day) == (start.month, start.day):
        return ServiceBreakdownEntity(years=years)

    months = end.month - start.month
    days = _adjusted_day(end) - _adjusted_day(start)

    if days < 0:
        days += DAYS_PER_MONTH
        months -= 1
    if months < 0:
        months += MONTHS_PER_YEAR
        years -= 1

    if years < 0 or (years == 0 and months < 0) or (years == 0 and months == 0 and days <= 0):
        logger.debug(f"No service between {start} and {end}.")
        return ServiceBreakdownEntity()

    years, months, days = _roll_over(years, months, days)

    is_whole_years = years > 0 and months == 0 and days == 0
    if not is_whole_years:
        years, months, days = _roll_over(years, months, days + 1)

    return ServiceBreakdownEntity(years=years, months=months, days=days)
