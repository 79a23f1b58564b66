# eos_benefits/business_logic/benefit_calculator.py

from decimal import Decimal
from typing import Any, Optional

from eos_benefits.business_logic.entities.esb_calculation_entity import BenefitResult
from eos_benefits.constants import (
    TerminationReason, DAYS_PER_MONTH, DAYS_PER_YEAR, FIRST_TIER_YEARS,
    FIRST_TIER_MONTHS_PER_YEAR, SECOND_TIER_MONTHS_PER_YEAR, RESIGNATION_BRACKETS
)
from eos_benefits.utils.money import to_decimal, ZERO
import logging

logger = logging.getLogger(__name__)

ONE = Decimal("1")


def resignation_reduction_ratio(total_service_years: Decimal) -> Decimal:
    """Share of the benefit kept on resignation: 0 below 2 years, 1/3 below 5, 2/3 below 10, then all of it."""
    for lower_bound, numerator, denominator in RESIGNATION_BRACKETS:
        if total_service_years >= lower_bound:
            return Decimal(numerator) / Decimal(denominator)
    return ZERO


def compute_benefit(monthly_salary: Any,
                    years: int,
                    months: int,
                    days: int,
                    termination_reason: Optional[TerminationReason] = None) -> BenefitResult:
    """
    Accrued end-of-service benefit for a service period.

    Half a month's salary per year up to and including five years, a full
    month's salary per year beyond that, pro-rated on a 360-day year.
    Resignation reduces the result by the bracket ratio.
    """
    salary = to_decimal(monthly_salary)
    total_service_days = years * DAYS_PER_YEAR + months * DAYS_PER_MONTH + days
    total_service_years = Decimal(total_service_days) / Decimal(DAYS_PER_YEAR)

    first_tier_rate = salary * Decimal(FIRST_TIER_MONTHS_PER_YEAR)
    second_tier_rate = salary * Decimal(SECOND_TIER_MONTHS_PER_YEAR)

    if total_service_years <= FIRST_TIER_YEARS:
        accrued_benefit = total_service_years * first_tier_rate
    else:
        accrued_benefit = (FIRST_TIER_YEARS * first_tier_rate
                           + (total_service_years - FIRST_TIER_YEARS) * second_tier_rate)

    reduction_ratio = ONE
    if termination_reason == TerminationReason.RESIGNATION:
        reduction_ratio = resignation_reduction_ratio(total_service_years)
        accrued_benefit = accrued_benefit * reduction_ratio
        logger.debug(f"Resignation after {total_service_years:.4f} years: reduction ratio {reduction_ratio:.4f}.")

    return BenefitResult(
        accrued_benefit=max(ZERO, accrued_benefit),
        total_service_years=total_service_years,
        reduction_ratio=reduction_ratio,
    )
