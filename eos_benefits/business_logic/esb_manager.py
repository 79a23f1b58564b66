# eos_benefits/business_logic/esb_manager.py

from datetime import date, datetime
from decimal import Decimal
from typing import Union

from eos_benefits.business_logic.entities.employee_entity import EmployeeEntity
from eos_benefits.business_logic.entities.esb_calculation_entity import ESBCalculationEntity
from eos_benefits.business_logic.entities.service_breakdown_entity import ServiceBreakdownEntity
from eos_benefits.business_logic.service_period_calculator import compute_service_period
from eos_benefits.business_logic.salary_resolver import salary_at
from eos_benefits.business_logic.benefit_calculator import compute_benefit
from eos_benefits.constants import (
    FIRST_TIER_YEARS, FIRST_TIER_PROVISION_DIVISOR, SECOND_TIER_PROVISION_DIVISOR, DATE_FORMAT
)
from eos_benefits.utils.date_converter import to_date
from eos_benefits.utils.money import ZERO
import logging

logger = logging.getLogger(__name__)


class ESBManager:
    """
    Assembles the per-employee ESB snapshot from the service period, the
    salary in effect and the stored opening balance / payout.

    The as-of date is always supplied by the caller; nothing here reads the clock.
    """

    def resolve_end_date(self, employee: EmployeeEntity, as_of_date: Union[date, datetime],
                         point_in_time: bool = False) -> date:
        """
        Date the service period and salary are measured at.

        A terminated employee is measured at the termination date. For
        point-in-time queries the requested date is kept when it falls
        before the termination date.
        """
        as_of = to_date(as_of_date)
        if not (employee.is_terminated and employee.termination_date):
            return as_of
        if point_in_time:
            return min(as_of, employee.termination_date)
        return employee.termination_date

    def resolve_breakdown(self, employee: EmployeeEntity, end_date: date) -> ServiceBreakdownEntity:
        manual = employee.manual_service_breakdown
        if manual is not None:
            return manual
        return compute_service_period(employee.hire_date, end_date)

    def monthly_provision(self, employee: EmployeeEntity, monthly_salary: Decimal,
                          total_service_years: Decimal) -> Decimal:
        if not employee.is_active:
            return ZERO
        if total_service_years < FIRST_TIER_YEARS:
            return monthly_salary / FIRST_TIER_PROVISION_DIVISOR
        return monthly_salary / SECOND_TIER_PROVISION_DIVISOR

    def compute_snapshot(self, employee: EmployeeEntity, as_of_date: Union[date, datetime],
                         point_in_time: bool = False) -> ESBCalculationEntity:
        if employee is None:
            raise ValueError("employee cannot be None")
        as_of = to_date(as_of_date)
        end_date = self.resolve_end_date(employee, as_of, point_in_time=point_in_time)

        monthly_salary = salary_at(employee, end_date)
        breakdown = self.resolve_breakdown(employee, end_date)
        benefit = compute_benefit(
            monthly_salary,
            breakdown.years,
            breakdown.months,
            breakdown.days,
            employee.termination_reason
        )

        monthly_provision = self.monthly_provision(employee, monthly_salary, benefit.total_service_years)
        total_liability = employee.opening_balance + benefit.accrued_benefit
        paid = employee.payout_amount if employee.payout_amount is not None else ZERO
        remaining_liability = max(ZERO, total_liability - paid)

        logger.debug(f"ESB for employee {employee.id} as of {as_of.strftime(DATE_FORMAT)} "
                     f"(measured at {end_date.strftime(DATE_FORMAT)}): service {breakdown}, "
                     f"salary {monthly_salary:.2f}, accrued {benefit.accrued_benefit:.2f}, "
                     f"remaining {remaining_liability:.2f}")

        return ESBCalculationEntity(
            employee_id=employee.id,
            as_of_date=as_of,
            effective_end_date=end_date,
            monthly_salary=monthly_salary,
            total_service_days=breakdown.total_days,
            total_service_years=benefit.total_service_years,
            accrued_benefit=benefit.accrued_benefit,
            monthly_provision=monthly_provision,
            total_liability=total_liability,
            reduction_ratio=benefit.reduction_ratio,
            remaining_liability=remaining_liability,
            breakdown=breakdown
        )

    def current_snapshot(self, employee: EmployeeEntity, today: Union[date, datetime]) -> ESBCalculationEntity:
        """Liability as of today; a terminated employee is frozen at the termination date."""
        return self.compute_snapshot(employee, today, point_in_time=False)

    def snapshot_as_of(self, employee: EmployeeEntity, as_of_date: Union[date, datetime]) -> ESBCalculationEntity:
        """Liability reconstructed at a historical date (month-end provisioning and similar)."""
        return self.compute_snapshot(employee, as_of_date, point_in_time=True)
