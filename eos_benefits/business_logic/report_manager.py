# eos_benefits/business_logic/report_manager.py

from typing import List, Dict, Any, Iterable
from datetime import date
from decimal import Decimal

from eos_benefits.business_logic.esb_manager import ESBManager
from eos_benefits.business_logic.entities.employee_entity import EmployeeEntity
from eos_benefits.business_logic.salary_resolver import salary_changed_between
from eos_benefits.utils.date_converter import to_date, to_date_str, month_end, previous_month_end
from eos_benefits.utils.money import round_money, ZERO
import logging

logger = logging.getLogger(__name__)

class ReportManager:
    """Provisioning and liability reports built from ESB snapshots."""

    def __init__(self, esb_manager: ESBManager):
        if esb_manager is None: raise ValueError("esb_manager cannot be None")
        self.esb_manager = esb_manager

    @staticmethod
    def _validate_period(year: int, month: int):
        if not isinstance(year, int) or year < 1:
            raise ValueError(f"Invalid report year: {year!r}")
        if not isinstance(month, int) or not 1 <= month <= 12:
            raise ValueError(f"Invalid report month: {month!r}")

    def monthly_provision_row(self, employee: EmployeeEntity, year: int, month: int) -> Dict[str, Any]:
        """
        Provision booked for one employee in one month: the movement of total
        liability between the previous month end and this month end, split into
        the standard run-rate and the salary adjustment on top of it.
        """
        self._validate_period(year, month)
        period_end = month_end(year, month)
        prev_end = previous_month_end(year, month)

        esb_end = self.esb_manager.snapshot_as_of(employee, period_end)
        esb_start = self.esb_manager.snapshot_as_of(employee, prev_end)

        total_accrual = esb_end.total_liability - esb_start.total_liability
        standard_accrual = esb_end.monthly_provision
        adjustment_accrual = max(ZERO, total_accrual - standard_accrual)

        return {
            "employee_id": employee.id,
            "employee_number": employee.employee_number,
            "name": employee.name,
            "period_end": to_date_str(period_end),
            "opening_balance": round_money(esb_start.total_liability),
            "standard_accrual": round_money(standard_accrual),
            "adjustment_accrual": round_money(adjustment_accrual),
            "total_accrual": round_money(total_accrual),
            "closing_balance": round_money(esb_end.total_liability),
            "has_salary_change": salary_changed_between(employee, esb_start.effective_end_date,
                                                        esb_end.effective_end_date),
        }

    def monthly_provision_report(self, employees: Iterable[EmployeeEntity], year: int, month: int) -> Dict[str, Any]:
        self._validate_period(year, month)
        logger.info(f"Generating monthly provision report for {year}-{month:02d}")
        report_data: Dict[str, Any] = {
            "year": year,
            "month": month,
            "rows": [],
            "total_standard_accrual": ZERO,
            "total_adjustment_accrual": ZERO,
            "total_accrual": ZERO,
            "total_closing_balance": ZERO,
        }
        for employee in employees:
            row = self.monthly_provision_row(employee, year, month)
            report_data["rows"].append(row)
            report_data["total_standard_accrual"] += row["standard_accrual"]
            report_data["total_adjustment_accrual"] += row["adjustment_accrual"]
            report_data["total_accrual"] += row["total_accrual"]
            report_data["total_closing_balance"] += row["closing_balance"]
        return report_data

    def cumulative_report(self, employees: Iterable[EmployeeEntity], today: date) -> List[Dict[str, Any]]:
        """One line per employee with the liability accumulated up to today."""
        today = to_date(today)
        logger.info(f"Generating cumulative ESB report as of {to_date_str(today)}")
        rows: List[Dict[str, Any]] = []
        for employee in employees:
            calc = self.esb_manager.current_snapshot(employee, today)
            rows.append({
                "employee_id": employee.id,
                "employee_number": employee.employee_number,
                "name": employee.name,
                "status": employee.status.value,
                "hire_date": to_date_str(employee.hire_date),
                "termination_date": to_date_str(employee.termination_date),
                "service_period": f"{calc.breakdown.years}Y {calc.breakdown.months}M",
                "opening_balance": round_money(employee.opening_balance),
                "accrued_benefit": round_money(calc.accrued_benefit),
                "total_liability": round_money(calc.total_liability),
                "remaining_liability": round_money(calc.remaining_liability),
            })
        return rows

    def accrual_matrix(self, employees: Iterable[EmployeeEntity], year: int, today: date) -> List[Dict[str, Any]]:
        """
        Month-by-month increase in remaining liability across `year`, one row
        per employee ordered by hire date. Months after today are zero and the
        current month is measured up to today.
        """
        self._validate_period(year, 1)
        today = to_date(today)
        logger.info(f"Generating accrual matrix for {year} (today {to_date_str(today)})")

        matrix: List[Dict[str, Any]] = []
        for employee in sorted(employees, key=lambda emp: emp.hire_date):
            monthly_values: List[Decimal] = []
            annual_total = ZERO
            for month in range(1, 13):
                if year > today.year or (year == today.year and month > today.month):
                    monthly_values.append(ZERO)
                    continue
                start_date = previous_month_end(year, month)
                end_date = month_end(year, month)
                if year == today.year and month == today.month:
                    end_date = today
                esb_end = self.esb_manager.snapshot_as_of(employee, end_date)
                esb_start = self.esb_manager.snapshot_as_of(employee, start_date)
                diff = max(ZERO, esb_end.remaining_liability - esb_start.remaining_liability)
                annual_total += diff
                monthly_values.append(round_money(diff))

            liability_at_year_end = self.esb_manager.snapshot_as_of(employee, date(year, 12, 31)).remaining_liability
            matrix.append({
                "employee_id": employee.id,
                "name": employee.name,
                "monthly_values": monthly_values,
                "annual_total": round_money(annual_total),
                "liability_at_year_end": round_money(liability_at_year_end),
            })
        return matrix

    def dashboard_summary(self, employees: Iterable[EmployeeEntity], today: date) -> Dict[str, Any]:
        today = to_date(today)
        summary: Dict[str, Any] = {
            "total_liability": ZERO,
            "total_accrued": ZERO,
            "total_monthly_provision": ZERO,
            "active_count": 0,
        }
        for employee in employees:
            calc = self.esb_manager.current_snapshot(employee, today)
            summary["total_liability"] += calc.remaining_liability
            summary["total_accrued"] += calc.accrued_benefit
            summary["total_monthly_provision"] += calc.monthly_provision
            if employee.is_active:
                summary["active_count"] += 1

        for key in ("total_liability", "total_accrued", "total_monthly_provision"):
            summary[key] = round_money(summary[key])
        return summary
