# eos_benefits/business_logic/salary_resolver.py

from datetime import date, datetime
from decimal import Decimal
from typing import List, Union

from eos_benefits.business_logic.entities.employee_entity import EmployeeEntity
from eos_benefits.business_logic.entities.salary_history_entry_entity import SalaryHistoryEntryEntity
from eos_benefits.utils.date_converter import to_date
import logging

logger = logging.getLogger(__name__)


def salary_history_sorted(employee: EmployeeEntity, descending: bool = False) -> List[SalaryHistoryEntryEntity]:
    """History entries in chronological order (newest first when descending=True)."""
    return sorted(employee.salary_history, key=lambda entry: entry.date, reverse=descending)


def salary_at(employee: EmployeeEntity, target_date: Union[date, datetime]) -> Decimal:
    """
    Monthly salary total in effect on target_date.

    The live salary fields win for any date on or after the latest history
    entry, so a correction to the current salary applies without a new
    history entry. Earlier dates are answered from the stored history totals.
    """
    target = to_date(target_date)
    history = salary_history_sorted(employee, descending=True)

    if not history:
        return employee.current_salary_total

    if target >= history[0].date:
        return employee.current_salary_total

    for entry in history:
        if entry.date <= target:
            return entry.total

    logger.debug(f"Date {target} precedes the salary history of employee {employee.id}; using the live salary.")
    return employee.current_salary_total


def salary_changed_between(employee: EmployeeEntity,
                           start_date: Union[date, datetime],
                           end_date: Union[date, datetime]) -> bool:
    return salary_at(employee, start_date) != salary_at(employee, end_date)
