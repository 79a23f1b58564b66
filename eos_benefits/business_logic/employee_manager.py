# eos_benefits/business_logic/employee_manager.py

from dataclasses import replace
from typing import Optional, Any
from datetime import date

from eos_benefits.business_logic.entities.employee_entity import EmployeeEntity
from eos_benefits.business_logic.entities.salary_history_entry_entity import SalaryHistoryEntryEntity
from eos_benefits.business_logic.entities.service_breakdown_entity import (
    ServiceBreakdownEntity, ComputedServicePeriod, ManualServicePeriod
)
from eos_benefits.business_logic.salary_resolver import salary_history_sorted
from eos_benefits.constants import (
    EmployeeStatus, TerminationReason, DATE_FORMAT, REASON_OPENING_BALANCE, REASON_SALARY_CHANGE
)
from eos_benefits.utils.money import to_decimal, ZERO
from eos_benefits.utils.salary_split import split_total_salary
from eos_benefits.utils.date_converter import to_date
import logging

logger = logging.getLogger(__name__)

class EmployeeManager:
    """
    Lifecycle transitions on employee records: hire, salary changes,
    termination and payout. Entities are immutable, so every operation
    returns a new EmployeeEntity and leaves storage to the caller.
    """

    def create_employee(self,
                        name: str,
                        hire_date: date,
                        basic_salary: Any = 0,
                        housing_allowance: Any = 0,
                        transport_allowance: Any = 0,
                        other_allowances: Any = 0,
                        opening_balance: Any = 0,
                        status: EmployeeStatus = EmployeeStatus.ACTIVE,
                        employee_id: Optional[str] = None,
                        employee_number: Optional[str] = None,
                        job_title: Optional[str] = None,
                        organization_id: Optional[str] = None,
                        contract_end_date: Optional[date] = None,
                        history_reason: str = REASON_OPENING_BALANCE) -> EmployeeEntity:
        """
        Creates a new employee whose salary history starts with one entry
        dated at the hire date.
        """
        if not name or not name.strip():
            raise ValueError("Employee name cannot be empty.")
        if not isinstance(hire_date, date):
            raise ValueError("Invalid hire date.")

        components = {
            "basic_salary": to_decimal(basic_salary),
            "housing_allowance": to_decimal(housing_allowance),
            "transport_allowance": to_decimal(transport_allowance),
            "other_allowances": to_decimal(other_allowances),
        }
        for field_name, amount in components.items():
            if amount < ZERO:
                raise ValueError(f"{field_name} cannot be negative.")
        if to_decimal(opening_balance) < ZERO:
            raise ValueError("Opening balance cannot be negative.")

        initial_entry = SalaryHistoryEntryEntity(date=hire_date, reason=history_reason, **components)
        employee = EmployeeEntity(
            id=employee_id,
            hire_date=hire_date,
            status=status,
            employee_number=employee_number,
            name=name.strip(),
            job_title=job_title,
            organization_id=organization_id,
            contract_end_date=contract_end_date,
            opening_balance=opening_balance,
            salary_history=(initial_entry,),
            **components
        )
        logger.info(f"Employee '{employee.name}' created (hired {hire_date.strftime(DATE_FORMAT)}, "
                    f"salary {employee.current_salary_total:.2f}).")
        return employee

    def change_salary(self,
                      employee: EmployeeEntity,
                      effective_date: date,
                      total: Any,
                      reason: Optional[str] = None,
                      other_allowances: Any = None) -> EmployeeEntity:
        """
        Records a salary change effective on effective_date.

        `total` is split into basic / housing / transport; other allowances
        are kept from the employee unless given. The new history entry total
        is the sum of all four components. A change dated before the newest
        history entry only fills in history; the live fields stay as they are.
        """
        if employee is None: raise ValueError("employee cannot be None")
        if not isinstance(effective_date, date):
            raise ValueError("Invalid salary change date.")
        total_dec = to_decimal(total)
        if total_dec < ZERO:
            raise ValueError("Salary cannot be negative.")
        if employee.is_terminated:
            logger.warning(f"Rejected salary change for terminated employee {employee.id}.")
            raise ValueError("Cannot change the salary of a terminated employee.")

        other = employee.other_allowances if other_allowances is None else to_decimal(other_allowances)
        components = split_total_salary(total_dec, other)
        entry = SalaryHistoryEntryEntity(
            date=effective_date,
            reason=reason or REASON_SALARY_CHANGE,
            **components
        )
        latest = salary_history_sorted(employee, descending=True)[:1]
        updated = replace(employee, salary_history=employee.salary_history + (entry,))
        if latest and entry.date < latest[0].date:
            logger.info(f"Backdated salary entry for employee {employee.id}; live salary left unchanged.")
        else:
            updated = replace(updated, **components)
        logger.info(f"Salary of employee {employee.id} changed to {entry.total:.2f} "
                    f"effective {effective_date.strftime(DATE_FORMAT)} ({entry.reason}).")
        return updated

    def correct_current_salary(self,
                               employee: EmployeeEntity,
                               basic_salary: Optional[Any] = None,
                               housing_allowance: Optional[Any] = None,
                               transport_allowance: Optional[Any] = None,
                               other_allowances: Optional[Any] = None) -> EmployeeEntity:
        """Edits the live salary fields only; no history entry is appended."""
        if employee is None: raise ValueError("employee cannot be None")
        changes = {}
        for field_name, value in (("basic_salary", basic_salary),
                                  ("housing_allowance", housing_allowance),
                                  ("transport_allowance", transport_allowance),
                                  ("other_allowances", other_allowances)):
            if value is None:
                continue
            amount = to_decimal(value)
            if amount < ZERO: raise ValueError(f"{field_name} cannot be negative.")
            changes[field_name] = amount

        if not changes:
            logger.info(f"No salary corrections provided for employee {employee.id}.")
            return employee

        updated = replace(employee, **changes)
        logger.info(f"Live salary of employee {employee.id} corrected to {updated.current_salary_total:.2f}.")
        return updated

    @staticmethod
    def _sync_live_fields(employee: EmployeeEntity) -> EmployeeEntity:
        latest = salary_history_sorted(employee, descending=True)[:1]
        if not latest:
            return replace(employee,
                           basic_salary=ZERO,
                           housing_allowance=ZERO,
                           transport_allowance=ZERO,
                           other_allowances=ZERO)
        entry = latest[0]
        return replace(employee,
                       basic_salary=entry.basic_salary,
                       housing_allowance=entry.housing_allowance,
                       transport_allowance=entry.transport_allowance,
                       other_allowances=entry.other_allowances)

    def edit_history_entry(self,
                           employee: EmployeeEntity,
                           index: int,
                           effective_date: Optional[date] = None,
                           total: Optional[Any] = None,
                           reason: Optional[str] = None) -> EmployeeEntity:
        """
        Re-dates, re-totals or re-labels the history entry at `index`.

        A new total is split into basic / housing / transport again while the
        entry's other allowances are kept. When the edited entry was or
        becomes the newest one, the live fields follow the newest entry.
        """
        if employee is None: raise ValueError("employee cannot be None")
        if not 0 <= index < len(employee.salary_history):
            raise ValueError(f"Salary history index {index} out of range.")
        if effective_date is not None and not isinstance(effective_date, date):
            raise ValueError("Invalid salary change date.")

        entry = employee.salary_history[index]
        was_latest = salary_history_sorted(employee, descending=True)[0] is entry
        changes = {}
        if effective_date is not None:
            changes["date"] = to_date(effective_date)
        if total is not None:
            total_dec = to_decimal(total)
            if total_dec < ZERO:
                raise ValueError("Salary cannot be negative.")
            changes.update(split_total_salary(total_dec, entry.other_allowances))
            changes["total"] = None
        if reason is not None:
            changes["reason"] = reason

        if not changes:
            logger.info(f"No changes provided for salary history entry {index} of employee {employee.id}.")
            return employee

        edited = replace(entry, **changes)
        history = employee.salary_history[:index] + (edited,) + employee.salary_history[index + 1:]
        updated = replace(employee, salary_history=history)
        if was_latest or salary_history_sorted(updated, descending=True)[0] is edited:
            updated = self._sync_live_fields(updated)
        logger.info(f"Salary history entry {index} of employee {employee.id} edited "
                    f"({edited.date.strftime(DATE_FORMAT)}, {edited.total:.2f}, {edited.reason}).")
        return updated

    def remove_history_entry(self, employee: EmployeeEntity, index: int) -> EmployeeEntity:
        """
        Deletes the history entry at `index` (position in employee.salary_history)
        and resyncs the live fields to the newest remaining entry, or to zero
        when none is left.
        """
        if employee is None: raise ValueError("employee cannot be None")
        if not 0 <= index < len(employee.salary_history):
            raise ValueError(f"Salary history index {index} out of range.")

        remaining = employee.salary_history[:index] + employee.salary_history[index + 1:]
        updated = self._sync_live_fields(replace(employee, salary_history=remaining))
        logger.info(f"Salary history entry {index} removed for employee {employee.id}; "
                    f"live salary is now {updated.current_salary_total:.2f}.")
        return updated

    def terminate(self,
                  employee: EmployeeEntity,
                  termination_date: date,
                  reason: TerminationReason) -> EmployeeEntity:
        if employee is None: raise ValueError("employee cannot be None")
        if not isinstance(termination_date, date):
            raise ValueError("Invalid termination date.")
        termination_date = to_date(termination_date)
        if employee.is_terminated:
            logger.warning(f"Employee {employee.id} is already terminated (on {employee.termination_date}).")
            raise ValueError("Employee is already terminated.")
        if termination_date < employee.hire_date:
            raise ValueError("Termination date cannot be before the hire date.")
        reason = TerminationReason(reason)

        updated = replace(employee,
                          status=EmployeeStatus.TERMINATED,
                          termination_date=termination_date,
                          termination_reason=reason,
                          contract_end_date=termination_date)
        logger.info(f"Employee {employee.id} terminated on {termination_date.strftime(DATE_FORMAT)} ({reason.value}).")
        return updated

    def record_payout(self, employee: EmployeeEntity, amount: Any, payout_date: date) -> EmployeeEntity:
        if employee is None: raise ValueError("employee cannot be None")
        amount_dec = to_decimal(amount)
        if amount_dec < ZERO:
            raise ValueError("Payout amount cannot be negative.")
        if not isinstance(payout_date, date):
            raise ValueError("Invalid payout date.")
        if not employee.is_terminated:
            logger.warning(f"Rejected payout for employee {employee.id} with status {employee.status.value}.")
            raise ValueError("A payout can only be recorded for a terminated employee.")

        updated = replace(employee, payout_amount=amount_dec, payout_date=payout_date)
        logger.info(f"Payout of {amount_dec:.2f} recorded for employee {employee.id} on {payout_date.strftime(DATE_FORMAT)}.")
        return updated

    def set_manual_service_breakdown(self, employee: EmployeeEntity,
                                     breakdown: ServiceBreakdownEntity) -> EmployeeEntity:
        if employee is None: raise ValueError("employee cannot be None")
        if not isinstance(breakdown, ServiceBreakdownEntity):
            raise ValueError("breakdown must be a ServiceBreakdownEntity.")
        logger.info(f"Manual service period {breakdown} set for employee {employee.id}.")
        return replace(employee, service_period_source=ManualServicePeriod(breakdown))

    def clear_manual_service_breakdown(self, employee: EmployeeEntity) -> EmployeeEntity:
        if employee is None: raise ValueError("employee cannot be None")
        return replace(employee, service_period_source=ComputedServicePeriod())
