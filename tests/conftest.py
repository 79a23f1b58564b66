"""
Pytest configuration and fixtures for the ESB engine tests.

Employees are built directly as entities so each test states exactly the
salary history and status it depends on.
"""

import pytest
from datetime import date
from decimal import Decimal

from eos_benefits.business_logic.entities import EmployeeEntity, SalaryHistoryEntryEntity
from eos_benefits.business_logic.esb_manager import ESBManager
from eos_benefits.business_logic.employee_manager import EmployeeManager
from eos_benefits.business_logic.report_manager import ReportManager
from eos_benefits.constants import EmployeeStatus


@pytest.fixture
def esb_manager():
    return ESBManager()


@pytest.fixture
def employee_manager():
    return EmployeeManager()


@pytest.fixture
def report_manager(esb_manager):
    return ReportManager(esb_manager)


@pytest.fixture
def make_employee():
    """
    Factory for an employee whose whole salary is carried in basic_salary,
    with a single history entry at the hire date unless history is given.
    """
    def _make(hire_date=date(2018, 1, 1), salary=Decimal("10000"), status=EmployeeStatus.ACTIVE,
              history=None, **overrides):
        if history is None:
            history = (SalaryHistoryEntryEntity(date=hire_date, basic_salary=salary, reason="Opening Balance"),)
        fields = dict(
            id=overrides.pop("id", "emp-1"),
            hire_date=hire_date,
            status=status,
            name=overrides.pop("name", "Test Employee"),
            basic_salary=salary,
            salary_history=history,
        )
        fields.update(overrides)
        return EmployeeEntity(**fields)
    return _make
