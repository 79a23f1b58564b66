# eos_benefits/business_logic/entities/employee_entity.py
from dataclasses import dataclass, field
from typing import Optional, Tuple
from datetime import date
from decimal import Decimal

from eos_benefits.constants import EmployeeStatus, TerminationReason
from eos_benefits.utils.money import to_decimal
from eos_benefits.utils.date_converter import to_date
from .base_entity import BaseEntity
from .salary_history_entry_entity import SalaryHistoryEntryEntity
from .service_breakdown_entity import (
    ServiceBreakdownEntity, ServicePeriodSource, ComputedServicePeriod, ManualServicePeriod
)

_MONEY_FIELDS = ("basic_salary", "housing_allowance", "transport_allowance", "other_allowances", "opening_balance")

@dataclass(frozen=True)
class EmployeeEntity(BaseEntity):
    hire_date: date
    status: EmployeeStatus
    employee_number: Optional[str] = field(default=None)
    name: Optional[str] = field(default=None)
    job_title: Optional[str] = field(default=None)
    organization_id: Optional[str] = field(default=None)
    contract_end_date: Optional[date] = field(default=None)
    termination_date: Optional[date] = field(default=None)
    termination_reason: Optional[TerminationReason] = field(default=None)
    # Live salary components: the latest authoritative state
    basic_salary: Decimal = field(default=Decimal("0"))
    housing_allowance: Decimal = field(default=Decimal("0"))
    transport_allowance: Decimal = field(default=Decimal("0"))
    other_allowances: Decimal = field(default=Decimal("0"))
    opening_balance: Decimal = field(default=Decimal("0")) # Liability carried over from before these records
    salary_history: Tuple[SalaryHistoryEntryEntity, ...] = field(default=())
    service_period_source: ServicePeriodSource = field(default_factory=ComputedServicePeriod)
    payout_amount: Optional[Decimal] = field(default=None)
    payout_date: Optional[date] = field(default=None)

    def __post_init__(self):
        if self.hire_date is None:
            raise ValueError("hire_date is required.")
        object.__setattr__(self, "hire_date", to_date(self.hire_date))
        object.__setattr__(self, "status", EmployeeStatus(self.status))
        if self.termination_reason is not None:
            object.__setattr__(self, "termination_reason", TerminationReason(self.termination_reason))
        for name in ("contract_end_date", "termination_date", "payout_date"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, to_date(value))
        for name in _MONEY_FIELDS:
            object.__setattr__(self, name, to_decimal(getattr(self, name)))
        if self.payout_amount is not None:
            object.__setattr__(self, "payout_amount", to_decimal(self.payout_amount))
        object.__setattr__(self, "salary_history", tuple(self.salary_history or ()))
        if not isinstance(self.service_period_source, (ComputedServicePeriod, ManualServicePeriod)):
            raise ValueError(f"Unsupported service period source: {self.service_period_source!r}")

    @property
    def current_salary_total(self) -> Decimal:
        return self.basic_salary + self.housing_allowance + self.transport_allowance + self.other_allowances

    @property
    def manual_service_breakdown(self) -> Optional[ServiceBreakdownEntity]:
        if isinstance(self.service_period_source, ManualServicePeriod):
            return self.service_period_source.breakdown
        return None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    @property
    def is_terminated(self) -> bool:
        return self.status == EmployeeStatus.TERMINATED
