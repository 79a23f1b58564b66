# eos_benefits/business_logic/entities/__init__.py
from .base_entity import BaseEntity
from .salary_history_entry_entity import SalaryHistoryEntryEntity
from .service_breakdown_entity import (
    ServiceBreakdownEntity, ServicePeriodSource, ComputedServicePeriod, ManualServicePeriod
)
from .employee_entity import EmployeeEntity
from .esb_calculation_entity import ESBCalculationEntity, BenefitResult
__all__ = [
    "BaseEntity", "SalaryHistoryEntryEntity", "ServiceBreakdownEntity",
    "ServicePeriodSource", "ComputedServicePeriod", "ManualServicePeriod",
    "EmployeeEntity", "ESBCalculationEntity", "BenefitResult",
]
