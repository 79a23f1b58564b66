# eos_benefits/business_logic/entities/salary_history_entry_entity.py
from dataclasses import dataclass, field
from typing import Optional
from datetime import date
from decimal import Decimal

from eos_benefits.utils.money import to_decimal
from eos_benefits.utils.date_converter import to_date
from .base_entity import BaseEntity

@dataclass(frozen=True)
class SalaryHistoryEntryEntity(BaseEntity):
    date: date # The day this salary took effect
    basic_salary: Decimal = field(default=Decimal("0"))
    housing_allowance: Decimal = field(default=Decimal("0"))
    transport_allowance: Decimal = field(default=Decimal("0"))
    other_allowances: Decimal = field(default=Decimal("0"))
    total: Optional[Decimal] = field(default=None) # Stored independently; defaults to the components sum
    reason: Optional[str] = field(default=None)

    def __post_init__(self):
        object.__setattr__(self, "date", to_date(self.date))
        for name in ("basic_salary", "housing_allowance", "transport_allowance", "other_allowances"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))
        if self.total is None:
            object.__setattr__(self, "total", self.components_total)
        else:
            object.__setattr__(self, "total", to_decimal(self.total))

    @property
    def components_total(self) -> Decimal:
        return self.basic_salary + self.housing_allowance + self.transport_allowance + self.other_allowances
