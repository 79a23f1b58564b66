# eos_benefits/business_logic/entities/service_breakdown_entity.py
from dataclasses import dataclass, field
from typing import Union

from eos_benefits.constants import DAYS_PER_MONTH, DAYS_PER_YEAR, MONTHS_PER_YEAR

@dataclass(frozen=True)
class ServiceBreakdownEntity:
    """Elapsed service as years / months (0-11) / days (0-29) under the 30/360 convention."""
    years: int = 0
    months: int = 0
    days: int = 0

    def __post_init__(self):
        for name in ("years", "months", "days"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Service {name} must be an integer, got {value!r}.")
            if value < 0:
                raise ValueError(f"Service {name} cannot be negative.")
        if self.months >= MONTHS_PER_YEAR:
            raise ValueError(f"Service months must be below {MONTHS_PER_YEAR}.")
        if self.days >= DAYS_PER_MONTH:
            raise ValueError(f"Service days must be below {DAYS_PER_MONTH}.")

    @property
    def total_days(self) -> int:
        return self.years * DAYS_PER_YEAR + self.months * DAYS_PER_MONTH + self.days

    @property
    def is_zero(self) -> bool:
        return self.total_days == 0

    def __str__(self) -> str:
        return f"{self.years}Y {self.months}M {self.days}D"


@dataclass(frozen=True)
class ComputedServicePeriod:
    """Service is derived from the hire date and the as-of date."""


@dataclass(frozen=True)
class ManualServicePeriod:
    """Administrative override: the breakdown is used verbatim, no date arithmetic."""
    breakdown: ServiceBreakdownEntity = field(default_factory=ServiceBreakdownEntity)


ServicePeriodSource = Union[ComputedServicePeriod, ManualServicePeriod]
