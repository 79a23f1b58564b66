# eos_benefits/business_logic/entities/esb_calculation_entity.py
from dataclasses import dataclass, field
from typing import Optional
from datetime import date
from decimal import Decimal

from .service_breakdown_entity import ServiceBreakdownEntity

@dataclass(frozen=True)
class BenefitResult:
    accrued_benefit: Decimal
    total_service_years: Decimal
    reduction_ratio: Decimal


@dataclass(frozen=True)
class ESBCalculationEntity:
    """Point-in-time ESB figures for one employee. Always recomputed, never stored."""
    employee_id: Optional[str]
    as_of_date: date
    effective_end_date: date
    monthly_salary: Decimal
    total_service_days: int
    total_service_years: Decimal
    accrued_benefit: Decimal
    monthly_provision: Decimal
    total_liability: Decimal # opening balance + accrued benefit
    reduction_ratio: Decimal
    remaining_liability: Decimal # total liability less payout, never negative
    breakdown: ServiceBreakdownEntity = field(default_factory=ServiceBreakdownEntity)
