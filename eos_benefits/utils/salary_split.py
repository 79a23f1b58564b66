# eos_benefits/utils/salary_split.py

from decimal import Decimal
from typing import Any, Dict

from eos_benefits.config import BASIC_SALARY_DIVISOR, HOUSING_RATIO_OF_BASIC
from eos_benefits.utils.money import round_money, to_decimal


def split_total_salary(total: Any, other_allowances: Any = 0) -> Dict[str, Decimal]:
    """
    Splits a gross monthly figure into its components:
    basic = total / 1.35, housing = 25% of basic, transport = the remainder.
    Each component is rounded to 2 decimals; other_allowances is carried as given.
    """
    total_dec = to_decimal(total)
    basic = round_money(total_dec / Decimal(BASIC_SALARY_DIVISOR))
    housing = round_money(basic * Decimal(HOUSING_RATIO_OF_BASIC))
    transport = round_money(total_dec - basic - housing)
    return {
        "basic_salary": basic,
        "housing_allowance": housing,
        "transport_allowance": transport,
        "other_allowances": to_decimal(other_allowances),
    }
