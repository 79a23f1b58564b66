# eos_benefits/constants.py

from enum import Enum

# General
DATE_FORMAT = "%Y-%m-%d"

class EmployeeStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    TERMINATED = "TERMINATED"

class TerminationReason(Enum):
    RESIGNATION = "RESIGNATION"
    MUTUAL_AGREEMENT = "MUTUAL_AGREEMENT"
    TERMINATION_BY_EMPLOYER = "TERMINATION_BY_EMPLOYER"

# 30/360 day count
DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12
DAYS_PER_YEAR = 360

# Article 84: half a month per year for the first five years, a full month after
FIRST_TIER_YEARS = 5
FIRST_TIER_MONTHS_PER_YEAR = "0.5"
SECOND_TIER_MONTHS_PER_YEAR = "1"

# Article 85: resignation brackets as (lower bound in years, ratio numerator, ratio denominator).
# Service below the first bound forfeits the benefit.
RESIGNATION_BRACKETS = (
    (10, 1, 1),
    (5, 2, 3),
    (2, 1, 3),
)

# Monthly provision divisors (salary / 24 during the first tier, salary / 12 after)
FIRST_TIER_PROVISION_DIVISOR = 24
SECOND_TIER_PROVISION_DIVISOR = 12

# Default salary history reasons
REASON_OPENING_BALANCE = "Opening Balance"
REASON_SALARY_CHANGE = "Salary Increase"
