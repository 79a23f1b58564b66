# eos_benefits/business_logic/__init__.py
from .service_period_calculator import compute_service_period
from .salary_resolver import salary_at, salary_history_sorted, salary_changed_between
from .benefit_calculator import compute_benefit, resignation_reduction_ratio
from .esb_manager import ESBManager
from .employee_manager import EmployeeManager
from .report_manager import ReportManager
