# eos_benefits/__init__.py
"""End-of-service benefit (ESB) accrual engine under Saudi labor law rules."""

__version__ = "1.0.0"
