# eos_benefits/utils/__init__.py
