# eos_benefits/business_logic/entities/base_entity.py
from dataclasses import dataclass, field
from typing import Optional

@dataclass(frozen=True)
class BaseEntity:
    id: Optional[str] = field(default=None, kw_only=True) # kw_only=True makes it a keyword-only argument
