# milkbook/models/customers.py

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CustomerIn(BaseModel):
    sl_no: int = Field(gt=0)
    name: str
    phone: Optional[str] = None
    village: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("phone")
    @classmethod
    def phone_digits_only(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        digits = re.sub(r"\D", "", value)
        return digits or None

    @field_validator("village")
    @classmethod
    def village_trimmed(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class CustomerOut(BaseModel):
    id: int
    sl_no: int
    label: str
    name: str
    phone: Optional[str] = None
    village: Optional[str] = None

    class Config:
        from_attributes = True
