# milkbook/models/payments.py

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PaymentMode(str, Enum):
    CASH = "Cash"
    UPI = "UPI"


class PaymentIn(BaseModel):
    customer_id: int
    date: date
    amount: Decimal = Field(ge=0)
    mode: PaymentMode
    note: Optional[str] = None


class PaymentOut(BaseModel):
    id: int
    customer_id: int
    date: date
    amount: Decimal
    mode: PaymentMode
    note: Optional[str] = None

    class Config:
        from_attributes = True
