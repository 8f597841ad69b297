# milkbook/models/entries.py

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Shift(str, Enum):
    MORNING = "MORNING"
    EVENING = "EVENING"


class MilkType(str, Enum):
    COW = "COW"
    BUFFALO = "BUFFALO"
    MIX = "MIX"


class RateSource(str, Enum):
    AUTO = "AUTO"
    MANUAL = "MANUAL"


class EntryIn(BaseModel):
    customer_id: int
    date: date
    shift: Shift
    milk_type: MilkType
    quantity_l: Decimal = Field(ge=0)
    fat: Optional[Decimal] = Field(default=None, ge=0)
    snf: Optional[Decimal] = Field(default=None, ge=0)
    rate: Optional[Decimal] = Field(default=None, gt=0)
    # None means MANUAL when a rate is supplied, AUTO otherwise
    rate_source: Optional[RateSource] = None
    note: Optional[str] = None


class EntryOut(BaseModel):
    id: int
    customer_id: int
    date: date
    shift: Shift
    milk_type: MilkType
    quantity_l: Decimal
    fat: Optional[Decimal] = None
    snf: Optional[Decimal] = None
    rate: Decimal
    rate_source: RateSource
    amount: Decimal
    note: Optional[str] = None

    class Config:
        from_attributes = True
