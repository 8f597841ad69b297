# milkbook/models/summaries.py

from datetime import date
from decimal import Decimal
from typing import Dict, List

from pydantic import BaseModel

from milkbook.models.entries import EntryOut, MilkType, Shift
from milkbook.models.payments import PaymentOut

ZERO = Decimal("0")


class MilkTypeTotals(BaseModel):
    liters: Decimal = ZERO
    amount: Decimal = ZERO


class ShiftSummary(BaseModel):
    milk_types: Dict[MilkType, MilkTypeTotals]
    total_liters: Decimal = ZERO
    total_amount: Decimal = ZERO
    count: int = 0


class DailySummary(BaseModel):
    date: date
    shifts: Dict[Shift, ShiftSummary]
    total_liters: Decimal = ZERO
    total_amount: Decimal = ZERO
    total_count: int = 0


class PeriodStatement(BaseModel):
    customer_id: int
    from_date: date
    to_date: date
    total_milk_quantity: Decimal
    total_milk_amount: Decimal
    total_paid_amount: Decimal
    unpaid_amount: Decimal
    entries: List[EntryOut]
    payments: List[PaymentOut]


class CustomerPeriodTotals(BaseModel):
    customer_id: int
    sl_no: int
    name: str
    total_liters: Decimal
    total_amount: Decimal


class PeriodListing(BaseModel):
    from_date: date
    to_date: date
    total_days: int
    items: List[CustomerPeriodTotals]
    total_liters: Decimal
    total_amount: Decimal
