# milkbook/services/summaries.py

"""
Daily and period aggregates, recomputed from stored entries and payments on
every call. Nothing here is cached or persisted.

Entry amounts are rounded when the entry is written; the sums below add those
rounded amounts at full Decimal precision and leave formatting to the caller.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.engine import Connection

from milkbook.db.schema import customers
from milkbook.models.entries import EntryOut, MilkType, Shift
from milkbook.models.summaries import (
    ZERO,
    CustomerPeriodTotals,
    DailySummary,
    MilkTypeTotals,
    PeriodListing,
    PeriodStatement,
    ShiftSummary,
)
from milkbook.services.balances import unpaid
from milkbook.services.entries import list_entries
from milkbook.services.payments import list_payments


def empty_shift() -> ShiftSummary:
    return ShiftSummary(milk_types={milk_type: MilkTypeTotals() for milk_type in MilkType})


def fold_day(day: date, day_entries: Iterable[EntryOut]) -> DailySummary:
    """
    Fold one day's entries into shift x milk type buckets.

    ``count`` is distinct customers per shift, ``total_count`` distinct
    customers for the whole day.
    """
    shifts = {shift: empty_shift() for shift in Shift}
    shift_customers = {shift: set() for shift in Shift}
    day_customers = set()

    for entry in day_entries:
        if entry.date != day:
            continue
        summary = shifts[entry.shift]
        bucket = summary.milk_types[entry.milk_type]
        bucket.liters += entry.quantity_l
        bucket.amount += entry.amount
        summary.total_liters += entry.quantity_l
        summary.total_amount += entry.amount
        shift_customers[entry.shift].add(entry.customer_id)
        day_customers.add(entry.customer_id)

    for shift, seen in shift_customers.items():
        shifts[shift].count = len(seen)

    return DailySummary(
        date=day,
        shifts=shifts,
        total_liters=sum((s.total_liters for s in shifts.values()), ZERO),
        total_amount=sum((s.total_amount for s in shifts.values()), ZERO),
        total_count=len(day_customers),
    )


def summarize_day(conn: Connection, day: date) -> DailySummary:
    return fold_day(day, list_entries(conn, from_date=day, to_date=day))


def summarize_customer_period(
    conn: Connection,
    customer_id: int,
    from_date: date,
    to_date: date,
) -> PeriodStatement:
    period_entries = list_entries(conn, from_date=from_date, to_date=to_date, customer_id=customer_id)
    period_payments = list_payments(conn, from_date=from_date, to_date=to_date, customer_id=customer_id)

    total_milk_quantity = sum((e.quantity_l for e in period_entries), ZERO)
    total_milk_amount = sum((e.amount for e in period_entries), ZERO)
    total_paid_amount = sum((p.amount for p in period_payments), ZERO)

    return PeriodStatement(
        customer_id=customer_id,
        from_date=from_date,
        to_date=to_date,
        total_milk_quantity=total_milk_quantity,
        total_milk_amount=total_milk_amount,
        total_paid_amount=total_paid_amount,
        unpaid_amount=unpaid(total_milk_amount, total_paid_amount),
        entries=period_entries,
        payments=period_payments,
    )


def total_days(from_date: date, to_date: date) -> int:
    return max(0, (to_date - from_date).days + 1)


def summarize_all_customers_period(
    conn: Connection,
    from_date: date,
    to_date: date,
) -> PeriodListing:
    """
    Liters and amount per customer over an inclusive range. Every customer is
    listed in serial-number order, with zeros when they delivered nothing.
    """
    liters = {}
    amounts = {}
    for entry in list_entries(conn, from_date=from_date, to_date=to_date):
        liters[entry.customer_id] = liters.get(entry.customer_id, ZERO) + entry.quantity_l
        amounts[entry.customer_id] = amounts.get(entry.customer_id, ZERO) + entry.amount

    rows = conn.execute(
        select(customers.c.id, customers.c.sl_no, customers.c.name).order_by(customers.c.sl_no)
    ).mappings().all()

    items: List[CustomerPeriodTotals] = []
    for row in rows:
        items.append(
            CustomerPeriodTotals(
                customer_id=row["id"],
                sl_no=row["sl_no"],
                name=row["name"],
                total_liters=liters.get(row["id"], ZERO),
                total_amount=amounts.get(row["id"], ZERO),
            )
        )

    return PeriodListing(
        from_date=from_date,
        to_date=to_date,
        total_days=total_days(from_date, to_date),
        items=items,
        total_liters=sum((i.total_liters for i in items), ZERO),
        total_amount=sum((i.total_amount for i in items), ZERO),
    )
