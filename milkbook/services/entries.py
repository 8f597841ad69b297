# milkbook/services/entries.py

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import and_, case, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError

from milkbook.db.schema import customers, entries
from milkbook.models.customers import CustomerOut
from milkbook.models.entries import EntryIn, EntryOut, Shift
from milkbook.services.customers import ensure_customer, row_to_customer
from milkbook.services.errors import ConflictError, NotFoundError
from milkbook.services.rates import resolve_rate
from milkbook.services.valuation import compute_amount, normalize_reading, settle_rate

logger = logging.getLogger(__name__)

DUPLICATE_ENTRY = "entry already exists for this customer, date and shift"
UNIQUE_SHIFT = "uq_entries_customer_date_shift"


def is_duplicate_shift(exc: IntegrityError) -> bool:
    """True when the violated constraint is the one-entry-per-shift index."""
    message = str(exc.orig)
    # PostgreSQL names the constraint; SQLite lists the columns
    return UNIQUE_SHIFT in message or "entries.customer_id, entries.date, entries.shift" in message


# MORNING sorts before EVENING
shift_order = case((entries.c.shift == Shift.MORNING.value, 0), else_=1)


def row_to_entry(row) -> EntryOut:
    return EntryOut(
        id=row["id"],
        customer_id=row["customer_id"],
        date=row["date"],
        shift=row["shift"],
        milk_type=row["milk_type"],
        quantity_l=row["quantity_l"],
        fat=row["fat"],
        snf=row["snf"],
        rate=row["rate"],
        rate_source=row["rate_source"],
        amount=row["amount"],
        note=row["note"],
    )


def _values(conn: Connection, payload: EntryIn, current: Optional[EntryOut] = None) -> dict:
    payload = normalize_reading(payload)
    rate, source = settle_rate(
        payload,
        lambda p: resolve_rate(conn, p.milk_type, p.fat, p.snf),
        current,
    )
    return {
        "customer_id": payload.customer_id,
        "date": payload.date,
        "shift": payload.shift.value,
        "milk_type": payload.milk_type.value,
        "quantity_l": payload.quantity_l,
        "fat": payload.fat,
        "snf": payload.snf,
        "rate": rate,
        "rate_source": source.value,
        "amount": compute_amount(payload.quantity_l, rate),
        "note": payload.note,
    }


def get_entry(conn: Connection, entry_id: int) -> EntryOut:
    row = conn.execute(select(entries).where(entries.c.id == entry_id)).mappings().first()
    if row is None:
        raise NotFoundError("Entry not found")
    return row_to_entry(row)


def list_entries(
    conn: Connection,
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
    customer_id: Optional[int] = None,
    shift: Optional[Shift] = None,
) -> List[EntryOut]:
    """
    Entries in an inclusive date range, ordered by date, shift and the
    customer's serial number.
    """
    conditions = []
    if from_date is not None:
        conditions.append(entries.c.date >= from_date)
    if to_date is not None:
        conditions.append(entries.c.date <= to_date)
    if customer_id is not None:
        conditions.append(entries.c.customer_id == customer_id)
    if shift is not None:
        conditions.append(entries.c.shift == Shift(shift).value)

    stmt = (
        select(entries)
        .select_from(entries.join(customers))
        .order_by(entries.c.date, shift_order, customers.c.sl_no)
    )
    if conditions:
        stmt = stmt.where(and_(*conditions))

    rows = conn.execute(stmt).mappings().all()
    return [row_to_entry(row) for row in rows]


def create_entry(conn: Connection, payload: EntryIn) -> EntryOut:
    ensure_customer(conn, payload.customer_id)
    values = _values(conn, payload)

    try:
        result = conn.execute(entries.insert().values(**values))
    except IntegrityError as exc:
        if not is_duplicate_shift(exc):
            raise
        logger.warning(
            "Duplicate entry for customer %s on %s %s",
            payload.customer_id, payload.date, payload.shift.value,
        )
        raise ConflictError(DUPLICATE_ENTRY) from exc

    entry_id = result.inserted_primary_key[0]
    logger.info(
        "Created entry %s: %s L @ %s = %s",
        entry_id, values["quantity_l"], values["rate"], values["amount"],
    )
    return get_entry(conn, entry_id)


def update_entry(conn: Connection, entry_id: int, payload: EntryIn) -> EntryOut:
    current = get_entry(conn, entry_id)
    ensure_customer(conn, payload.customer_id)
    values = _values(conn, payload, current)

    try:
        conn.execute(entries.update().where(entries.c.id == entry_id).values(**values))
    except IntegrityError as exc:
        if not is_duplicate_shift(exc):
            raise
        logger.warning("Entry %s would collide on %s %s", entry_id, payload.date, payload.shift.value)
        raise ConflictError(DUPLICATE_ENTRY) from exc

    return get_entry(conn, entry_id)


def delete_entry(conn: Connection, entry_id: int) -> None:
    result = conn.execute(entries.delete().where(entries.c.id == entry_id))
    if result.rowcount == 0:
        raise NotFoundError("Entry not found")
    logger.info("Deleted entry %s", entry_id)


def pending_customers(conn: Connection, day: date, shift: Shift) -> List[CustomerOut]:
    """Customers with no entry yet for the given date and shift."""
    done = (
        select(entries.c.customer_id)
        .where(and_(entries.c.date == day, entries.c.shift == Shift(shift).value))
    )
    stmt = (
        select(customers)
        .where(customers.c.id.not_in(done))
        .order_by(customers.c.sl_no)
    )
    rows = conn.execute(stmt).mappings().all()
    return [row_to_customer(row) for row in rows]
