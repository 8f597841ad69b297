# milkbook/services/payments.py

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.engine import Connection

from milkbook.db.schema import payments
from milkbook.models.payments import PaymentIn, PaymentOut
from milkbook.services.customers import ensure_customer
from milkbook.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def row_to_payment(row) -> PaymentOut:
    return PaymentOut(
        id=row["id"],
        customer_id=row["customer_id"],
        date=row["date"],
        amount=row["amount"],
        mode=row["mode"],
        note=row["note"],
    )


def _values(payload: PaymentIn) -> dict:
    values = payload.model_dump()
    values["mode"] = payload.mode.value
    return values


def get_payment(conn: Connection, payment_id: int) -> PaymentOut:
    row = conn.execute(select(payments).where(payments.c.id == payment_id)).mappings().first()
    if row is None:
        raise NotFoundError("Payment not found")
    return row_to_payment(row)


def list_payments(
    conn: Connection,
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
    customer_id: Optional[int] = None,
) -> List[PaymentOut]:
    conditions = []
    if from_date is not None:
        conditions.append(payments.c.date >= from_date)
    if to_date is not None:
        conditions.append(payments.c.date <= to_date)
    if customer_id is not None:
        conditions.append(payments.c.customer_id == customer_id)

    stmt = select(payments).order_by(payments.c.date, payments.c.id)
    if conditions:
        stmt = stmt.where(and_(*conditions))

    rows = conn.execute(stmt).mappings().all()
    return [row_to_payment(row) for row in rows]


def create_payment(conn: Connection, payload: PaymentIn) -> PaymentOut:
    ensure_customer(conn, payload.customer_id)
    result = conn.execute(payments.insert().values(**_values(payload)))

    payment_id = result.inserted_primary_key[0]
    logger.info(
        "Recorded payment %s: %s via %s for customer %s",
        payment_id, payload.amount, payload.mode.value, payload.customer_id,
    )
    return get_payment(conn, payment_id)


def update_payment(conn: Connection, payment_id: int, payload: PaymentIn) -> PaymentOut:
    get_payment(conn, payment_id)
    ensure_customer(conn, payload.customer_id)
    conn.execute(payments.update().where(payments.c.id == payment_id).values(**_values(payload)))
    return get_payment(conn, payment_id)


def delete_payment(conn: Connection, payment_id: int) -> None:
    result = conn.execute(payments.delete().where(payments.c.id == payment_id))
    if result.rowcount == 0:
        raise NotFoundError("Payment not found")
    logger.info("Deleted payment %s", payment_id)
