# milkbook/services/customers.py

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError

from milkbook.db.schema import customers
from milkbook.models.customers import CustomerIn, CustomerOut
from milkbook.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def format_sl_no(sl_no: int) -> str:
    return str(sl_no).zfill(3)


def row_to_customer(row) -> CustomerOut:
    return CustomerOut(
        id=row["id"],
        sl_no=row["sl_no"],
        label=f"[{format_sl_no(row['sl_no'])}] {row['name']}",
        name=row["name"],
        phone=row["phone"],
        village=row["village"],
    )


def list_customers(conn: Connection) -> List[CustomerOut]:
    rows = conn.execute(select(customers).order_by(customers.c.sl_no)).mappings().all()
    return [row_to_customer(row) for row in rows]


def get_customer(conn: Connection, customer_id: int) -> CustomerOut:
    row = conn.execute(
        select(customers).where(customers.c.id == customer_id)
    ).mappings().first()

    if row is None:
        raise NotFoundError("Customer not found")
    return row_to_customer(row)


def ensure_customer(conn: Connection, customer_id: int) -> None:
    found = conn.execute(
        select(customers.c.id).where(customers.c.id == customer_id)
    ).first()
    if found is None:
        raise NotFoundError("Customer not found")


def create_customer(conn: Connection, payload: CustomerIn) -> CustomerOut:
    try:
        result = conn.execute(customers.insert().values(**payload.model_dump()))
    except IntegrityError as exc:
        logger.warning("Serial number %s already taken", payload.sl_no)
        raise ConflictError("customer with this serial number already exists") from exc

    customer_id = result.inserted_primary_key[0]
    logger.info("Created customer %s (sl_no=%s)", customer_id, payload.sl_no)
    return get_customer(conn, customer_id)


def update_customer(conn: Connection, customer_id: int, payload: CustomerIn) -> CustomerOut:
    ensure_customer(conn, customer_id)
    try:
        conn.execute(
            customers.update()
            .where(customers.c.id == customer_id)
            .values(**payload.model_dump())
        )
    except IntegrityError as exc:
        logger.warning("Serial number %s already taken", payload.sl_no)
        raise ConflictError("customer with this serial number already exists") from exc

    return get_customer(conn, customer_id)
