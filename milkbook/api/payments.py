# milkbook/api/payments.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from milkbook.db.engine import get_engine
from milkbook.models.payments import PaymentIn, PaymentOut
from milkbook.services import payments as service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("/", response_model=List[PaymentOut])
def list_payments(
    from_date: Optional[date] = Query(default=None, description="ISO date (YYYY-MM-DD), inclusive"),
    to_date: Optional[date] = Query(default=None, description="ISO date (YYYY-MM-DD), inclusive"),
    customer_id: Optional[int] = Query(default=None),
    engine: Engine = Depends(get_engine),
) -> List[PaymentOut]:
    with engine.connect() as conn:
        return service.list_payments(conn, from_date, to_date, customer_id)


@router.post("/", response_model=PaymentOut, status_code=201)
def create_payment(payload: PaymentIn, engine: Engine = Depends(get_engine)) -> PaymentOut:
    with engine.begin() as conn:
        return service.create_payment(conn, payload)


@router.get("/{payment_id}", response_model=PaymentOut)
def get_payment(payment_id: int, engine: Engine = Depends(get_engine)) -> PaymentOut:
    with engine.connect() as conn:
        return service.get_payment(conn, payment_id)


@router.put("/{payment_id}", response_model=PaymentOut)
def update_payment(
    payment_id: int,
    payload: PaymentIn,
    engine: Engine = Depends(get_engine),
) -> PaymentOut:
    with engine.begin() as conn:
        return service.update_payment(conn, payment_id, payload)


@router.delete("/{payment_id}")
def delete_payment(payment_id: int, engine: Engine = Depends(get_engine)):
    with engine.begin() as conn:
        service.delete_payment(conn, payment_id)
    return {"ok": True}
