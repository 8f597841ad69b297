# milkbook/api/customers.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from milkbook.db.engine import get_engine
from milkbook.models.customers import CustomerIn, CustomerOut
from milkbook.services import customers as service

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=List[CustomerOut])
def list_customers(engine: Engine = Depends(get_engine)) -> List[CustomerOut]:
    """
    Return all customers ordered by serial number.
    """
    with engine.connect() as conn:
        return service.list_customers(conn)


@router.post("/", response_model=CustomerOut, status_code=201)
def create_customer(payload: CustomerIn, engine: Engine = Depends(get_engine)) -> CustomerOut:
    with engine.begin() as conn:
        return service.create_customer(conn, payload)


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: int, engine: Engine = Depends(get_engine)) -> CustomerOut:
    with engine.connect() as conn:
        return service.get_customer(conn, customer_id)


@router.put("/{customer_id}", response_model=CustomerOut)
def update_customer(
    customer_id: int,
    payload: CustomerIn,
    engine: Engine = Depends(get_engine),
) -> CustomerOut:
    with engine.begin() as conn:
        return service.update_customer(conn, customer_id, payload)
