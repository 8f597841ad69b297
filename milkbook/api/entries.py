# milkbook/api/entries.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from milkbook.db.engine import get_engine
from milkbook.models.customers import CustomerOut
from milkbook.models.entries import EntryIn, EntryOut, Shift
from milkbook.services import entries as service

router = APIRouter(prefix="/entries", tags=["entries"])


@router.get("/", response_model=List[EntryOut])
def list_entries(
    from_date: Optional[date] = Query(default=None, description="ISO date (YYYY-MM-DD), inclusive"),
    to_date: Optional[date] = Query(default=None, description="ISO date (YYYY-MM-DD), inclusive"),
    customer_id: Optional[int] = Query(default=None),
    shift: Optional[Shift] = Query(default=None),
    engine: Engine = Depends(get_engine),
) -> List[EntryOut]:
    with engine.connect() as conn:
        return service.list_entries(conn, from_date, to_date, customer_id, shift)


@router.get("/pending", response_model=List[CustomerOut])
def pending_customers(
    day: date = Query(..., description="ISO date (YYYY-MM-DD)"),
    shift: Shift = Query(...),
    engine: Engine = Depends(get_engine),
) -> List[CustomerOut]:
    """
    Customers who have not delivered yet for the given date and shift.
    """
    with engine.connect() as conn:
        return service.pending_customers(conn, day, shift)


@router.post("/", response_model=EntryOut, status_code=201)
def create_entry(payload: EntryIn, engine: Engine = Depends(get_engine)) -> EntryOut:
    with engine.begin() as conn:
        return service.create_entry(conn, payload)


@router.get("/{entry_id}", response_model=EntryOut)
def get_entry(entry_id: int, engine: Engine = Depends(get_engine)) -> EntryOut:
    with engine.connect() as conn:
        return service.get_entry(conn, entry_id)


@router.put("/{entry_id}", response_model=EntryOut)
def update_entry(
    entry_id: int,
    payload: EntryIn,
    engine: Engine = Depends(get_engine),
) -> EntryOut:
    with engine.begin() as conn:
        return service.update_entry(conn, entry_id, payload)


@router.delete("/{entry_id}")
def delete_entry(entry_id: int, engine: Engine = Depends(get_engine)):
    with engine.begin() as conn:
        service.delete_entry(conn, entry_id)
    return {"ok": True}
