# milkbook/api/rates.py

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.engine import Engine

from milkbook.db.engine import get_engine
from milkbook.models.entries import MilkType
from milkbook.models.rates import RateBandIn, RateBandOut, RateQuoteOut
from milkbook.services import rates as service

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("/resolve", response_model=RateQuoteOut)
def resolve_rate(
    milk_type: MilkType = Query(...),
    fat: Decimal = Query(..., ge=0),
    snf: Decimal = Query(..., ge=0),
    engine: Engine = Depends(get_engine),
) -> RateQuoteOut:
    """
    Chart rate for a sample. 404 when no band matches; the caller then has
    to ask for a manual rate.
    """
    with engine.connect() as conn:
        lookup = service.resolve_rate(conn, milk_type, fat, snf)

    if not lookup.found:
        raise HTTPException(status_code=404, detail="No rate for this milk type, fat and SNF")

    return RateQuoteOut(milk_type=milk_type, fat=fat, snf=snf, rate=lookup.rate)


@router.get("/", response_model=List[RateBandOut])
def list_bands(
    milk_type: Optional[MilkType] = Query(default=None),
    engine: Engine = Depends(get_engine),
) -> List[RateBandOut]:
    with engine.connect() as conn:
        return service.list_bands(conn, milk_type)


@router.post("/", response_model=RateBandOut, status_code=201)
def add_band(payload: RateBandIn, engine: Engine = Depends(get_engine)) -> RateBandOut:
    with engine.begin() as conn:
        return service.add_band(conn, payload)


@router.delete("/{band_id}")
def delete_band(band_id: int, engine: Engine = Depends(get_engine)):
    with engine.begin() as conn:
        service.delete_band(conn, band_id)
    return {"ok": True}
