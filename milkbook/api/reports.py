# milkbook/api/reports.py

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from milkbook.api.deps import get_clock
from milkbook.db.engine import get_engine
from milkbook.models.summaries import DailySummary, PeriodListing, PeriodStatement
from milkbook.services import summaries
from milkbook.services.clock import Clock, current_business_date

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/daily", response_model=DailySummary)
def daily_summary(
    day: Optional[date] = Query(
        default=None,
        description="ISO date (YYYY-MM-DD); defaults to today in the cooperative's timezone",
    ),
    engine: Engine = Depends(get_engine),
    clock: Clock = Depends(get_clock),
) -> DailySummary:
    """
    Liters and amount per shift and milk type for one day.
    """
    if day is None:
        day = current_business_date(clock)

    with engine.connect() as conn:
        return summaries.summarize_day(conn, day)


@router.get("/customer-period", response_model=PeriodStatement)
def customer_period(
    customer_id: int = Query(...),
    from_date: date = Query(..., description="Start date YYYY-MM-DD, inclusive"),
    to_date: date = Query(..., description="End date YYYY-MM-DD, inclusive"),
    engine: Engine = Depends(get_engine),
) -> PeriodStatement:
    """
    Milk delivered, payments received and the outstanding balance for one
    customer over a date range.
    """
    with engine.connect() as conn:
        return summaries.summarize_customer_period(conn, customer_id, from_date, to_date)


@router.get("/period", response_model=PeriodListing)
def period_listing(
    from_date: date = Query(..., description="Start date YYYY-MM-DD, inclusive"),
    to_date: date = Query(..., description="End date YYYY-MM-DD, inclusive"),
    engine: Engine = Depends(get_engine),
) -> PeriodListing:
    with engine.connect() as conn:
        return summaries.summarize_all_customers_period(conn, from_date, to_date)
