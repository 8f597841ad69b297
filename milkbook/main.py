# milkbook/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from milkbook.api.customers import router as customers_router
from milkbook.api.entries import router as entries_router
from milkbook.api.payments import router as payments_router
from milkbook.api.rates import router as rates_router
from milkbook.api.reports import router as reports_router
from milkbook.core.config import settings
from milkbook.services.errors import LedgerError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
)

app = FastAPI(
    title="Milk Collection Ledger API",
    version="0.1.0",
)


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(customers_router)
app.include_router(rates_router)
app.include_router(entries_router)
app.include_router(payments_router)
app.include_router(reports_router)
