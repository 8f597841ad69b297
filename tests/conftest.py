# tests/conftest.py

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from milkbook.api.deps import get_clock
from milkbook.db.engine import get_engine
from milkbook.db.schema import metadata
from milkbook.main import app
from scripts.ingest import load_into_db

# 2024-03-01 20:00 UTC is already 2024-03-02 in India
FIXED_NOW = datetime(2024, 3, 1, 20, 0, tzinfo=timezone.utc)

CHART = [
    {"milk_type": "COW", "fat_min": Decimal("3.0"), "fat_max": Decimal("3.4"),
     "snf_min": Decimal("8.0"), "snf_max": Decimal("8.4"), "rate": Decimal("32.00")},
    {"milk_type": "COW", "fat_min": Decimal("3.5"), "fat_max": Decimal("3.9"),
     "snf_min": Decimal("8.0"), "snf_max": Decimal("9.0"), "rate": Decimal("34.00")},
    {"milk_type": "COW", "fat_min": Decimal("3.5"), "fat_max": Decimal("3.9"),
     "snf_min": Decimal("8.5"), "snf_max": Decimal("9.0"), "rate": Decimal("35.50")},
    {"milk_type": "BUFFALO", "fat_min": Decimal("6.0"), "fat_max": Decimal("6.9"),
     "snf_min": Decimal("8.5"), "snf_max": Decimal("9.5"), "rate": Decimal("52.00")},
]


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'test.sqlite'}", future=True)
    metadata.create_all(engine)
    load_into_db(CHART, engine)
    yield engine
    engine.dispose()


@pytest.fixture
def conn(engine):
    with engine.begin() as conn:
        yield conn


@pytest.fixture
def client(engine):
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_customer(client):
    def _make(sl_no, name="Ravi", **extra):
        resp = client.post("/customers/", json={"sl_no": sl_no, "name": name, **extra})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_entry(client):
    def _make(customer_id, **fields):
        payload = {
            "customer_id": customer_id,
            "date": "2024-03-01",
            "shift": "MORNING",
            "milk_type": "COW",
            "quantity_l": "10",
            "rate": "35.50",
        }
        payload.update(fields)
        resp = client.post("/entries/", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
