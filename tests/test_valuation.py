# tests/test_valuation.py

from datetime import date
from decimal import Decimal

import pytest

from milkbook.models.entries import EntryIn, EntryOut, MilkType, RateSource, Shift
from milkbook.services.errors import ValidationError
from milkbook.services.rates import RateLookup
from milkbook.services.valuation import compute_amount, settle_rate


def entry_in(**fields):
    values = {
        "customer_id": 1,
        "date": date(2024, 3, 1),
        "shift": Shift.MORNING,
        "milk_type": MilkType.COW,
        "quantity_l": Decimal("10"),
        "fat": Decimal("3.7"),
        "snf": Decimal("8.7"),
    }
    values.update(fields)
    return EntryIn(**values)


def stored(**fields):
    values = {
        "id": 7,
        "customer_id": 1,
        "date": date(2024, 3, 1),
        "shift": Shift.MORNING,
        "milk_type": MilkType.COW,
        "quantity_l": Decimal("10"),
        "fat": Decimal("3.7"),
        "snf": Decimal("8.7"),
        "rate": Decimal("40.00"),
        "rate_source": RateSource.MANUAL,
        "amount": Decimal("400.00"),
    }
    values.update(fields)
    return EntryOut(**values)


def chart(rate):
    def resolve(payload):
        return RateLookup(milk_type=payload.milk_type, fat=payload.fat, snf=payload.snf, rate=rate)

    return resolve


@pytest.mark.parametrize(
    "quantity, rate, expected",
    [
        ("10", "35.50", "355.00"),
        ("8", "34", "272.00"),
        ("0", "35.50", "0.00"),
        ("1.005", "1", "1.01"),
        ("2.5", "33.33", "83.33"),
        ("0.125", "42.20", "5.28"),
    ],
)
def test_compute_amount_rounds_half_up(quantity, rate, expected):
    assert compute_amount(Decimal(quantity), Decimal(rate)) == Decimal(expected)


def test_repeated_small_amounts_sum_exactly():
    amount = compute_amount(Decimal("0.1"), Decimal("1.00"))
    total = sum((amount for _ in range(10)), Decimal("0"))

    assert total == Decimal("1.00")


def test_manual_rate_is_used_as_given():
    rate, source = settle_rate(entry_in(rate=Decimal("41.25")), chart(Decimal("35.50")))

    assert rate == Decimal("41.25")
    assert source is RateSource.MANUAL


def test_auto_rate_comes_from_chart():
    rate, source = settle_rate(entry_in(), chart(Decimal("35.50")))

    assert rate == Decimal("35.50")
    assert source is RateSource.AUTO


def test_chart_miss_without_manual_rate_is_rejected():
    with pytest.raises(ValidationError, match="cannot save entry without rate"):
        settle_rate(entry_in(), chart(None))


def test_manual_source_without_rate_is_rejected():
    with pytest.raises(ValidationError, match="cannot save entry without rate"):
        settle_rate(entry_in(rate_source=RateSource.MANUAL), chart(Decimal("35.50")))


def test_manual_override_survives_auto_edit_when_quality_unchanged():
    payload = entry_in(quantity_l=Decimal("12"), rate_source=RateSource.AUTO)

    rate, source = settle_rate(payload, chart(Decimal("35.50")), current=stored())

    assert rate == Decimal("40.00")
    assert source is RateSource.MANUAL


def test_fat_change_clears_manual_override():
    payload = entry_in(fat=Decimal("3.6"), rate_source=RateSource.AUTO)

    rate, source = settle_rate(payload, chart(Decimal("34.00")), current=stored())

    assert rate == Decimal("34.00")
    assert source is RateSource.AUTO


def test_milk_type_change_clears_manual_override():
    payload = entry_in(milk_type=MilkType.BUFFALO, rate_source=RateSource.AUTO)

    _, source = settle_rate(payload, chart(Decimal("52.00")), current=stored())

    assert source is RateSource.AUTO


def test_readings_are_rounded_to_stored_scale():
    payload = entry_in(
        quantity_l=Decimal("10.0049"), fat=Decimal("3.705"), snf=Decimal("8.7"), rate=Decimal("35.555")
    )

    rate, source = settle_rate(payload, chart(None))

    assert rate == Decimal("35.56")
    assert source is RateSource.MANUAL


def test_precise_resubmission_is_not_a_quality_change():
    payload = entry_in(fat=Decimal("3.705"), rate_source=RateSource.AUTO)

    rate, source = settle_rate(payload, chart(Decimal("35.50")), current=stored(fat=Decimal("3.71")))

    assert rate == Decimal("40.00")
    assert source is RateSource.MANUAL
