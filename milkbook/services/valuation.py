# milkbook/services/valuation.py

from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Optional, Tuple

from milkbook.models.entries import EntryIn, EntryOut, RateSource
from milkbook.services.errors import ValidationError
from milkbook.services.rates import RateLookup

CENT = Decimal("0.01")
MILLILITER = Decimal("0.001")
MISSING_RATE = "cannot save entry without rate"

Resolver = Callable[[EntryIn], RateLookup]


def compute_amount(quantity_l: Decimal, rate: Decimal) -> Decimal:
    """quantity x rate, rounded half-up to paise."""
    return (Decimal(quantity_l) * Decimal(rate)).quantize(CENT, rounding=ROUND_HALF_UP)


def normalize_reading(payload: EntryIn) -> EntryIn:
    """
    Round quantity, fat, SNF and rate half-up to the scale they are stored at,
    so the amount and the override check see exactly what gets saved.
    """

    def to_scale(value, exp):
        return None if value is None else Decimal(value).quantize(exp, rounding=ROUND_HALF_UP)

    return payload.model_copy(
        update={
            "quantity_l": to_scale(payload.quantity_l, MILLILITER),
            "fat": to_scale(payload.fat, CENT),
            "snf": to_scale(payload.snf, CENT),
            "rate": to_scale(payload.rate, CENT),
        }
    )


def requested_source(payload: EntryIn) -> RateSource:
    if payload.rate_source is not None:
        return payload.rate_source
    return RateSource.MANUAL if payload.rate is not None else RateSource.AUTO


def quality_changed(payload: EntryIn, current: EntryOut) -> bool:
    return (
        payload.milk_type != current.milk_type
        or payload.fat != current.fat
        or payload.snf != current.snf
    )


def settle_rate(
    payload: EntryIn,
    resolve: Resolver,
    current: Optional[EntryOut] = None,
) -> Tuple[Decimal, RateSource]:
    """
    Decide the rate an entry is saved with, and where it came from.

    A MANUAL rate on the stored entry survives an AUTO edit as long as milk
    type, fat and SNF are unchanged; changing any of them clears the override
    and the chart is consulted again.
    """
    payload = normalize_reading(payload)
    source = requested_source(payload)

    if source is RateSource.MANUAL:
        if payload.rate is None or payload.rate <= 0:
            raise ValidationError(MISSING_RATE)
        return payload.rate, RateSource.MANUAL

    if (
        current is not None
        and current.rate_source is RateSource.MANUAL
        and not quality_changed(payload, current)
    ):
        return current.rate, RateSource.MANUAL

    lookup = resolve(payload)
    if not lookup.found:
        raise ValidationError(MISSING_RATE)
    return lookup.rate, RateSource.AUTO
