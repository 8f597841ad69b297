# milkbook/services/rates.py

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.engine import Connection

from milkbook.db.schema import rate_chart
from milkbook.models.entries import MilkType
from milkbook.models.rates import RateBandIn, RateBandOut
from milkbook.services.errors import NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLookup:
    """Outcome of a chart lookup. A miss carries ``rate=None``, never zero."""

    milk_type: MilkType
    fat: Optional[Decimal]
    snf: Optional[Decimal]
    rate: Optional[Decimal] = None

    @property
    def found(self) -> bool:
        return self.rate is not None


def _row_to_band(row) -> RateBandOut:
    return RateBandOut(
        id=row["id"],
        milk_type=row["milk_type"],
        fat_min=row["fat_min"],
        fat_max=row["fat_max"],
        snf_min=row["snf_min"],
        snf_max=row["snf_max"],
        rate=row["rate"],
    )


def resolve_rate(
    conn: Connection,
    milk_type: MilkType,
    fat: Optional[Decimal],
    snf: Optional[Decimal],
) -> RateLookup:
    """
    Price per liter for a sample, from the first chart band containing it.

    Overlapping bands resolve to the one with the highest fat floor, then the
    highest SNF floor. Missing fat or SNF means there is no automatic rate.
    """
    milk_type = MilkType(milk_type)
    if fat is None or snf is None:
        return RateLookup(milk_type=milk_type, fat=fat, snf=snf)

    stmt = (
        select(rate_chart.c.rate)
        .where(
            and_(
                rate_chart.c.milk_type == milk_type.value,
                rate_chart.c.fat_min <= fat,
                rate_chart.c.fat_max >= fat,
                rate_chart.c.snf_min <= snf,
                rate_chart.c.snf_max >= snf,
            )
        )
        .order_by(rate_chart.c.fat_min.desc(), rate_chart.c.snf_min.desc())
        .limit(1)
    )
    rate = conn.execute(stmt).scalar_one_or_none()

    if rate is None:
        logger.info("No rate band for %s fat=%s snf=%s", milk_type.value, fat, snf)
    return RateLookup(milk_type=milk_type, fat=fat, snf=snf, rate=rate)


def list_bands(conn: Connection, milk_type: Optional[MilkType] = None) -> List[RateBandOut]:
    stmt = select(rate_chart).order_by(
        rate_chart.c.milk_type, rate_chart.c.fat_min, rate_chart.c.snf_min
    )
    if milk_type is not None:
        stmt = stmt.where(rate_chart.c.milk_type == MilkType(milk_type).value)

    rows = conn.execute(stmt).mappings().all()
    return [_row_to_band(row) for row in rows]


def add_band(conn: Connection, band: RateBandIn) -> RateBandOut:
    values = band.model_dump()
    values["milk_type"] = band.milk_type.value
    result = conn.execute(rate_chart.insert().values(**values))
    band_id = result.inserted_primary_key[0]

    row = conn.execute(select(rate_chart).where(rate_chart.c.id == band_id)).mappings().first()
    return _row_to_band(row)


def delete_band(conn: Connection, band_id: int) -> None:
    result = conn.execute(rate_chart.delete().where(rate_chart.c.id == band_id))
    if result.rowcount == 0:
        raise NotFoundError("Rate band not found")
