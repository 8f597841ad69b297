# scripts/ingest.py

import csv
from decimal import Decimal, InvalidOperation
import logging

from milkbook.core.config import settings
from milkbook.db.engine import get_engine
from milkbook.db.schema import rate_chart
from milkbook.models.entries import MilkType

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

FILE_PATH = settings.rate_chart_path


# ---- Helpers ----

def parse_decimal(value: str, field: str) -> Decimal:
    value = (value or "").strip()
    if value == "":
        raise ValueError(f"{field} is required")
    try:
        return Decimal(value)
    except InvalidOperation:
        raise ValueError(f"{field} is not a number: {value!r}")


def parse_milk_type(value: str) -> MilkType:
    return MilkType((value or "").strip().upper())


def parse_band(row: dict) -> dict:
    """
    Turn one CSV row into a rate_chart record, e.g.
      {
        "milk_type": "COW",
        "fat_min": Decimal("3.0"),
        "fat_max": Decimal("3.4"),
        "snf_min": Decimal("8.0"),
        "snf_max": Decimal("8.4"),
        "rate": Decimal("32.50"),
      }
    """
    band = {
        "milk_type": parse_milk_type(row["MilkType"]).value,
        "fat_min": parse_decimal(row["FatMin"], "FatMin"),
        "fat_max": parse_decimal(row["FatMax"], "FatMax"),
        "snf_min": parse_decimal(row["SnfMin"], "SnfMin"),
        "snf_max": parse_decimal(row["SnfMax"], "SnfMax"),
        "rate": parse_decimal(row["Rate"], "Rate"),
    }
    if band["fat_min"] > band["fat_max"]:
        raise ValueError("FatMin exceeds FatMax")
    if band["snf_min"] > band["snf_max"]:
        raise ValueError("SnfMin exceeds SnfMax")
    if band["rate"] <= 0:
        raise ValueError("Rate must be positive")
    return band


def parse_rate_chart_csv(file_path: str = FILE_PATH):
    bands = []
    n_rows = 0
    n_errors = 0
    error_examples = []

    with open(file_path, newline="") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1
            try:
                bands.append(parse_band(row))
            except (KeyError, ValueError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {
                            "row_number": n_rows,
                            "row": dict(row),
                            "error": repr(e),
                        }
                    )

    stats = {
        "n_rows": n_rows,
        "n_bands": len(bands),
        "n_errors": n_errors,
        "error_examples": error_examples,
        "bands_by_type": {
            milk_type.value: sum(1 for b in bands if b["milk_type"] == milk_type.value)
            for milk_type in MilkType
        },
    }
    return bands, stats


def load_into_db(bands, engine=None):
    engine = engine or get_engine()
    with engine.begin() as conn:
        # Rebuild the chart from scratch (deterministic)
        conn.execute(rate_chart.delete())
        if bands:
            conn.execute(rate_chart.insert(), bands)


def main():
    bands, stats = parse_rate_chart_csv(FILE_PATH)
    load_into_db(bands)

    logger.info(f"Total CSV rows read:   {stats['n_rows']}")
    logger.info(f"Rate bands loaded:     {stats['n_bands']}")
    logger.info(f"Rows with errors:      {stats['n_errors']}")
    for milk_type, count in stats["bands_by_type"].items():
        logger.info("Bands for %s: %s", milk_type, count)

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


if __name__ == "__main__":
    main()
