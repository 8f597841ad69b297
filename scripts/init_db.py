# scripts/init_db.py

import logging

from milkbook.db.engine import get_engine
from milkbook.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    engine = get_engine()
    metadata.create_all(engine)
    logger.info("Schema ready at %s: %s", engine.url, ", ".join(sorted(metadata.tables)))


if __name__ == "__main__":
    main()
