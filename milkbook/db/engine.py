# milkbook/db/engine.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from milkbook.core.config import settings


def get_engine() -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(settings.database_url, future=True)
