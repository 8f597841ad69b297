# milkbook/services/clock.py

from datetime import date, datetime, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from milkbook.core.config import settings

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now(timezone.utc)


def current_business_date(clock: Optional[Clock] = None, tz: Optional[str] = None) -> date:
    """
    Calendar date the cooperative is collecting for, as seen in its own timezone.

    The clock is injected so nothing in the ledger reads wall-clock time on
    its own; callers decide when to re-query after midnight.
    """
    now = (clock or system_clock)()
    return now.astimezone(ZoneInfo(tz or settings.business_timezone)).date()
