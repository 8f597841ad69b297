# tests/test_clock.py

from datetime import date, datetime, timezone

from milkbook.services.clock import current_business_date


def test_business_date_follows_cooperative_timezone():
    late_evening_utc = datetime(2024, 3, 1, 20, 0, tzinfo=timezone.utc)

    assert current_business_date(lambda: late_evening_utc, tz="Asia/Kolkata") == date(2024, 3, 2)
    assert current_business_date(lambda: late_evening_utc, tz="UTC") == date(2024, 3, 1)


def test_business_date_rolls_over_at_local_midnight():
    before = datetime(2024, 3, 1, 18, 29, tzinfo=timezone.utc)
    after = datetime(2024, 3, 1, 18, 30, tzinfo=timezone.utc)

    assert current_business_date(lambda: before, tz="Asia/Kolkata") == date(2024, 3, 1)
    assert current_business_date(lambda: after, tz="Asia/Kolkata") == date(2024, 3, 2)
