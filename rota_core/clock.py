# rota_core/clock.py
from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
from typing import Optional

MS_PER_DAY = 86_400_000
EPOCH = date(1970, 1, 1)
EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)


def day_index(now: Optional[datetime] = None) -> int:
    """
    floor(epoch_millis / MS_PER_DAY) for the given instant, in UTC.
    Naive datetimes are read as UTC; defaults to the current time.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    # timedelta.days is already floored, so instants before the epoch land on negative days
    return (now - EPOCH_UTC).days


def day_index_for_date(d: date) -> int:
    return (d - EPOCH).days


def date_for_day_index(idx: int) -> date:
    return EPOCH + timedelta(days=idx)
