# sessions.py - helpers producing the absolute expiry createSession expects
import time
from datetime import datetime, timezone
from typing import Optional

SECONDS_PER_HOUR = 60 * 60


def to_unix_seconds(moment: datetime) -> int:
    """UNIX timestamp in seconds; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp())


def hours_from_now(hours: int, now: Optional[float] = None) -> int:
    if now is None:
        now = time.time()
    return int(now + hours * SECONDS_PER_HOUR)
