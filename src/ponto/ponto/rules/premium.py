from __future__ import annotations

from datetime import datetime
from typing import Optional

from .factory import OvertimePremiumFactory

_DEFAULT_FACTORY = OvertimePremiumFactory()


def overtime_premium(timestamp: datetime, day_of_week: Optional[int] = None) -> float:
    """Multiplier applied to hours worked beyond the expected daily hours.

    `day_of_week` follows date.weekday() (Monday=0, Sunday=6).
    """
    strategy = _DEFAULT_FACTORY.for_timestamp(timestamp=timestamp, day_of_week=day_of_week)
    return strategy.decide(timestamp=timestamp).multiplier
