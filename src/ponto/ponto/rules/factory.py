from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from .strategies.base import OvertimePremiumStrategy
from .strategies.night_strategy import NightPremiumStrategy
from .strategies.weekday_strategy import WeekdayPremiumStrategy
from .strategies.weekend_strategy import SaturdayPremiumStrategy, SundayPremiumStrategy

SATURDAY = 5
SUNDAY = 6


@dataclass
class OvertimePremiumFactory:
    """Factory Pattern: choose the premium strategy for an overtime timestamp."""

    night_start: time = time(22, 0)

    def for_timestamp(self, *, timestamp: datetime, day_of_week: Optional[int] = None) -> OvertimePremiumStrategy:
        weekday = timestamp.weekday() if day_of_week is None else day_of_week
        if weekday == SUNDAY:
            return SundayPremiumStrategy()
        if weekday == SATURDAY:
            return SaturdayPremiumStrategy()
        if timestamp.time() >= self.night_start:
            return NightPremiumStrategy()
        return WeekdayPremiumStrategy()

