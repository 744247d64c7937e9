from __future__ import annotations

from datetime import datetime

from .base import OvertimePremiumStrategy, PremiumDecision


class WeekdayPremiumStrategy(OvertimePremiumStrategy):
    """Regular weekday overtime (+50%)."""

    def decide(self, *, timestamp: datetime) -> PremiumDecision:
        return PremiumDecision(multiplier=1.5, label="Hora extra 50%")
