from __future__ import annotations

from datetime import datetime

from .base import OvertimePremiumStrategy, PremiumDecision


class NightPremiumStrategy(OvertimePremiumStrategy):
    """Weekday overtime from 22:00 on (+100%)."""

    def decide(self, *, timestamp: datetime) -> PremiumDecision:
        return PremiumDecision(multiplier=2.0, label="Hora extra noturna 100%")
