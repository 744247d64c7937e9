from __future__ import annotations

from datetime import datetime

from .base import OvertimePremiumStrategy, PremiumDecision


class SaturdayPremiumStrategy(OvertimePremiumStrategy):
    def decide(self, *, timestamp: datetime) -> PremiumDecision:
        return PremiumDecision(multiplier=1.5, label="Sábado 50%")


class SundayPremiumStrategy(OvertimePremiumStrategy):
    """Weekly rest day: every overtime hour counts double."""

    def decide(self, *, timestamp: datetime) -> PremiumDecision:
        return PremiumDecision(multiplier=2.0, label="Domingo 100%")
