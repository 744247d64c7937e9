from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PremiumDecision:
    multiplier: float
    label: str


class OvertimePremiumStrategy(ABC):
    """Strategy Pattern: encapsulate how overtime hours are weighted."""

    @abstractmethod
    def decide(self, *, timestamp: datetime) -> PremiumDecision:
        raise NotImplementedError
