from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError


def require_date_range(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("Data final deve ser maior ou igual à data inicial")


def require_non_negative_hours(hours: float, field_name: str = "Horas") -> float:
    if hours is None or hours < 0:
        raise ValidationError(f"{field_name} não pode ser negativo")
    return float(hours)


def is_valid_coordinates(latitude: Optional[float], longitude: Optional[float]) -> bool:
    if latitude is None or longitude is None:
        return False
    # NaN fails every comparison below.
    return -90 <= latitude <= 90 and -180 <= longitude <= 180
