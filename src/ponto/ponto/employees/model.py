from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class AllowedLocation:
    """Local onde o funcionário pode bater o ponto (raio em metros)."""

    name: str
    latitude: float
    longitude: float
    radius_meters: float = 100


@dataclass(frozen=True)
class Employee:
    """Domain entity owned by HR; the engine reads hire date and schedule.

    Note: pure data object (no DB access code).
    """

    employee_id: int
    full_name: str
    hire_date: date
    cost_center: Optional[str] = None
    daily_food_voucher: Decimal = Decimal("0")
    daily_transport_voucher: Decimal = Decimal("0")
    work_schedule: str = "STANDARD_44H"
    allowed_locations: tuple[AllowedLocation, ...] = ()
    is_active: bool = True
