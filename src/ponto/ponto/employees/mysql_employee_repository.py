from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AllowedLocation, Employee
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, full_name, hire_date, cost_center,
    daily_food_voucher, daily_transport_voucher,
    work_schedule, allowed_locations, is_active
"""


def _parse_locations(raw: Any) -> tuple[AllowedLocation, ...]:
    if not raw:
        return ()
    if isinstance(raw, (bytes, str)):
        try:
            raw = json.loads(raw)
        except ValueError:
            return ()
    if not isinstance(raw, list):
        return ()
    return tuple(
        AllowedLocation(
            name=str(item.get("name") or ""),
            latitude=float(item["latitude"]),
            longitude=float(item["longitude"]),
            radius_meters=float(item.get("radius") or 100),
        )
        for item in raw
        if isinstance(item, dict) and "latitude" in item and "longitude" in item
    )


def _to_employee(r: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        full_name=r["full_name"],
        hire_date=r["hire_date"],
        cost_center=r.get("cost_center"),
        daily_food_voucher=Decimal(str(r.get("daily_food_voucher") or 0)),
        daily_transport_voucher=Decimal(str(r.get("daily_transport_voucher") or 0)),
        work_schedule=r.get("work_schedule") or "STANDARD_44H",
        allowed_locations=_parse_locations(r.get("allowed_locations")),
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE is_active=1 ORDER BY employee_id ASC")
            return [_to_employee(r) for r in fetchall(cur)]
