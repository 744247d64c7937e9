from __future__ import annotations

from datetime import time, timedelta
from typing import Any, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import CompanySettings
from .repository import SettingsRepository


def to_time(value: Any) -> Optional[time]:
    """TIME column as datetime.time.

    Depending on the connector build the column arrives as time, timedelta
    (offset from midnight) or an 'HH:MM[:SS]' string.
    """
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        minutes, seconds = divmod(int(value.total_seconds()) % 86400, 60)
        return time(*divmod(minutes, 60), seconds)
    if isinstance(value, str):
        parts = [int(p) for p in value.strip().split(":") if p]
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        return time(*parts[:3])
    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_settings(self) -> CompanySettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_start_time, work_end_time, tolerance_minutes,
                       vacation_days_per_year, max_overtime_hours
                FROM company_settings
                ORDER BY settings_id ASC
                LIMIT 1
                """
            )
            r = fetchone(cur)
            defaults = CompanySettings()
            if not r:
                return defaults

            return CompanySettings(
                work_start_time=to_time(r.get("work_start_time")) or defaults.work_start_time,
                work_end_time=to_time(r.get("work_end_time")) or defaults.work_end_time,
                tolerance_minutes=int(_or_default(r.get("tolerance_minutes"), defaults.tolerance_minutes)),
                vacation_days_per_year=int(_or_default(r.get("vacation_days_per_year"), defaults.vacation_days_per_year)),
                max_overtime_hours=float(_or_default(r.get("max_overtime_hours"), defaults.max_overtime_hours)),
            )
