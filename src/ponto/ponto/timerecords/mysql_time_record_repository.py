from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Sequence

from mysql.connector import errors as mysql_errors

from ..core.enums import TimeRecordType
from ..core.exceptions import DuplicatePunch
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause, is_duplicate_key
from .model import NewTimeRecord, TimeRecord, TimeRecordPatch, TimeRecordQuery
from .repository import TimeRecordRepository

_COLUMNS = """
    record_id, employee_id, type, timestamp, is_valid, reason, observation,
    latitude, longitude, food_voucher_amount, transport_voucher_amount
"""


def _to_record(r: dict[str, Any]) -> TimeRecord:
    return TimeRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        record_type=TimeRecordType(r["type"]),
        timestamp=r["timestamp"],
        is_valid=bool(r.get("is_valid", 1)),
        reason=r.get("reason"),
        observation=r.get("observation"),
        latitude=float(r["latitude"]) if r.get("latitude") is not None else None,
        longitude=float(r["longitude"]) if r.get("longitude") is not None else None,
        food_voucher_amount=Decimal(str(r.get("food_voucher_amount") or 0)),
        transport_voucher_amount=Decimal(str(r.get("transport_voucher_amount") or 0)),
    )


def build_where(query: TimeRecordQuery) -> tuple[str, list[object]]:
    clauses = ["employee_id=%s"]
    params: list[object] = [int(query.employee_id)]

    if query.start is not None:
        clauses.append("work_date >= %s")
        params.append(query.start)
    if query.end is not None:
        clauses.append("work_date <= %s")
        params.append(query.end)
    if query.types:
        clauses.append(f"type IN ({in_clause(query.types)})")
        params.extend(t.value for t in query.types)
    if query.valid_only:
        clauses.append("is_valid=1")

    return " AND ".join(clauses), params


class MySQLTimeRecordRepository(TimeRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_time_records(self, query: TimeRecordQuery) -> Sequence[TimeRecord]:
        where, params = build_where(query)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_records
                WHERE {where}
                ORDER BY timestamp ASC, record_id ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: int) -> Optional[TimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_records WHERE record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_time_record(self, new: NewTimeRecord) -> TimeRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO time_records(
                        employee_id, type, timestamp, work_date, is_valid, reason, observation,
                        latitude, longitude, food_voucher_amount, transport_voucher_amount
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        int(new.employee_id),
                        new.record_type.value,
                        new.timestamp,
                        new.timestamp.date(),
                        1 if new.is_valid else 0,
                        new.reason,
                        new.observation,
                        new.latitude,
                        new.longitude,
                        new.food_voucher_amount,
                        new.transport_voucher_amount,
                    ),
                )
                record_id = int(cur.lastrowid)
        except mysql_errors.IntegrityError as exc:
            if is_duplicate_key(exc):
                raise DuplicatePunch(new.record_type) from exc
            raise

        return TimeRecord(
            record_id=record_id,
            employee_id=int(new.employee_id),
            record_type=new.record_type,
            timestamp=new.timestamp,
            is_valid=new.is_valid,
            reason=new.reason,
            observation=new.observation,
            latitude=new.latitude,
            longitude=new.longitude,
            food_voucher_amount=new.food_voucher_amount,
            transport_voucher_amount=new.transport_voucher_amount,
        )

    def update_time_record(self, record_id: int, patch: TimeRecordPatch) -> Optional[TimeRecord]:
        sets: list[str] = []
        params: list[object] = []
        if patch.record_type is not None:
            sets.append("type=%s")
            params.append(patch.record_type.value)
        if patch.timestamp is not None:
            sets.extend(["timestamp=%s", "work_date=%s"])
            params.extend([patch.timestamp, patch.timestamp.date()])
        if patch.reason is not None:
            sets.append("reason=%s")
            params.append(patch.reason)
        if patch.observation is not None:
            sets.append("observation=%s")
            params.append(patch.observation)
        if patch.is_valid is not None:
            sets.append("is_valid=%s")
            params.append(1 if patch.is_valid else 0)

        if sets:
            try:
                with db_cursor(self._conn_factory) as (_, cur):
                    cur.execute(
                        f"UPDATE time_records SET {', '.join(sets)} WHERE record_id=%s",
                        (*params, int(record_id)),
                    )
            except mysql_errors.IntegrityError as exc:
                if is_duplicate_key(exc) and patch.record_type is not None:
                    raise DuplicatePunch(patch.record_type) from exc
                raise

        return self.get_by_id(record_id)
