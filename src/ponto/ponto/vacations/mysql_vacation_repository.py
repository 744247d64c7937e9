from __future__ import annotations

from typing import Any, Sequence

from ..core.enums import VacationStatus, VacationType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import Vacation, VacationQuery
from .repository import VacationRepository


def _to_vacation(r: dict[str, Any]) -> Vacation:
    return Vacation(
        vacation_id=int(r["vacation_id"]),
        employee_id=int(r["employee_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        days=int(r["days"]),
        vacation_type=VacationType(r["type"]),
        status=VacationStatus(r["status"]),
        reason=r.get("reason"),
    )


class MySQLVacationRepository(VacationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, query: VacationQuery) -> Sequence[Vacation]:
        clauses = ["employee_id=%s"]
        params: list[object] = [int(query.employee_id)]
        if query.statuses:
            clauses.append(f"status IN ({in_clause(query.statuses)})")
            params.extend(s.value for s in query.statuses)
        if query.types:
            clauses.append(f"type IN ({in_clause(query.types)})")
            params.extend(t.value for t in query.types)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT vacation_id, employee_id, start_date, end_date, days, type, status, reason
                FROM vacations
                WHERE {' AND '.join(clauses)}
                ORDER BY start_date ASC, vacation_id ASC
                """,
                tuple(params),
            )
            return [_to_vacation(r) for r in fetchall(cur)]
